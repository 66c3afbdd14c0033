"""Unit tests for LazySeq.

MIT License
===========

Copyright © 2021 Claudio Jolowicz

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

**The software is provided "as is", without warranty of any kind, express or
implied, including but not limited to the warranties of merchantability,
fitness for a particular purpose and noninfringement. In no event shall the
authors or copyright holders be liable for any claim, damages or other
liability, whether in an action of contract, tort or otherwise, arising from,
out of or in connection with the software or the use or other dealings in the
software.**


"""


import pytest

from setquery import LazySeq, query, union

def test_len() -> None:
    s: LazySeq[int] = LazySeq([])
    assert 0 == len(s)

def test_getitem_pulls_only_what_is_needed() -> None:
    pulled = []
    def gen():
        for i in range(15):
            pulled.append(i)
            yield i
    s = LazySeq(gen())
    assert s._curr() == -1
    assert 0 == s[0]
    assert pulled == [0]
    for i, v in zip(range(3), s):
        assert s[i] == v
    assert s._curr() == 2
    assert 4 == s[4]
    assert s._curr() == 4
    assert len(s) == 15
    assert list(s) == list(range(15))

def test_getitem_negative() -> None:
    s = LazySeq([1, 2])
    assert 2 == s[-1]

def test_getslice() -> None:
    s = LazySeq([1, 2, 3])
    assert s[1:] == [2, 3]
    assert s[::-1] == [3, 2, 1]
    assert s[:-1] == [1, 2]

def test_outofrange() -> None:
    s: LazySeq[int] = LazySeq([])
    with pytest.raises(IndexError):
        s[0]
    s = LazySeq([1, 2])
    with pytest.raises(IndexError):
        s[-3]

def test_bool() -> None:
    assert not LazySeq([])
    assert LazySeq([1])

def test_iter_twice_reuses_values() -> None:
    s = LazySeq(iter([1, 2, 3]))
    assert list(s) == [1, 2, 3]
    assert list(s) == [1, 2, 3]

def test_cached_query_runs_once() -> None:
    calls = []
    class Source:
        def __iter__(self):
            calls.append(1)
            yield from ['a', 'b', 'a']
    
    snapshot = query(Source()).distinct().cached()
    assert calls == []
    assert snapshot[0] == 'a'
    assert len(snapshot) == 2
    assert list(snapshot) == ['a', 'b']
    assert calls == [1]

def test_cached_is_a_snapshot() -> None:
    first = ['a']
    snapshot = union(first, ['b']).cached()
    assert len(snapshot) == 2
    first.append('c')
    assert list(snapshot) == ['a', 'b']
