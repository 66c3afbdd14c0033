"""
Deferred queries and the sequence view used to snapshot them.
"""

from __future__ import annotations

from collections.abc import Iterable as _IterableABC
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Iterable,
    Iterator,
    List,
    Sequence,
    Tuple,
    TypeVar,
    overload,
)

from .exceptions import QueryInvalidArgument

if TYPE_CHECKING:
    from .equality import Equality

_T = TypeVar("_T")
_K = TypeVar("_K")

class LazySeq(Sequence[_T]):
    """
    A lazy sequence makes an iterator look like an immutable sequence.

    Items are pulled from the iterator only as far as an access requires,
    and kept for later accesses.
    """
    def __init__(self, iterable: Iterable[_T]) -> None:
        self._iterator = iter(iterable)
        self._values: List[_T] = []

    def _curr(self) -> int:
        return len(self._values) - 1

    def _pull(self) -> bool:
        for val in self._iterator:
            self._values.append(val)
            return True
        return False

    def _pull_until(self, index: int) -> None:
        if index < 0:
            self._pull_all()
            return
        while self._curr() < index and self._pull():
            pass

    def _pull_all(self) -> None:
        self._values.extend(self._iterator)

    @overload
    def __getitem__(self, key: int) -> _T:
        ...
    @overload
    def __getitem__(self, key: slice) -> List[_T]:
        ...
    def __getitem__(self, key: int | slice) -> _T | List[_T]:
        if isinstance(key, int):
            self._pull_until(key)
        else:
            self._pull_all()
        return self._values[key]

    def __iter__(self) -> Iterator[_T]:
        i = 0
        while i < len(self._values) or self._pull():
            yield self._values[i]
            i += 1

    def __len__(self) -> int:
        self._pull_all()
        return len(self._values)

    def __bool__(self) -> bool:
        return self._curr() > -1 or self._pull()

def check_source(value: object, argument: str) -> None:
    """
    Fail fast if the value can't be used as a source sequence.
    """
    if value is None:
        raise QueryInvalidArgument(argument, "source sequence is None")
    # iter() also accepts the old __getitem__ protocol
    if not isinstance(value, _IterableABC) and not hasattr(type(value), '__getitem__'):
        raise QueryInvalidArgument(argument,
            f"expected an iterable, got: {type(value).__name__}")

def _describe(source: object) -> str:
    if isinstance(source, Query):
        return source.describe()
    return type(source).__name__

class Query(Iterable[_T]):
    """
    A not yet executed combination of an operator and its source sequences.

    Creating a query does no work. Each iteration calls the operator
    again with the sources, so it sees their contents at that time, and
    each iteration has its own state: abandoning one early, or having it
    fail because a source raised, leaves the query usable.

    A source that can only be iterated once (e.g. a generator) is exhausted
    by the first iteration of the query; later ones see it empty.

    >>> q = query([3, 1, 3, 2]).distinct()
    >>> q
    <Query distinct(query(list))>
    >>> list(q)
    [3, 1, 2]
    """

    def __init__(self, operator: Callable[..., Iterable[_T]],
                 sources: Tuple[Iterable[Any], ...], name: str) -> None:
        self._operator = operator
        self._sources = sources
        self._name = name

    @property
    def sources(self) -> Tuple[Iterable[Any], ...]:
        return self._sources

    def __iter__(self) -> Iterator[_T]:
        return iter(self._operator(*self._sources))

    def describe(self) -> str:
        """
        Return the query plan as a string, e.g. ``union(list, distinct(list))``.
        """
        return f"{self._name}({', '.join(_describe(s) for s in self._sources)})"

    def __repr__(self) -> str:
        return f'<Query {self.describe()}>'

    # chaining

    def union(self, other: Iterable[_T],
              equality: 'Equality[_T] | None' = None) -> 'Query[_T]':
        from .operators import union
        return union(self, other, equality)

    def intersect(self, other: Iterable[_T],
                  equality: 'Equality[_T] | None' = None) -> 'Query[_T]':
        from .operators import intersect
        return intersect(self, other, equality)

    def except_(self, other: Iterable[_T],
                equality: 'Equality[_T] | None' = None) -> 'Query[_T]':
        from .operators import except_
        return except_(self, other, equality)

    def concat(self, other: Iterable[_T]) -> 'Query[_T]':
        from .operators import concat
        return concat(self, other)

    def distinct(self, equality: 'Equality[_T] | None' = None) -> 'Query[_T]':
        from .operators import distinct
        return distinct(self, equality)

    def distinct_by(self, key: Callable[[_T], _K],
                    equality: 'Equality[_K] | None' = None) -> 'Query[_T]':
        from .operators import distinct_by
        return distinct_by(self, key, equality)

    def union_by(self, other: Iterable[_T], key: Callable[[_T], _K],
                 equality: 'Equality[_K] | None' = None) -> 'Query[_T]':
        from .operators import union_by
        return union_by(self, other, key, equality)

    def intersect_by(self, keys: Iterable[_K], key: Callable[[_T], _K],
                     equality: 'Equality[_K] | None' = None) -> 'Query[_T]':
        from .operators import intersect_by
        return intersect_by(self, keys, key, equality)

    def except_by(self, keys: Iterable[_K], key: Callable[[_T], _K],
                  equality: 'Equality[_K] | None' = None) -> 'Query[_T]':
        from .operators import except_by
        return except_by(self, keys, key, equality)

    # evaluation

    def to_list(self) -> List[_T]:
        """
        Run the query to completion.
        """
        return list(self)

    def cached(self) -> LazySeq[_T]:
        """
        Start one iteration and memoize the elements it produces, lazily.
        """
        return LazySeq(self)

def _identity(source: Iterable[_T]) -> Iterator[_T]:
    yield from source

def produce(operator: Callable[..., Iterable[_T]], *sources: Iterable[Any],
            name: str | None = None) -> Query[_T]:
    """
    Wrap an operator and its sources as a `Query`, without consuming anything.

    :param operator: Called with the sources at each iteration, returns
        the iterable of results.
    :param name: Name used by `Query.describe`, defaults to the operator's name.
    """
    if not callable(operator):
        raise QueryInvalidArgument('operator',
            f"expected a callable, got: {type(operator).__name__}")
    for i, source in enumerate(sources):
        check_source(source, f'sources[{i}]')
    return Query(operator, sources,
                 name or getattr(operator, '__name__', 'query'))

def query(source: Iterable[_T]) -> Query[_T]:
    """
    Wrap a source sequence so operators can be chained on it.

    >>> query(['a', 'b']).concat(['a']).to_list()
    ['a', 'b', 'a']
    """
    check_source(source, 'source')
    return produce(_identity, source, name='query')
