"""
The set operators.

Each operator checks its arguments when it's called and returns a `Query`.
Membership is decided with an `EquivalenceSet` built during the iteration,
so deduplication always keeps the first occurrence of a class.
"""

from __future__ import annotations

from functools import partial
from itertools import chain
from typing import (
    Any,
    Callable,
    Iterable,
    Iterator,
    Optional,
    TypeVar,
)

from .equality import Equality, EquivalenceSet, resolve
from .exceptions import QueryInvalidArgument
from .structures import Query, check_source, produce

_T = TypeVar("_T")
_K = TypeVar("_K")

__all__ = (
    'union',
    'intersect',
    'except_',
    'concat',
    'distinct',
    'union_by',
    'intersect_by',
    'except_by',
    'distinct_by',
)

def _identity(elem: Any) -> Any:
    return elem

def _check_key(key: object) -> None:
    if not callable(key):
        raise QueryInvalidArgument('key',
            f"expected a callable, got: {type(key).__name__}")

# iteration

def _iter_distinct(source: Iterable[_T], *, equality: Equality[Any],
                   key: Callable[[_T], Any]) -> Iterator[_T]:
    seen: EquivalenceSet[Any] = EquivalenceSet(equality)
    for elem in source:
        if seen.add(key(elem)):
            yield elem

def _iter_union(first: Iterable[_T], second: Iterable[_T], *,
                equality: Equality[Any], key: Callable[[_T], Any]) -> Iterator[_T]:
    yield from _iter_distinct(chain(first, second), equality=equality, key=key)

def _iter_intersect(first: Iterable[_T], second: Iterable[Any], *,
                    equality: Equality[Any], key: Callable[[_T], Any]) -> Iterator[_T]:
    # the second sequence is read entirely before the first yields anything
    remaining: EquivalenceSet[Any] = EquivalenceSet(equality, second)
    for elem in first:
        if remaining.remove(key(elem)):
            yield elem

def _iter_except(first: Iterable[_T], second: Iterable[Any], *,
                 equality: Equality[Any], key: Callable[[_T], Any]) -> Iterator[_T]:
    excluded: EquivalenceSet[Any] = EquivalenceSet(equality, second)
    for elem in first:
        if excluded.add(key(elem)):
            yield elem

def _iter_concat(first: Iterable[_T], second: Iterable[_T]) -> Iterator[_T]:
    yield from first
    yield from second

# public API

def union(first: Iterable[_T], second: Iterable[_T],
          equality: Optional[Equality[_T]] = None) -> Query[_T]:
    """
    Elements of both sequences, one per equivalence class: the distinct
    elements of the first, then the ones of the second not yielded yet.

    >>> union(['Carrots', 'Tofu'], ['Tofu', 'Pizza']).to_list()
    ['Carrots', 'Tofu', 'Pizza']
    """
    check_source(first, 'first')
    check_source(second, 'second')
    return produce(partial(_iter_union, equality=resolve(equality), key=_identity),
                   first, second, name='union')

def intersect(first: Iterable[_T], second: Iterable[_T],
              equality: Optional[Equality[_T]] = None) -> Query[_T]:
    """
    Elements of the first sequence having an equivalent in the second,
    in the first's order, one per equivalence class.
    """
    check_source(first, 'first')
    check_source(second, 'second')
    return produce(partial(_iter_intersect, equality=resolve(equality), key=_identity),
                   first, second, name='intersect')

def except_(first: Iterable[_T], second: Iterable[_T],
            equality: Optional[Equality[_T]] = None) -> Query[_T]:
    """
    Elements of the first sequence without an equivalent in the second,
    in the first's order, one per equivalence class.
    """
    check_source(first, 'first')
    check_source(second, 'second')
    return produce(partial(_iter_except, equality=resolve(equality), key=_identity),
                   first, second, name='except')

def concat(first: Iterable[_T], second: Iterable[_T]) -> Query[_T]:
    """
    All elements of the first sequence, then all of the second. Nothing is removed.
    """
    check_source(first, 'first')
    check_source(second, 'second')
    return produce(_iter_concat, first, second, name='concat')

def distinct(source: Iterable[_T],
             equality: Optional[Equality[_T]] = None) -> Query[_T]:
    """
    The first occurrence of each equivalence class, in order.
    """
    check_source(source, 'source')
    return produce(partial(_iter_distinct, equality=resolve(equality), key=_identity),
                   source, name='distinct')

def union_by(first: Iterable[_T], second: Iterable[_T], key: Callable[[_T], _K],
             equality: Optional[Equality[_K]] = None) -> Query[_T]:
    """
    Like `union`, comparing ``key(element)`` instead of the elements.
    """
    check_source(first, 'first')
    check_source(second, 'second')
    _check_key(key)
    return produce(partial(_iter_union, equality=resolve(equality), key=key),
                   first, second, name='union_by')

def intersect_by(first: Iterable[_T], keys: Iterable[_K], key: Callable[[_T], _K],
                 equality: Optional[Equality[_K]] = None) -> Query[_T]:
    """
    Elements of the first sequence whose ``key(element)`` is in ``keys``.

    >>> intersect_by([('Tofu', 1), ('Pizza', 2)], ['Pizza'], lambda f: f[0]).to_list()
    [('Pizza', 2)]
    """
    check_source(first, 'first')
    check_source(keys, 'keys')
    _check_key(key)
    return produce(partial(_iter_intersect, equality=resolve(equality), key=key),
                   first, keys, name='intersect_by')

def except_by(first: Iterable[_T], keys: Iterable[_K], key: Callable[[_T], _K],
              equality: Optional[Equality[_K]] = None) -> Query[_T]:
    """
    Elements of the first sequence whose ``key(element)`` is not in ``keys``.
    """
    check_source(first, 'first')
    check_source(keys, 'keys')
    _check_key(key)
    return produce(partial(_iter_except, equality=resolve(equality), key=key),
                   first, keys, name='except_by')

def distinct_by(source: Iterable[_T], key: Callable[[_T], _K],
                equality: Optional[Equality[_K]] = None) -> Query[_T]:
    """
    The first element of each class of ``key(element)``, in order.
    """
    check_source(source, 'source')
    _check_key(key)
    return produce(partial(_iter_distinct, equality=resolve(equality), key=key),
                   source, name='distinct_by')
