"""
Equality notions and the membership structure built on them.
"""

from __future__ import annotations

import operator
from typing import (
    Any,
    Callable,
    Dict,
    Generic,
    Iterable,
    List,
    Optional,
    TypeVar,
)

import attr as attrs

from .exceptions import QueryInvalidArgument

_T = TypeVar("_T")
_K = TypeVar("_K")

def _check_callable(inst: object, attribute: attrs.Attribute, value: object) -> None:
    if not callable(value):
        raise QueryInvalidArgument(attribute.name,
            f"expected a callable, got: {type(value).__name__}")

@attrs.s(auto_attribs=True, frozen=True)
class Equality(Generic[_T]):
    """
    An equivalence predicate paired with a hash function consistent with it.

    The two functions always go together: if ``equals(a, b)`` is true,
    ``hash(a) == hash(b)`` must hold as well. A notion whose functions disagree
    is a caller error that is not detected.

    >>> Equality.by_key(len).equals('abc', 'xyz')
    True
    """

    equals: Callable[[_T, _T], bool] = attrs.ib(validator=_check_callable)
    hash: Callable[[_T], int] = attrs.ib(validator=_check_callable)

    @classmethod
    def by_key(cls, key: Callable[[_T], _K],
               equality: 'Equality[_K] | None' = None) -> 'Equality[_T]':
        """
        Derive a notion that compares elements by ``key(element)``.

        :param key: Function extracting the compared part of an element.
        :param equality: How keys are compared, defaults to `DEFAULT_EQUALITY`.
        """
        if not callable(key):
            raise QueryInvalidArgument('key',
                f"expected a callable, got: {type(key).__name__}")
        keyeq: Equality[Any] = resolve(equality)
        return cls(lambda a, b: keyeq.equals(key(a), key(b)),
                   lambda a: keyeq.hash(key(a)))

DEFAULT_EQUALITY: Equality[Any] = Equality(operator.eq, hash)
"""
The intrinsic ``==`` and ``hash()`` of the elements.
"""

def resolve(equality: 'Equality[_T] | None', argument: str = 'equality') -> Equality[_T]:
    """
    Return the given notion, or the default one if it's None.
    """
    if equality is None:
        return DEFAULT_EQUALITY
    if not isinstance(equality, Equality):
        raise QueryInvalidArgument(argument,
            f"expected an Equality, got: {type(equality).__name__}")
    return equality

CASEFOLD: Equality[str] = Equality.by_key(str.casefold)
"""
Case-insensitive string comparison.
"""

class EquivalenceSet(Generic[_T]):
    """
    A set of representatives, one per equivalence class.

    Elements are bucketed by hash, then compared with the full predicate,
    so colliding hashes only cost time.

    >>> s = EquivalenceSet(CASEFOLD)
    >>> s.add('Tofu'), s.add('TOFU'), 'tofu' in s
    (True, False, True)
    """

    def __init__(self, equality: Equality[_T], iterable: Iterable[_T] = ()) -> None:
        self._equality = equality
        self._buckets: Dict[int, List[_T]] = {}
        self._len = 0
        for e in iterable:
            self.add(e)

    def _find(self, bucket: List[_T], elem: _T) -> Optional[int]:
        equals = self._equality.equals
        for i, other in enumerate(bucket):
            if equals(other, elem):
                return i
        return None

    def add(self, elem: _T) -> bool:
        """
        Add the element if its class is not represented yet.

        :returns: True if the element was added.
        """
        bucket = self._buckets.setdefault(self._equality.hash(elem), [])
        if self._find(bucket, elem) is not None:
            return False
        bucket.append(elem)
        self._len += 1
        return True

    def remove(self, elem: _T) -> bool:
        """
        Remove the representative of the element's class.

        :returns: True if there was one.
        """
        h = self._equality.hash(elem)
        bucket = self._buckets.get(h)
        if not bucket:
            return False
        i = self._find(bucket, elem)
        if i is None:
            return False
        del bucket[i]
        if not bucket:
            del self._buckets[h]
        self._len -= 1
        return True

    def __contains__(self, elem: object) -> bool:
        bucket = self._buckets.get(self._equality.hash(elem)) # type:ignore[arg-type]
        return bool(bucket) and self._find(bucket, elem) is not None # type:ignore

    def __len__(self) -> int:
        return self._len
