"""
Lazy set operations over ordered iterables, with pluggable equality.

Goals and non-goals
===================

Setquery provides the set-like operators of query libraries: `union`, `intersect`, `except_`,
`concat` and `distinct`, plus key-selector variants. It's a small, pure python, in-memory library:
no persistence, no concurrency and no attempt at being fast beyond using hashes for membership.

Deferred execution
==================

Calling an operator only checks its arguments and returns a `Query`. Nothing is read
from the sources until the query is iterated, and each iteration runs the operator again,
so changes made to the sources in between are visible:

>>> tofu = ['Carrots', 'Tofu', 'Lettuce', 'Cucumbers']
>>> junk = ['Cucumbers', 'Cheeseburgers', 'Tofu', 'Pizza', 'Bacon']
>>> q = union(tofu, junk)
>>> q.to_list()
['Carrots', 'Tofu', 'Lettuce', 'Cucumbers', 'Cheeseburgers', 'Pizza', 'Bacon']
>>> junk.append('Pasta')
>>> q.to_list()[-1]
'Pasta'
>>> intersect(tofu, junk).to_list()
['Tofu', 'Cucumbers']
>>> except_(tofu, junk).to_list()
['Carrots', 'Lettuce']

Operators can be chained from `query`:

>>> query(tofu).except_(junk).union(['Kale']).to_list()
['Carrots', 'Lettuce', 'Kale']

Custom equality
===============

Elements are compared with their own ``==`` and ``hash()`` by default. Pass an `Equality`
to change that; it always carries both functions, and they must agree:
equal elements must have the same hash.

>>> from typing import NamedTuple
>>> class Food(NamedTuple):
...     name: str
...     calories: int
>>> by_name = Equality.by_key(lambda f: f.name, CASEFOLD)
>>> foods = [Food('Carrot', 100), Food('Celery', -10), Food('Cucumber', 201),
...          Food('cucumber', 202), Food('CUCUMBER', 203)]
>>> distinct(foods, by_name).to_list() # doctest: +NORMALIZE_WHITESPACE
[Food(name='Carrot', calories=100), Food(name='Celery', calories=-10),
 Food(name='Cucumber', calories=201)]

Errors
======

A missing source fails when the operator is called, with a `QueryInvalidArgument`.
Errors raised by a source while the query runs propagate unchanged.
"""

from ._lib.equality import Equality, EquivalenceSet, DEFAULT_EQUALITY, CASEFOLD
from ._lib.structures import Query, LazySeq, produce, query
from ._lib.operators import (union, intersect, except_, concat, distinct,
                             union_by, intersect_by, except_by, distinct_by)
from ._lib.report import Options, Reporter
from ._lib.exceptions import QueryException, QueryInvalidArgument

__all__ = (
    "Equality",
    "EquivalenceSet",
    "DEFAULT_EQUALITY",
    "CASEFOLD",

    "Query",
    "LazySeq",
    "produce",
    "query",

    "union",
    "intersect",
    "except_",
    "concat",
    "distinct",
    "union_by",
    "intersect_by",
    "except_by",
    "distinct_by",

    "Options",
    "Reporter",

    "QueryException",
    "QueryInvalidArgument",
)
