"""
Options and message reporting.
"""
from __future__ import annotations

import sys
import time
from typing import Any, List, Optional, TextIO, TypeVar

import attr as attrs

from .structures import Query

_T = TypeVar("_T")

@attrs.s(auto_attribs=True, frozen=True, kw_only=True)
class Options:
    outstream: TextIO = sys.stdout
    verbosity: int = 0

class Reporter:
    """
    Prints messages to the configured stream, filtered by verbosity.
    """

    def __init__(self, **kw: Any) -> None:
        """
        :param kw: All parameters are passed to `Options` constructor.
        """
        self.options = Options(**kw)

    def msg(self, msg: str, ctx: Optional[Query[Any]] = None, thresh: int = 0) -> None:
        """
        Log a message, optionally about a query.
        """
        if self.options.verbosity < thresh:
            return
        context = f"{ctx.describe()}: " if ctx is not None else ""
        print(f"{context}{msg}", file=self.options.outstream)

    def timed(self, query: Query[_T]) -> List[_T]:
        """
        Run the query to completion and report how long it took.
        """
        self.msg("running", ctx=query, thresh=2)
        t0 = time.time()
        result = query.to_list()
        t1 = time.time()
        self.msg(f"{len(result)} elements in {t1-t0} seconds", ctx=query, thresh=1)
        return result
