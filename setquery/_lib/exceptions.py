from __future__ import annotations

import abc
import attr as attrs
from typing import Optional

@attrs.s(auto_attribs=True)
class QueryException(Exception, abc.ABC):
    """
    Base exception for the library.
    """

    argument: str
    desrc: Optional[str] = None

    @abc.abstractmethod
    def msg(self) -> str:
        ...

    def __str__(self) -> str:
        return self.msg()

@attrs.s(auto_attribs=True)
class QueryInvalidArgument(QueryException, ValueError):
    """
    A required argument is missing or has the wrong kind.
    Raised when the operator is called, never during iteration.
    """

    def msg(self) -> str:
        if self.desrc:
            return f"Invalid argument {self.argument!r}: {self.desrc}"
        return f"Invalid argument {self.argument!r}"
