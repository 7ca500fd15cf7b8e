"""Explicit per-unit fetch outcomes."""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    TRANSPORT = "transport"
    PARSE = "parse"
    ADAPTER = "adapter"


@dataclass(frozen=True)
class FetchError:
    """Why one unit of work (page, tag, feed, artist) produced nothing."""

    source: str
    unit: str
    kind: ErrorKind
    message: str

    def __str__(self) -> str:
        return f"{self.source} [{self.unit}] {self.kind.value}: {self.message}"


@dataclass(frozen=True)
class FetchResult(Generic[T]):
    """Either a value or a FetchError for one unit of work."""

    unit: str
    value: Optional[T] = None
    error: Optional[FetchError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, unit: str, value: T) -> "FetchResult[T]":
        return cls(unit=unit, value=value)

    @classmethod
    def failure(cls, error: FetchError) -> "FetchResult[T]":
        return cls(unit=error.unit, error=error)
