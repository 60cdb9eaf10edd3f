from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING, Any, Callable, Generic, Optional, TypeVar

from attrs import frozen

if TYPE_CHECKING:
    from .stringview import StringView

T = TypeVar("T")

Predicate = Callable[[str], bool]
Chopper = Callable[["StringView"], Any]


@frozen
class Result(Generic[T]):
    """Outcome of an operation that can fail without it being exceptional.

    Truthy on success. `data` is None on failure."""
    success: bool
    data: Optional[T] = None

    @classmethod
    def ok(cls, data: T) -> Result[T]:
        return cls(True, data)

    @classmethod
    def fail(cls) -> Result[T]:
        return cls(False)

    def __bool__(self) -> bool:
        return self.success

    def unwrap_or(self, default: T) -> T:
        return self.data if self.success else default


class NumberState(IntEnum):
    START = 0
    SIGN = 1
    INTEGER = 2
    FRACTION = 3

    def __str__(self) -> str:
        return self.name.lower()
