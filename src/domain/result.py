"""
Result type - Success or Failure, never both.

Registration outcomes are returned as values instead of being raised.
Consumers are expected to branch with structural pattern matching:

    match service.register(...):
        case Success(customer):
            ...
        case Failure(errors):
            ...

Reading the wrong side of a result is a programming error and raises
IllegalResultAccess.
"""

from collections.abc import Sized
from dataclasses import dataclass
from typing import Generic, TypeVar

from .exceptions import IllegalResultAccess, InvariantViolation

T = TypeVar("T")
E = TypeVar("E", bound=Sized)


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful outcome carrying a value."""

    value: T

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    @property
    def errors(self):
        raise IllegalResultAccess("Illegal error access on successful result")


@dataclass(frozen=True)
class Failure(Generic[E]):
    """Failed outcome carrying a non-empty sequence of errors."""

    errors: E

    def __post_init__(self) -> None:
        if len(self.errors) == 0:
            raise InvariantViolation("Failure requires at least one error")

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    @property
    def value(self):
        raise IllegalResultAccess("Illegal value access on failed result")


Result = Success[T] | Failure[E]
