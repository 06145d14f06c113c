"""Result type for explicit error handling in infrastructure reads.

Operations whose failure is an expected outcome (a malformed manifest, an
unreadable file) return ``Ok`` or ``Err`` instead of raising, so callers
decide the policy for each failure.

Example usage:
    >>> def parse_port(text: str) -> Result[int, str]:
    ...     if not text.isdigit():
    ...         return Err(f"Not a port: {text}")
    ...     return Ok(int(text))
    ...
    >>> result = parse_port("8080")
    >>> if is_ok(result):
    ...     print(f"Port: {result.value}")
    Port: 8080
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Represents a successful result containing a value.

    Attributes:
        value: The success value of type T.
    """

    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Represents a failed result containing an error.

    Attributes:
        error: The error value of type E.
    """

    error: E


# Using Union here as TypeVar aliases don't work with | syntax at runtime
Result = Union[Ok[T], Err[E]]  # noqa: UP007


def is_ok(result: Ok[T] | Err[E]) -> bool:
    """Check if a result is successful."""
    return isinstance(result, Ok)


def is_err(result: Ok[T] | Err[E]) -> bool:
    """Check if a result is an error."""
    return isinstance(result, Err)
