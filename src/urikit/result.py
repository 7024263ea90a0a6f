"""urikit.result
Tagged results returned by the parser and the query helpers.
Failures are carried as values; nothing in urikit raises them on its own.
"""

import dataclasses

from typing import Generic, NoReturn, Self, TypeVar

T = TypeVar("T")
E = TypeVar("E", bound=BaseException)


class URIError(ValueError):
    """Base class for every error urikit can report."""


class BadPortError(URIError):
    def __init__(self: Self, offset: int) -> None:
        super().__init__(f"Invalid URI: bad port at character {offset}")
        self.offset: int = offset


class MalformedQueryError(URIError):
    def __init__(self: Self, parameter: str) -> None:
        super().__init__(f"Query parameter {parameter} malformed.")
        self.parameter: str = parameter


@dataclasses.dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_ok(self: Self) -> bool:
        return True

    @property
    def is_err(self: Self) -> bool:
        return False

    def unwrap(self: Self) -> T:
        return self.value

    def unwrap_or(self: Self, default: T) -> T:
        return self.value


@dataclasses.dataclass(frozen=True)
class Err(Generic[E]):
    error: E

    @property
    def is_ok(self: Self) -> bool:
        return False

    @property
    def is_err(self: Self) -> bool:
        return True

    def unwrap(self: Self) -> NoReturn:
        """Raise the carried error."""
        raise self.error

    def unwrap_or(self: Self, default: T) -> T:
        return default


Result = Ok[T] | Err[E]
