"""
Defines the result container that every chain step produces and consumes.

A `Result` is a sum type: either a success (`Ok`) carrying a payload, or a
failure (`Err`) carrying a human-readable message. Both variants are frozen,
so once a result is built its discriminant and contents never change; the
chain operator hands results from one step to the next and always produces
new ones instead of editing old ones.

Step implementations build results through the `ok` and `err` factories
rather than instantiating the variants themselves:

    def parse_port(raw: str) -> Result[int]:
        if not raw.isdigit():
            return err(f"not a port: {raw!r}")
        return ok(int(raw))

Reading the payload of a failure (or the message of a success) is a
programming error and raises `InvalidStateAccess`. Prefer `is_success()` or a
`match` statement before reaching for the accessors.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Literal, Never, TypeVar

from typing_extensions import TypeIs

from .app import config
from .errors import ChainFailed, InvalidStateAccess

# T represents the type of the success payload.
T = TypeVar("T")


def _normalize_message(message: object) -> str:
    text = message if isinstance(message, str) else str(message)
    return text if text.strip() else config.PLACEHOLDER_ERROR_MESSAGE


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Represents a successful outcome containing a payload."""

    payload: T

    @staticmethod
    def is_success() -> Literal[True]:
        return True

    @staticmethod
    def is_failure() -> Literal[False]:
        return False

    def value(self) -> T:
        return self.payload

    def error(self) -> Never:
        raise InvalidStateAccess("error() called on a successful result")

    def value_or(self, default: object) -> T:
        return self.payload

    def raise_for_status(self) -> None:
        """Does nothing for a successful result."""
        pass


@dataclass(frozen=True, slots=True)
class Err:
    """Represents a failure outcome containing an error message."""

    message: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "message", _normalize_message(self.message))

    @staticmethod
    def is_success() -> Literal[False]:
        return False

    @staticmethod
    def is_failure() -> Literal[True]:
        return True

    def value(self) -> Never:
        raise InvalidStateAccess(f"value() called on a failed result: {self.message}")

    def error(self) -> str:
        return self.message

    def value_or[D](self, default: D) -> D:
        return default

    def raise_for_status(self) -> Never:
        """Raises ChainFailed carrying the failure message."""
        raise ChainFailed(self.message)


# The Result type is a union of Ok and Err, representing either success or failure.
type Result[T] = Ok[T] | Err


def ok[V](value: V) -> Ok[V]:
    """Wrap ``value`` in a successful result."""
    return Ok(value)


def err(message: object) -> Err:
    """
    Wrap ``message`` in a failed result.

    Non-string messages are converted with ``str``. Empty or blank messages are
    replaced by a placeholder so that building a failure can never itself fail.
    """
    return Err(_normalize_message(message))


def is_result(candidate: Any) -> TypeIs[Ok[Any] | Err]:
    return isinstance(candidate, (Ok, Err))


def is_ok[V](result: Ok[V] | Err) -> TypeIs[Ok[V]]:
    return result.is_success()


def is_err(result: Ok[Any] | Err) -> TypeIs[Err]:
    return result.is_failure()


__all__ = ["Err", "Ok", "Result", "err", "is_err", "is_ok", "is_result", "ok"]
