"""
Bridges between railchain results and ``returns.result`` containers.

Code that already speaks ``returns`` can feed its functions into a chain with
`step_from_returns`, and chain outcomes can be handed back with `to_returns`.
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any

from returns.result import Failure, Result as ReturnsResult, Success

from .functional_types import Result, err, ok
from .registry import Step


def to_returns[T](result: Result[T]) -> ReturnsResult[T, str]:
    """Convert a railchain result into a ``returns`` ``Success``/``Failure``."""
    if result.is_success():
        return Success(result.value())
    return Failure(result.error())


def from_returns[T](container: ReturnsResult[T, Any]) -> Result[T]:
    """Convert a ``returns`` container into a railchain result.

    Failure values are stringified, since a railchain failure carries only a message.
    """
    match container:
        case Success(value):
            return ok(value)
        case Failure(error):
            return err(error)
    raise TypeError(f"Expected a returns Result, got {type(container).__name__}")


def step_from_returns(func: Callable[[Any], ReturnsResult[Any, Any]]) -> Step:
    """Adapt a function returning a ``returns`` container into a chain step."""

    @functools.wraps(func)
    def step(value: Any) -> Result[Any]:
        return from_returns(func(value))

    return step


__all__ = ["from_returns", "step_from_returns", "to_returns"]
