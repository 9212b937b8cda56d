"""
The chain operator: advance a computation by one step, short-circuiting on failure.

`bind` is the only place where steps run. It guarantees that:

- a failed result is returned as-is and the next step is never resolved or invoked;
- a successful result's payload is passed to the step as its sole argument, and
  the step's own result is returned untouched;
- every other outcome (an unknown step name, a step that raises, a step that
  returns something other than a result) is turned into an `Err`, so nothing
  escapes `bind` except `BaseException`s such as `KeyboardInterrupt`.

Steps may be given as callables or, for configuration-driven chains, as names
looked up in a `StepRegistry`.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from typing import Any

from returns.result import Failure, Result as ReturnsResult, Success, safe

from .errors import not_a_result_message, step_fault_message, step_not_found_message
from .functional_types import Err, Ok, Result, err, is_result, ok
from .registry import Step, StepRegistry, default_registry

logger = logging.getLogger(__name__)

type StepRef = Step | str

# Binding a result to `identity` returns an equal result.
identity: Step = ok


def describe_step(step: object, registry: StepRegistry | None = None) -> str:
    """Return the label used for ``step`` in failure messages and logs.

    Names are returned as-is. A callable registered in ``registry`` is labelled
    with its registered name; otherwise its qualified name or ``repr`` is used.
    """
    if isinstance(step, str):
        return step
    if registry is not None and callable(step):
        registered = registry.name_of(step)
        if registered is not None:
            return registered
    return (
        getattr(step, "__qualname__", None)
        or getattr(step, "__name__", None)
        or _safe_repr(step)
    )


def _safe_repr(step: object) -> str:
    return safe(repr)(step).value_or(f"<{type(step).__name__} object>")


def _resolve(step: object, registry: StepRegistry) -> ReturnsResult[Step, str]:
    if isinstance(step, str):
        return safe(registry.resolve)(step).alt(lambda _: step_not_found_message(step))
    if callable(step):
        return Success(step)
    return Failure(step_not_found_message(_safe_repr(step)))


def bind(current: Result[Any], step: StepRef, *, registry: StepRegistry | None = None) -> Result[Any]:
    """
    Feed the payload of ``current`` to ``step`` and return the step's result.

    Args:
        current: The result produced by the previous link of the chain.
        step: A callable ``(value) -> Result`` or the name of a registered step.
        registry: Registry used to resolve step names. Defaults to the
            module-level default registry.

    Returns:
        ``current`` itself if it is a failure, otherwise whatever the step
        produced, or an ``Err`` describing why the step could not run.
    """
    if not current.is_success():
        logger.debug("Skipping step after earlier failure: %s", current.error())
        return current

    effective_registry = registry if registry is not None else default_registry
    label = describe_step(step, effective_registry)
    resolved = _resolve(step, effective_registry)
    if isinstance(resolved, Failure):
        logger.debug("Could not resolve step %s", label)
        return err(resolved.failure())

    logger.debug("Invoking step %s", label)
    match safe(resolved.unwrap())(current.value()):
        case Success(Ok() | Err() as produced):
            return produced
        case Success(produced):
            return err(not_a_result_message(label, produced))
        case Failure(fault):
            logger.warning("Step %s raised an exception", label, exc_info=fault)
            return err(step_fault_message(label, fault))


def bind_by_name(
    current: Result[Any], name: str, *, registry: StepRegistry | None = None
) -> Result[Any]:
    """Bind ``current`` to the step registered under ``name``."""
    return bind(current, name, registry=registry)


def run_chain(seed: Any, *steps: StepRef, registry: StepRegistry | None = None) -> Result[Any]:
    """
    Wrap ``seed`` with `ok` and bind it through ``steps`` in order.

    A seed that already is a result is used as the starting link unchanged.
    """
    start = seed if is_result(seed) else ok(seed)
    return functools.reduce(lambda acc, step: bind(acc, step, registry=registry), steps, start)


def compose(*steps: StepRef, registry: StepRegistry | None = None) -> Step:
    """Combine ``steps`` into a single step that runs them in order."""

    def composed(value: Any) -> Result[Any]:
        return functools.reduce(lambda acc, step: bind(acc, step, registry=registry), steps, ok(value))

    composed.__qualname__ = " >> ".join(describe_step(step) for step in steps) or "identity"
    return composed


def lift(func: Callable[[Any], Any]) -> Step:
    """Turn a plain ``value -> value`` function into a step that wraps its output in `ok`."""

    @functools.wraps(func)
    def lifted(value: Any) -> Result[Any]:
        return ok(func(value))

    return lifted


__all__ = [
    "StepRef",
    "bind",
    "bind_by_name",
    "compose",
    "describe_step",
    "identity",
    "lift",
    "run_chain",
]
