"""
Sample steps used by the CLI and the test suite.
"""

import math
from numbers import Real
from typing import Any

from .functional_types import Result, err, ok
from .registry import StepRegistry, default_registry


def multiply_by_10_if_positive(value: Any) -> Result[Any]:
    """Multiply a positive number by ten."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return err("expected a number")
    if isinstance(value, float) and not math.isfinite(value):
        return err("expected a number")
    if value <= 0:
        return err("value must be > 0")
    return ok(value * 10)


def stringify_with_prefix(value: Any) -> Result[str]:
    return ok(f"Result: {value}")


SAMPLE_STEPS = (multiply_by_10_if_positive, stringify_with_prefix)


def register_samples(registry: StepRegistry | None = None, *, replace: bool = False) -> list[str]:
    """Register the sample steps under their function names and return those names."""
    target = registry if registry is not None else default_registry
    return [target.register(step.__name__, step, replace=replace).__name__ for step in SAMPLE_STEPS]


__all__ = [
    "SAMPLE_STEPS",
    "multiply_by_10_if_positive",
    "register_samples",
    "stringify_with_prefix",
]
