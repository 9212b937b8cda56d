"""Name-to-step registry for late-bound chain steps.

Chains normally receive callables directly. When the step sequence comes from
configuration (a CLI flag, a manifest file, a plugin) the chain can name its
steps instead and let a registry resolve them at call time.

Populate the registry during setup, then call ``freeze()`` before chains start
executing so that every chain sees the same set of steps. All reads and writes
go through a lock, so lazy population from several threads is also safe.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable, Iterator
from typing import Any

from .errors import DuplicateStep, RegistryFrozen, UnknownStep
from .functional_types import Result

type Step = Callable[[Any], Result[Any]]

logger = logging.getLogger(__name__)

__all__ = [
    "Step",
    "StepRegistry",
    "clear",
    "default_registry",
    "register",
    "resolve",
    "unregister",
]


class StepRegistry:
    """Maps step names to callables with the signature ``(value) -> Result``."""

    def __init__(self) -> None:
        self._steps: dict[str, Step] = {}
        self._frozen = False
        self._lock = threading.Lock()

    # -------------------------------------------------- #
    # Population
    # -------------------------------------------------- #

    def register(self, name: str, step: Step, *, replace: bool = False) -> Step:
        """Register ``step`` under ``name`` and return it unchanged.

        Raises:
            ValueError: If ``name`` is empty.
            TypeError: If ``step`` is not callable.
            DuplicateStep: If ``name`` is taken and ``replace`` is false.
            RegistryFrozen: If the registry has been frozen.
        """
        self.register_many([(name, step)], replace=replace)
        return step

    def register_many(self, items: Iterable[tuple[str, Step]], *, replace: bool = False) -> list[str]:
        """Register several steps at once; either all of them are added or none.

        Raises the same errors as :meth:`register`. A name repeated within
        ``items`` counts as a duplicate unless ``replace`` is true.
        """
        staged = list(items)
        for name, step in staged:
            if not isinstance(name, str) or not name.strip():
                raise ValueError("Step name must be a non-empty string.")
            if not callable(step):
                raise TypeError(f"Step '{name}' is not callable: {step!r}")

        with self._lock:
            self._ensure_mutable()
            if not replace:
                seen: set[str] = set()
                for name, _ in staged:
                    if name in self._steps or name in seen:
                        raise DuplicateStep(f"Step '{name}' is already registered.")
                    seen.add(name)
            self._steps.update(staged)

        names = [name for name, _ in staged]
        logger.debug("Registered steps %r", names)
        return names

    def step(self, name: str | None = None, *, replace: bool = False) -> Callable[[Step], Step]:
        """Decorator form of :meth:`register`; the name defaults to ``__name__``."""

        def decorator(func: Step) -> Step:
            return self.register(name or func.__name__, func, replace=replace)

        return decorator

    def unregister(self, name: str) -> None:
        with self._lock:
            self._ensure_mutable()
            if name not in self._steps:
                raise UnknownStep(name)
            del self._steps[name]
        logger.debug("Unregistered step %r", name)

    def clear(self) -> None:
        """Remove every step and lift the freeze. Intended for test isolation."""
        with self._lock:
            self._steps.clear()
            self._frozen = False

    def freeze(self) -> None:
        with self._lock:
            self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    # -------------------------------------------------- #
    # Lookup
    # -------------------------------------------------- #

    def resolve(self, name: str) -> Step:
        """Return the step registered under ``name``.

        Raises:
            UnknownStep: If no such step is registered.
        """
        with self._lock:
            try:
                return self._steps[name]
            except KeyError:
                raise UnknownStep(name) from None

    def name_of(self, step: Step) -> str | None:
        """Return the first name ``step`` is registered under, if any."""
        with self._lock:
            return next((name for name, fn in self._steps.items() if fn is step), None)

    def names(self) -> list[str]:
        with self._lock:
            return sorted(self._steps)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._steps

    def __len__(self) -> int:
        with self._lock:
            return len(self._steps)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __repr__(self) -> str:
        state = "frozen" if self._frozen else "open"
        return f"StepRegistry({len(self)} steps, {state})"

    # -------------------------------------------------- #
    # Private helpers
    # -------------------------------------------------- #

    def _ensure_mutable(self) -> None:
        if self._frozen:
            raise RegistryFrozen("Step registry is frozen; no further changes are allowed.")


# --------------------------------------------------------------------------- #
# Default registry helpers
# --------------------------------------------------------------------------- #

default_registry = StepRegistry()


def register(name: str, step: Step, *, replace: bool = False) -> Step:
    return default_registry.register(name, step, replace=replace)


def unregister(name: str) -> None:
    default_registry.unregister(name)


def clear() -> None:
    default_registry.clear()


def resolve(name: str) -> Step:
    return default_registry.resolve(name)
