"""Exception hierarchy and failure messages for railchain.

Chain outcomes travel as ``Err`` values. The exceptions below are reserved for
misuse of the API itself: reading the wrong side of a result, or registering
and resolving steps incorrectly.
"""

from __future__ import annotations

from .app import config


class RailchainError(Exception):
    """Base exception for all railchain errors."""


class InvalidStateAccess(RailchainError):
    """A result was read through the accessor of the other variant."""


class UnknownStep(RailchainError, KeyError):
    """No step is registered under the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return step_not_found_message(self.name)


class DuplicateStep(RailchainError):
    """A step name is already taken in the registry."""


class RegistryFrozen(RailchainError):
    """The registry was mutated after being frozen."""


class ChainFailed(RailchainError):
    """Raised by ``Err.raise_for_status``; carries the failure message."""


def step_not_found_message(name: str) -> str:
    return config.STEP_NOT_FOUND_TEMPLATE.format(name=name)


def step_fault_message(step: str, fault: Exception) -> str:
    detail = str(fault) or "no details"
    return config.STEP_FAULT_TEMPLATE.format(
        step=step, fault_type=type(fault).__name__, detail=detail
    )


def not_a_result_message(step: str, returned: object) -> str:
    return config.NOT_A_RESULT_TEMPLATE.format(step=step, type_name=type(returned).__name__)


__all__ = [
    "ChainFailed",
    "DuplicateStep",
    "InvalidStateAccess",
    "RailchainError",
    "RegistryFrozen",
    "UnknownStep",
    "not_a_result_message",
    "step_fault_message",
    "step_not_found_message",
]
