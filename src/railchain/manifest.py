"""
Loads step registrations from JSON manifests.

A manifest is a JSON array of entries naming a step and the import target
that implements it:

    [
        {"name": "multiply", "target": "railchain.samples:multiply_by_10_if_positive"},
        {"name": "render", "target": "my_plugin.steps:Renderer.render"}
    ]

Targets are resolved lazily with ``importlib`` when the manifest is applied,
so chains can be assembled from configuration without importing step modules
up front.
"""

import functools
import importlib
import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError
from returns.result import Failure, Result, Success, safe

from .app import config
from .errors import RailchainError
from .registry import Step, StepRegistry, default_registry

logger = logging.getLogger(__name__)


class StepEntry(BaseModel):
    """A single manifest entry mapping a step name to an import target."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(min_length=1)
    target: str = Field(pattern=r"^[\w.]+:[\w.]+$")


ManifestAdapter = TypeAdapter(list[StepEntry])


def load_json(file_path: Path) -> Result[Any, str]:
    """Parse a JSON file."""
    return safe(lambda: json.loads(file_path.read_text(encoding="utf-8")))().alt(str)


def _validate_entries(data: Any) -> Result[list[StepEntry], str]:
    try:
        return Success(ManifestAdapter.validate_python(data))
    except ValidationError as exc:
        return Failure(f"Invalid step manifest: {exc}")


def _import_module(module_name: str) -> Result[Any, str]:
    return safe(importlib.import_module)(module_name).alt(
        lambda exc: f"Cannot import module '{module_name}': {type(exc).__name__}: {exc}"
    )


def _walk_attributes(module: Any, module_name: str, attr_path: str) -> Result[Any, str]:
    return safe(lambda: functools.reduce(getattr, attr_path.split("."), module))().alt(
        lambda exc: f"Cannot resolve '{attr_path}' in module '{module_name}': {exc}"
    )


def _ensure_callable(obj: Any, target: str) -> Result[Step, str]:
    if not callable(obj):
        return Failure(f"Import target '{target}' is not callable")
    return Success(obj)


def import_step(target: str) -> Result[Step, str]:
    """
    Import the callable named by ``target``.

    Any exception raised while importing the module or walking its attributes
    comes back as a Failure.

    Args:
        target: A ``"package.module:attribute"`` string. The attribute part may
            be dotted to reach into classes or nested objects.

    Returns:
        Success with the callable, or Failure describing why it could not be imported.
    """
    module_name, sep, attr_path = target.partition(config.IMPORT_TARGET_SEPARATOR)
    if not sep or not module_name or not attr_path:
        return Failure(f"Invalid import target '{target}': expected 'module:attribute'")

    return (
        _import_module(module_name)
        .bind(lambda module: _walk_attributes(module, module_name, attr_path))
        .bind(lambda obj: _ensure_callable(obj, target))
    )


def load_manifest(path: Path) -> Result[list[StepEntry], str]:
    """Read and validate a step manifest file."""
    return load_json(path).bind(_validate_entries)


def register_manifest(
    path: Path, registry: StepRegistry | None = None, *, replace: bool = False
) -> Result[list[str], str]:
    """
    Import every step listed in the manifest at ``path`` and register it.

    All targets are imported before anything is registered, and registration
    is a single batch, so a failing manifest leaves the registry unchanged.

    Returns:
        Success with the registered names, or Failure with the first error.
    """
    target_registry = registry if registry is not None else default_registry
    entries = load_manifest(path)
    if isinstance(entries, Failure):
        return entries

    staged: list[tuple[str, Step]] = []
    for entry in entries.unwrap():
        imported = import_step(entry.target)
        if isinstance(imported, Failure):
            return Failure(f"Error loading step '{entry.name}': {imported.failure()}")
        staged.append((entry.name, imported.unwrap()))

    try:
        registered = target_registry.register_many(staged, replace=replace)
    except (RailchainError, ValueError) as exc:
        return Failure(f"Error registering steps from {path}: {exc}")

    logger.info("Registered %d step(s) from %s", len(registered), path)
    return Success(registered)


__all__ = [
    "ManifestAdapter",
    "StepEntry",
    "import_step",
    "load_json",
    "load_manifest",
    "register_manifest",
]
