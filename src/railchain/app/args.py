"""
Command-line argument processing and validation for railchain.

Raw CLI inputs are normalised here and turned into an immutable `RunConfig`,
so the command functions only deal with validated values.
"""

import math
from pathlib import Path

import typer
from pydantic import ValidationError

from . import config
from .models import RunConfig


def _format_validation_errors(validation_error: ValidationError) -> str:
    """
    Format Pydantic validation errors into user-friendly CLI messages.

    Args:
        validation_error: The Pydantic ValidationError to format.

    Returns:
        A formatted string with bullet points for each error.
    """
    error_lines = []
    for error in validation_error.errors():
        field = " -> ".join(str(loc) for loc in error["loc"])
        error_lines.append(f"  • {field}: {error['msg']}")

    return "\n".join(error_lines)


def parse_seed(raw: str) -> int | float | str:
    """
    Interpret a seed given on the command line.

    Integers are tried first, then finite floats. Anything else, including
    words such as "nan" or "inf", stays a string so that steps can report
    non-numeric input themselves.
    """
    text = raw.strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        return raw
    return number if math.isfinite(number) else raw


def _validate_manifest_path(manifest: Path | None) -> Path | None:
    if manifest is None:
        return None
    path = manifest.resolve()
    if not path.is_file():
        raise typer.BadParameter(f"Manifest file does not exist: {path}")
    return path


def create_run_config(
    *,
    seed: str,
    steps: list[str] | None,
    manifest: Path | None,
    load_samples: bool,
    verbose: bool,
) -> RunConfig:
    """
    Construct a validated RunConfig from CLI arguments.

    Raises:
        typer.BadParameter: If any validation fails.
    """
    manifest_path = _validate_manifest_path(manifest)
    try:
        return RunConfig(
            seed=parse_seed(seed),
            steps=tuple(name.strip() for name in steps or ()),
            manifest=manifest_path,
            load_samples=load_samples,
            log_level=config.VERBOSE_LOG_LEVEL if verbose else config.DEFAULT_LOG_LEVEL,
        )
    except ValidationError as e:
        error_details = _format_validation_errors(e)
        raise typer.BadParameter(f"Invalid run configuration:\n{error_details}") from e


__all__ = ["create_run_config", "parse_seed"]
