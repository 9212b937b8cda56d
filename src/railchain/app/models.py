from pathlib import Path
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from . import config

StepName = Annotated[str, Field(min_length=1)]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ImmutableModel(BaseModel):
    """Base class for immutable Pydantic models."""

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
        validate_default=True,
    )


class RunConfig(ImmutableModel):
    """
    Configuration for a single chain run started from the command line.
    """

    seed: Any
    steps: tuple[StepName, ...] = Field(..., min_length=1)
    manifest: Path | None = None
    load_samples: bool = True
    log_level: LogLevel = config.DEFAULT_LOG_LEVEL


__all__ = ["ImmutableModel", "LogLevel", "RunConfig", "StepName"]
