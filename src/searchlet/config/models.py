"""Pydantic configuration models.

Two kinds of configuration live here:

- ``SearchletConfig``: the run configuration resolved from command-line options.
  Built once before traversal and never mutated afterwards.
- ``LoggingConfig``: ambient settings loaded from env vars / YAML
  (see loader.py).

Environment Variable Format:
    SEARCHLET__<SECTION>__<KEY>=<VALUE>

Examples:
    SEARCHLET__LOGGING__LEVEL=DEBUG
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration."""

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        SEARCHLET__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. INFO adds build summaries, DEBUG logs every skipped element.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class SearchletConfig(BaseModel):
    """Resolved run configuration."""

    model_config = ConfigDict(frozen=True)

    output_directory: Path = Field(description="Directory receiving index.json, config.json and index.html.")
    javadoc_url: str = Field(
        description="Root of the canonical Javadoc, absolute or relative to the output directory."
    )
    include_members: bool = Field(
        default=False,
        description="Index methods and fields in addition to modules, packages and types.",
    )

    @field_validator("javadoc_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.removesuffix("/")
