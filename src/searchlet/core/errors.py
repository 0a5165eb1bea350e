"""Searchlet error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Model
- 4xxx: Output
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Stable numeric codes, grouped by the stage that fails."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002
    CONFIG_MISSING_REQUIRED = 2003
    CONFIG_FILE_NOT_FOUND = 2004
    CONFIG_UNKNOWN_OPTION = 2005

    # Model (3xxx)
    MODEL_PARSE_ERROR = 3001
    MODEL_FILE_NOT_FOUND = 3002
    MODEL_INVALID_ELEMENT = 3003

    # Output (4xxx)
    OUTPUT_WRITE_FAILED = 4001
    OUTPUT_ASSET_MISSING = 4002


@dataclass(frozen=True, slots=True)
class SearchletError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """Enum member name, used as the structured log key."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Plain mapping for structured log events."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(SearchletError):
    """Bad command-line options or settings files."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Cannot read settings file {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Bad value for {field}: {reason}",
            details={"field": field, "value": repr(value), "reason": reason},
        )

    @classmethod
    def missing_required(cls, field: str, message: str | None = None) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_MISSING_REQUIRED,
            message=message or f"Missing {field}",
            details={"field": field},
        )

    @classmethod
    def file_not_found(cls, path: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_FILE_NOT_FOUND,
            message=f"No settings file at {path}",
            details={"path": path},
        )

    @classmethod
    def unknown_option(cls, name: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_UNKNOWN_OPTION,
            message=f"Unknown option: {name}",
            details={"option": name},
        )


class ModelError(SearchletError):
    """Errors reading a documentation model document."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ModelError":
        return cls(
            code=ErrorCode.MODEL_PARSE_ERROR,
            message=f"Failed to parse model at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def file_not_found(cls, path: str) -> "ModelError":
        return cls(
            code=ErrorCode.MODEL_FILE_NOT_FOUND,
            message=f"Model file not found: {path}",
            details={"path": path},
        )

    @classmethod
    def invalid_element(cls, where: str, reason: str) -> "ModelError":
        return cls(
            code=ErrorCode.MODEL_INVALID_ELEMENT,
            message=f"Invalid element at {where}: {reason}",
            details={"where": where, "reason": reason},
        )


class OutputError(SearchletError):
    """Fatal errors while writing the index output."""

    @classmethod
    def write_failed(cls, path: str, reason: str) -> "OutputError":
        return cls(
            code=ErrorCode.OUTPUT_WRITE_FAILED,
            message=f"Failed to write {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def asset_missing(cls, name: str) -> "OutputError":
        return cls(
            code=ErrorCode.OUTPUT_ASSET_MISSING,
            message=f"Bundled asset not found: {name}",
            details={"asset": name},
        )
