"""Core module exports."""

from searchlet.core.errors import (
    ConfigError,
    ErrorCode,
    ModelError,
    OutputError,
    SearchletError,
)
from searchlet.core.logging import (
    clear_run_id,
    configure_logging,
    get_logger,
    get_run_id,
    set_run_id,
)
from searchlet.core.progress import status, task
from searchlet.core.reporting import Diagnostic, Reporter

__all__ = [
    # Errors
    "SearchletError",
    "ConfigError",
    "ErrorCode",
    "ModelError",
    "OutputError",
    # Logging
    "clear_run_id",
    "configure_logging",
    "get_logger",
    "get_run_id",
    "set_run_id",
    # Progress
    "status",
    "task",
    # Diagnostics
    "Diagnostic",
    "Reporter",
]
