"""Structured logging for index builds.

structlog events are routed through stdlib logging so several outputs can
coexist: a console renderer on stderr for people, JSON lines in a file for
tooling. Every event emitted during ``run`` carries the run's ``run_id``.
"""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from pathlib import Path
from typing import TYPE_CHECKING, Any
from uuid import uuid4

import structlog

if TYPE_CHECKING:
    from searchlet.config.models import LoggingConfig, LogOutputConfig

_run_id: ContextVar[str | None] = ContextVar("run_id", default=None)

# First file output of the active configuration, shown to users on failures
_log_file_path: Path | None = None

_CONSOLE_DESTINATIONS = ("stderr", "stdout")


def get_run_id() -> str | None:
    return _run_id.get()


def set_run_id(run_id: str | None = None) -> str:
    """Set or generate the run correlation ID."""
    rid = run_id or uuid4().hex[:12]
    _run_id.set(rid)
    return rid


def clear_run_id() -> None:
    _run_id.set(None)


def get_log_file_path() -> Path | None:
    """File receiving log output, if the configuration has one."""
    return _log_file_path


def _add_run_id(
    _logger: structlog.types.WrappedLogger,
    _method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    if rid := get_run_id():
        event_dict["run_id"] = rid
    return event_dict


def _level(name: str) -> int:
    return logging.getLevelNamesMapping().get(name.upper(), logging.WARNING)


class ConsoleSuppressingFilter(logging.Filter):
    """Drops console records while a spinner owns the terminal."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: ARG002
        from searchlet.core.progress import is_console_suppressed

        return not is_console_suppressed()


def _build_handler(output: LogOutputConfig) -> logging.Handler:
    if output.destination in _CONSOLE_DESTINATIONS:
        stream = sys.stdout if output.destination == "stdout" else sys.stderr
        handler: logging.Handler = logging.StreamHandler(stream)
        handler.addFilter(ConsoleSuppressingFilter())
        return handler

    path = Path(output.destination)
    path.parent.mkdir(parents=True, exist_ok=True)
    return logging.FileHandler(path, mode="a", encoding="utf-8")


def _build_formatter(
    output: LogOutputConfig, pre_chain: list[structlog.types.Processor]
) -> logging.Formatter:
    renderer: structlog.types.Processor
    if output.format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        colors = output.destination == "stderr" and sys.stderr.isatty()
        renderer = structlog.dev.ConsoleRenderer(colors=colors, pad_event_to=0)
    return structlog.stdlib.ProcessorFormatter(processor=renderer, foreign_pre_chain=pre_chain)


def configure_logging(
    *,
    config: LoggingConfig | None = None,
    json_format: bool = False,
    level: str = "WARNING",
) -> None:
    """Install structlog + stdlib handlers. Safe to call repeatedly.

    Args:
        config: Full logging configuration; built from the other args if None
        json_format: Render the default stderr output as JSON
        level: Root level when no config is given
    """
    from searchlet.config.models import LoggingConfig, LogOutputConfig

    global _log_file_path

    if config is None:
        config = LoggingConfig(
            level=level,  # type: ignore[arg-type]
            outputs=[LogOutputConfig(format="json" if json_format else "console")],
        )

    root_level = _level(config.level)
    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", key="timestamp"),
        _add_run_id,  # type: ignore[list-item]
    ]

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.make_filtering_bound_logger(root_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    for old in root.handlers:
        old.close()
    root.handlers.clear()
    root.setLevel(root_level)

    _log_file_path = None
    for output in config.outputs:
        if output.destination not in _CONSOLE_DESTINATIONS and _log_file_path is None:
            _log_file_path = Path(output.destination)

        handler = _build_handler(output)
        handler.setLevel(_level(output.level or config.level))
        handler.setFormatter(_build_formatter(output, pre_chain))
        root.addHandler(handler)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    logger = structlog.get_logger()
    if name:
        logger = logger.bind(logger=name)
    return logger  # type: ignore[no-any-return]
