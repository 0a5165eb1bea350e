"""Diagnostic channel for a run.

Diagnostics are kept in memory, logged, and echoed to the console so both
interactive users and log files see configuration problems.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from searchlet.core.logging import get_logger
from searchlet.core.progress import status

DiagnosticKind = Literal["error", "warning", "note"]

_STATUS_STYLES: dict[DiagnosticKind, str] = {
    "error": "error",
    "warning": "warning",
    "note": "info",
}


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A single reported message."""

    kind: DiagnosticKind
    message: str


@dataclass
class Reporter:
    """Collects and emits diagnostics.

    Set ``echo=False`` to keep messages off the console (tests, ``--json`` output).
    """

    echo: bool = True
    diagnostics: list[Diagnostic] = field(default_factory=list)

    def print(self, kind: DiagnosticKind, message: str) -> None:
        self.diagnostics.append(Diagnostic(kind, message))

        log = get_logger("reporter")
        if kind == "error":
            log.error("diagnostic", message=message)
        elif kind == "warning":
            log.warning("diagnostic", message=message)
        else:
            log.info("diagnostic", message=message)

        if self.echo:
            status(message, style=_STATUS_STYLES[kind])

    def error(self, message: str) -> None:
        self.print("error", message)

    def warning(self, message: str) -> None:
        self.print("warning", message)

    def note(self, message: str) -> None:
        self.print("note", message)

    @property
    def errors(self) -> list[str]:
        return [d.message for d in self.diagnostics if d.kind == "error"]

    @property
    def has_errors(self) -> bool:
        return any(d.kind == "error" for d in self.diagnostics)
