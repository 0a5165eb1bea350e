"""Console feedback for the CLI.

All user-facing lines go to stderr through one Rich console, so stdout stays
clean for ``--json`` output. While a spinner is live, console log handlers
are muted (see ConsoleSuppressingFilter) to keep lines from colliding.
"""

from __future__ import annotations

import sys
import threading
import time
from collections.abc import Iterator
from contextlib import contextmanager

from rich.console import Console

_console = Console(stderr=True)

_PREFIXES = {
    "success": "[green]✓[/green] ",
    "error": "[red]✗[/red] ",
    "warning": "[yellow]![/yellow] ",
    "info": "  ",
    "none": "",
}

_live = threading.local()


def is_console_suppressed() -> bool:
    return getattr(_live, "active", False)


def get_console() -> Console:
    """Shared stderr console."""
    return _console


def status(message: str, *, style: str = "info", indent: int = 0) -> None:
    """Print one prefixed line, e.g. ``✓ 12 entries``."""
    _console.print(f"{' ' * indent}{_PREFIXES.get(style, '')}{message}", highlight=False)


def pluralize(count: int, singular: str, plural: str | None = None) -> str:
    """``1 entry`` / ``3 entries``."""
    word = singular if count == 1 else (plural or singular + "s")
    return f"{count} {word}"


@contextmanager
def spinner(message: str) -> Iterator[None]:
    """Animated spinner on a TTY, a single plain line otherwise."""
    if not sys.stderr.isatty():
        _console.print(f"{message}...", highlight=False)
        yield
        return

    _live.active = True
    try:
        with _console.status(f"[cyan]{message}[/cyan]", spinner="dots"):
            yield
    finally:
        _live.active = False


@contextmanager
def task(name: str) -> Iterator[None]:
    """Announce a step, then report its duration or failure.

    Usage::

        with task("Indexing model.json"):
            ...
        # ✓ Indexing model.json (0.3s)
    """
    from searchlet.core.logging import get_logger

    log = get_logger("progress")
    status(f"{name}...", style="none")
    start = time.perf_counter()
    try:
        yield
    except Exception as e:
        elapsed = time.perf_counter() - start
        status(f"{name} failed: {e}", style="error")
        log.error("task_failed", task=name, elapsed_s=round(elapsed, 3), error=str(e))
        raise
    elapsed = time.perf_counter() - start
    status(f"{name} ({elapsed:.1f}s)", style="success")
    log.debug("task_done", task=name, elapsed_s=round(elapsed, 3))
