"""Index build operations.

``run`` is the whole pipeline: resolve options, traverse, write. Configuration
problems are reported and turn into ``False``; output failures raise.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from searchlet.config.models import SearchletConfig
from searchlet.config.options import resolve_options
from searchlet.core.errors import ConfigError
from searchlet.core.logging import clear_run_id, get_logger, set_run_id
from searchlet.core.reporting import Reporter
from searchlet.files.ops import WrittenFiles, write_output
from searchlet.index.indexer import Indexer
from searchlet.index.models import IndexEntry, IndexStats
from searchlet.model.environment import DocEnvironment

log = get_logger("index.ops")


@dataclass(frozen=True, slots=True)
class BuildResult:
    """Entries produced by one build and where they were written."""

    entries: list[IndexEntry]
    stats: IndexStats
    files: WrittenFiles


def build_index(environment: DocEnvironment, *, include_members: bool = False) -> list[IndexEntry]:
    """Traverse the environment's included elements and return the entries in id order."""
    indexer = Indexer(environment, include_members=include_members)
    entries = indexer.index_all()
    stats = IndexStats.from_entries(entries)
    log.info("index_built", total=stats.total, include_members=include_members, **stats.to_dict())
    return entries


def generate(config: SearchletConfig, environment: DocEnvironment) -> BuildResult:
    """Build the index and write all output files.

    Raises:
        OutputError: If any output file cannot be written.
    """
    entries = build_index(environment, include_members=config.include_members)
    files = write_output(config.output_directory, entries, config.javadoc_url)
    return BuildResult(entries=entries, stats=IndexStats.from_entries(entries), files=files)


def resolve_config(
    pairs: Iterable[tuple[str, Sequence[str]]], reporter: Reporter
) -> SearchletConfig | None:
    """Resolve options, reporting any configuration error instead of raising."""
    try:
        return resolve_options(pairs)
    except ConfigError as e:
        log.debug("config_rejected", error=e.error_name, **e.details)
        reporter.error(e.message)
        return None


def run(
    pairs: Iterable[tuple[str, Sequence[str]]],
    environment: DocEnvironment,
    reporter: Reporter,
) -> bool:
    """Resolve options and generate the index.

    Returns False (with a reported diagnostic, nothing written) when required
    options are missing or invalid.

    Raises:
        OutputError: If writing output fails.
    """
    set_run_id()
    try:
        config = resolve_config(pairs, reporter)
        if config is None:
            return False
        generate(config, environment)
        return True
    finally:
        clear_run_id()
