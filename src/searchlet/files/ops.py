"""Output writing: index.json, config.json and the search page.

Pure filesystem I/O, run once after traversal. Any OSError is fatal and is
raised as OutputError.
"""

from __future__ import annotations

import json
import shutil
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from searchlet.core.errors import OutputError
from searchlet.core.logging import get_logger
from searchlet.index.models import IndexEntry
from searchlet.templates import SEARCH_PAGE, get_search_page_path

log = get_logger("files.ops")

INDEX_FILE = "index.json"
CONFIG_FILE = "config.json"


@dataclass(frozen=True, slots=True)
class WrittenFiles:
    """Paths produced by one write."""

    index: Path
    config: Path
    page: Path


def _write_json(path: Path, data: Any) -> None:
    try:
        path.write_text(json.dumps(data, ensure_ascii=False, separators=(",", ":")), encoding="utf-8")
    except OSError as e:
        raise OutputError.write_failed(str(path), str(e)) from e
    log.debug("file_written", path=str(path), bytes=path.stat().st_size)


def write_output(
    output_dir: Path,
    entries: Sequence[IndexEntry],
    javadoc_url: str,
    *,
    search_page: Path | None = None,
) -> WrittenFiles:
    """Write the index, its config and the search page into output_dir.

    The directory is created if needed; an existing search page is replaced.

    Raises:
        OutputError: If the directory cannot be created or any file write fails.
    """
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputError.write_failed(str(output_dir), str(e)) from e

    index_path = output_dir / INDEX_FILE
    config_path = output_dir / CONFIG_FILE
    page_path = output_dir / SEARCH_PAGE

    _write_json(index_path, [entry.to_dict() for entry in entries])
    _write_json(config_path, {"javadocUrl": javadoc_url})

    source = search_page or get_search_page_path()
    if not source.is_file():
        raise OutputError.asset_missing(str(source))
    try:
        shutil.copyfile(source, page_path)
    except OSError as e:
        raise OutputError.write_failed(str(page_path), str(e)) from e

    log.info("output_written", directory=str(output_dir), entries=len(entries))
    return WrittenFiles(index=index_path, config=config_path, page=page_path)
