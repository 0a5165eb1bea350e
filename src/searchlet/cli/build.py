"""searchlet build command - index a model and write the search bundle."""

from pathlib import Path

import click

from searchlet.cli.utils import load_model_or_fail, option_pairs
from searchlet.core.errors import OutputError
from searchlet.core.logging import get_log_file_path
from searchlet.core.progress import pluralize, spinner, status, task
from searchlet.core.reporting import Reporter
from searchlet.index.ops import generate, resolve_config


@click.command()
@click.argument("model", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-d", "--directory", default=None, metavar="DIR", help="The output directory")
@click.option(
    "-j",
    "--javadoc-url",
    default=None,
    metavar="URL",
    help="Root of the canonical Javadoc, absolute or relative to the output directory",
)
@click.option(
    "--include-members",
    default=None,
    metavar="BOOL",
    help="Also index methods and fields (true/false, default false)",
)
@click.option("-notimestamp", "notimestamp", is_flag=True, hidden=True)
def build_command(
    model: Path,
    directory: str | None,
    javadoc_url: str | None,
    include_members: str | None,
    notimestamp: bool,
) -> None:
    """Build index.json, config.json and index.html from a documentation model.

    MODEL is a JSON or YAML element tree.
    """
    reporter = Reporter()
    pairs = option_pairs(
        directory=directory,
        javadoc_url=javadoc_url,
        include_members=include_members,
        notimestamp=notimestamp,
    )
    config = resolve_config(pairs, reporter)
    if config is None:
        raise SystemExit(1)

    with spinner(f"Loading {model.name}"):
        environment = load_model_or_fail(model)

    try:
        with task(f"Indexing {model.name}"):
            result = generate(config, environment)
    except OutputError as e:
        if (log_path := get_log_file_path()) is not None:
            status(f"Details in {log_path}", style="info")
        raise click.ClickException(e.message) from e

    counts = result.stats.to_dict()
    parts = [
        pluralize(counts["package"], "package"),
        pluralize(counts["type"], "type"),
    ]
    if config.include_members:
        parts.append(pluralize(counts["method"], "method"))
        parts.append(pluralize(counts["variable"], "field"))
    status(f"{pluralize(result.stats.total, 'entry', 'entries')} ({', '.join(parts)})", style="success")
    status(f"Output: {result.files.index.parent}", style="info")
