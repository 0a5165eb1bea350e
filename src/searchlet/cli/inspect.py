"""searchlet inspect / options commands - look at an index without writing it."""

import json
from pathlib import Path

import click
from rich.table import Table

from searchlet.cli.utils import load_model_or_fail
from searchlet.config.options import option_help, parse_bool
from searchlet.core.progress import get_console
from searchlet.index.ops import build_index


@click.command()
@click.argument("model", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--include-members", default=None, metavar="BOOL", help="Also list methods and fields")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def inspect_command(model: Path, include_members: str | None, as_json: bool) -> None:
    """Print the entries MODEL would produce, without writing files."""
    environment = load_model_or_fail(model)
    entries = build_index(environment, include_members=parse_bool(include_members))

    if as_json:
        click.echo(json.dumps([e.to_dict() for e in entries], indent=2, ensure_ascii=False))
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("id", justify="right")
    table.add_column("type")
    table.add_column("title", no_wrap=True)
    table.add_column("key", style="dim")
    table.add_column("link", style="cyan")
    for e in entries:
        table.add_row(str(e.id), e.type, e.title, e.key, e.link)
    get_console().print(table)


@click.command()
def options_command() -> None:
    """List the options accepted by the build command."""
    table = Table(show_header=True, header_style="bold")
    table.add_column("option", no_wrap=True)
    table.add_column("args", no_wrap=True)
    table.add_column("description")
    for names, params, desc in option_help():
        table.add_row(names, params, desc)
    get_console().print(table)
