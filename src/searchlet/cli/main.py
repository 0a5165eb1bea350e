"""Searchlet CLI - searchlet command."""

from pathlib import Path

import click

from searchlet.cli.build import build_command
from searchlet.cli.inspect import inspect_command, options_command
from searchlet.config.loader import load_settings
from searchlet.core.errors import ConfigError
from searchlet.core.logging import configure_logging


@click.group()
@click.version_option(version="0.1.0", prog_name="searchlet")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Settings file (default: ./searchlet.yaml if present)",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_file: Path | None) -> None:
    """Searchlet - build a client-side search index for API documentation."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose

    try:
        settings = load_settings(config_file)
    except ConfigError as e:
        raise click.ClickException(e.message) from e

    logging_config = settings.logging
    if verbose:
        logging_config = logging_config.model_copy(update={"level": "DEBUG"})
    configure_logging(config=logging_config)


cli.add_command(build_command, name="build")
cli.add_command(inspect_command, name="inspect")
cli.add_command(options_command, name="options")


if __name__ == "__main__":
    cli()
