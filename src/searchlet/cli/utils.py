"""CLI utilities."""

from pathlib import Path

import click

from searchlet.core.errors import ModelError
from searchlet.model.environment import InMemoryEnvironment
from searchlet.model.loader import load_model


def load_model_or_fail(path: Path) -> InMemoryEnvironment:
    """Load a model document, turning model errors into a CLI failure.

    Raises:
        click.ClickException: If the document is missing or malformed.
    """
    try:
        return load_model(path)
    except ModelError as e:
        raise click.ClickException(e.message) from e


def option_pairs(
    *,
    directory: str | None = None,
    javadoc_url: str | None = None,
    include_members: str | None = None,
    notimestamp: bool = False,
) -> list[tuple[str, list[str]]]:
    """Turn parsed click values back into (option, arguments) pairs.

    Only options actually given on the command line are included.
    """
    pairs: list[tuple[str, list[str]]] = []
    if directory is not None:
        pairs.append(("--directory", [directory]))
    if javadoc_url is not None:
        pairs.append(("--javadoc-url", [javadoc_url]))
    if include_members is not None:
        pairs.append(("--include-members", [include_members]))
    if notimestamp:
        pairs.append(("-notimestamp", []))
    return pairs
