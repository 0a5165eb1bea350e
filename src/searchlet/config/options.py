"""Declared command-line options and their resolution into ``SearchletConfig``.

Option parsing proper (splitting argv, counting arguments) belongs to the
front-end. This module receives already-split ``(name, arguments)`` pairs,
applies each recognized option to a draft, then validates the draft.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from searchlet.config.models import SearchletConfig
from searchlet.core.errors import ConfigError

Processor = Callable[[dict[str, Any], Sequence[str]], None]


@dataclass(frozen=True, slots=True)
class OptionSpec:
    """A declared option: its names, argument placeholders and effect."""

    names: tuple[str, ...]
    processor: Processor
    args: tuple[str, ...] = ()
    description: str = ""

    @property
    def arg_count(self) -> int:
        return len(self.args)

    @property
    def parameters(self) -> str:
        """Placeholder string such as ``<dir>`` or ``<a>:<b>``."""
        return ":".join(f"<{a}>" for a in self.args)


def _set_directory(draft: dict[str, Any], args: Sequence[str]) -> None:
    draft["output_directory"] = Path(args[0])


def _set_javadoc_url(draft: dict[str, Any], args: Sequence[str]) -> None:
    draft["javadoc_url"] = args[0]


def _set_include_members(draft: dict[str, Any], args: Sequence[str]) -> None:
    draft["include_members"] = parse_bool(args[0])


def _ignore(draft: dict[str, Any], args: Sequence[str]) -> None:  # noqa: ARG001
    return None


def parse_bool(value: str | None) -> bool:
    """Lenient boolean: only ``true`` (any case) is true."""
    return value is not None and value.lower() == "true"


OPTIONS: tuple[OptionSpec, ...] = (
    OptionSpec(
        names=("--directory", "-d"),
        args=("dir",),
        description="The output directory",
        processor=_set_directory,
    ),
    OptionSpec(
        names=("--javadoc-url", "-j"),
        args=("url",),
        description="The url to the root of the canonical Javadoc, can be relative path from "
        "the root of the Searchlet or an absolute path",
        processor=_set_javadoc_url,
    ),
    OptionSpec(
        names=("--include-members",),
        args=("bool",),
        description="Whether to index methods and fields",
        processor=_set_include_members,
    ),
    # Gradle passes this to every doclet, see gradle/gradle#24595
    OptionSpec(
        names=("-notimestamp",),
        description="Accepted for build tool compatibility, has no effect",
        processor=_ignore,
    ),
)

@dataclass
class OptionResolver:
    """Applies option pairs to a draft and validates the result."""

    options: Sequence[OptionSpec] = OPTIONS
    draft: dict[str, Any] = field(default_factory=dict)
    _by_name: dict[str, OptionSpec] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._by_name = {name: spec for spec in self.options for name in spec.names}

    def lookup(self, name: str) -> OptionSpec:
        spec = self._by_name.get(name)
        if spec is None:
            raise ConfigError.unknown_option(name)
        return spec

    def process(self, name: str, arguments: Sequence[str]) -> None:
        spec = self.lookup(name)
        if len(arguments) != spec.arg_count:
            raise ConfigError.invalid_value(
                name,
                list(arguments),
                f"expected {spec.arg_count} argument(s), got {len(arguments)}",
            )
        spec.processor(self.draft, arguments)

    def resolve(self) -> SearchletConfig:
        if self.draft.get("output_directory") is None:
            raise ConfigError.missing_required("directory", "Missing output directory")
        if self.draft.get("javadoc_url") is None:
            raise ConfigError.missing_required("javadoc_url", "Missing javadoc url")
        try:
            return SearchletConfig(**self.draft)
        except ValidationError as e:
            err = e.errors()[0]
            field_name = ".".join(str(loc) for loc in err["loc"])
            raise ConfigError.invalid_value(field_name, err.get("input"), err["msg"]) from e


def resolve_options(pairs: Iterable[tuple[str, Sequence[str]]]) -> SearchletConfig:
    """Resolve ``(option, arguments)`` pairs into a validated config.

    Raises:
        ConfigError: On unknown options, wrong argument counts, or when the
            output directory or javadoc url is missing.
    """
    resolver = OptionResolver()
    for name, arguments in pairs:
        resolver.process(name, arguments)
    return resolver.resolve()


def option_help(options: Sequence[OptionSpec] = OPTIONS) -> list[tuple[str, str, str]]:
    """Rows of (names, parameters, description) for display."""
    return [(", ".join(spec.names), spec.parameters, spec.description) for spec in options]
