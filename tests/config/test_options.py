"""Tests for option declarations and resolution."""

from __future__ import annotations

from pathlib import Path

import pytest

from searchlet.config.options import (
    OPTIONS,
    OptionResolver,
    option_help,
    parse_bool,
    resolve_options,
)
from searchlet.core.errors import ConfigError, ErrorCode


class TestResolveOptions:
    """Option pairs to SearchletConfig."""

    def test_long_names(self) -> None:
        config = resolve_options(
            [
                ("--directory", ["build/search"]),
                ("--javadoc-url", ["https://docs.example/api/"]),
                ("--include-members", ["true"]),
            ]
        )
        assert config.output_directory == Path("build/search")
        assert config.javadoc_url == "https://docs.example/api"
        assert config.include_members is True

    def test_short_names(self) -> None:
        config = resolve_options([("-d", ["out"]), ("-j", ["../javadoc"])])
        assert config.output_directory == Path("out")
        assert config.javadoc_url == "../javadoc"

    def test_include_members_default_false(self) -> None:
        config = resolve_options([("-d", ["out"]), ("-j", ["x"])])
        assert config.include_members is False

    def test_notimestamp_is_noop(self) -> None:
        with_flag = resolve_options([("-notimestamp", []), ("-d", ["out"]), ("-j", ["x"])])
        without = resolve_options([("-d", ["out"]), ("-j", ["x"])])
        assert with_flag == without

    def test_last_value_wins(self) -> None:
        config = resolve_options([("-d", ["a"]), ("-d", ["b"]), ("-j", ["x"])])
        assert config.output_directory == Path("b")

    def test_only_one_trailing_slash_stripped(self) -> None:
        config = resolve_options([("-d", ["out"]), ("-j", ["http://x//"])])
        assert config.javadoc_url == "http://x/"

    @pytest.mark.parametrize(
        ("pairs", "field", "message"),
        [
            ([("-j", ["x"])], "directory", "Missing output directory"),
            ([("-d", ["out"])], "javadoc_url", "Missing javadoc url"),
            ([], "directory", "Missing output directory"),
        ],
    )
    def test_missing_required(
        self, pairs: list[tuple[str, list[str]]], field: str, message: str
    ) -> None:
        with pytest.raises(ConfigError) as exc:
            resolve_options(pairs)
        assert exc.value.code == ErrorCode.CONFIG_MISSING_REQUIRED
        assert exc.value.details == {"field": field}
        assert exc.value.message == message

    def test_unknown_option(self) -> None:
        with pytest.raises(ConfigError) as exc:
            resolve_options([("--output", ["x"])])
        assert exc.value.code == ErrorCode.CONFIG_UNKNOWN_OPTION

    def test_wrong_argument_count(self) -> None:
        with pytest.raises(ConfigError) as exc:
            resolve_options([("-d", [])])
        assert exc.value.code == ErrorCode.CONFIG_INVALID_VALUE

    def test_config_is_immutable(self) -> None:
        config = resolve_options([("-d", ["out"]), ("-j", ["x"])])
        with pytest.raises(Exception):  # noqa: B017
            config.include_members = True  # type: ignore[misc]


class TestParseBool:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("true", True),
            ("TRUE", True),
            (" true ", False),
            ("false", False),
            ("yes", False),
            ("1", False),
            (None, False),
        ],
    )
    def test_lenient(self, value: str | None, expected: bool) -> None:
        assert parse_bool(value) is expected


class TestOptionTable:
    def test_all_names_unique(self) -> None:
        names = [n for spec in OPTIONS for n in spec.names]
        assert len(names) == len(set(names))

    def test_help_rows(self) -> None:
        rows = {names: params for names, params, _ in option_help()}
        assert rows == {
            "--directory, -d": "<dir>",
            "--javadoc-url, -j": "<url>",
            "--include-members": "<bool>",
            "-notimestamp": "",
        }

    def test_resolver_draft_holds_processed_values(self) -> None:
        resolver = OptionResolver()
        resolver.process("-d", ["out"])
        assert resolver.draft == {"output_directory": Path("out")}
