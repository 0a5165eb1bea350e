"""Tests for index build operations (build_index, generate, run)."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from searchlet.config.models import SearchletConfig
from searchlet.core.errors import OutputError
from searchlet.core.reporting import Reporter
from searchlet.index.ops import build_index, generate, resolve_config, run
from searchlet.model.environment import InMemoryEnvironment


@pytest.fixture
def reporter() -> Reporter:
    return Reporter(echo=False)


class TestBuildIndex:
    def test_members_off_by_default(self, widget_tree: InMemoryEnvironment) -> None:
        entries = build_index(widget_tree)
        assert not [e for e in entries if e.type in ("method", "variable")]

    def test_members_on(self, widget_tree: InMemoryEnvironment) -> None:
        entries = build_index(widget_tree, include_members=True)
        assert {e.type for e in entries} == {"module", "package", "type", "method", "variable"}


class TestGenerate:
    def test_writes_all_outputs(self, tmp_path: Path, single_method_tree: InMemoryEnvironment) -> None:
        config = SearchletConfig(
            output_directory=tmp_path / "out", javadoc_url="https://docs.example/api/", include_members=True
        )

        result = generate(config, single_method_tree)

        assert result.stats.total == 3
        assert result.stats.to_dict() == {
            "module": 0,
            "package": 1,
            "type": 1,
            "method": 1,
            "variable": 0,
        }
        index = json.loads((tmp_path / "out" / "index.json").read_text(encoding="utf-8"))
        assert [e["id"] for e in index] == [1, 2, 3]
        assert index[2]["link"] == "p/A.html#foo()"
        config_json = json.loads((tmp_path / "out" / "config.json").read_text(encoding="utf-8"))
        assert config_json == {"javadocUrl": "https://docs.example/api"}
        assert (tmp_path / "out" / "index.html").is_file()


class TestRun:
    """Pipeline results and failure modes."""

    def test_success(
        self, tmp_path: Path, single_method_tree: InMemoryEnvironment, reporter: Reporter
    ) -> None:
        out = tmp_path / "search"
        pairs = [
            ("-d", [str(out)]),
            ("-j", ["../javadoc"]),
            ("--include-members", ["true"]),
            ("-notimestamp", []),
        ]

        assert run(pairs, single_method_tree, reporter) is True
        assert reporter.diagnostics == []
        assert sorted(p.name for p in out.iterdir()) == ["config.json", "index.html", "index.json"]

    @pytest.mark.parametrize(
        ("pairs", "message"),
        [
            ([("--javadoc-url", ["https://x"])], "Missing output directory"),
            ([("--directory", ["OUT"])], "Missing javadoc url"),
            ([], "Missing output directory"),
        ],
    )
    def test_missing_required_option_fails_without_writing(
        self,
        tmp_path: Path,
        single_method_tree: InMemoryEnvironment,
        reporter: Reporter,
        pairs: list[tuple[str, list[str]]],
        message: str,
    ) -> None:
        """Missing options report an error and produce no files."""
        pairs = [(name, [str(tmp_path / "out") if a == "OUT" else a for a in args]) for name, args in pairs]

        with patch("searchlet.index.ops.build_index") as build:
            assert run(pairs, single_method_tree, reporter) is False
            build.assert_not_called()

        assert reporter.errors == [message]
        assert list(tmp_path.iterdir()) == []

    def test_output_failure_raises(
        self, tmp_path: Path, single_method_tree: InMemoryEnvironment, reporter: Reporter
    ) -> None:
        """Write failures are fatal, not reported."""
        blocker = tmp_path / "file"
        blocker.write_text("not a directory")
        pairs = [("-d", [str(blocker / "out")]), ("-j", ["x"])]

        with pytest.raises(OutputError):
            run(pairs, single_method_tree, reporter)
        assert reporter.diagnostics == []


class TestResolveConfig:
    def test_reports_unknown_option(self, reporter: Reporter) -> None:
        assert resolve_config([("--bogus", [])], reporter) is None
        assert reporter.errors == ["Unknown option: --bogus"]
