"""Tests for the cssmap CLI commands."""
from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from cssmap import __version__
from cssmap.cli.main import cli

FIXTURES = Path(__file__).parent.parent / "fixtures"


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


def _fixture(name: str) -> str:
    return str(FIXTURES / name)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "parse stylesheets" in result.output

    def test_lists_commands(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--help"])
        for command in ("parse", "validate", "inspect", "comments", "tokens"):
            assert command in result.output

    def test_version(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# parse
# ---------------------------------------------------------------------------


class TestParseCommand:
    def test_json_output(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["parse", _fixture("merge.css")])
        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "a": {"color": "blue", "text-decoration": "none"},
            ".button": {"padding": "4px"},
        }

    def test_text_output(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["parse", "--format", "text", _fixture("basic.css")])
        assert result.exit_code == 0
        assert "#main (id)" in result.output
        assert "  border: 1px solid black" in result.output

    def test_syntax_error(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["parse", _fixture("broken.css")])
        assert result.exit_code == 1
        assert "Parse error: line 4: rule block ends without a beginning" in result.output

    def test_keep_comments(self, runner: CliRunner, tmp_path: Path) -> None:
        css = tmp_path / "c.css"
        css.write_text("/* x: y; */\na { b: c; }\n")
        assert runner.invoke(cli, ["parse", str(css)]).exit_code == 0
        result = runner.invoke(cli, ["parse", "--keep-comments", str(css)])
        assert result.exit_code == 1

    def test_missing_file(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["parse", "does-not-exist.css"])
        assert result.exit_code != 0


# ---------------------------------------------------------------------------
# validate
# ---------------------------------------------------------------------------


class TestValidateCommand:
    def test_clean_file(self, runner: CliRunner, tmp_path: Path) -> None:
        css = tmp_path / "ok.css"
        css.write_text("a { color: red; width: 10px; }\n")
        result = runner.invoke(cli, ["validate", str(css)])
        assert result.exit_code == 0
        assert "OK: ok.css is valid" in result.output

    def test_errors_exit_nonzero(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["validate", _fixture("invalid_values.css")])
        assert result.exit_code == 1
        assert "Summary: 1 error(s), 1 warning(s), 1 info" in result.output
        assert "ERROR [.box { color }]" in result.output

    def test_warnings_only(self, runner: CliRunner, tmp_path: Path) -> None:
        css = tmp_path / "warn.css"
        css.write_text("a { colour: red; }\n")
        result = runner.invoke(cli, ["validate", str(css)])
        assert result.exit_code == 0
        assert "WARNING" in result.output


# ---------------------------------------------------------------------------
# inspect / comments / tokens
# ---------------------------------------------------------------------------


class TestInspectCommand:
    def test_summary(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["inspect", _fixture("basic.css")])
        assert result.exit_code == 0
        assert "Blocks:   3" in result.output
        assert "Rules:    3" in result.output
        assert "Comments: 2" in result.output
        assert "Licenses: 1" in result.output
        assert ".header" in result.output

    def test_repeated_selector_flagged(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["inspect", _fixture("merge.css")])
        assert result.exit_code == 0
        assert "Blocks:   3" in result.output
        assert "repeated" in result.output
        assert "  .button" in result.output

    def test_repeated_identifier_counted(self, runner: CliRunner, tmp_path: Path) -> None:
        css = tmp_path / "p.css"
        css.write_text("body {} p {} p {}\n")
        result = runner.invoke(cli, ["inspect", str(css)])
        assert result.exit_code == 0
        assert "  p (x2)" in result.output
        assert "  body\n" not in result.output.split("Identifiers:")[1]


class TestCommentsCommand:
    def test_all_comments(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["comments", _fixture("basic.css")])
        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "/*! cssmap test fixture | MIT License */",
            "/* page header */",
        ]

    def test_licenses_only(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["comments", "--licenses", _fixture("basic.css")])
        assert result.output.splitlines() == ["/*! cssmap test fixture | MIT License */"]


class TestTokensCommand:
    def test_dump(self, runner: CliRunner, tmp_path: Path) -> None:
        css = tmp_path / "t.css"
        css.write_text("a {\n  b: c;\n}\n")
        result = runner.invoke(cli, ["tokens", str(css)])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert len(lines) == 7
        assert "BLOCK_START" in lines[1]
        assert lines[2].split() == ["2", "VALUE", "b"]
