"""Tests for the pi-mdtable command line."""

from __future__ import annotations

import json
import logging

import pytest
from click.testing import CliRunner

from pi.mdtable import cli
from pi.mdtable.types import StructuralMismatch

TABLE = "|a|b|\n|:-|-:|\n|1|22|\n"

FORMATTED = "| a   |   b |\n|:----|----:|\n| 1   |  22 |\n"


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Keep the user's ~/.pi/mdtable.json out of the tests."""
    monkeypatch.setenv("PI_CONFIG_DIR", str(tmp_path))
    return tmp_path


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


class TestFormatting:
    """Successful runs write the formatted document and exit 0."""

    def test_stdin_to_stdout(self, runner: CliRunner) -> None:
        result = runner.invoke(cli.main, [], input=TABLE)
        assert result.exit_code == 0
        assert result.output == FORMATTED

    def test_file_argument(self, runner: CliRunner, tmp_path) -> None:
        path = tmp_path / "doc.md"
        path.write_text("Intro\n\n" + TABLE)
        result = runner.invoke(cli.main, [str(path)])
        assert result.exit_code == 0
        assert result.output == "Intro\n\n" + FORMATTED
        # Without --in-place the file is left alone.
        assert path.read_text() == "Intro\n\n" + TABLE

    def test_in_place(self, runner: CliRunner, tmp_path) -> None:
        path = tmp_path / "doc.md"
        path.write_text(TABLE)
        result = runner.invoke(cli.main, ["--in-place", str(path)])
        assert result.exit_code == 0
        assert result.output == ""
        assert path.read_text() == FORMATTED

    def test_line_selects_table(self, runner: CliRunner) -> None:
        doc = "|x|\n|-|\n\n" + TABLE
        result = runner.invoke(cli.main, ["--line", "5"], input=doc)
        assert result.exit_code == 0
        assert result.output == "|x|\n|-|\n\n" + FORMATTED

    def test_undecodable_bytes_round_trip(self, runner: CliRunner) -> None:
        doc = b"caf\xff\n\n|a|\n|-|\n"
        result = runner.invoke(cli.main, [], input=doc)
        assert result.exit_code == 0
        assert result.stdout_bytes == b"caf\xff\n\n| a   |\n|-----|\n"

    def test_config_file_min_width(self, runner: CliRunner, tmp_path) -> None:
        config_path = tmp_path / "custom.json"
        config_path.write_text(json.dumps({"minColumnWidth": 1}))
        result = runner.invoke(cli.main, ["--config", str(config_path)], input="|a|\n|-|\n")
        assert result.exit_code == 0
        assert result.output == "| a |\n|---|\n"

    def test_debug_traces_columns(self, runner: CliRunner, caplog) -> None:
        with caplog.at_level(logging.DEBUG):
            result = runner.invoke(cli.main, ["--debug"], input=TABLE)
        assert result.exit_code == 0
        assert "column 1: width=3 alignment=left" in caplog.text


class TestFailures:
    """Failures are reported on stderr with exit code 1."""

    def test_no_table(self, runner: CliRunner) -> None:
        result = runner.invoke(cli.main, [], input="just text\n")
        assert result.exit_code == 1
        assert "No table found" in result.output

    def test_line_outside_table(self, runner: CliRunner) -> None:
        result = runner.invoke(cli.main, ["--line", "1"], input="Intro\n\n" + TABLE)
        assert result.exit_code == 1
        assert "No table found at line 1" in result.output

    def test_line_must_be_positive(self, runner: CliRunner) -> None:
        result = runner.invoke(cli.main, ["--line", "0"], input=TABLE)
        assert result.exit_code != 0

    def test_formatting_error(self, runner: CliRunner, monkeypatch) -> None:
        def broken(*args, **kwargs):
            raise StructuralMismatch("invalid delimiter row: '| x |'")

        monkeypatch.setattr(cli, "format_document", broken)
        result = runner.invoke(cli.main, [], input=TABLE)
        assert result.exit_code == 1
        assert "Table contains a formatting error" in result.output

    def test_missing_file_is_a_usage_error(self, runner: CliRunner, tmp_path) -> None:
        result = runner.invoke(cli.main, [str(tmp_path / "missing.md")])
        assert result.exit_code == 2
        assert "does not exist" in result.output

    def test_in_place_needs_file(self, runner: CliRunner) -> None:
        result = runner.invoke(cli.main, ["--in-place"], input=TABLE)
        assert result.exit_code == 1
        assert "--in-place needs a FILE" in result.output
