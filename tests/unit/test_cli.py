"""Tests for the enumkit CLI."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from enumkit.cli import app


@pytest.fixture
def cli_runner():
    """Return a CLI test runner."""
    return CliRunner()


@pytest.fixture
def enums_file(tmp_path: Path) -> Path:
    path = tmp_path / "enums.toml"
    path.write_text(
        """
[[enum]]
name = "Level"
kind = "number"
keys = ["LOW", "HIGH"]
offset = 1

[[enum]]
name = "Shape"
keys = ["POINT", "LINE"]
"""
    )
    return path


class TestShow:
    """enumkit show."""

    def test_show_table(self, cli_runner: CliRunner, enums_file: Path) -> None:
        result = cli_runner.invoke(app, ["show", str(enums_file)])
        assert result.exit_code == 0, result.output
        assert "Level" in result.output
        assert "HIGH" in result.output
        assert "POINT" in result.output

    def test_show_json(self, cli_runner: CliRunner, enums_file: Path) -> None:
        result = cli_runner.invoke(app, ["show", str(enums_file), "--json"])
        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)
        assert payload["Level"] == {"kind": "number", "entries": [["LOW", 1], ["HIGH", 2]]}
        assert payload["Shape"]["entries"] == [["POINT", "POINT"], ["LINE", "LINE"]]

    def test_show_single_enum(self, cli_runner: CliRunner, enums_file: Path) -> None:
        result = cli_runner.invoke(app, ["show", str(enums_file), "--enum", "Shape", "--json"])
        assert result.exit_code == 0, result.output
        assert list(json.loads(result.output)) == ["Shape"]

    def test_show_unknown_enum(self, cli_runner: CliRunner, enums_file: Path) -> None:
        result = cli_runner.invoke(app, ["show", str(enums_file), "--enum", "Nope"])
        assert result.exit_code == 1
        assert "No enum named 'Nope'" in result.output


class TestCheck:
    """enumkit check."""

    def test_check_ok(self, cli_runner: CliRunner, enums_file: Path) -> None:
        result = cli_runner.invoke(app, ["check", str(enums_file)])
        assert result.exit_code == 0, result.output
        assert "2 enum(s), 4 member(s)" in result.output

    def test_check_missing_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(app, ["check", str(tmp_path / "missing.toml")])
        assert result.exit_code == 1
        assert "No such file" in result.output

    def test_check_non_utf8_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "latin.toml"
        path.write_bytes(b"\xff\xfe[[enum]]")
        result = cli_runner.invoke(app, ["check", str(path)])
        assert result.exit_code == 1
        assert result.exception is None or isinstance(result.exception, SystemExit)
        assert "not UTF-8 text" in result.output

    def test_check_directory(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(app, ["check", str(tmp_path)])
        assert result.exit_code == 1
        assert result.exception is None or isinstance(result.exception, SystemExit)
        assert "cannot read file" in result.output

    def test_check_strict(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "dup.toml"
        path.write_text('[[enum]]\nname = "Dup"\nkind = "string"\nkeys = ["A", "A"]\n')
        assert cli_runner.invoke(app, ["check", str(path)]).exit_code == 0
        result = cli_runner.invoke(app, ["check", str(path), "--strict"])
        assert result.exit_code == 1
        assert "duplicate member name" in result.output


def test_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert "enumkit" in result.output
