"""Tests for the boxplay CLI commands."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from boxplay import __version__
from boxplay.cli.main import cli

DOCUMENT = {
    "title": "Flex basics",
    "snippets": [
        {"name": "row", "css": ".container { display: flex; }"},
        {"name": "five", "css": ".container { display: block; }", "item_count": 5},
    ],
}


@pytest.fixture()
def document(tmp_path: Path) -> Path:
    path = tmp_path / "playground.json"
    path.write_text(json.dumps(DOCUMENT), encoding="utf-8")
    return path


@pytest.fixture()
def broken(tmp_path: Path) -> Path:
    path = tmp_path / "broken.json"
    data = {"snippets": [{"css": "", "structure": "[2x]"}]}
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help_lists_commands(self) -> None:
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "inspect" in result.output
        assert "validate" in result.output

    def test_version(self) -> None:
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# validate command
# ---------------------------------------------------------------------------


class TestValidateCommand:
    def test_valid_document(self, document: Path) -> None:
        result = CliRunner().invoke(cli, ["validate", str(document)])
        assert result.exit_code == 0
        assert "OK: playground.json is valid" in result.output
        assert "2 snippet(s)" in result.output

    def test_malformed_structure(self, broken: Path) -> None:
        result = CliRunner().invoke(cli, ["validate", str(broken)])
        assert result.exit_code == 1
        assert "'x'" in result.output

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text("[", encoding="utf-8")
        result = CliRunner().invoke(cli, ["validate", str(path)])
        assert result.exit_code == 1

    def test_missing_file(self, tmp_path: Path) -> None:
        result = CliRunner().invoke(cli, ["validate", str(tmp_path / "nope.json")])
        assert result.exit_code != 0


# ---------------------------------------------------------------------------
# inspect command
# ---------------------------------------------------------------------------


class TestInspectCommand:
    def test_shows_snippets(self, document: Path) -> None:
        result = CliRunner().invoke(cli, ["inspect", str(document)])
        assert result.exit_code == 0
        assert "Editor 0: Flex basics [snippet]" in result.output
        assert "Snippet 0: row" in result.output
        assert "Snippet 1: five" in result.output
        assert "Structure: [5]" in result.output

    def test_shows_live_preview(self, document: Path) -> None:
        result = CliRunner().invoke(cli, ["inspect", str(document)])
        assert '<div class="container container1" style="display:flex;">' in result.output
        assert '<div class="item item5">5</div>' in result.output

    def test_shows_code_view(self, document: Path) -> None:
        result = CliRunner().invoke(cli, ["inspect", str(document)])
        assert ".container {" in result.output
        assert "display: block;" in result.output

    def test_malformed_structure(self, broken: Path) -> None:
        result = CliRunner().invoke(cli, ["inspect", str(broken)])
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_verbose_flag(self, document: Path) -> None:
        result = CliRunner().invoke(cli, ["--verbose", "inspect", str(document)])
        assert result.exit_code == 0

    def test_free_mode_shows_first_snippet_only(self, tmp_path: Path) -> None:
        path = tmp_path / "free.json"
        data = {"mode": "free", "snippets": [{"name": "main", "css": ""}, {"name": "extra", "css": ""}]}
        path.write_text(json.dumps(data), encoding="utf-8")
        result = CliRunner().invoke(cli, ["inspect", str(path)])
        assert result.exit_code == 0
        assert "Snippet 0: main" in result.output
        assert "extra" not in result.output
