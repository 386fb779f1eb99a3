"""Tests for the codzilla-mcp command line."""

import json
from pathlib import Path

import pytest

from codzilla_mcp.cli import main


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("CODZILLA_PROJECT_ROOT", raising=False)
    monkeypatch.delenv("CODZILLA_COMPONENTS_DIR", raising=False)


def run_cli(monkeypatch: pytest.MonkeyPatch, *args: str) -> int:
    monkeypatch.setattr("sys.argv", ["codzilla-mcp", *args])
    return main()


class TestCli:
    def test_tokens(self, monkeypatch, capsys):
        assert run_cli(monkeypatch, "tokens") == 0
        tokens = json.loads(capsys.readouterr().out)
        assert tokens["colors"]["error"] == "#ef4444"

    def test_components_json(self, monkeypatch, capsys, project_root: Path):
        code = run_cli(
            monkeypatch,
            "components",
            "--directory",
            str(project_root),
            "--category",
            "layout",
            "--json",
        )
        assert code == 0
        components = json.loads(capsys.readouterr().out)
        assert [c["name"] for c in components] == ["Header"]

    def test_show(self, monkeypatch, capsys, project_root: Path):
        code = run_cli(
            monkeypatch,
            "show",
            "--name",
            "button",
            "--directory",
            str(project_root),
        )
        assert code == 0
        record = json.loads(capsys.readouterr().out)
        assert record["dependencies"] == ["react", "clsx"]

    def test_show_missing(self, monkeypatch, capsys, project_root: Path):
        code = run_cli(
            monkeypatch,
            "show",
            "--name",
            "Nope",
            "--directory",
            str(project_root),
        )
        assert code == 1
        assert "Component Nope not found" in capsys.readouterr().err

    def test_unknown_command(self, monkeypatch):
        assert run_cli(monkeypatch, "explode") != 0
