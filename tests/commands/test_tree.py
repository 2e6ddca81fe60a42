"""Tests for the tree and match commands."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from zonectl.cli import cli


@pytest.fixture
def project_id(cli_runner: CliRunner, source_root: Path, _isolated_workspace: None) -> str:
    result = cli_runner.invoke(cli, ["--json", "project", "create", str(source_root)])
    assert result.exit_code == 0, result.output
    return json.loads(result.output)["data"]["project"]["id"]


class TestTreeCommand:
    def test_project_tree(self, cli_runner: CliRunner, project_id: str) -> None:
        result = cli_runner.invoke(cli, ["tree", "-p", project_id])
        assert result.exit_code == 0
        assert "cmd/" in result.output
        assert "main.go" in result.output
        assert "node_modules/" in result.output

    def test_hide_ignored(self, cli_runner: CliRunner, project_id: str) -> None:
        cli_runner.invoke(cli, ["project", "ignore", "node_modules", "-p", project_id])
        result = cli_runner.invoke(cli, ["tree", "-p", project_id, "--hide-ignored"])
        assert result.exit_code == 0
        assert "node_modules" not in result.output
        assert "index.js" not in result.output

    def test_explicit_root(
        self, cli_runner: CliRunner, source_root: Path, _isolated_workspace: None
    ) -> None:
        result = cli_runner.invoke(cli, ["--memory", "tree", "--root", str(source_root)])
        assert result.exit_code == 0
        assert "README.md" in result.output

    def test_quiet_lists_paths(self, cli_runner: CliRunner, project_id: str) -> None:
        result = cli_runner.invoke(cli, ["-q", "tree", "-p", project_id])
        assert result.exit_code == 0
        assert "cmd/server/main.go" in result.output.splitlines()

    def test_unreadable_root(self, cli_runner: CliRunner, _isolated_workspace: None) -> None:
        result = cli_runner.invoke(cli, ["--memory", "tree", "--root", "/nonexistent"])
        assert result.exit_code == 1
        assert "ROOT_UNREADABLE" in result.output


class TestMatchCommand:
    def test_match(self, cli_runner: CliRunner, project_id: str) -> None:
        result = cli_runner.invoke(cli, ["--json", "match", r"\.go$", "-p", project_id])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert sorted(data["data"]["paths"]) == [
            "cmd/server/main.go",
            "internal/app/app.go",
            "internal/app/app_test.go",
        ]
        assert data["meta"] == {"count": 3}

    def test_default_root_is_workspace(
        self, cli_runner: CliRunner, tmp_path: Path, _isolated_workspace: None
    ) -> None:
        (tmp_path / "notes.txt").write_text("x")
        result = cli_runner.invoke(cli, ["--memory", "-q", "match", r"^notes\.txt$"])
        assert result.exit_code == 0
        assert result.output.strip() == "notes.txt"

    def test_invalid_pattern(self, cli_runner: CliRunner, _isolated_workspace: None) -> None:
        result = cli_runner.invoke(cli, ["--memory", "match", "["])
        assert result.exit_code == 1
        assert "INVALID_PATTERN" in result.output
