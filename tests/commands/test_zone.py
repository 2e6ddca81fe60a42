"""Tests for the zone command group."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from zonectl.cli import cli


def _json(runner: CliRunner, *args: str) -> dict[str, Any]:
    result = runner.invoke(cli, ["--json", *args])
    assert result.exit_code == 0, result.output
    return json.loads(result.output)


@pytest.fixture
def project_id(cli_runner: CliRunner, source_root: Path, _isolated_workspace: None) -> str:
    data = _json(cli_runner, "project", "create", str(source_root), "--name", "app")
    return data["data"]["project"]["id"]


@pytest.fixture
def agent_id(cli_runner: CliRunner, _isolated_workspace: None) -> str:
    data = _json(cli_runner, "agent", "create", "reviewer", "--prompt", "Review Go code.")
    return data["data"]["agent"]["id"]


class TestZoneCommands:
    def test_create_and_show(self, cli_runner: CliRunner, project_id: str) -> None:
        data = _json(
            cli_runner,
            "zone",
            "create",
            "backend",
            "-p",
            project_id,
            "--pattern",
            "cmd/.*",
            "--constraint",
            "no globals",
            "--constraint",
            "tests required",
        )
        zone = data["data"]["zone"]
        assert zone["project_id"] == project_id
        assert zone["constraints"] == ["no globals", "tests required"]

        result = cli_runner.invoke(cli, ["zone", "show", zone["id"]])
        assert result.exit_code == 0
        assert "backend" in result.output
        assert "cmd/.*" in result.output

    def test_create_with_agent(
        self, cli_runner: CliRunner, project_id: str, agent_id: str
    ) -> None:
        data = _json(cli_runner, "zone", "create", "api", "-p", project_id, "--agent", agent_id)
        assert data["data"]["zone"]["assigned_agents"] == [{"id": agent_id, "name": "reviewer"}]

    def test_create_with_unknown_agent(self, cli_runner: CliRunner, project_id: str) -> None:
        result = cli_runner.invoke(
            cli, ["zone", "create", "api", "-p", project_id, "--agent", "missing"]
        )
        assert result.exit_code == 1
        assert "AGENT_NOT_FOUND" in result.output

    def test_create_in_unknown_project(
        self, cli_runner: CliRunner, _isolated_workspace: None
    ) -> None:
        result = cli_runner.invoke(cli, ["zone", "create", "api", "-p", "missing"])
        assert result.exit_code == 1
        assert "PROJECT_NOT_FOUND" in result.output

    def test_list(self, cli_runner: CliRunner, project_id: str) -> None:
        _json(cli_runner, "zone", "create", "one", "-p", project_id)
        _json(cli_runner, "zone", "create", "two", "-p", project_id)
        result = cli_runner.invoke(cli, ["zone", "list", "-p", project_id])
        assert result.exit_code == 0
        assert "one" in result.output
        assert "2 zones" in result.output

    def test_update_keeps_omitted_fields(
        self, cli_runner: CliRunner, project_id: str, agent_id: str
    ) -> None:
        zone = _json(
            cli_runner,
            "zone",
            "create",
            "api",
            "-p",
            project_id,
            "--pattern",
            "^api/",
            "--purpose",
            "public surface",
            "--constraint",
            "stable",
            "--agent",
            agent_id,
        )["data"]["zone"]

        updated = _json(cli_runner, "zone", "update", zone["id"], "--pattern", "^v2/")["data"][
            "zone"
        ]
        assert updated["name"] == "api"
        assert updated["pattern"] == "^v2/"
        assert updated["purpose"] == "public surface"
        assert updated["constraints"] == ["stable"]
        assert updated["assigned_agents"] == [{"id": agent_id, "name": "reviewer"}]

    def test_update_clear_flags(
        self, cli_runner: CliRunner, project_id: str, agent_id: str
    ) -> None:
        zone = _json(
            cli_runner,
            "zone",
            "create",
            "api",
            "-p",
            project_id,
            "--constraint",
            "stable",
            "--agent",
            agent_id,
        )["data"]["zone"]
        updated = _json(
            cli_runner, "zone", "update", zone["id"], "--clear-constraints", "--clear-agents"
        )["data"]["zone"]
        assert updated["constraints"] == []
        assert updated["assigned_agents"] == []

    def test_update_missing(self, cli_runner: CliRunner, _isolated_workspace: None) -> None:
        result = cli_runner.invoke(cli, ["zone", "update", "missing", "--name", "x"])
        assert result.exit_code == 1
        assert "ZONE_NOT_FOUND" in result.output

    def test_assign(self, cli_runner: CliRunner, project_id: str) -> None:
        zone = _json(cli_runner, "zone", "create", "backend", "-p", project_id)["data"]["zone"]
        _json(cli_runner, "zone", "assign", zone["id"], "/cmd/server/")
        data = _json(cli_runner, "zone", "assign", zone["id"], "cmd/server")
        assert data["data"]["zone"]["explicit_paths"] == ["cmd/server"]

    def test_highlights(self, cli_runner: CliRunner, project_id: str) -> None:
        _json(cli_runner, "zone", "create", "docs", "-p", project_id, "--pattern", r"\.md$")
        _json(cli_runner, "zone", "create", "broken", "-p", project_id, "--pattern", "[")

        data = _json(cli_runner, "zone", "highlights", "-p", project_id)
        assert data["data"]["paths"] == {"README.md": ["docs"]}
        assert len(data["warnings"]) == 1

        result = cli_runner.invoke(cli, ["zone", "highlights", "-p", project_id])
        assert result.exit_code == 0
        assert "README.md" in result.output
        assert "WARNING: Zone 'broken' skipped" in result.output
