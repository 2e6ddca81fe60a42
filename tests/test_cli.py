"""Tests for the root zonectl CLI."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from zonectl import __version__
from zonectl.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "zonectl" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


@pytest.mark.usefixtures("_isolated_workspace")
def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


# --- Global flags ---


@pytest.mark.parametrize(
    "flags",
    [
        ["--json"],
        ["-q"],
        ["-v"],
        ["--log-json"],
        ["--memory"],
        ["--db", "/tmp/zonectl-test.db"],
        ["-c", "/tmp/test.toml"],
    ],
)
def test_global_flags_accepted(cli_runner: CliRunner, flags: list[str]) -> None:
    result = cli_runner.invoke(cli, [*flags, "--version"])
    assert result.exit_code == 0


# --- Command registration ---

EXPECTED_GROUPS = ["project", "zone", "agent"]
EXPECTED_COMMANDS = ["tree", "match", "serve"]


@pytest.mark.parametrize("name", EXPECTED_GROUPS + EXPECTED_COMMANDS)
def test_command_registered(cli_runner: CliRunner, name: str) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert name in result.output
    assert name in cli.commands  # type: ignore[attr-defined]


# --- Storage selection ---


@pytest.mark.usefixtures("_isolated_workspace")
class TestStorageFlags:
    def test_memory_does_not_persist(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["--memory", "--json", "project", "create", "/tmp/x"])
        assert result.exit_code == 0
        result = cli_runner.invoke(cli, ["--memory", "-q", "project", "list"])
        assert result.output.strip() == ""
        assert not (tmp_path / ".zonectl").exists()

    def test_db_flag(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        db = tmp_path / "custom" / "blueprints.db"
        result = cli_runner.invoke(cli, ["--db", str(db), "project", "create", "/tmp/x"])
        assert result.exit_code == 0
        assert db.is_file()
        result = cli_runner.invoke(cli, ["--db", str(db), "-q", "project", "list"])
        assert len(result.output.split()) == 1

    def test_config_file_selects_backend(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        config = tmp_path / "alt.toml"
        config.write_text('[storage]\ndb_path = "alt.db"\n')
        result = cli_runner.invoke(cli, ["-c", str(config), "project", "create", "/tmp/x"])
        assert result.exit_code == 0
        assert (tmp_path / "alt.db").is_file()

    def test_single_project_mode(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "zonectl.toml").write_text("[workspace]\nmulti_project = false\n")
        result = cli_runner.invoke(cli, ["--json", "zone", "create", "backend"])
        assert result.exit_code == 0, result.output
        zone = json.loads(result.output)["data"]["zone"]

        result = cli_runner.invoke(cli, ["--json", "project", "list"])
        projects = json.loads(result.output)["data"]["projects"]
        assert len(projects) == 1
        assert projects[0]["id"] == zone["project_id"]
        assert projects[0]["root_dir"] == str(tmp_path.resolve())
