"""Tests for the --examples flag on CLI commands."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from zonectl.cli import cli

# (CLI args, expected keywords in output)
EXAMPLES_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["project", "--examples"], ["zonectl project create"]),
    (["project", "list", "--examples"], ["zonectl -q project list"]),
    (["project", "show", "--examples"], ["zonectl project show"]),
    (["project", "create", "--examples"], ["--name shop"]),
    (["project", "update", "--examples"], ["--root"]),
    (["project", "delete", "--examples"], ["--yes"]),
    (["project", "ignore", "--examples"], ["node_modules"]),
    (["project", "unignore", "--examples"], ["zonectl project unignore"]),
    (["zone", "--examples"], ["zonectl zone create"]),
    (["zone", "list", "--examples"], ["zonectl zone list"]),
    (["zone", "show", "--examples"], ["zonectl zone show"]),
    (["zone", "create", "--examples"], ["--constraint"]),
    (["zone", "update", "--examples"], ["zonectl zone update"]),
    (["zone", "assign", "--examples"], ["zonectl zone assign"]),
    (["zone", "highlights", "--examples"], ["zonectl zone highlights"]),
    (["agent", "--examples"], ["zonectl agent create"]),
    (["agent", "create", "--examples"], ["--prompt-file"]),
    (["agent", "update", "--examples"], ["--description"]),
    (["agent", "delete", "--examples"], ["--yes"]),
    (["tree", "--examples"], ["zonectl tree"]),
    (["match", "--examples"], ["zonectl match"]),
    (["serve", "--examples"], ["zonectl serve"]),
]


@pytest.mark.usefixtures("_isolated_workspace")
class TestExamplesFlag:
    @pytest.mark.parametrize(
        ("args", "keywords"),
        EXAMPLES_COMMANDS,
        ids=[" ".join(a[:-1]) for a, _ in EXAMPLES_COMMANDS],
    )
    def test_examples_output(
        self, cli_runner: CliRunner, args: list[str], keywords: list[str]
    ) -> None:
        result = cli_runner.invoke(cli, args)
        assert result.exit_code == 0, result.output
        assert "Examples for" in result.output
        for keyword in keywords:
            assert keyword in result.output

    def test_examples_not_in_help(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["zone", "create", "--help"])
        assert result.exit_code == 0
        assert "--examples" in result.output
        assert "zonectl zone create backend" not in result.output
