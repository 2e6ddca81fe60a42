"""Root CLI group for zonectl with global flags and command registration."""

from __future__ import annotations

from typing import Any

import click

from zonectl import __version__
from zonectl.commands import register_commands
from zonectl.commands._context import AppContext
from zonectl.config.settings import ZonectlSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="zonectl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output (ids and paths only).")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logging.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option("--db", "db_path", default=None, help="SQLite database path (or :memory:).")
@click.option("--memory", is_flag=True, help="Use the in-memory store for this run.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    db_path: str | None,
    memory: bool,
) -> None:
    """zonectl — projects, zones and agents for codebase navigation."""
    storage: dict[str, Any] = {}
    if db_path:
        storage["db_path"] = db_path
    if memory:
        storage["backend"] = "memory"
    overrides: dict[str, Any] = {"storage": storage} if storage else {}

    settings = ZonectlSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        **overrides,
    )
    app = AppContext(settings)
    ctx.obj = app
    ctx.call_on_close(app.close)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
