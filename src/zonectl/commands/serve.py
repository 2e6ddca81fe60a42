"""serve — start the MCP server (requires the zonectl[mcp] extra)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from zonectl.commands._base import ZoneCommand

if TYPE_CHECKING:
    from zonectl.commands._context import AppContext


@click.command(
    cls=ZoneCommand,
    examples="""\
  # stdio transport, default
  zonectl serve

  # Streamable HTTP on a custom address
  zonectl serve --transport streamable-http --host 0.0.0.0 --port 9000""",
)
@click.option(
    "--transport",
    default=None,
    type=click.Choice(["stdio", "sse", "streamable-http"]),
    help="MCP transport protocol (default from config).",
)
@click.option("--host", default=None, help="Bind address (HTTP transports only).")
@click.option("--port", default=None, type=int, help="Listen port (HTTP transports only).")
@click.pass_obj
def serve(app: AppContext, transport: str | None, host: str | None, port: int | None) -> None:
    """Expose the blueprint operations as MCP tools."""
    from zonectl.mcp.server import create_server, mcp_available

    if not mcp_available:
        click.echo("MCP not installed. Install with: pip install zonectl[mcp]", err=True)
        raise SystemExit(1)

    mcp_config = app.settings.mcp
    server = create_server(
        app.workspace,
        host=host or mcp_config.host,
        port=port or mcp_config.port,
    )
    server.run(transport=transport or mcp_config.transport)
