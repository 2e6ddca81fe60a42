"""FastMCP server setup.

Optional extra, guarded behind try/except ImportError. Transport is
stdio by default; ``sse`` and ``streamable-http`` bind to *host*/*port*.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from zonectl.infrastructure.workspace import Workspace

mcp_available = False
_FastMCP: Any = None

try:
    from mcp.server.fastmcp import FastMCP as _FastMCP  # type: ignore[no-redef,import-not-found]

    mcp_available = True
except ImportError:
    pass

__all__ = ["create_server", "mcp_available"]


def create_server(
    workspace: Workspace | None = None,
    *,
    host: str = "127.0.0.1",
    port: int = 8000,
) -> Any:
    """Create the MCP server with every blueprint tool registered.

    Without *workspace*, settings are discovered from the current
    directory and the configured backend is opened.

    Raises RuntimeError if the mcp extra is not installed.
    """
    if not mcp_available or _FastMCP is None:
        msg = "MCP extra not installed. Install with: pip install zonectl[mcp]"
        raise RuntimeError(msg)

    from zonectl.mcp.tools import register_tools
    from zonectl.services.blueprint import BlueprintService

    if workspace is None:
        from zonectl.config.settings import ZonectlSettings
        from zonectl.infrastructure.workspace import Workspace

        workspace = Workspace.from_settings(ZonectlSettings.from_cli())

    server = _FastMCP("zonectl", host=host, port=port)
    register_tools(server, BlueprintService(workspace))
    return server
