"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, zonectl.toml only contains
overrides. An empty file (or none at all) is a valid configuration.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


class StorageConfig(BaseModel):
    """[storage] section."""

    model_config = {"frozen": True}

    backend: Literal["sqlite", "memory"] = "sqlite"
    db_path: str = ".zonectl/zonectl.db"


class WorkspaceConfig(BaseModel):
    """[workspace] section.

    ``default_root`` is the fallback root for tree and pattern operations
    when neither an explicit root nor a project is given. When unset, the
    workspace root (directory holding zonectl.toml, or CWD) is used.

    ``multi_project = false`` selects the single-project deployment: one
    implicit project rooted at the default root.
    """

    model_config = {"frozen": True}

    default_root: str | None = None
    multi_project: bool = True


class McpConfig(BaseModel):
    """[mcp] section."""

    model_config = {"frozen": True}

    transport: Literal["stdio", "sse", "streamable-http"] = "stdio"
    host: str = "127.0.0.1"
    port: int = 8000
