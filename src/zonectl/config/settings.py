"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``ZONECTL_*`` prefix, ``__`` for nested sections
  3. TOML file    — ``zonectl.toml`` discovered via walk-up
  4. Code defaults — baked into the section models
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from zonectl.config.discovery import find_config
from zonectl.config.models import McpConfig, StorageConfig, WorkspaceConfig

MEMORY_DB = ":memory:"


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``zonectl.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            try:
                self._data = tomllib.loads(toml_path.read_text(encoding="utf-8"))
            except tomllib.TOMLDecodeError as exc:
                raise click.ClickException(f"Invalid TOML in {toml_path}: {exc}") from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# The TOML path must reach settings_customise_sources, a classmethod with
# a fixed signature; pass it per-thread during construction.
_tls = threading.local()


class ZonectlSettings(BaseSettings):
    """Unified settings for the CLI and the MCP server.

    Attributes:
        workspace_root: Directory holding ``zonectl.toml`` (or CWD).
            Relative ``db_path`` and ``default_root`` resolve against it.
        config_path: The TOML file in use, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "ZONECTL_",
        "env_nested_delimiter": "__",
    }

    workspace_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    storage: StorageConfig = Field(default_factory=StorageConfig)
    workspace: WorkspaceConfig = Field(default_factory=WorkspaceConfig)
    mcp: McpConfig = Field(default_factory=McpConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, getattr(_tls, "toml_path", None)),
        )

    @property
    def db_path(self) -> Path | str:
        """SQLite location; ``":memory:"`` passes through untouched."""
        raw = self.storage.db_path
        if raw == MEMORY_DB:
            return MEMORY_DB
        path = Path(raw).expanduser()
        return path if path.is_absolute() else self.workspace_root / path

    @property
    def default_root(self) -> str:
        """Fallback root for tree/pattern operations."""
        raw = self.workspace.default_root
        if not raw:
            return str(self.workspace_root)
        path = Path(raw).expanduser()
        return str(path if path.is_absolute() else self.workspace_root / path)

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        workspace_root: Path | None = None,
        **overrides: Any,
    ) -> ZonectlSettings:
        """Construct settings from a CLI invocation.

        Discovers ``zonectl.toml`` via walk-up (or explicit *config_path*),
        resolves *workspace_root* from the config file's parent directory,
        and merges *overrides* as highest-priority values.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(workspace_root)

        resolved_root = workspace_root
        if resolved_root is None:
            resolved_root = toml_path.parent if toml_path else Path.cwd()

        _tls.toml_path = toml_path
        try:
            return cls(workspace_root=resolved_root, config_path=toml_path, **overrides)
        finally:
            _tls.toml_path = None
