"""Tests for config models — defaults and sparse overrides."""

import pytest
from pydantic import ValidationError

from zonectl.config.models import McpConfig, StorageConfig, WorkspaceConfig


class TestStorageConfig:
    def test_defaults(self) -> None:
        cfg = StorageConfig()
        assert cfg.backend == "sqlite"
        assert cfg.db_path == ".zonectl/zonectl.db"

    def test_memory_backend(self) -> None:
        assert StorageConfig(backend="memory").backend == "memory"

    def test_unknown_backend_rejected(self) -> None:
        with pytest.raises(ValidationError):
            StorageConfig(backend="postgres")  # type: ignore[arg-type]

    def test_frozen(self) -> None:
        cfg = StorageConfig()
        with pytest.raises(ValidationError):
            cfg.backend = "memory"  # type: ignore[misc]


class TestWorkspaceConfig:
    def test_defaults(self) -> None:
        cfg = WorkspaceConfig()
        assert cfg.default_root is None
        assert cfg.multi_project is True

    def test_single_project(self) -> None:
        cfg = WorkspaceConfig.model_validate({"multi_project": False, "default_root": "src"})
        assert cfg.multi_project is False
        assert cfg.default_root == "src"


class TestMcpConfig:
    def test_defaults(self) -> None:
        cfg = McpConfig()
        assert cfg.transport == "stdio"
        assert cfg.host == "127.0.0.1"
        assert cfg.port == 8000

    def test_unknown_transport_rejected(self) -> None:
        with pytest.raises(ValidationError):
            McpConfig(transport="carrier-pigeon")  # type: ignore[arg-type]
