"""Shared pytest fixtures for zonectl tests."""

from __future__ import annotations

import os
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner
from sqlalchemy.engine import Engine

from zonectl.infrastructure.database.engine import init_database
from zonectl.infrastructure.workspace import Workspace
from zonectl.services.blueprint import BlueprintService


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's ZONECTL_* environment out of the tests."""
    for key in list(os.environ):
        if key.startswith("ZONECTL_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def source_root(tmp_path: Path) -> Path:
    """A small source tree to list and match against.

    Layout::

        repo/
          README.md
          cmd/server/main.go
          internal/app/app.go
          internal/app/app_test.go
          node_modules/react/index.js
    """
    root = tmp_path / "repo"
    (root / "cmd" / "server").mkdir(parents=True)
    (root / "internal" / "app").mkdir(parents=True)
    (root / "node_modules" / "react").mkdir(parents=True)
    (root / "README.md").write_text("# repo\n")
    (root / "cmd" / "server" / "main.go").write_text("package main\n")
    (root / "internal" / "app" / "app.go").write_text("package app\n")
    (root / "internal" / "app" / "app_test.go").write_text("package app\n")
    (root / "node_modules" / "react" / "index.js").write_text("module.exports = {}\n")
    return root


@pytest.fixture
def db_engine(tmp_path: Path) -> Generator[Engine]:
    """Initialized SQLite engine with all tables created."""
    engine = init_database(tmp_path / "zonectl.db")
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def workspace(source_root: Path) -> Workspace:
    """In-memory workspace whose default root is the sample tree."""
    return Workspace.in_memory(default_root=str(source_root))


@pytest.fixture
def service(workspace: Workspace) -> BlueprintService:
    return BlueprintService(workspace)


@pytest.fixture
def _isolated_workspace(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run the CLI from a temp directory so it opens an isolated database.

    Use via ``@pytest.mark.usefixtures("_isolated_workspace")``.
    """
    monkeypatch.chdir(tmp_path)
