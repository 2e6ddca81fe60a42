"""Workspace — the single dependency injected into every service.

Owns the storage backend and the filesystem ports. The backend is chosen
by ``settings.storage.backend``:

- ``"sqlite"``: SQL repositories over one SQLAlchemy engine at
  ``settings.db_path`` (created on first use).
- ``"memory"``: map-backed repositories; state dies with the process.

Services only see the port types; nothing outside this module knows
which backend is active.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from zonectl.infrastructure.filesystem import FilesystemPathMatcher, FilesystemTreeLister
from zonectl.infrastructure.memory import (
    MemoryAgentRepository,
    MemoryProjectRepository,
    MemoryZoneRepository,
)

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

    from zonectl.config.settings import ZonectlSettings
    from zonectl.domain.ports import (
        AgentRepository,
        PathMatcher,
        ProjectRepository,
        TreeLister,
        ZoneRepository,
    )

logger = logging.getLogger(__name__)


class Workspace:
    """Repository and filesystem ports plus the root-resolution defaults."""

    def __init__(
        self,
        *,
        projects: ProjectRepository,
        zones: ZoneRepository,
        agents: AgentRepository,
        tree_lister: TreeLister,
        path_matcher: PathMatcher,
        default_root: str = "",
        multi_project: bool = True,
        engine: Engine | None = None,
    ) -> None:
        self.projects = projects
        self.zones = zones
        self.agents = agents
        self.tree_lister = tree_lister
        self.path_matcher = path_matcher
        self.default_root = default_root
        self.multi_project = multi_project
        self._engine = engine

    @classmethod
    def from_settings(cls, settings: ZonectlSettings) -> Workspace:
        """Open the backend selected by *settings*."""
        common = {
            "tree_lister": FilesystemTreeLister(),
            "path_matcher": FilesystemPathMatcher(),
            "default_root": settings.default_root,
            "multi_project": settings.workspace.multi_project,
        }
        if settings.storage.backend == "memory":
            logger.debug("Using in-memory storage")
            return cls.in_memory(**common)

        from zonectl.infrastructure.database.engine import init_database
        from zonectl.infrastructure.repositories import (
            SqlAgentRepository,
            SqlProjectRepository,
            SqlZoneRepository,
        )

        logger.debug("Opening database at %s", settings.db_path)
        engine = init_database(settings.db_path)
        return cls(
            projects=SqlProjectRepository(engine),
            zones=SqlZoneRepository(engine),
            agents=SqlAgentRepository(engine),
            engine=engine,
            **common,
        )

    @classmethod
    def in_memory(
        cls,
        *,
        default_root: str = "",
        multi_project: bool = True,
        tree_lister: TreeLister | None = None,
        path_matcher: PathMatcher | None = None,
    ) -> Workspace:
        """Workspace over fresh in-memory repositories."""
        return cls(
            projects=MemoryProjectRepository(),
            zones=MemoryZoneRepository(),
            agents=MemoryAgentRepository(),
            tree_lister=tree_lister or FilesystemTreeLister(),
            path_matcher=path_matcher or FilesystemPathMatcher(),
            default_root=default_root,
            multi_project=multi_project,
        )

    @property
    def engine(self) -> Engine | None:
        """The SQLAlchemy engine, or None for the memory backend."""
        return self._engine

    def close(self) -> None:
        """Dispose the database engine, if any."""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
