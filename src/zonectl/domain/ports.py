"""Repository and filesystem port contracts.

The service layer depends only on these ABCs, never on a concrete store.
Two storage implementations exist: in-memory
(:mod:`zonectl.infrastructure.memory`) and SQLite
(:mod:`zonectl.infrastructure.repositories`). Filesystem ports are
implemented in :mod:`zonectl.infrastructure.filesystem`.

Conventions shared by every implementation:

- Reads return independent copies; mutating a returned value never
  changes stored state.
- ``update`` treats an empty ``name`` (and, for projects, an empty
  ``root_dir``) as "leave unchanged". Collection arguments replace the
  stored collection wholesale.
- Only ``add_ignored_path``, ``remove_ignored_path`` and ``assign_path``
  edit collections element-wise; adds are idempotent and keep insertion
  order.
- Failures are raised as :class:`~zonectl.domain.errors.BlueprintError`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from zonectl.domain.models import Agent, AgentRef, Project, TreeNode, Zone


class ProjectRepository(ABC):
    """Storage contract for projects."""

    @abstractmethod
    def get(self, project_id: str) -> Project | None:
        """Return the project, or None if absent."""

    @abstractmethod
    def list(self) -> list[Project]:
        """Return every project in insertion order."""

    @abstractmethod
    def create(self, name: str, root_dir: str) -> Project:
        """Create a project. Raises ``INVALID_ROOT`` when *root_dir* is empty."""

    @abstractmethod
    def update(self, project_id: str, name: str, root_dir: str) -> Project:
        """Partially update a project. Raises ``PROJECT_NOT_FOUND``."""

    @abstractmethod
    def delete(self, project_id: str) -> None:
        """Delete the project record only. Raises ``PROJECT_NOT_FOUND``."""

    @abstractmethod
    def add_ignored_path(self, project_id: str, path: str) -> Project:
        """Append a normalized path to the ignore list if not present.

        Raises ``INVALID_PATH`` (empty after normalization) or
        ``PROJECT_NOT_FOUND``.
        """

    @abstractmethod
    def remove_ignored_path(self, project_id: str, path: str) -> Project:
        """Remove a normalized path from the ignore list.

        Raises ``INVALID_PATH`` (empty after normalization) or
        ``PROJECT_NOT_FOUND``.
        """


class ZoneRepository(ABC):
    """Storage contract for zones."""

    @abstractmethod
    def get(self, zone_id: str) -> Zone | None:
        """Return the zone, or None if absent."""

    @abstractmethod
    def list_by_project(self, project_id: str) -> list[Zone]:
        """Return the project's zones in insertion order."""

    @abstractmethod
    def create(
        self,
        project_id: str,
        name: str,
        pattern: str,
        purpose: str,
        constraints: Sequence[str],
        agents: Sequence[AgentRef],
    ) -> Zone:
        """Create a zone with no explicit paths. Raises ``INVALID_NAME``."""

    @abstractmethod
    def update(
        self,
        zone_id: str,
        name: str,
        pattern: str,
        purpose: str,
        constraints: Sequence[str],
        agents: Sequence[AgentRef],
    ) -> Zone:
        """Update a zone. Raises ``ZONE_NOT_FOUND``.

        Empty *name* keeps the current name; every other field is replaced.
        """

    @abstractmethod
    def assign_path(self, zone_id: str, path: str) -> Zone:
        """Append *path* to the explicit paths if absent. Raises ``ZONE_NOT_FOUND``."""

    @abstractmethod
    def delete_by_project(self, project_id: str) -> int:
        """Delete every zone of the project; returns how many were removed."""


class AgentRepository(ABC):
    """Storage contract for agents."""

    @abstractmethod
    def get(self, agent_id: str) -> Agent | None:
        """Return the agent, or None if absent."""

    @abstractmethod
    def list(self) -> list[Agent]:
        """Return every agent in insertion order."""

    @abstractmethod
    def create(self, name: str, description: str, prompt: str) -> Agent:
        """Create an agent."""

    @abstractmethod
    def update(self, agent_id: str, name: str, description: str, prompt: str) -> Agent:
        """Replace the agent's fields. Raises ``AGENT_NOT_FOUND``."""

    @abstractmethod
    def delete(self, agent_id: str) -> None:
        """Delete the agent record. Raises ``AGENT_NOT_FOUND``."""


class TreeLister(ABC):
    """Builds a directory tree below a root."""

    @abstractmethod
    def list_tree(self, root: str) -> TreeNode:
        """Raises ``ROOT_UNREADABLE`` when *root* is missing or not a directory."""


class PathMatcher(ABC):
    """Lists relative paths below a root matching a regex."""

    @abstractmethod
    def list_matching_paths(self, root: str, pattern: str) -> list[str]:
        """Raises ``ROOT_UNREADABLE`` or ``INVALID_PATTERN``."""
