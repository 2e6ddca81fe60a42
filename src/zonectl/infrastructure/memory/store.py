"""Map-backed repositories for tests, embedding, and ``--memory`` runs.

INVARIANT: Clone on every boundary crossing. Values are deep-copied when
they enter storage and again when they leave, so no caller ever holds a
reference into the store. Each entity kind has its own
:class:`ReadWriteLock`, so project writes never block zone reads.
"""

from __future__ import annotations

from collections.abc import Sequence

from zonectl.domain.errors import BlueprintError, ErrorCode
from zonectl.domain.ids import generate_id
from zonectl.domain.models import Agent, AgentRef, Project, Zone
from zonectl.domain.paths import require_path
from zonectl.domain.ports import AgentRepository, ProjectRepository, ZoneRepository
from zonectl.infrastructure.memory.lock import ReadWriteLock


def _copy_refs(agents: Sequence[AgentRef]) -> list[AgentRef]:
    return [AgentRef(id=a.id, name=a.name) for a in agents]


class MemoryProjectRepository(ProjectRepository):
    """In-memory :class:`ProjectRepository`."""

    def __init__(self) -> None:
        self._lock = ReadWriteLock()
        self._projects: dict[str, Project] = {}

    def get(self, project_id: str) -> Project | None:
        with self._lock.read():
            project = self._projects.get(project_id)
            return project.model_copy(deep=True) if project is not None else None

    def list(self) -> list[Project]:
        with self._lock.read():
            return [p.model_copy(deep=True) for p in self._projects.values()]

    def create(self, name: str, root_dir: str) -> Project:
        if not root_dir:
            raise BlueprintError(ErrorCode.INVALID_ROOT, "project root directory is required")
        project = Project(id=generate_id(), name=name, root_dir=root_dir, ignored_paths=[])
        with self._lock.write():
            self._projects[project.id] = project
            return project.model_copy(deep=True)

    def update(self, project_id: str, name: str, root_dir: str) -> Project:
        with self._lock.write():
            project = self._require(project_id)
            if name:
                project.name = name
            if root_dir:
                project.root_dir = root_dir
            return project.model_copy(deep=True)

    def delete(self, project_id: str) -> None:
        with self._lock.write():
            self._require(project_id)
            del self._projects[project_id]

    def add_ignored_path(self, project_id: str, path: str) -> Project:
        path = require_path(path)
        with self._lock.write():
            project = self._require(project_id)
            if path not in project.ignored_paths:
                project.ignored_paths.append(path)
            return project.model_copy(deep=True)

    def remove_ignored_path(self, project_id: str, path: str) -> Project:
        path = require_path(path)
        with self._lock.write():
            project = self._require(project_id)
            project.ignored_paths = [p for p in project.ignored_paths if p != path]
            return project.model_copy(deep=True)

    def _require(self, project_id: str) -> Project:
        project = self._projects.get(project_id)
        if project is None:
            raise BlueprintError.project_not_found(project_id)
        return project


class MemoryZoneRepository(ZoneRepository):
    """In-memory :class:`ZoneRepository`."""

    def __init__(self) -> None:
        self._lock = ReadWriteLock()
        self._zones: dict[str, Zone] = {}

    def get(self, zone_id: str) -> Zone | None:
        with self._lock.read():
            zone = self._zones.get(zone_id)
            return zone.model_copy(deep=True) if zone is not None else None

    def list_by_project(self, project_id: str) -> list[Zone]:
        with self._lock.read():
            return [
                z.model_copy(deep=True) for z in self._zones.values() if z.project_id == project_id
            ]

    def create(
        self,
        project_id: str,
        name: str,
        pattern: str,
        purpose: str,
        constraints: Sequence[str],
        agents: Sequence[AgentRef],
    ) -> Zone:
        if not name:
            raise BlueprintError(ErrorCode.INVALID_NAME, "zone name is required")
        zone = Zone(
            id=generate_id(),
            project_id=project_id,
            name=name,
            pattern=pattern,
            purpose=purpose,
            constraints=list(constraints),
            assigned_agents=_copy_refs(agents),
            explicit_paths=[],
        )
        with self._lock.write():
            self._zones[zone.id] = zone
            return zone.model_copy(deep=True)

    def update(
        self,
        zone_id: str,
        name: str,
        pattern: str,
        purpose: str,
        constraints: Sequence[str],
        agents: Sequence[AgentRef],
    ) -> Zone:
        with self._lock.write():
            zone = self._require(zone_id)
            if name:
                zone.name = name
            zone.pattern = pattern
            zone.purpose = purpose
            zone.constraints = list(constraints)
            zone.assigned_agents = _copy_refs(agents)
            return zone.model_copy(deep=True)

    def assign_path(self, zone_id: str, path: str) -> Zone:
        with self._lock.write():
            zone = self._require(zone_id)
            if path not in zone.explicit_paths:
                zone.explicit_paths.append(path)
            return zone.model_copy(deep=True)

    def delete_by_project(self, project_id: str) -> int:
        with self._lock.write():
            doomed = [zid for zid, z in self._zones.items() if z.project_id == project_id]
            for zid in doomed:
                del self._zones[zid]
            return len(doomed)

    def _require(self, zone_id: str) -> Zone:
        zone = self._zones.get(zone_id)
        if zone is None:
            raise BlueprintError.zone_not_found(zone_id)
        return zone


class MemoryAgentRepository(AgentRepository):
    """In-memory :class:`AgentRepository`."""

    def __init__(self) -> None:
        self._lock = ReadWriteLock()
        self._agents: dict[str, Agent] = {}

    def get(self, agent_id: str) -> Agent | None:
        with self._lock.read():
            agent = self._agents.get(agent_id)
            return agent.model_copy(deep=True) if agent is not None else None

    def list(self) -> list[Agent]:
        with self._lock.read():
            return [a.model_copy(deep=True) for a in self._agents.values()]

    def create(self, name: str, description: str, prompt: str) -> Agent:
        agent = Agent(id=generate_id(), name=name, description=description, prompt=prompt)
        with self._lock.write():
            self._agents[agent.id] = agent
            return agent.model_copy(deep=True)

    def update(self, agent_id: str, name: str, description: str, prompt: str) -> Agent:
        with self._lock.write():
            agent = self._agents.get(agent_id)
            if agent is None:
                raise BlueprintError.agent_not_found(agent_id)
            agent.name = name
            agent.description = description
            agent.prompt = prompt
            return agent.model_copy(deep=True)

    def delete(self, agent_id: str) -> None:
        with self._lock.write():
            if agent_id not in self._agents:
                raise BlueprintError.agent_not_found(agent_id)
            del self._agents[agent_id]