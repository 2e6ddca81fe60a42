"""BlueprintService — projects, zones, agents, and the filesystem projection.

The service resolves which filesystem root an operation runs against,
enforces the cross-entity rules the stores do not know about, and turns
every :class:`BlueprintError` into a failed :class:`ServiceResult`.

Cascades are not transactional. Each runs its dependent step first and
aborts before the terminal delete if that step fails:

- ``delete_project``: delete the project's zones, then the project. A
  crash between the two steps can leave zones without a project, never a
  project whose zones were half-deleted by this call.
- ``delete_agent``: rewrite every zone that references the agent, then
  delete the agent record.

The service holds no persistent state of its own.
"""

from __future__ import annotations

import logging
import os
import threading
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from zonectl.domain.errors import BlueprintError, ErrorCode
from zonectl.domain.models import AgentRef, Project
from zonectl.domain.paths import require_path
from zonectl.domain.tree import prune_ignored
from zonectl.services.base import BaseService, service_op
from zonectl.services.result import ServiceResult

if TYPE_CHECKING:
    from zonectl.infrastructure.workspace import Workspace

logger = logging.getLogger(__name__)

AgentInput = AgentRef | Mapping[str, Any] | str


class BlueprintService(BaseService):
    """Use cases over the workspace ports."""

    def __init__(self, workspace: Workspace) -> None:
        super().__init__(workspace)
        self._implicit_lock = threading.Lock()

    # ------------------------------------------------------------------
    # Root resolution
    # ------------------------------------------------------------------

    def resolve_root(self, root: str = "", project_id: str = "") -> str:
        """Pick the filesystem root for a tree or match operation.

        An explicit *root* wins. Otherwise the project's ``root_dir`` is
        used (``PROJECT_NOT_FOUND`` if the project is unknown); no project,
        or one with an empty ``root_dir``, falls through to the configured
        default. Never creates the implicit project.
        """
        if root:
            return root
        if project_id:
            project = self._require_project(project_id)
            if project.root_dir:
                return project.root_dir
        return self._workspace.default_root

    # ------------------------------------------------------------------
    # Projects
    # ------------------------------------------------------------------

    @service_op
    def list_projects(self) -> ServiceResult:
        projects = self._workspace.projects.list()
        return ServiceResult(
            ok=True,
            op="list_projects",
            data={"projects": [p.model_dump() for p in projects]},
        )

    @service_op
    def get_project(self, project_id: str) -> ServiceResult:
        project = self._require_project(project_id)
        return ServiceResult(ok=True, op="get_project", data={"project": project.model_dump()})

    @service_op
    def create_project(self, name: str, root_dir: str) -> ServiceResult:
        project = self._workspace.projects.create(name, root_dir)
        logger.info("Created project %s (%s)", project.id, project.root_dir)
        return ServiceResult(ok=True, op="create_project", data={"project": project.model_dump()})

    @service_op
    def update_project(self, project_id: str, name: str = "", root_dir: str = "") -> ServiceResult:
        """Update a project; empty *name* or *root_dir* leaves that field unchanged."""
        project = self._workspace.projects.update(project_id, name, root_dir)
        return ServiceResult(ok=True, op="update_project", data={"project": project.model_dump()})

    @service_op
    def delete_project(self, project_id: str) -> ServiceResult:
        """Delete a project and every zone that belongs to it.

        Zones go first. If deleting them fails the project is left in
        place and the zone error is returned.
        """
        self._require_project(project_id)
        removed = self._workspace.zones.delete_by_project(project_id)
        logger.debug("Deleted %d zone(s) of project %s", removed, project_id)
        self._workspace.projects.delete(project_id)
        logger.info("Deleted project %s", project_id)
        return ServiceResult(
            ok=True,
            op="delete_project",
            data={"id": project_id, "zones_deleted": removed},
        )

    @service_op
    def add_ignored_path(self, project_id: str, path: str) -> ServiceResult:
        project = self._workspace.projects.add_ignored_path(self._scope(project_id), path)
        return ServiceResult(ok=True, op="add_ignored_path", data={"project": project.model_dump()})

    @service_op
    def remove_ignored_path(self, project_id: str, path: str) -> ServiceResult:
        project = self._workspace.projects.remove_ignored_path(self._scope(project_id), path)
        return ServiceResult(
            ok=True, op="remove_ignored_path", data={"project": project.model_dump()}
        )

    # ------------------------------------------------------------------
    # Filesystem projection
    # ------------------------------------------------------------------

    @service_op
    def list_matching_paths(
        self,
        pattern: str,
        *,
        root: str = "",
        project_id: str = "",
    ) -> ServiceResult:
        """List paths under the resolved root whose relative path matches *pattern*.

        *pattern* is a Python regular expression searched anywhere in the
        path (anchor it with ``^``/``$`` for whole-path matches).
        """
        resolved = self.resolve_root(root, project_id)
        paths = self._workspace.path_matcher.list_matching_paths(resolved, pattern)
        return ServiceResult(
            ok=True,
            op="list_matching_paths",
            data={"root": resolved, "paths": paths},
            meta={"count": len(paths)},
        )

    @service_op
    def list_tree(
        self,
        *,
        root: str = "",
        project_id: str = "",
        hide_ignored: bool = False,
    ) -> ServiceResult:
        """Return the directory tree under the resolved root.

        With *hide_ignored*, the project's ignored paths and everything
        beneath them are pruned from the result. Pruning only applies when
        the tree is rooted at that project's root.
        """
        resolved = self.resolve_root(root, project_id)
        tree = self._workspace.tree_lister.list_tree(resolved)
        if hide_ignored:
            scoped = self._read_scope(project_id)
            project = self._require_project(scoped) if scoped else None
            if project is not None and resolved == self._project_root(project):
                tree = prune_ignored(tree, project.ignored_paths) or tree
        return ServiceResult(
            ok=True,
            op="list_tree",
            data={"root": resolved, "tree": tree.model_dump()},
        )

    # ------------------------------------------------------------------
    # Zones
    # ------------------------------------------------------------------

    @service_op
    def list_zones(self, project_id: str = "") -> ServiceResult:
        zones = self._workspace.zones.list_by_project(self._read_scope(project_id))
        return ServiceResult(
            ok=True,
            op="list_zones",
            data={"zones": [z.model_dump() for z in zones]},
        )

    @service_op
    def get_zone(self, zone_id: str) -> ServiceResult:
        zone = self._workspace.zones.get(zone_id)
        if zone is None:
            raise BlueprintError.zone_not_found(zone_id)
        return ServiceResult(ok=True, op="get_zone", data={"zone": zone.model_dump()})

    @service_op
    def create_zone(
        self,
        project_id: str,
        name: str,
        pattern: str = "",
        purpose: str = "",
        constraints: Sequence[str] = (),
        agents: Sequence[AgentInput] = (),
    ) -> ServiceResult:
        """Create a zone in an existing project.

        *agents* items may be :class:`AgentRef` values, ``{"id", "name"}``
        mappings, or bare agent ids (looked up for their current name).
        """
        project_id = self._scope(project_id)
        self._require_project(project_id)
        zone = self._workspace.zones.create(
            project_id,
            name,
            pattern,
            purpose,
            list(constraints),
            self._agent_refs(agents),
        )
        logger.info("Created zone %s in project %s", zone.id, project_id)
        return ServiceResult(ok=True, op="create_zone", data={"zone": zone.model_dump()})

    @service_op
    def update_zone(
        self,
        zone_id: str,
        name: str = "",
        pattern: str = "",
        purpose: str = "",
        constraints: Sequence[str] = (),
        agents: Sequence[AgentInput] = (),
    ) -> ServiceResult:
        """Update a zone. Empty *name* keeps the name; the rest is replaced."""
        zone = self._workspace.zones.update(
            zone_id,
            name,
            pattern,
            purpose,
            list(constraints),
            self._agent_refs(agents),
        )
        return ServiceResult(ok=True, op="update_zone", data={"zone": zone.model_dump()})

    @service_op
    def assign_path_to_zone(self, zone_id: str, path: str) -> ServiceResult:
        """Add a normalized path to the zone's explicit paths (idempotent)."""
        zone = self._workspace.zones.assign_path(zone_id, require_path(path))
        return ServiceResult(ok=True, op="assign_path_to_zone", data={"zone": zone.model_dump()})

    @service_op
    def zone_highlights(self, project_id: str = "") -> ServiceResult:
        """Map every path claimed by a zone of the project to the claiming zone names.

        A zone claims the paths its pattern matches under the project root
        plus its explicit paths. Zones whose pattern does not compile are
        skipped with a warning.
        """
        scoped = self._read_scope(project_id)
        if not scoped and not self._workspace.multi_project:
            return ServiceResult(ok=True, op="zone_highlights", data={"paths": {}})
        project = self._require_project(scoped)
        root = self._project_root(project)
        warnings: list[str] = []
        claims: dict[str, list[str]] = {}

        for zone in self._workspace.zones.list_by_project(project.id):
            paths: list[str] = []
            if zone.pattern:
                try:
                    paths = self._workspace.path_matcher.list_matching_paths(root, zone.pattern)
                except BlueprintError as exc:
                    if exc.code != ErrorCode.INVALID_PATTERN:
                        raise
                    warnings.append(f"Zone '{zone.name}' skipped: {exc.message}")
                    continue
            for path in [*paths, *zone.explicit_paths]:
                names = claims.setdefault(path, [])
                if zone.name not in names:
                    names.append(zone.name)

        return ServiceResult(
            ok=True,
            op="zone_highlights",
            data={"paths": dict(sorted(claims.items()))},
            warnings=warnings,
        )

    # ------------------------------------------------------------------
    # Agents
    # ------------------------------------------------------------------

    @service_op
    def list_agents(self) -> ServiceResult:
        agents = self._workspace.agents.list()
        return ServiceResult(
            ok=True,
            op="list_agents",
            data={"agents": [a.model_dump() for a in agents]},
        )

    @service_op
    def get_agent(self, agent_id: str) -> ServiceResult:
        agent = self._workspace.agents.get(agent_id)
        if agent is None:
            raise BlueprintError.agent_not_found(agent_id)
        return ServiceResult(ok=True, op="get_agent", data={"agent": agent.model_dump()})

    @service_op
    def create_agent(self, name: str, description: str = "", prompt: str = "") -> ServiceResult:
        agent = self._workspace.agents.create(name, description, prompt)
        logger.info("Created agent %s", agent.id)
        return ServiceResult(ok=True, op="create_agent", data={"agent": agent.model_dump()})

    @service_op
    def update_agent(
        self,
        agent_id: str,
        name: str = "",
        description: str = "",
        prompt: str = "",
    ) -> ServiceResult:
        """Replace every field of the agent.

        Zones keep the name they copied at assignment time.
        """
        agent = self._workspace.agents.update(agent_id, name, description, prompt)
        return ServiceResult(ok=True, op="update_agent", data={"agent": agent.model_dump()})

    @service_op
    def delete_agent(self, agent_id: str) -> ServiceResult:
        """Unassign the agent from every zone of every project, then delete it.

        Each affected zone is rewritten whole with the agent filtered out.
        Any failure stops the cascade before the agent record is removed.
        """
        if self._workspace.agents.get(agent_id) is None:
            raise BlueprintError.agent_not_found(agent_id)

        updated = 0
        for project in self._workspace.projects.list():
            for zone in self._workspace.zones.list_by_project(project.id):
                if not zone.has_agent(agent_id):
                    continue
                self._workspace.zones.update(
                    zone.id,
                    zone.name,
                    zone.pattern,
                    zone.purpose,
                    zone.constraints,
                    [ref for ref in zone.assigned_agents if ref.id != agent_id],
                )
                updated += 1
        logger.debug("Unassigned agent %s from %d zone(s)", agent_id, updated)

        self._workspace.agents.delete(agent_id)
        logger.info("Deleted agent %s", agent_id)
        return ServiceResult(
            ok=True,
            op="delete_agent",
            data={"id": agent_id, "zones_updated": updated},
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _require_project(self, project_id: str) -> Project:
        project = self._workspace.projects.get(project_id) if project_id else None
        if project is None:
            raise BlueprintError.project_not_found(project_id)
        return project

    def _scope(self, project_id: str) -> str:
        """Return *project_id*, or the implicit project's id in single-project mode."""
        if project_id or self._workspace.multi_project:
            return project_id
        return self._implicit_project().id

    def _read_scope(self, project_id: str) -> str:
        """Like :meth:`_scope` for reads: never creates the implicit project.

        Returns ``""`` in single-project mode when no implicit project exists yet.
        """
        if project_id or self._workspace.multi_project:
            return project_id
        project = self._find_implicit_project()
        return project.id if project is not None else ""

    def _project_root(self, project: Project) -> str:
        return project.root_dir or self._workspace.default_root

    def _find_implicit_project(self) -> Project | None:
        root = self._workspace.default_root
        for project in self._workspace.projects.list():
            if project.root_dir == root:
                return project
        return None

    def _implicit_project(self) -> Project:
        """Find or create the one project rooted at the default root."""
        root = self._workspace.default_root
        with self._implicit_lock:
            existing = self._find_implicit_project()
            if existing is not None:
                return existing
            name = os.path.basename(root.rstrip("/\\")) or "default"
            project = self._workspace.projects.create(name, root)
            logger.info("Created implicit project %s at %s", project.id, root)
            return project

    def _agent_refs(self, agents: Sequence[AgentInput]) -> list[AgentRef]:
        refs: list[AgentRef] = []
        for item in agents:
            if isinstance(item, AgentRef):
                refs.append(item)
            elif isinstance(item, str):
                agent = self._workspace.agents.get(item)
                if agent is None:
                    raise BlueprintError.agent_not_found(item)
                refs.append(agent.ref())
            else:
                refs.append(AgentRef.from_mapping(item))
        return refs
