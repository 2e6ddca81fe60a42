"""MCP tool definitions, one per blueprint operation.

Each tool has a ``<name>_impl`` function testable without the mcp
package; ``register_tools()`` wraps them with FastMCP decorators under
the operation's name.

Failures come back as ``{"ok": false, "error": {"code", "message",
"kind"}}`` where ``kind`` is ``not_found``, ``bad_request`` or
``internal``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from zonectl.services.blueprint import BlueprintService
    from zonectl.services.result import ServiceResult


def _to_mcp_response(result: ServiceResult) -> dict[str, Any]:
    """Convert a ServiceResult to an MCP-friendly dict."""
    response: dict[str, Any] = {
        "ok": result.ok,
        "op": result.op,
        "data": result.data,
    }
    if result.warnings:
        response["warnings"] = result.warnings
    if result.error is not None:
        response["error"] = {
            "code": result.error.code,
            "message": result.error.message,
            "kind": result.error.kind,
        }
    return response


# ---------------------------------------------------------------------------
# Projects
# ---------------------------------------------------------------------------


def list_projects_impl(service: BlueprintService) -> dict[str, Any]:
    return _to_mcp_response(service.list_projects())


def get_project_impl(service: BlueprintService, project_id: str) -> dict[str, Any]:
    return _to_mcp_response(service.get_project(project_id))


def create_project_impl(service: BlueprintService, root_dir: str, name: str = "") -> dict[str, Any]:
    return _to_mcp_response(service.create_project(name, root_dir))


def update_project_impl(
    service: BlueprintService,
    project_id: str,
    *,
    name: str = "",
    root_dir: str = "",
) -> dict[str, Any]:
    return _to_mcp_response(service.update_project(project_id, name, root_dir))


def delete_project_impl(service: BlueprintService, project_id: str) -> dict[str, Any]:
    return _to_mcp_response(service.delete_project(project_id))


def add_ignored_path_impl(service: BlueprintService, project_id: str, path: str) -> dict[str, Any]:
    return _to_mcp_response(service.add_ignored_path(project_id, path))


def remove_ignored_path_impl(
    service: BlueprintService, project_id: str, path: str
) -> dict[str, Any]:
    return _to_mcp_response(service.remove_ignored_path(project_id, path))


# ---------------------------------------------------------------------------
# Filesystem
# ---------------------------------------------------------------------------


def list_matching_paths_impl(
    service: BlueprintService,
    pattern: str,
    *,
    root: str = "",
    project_id: str = "",
) -> dict[str, Any]:
    return _to_mcp_response(
        service.list_matching_paths(pattern, root=root, project_id=project_id)
    )


def list_tree_impl(
    service: BlueprintService,
    *,
    root: str = "",
    project_id: str = "",
    hide_ignored: bool = False,
) -> dict[str, Any]:
    return _to_mcp_response(
        service.list_tree(root=root, project_id=project_id, hide_ignored=hide_ignored)
    )


# ---------------------------------------------------------------------------
# Zones
# ---------------------------------------------------------------------------


def list_zones_impl(service: BlueprintService, project_id: str = "") -> dict[str, Any]:
    return _to_mcp_response(service.list_zones(project_id))


def get_zone_impl(service: BlueprintService, zone_id: str) -> dict[str, Any]:
    return _to_mcp_response(service.get_zone(zone_id))


def create_zone_impl(
    service: BlueprintService,
    project_id: str,
    name: str,
    *,
    pattern: str = "",
    purpose: str = "",
    constraints: list[str] | None = None,
    assigned_agents: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """Create a zone; *assigned_agents* items are ``{"id", "name"}`` objects."""
    result = service.create_zone(
        project_id,
        name,
        pattern=pattern,
        purpose=purpose,
        constraints=constraints or [],
        agents=assigned_agents or [],
    )
    return _to_mcp_response(result)


def update_zone_impl(
    service: BlueprintService,
    zone_id: str,
    *,
    name: str = "",
    pattern: str = "",
    purpose: str = "",
    constraints: list[str] | None = None,
    assigned_agents: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """Update a zone. Everything but an empty *name* is replaced."""
    result = service.update_zone(
        zone_id,
        name=name,
        pattern=pattern,
        purpose=purpose,
        constraints=constraints or [],
        agents=assigned_agents or [],
    )
    return _to_mcp_response(result)


def assign_path_to_zone_impl(service: BlueprintService, zone_id: str, path: str) -> dict[str, Any]:
    return _to_mcp_response(service.assign_path_to_zone(zone_id, path))


def zone_highlights_impl(service: BlueprintService, project_id: str = "") -> dict[str, Any]:
    return _to_mcp_response(service.zone_highlights(project_id))


# ---------------------------------------------------------------------------
# Agents
# ---------------------------------------------------------------------------


def list_agents_impl(service: BlueprintService) -> dict[str, Any]:
    return _to_mcp_response(service.list_agents())


def get_agent_impl(service: BlueprintService, agent_id: str) -> dict[str, Any]:
    return _to_mcp_response(service.get_agent(agent_id))


def create_agent_impl(
    service: BlueprintService,
    name: str,
    *,
    description: str = "",
    prompt: str = "",
) -> dict[str, Any]:
    return _to_mcp_response(service.create_agent(name, description, prompt))


def update_agent_impl(
    service: BlueprintService,
    agent_id: str,
    *,
    name: str = "",
    description: str = "",
    prompt: str = "",
) -> dict[str, Any]:
    return _to_mcp_response(service.update_agent(agent_id, name, description, prompt))


def delete_agent_impl(service: BlueprintService, agent_id: str) -> dict[str, Any]:
    return _to_mcp_response(service.delete_agent(agent_id))


# ---------------------------------------------------------------------------
# Registration
# ---------------------------------------------------------------------------


def register_tools(server: Any, service: BlueprintService) -> None:
    """Register every blueprint tool on the FastMCP server."""

    @server.tool()  # type: ignore[untyped-decorator]
    def list_projects() -> dict[str, Any]:
        """List all projects."""
        return list_projects_impl(service)

    @server.tool()  # type: ignore[untyped-decorator]
    def get_project(project_id: str) -> dict[str, Any]:
        """Get one project by id."""
        return get_project_impl(service, project_id)

    @server.tool()  # type: ignore[untyped-decorator]
    def create_project(root_dir: str, name: str = "") -> dict[str, Any]:
        """Create a project rooted at root_dir."""
        return create_project_impl(service, root_dir, name)

    @server.tool()  # type: ignore[untyped-decorator]
    def update_project(project_id: str, name: str = "", root_dir: str = "") -> dict[str, Any]:
        """Rename a project or move its root. Empty values are left unchanged."""
        return update_project_impl(service, project_id, name=name, root_dir=root_dir)

    @server.tool()  # type: ignore[untyped-decorator]
    def delete_project(project_id: str) -> dict[str, Any]:
        """Delete a project and all of its zones."""
        return delete_project_impl(service, project_id)

    @server.tool()  # type: ignore[untyped-decorator]
    def add_ignored_path(project_id: str, path: str) -> dict[str, Any]:
        """Hide a path from the project's tree view."""
        return add_ignored_path_impl(service, project_id, path)

    @server.tool()  # type: ignore[untyped-decorator]
    def remove_ignored_path(project_id: str, path: str) -> dict[str, Any]:
        """Remove a path from the project's ignore list."""
        return remove_ignored_path_impl(service, project_id, path)

    @server.tool()  # type: ignore[untyped-decorator]
    def list_matching_paths(pattern: str, root: str = "", project_id: str = "") -> dict[str, Any]:
        """List relative paths under the root whose path matches a regular expression."""
        return list_matching_paths_impl(service, pattern, root=root, project_id=project_id)

    @server.tool()  # type: ignore[untyped-decorator]
    def list_tree(root: str = "", project_id: str = "", hide_ignored: bool = False) -> dict[str, Any]:
        """Return the directory tree under a project's root or an explicit root."""
        return list_tree_impl(
            service, root=root, project_id=project_id, hide_ignored=hide_ignored
        )

    @server.tool()  # type: ignore[untyped-decorator]
    def list_zones(project_id: str = "") -> dict[str, Any]:
        """List the zones of a project."""
        return list_zones_impl(service, project_id)

    @server.tool()  # type: ignore[untyped-decorator]
    def get_zone(zone_id: str) -> dict[str, Any]:
        """Get one zone by id."""
        return get_zone_impl(service, zone_id)

    @server.tool()  # type: ignore[untyped-decorator]
    def create_zone(
        project_id: str,
        name: str,
        pattern: str = "",
        purpose: str = "",
        constraints: list[str] | None = None,
        assigned_agents: list[dict[str, Any]] | None = None,
    ) -> dict[str, Any]:
        """Create a zone in a project."""
        return create_zone_impl(
            service,
            project_id,
            name,
            pattern=pattern,
            purpose=purpose,
            constraints=constraints,
            assigned_agents=assigned_agents,
        )

    @server.tool()  # type: ignore[untyped-decorator]
    def update_zone(
        zone_id: str,
        name: str = "",
        pattern: str = "",
        purpose: str = "",
        constraints: list[str] | None = None,
        assigned_agents: list[dict[str, Any]] | None = None,
    ) -> dict[str, Any]:
        """Update a zone's metadata (pattern, purpose, constraints and agents are replaced)."""
        return update_zone_impl(
            service,
            zone_id,
            name=name,
            pattern=pattern,
            purpose=purpose,
            constraints=constraints,
            assigned_agents=assigned_agents,
        )

    @server.tool()  # type: ignore[untyped-decorator]
    def assign_path_to_zone(zone_id: str, path: str) -> dict[str, Any]:
        """Add a path to a zone's explicit paths."""
        return assign_path_to_zone_impl(service, zone_id, path)

    @server.tool()  # type: ignore[untyped-decorator]
    def zone_highlights(project_id: str = "") -> dict[str, Any]:
        """Map each path claimed by a zone to the zone names claiming it."""
        return zone_highlights_impl(service, project_id)

    @server.tool()  # type: ignore[untyped-decorator]
    def list_agents() -> dict[str, Any]:
        """List all agents."""
        return list_agents_impl(service)

    @server.tool()  # type: ignore[untyped-decorator]
    def get_agent(agent_id: str) -> dict[str, Any]:
        """Get one agent by id."""
        return get_agent_impl(service, agent_id)

    @server.tool()  # type: ignore[untyped-decorator]
    def create_agent(name: str, description: str = "", prompt: str = "") -> dict[str, Any]:
        """Create a reusable agent."""
        return create_agent_impl(service, name, description=description, prompt=prompt)

    @server.tool()  # type: ignore[untyped-decorator]
    def update_agent(
        agent_id: str, name: str = "", description: str = "", prompt: str = ""
    ) -> dict[str, Any]:
        """Replace an agent's name, description and prompt."""
        return update_agent_impl(
            service, agent_id, name=name, description=description, prompt=prompt
        )

    @server.tool()  # type: ignore[untyped-decorator]
    def delete_agent(agent_id: str) -> dict[str, Any]:
        """Delete an agent after unassigning it from every zone."""
        return delete_agent_impl(service, agent_id)
