"""Command group: zones — named regions of a project's tree."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from zonectl.commands._base import ZoneGroup

if TYPE_CHECKING:
    from zonectl.commands._context import AppContext

_ZONE_EXAMPLES = """\
  zonectl zone create backend -p 3f2a9c0d1b4e5f60 --pattern '^cmd/'
  zonectl zone list -p 3f2a9c0d1b4e5f60
  zonectl zone assign 9e1d0c2b3a4f5e6d cmd/server
  zonectl zone update 9e1d0c2b3a4f5e6d --purpose "HTTP entry points"
  zonectl zone highlights -p 3f2a9c0d1b4e5f60"""


@click.group(cls=ZoneGroup, examples=_ZONE_EXAMPLES)
def zone() -> None:
    """Manage zones within a project."""


@zone.command(
    name="list",
    examples="""\
  zonectl zone list -p 3f2a9c0d1b4e5f60
  zonectl --json zone list -p 3f2a9c0d1b4e5f60""",
)
@click.option("-p", "--project", "project_id", default="", help="Project id.")
@click.pass_obj
def list_cmd(app: AppContext, project_id: str) -> None:
    """List the zones of a project."""
    app.emit(app.service.list_zones(project_id))


@zone.command(
    examples="""\
  zonectl zone show 9e1d0c2b3a4f5e6d""",
)
@click.argument("zone_id")
@click.pass_obj
def show(app: AppContext, zone_id: str) -> None:
    """Show one zone."""
    app.emit(app.service.get_zone(zone_id))


@zone.command(
    examples="""\
  zonectl zone create backend -p 3f2a9c0d1b4e5f60 --pattern '^cmd/.*'
  zonectl zone create api -p 3f2a9c0d1b4e5f60 --purpose "Public API" \\
      --constraint "no breaking changes" --agent 5b6c7d8e9f0a1b2c""",
)
@click.argument("name")
@click.option("-p", "--project", "project_id", default="", help="Project id.")
@click.option("--pattern", default="", help="Regular expression over relative paths.")
@click.option("--purpose", default="", help="What the zone is for.")
@click.option("--constraint", "constraints", multiple=True, help="Constraint (repeatable).")
@click.option("--agent", "agents", multiple=True, help="Agent id to assign (repeatable).")
@click.pass_obj
def create(
    app: AppContext,
    name: str,
    project_id: str,
    pattern: str,
    purpose: str,
    constraints: tuple[str, ...],
    agents: tuple[str, ...],
) -> None:
    """Create a zone called NAME."""
    app.emit(
        app.service.create_zone(
            project_id,
            name,
            pattern=pattern,
            purpose=purpose,
            constraints=list(constraints),
            agents=list(agents),
        )
    )


@zone.command(
    examples="""\
  zonectl zone update 9e1d0c2b3a4f5e6d --name backend-core
  zonectl zone update 9e1d0c2b3a4f5e6d --pattern '^internal/'
  zonectl zone update 9e1d0c2b3a4f5e6d --constraint "no cgo" --constraint "go 1.22"
  zonectl zone update 9e1d0c2b3a4f5e6d --clear-agents""",
)
@click.argument("zone_id")
@click.option("--name", default=None, help="New name.")
@click.option("--pattern", default=None, help="New pattern.")
@click.option("--purpose", default=None, help="New purpose.")
@click.option("--constraint", "constraints", multiple=True, help="Replace constraints (repeatable).")
@click.option("--agent", "agents", multiple=True, help="Replace assigned agents (repeatable).")
@click.option("--clear-constraints", is_flag=True, help="Remove all constraints.")
@click.option("--clear-agents", is_flag=True, help="Unassign all agents.")
@click.pass_obj
def update(
    app: AppContext,
    zone_id: str,
    name: str | None,
    pattern: str | None,
    purpose: str | None,
    constraints: tuple[str, ...],
    agents: tuple[str, ...],
    clear_constraints: bool,
    clear_agents: bool,
) -> None:
    """Update a zone. Options left out keep their current value."""
    current = app.service.get_zone(zone_id)
    if not current.ok:
        app.emit(current)
        return
    existing: dict[str, Any] = current.data["zone"]

    new_constraints: list[str] = list(constraints)
    if not new_constraints and not clear_constraints:
        new_constraints = existing["constraints"]
    new_agents: list[Any] = list(agents)
    if not new_agents and not clear_agents:
        new_agents = existing["assigned_agents"]

    app.emit(
        app.service.update_zone(
            zone_id,
            name=name or "",
            pattern=existing["pattern"] if pattern is None else pattern,
            purpose=existing["purpose"] if purpose is None else purpose,
            constraints=new_constraints,
            agents=new_agents,
        )
    )


@zone.command(
    examples="""\
  zonectl zone assign 9e1d0c2b3a4f5e6d cmd/server
  zonectl zone assign 9e1d0c2b3a4f5e6d ./internal/app/""",
)
@click.argument("zone_id")
@click.argument("path")
@click.pass_obj
def assign(app: AppContext, zone_id: str, path: str) -> None:
    """Add PATH to the zone's explicit paths."""
    app.emit(app.service.assign_path_to_zone(zone_id, path))


@zone.command(
    examples="""\
  zonectl zone highlights -p 3f2a9c0d1b4e5f60
  zonectl --json zone highlights -p 3f2a9c0d1b4e5f60""",
)
@click.option("-p", "--project", "project_id", default="", help="Project id.")
@click.pass_obj
def highlights(app: AppContext, project_id: str) -> None:
    """Show which zones claim each path of the project."""
    app.emit(app.service.zone_highlights(project_id))
