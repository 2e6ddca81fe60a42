"""Command group: projects and their ignore lists."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from zonectl.commands._base import ZoneGroup

if TYPE_CHECKING:
    from zonectl.commands._context import AppContext

_PROJECT_EXAMPLES = """\
  zonectl project create ~/src/shop --name shop
  zonectl project list
  zonectl project show 3f2a9c0d1b4e5f60
  zonectl project update 3f2a9c0d1b4e5f60 --root ~/src/shop-v2
  zonectl project ignore node_modules -p 3f2a9c0d1b4e5f60
  zonectl project delete 3f2a9c0d1b4e5f60"""


@click.group(cls=ZoneGroup, examples=_PROJECT_EXAMPLES)
def project() -> None:
    """Manage projects (named root directories)."""


@project.command(
    name="list",
    examples="""\
  zonectl project list
  zonectl --json project list
  zonectl -q project list""",
)
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List all projects."""
    app.emit(app.service.list_projects())


@project.command(
    examples="""\
  zonectl project show 3f2a9c0d1b4e5f60
  zonectl --json project show 3f2a9c0d1b4e5f60""",
)
@click.argument("project_id")
@click.pass_obj
def show(app: AppContext, project_id: str) -> None:
    """Show one project."""
    app.emit(app.service.get_project(project_id))


@project.command(
    examples="""\
  zonectl project create ~/src/shop
  zonectl project create ~/src/shop --name shop""",
)
@click.argument("root_dir")
@click.option("--name", default="", help="Display name.")
@click.pass_obj
def create(app: AppContext, root_dir: str, name: str) -> None:
    """Register ROOT_DIR as a new project."""
    app.emit(app.service.create_project(name, root_dir))


@project.command(
    examples="""\
  zonectl project update 3f2a9c0d1b4e5f60 --name storefront
  zonectl project update 3f2a9c0d1b4e5f60 --root ~/src/shop-v2""",
)
@click.argument("project_id")
@click.option("--name", default="", help="New name (omit to keep).")
@click.option("--root", "root_dir", default="", help="New root directory (omit to keep).")
@click.pass_obj
def update(app: AppContext, project_id: str, name: str, root_dir: str) -> None:
    """Rename a project or move its root."""
    if not name and not root_dir:
        click.echo("No changes specified. Use --help for options.", err=True)
        raise SystemExit(1)
    app.emit(app.service.update_project(project_id, name, root_dir))


@project.command(
    examples="""\
  zonectl project delete 3f2a9c0d1b4e5f60
  zonectl project delete 3f2a9c0d1b4e5f60 --yes""",
)
@click.argument("project_id")
@click.option("--yes", is_flag=True, help="Skip the confirmation prompt.")
@click.pass_obj
def delete(app: AppContext, project_id: str, yes: bool) -> None:
    """Delete a project together with all of its zones."""
    if not yes and not app.settings.json_output:
        click.confirm(f"Delete project {project_id} and its zones?", abort=True)
    app.emit(app.service.delete_project(project_id))


@project.command(
    examples="""\
  zonectl project ignore node_modules -p 3f2a9c0d1b4e5f60
  zonectl project ignore ./build/ -p 3f2a9c0d1b4e5f60""",
)
@click.argument("path")
@click.option("-p", "--project", "project_id", default="", help="Project id.")
@click.pass_obj
def ignore(app: AppContext, path: str, project_id: str) -> None:
    """Hide PATH (and everything beneath it) from the project's tree."""
    app.emit(app.service.add_ignored_path(project_id, path))


@project.command(
    examples="""\
  zonectl project unignore node_modules -p 3f2a9c0d1b4e5f60""",
)
@click.argument("path")
@click.option("-p", "--project", "project_id", default="", help="Project id.")
@click.pass_obj
def unignore(app: AppContext, path: str, project_id: str) -> None:
    """Remove PATH from the project's ignore list."""
    app.emit(app.service.remove_ignored_path(project_id, path))
