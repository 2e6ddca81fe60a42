"""Commands: tree and match — the filesystem projection."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from zonectl.commands._base import ZoneCommand

if TYPE_CHECKING:
    from zonectl.commands._context import AppContext


@click.command(
    cls=ZoneCommand,
    examples="""\
  zonectl tree -p 3f2a9c0d1b4e5f60
  zonectl tree -p 3f2a9c0d1b4e5f60 --hide-ignored
  zonectl tree --root ~/src/shop
  zonectl -q tree --root .""",
)
@click.option("-p", "--project", "project_id", default="", help="Project id.")
@click.option("--root", default="", help="Explicit root directory (overrides the project).")
@click.option("--hide-ignored", is_flag=True, help="Prune the project's ignored paths.")
@click.pass_obj
def tree(app: AppContext, project_id: str, root: str, hide_ignored: bool) -> None:
    """Print the directory tree under a project's root."""
    app.emit(app.service.list_tree(root=root, project_id=project_id, hide_ignored=hide_ignored))


@click.command(
    cls=ZoneCommand,
    examples="""\
  zonectl match '^cmd/' -p 3f2a9c0d1b4e5f60
  zonectl match '\\.go$' --root ~/src/shop
  zonectl -q match 'test' -p 3f2a9c0d1b4e5f60 | wc -l""",
)
@click.argument("pattern")
@click.option("-p", "--project", "project_id", default="", help="Project id.")
@click.option("--root", default="", help="Explicit root directory (overrides the project).")
@click.pass_obj
def match(app: AppContext, pattern: str, project_id: str, root: str) -> None:
    """List relative paths matching the regular expression PATTERN."""
    app.emit(app.service.list_matching_paths(pattern, root=root, project_id=project_id))
