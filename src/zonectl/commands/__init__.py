"""Subcommand modules for zonectl.

``register_commands()`` imports command modules lazily so ``zonectl
--help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Attach the project, zone and agent groups plus standalone commands."""
    # --- Groups ---
    from zonectl.commands.agent import agent
    from zonectl.commands.project import project
    from zonectl.commands.zone import zone

    cli.add_command(project)
    cli.add_command(zone)
    cli.add_command(agent)

    # --- Standalone commands ---
    from zonectl.commands.serve import serve
    from zonectl.commands.tree import match, tree

    cli.add_command(tree)
    cli.add_command(match)
    cli.add_command(serve)
