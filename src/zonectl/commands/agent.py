"""Command group: agents that can be assigned to zones."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from zonectl.commands._base import ZoneGroup

if TYPE_CHECKING:
    from zonectl.commands._context import AppContext

_AGENT_EXAMPLES = """\
  zonectl agent create reviewer --description "Reviews Go code" --prompt "You review..."
  zonectl agent list
  zonectl agent update 5b6c7d8e9f0a1b2c --name reviewer --prompt-file prompts/review.md
  zonectl agent delete 5b6c7d8e9f0a1b2c"""


@click.group(cls=ZoneGroup, examples=_AGENT_EXAMPLES)
def agent() -> None:
    """Manage reusable agents."""


def _read_prompt(prompt: str, prompt_file: str | None) -> str:
    if prompt_file is None:
        return prompt
    with open(prompt_file, encoding="utf-8") as fh:
        return fh.read()


@agent.command(
    name="list",
    examples="""\
  zonectl agent list
  zonectl -q agent list""",
)
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List all agents."""
    app.emit(app.service.list_agents())


@agent.command(
    examples="""\
  zonectl agent show 5b6c7d8e9f0a1b2c
  zonectl -v agent show 5b6c7d8e9f0a1b2c""",
)
@click.argument("agent_id")
@click.pass_obj
def show(app: AppContext, agent_id: str) -> None:
    """Show one agent."""
    app.emit(app.service.get_agent(agent_id))


@agent.command(
    examples="""\
  zonectl agent create reviewer
  zonectl agent create reviewer --description "Reviews Go code" --prompt-file review.md""",
)
@click.argument("name")
@click.option("--description", default="", help="Short description.")
@click.option("--prompt", default="", help="Prompt text.")
@click.option(
    "--prompt-file",
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help="Read the prompt from a file.",
)
@click.pass_obj
def create(
    app: AppContext,
    name: str,
    description: str,
    prompt: str,
    prompt_file: str | None,
) -> None:
    """Create an agent called NAME."""
    app.emit(app.service.create_agent(name, description, _read_prompt(prompt, prompt_file)))


@agent.command(
    examples="""\
  zonectl agent update 5b6c7d8e9f0a1b2c --description "Reviews everything" """,
)
@click.argument("agent_id")
@click.option("--name", default=None, help="New name.")
@click.option("--description", default=None, help="New description.")
@click.option("--prompt", default=None, help="New prompt text.")
@click.option(
    "--prompt-file",
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help="Read the new prompt from a file.",
)
@click.pass_obj
def update(
    app: AppContext,
    agent_id: str,
    name: str | None,
    description: str | None,
    prompt: str | None,
    prompt_file: str | None,
) -> None:
    """Update an agent. Options left out keep their current value."""
    current = app.service.get_agent(agent_id)
    if not current.ok:
        app.emit(current)
        return
    existing = current.data["agent"]
    if prompt_file is not None:
        prompt = _read_prompt("", prompt_file)
    app.emit(
        app.service.update_agent(
            agent_id,
            name=existing["name"] if name is None else name,
            description=existing["description"] if description is None else description,
            prompt=existing["prompt"] if prompt is None else prompt,
        )
    )


@agent.command(
    examples="""\
  zonectl agent delete 5b6c7d8e9f0a1b2c --yes""",
)
@click.argument("agent_id")
@click.option("--yes", is_flag=True, help="Skip the confirmation prompt.")
@click.pass_obj
def delete(app: AppContext, agent_id: str, yes: bool) -> None:
    """Delete an agent and unassign it from every zone."""
    if not yes and not app.settings.json_output:
        click.confirm(f"Delete agent {agent_id}?", abort=True)
    app.emit(app.service.delete_agent(agent_id))
