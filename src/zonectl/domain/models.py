"""Entity models — Project, Zone, Agent, and the ephemeral TreeNode.

Field names are snake_case and match the wire contract used by the MCP
tools and the CLI ``--json`` output, so ``model_dump()`` is the DTO.

INVARIANT: Path-valued fields (``ignored_paths``, ``explicit_paths``)
hold normalized paths with set semantics, stored as ordered lists.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field

from zonectl.domain.errors import BlueprintError, ErrorCode


class Project(BaseModel):
    """A named root directory that tree, pattern, and zone operations resolve against."""

    id: str
    name: str = ""
    root_dir: str
    ignored_paths: list[str] = Field(default_factory=list)


class AgentRef(BaseModel):
    """By-value copy of an agent's identity, as attached to a zone."""

    id: str
    name: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> AgentRef:
        """Build a ref from ``id``/``name`` or the capitalized ``ID``/``Name`` keys.

        Raises ``INVALID_AGENT`` when no id is present.
        """
        agent_id = data.get("id", data.get("ID"))
        if not agent_id:
            raise BlueprintError(ErrorCode.INVALID_AGENT, "agent reference has no id")
        name = data.get("name", data.get("Name")) or ""
        return cls(id=str(agent_id), name=str(name))


class Agent(BaseModel):
    """A reusable identity that can be attached to zones."""

    id: str
    name: str = ""
    description: str = ""
    prompt: str = ""

    def ref(self) -> AgentRef:
        """Return the reference stored on zones for this agent."""
        return AgentRef(id=self.id, name=self.name)


class Zone(BaseModel):
    """A named region of a project's tree.

    Membership is the union of paths matching ``pattern`` (an uncompiled
    regex, validated only when used for matching) and ``explicit_paths``.
    ``project_id`` is a back-reference; the zone does not own the project.
    """

    id: str
    project_id: str = ""
    name: str
    pattern: str = ""
    purpose: str = ""
    constraints: list[str] = Field(default_factory=list)
    assigned_agents: list[AgentRef] = Field(default_factory=list)
    explicit_paths: list[str] = Field(default_factory=list)

    def has_agent(self, agent_id: str) -> bool:
        return any(ref.id == agent_id for ref in self.assigned_agents)


class TreeNode(BaseModel):
    """One node of a directory listing, produced fresh per request.

    The root node has ``path == ""`` and ``name == "."``. Child order
    follows directory enumeration and is not guaranteed stable.
    """

    path: str
    name: str
    is_dir: bool
    children: list[TreeNode] = Field(default_factory=list)
