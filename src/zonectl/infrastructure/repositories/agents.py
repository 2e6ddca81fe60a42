"""Agent persistence."""

from __future__ import annotations

from typing import Any

from sqlalchemy import delete, insert, select, update

from zonectl.domain.errors import BlueprintError
from zonectl.domain.ids import generate_id
from zonectl.domain.models import Agent
from zonectl.domain.ports import AgentRepository
from zonectl.infrastructure.database.schema import agents
from zonectl.infrastructure.repositories._base import ROWID, SqlRepository, storage_errors


def _to_agent(row: Any) -> Agent:
    return Agent(
        id=row.id,
        name=row.name or "",
        description=row.description or "",
        prompt=row.prompt or "",
    )


class SqlAgentRepository(SqlRepository, AgentRepository):
    """Agents in the ``agents`` table."""

    def get(self, agent_id: str) -> Agent | None:
        with storage_errors("get agent"), self._engine.connect() as conn:
            row = conn.execute(select(agents).where(agents.c.id == agent_id)).first()
        return _to_agent(row) if row is not None else None

    def list(self) -> list[Agent]:
        with storage_errors("list agents"), self._engine.connect() as conn:
            rows = conn.execute(select(agents).order_by(ROWID)).fetchall()
        return [_to_agent(row) for row in rows]

    def create(self, name: str, description: str, prompt: str) -> Agent:
        agent = Agent(id=generate_id(), name=name, description=description, prompt=prompt)
        with storage_errors("create agent"), self._engine.begin() as conn:
            conn.execute(insert(agents).values(**agent.model_dump()))
        return agent

    def update(self, agent_id: str, name: str, description: str, prompt: str) -> Agent:
        with self._write_lock, storage_errors("update agent"), self._engine.begin() as conn:
            self._require(conn, agent_id)
            conn.execute(
                update(agents)
                .where(agents.c.id == agent_id)
                .values(name=name, description=description, prompt=prompt)
            )
            return self._require(conn, agent_id)

    def delete(self, agent_id: str) -> None:
        with self._write_lock, storage_errors("delete agent"), self._engine.begin() as conn:
            self._require(conn, agent_id)
            conn.execute(delete(agents).where(agents.c.id == agent_id))

    @staticmethod
    def _require(conn: Any, agent_id: str) -> Agent:
        row = conn.execute(select(agents).where(agents.c.id == agent_id)).first()
        if row is None:
            raise BlueprintError.agent_not_found(agent_id)
        return _to_agent(row)
