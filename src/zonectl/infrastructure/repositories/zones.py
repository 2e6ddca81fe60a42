"""Zone persistence."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from sqlalchemy import delete, insert, select, update

from zonectl.domain.errors import BlueprintError, ErrorCode
from zonectl.domain.ids import generate_id
from zonectl.domain.models import AgentRef, Zone
from zonectl.domain.ports import ZoneRepository
from zonectl.infrastructure.database.codecs import (
    decode_agent_refs,
    decode_string_list,
    encode_agent_refs,
    encode_string_list,
)
from zonectl.infrastructure.database.schema import zones
from zonectl.infrastructure.repositories._base import ROWID, SqlRepository, storage_errors


def _to_zone(row: Any) -> Zone:
    return Zone(
        id=row.id,
        project_id=row.project_id or "",
        name=row.name or "",
        pattern=row.pattern or "",
        purpose=row.purpose or "",
        constraints=decode_string_list(row.constraints),
        assigned_agents=decode_agent_refs(row.assigned_agents),
        explicit_paths=decode_string_list(row.explicit_paths),
    )


class SqlZoneRepository(SqlRepository, ZoneRepository):
    """Zones in the ``zones`` table, scoped by ``project_id``."""

    def get(self, zone_id: str) -> Zone | None:
        with storage_errors("get zone"), self._engine.connect() as conn:
            row = conn.execute(select(zones).where(zones.c.id == zone_id)).first()
        return _to_zone(row) if row is not None else None

    def list_by_project(self, project_id: str) -> list[Zone]:
        stmt = select(zones).where(zones.c.project_id == project_id).order_by(ROWID)
        with storage_errors("list zones"), self._engine.connect() as conn:
            rows = conn.execute(stmt).fetchall()
        return [_to_zone(row) for row in rows]

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
            assigned_agents=[AgentRef(id=a.id, name=a.name) for a in agents],
            explicit_paths=[],
        )
        with storage_errors("create zone"), self._engine.begin() as conn:
            conn.execute(
                insert(zones).values(
                    id=zone.id,
                    project_id=zone.project_id,
                    name=zone.name,
                    pattern=zone.pattern,
                    purpose=zone.purpose,
                    constraints=encode_string_list(zone.constraints),
                    assigned_agents=encode_agent_refs(zone.assigned_agents),
                    explicit_paths=encode_string_list(zone.explicit_paths),
                )
            )
        return zone

    def update(
        self,
        zone_id: str,
        name: str,
        pattern: str,
        purpose: str,
        constraints: Sequence[str],
        agents: Sequence[AgentRef],
    ) -> Zone:
        changes: dict[str, str] = {
            "pattern": pattern,
            "purpose": purpose,
            "constraints": encode_string_list(constraints),
            "assigned_agents": encode_agent_refs(agents),
        }
        if name:
            changes["name"] = name
        with self._write_lock, storage_errors("update zone"), self._engine.begin() as conn:
            self._require(conn, zone_id)
            conn.execute(update(zones).where(zones.c.id == zone_id).values(**changes))
            return self._require(conn, zone_id)

    def assign_path(self, zone_id: str, path: str) -> Zone:
        with self._write_lock, storage_errors("assign path"), self._engine.begin() as conn:
            zone = self._require(conn, zone_id)
            if path in zone.explicit_paths:
                return zone
            zone.explicit_paths.append(path)
            conn.execute(
                update(zones)
                .where(zones.c.id == zone_id)
                .values(explicit_paths=encode_string_list(zone.explicit_paths))
            )
            return zone

    def delete_by_project(self, project_id: str) -> int:
        with self._write_lock, storage_errors("delete zones"), self._engine.begin() as conn:
            result = conn.execute(delete(zones).where(zones.c.project_id == project_id))
        return int(result.rowcount or 0)

    @staticmethod
    def _require(conn: Any, zone_id: str) -> Zone:
        row = conn.execute(select(zones).where(zones.c.id == zone_id)).first()
        if row is None:
            raise BlueprintError.zone_not_found(zone_id)
        return _to_zone(row)
