"""Project persistence."""

from __future__ import annotations

from typing import Any

from sqlalchemy import delete, insert, select, update

from zonectl.domain.errors import BlueprintError, ErrorCode
from zonectl.domain.ids import generate_id
from zonectl.domain.models import Project
from zonectl.domain.paths import require_path
from zonectl.domain.ports import ProjectRepository
from zonectl.infrastructure.database.codecs import decode_string_list, encode_string_list
from zonectl.infrastructure.database.schema import projects
from zonectl.infrastructure.repositories._base import ROWID, SqlRepository, storage_errors


def _to_project(row: Any) -> Project:
    return Project(
        id=row.id,
        name=row.name or "",
        root_dir=row.root_dir or "",
        ignored_paths=decode_string_list(row.ignored_paths),
    )


class SqlProjectRepository(SqlRepository, ProjectRepository):
    """Projects in the ``projects`` table. ``delete`` never cascades."""

    def get(self, project_id: str) -> Project | None:
        with storage_errors("get project"), self._engine.connect() as conn:
            row = conn.execute(select(projects).where(projects.c.id == project_id)).first()
        return _to_project(row) if row is not None else None

    def list(self) -> list[Project]:
        with storage_errors("list projects"), self._engine.connect() as conn:
            rows = conn.execute(select(projects).order_by(ROWID)).fetchall()
        return [_to_project(row) for row in rows]

    def create(self, name: str, root_dir: str) -> Project:
        if not root_dir:
            raise BlueprintError(ErrorCode.INVALID_ROOT, "project root directory is required")
        project = Project(id=generate_id(), name=name, root_dir=root_dir, ignored_paths=[])
        with storage_errors("create project"), self._engine.begin() as conn:
            conn.execute(
                insert(projects).values(
                    id=project.id,
                    name=project.name,
                    root_dir=project.root_dir,
                    ignored_paths=encode_string_list(project.ignored_paths),
                )
            )
        return project

    def update(self, project_id: str, name: str, root_dir: str) -> Project:
        changes: dict[str, str] = {}
        if name:
            changes["name"] = name
        if root_dir:
            changes["root_dir"] = root_dir
        with self._write_lock, storage_errors("update project"), self._engine.begin() as conn:
            self._require(conn, project_id)
            if changes:
                conn.execute(update(projects).where(projects.c.id == project_id).values(**changes))
            return self._require(conn, project_id)

    def delete(self, project_id: str) -> None:
        with self._write_lock, storage_errors("delete project"), self._engine.begin() as conn:
            self._require(conn, project_id)
            conn.execute(delete(projects).where(projects.c.id == project_id))

    def add_ignored_path(self, project_id: str, path: str) -> Project:
        path = require_path(path)
        with self._write_lock, storage_errors("add ignored path"), self._engine.begin() as conn:
            project = self._require(conn, project_id)
            if path in project.ignored_paths:
                return project
            project.ignored_paths.append(path)
            self._write_ignored(conn, project)
            return project

    def remove_ignored_path(self, project_id: str, path: str) -> Project:
        path = require_path(path)
        with self._write_lock, storage_errors("remove ignored path"), self._engine.begin() as conn:
            project = self._require(conn, project_id)
            project.ignored_paths = [p for p in project.ignored_paths if p != path]
            self._write_ignored(conn, project)
            return project

    @staticmethod
    def _require(conn: Any, project_id: str) -> Project:
        row = conn.execute(select(projects).where(projects.c.id == project_id)).first()
        if row is None:
            raise BlueprintError.project_not_found(project_id)
        return _to_project(row)

    @staticmethod
    def _write_ignored(conn: Any, project: Project) -> None:
        conn.execute(
            update(projects)
            .where(projects.c.id == project.id)
            .values(ignored_paths=encode_string_list(project.ignored_paths))
        )