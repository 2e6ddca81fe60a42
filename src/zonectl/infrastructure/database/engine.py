"""Database engine setup for SQLite with WAL mode.

SQLAlchemy Core (not ORM) is used: rows map to pydantic domain models in
the repositories, so there is no benefit from identity maps or sessions.

Schema evolution is additive only. :func:`init_database` creates missing
tables and adds columns that the schema declares but an existing table
lacks; nothing is ever renamed or dropped.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from sqlalchemy import create_engine, event, inspect, text
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from zonectl.infrastructure.database.schema import metadata

logger = logging.getLogger(__name__)

MEMORY_DB = ":memory:"


def create_db_engine(db_path: Path | str) -> Engine:
    """Create a SQLite engine with WAL mode and foreign keys enabled.

    ``":memory:"`` yields a single shared connection so every thread
    sees the same database.
    """
    if str(db_path) == MEMORY_DB:
        engine = create_engine(
            "sqlite://",
            echo=False,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
    else:
        engine = create_engine(
            f"sqlite:///{db_path}",
            echo=False,
            connect_args={"check_same_thread": False},
        )

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_conn: Any, _: Any) -> None:
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return engine


def init_database(db_path: Path | str) -> Engine:
    """Open (creating if needed) the database at *db_path*.

    Creates the parent directory, all tables from :data:`schema.metadata`,
    and any missing additive columns. Idempotent.

    Returns the engine ready for use.
    """
    if str(db_path) != MEMORY_DB:
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    engine = create_db_engine(db_path)
    metadata.create_all(engine)
    _add_missing_columns(engine)
    return engine


def _add_missing_columns(engine: Engine) -> None:
    """ALTER TABLE ... ADD COLUMN for schema columns absent on disk."""
    inspector = inspect(engine)
    with engine.begin() as conn:
        for table in metadata.sorted_tables:
            existing = {col["name"] for col in inspector.get_columns(table.name)}
            for column in table.columns:
                if column.name in existing:
                    continue
                col_type = column.type.compile(dialect=engine.dialect)
                ddl = f'ALTER TABLE "{table.name}" ADD COLUMN "{column.name}" {col_type}'
                if column.server_default is not None:
                    default = column.server_default.arg
                    ddl += f" DEFAULT '{default}'"
                logger.info("Adding column %s.%s", table.name, column.name)
                conn.execute(text(ddl))
