"""Shared plumbing for the SQL repositories."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import literal_column
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from zonectl.domain.errors import BlueprintError, ErrorCode

logger = logging.getLogger(__name__)

# SQLite's implicit row id; gives insertion order for list queries.
ROWID = literal_column("rowid")


@contextmanager
def storage_errors(op: str) -> Iterator[None]:
    """Surface driver failures as ``STORAGE_ERROR``."""
    try:
        yield
    except SQLAlchemyError as exc:
        logger.warning("Storage failure during %s", op, exc_info=True)
        raise BlueprintError(ErrorCode.STORAGE_ERROR, f"{op} failed: {exc}") from exc


class SqlRepository:
    """Base for repositories over one SQLAlchemy engine.

    Read-modify-write mutations hold ``self._write_lock`` and run in one
    ``engine.begin()`` transaction, so concurrent in-process writers
    cannot lose each other's appends.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine
        self._write_lock = threading.RLock()
