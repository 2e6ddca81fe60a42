"""SQLite database engine, schema, and column codecs via SQLAlchemy Core."""

from zonectl.infrastructure.database.codecs import (
    decode_agent_refs,
    decode_string_list,
    encode_agent_refs,
    encode_string_list,
)
from zonectl.infrastructure.database.engine import create_db_engine, init_database
from zonectl.infrastructure.database.schema import agents, metadata, projects, zones

__all__ = [
    "agents",
    "create_db_engine",
    "decode_agent_refs",
    "decode_string_list",
    "encode_agent_refs",
    "encode_string_list",
    "init_database",
    "metadata",
    "projects",
    "zones",
]
