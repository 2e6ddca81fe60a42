"""SQLAlchemy Core table definitions for the zonectl database.

Three tables keyed by string identifiers. Array-valued columns hold JSON
text and are read back through :mod:`.codecs`, which tolerates legacy
and malformed values. ``zones.project_id`` is deliberately not a foreign
key: cascading is the service layer's job, not the store's.
"""

from __future__ import annotations

from sqlalchemy import Column, Index, MetaData, Table, Text

metadata = MetaData()

projects = Table(
    "projects",
    metadata,
    Column("id", Text, primary_key=True),
    Column("name", Text, nullable=False, default="", server_default=""),
    Column("root_dir", Text, nullable=False, server_default=""),
    Column("ignored_paths", Text),  # JSON array
)

zones = Table(
    "zones",
    metadata,
    Column("id", Text, primary_key=True),
    Column("project_id", Text, nullable=False, default="", server_default=""),
    Column("name", Text, nullable=False, server_default=""),
    Column("pattern", Text, default="", server_default=""),
    Column("purpose", Text, default="", server_default=""),
    Column("constraints", Text),  # JSON array
    Column("assigned_agents", Text),  # JSON array of {id, name}
    Column("explicit_paths", Text),  # JSON array
)

agents = Table(
    "agents",
    metadata,
    Column("id", Text, primary_key=True),
    Column("name", Text, default="", server_default=""),
    Column("description", Text, default="", server_default=""),
    Column("prompt", Text, default="", server_default=""),
)

Index("ix_zones_project_id", zones.c.project_id)
