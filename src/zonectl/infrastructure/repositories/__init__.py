"""SQLite-backed implementations of the repository ports."""

from zonectl.infrastructure.repositories.agents import SqlAgentRepository
from zonectl.infrastructure.repositories.projects import SqlProjectRepository
from zonectl.infrastructure.repositories.zones import SqlZoneRepository

__all__ = ["SqlAgentRepository", "SqlProjectRepository", "SqlZoneRepository"]
