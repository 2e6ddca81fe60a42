"""In-memory repositories guarded by one readers-writer lock per entity kind."""

from zonectl.infrastructure.memory.lock import ReadWriteLock
from zonectl.infrastructure.memory.store import (
    MemoryAgentRepository,
    MemoryProjectRepository,
    MemoryZoneRepository,
)

__all__ = [
    "MemoryAgentRepository",
    "MemoryProjectRepository",
    "MemoryZoneRepository",
    "ReadWriteLock",
]
