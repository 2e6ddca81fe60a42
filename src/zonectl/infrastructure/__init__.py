"""Infrastructure layer — storage backends, filesystem ports, workspace wiring.

Implements the ports declared in :mod:`zonectl.domain.ports` using
SQLAlchemy (SQLite) or process memory, and the OS filesystem.
It must never import from services, commands, mcp, or output.
"""
