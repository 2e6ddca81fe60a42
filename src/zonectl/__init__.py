"""zonectl — workspace zones, projects, and agents for codebase navigation."""

__version__ = "0.1.0"
