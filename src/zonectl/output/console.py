"""Rich Console factory and theme for zonectl output.

Consoles render into a StringIO buffer so renderers keep a plain
``-> str`` contract. Rich drops colour codes when not on a TTY (tests,
pipes).
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

ZONE_THEME = Theme(
    {
        "zone.ok": "bold green",
        "zone.error": "bold red",
        "zone.op": "bold cyan",
        "zone.key": "dim",
        "zone.id": "bold blue",
        "zone.path": "dim",
        "zone.name": "bold",
        "zone.dir": "bold blue",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=ZONE_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
