"""Rich Console factory and theme for foldkit output.

Consoles render into a StringIO buffer so formatters can keep returning
plain strings. Rich drops color codes when it detects no terminal.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

FOLDKIT_THEME = Theme(
    {
        "fk.ok": "bold green",
        "fk.error": "bold red",
        "fk.warning": "bold yellow",
        "fk.op": "bold cyan",
        "fk.key": "dim",
        "fk.value": "bold",
        "fk.holds": "green",
        "fk.fails": "red",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=FOLDKIT_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
