"""Rich Console factory and theme for facportal output.

Consoles render into a StringIO buffer so renderers can return plain
strings. Rich drops color codes on its own when output is not a TTY.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

PORTAL_THEME = Theme(
    {
        "fp.ok": "bold green",
        "fp.error": "bold red",
        "fp.warning": "bold yellow",
        "fp.op": "bold cyan",
        "fp.key": "dim",
        "fp.id": "bold blue",
        "fp.title": "bold",
        "fp.date": "magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=PORTAL_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
