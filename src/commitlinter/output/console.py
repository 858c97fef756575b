"""Rich Console factory and theme for commitlinter output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract. Colors are only emitted when the
caller asks for them (the real stream is a terminal).
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

LINT_THEME = Theme(
    {
        "lint.ok": "bold green",
        "lint.skip": "bold cyan",
        "lint.error": "red",
        "lint.format": "bright_green",
        "lint.type": "bright_yellow",
        "lint.doc": "bright_yellow",
        "lint.key": "dim",
        "lint.link": "bright_green",
    }
)


def create_console(*, color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        color: Emit ANSI styles even though the buffer is not a terminal.
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=LINT_THEME,
        force_terminal=color,
        no_color=not color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
