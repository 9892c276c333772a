"""Rich Console factory and theme for viu output.

Consoles render to a StringIO buffer so renderers can return ``str``.
In non-TTY environments (tests, pipes) Rich disables color codes on its
own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

VIU_THEME = Theme(
    {
        "viu.ok": "bold green",
        "viu.error": "bold red",
        "viu.warning": "bold yellow",
        "viu.op": "bold cyan",
        "viu.key": "dim",
        "viu.path": "bold blue",
        "viu.value": "bold",
        "viu.hint": "italic",
        "viu.score.low": "red",
        "viu.score.mid": "yellow",
        "viu.score.high": "green",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=VIU_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 100,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_score(score: int) -> str:
    """Password strength style: red below 3, yellow at 3, green from 4."""
    if score >= 4:
        return "viu.score.high"
    if score == 3:
        return "viu.score.mid"
    return "viu.score.low"
