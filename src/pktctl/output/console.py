"""Rich Console factory and theme for pktctl output.

Consoles render to a StringIO buffer, preserving the
``format_result() -> str`` contract. In non-TTY environments (tests,
pipes) Rich disables color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

PKT_THEME = Theme(
    {
        "pkt.ok": "bold green",
        "pkt.error": "bold red",
        "pkt.warning": "bold yellow",
        "pkt.op": "bold cyan",
        "pkt.key": "dim",
        "pkt.index": "bold blue",
        "pkt.packet": "white",
        "pkt.total": "bold magenta",
        "pkt.ordering.less": "green",
        "pkt.ordering.equal": "yellow",
        "pkt.ordering.greater": "red",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (keeps table layout stable in tests).
    """
    return Console(
        file=StringIO(),
        theme=PKT_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_ordering(ordering: str) -> str:
    """Return the Rich style name for an ordering verdict."""
    return f"pkt.ordering.{ordering}" if ordering in ("less", "equal", "greater") else ""
