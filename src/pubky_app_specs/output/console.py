"""Rich Console factory and theme for pubky-specs output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract. In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

SPECS_THEME = Theme(
    {
        "specs.ok": "bold green",
        "specs.error": "bold red",
        "specs.warning": "bold yellow",
        "specs.op": "bold cyan",
        "specs.key": "dim",
        "specs.id": "bold blue",
        "specs.path": "dim",
        "specs.uri": "underline",
        "specs.kind": "magenta",
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
        theme=SPECS_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_key(key: str) -> str:
    """Return the Rich style name for a result field."""
    if key == "id" or key.endswith("_id") or key == "owner":
        return "specs.id"
    if key == "path":
        return "specs.path"
    if key in ("uri", "url"):
        return "specs.uri"
    if key in ("kind", "resource"):
        return "specs.kind"
    return ""
