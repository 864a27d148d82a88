"""Rich Console factory and theme for medform output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

MEDFORM_THEME = Theme(
    {
        "mf.ok": "bold green",
        "mf.error": "bold red",
        "mf.warning": "bold yellow",
        "mf.op": "bold cyan",
        "mf.key": "dim",
        "mf.path": "bold blue",
        "mf.spec": "bold",
        "mf.required": "bold magenta",
        "mf.optional": "dim",
        "mf.issue.field": "red",
        "mf.issue.refinement": "yellow",
    }
)

_ISSUE_STYLES: dict[str, str] = {
    "field": "mf.issue.field",
    "refinement": "mf.issue.refinement",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=MEDFORM_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 100,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_issue(kind: str) -> str:
    """Return the Rich style name for an issue kind."""
    return _ISSUE_STYLES.get(kind, "")
