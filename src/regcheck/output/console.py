"""Rich Console factory and theme for regcheck output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO
from typing import assert_never

from rich.console import Console
from rich.theme import Theme

from regcheck.domain.types import Region

REG_THEME = Theme(
    {
        "reg.ok": "bold green",
        "reg.error": "bold red",
        "reg.warning": "bold yellow",
        "reg.op": "bold cyan",
        "reg.key": "dim",
        "reg.name": "bold",
        "reg.region.europe": "blue",
        "reg.region.north_america": "yellow",
        "reg.region.other": "magenta",
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
        theme=REG_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def region_label(region: Region) -> str:
    """Human label for a region."""
    match region:
        case Region.EUROPE:
            return "Europe"
        case Region.NORTH_AMERICA:
            return "North America"
        case Region.OTHER:
            return "Other"
        case _:
            assert_never(region)


def style_for_region(region: Region) -> str:
    """Return the Rich style name for a region."""
    return f"reg.region.{region.value}"
