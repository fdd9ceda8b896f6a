"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  Renderers
are dispatched by ``result.op`` in :func:`render_result`; every service
operation has an entry in ``_OP_RENDERERS``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from regcheck.domain.types import Region
from regcheck.output.console import (
    create_console,
    get_output,
    region_label,
    style_for_region,
)

if TYPE_CHECKING:
    from rich.console import Console

    from regcheck.services.result import ServiceResult

type Renderer = Callable[..., None]


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        _OP_RENDERERS[result.op](result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="reg.ok")
    op = Text(f"  {result.op}", style="reg.op")
    console.print(label, op)


def _field(console: Console, key: str, value: Any, *, style: str = "") -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="reg.key")
    console.print(k, Text(str(value), style=style), sep="")


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    label = Text("ERROR", style="reg.error")
    op = Text(f"  {result.op}", style="reg.op")
    if err is None:
        console.print(label, op, Text(" — Unknown error"), sep="")
        return

    errors = err.detail.get("errors") or []
    if len(errors) > 1:
        console.print(label, op, sep="")
        for message in errors:
            console.print(Text(f"  - {message}"))
    else:
        console.print(label, op, Text(f" — {err.message}"), sep="")

    if verbose and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Operation renderers ───────────────────────────────────────────────


def _render_validate(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "strategy", result.data.get("strategy", ""))
    if verbose:
        for key, value in result.data.get("request", {}).items():
            _field(console, key, value)


def _render_register(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    user = result.data.get("user", {})
    name = f"{user.get('first_name', '')} {user.get('last_name', '')}".strip()
    _field(console, "name", name, style="reg.name")
    _field(console, "age", user.get("age", ""))
    _field(console, "gender", user.get("gender", ""))
    region = Region(user["region"])
    _field(console, "region", region_label(region), style=style_for_region(region))


def _render_regions(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Country", no_wrap=True)
    table.add_column("Region")
    for item in result.data.get("items", []):
        region = Region(item["region"])
        table.add_row(item["country"], Text(region_label(region), style=style_for_region(region)))
    console.print(table)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Renderer] = {
    "validate": _render_validate,
    "register": _render_register,
    "regions": _render_regions,
}
