"""Command: list supported countries and their regions."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from regcheck.commands._base import RegCommand

if TYPE_CHECKING:
    from regcheck.commands._context import AppContext


@click.command(
    cls=RegCommand,
    examples="""\
  regcheck regions
  regcheck --json regions""",
)
@click.pass_obj
def regions(app: AppContext) -> None:
    """List the country-to-region table, including config overrides."""
    app.emit(app.service.regions())
