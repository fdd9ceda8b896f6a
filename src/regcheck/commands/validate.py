"""Command: run field validation over a registration submission."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from regcheck.commands._base import RegCommand, build_request, request_options
from regcheck.domain.validation import Strategy

if TYPE_CHECKING:
    from regcheck.commands._context import AppContext


@click.command(
    cls=RegCommand,
    examples="""\
  regcheck validate --first-name John --last-name Doe --age 25 --sex M --country Thailand
  regcheck validate --age 13 --sex G --strategy accumulate
  regcheck --json validate --first-name Jane --age 37""",
)
@request_options
@click.pass_obj
def validate(
    app: AppContext,
    first_name: str,
    last_name: str,
    age: int,
    sex: str,
    country: str,
    strategy: str | None,
) -> None:
    """Check a submission against the registration rules."""
    request = build_request(first_name, last_name, age, sex, country)
    chosen = Strategy(strategy) if strategy else None
    app.emit(app.service.validate(request, strategy=chosen))
