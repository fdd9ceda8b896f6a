"""Command: validate a submission and resolve it into a user."""

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
  regcheck register --first-name John --last-name Doe --age 18 --sex M --country Thailand
  regcheck --json register --first-name Jane --last-name Doe --age 37 --sex F --country Belgium""",
)
@request_options
@click.pass_obj
def register(
    app: AppContext,
    first_name: str,
    last_name: str,
    age: int,
    sex: str,
    country: str,
    strategy: str | None,
) -> None:
    """Validate a submission and build the registered user."""
    request = build_request(first_name, last_name, age, sex, country)
    chosen = Strategy(strategy) if strategy else None
    app.emit(app.service.register(request, strategy=chosen))
