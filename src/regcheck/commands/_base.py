"""Custom Click base classes and shared registration options.

``RegCommand`` accepts an ``examples`` parameter; when ``--examples`` is
passed, the command prints usage examples and exits.  This keeps
``--help`` concise while making examples available on demand.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import click

from regcheck.domain.models import RegistrationRequest
from regcheck.domain.validation import Strategy


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class RegCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


def request_options[F: Callable[..., Any]](func: F) -> F:
    """Attach the five raw registration fields plus ``--strategy``.

    Every field is optional so that incomplete submissions reach the
    validators instead of being rejected by Click.
    """
    options = [
        click.option("--first-name", default="", help="Given name."),
        click.option("--last-name", default="", help="Family name."),
        click.option("--age", type=int, default=0, help="Age in years."),
        click.option("--sex", default="", help="Sex code: M, F or X."),
        click.option("--country", default="", help="Country of residence."),
        click.option(
            "--strategy",
            type=click.Choice([s.value for s in Strategy]),
            default=None,
            help="Validation strategy (default from config: fail-fast).",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def build_request(
    first_name: str,
    last_name: str,
    age: int,
    sex: str,
    country: str,
) -> RegistrationRequest:
    return RegistrationRequest(
        first_name=first_name,
        last_name=last_name,
        age=age,
        sex=sex,
        country=country,
    )
