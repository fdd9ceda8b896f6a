"""Subcommand modules for regcheck."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from regcheck.commands.regions import regions
    from regcheck.commands.register import register
    from regcheck.commands.validate import validate

    cli.add_command(validate)
    cli.add_command(register)
    cli.add_command(regions)
