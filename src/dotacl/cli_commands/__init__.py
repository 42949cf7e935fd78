"""CLI subcommand registration."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all subcommands on the CLI group."""
    from dotacl.cli_commands.check import check
    from dotacl.cli_commands.roles import roles
    from dotacl.cli_commands.who import who

    cli.add_command(check)
    cli.add_command(who)
    cli.add_command(roles)
