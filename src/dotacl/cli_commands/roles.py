"""``dotacl roles`` — show the roles declared by a policy."""

from __future__ import annotations

import click

from dotacl.cli_commands._output import json_option, load_engine, policy_argument, print_roles_table


@click.command("roles")
@policy_argument
@json_option
def roles(policy_file: str, as_json: bool) -> None:
    """Show every role in POLICY_FILE with its parents."""
    print_roles_table(load_engine(policy_file), as_json=as_json)
