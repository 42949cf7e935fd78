"""``dotacl who`` — list the roles allowed to perform an action."""

from __future__ import annotations

import click

from dotacl.cli_commands._output import (
    default_option,
    json_option,
    load_engine,
    policy_argument,
    print_allowed_roles,
)


@click.command("who")
@policy_argument
@click.argument("action")
@default_option
@json_option
def who(policy_file: str, action: str, default: str | None, as_json: bool) -> None:
    """List the roles in POLICY_FILE allowed to perform ACTION."""
    engine = load_engine(policy_file, default)
    print_allowed_roles(action, engine.get_allowed_roles(action), as_json=as_json)
