"""``dotacl check`` — decide a single role/action pair."""

from __future__ import annotations

import sys

import click

from dotacl.cli_commands._output import (
    default_option,
    json_option,
    load_engine,
    policy_argument,
    print_decision,
)


@click.command("check")
@policy_argument
@click.argument("role")
@click.argument("action")
@default_option
@json_option
def check(policy_file: str, role: str, action: str, default: str | None, as_json: bool) -> None:
    """Check whether ROLE may perform ACTION under POLICY_FILE.

    Exits with status 0 when allowed and 1 when denied.
    """
    engine = load_engine(policy_file, default)
    allowed = engine.is_allowed(role, action)
    print_decision(role, action, allowed, as_json=as_json)
    if not allowed:
        sys.exit(1)
