"""Shared CLI helpers: policy loading and output formatters."""

from __future__ import annotations

import json
import sys

import click
from rich.console import Console
from rich.table import Table

from dotacl.engine.policy import PolicyEngine
from dotacl.errors import PolicyValidationError

console = Console()

POLICY_ERROR_EXIT = 2

policy_argument = click.argument("policy_file", type=click.Path(exists=True, dir_okay=False))
json_option = click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
default_option = click.option(
    "--default",
    "default",
    type=click.Choice(["allow", "deny"]),
    default=None,
    help="Override the policy's default outcome.",
)


def load_engine(policy_file: str, default: str | None = None) -> PolicyEngine:
    """Build an engine from *policy_file*, exiting with status 2 on errors."""
    try:
        engine = PolicyEngine.from_file(policy_file)
    except PolicyValidationError as exc:
        console.print(f"[red]Error loading policy:[/red] {exc}")
        sys.exit(POLICY_ERROR_EXIT)

    if default is not None:
        engine.set_default_action(default == "allow")
    return engine


def print_decision(role: str, action: str, allowed: bool, *, as_json: bool = False) -> None:
    """Print a single allow/deny decision."""
    if as_json:
        console.print_json(json.dumps({"role": role, "action": action, "allowed": allowed}))
        return

    verdict = "[green]allowed[/green]" if allowed else "[red]denied[/red]"
    console.print(f"{role} -> {action}: {verdict}")


def print_allowed_roles(action: str, roles: list[str], *, as_json: bool = False) -> None:
    """Print the roles allowed to perform *action*."""
    if as_json:
        console.print_json(json.dumps({"action": action, "roles": roles}))
        return

    if not roles:
        console.print(f"[yellow]No role may perform {action}.[/yellow]")
        return

    console.print(f"\n[bold]Roles allowed to perform {action}:[/bold]")
    for role in roles:
        console.print(f"  {role}")


def print_roles_table(engine: PolicyEngine, *, as_json: bool = False) -> None:
    """Pretty-print every role with its parents and rule count."""
    rows = [
        (role, engine.registry.parents_of(role), len(engine.rules.rules_for(role)))
        for role in engine.get_roles()
    ]

    if as_json:
        data = {
            "default_allow": engine.get_default_action(),
            "roles": [
                {"name": name, "inherits": parents, "rules": count}
                for name, parents, count in rows
            ],
        }
        console.print_json(json.dumps(data))
        return

    table = Table(title="Roles")
    table.add_column("Name", style="cyan")
    table.add_column("Inherits")
    table.add_column("Rules", justify="right")

    for name, parents, count in rows:
        table.add_row(name, ", ".join(parents) or "-", str(count))

    console.print(table)
    default = "allow" if engine.get_default_action() else "deny"
    console.print(f"Default: {default}")
