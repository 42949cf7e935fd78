"""dotacl CLI entrypoint."""

from __future__ import annotations

import logging

import click

from dotacl import __version__


@click.group()
@click.version_option(version=__version__, prog_name="dotacl")
@click.option("-v", "--verbose", is_flag=True, help="Log every decision at DEBUG level.")
def main(verbose: bool) -> None:
    """dotacl — evaluate role-based access policies."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


# Register subcommands
from dotacl.cli_commands import register_commands  # noqa: E402

register_commands(main)

if __name__ == "__main__":
    main()
