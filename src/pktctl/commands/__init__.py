"""Subcommand modules for pktctl.

Provides register_commands() which uses deferred imports to keep
``pktctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register every standalone command on the root CLI group."""
    from pktctl.commands.compare import compare
    from pktctl.commands.pairs import pairs
    from pktctl.commands.sum_cmd import sum_cmd

    cli.add_command(sum_cmd)
    cli.add_command(pairs)
    cli.add_command(compare)
