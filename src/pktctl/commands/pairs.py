"""Command: list the ordering verdict of every pair."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pktctl.commands._base import PktCommand

if TYPE_CHECKING:
    from pktctl.commands._context import AppContext


@click.command(
    cls=PktCommand,
    examples="""\
  pktctl pairs input.txt
  pktctl pairs input.txt --only-in-order
  pktctl --json pairs input.txt""",
)
@click.argument("source", metavar="INPUT")
@click.option("--only-in-order", is_flag=True, help="List only pairs that are in order.")
@click.pass_obj
def pairs(app: AppContext, source: str, only_in_order: bool) -> None:
    """Show every packet pair in INPUT (- for stdin) with its ordering."""
    text = app.read_source(source)
    app.emit(app.service.evaluate_pairs(text, only_in_order=only_in_order))
