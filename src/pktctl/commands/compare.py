"""Command: compare two packet literals."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pktctl.commands._base import PktCommand

if TYPE_CHECKING:
    from pktctl.commands._context import AppContext


@click.command(
    cls=PktCommand,
    examples="""\
  pktctl compare '[1,1,3,1,1]' '[1,1,5,1,1]'
  pktctl -q compare '[9]' '[[8,7,6]]'""",
)
@click.argument("left")
@click.argument("right")
@click.pass_obj
def compare(app: AppContext, left: str, right: str) -> None:
    """Compare packet LEFT against packet RIGHT."""
    app.emit(app.service.compare(left, right))
