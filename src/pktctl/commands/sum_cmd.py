"""Command: sum the indices of correctly ordered pairs."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pktctl.commands._base import PktCommand

if TYPE_CHECKING:
    from pktctl.commands._context import AppContext


@click.command(
    "sum",
    cls=PktCommand,
    examples="""\
  pktctl sum input.txt
  pktctl -q sum input.txt
  cat input.txt | pktctl sum -
  pktctl --json sum input.txt""",
)
@click.argument("source", metavar="INPUT")
@click.pass_obj
def sum_cmd(app: AppContext, source: str) -> None:
    """Sum the 1-based indices of in-order packet pairs in INPUT (- for stdin)."""
    app.emit(app.service.sum_correct(app.read_source(source)))
