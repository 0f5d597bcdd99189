"""Block splitting and pair aggregation.

Input is one or more blocks separated by blank lines; each block holds
exactly two packet lines. Blocks are indexed from 1 in input order,
regardless of whether they turn out to be in order.

Any malformed block or packet aborts the whole call. There is no
partial-success mode.
"""

from __future__ import annotations

import re
from typing import Any

from pktctl.domain.errors import BlockStructureError, PacketParseError
from pktctl.domain.packets import Pair
from pktctl.domain.parser import parse_packet

# A blank line is one holding nothing but whitespace.
_BLANK_LINE = re.compile(r"\n[ \t]*\n")


def split_blocks(text: str) -> list[str]:
    """Split raw input into blank-line-delimited blocks.

    Handles both ``\\n`` and ``\\r\\n`` line endings. Runs of several blank
    lines count as a single separator.

    Raises:
        BlockStructureError: If *text* holds no blocks at all.
    """
    normalized = text.replace("\r\n", "\n").strip()
    if not normalized:
        raise BlockStructureError("input holds no packet pairs")
    return [block for block in _BLANK_LINE.split(normalized) if block.strip()]


def parse_pair(block: str, index: int, **parser_options: Any) -> Pair:
    """Parse one block into a Pair.

    Raises:
        BlockStructureError: If the block does not hold exactly two lines.
        PacketParseError: If either line is not a valid packet.
    """
    lines = [line for line in block.split("\n") if line.strip()]
    if len(lines) != 2:
        raise BlockStructureError(
            f"expected 2 packet lines, found {len(lines)}",
            block=index,
            line_count=len(lines),
        )
    packets = []
    for side, line in zip(("left", "right"), lines, strict=True):
        try:
            packets.append(parse_packet(line, **parser_options))
        except PacketParseError as exc:
            raise exc.located(index, side) from exc
    return Pair(index=index, left=packets[0], right=packets[1])


def parse_pairs(text: str, **parser_options: Any) -> list[Pair]:
    """Parse every block of *text* into an indexed Pair."""
    return [
        parse_pair(block, index, **parser_options)
        for index, block in enumerate(split_blocks(text), start=1)
    ]


def sum_correct(text: str, **parser_options: Any) -> int:
    """Sum the 1-based indices of the pairs that are in order.

    >>> sum_correct("[1,1,3,1,1]\\n[1,1,5,1,1]\\n\\n[9]\\n[[8,7,6]]")
    1
    """
    return sum(pair.index for pair in parse_pairs(text, **parser_options) if pair.is_in_order())
