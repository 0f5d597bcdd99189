"""Recursive-descent parser for packet lines.

Grammar::

    value := list | int
    list  := "[" [ value ( "," value )* ] "]"
    int   := digit+

Whitespace between tokens is skipped. Anything left over after a complete
top-level value is an error.
"""

from __future__ import annotations

from typing import Literal

from pktctl.domain.errors import PacketParseError
from pktctl.domain.packets import Packet, PacketInt, PacketList

OverflowMode = Literal["error", "wrap"]

DEFAULT_MAX_DEPTH = 256
DEFAULT_MAX_VALUE = 255

_WHITESPACE = frozenset(" \t")
_DIGITS = frozenset("0123456789")
# Longer overflowing integers are reported by digit count.
_SHOWN_DIGITS = 20


class _PacketReader:
    """Cursor over a single line of packet text."""

    def __init__(
        self,
        text: str,
        *,
        max_depth: int,
        max_value: int | None,
        overflow: OverflowMode,
    ) -> None:
        self.text = text
        self.pos = 0
        self.max_depth = max_depth
        self.max_value = max_value
        self.overflow = overflow

    def fail(self, reason: str, position: int | None = None) -> PacketParseError:
        return PacketParseError(self.text, self.pos if position is None else position, reason)

    def peek(self) -> str:
        while self.pos < len(self.text) and self.text[self.pos] in _WHITESPACE:
            self.pos += 1
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def read_document(self) -> Packet:
        if not self.peek():
            raise self.fail("empty packet")
        packet = self.read_value(depth=0)
        if self.peek():
            raise self.fail(f"unexpected {self.text[self.pos]!r} after end of packet")
        return packet

    def read_value(self, depth: int) -> Packet:
        char = self.peek()
        if char == "[":
            return self.read_list(depth + 1)
        if char in _DIGITS:
            return self.read_int()
        if not char:
            raise self.fail("unexpected end of input, expected a value")
        raise self.fail(f"unexpected {char!r}, expected a value")

    def read_list(self, depth: int) -> PacketList:
        if depth > self.max_depth:
            raise self.fail(f"nesting deeper than {self.max_depth} levels")
        self.pos += 1  # "["
        items: list[Packet] = []
        if self.peek() == "]":
            self.pos += 1
            return PacketList()
        while True:
            items.append(self.read_value(depth))
            char = self.peek()
            if char == ",":
                self.pos += 1
                if self.peek() == "]":
                    raise self.fail("trailing comma before ']'")
                continue
            if char == "]":
                self.pos += 1
                return PacketList(tuple(items))
            if not char:
                raise self.fail("unbalanced brackets, expected ']'")
            raise self.fail(f"unexpected {char!r}, expected ',' or ']'")

    def read_int(self) -> PacketInt:
        start = self.pos
        while self.pos < len(self.text) and self.text[self.pos] in _DIGITS:
            self.pos += 1
        digits = self.text[start : self.pos].lstrip("0") or "0"
        if self.max_value is None:
            try:
                return PacketInt(int(digits))
            except ValueError:
                raise self.fail(f"integer of {len(digits)} digits is too long", start) from None
        if len(digits) <= len(str(self.max_value)) and int(digits) <= self.max_value:
            return PacketInt(int(digits))
        if self.overflow == "error":
            shown = digits if len(digits) <= _SHOWN_DIGITS else f"of {len(digits)} digits"
            raise self.fail(f"integer {shown} exceeds maximum {self.max_value}", start)
        modulus = self.max_value + 1
        value = 0
        for digit in digits:
            value = (value * 10 + int(digit)) % modulus
        return PacketInt(value)


def parse_packet(
    text: str,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
    max_value: int | None = DEFAULT_MAX_VALUE,
    overflow: OverflowMode = "error",
) -> Packet:
    """Parse one line of bracket notation into a packet tree.

    Args:
        text: A single packet line such as ``"[1,[2,3],[]]"``.
        max_depth: Deepest list nesting accepted before failing.
        max_value: Largest integer accepted, or None for no limit.
        overflow: ``"error"`` rejects integers above *max_value*;
            ``"wrap"`` truncates them modulo ``max_value + 1``.

    Raises:
        PacketParseError: If *text* does not match the packet grammar, or
            nests deeper than the interpreter stack allows.
    """
    reader = _PacketReader(
        text.strip(),
        max_depth=max_depth,
        max_value=max_value,
        overflow=overflow,
    )
    try:
        return reader.read_document()
    except RecursionError:
        raise reader.fail("nesting too deep to parse") from None
