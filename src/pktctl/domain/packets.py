"""Packet values and the recursive ordering rule.

A packet is either a non-negative integer or an ordered list of packets.
Both constructors are frozen dataclasses, so structural equality comes
for free and a parsed tree can never be mutated after construction.

Ordering rules, applied top-down:
- int vs int: numeric comparison.
- list vs list: element-wise from index 0; the first non-EQUAL result
  wins, otherwise the shorter list is LESS.
- int vs list (either side): the int is wrapped as ``[int]`` and the
  list rule applies, preserving operand order.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Ordering(IntEnum):
    """Outcome of comparing two packets."""

    LESS = -1
    EQUAL = 0
    GREATER = 1

    def mirror(self) -> Ordering:
        """The result of the same comparison with operands swapped."""
        return Ordering(-self.value)


@dataclass(frozen=True)
class PacketInt:
    """A leaf packet holding a single non-negative integer."""

    value: int

    def __str__(self) -> str:
        return format_packet(self)


@dataclass(frozen=True)
class PacketList:
    """A packet holding an ordered, possibly empty, sequence of packets."""

    items: tuple[Packet, ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def __str__(self) -> str:
        return format_packet(self)


type Packet = PacketInt | PacketList


@dataclass(frozen=True)
class Pair:
    """Two packets read from one input block.

    ``index`` is the 1-based position of the block in the input.
    """

    index: int
    left: Packet
    right: Packet

    def ordering(self) -> Ordering:
        return compare(self.left, self.right)

    def is_in_order(self) -> bool:
        return is_in_order(self)


def _compare_items(left: tuple[Packet, ...], right: tuple[Packet, ...]) -> Ordering:
    for a, b in zip(left, right, strict=False):
        result = compare(a, b)
        if result is not Ordering.EQUAL:
            return result
    return _ordering_of(len(left), len(right))


def _ordering_of(a: int, b: int) -> Ordering:
    if a < b:
        return Ordering.LESS
    if a > b:
        return Ordering.GREATER
    return Ordering.EQUAL


def compare(a: Packet, b: Packet) -> Ordering:
    """Compare two packets under the recursive ordering rule."""
    match a, b:
        case PacketInt(value=x), PacketInt(value=y):
            return _ordering_of(x, y)
        case PacketList(items=xs), PacketList(items=ys):
            return _compare_items(xs, ys)
        case PacketInt(), PacketList(items=ys):
            return _compare_items((a,), ys)
        case PacketList(items=xs), PacketInt():
            return _compare_items(xs, (b,))
    msg = f"Cannot compare {type(a).__name__} with {type(b).__name__}"
    raise TypeError(msg)


def is_in_order(pair: Pair) -> bool:
    """True when the left packet sorts before or equal to the right one."""
    return compare(pair.left, pair.right) is not Ordering.GREATER


def format_packet(packet: Packet) -> str:
    """Render *packet* in compact bracket notation, e.g. ``[1,[2,3],[]]``."""
    if isinstance(packet, PacketInt):
        return str(packet.value)
    return "[" + ",".join(format_packet(item) for item in packet.items) + "]"
