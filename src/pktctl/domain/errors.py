"""Typed failures raised by the domain layer.

Domain functions raise; the service layer converts these into a
ServiceResult carrying a structured ServiceError.
"""

from __future__ import annotations

from typing import Any


class PacketError(Exception):
    """Base class for every packet-domain failure."""

    code = "PACKET_ERROR"

    def to_detail(self) -> dict[str, Any]:
        """Structured attributes for ``ServiceError.detail``."""
        return {}


class PacketParseError(PacketError):
    """A line does not conform to the packet grammar.

    Attributes:
        text: The offending line.
        position: Zero-based character offset where parsing failed.
        reason: Short description of what was expected.
        block: 1-based block index, when known.
        side: ``"left"`` or ``"right"``, when known.
    """

    code = "PARSE_ERROR"

    def __init__(
        self,
        text: str,
        position: int,
        reason: str,
        *,
        block: int | None = None,
        side: str | None = None,
    ) -> None:
        self.text = text
        self.position = position
        self.reason = reason
        self.block = block
        self.side = side
        super().__init__(self._render())

    def _render(self) -> str:
        where = f"column {self.position + 1}"
        if self.block is not None:
            where = f"block {self.block}, {self.side or 'line'} packet, {where}"
        return f"{self.reason} ({where}): {self.text!r}"

    def located(self, block: int, side: str) -> PacketParseError:
        """Return a copy of this error annotated with its block position."""
        return PacketParseError(self.text, self.position, self.reason, block=block, side=side)

    def to_detail(self) -> dict[str, Any]:
        detail: dict[str, Any] = {
            "text": self.text,
            "position": self.position,
            "reason": self.reason,
        }
        if self.block is not None:
            detail["block"] = self.block
            detail["side"] = self.side
        return detail


class BlockStructureError(PacketError):
    """An input block does not hold exactly two packet lines."""

    code = "MALFORMED_BLOCK"

    def __init__(self, reason: str, *, block: int | None = None, line_count: int = 0) -> None:
        self.reason = reason
        self.block = block
        self.line_count = line_count
        prefix = f"block {block}: " if block is not None else ""
        super().__init__(f"{prefix}{reason}")

    def to_detail(self) -> dict[str, Any]:
        return {"block": self.block, "line_count": self.line_count, "reason": self.reason}
