"""PacketService — parse packet input and report pair ordering.

Pipeline: READ → PARSE → COMPARE → REPORT

Domain failures (PacketParseError, BlockStructureError) are converted
into a failed ServiceResult; nothing is skipped or substituted.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from pktctl.domain.errors import PacketError
from pktctl.domain.packets import Ordering, Pair, compare, format_packet
from pktctl.domain.pairs import parse_pairs
from pktctl.domain.parser import parse_packet
from pktctl.services.base import BaseService
from pktctl.services.contracts import (
    CompareResultData,
    PairsResultData,
    SumResultData,
    dump_validated,
)
from pktctl.services.result import ServiceResult
from pktctl.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)

STDIN_MARKER = "-"


def _failure(op: str, exc: PacketError) -> ServiceResult:
    logger.debug("%s failed: %s", op, exc)
    return ServiceResult.failure(op, exc.code, str(exc), exc.to_detail())


class PacketService(BaseService):
    """Packet parsing, comparison, and pair aggregation."""

    def read_input(self, source: str) -> ServiceResult:
        """Read raw packet text from a file path, or stdin when *source* is ``-``."""
        op = "read"
        try:
            if source == STDIN_MARKER:
                text = click.get_text_stream("stdin", encoding="utf-8-sig").read()
            else:
                text = Path(source).read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as exc:
            return ServiceResult.failure(
                op,
                "READ_FAILED",
                f"Cannot read {source}: {exc}",
                {"source": source},
            )
        logger.debug("Read %d characters from %s", len(text), source)
        return ServiceResult(ok=True, op=op, data={"source": source, "text": text})

    def _parse(self, text: str) -> list[Pair]:
        with trace_span("parse") as span:
            pairs = parse_pairs(text, **self._parser_options)
            if span:
                span.annotate("pairs", len(pairs))
        return pairs

    @traced
    def sum_correct(self, text: str) -> ServiceResult:
        """Sum the 1-based indices of in-order pairs in *text*."""
        op = "sum"
        try:
            pairs = self._parse(text)
        except PacketError as exc:
            return _failure(op, exc)

        with trace_span("compare") as span:
            indices = [pair.index for pair in pairs if pair.is_in_order()]
            if span:
                span.annotate("in_order", len(indices))

        logger.debug("%d of %d pairs in order", len(indices), len(pairs))
        data = {
            "pair_count": len(pairs),
            "in_order_count": len(indices),
            "in_order_indices": indices,
            "sum": sum(indices),
        }
        return ServiceResult(ok=True, op=op, data=dump_validated(SumResultData, data))

    @traced
    def evaluate_pairs(self, text: str, *, only_in_order: bool = False) -> ServiceResult:
        """Report the ordering verdict of every pair in *text*.

        ``count``, ``in_order_count`` and ``sum`` always describe the whole
        input; *only_in_order* filters ``items`` alone.
        """
        op = "pairs"
        try:
            pairs = self._parse(text)
        except PacketError as exc:
            return _failure(op, exc)

        items = []
        with trace_span("compare") as span:
            for pair in pairs:
                ordering = pair.ordering()
                items.append(
                    {
                        "index": pair.index,
                        "left": format_packet(pair.left),
                        "right": format_packet(pair.right),
                        "ordering": ordering.name.lower(),
                        "in_order": ordering is not Ordering.GREATER,
                    }
                )
            if span:
                span.annotate("pairs", len(items))

        in_order = [item for item in items if item["in_order"]]
        data = {
            "count": len(items),
            "in_order_count": len(in_order),
            "sum": sum(item["index"] for item in in_order),
            "items": in_order if only_in_order else items,
        }
        return ServiceResult(ok=True, op=op, data=dump_validated(PairsResultData, data))

    @traced
    def compare(self, left_text: str, right_text: str) -> ServiceResult:
        """Compare two packet literals."""
        op = "compare"
        try:
            with trace_span("parse"):
                left = parse_packet(left_text, **self._parser_options)
                right = parse_packet(right_text, **self._parser_options)
        except PacketError as exc:
            return _failure(op, exc)

        ordering = compare(left, right)
        data = {
            "left": format_packet(left),
            "right": format_packet(right),
            "ordering": ordering.name.lower(),
            "in_order": ordering is not Ordering.GREATER,
        }
        return ServiceResult(ok=True, op=op, data=dump_validated(CompareResultData, data))
