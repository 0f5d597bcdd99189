"""Typed payload contracts for service results.

These models validate operation payload shapes before they leave the
service layer so key regressions (for example ``items`` vs ``pairs``)
fail fast in tests.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel

OrderingName = Literal["less", "equal", "greater"]


def dump_validated[T: BaseModel](model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="python")


class SumResultData(BaseModel):
    """Payload contract for ``PacketService.sum_correct``."""

    pair_count: int
    in_order_count: int
    in_order_indices: list[int]
    sum: int


class PairItem(BaseModel):
    """One evaluated pair."""

    index: int
    left: str
    right: str
    ordering: OrderingName
    in_order: bool


class PairsResultData(BaseModel):
    """Payload contract for ``PacketService.evaluate_pairs``."""

    count: int
    in_order_count: int
    sum: int
    items: list[PairItem]


class CompareResultData(BaseModel):
    """Payload contract for ``PacketService.compare``."""

    left: str
    right: str
    ordering: OrderingName
    in_order: bool
