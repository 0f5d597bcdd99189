"""Tests for PacketService."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from pktctl.config.settings import PktSettings
from pktctl.services.packets import PacketService
from pktctl.services.telemetry import enable_telemetry


@pytest.fixture
def _telemetry() -> None:
    enable_telemetry()


class TestReadInput:
    def test_reads_file(self, service: PacketService, example_file: Path) -> None:
        result = service.read_input(str(example_file))
        assert result.ok
        assert result.data["text"].startswith("[1,1,3,1,1]")

    def test_missing_file(self, service: PacketService, tmp_path: Path) -> None:
        missing = tmp_path / "nope.txt"
        result = service.read_input(str(missing))
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "READ_FAILED"
        assert result.error.detail == {"source": str(missing)}

    def test_undecodable_file(self, service: PacketService, tmp_path: Path) -> None:
        path = tmp_path / "bin.txt"
        path.write_bytes(b"\xff\xfe[1]")
        result = service.read_input(str(path))
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "READ_FAILED"

    def test_reads_stdin(self, service: PacketService, monkeypatch: pytest.MonkeyPatch) -> None:
        stdin = io.TextIOWrapper(io.BytesIO(b"[1]\n[2]\n"), encoding="utf-8")
        monkeypatch.setattr("sys.stdin", stdin)
        result = service.read_input("-")
        assert result.ok
        assert result.data["text"] == "[1]\n[2]\n"

    def test_file_byte_order_mark_dropped(self, service: PacketService, tmp_path: Path) -> None:
        path = tmp_path / "bom.txt"
        path.write_bytes(b"\xef\xbb\xbf[1]\n[2]\n")
        result = service.read_input(str(path))
        assert result.ok
        assert result.data["text"] == "[1]\n[2]\n"
        assert service.sum_correct(result.data["text"]).data["sum"] == 1

    def test_stdin_byte_order_mark_dropped(
        self, service: PacketService, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        stdin = io.TextIOWrapper(io.BytesIO(b"\xef\xbb\xbf[1]\n[2]\n"), encoding="utf-8")
        monkeypatch.setattr("sys.stdin", stdin)
        result = service.read_input("-")
        assert result.ok
        assert result.data["text"] == "[1]\n[2]\n"


class TestSumCorrect:
    def test_example(
        self, service: PacketService, example_input: str, example_in_order: list[int]
    ) -> None:
        result = service.sum_correct(example_input)
        assert result.ok
        assert result.op == "sum"
        assert result.data == {
            "pair_count": 8,
            "in_order_count": 4,
            "in_order_indices": example_in_order,
            "sum": 13,
        }

    def test_parse_error(self, service: PacketService) -> None:
        result = service.sum_correct("[1]\n[2]\n\n[3]\n[4,")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "PARSE_ERROR"
        assert result.error.detail["block"] == 2
        assert result.error.detail["side"] == "right"
        assert result.error.detail["text"] == "[4,"

    def test_overlong_integer_is_parse_error(self, service: PacketService) -> None:
        result = service.sum_correct("[" + "9" * 5000 + "]\n[1]\n")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "PARSE_ERROR"
        assert result.error.detail["reason"] == "integer of 5000 digits exceeds maximum 255"

    def test_malformed_block(self, service: PacketService) -> None:
        result = service.sum_correct("[1]\n[2]\n[3]")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "MALFORMED_BLOCK"
        assert result.error.detail == {
            "block": 1,
            "line_count": 3,
            "reason": "expected 2 packet lines, found 3",
        }

    def test_empty_input(self, service: PacketService) -> None:
        result = service.sum_correct("")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "MALFORMED_BLOCK"

    def test_parser_settings_applied(self, tmp_path: Path) -> None:
        (tmp_path / "pktctl.toml").write_text('[parser]\noverflow = "wrap"\n')
        svc = PacketService(PktSettings.from_cli(search_root=tmp_path))
        result = svc.sum_correct("[256]\n[1]")
        assert result.ok
        assert result.data["sum"] == 1

    def test_no_telemetry_by_default(self, service: PacketService, example_input: str) -> None:
        assert service.sum_correct(example_input).meta is None

    @pytest.mark.usefixtures("_telemetry")
    def test_telemetry_spans(self, service: PacketService, example_input: str) -> None:
        result = service.sum_correct(example_input)
        assert result.meta is not None
        tree = result.meta["telemetry"]
        assert tree["name"] == "PacketService.sum_correct"
        children = {c["name"]: c for c in tree["children"]}
        assert children["parse"]["annotations"] == {"pairs": 8}
        assert children["compare"]["annotations"] == {"in_order": 4}


class TestEvaluatePairs:
    def test_all_items(self, service: PacketService, example_input: str) -> None:
        result = service.evaluate_pairs(example_input)
        assert result.ok
        assert result.op == "pairs"
        assert result.data["count"] == 8
        assert result.data["in_order_count"] == 4
        assert result.data["sum"] == 13
        first, third = result.data["items"][0], result.data["items"][2]
        assert first == {
            "index": 1,
            "left": "[1,1,3,1,1]",
            "right": "[1,1,5,1,1]",
            "ordering": "less",
            "in_order": True,
        }
        assert third["ordering"] == "greater"
        assert third["in_order"] is False

    def test_only_in_order(
        self, service: PacketService, example_input: str, example_in_order: list[int]
    ) -> None:
        result = service.evaluate_pairs(example_input, only_in_order=True)
        assert [item["index"] for item in result.data["items"]] == example_in_order
        assert result.data["count"] == 8

    def test_equal_pair(self, service: PacketService) -> None:
        result = service.evaluate_pairs("[1,[2]]\n[1,[2]]")
        assert result.data["items"][0]["ordering"] == "equal"
        assert result.data["items"][0]["in_order"] is True

    def test_error(self, service: PacketService) -> None:
        result = service.evaluate_pairs("[1]")
        assert not result.ok
        assert result.op == "pairs"


class TestCompare:
    @pytest.mark.parametrize(
        "left,right,ordering,in_order",
        [
            ("[1,1,3,1,1]", "[1,1,5,1,1]", "less", True),
            ("[9]", "[[8,7,6]]", "greater", False),
            ("[[1],4]", "[[1],4]", "equal", True),
            ("3", "[3]", "equal", True),
        ],
    )
    def test_verdicts(
        self, service: PacketService, left: str, right: str, ordering: str, in_order: bool
    ) -> None:
        result = service.compare(left, right)
        assert result.ok
        assert result.data["ordering"] == ordering
        assert result.data["in_order"] is in_order

    def test_normalizes_packet_text(self, service: PacketService) -> None:
        result = service.compare("[ 1 , [ 2 ] ]", "[]")
        assert result.data["left"] == "[1,[2]]"

    def test_parse_error(self, service: PacketService) -> None:
        result = service.compare("[1]", "[1")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "PARSE_ERROR"
