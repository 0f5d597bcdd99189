"""Tests for the format_result dispatcher and OutputSettings."""

import json

from pktctl.output.formatters import OutputSettings, format_result
from pktctl.services.result import ServiceResult

SUM_RESULT = ServiceResult(
    ok=True,
    op="sum",
    data={"pair_count": 8, "in_order_count": 4, "in_order_indices": [1, 2, 4, 6], "sum": 13},
)


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False
        assert s.width == 120


class TestFormatResult:
    def test_json_mode(self) -> None:
        output = format_result(SUM_RESULT, settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is True
        assert data["data"]["sum"] == 13

    def test_json_wins_over_quiet(self) -> None:
        output = format_result(SUM_RESULT, settings=OutputSettings(json_output=True, quiet=True))
        assert json.loads(output)["op"] == "sum"

    def test_quiet_mode(self) -> None:
        assert format_result(SUM_RESULT, settings=OutputSettings(quiet=True)) == "13"

    def test_human_mode_default(self) -> None:
        output = format_result(SUM_RESULT)
        assert output == "The sum of the indices of packets in correct order is: 13"

    def test_error_json(self) -> None:
        result = ServiceResult.failure("sum", "PARSE_ERROR", "bad")
        data = json.loads(format_result(result, settings=OutputSettings(json_output=True)))
        assert data["ok"] is False
        assert data["error"]["code"] == "PARSE_ERROR"
