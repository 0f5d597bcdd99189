"""Shared pytest fixtures and test helpers for pktctl tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from pktctl.config.settings import PktSettings
from pktctl.services.packets import PacketService
from pktctl.services.telemetry import _current_span, disable_telemetry

EXAMPLE_INPUT = """\
[1,1,3,1,1]
[1,1,5,1,1]

[[1],[2,3,4]]
[[1],4]

[9]
[[8,7,6]]

[[4,4],4,4]
[[4,4],4,4,4]

[7,7,7,7]
[7,7,7]

[]
[3]

[[[]]]
[[]]

[1,[2,[3,[4,[5,6,7]]]],8,9]
[1,[2,[3,[4,[5,6,0]]]],8,9]
"""

EXAMPLE_IN_ORDER = [1, 2, 4, 6]


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


def _clear_pktctl_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in list(os.environ):
        if name.startswith("PKTCTL_"):
            monkeypatch.delenv(name)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory with no config or env overrides.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")``.
    """
    monkeypatch.chdir(tmp_path)
    _clear_pktctl_env(monkeypatch)


@pytest.fixture
def settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> PktSettings:
    """Default settings, isolated from any pktctl.toml or PKTCTL_* override."""
    _clear_pktctl_env(monkeypatch)
    return PktSettings.from_cli(search_root=tmp_path)


@pytest.fixture
def service(settings: PktSettings) -> PacketService:
    return PacketService(settings)


@pytest.fixture
def example_file(tmp_path: Path) -> Path:
    """The eight-pair example input written to disk."""
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE_INPUT, encoding="utf-8")
    return path


@pytest.fixture
def example_input() -> str:
    """The eight-pair example input."""
    return EXAMPLE_INPUT


@pytest.fixture
def example_in_order() -> list[int]:
    """1-based indices of the in-order pairs in the example input."""
    return list(EXAMPLE_IN_ORDER)


@pytest.fixture(autouse=True)
def _restore_global_state() -> Generator[None]:
    """Undo logging and telemetry state that AppContext sets per invocation."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkt = logging.getLogger("pktctl")
    pkt_level = pkt.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkt.setLevel(pkt_level)
    disable_telemetry()
    _current_span.set(None)
