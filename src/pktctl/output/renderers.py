"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Every op a service emits has a renderer.

Packet text is always wrapped in ``Text`` so brackets are never read as
Rich markup.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from pktctl.output.console import create_console, get_output, style_for_ordering

if TYPE_CHECKING:
    from rich.console import Console

    from pktctl.services.result import ServiceResult

SUM_MESSAGE = "The sum of the indices of packets in correct order is:"


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False, width: int | None = None) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console(width=width)

    if result.ok:
        renderer = _OP_RENDERERS[result.op]
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    ``sum`` prints the bare total, ``compare`` the ordering verdict and
    ``pairs`` the indices of in-order pairs, one per line.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op == "sum":
        return str(result.data["sum"])
    if result.op == "compare":
        return str(result.data["ordering"])
    return "\n".join(str(item["index"]) for item in result.data["items"] if item["in_order"])


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="pkt.ok"), Text(f"  {result.op}", style="pkt.op"), sep="")


def _field(console: Console, key: str, value: Any, style: str = "") -> None:
    """Print a single indented key-value field."""
    console.print(Text(f"  {key}: ", style="pkt.key"), Text(str(value), style=style), sep="")


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including telemetry span tree (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))

    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(Text(f"    {k}: {v}"))


def _render_telemetry_tree(
    console: Console,
    span_data: dict[str, Any],
    indent: int = 4,
) -> None:
    """Render a hierarchical span tree with color-coded timing."""
    prefix = " " * indent
    duration = span_data.get("duration_ms", 0.0)

    if duration > 1000:
        style = "bold red"
    elif duration > 100:
        style = "yellow"
    else:
        style = "dim"

    line = Text(prefix)
    line.append(f"{duration:>8.2f}ms", style=style)
    line.append(f"  {span_data.get('name', '?')}")
    annotations = span_data.get("annotations") or {}
    if annotations:
        line.append("  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")")
    console.print(line)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="pkt.error"),
        Text(f"  {result.op}", style="pkt.op"),
        Text(f" — {msg}"),
        sep="",
    )

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Operation renderers ───────────────────────────────────────────────


def _render_sum(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    console.print(Text(f"{SUM_MESSAGE} "), Text(str(d["sum"]), style="pkt.total"), sep="")
    if verbose:
        _field(console, "pairs", d["pair_count"])
        _field(console, "in_order", d["in_order_count"])
        _field(console, "indices", ", ".join(str(i) for i in d["in_order_indices"]) or "-")
        _render_meta(console, result)


def _render_pairs(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("#", style="pkt.index", justify="right", no_wrap=True)
    table.add_column("Left", style="pkt.packet", overflow="fold")
    table.add_column("Right", style="pkt.packet", overflow="fold")
    table.add_column("Ordering")
    table.add_column("In order")

    for item in d["items"]:
        ordering = item["ordering"]
        table.add_row(
            str(item["index"]),
            Text(item["left"]),
            Text(item["right"]),
            Text(ordering, style=style_for_ordering(ordering)),
            Text("yes" if item["in_order"] else "no"),
        )
    console.print(table)

    _field(console, "in_order", f"{d['in_order_count']} of {d['count']}")
    _field(console, "sum", d["sum"], style="pkt.total")
    if verbose:
        _render_meta(console, result)


def _render_compare(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "left", d["left"], style="pkt.packet")
    _field(console, "right", d["right"], style="pkt.packet")
    _field(console, "ordering", d["ordering"], style=style_for_ordering(d["ordering"]))
    _field(console, "in_order", "yes" if d["in_order"] else "no")
    if verbose:
        _render_meta(console, result)


_OP_RENDERERS: dict[str, Any] = {
    "sum": _render_sum,
    "pairs": _render_pairs,
    "compare": _render_compare,
}
