"""Output mode dispatch.

The CLI renders ServiceResult for humans (Rich tables and colors), for
scripts (--quiet, bare values) or for machines (--json). This module
picks the mode; :mod:`pktctl.output.renderers` does the drawing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from pktctl.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from pktctl.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output switches resolved from the global CLI flags."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    width: int = 120


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    JSON wins over quiet, quiet wins over the Rich renderers.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose, width=settings.width)
