"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Owns logging setup, the service instance, and
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pktctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from pktctl.config.settings import PktSettings
    from pktctl.services.packets import PacketService
    from pktctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: PktSettings) -> None:
        self.settings = settings
        self._service: PacketService | None = None

        from pktctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from pktctl.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def service(self) -> PacketService:
        """The packet service (created lazily on first access)."""
        if self._service is None:
            from pktctl.services.packets import PacketService

            self._service = PacketService(self.settings)
        return self._service

    def read_source(self, source: str) -> str:
        """Read command input, emitting the failure and exiting if unreadable."""
        result = self.service.read_input(source)
        if not result.ok:
            self.emit(result)
        return str(result.data["text"])

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings go to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            width=self.settings.output.width,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
