"""BaseService — foundation for pktctl services.

Every service receives the resolved :class:`PktSettings` at construction
time and derives its parser options from the ``[parser]`` section.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pktctl.config.settings import PktSettings


class BaseService:
    """Base for service-layer classes.

    Usage::

        class PacketService(BaseService):
            def sum_correct(self, text: str) -> ServiceResult:
                pairs = parse_pairs(text, **self._parser_options)
                ...
    """

    def __init__(self, settings: PktSettings) -> None:
        self._settings = settings

    @property
    def _parser_options(self) -> dict[str, Any]:
        """Keyword arguments forwarded to :func:`parse_packet`."""
        parser = self._settings.parser
        return {
            "max_depth": parser.max_depth,
            "max_value": parser.max_value,
            "overflow": parser.overflow,
        }
