"""
Weather Symbol Service

Binds the startup configuration and the fragment stores to the two render
entry points. The HTTP layer talks only to this class.

Flow per request:
    validate input
      → decode (weather symbols) / check angle (wind arrows)
      → load fragments
      → compose / render
      → optimize unless disabled
"""

from __future__ import annotations

import logging

from .compositor import render_composite
from .config import ServiceConfig
from .decoder import decode_weather_code
from .errors import InvalidInput
from .models import RenderParams
from .store import FragmentStore
from .validators import parse_angle
from .wind import render_wind_arrow

log = logging.getLogger("weather_symbols.service")


class SymbolService:
    """
    Renders weather symbols and wind arrows from the configured assets.

    Holds no per-request state; one instance serves every request.
    """

    def __init__(self, config: ServiceConfig):
        self.config = config
        self.glyphs = FragmentStore(config.assets_dir)
        self.elements = FragmentStore(config.elements_dir)

    async def wind_direction_svg(
        self, angle: int | float | str, params: RenderParams
    ) -> str:
        """Render the wind arrow for `angle` (a number or a path segment)."""
        if isinstance(angle, str):
            parsed = parse_angle(angle)
            if parsed is None:
                log.info("Rejected wind direction angle %r", angle)
                raise InvalidInput(
                    f"Invalid wind direction angle {angle!r}: expected integer degrees 0-359."
                )
            angle = parsed

        return await render_wind_arrow(
            angle,
            self.glyphs.read,
            params,
            skip_optimization=self.config.skip_optimization,
        )

    async def weather_symbol_svg(self, weather_code: str, params: RenderParams) -> str:
        """Render the composite symbol for a 4-character weather code."""
        fragments = decode_weather_code(weather_code)
        return await render_composite(
            fragments,
            self.elements.read_optional,
            params,
            skip_optimization=self.config.skip_optimization,
        )

    async def raw_fragment(self, name: str) -> str:
        """Return one element fragment unchanged."""
        return await self.elements.read(name)


# -----------------------------------------------------------------------------
# Factory Functions
# -----------------------------------------------------------------------------


def create_symbol_service(config: ServiceConfig | None = None) -> SymbolService:
    """Create a service from `config`, or from the environment if omitted."""
    config = config or ServiceConfig.from_env()
    config.validate()
    return SymbolService(config)
