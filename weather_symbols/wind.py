"""
Wind Arrow Renderer

Renders the wind arrow glyph rotated to a compass bearing. The glyph is drawn
in its own 24x24 box, pointing north, centred at (12, 12). The transform is
applied right to left:

    translate(target centre) rotate(angle) scale(s) translate(-glyph centre)

so the glyph is moved to the origin, scaled uniformly, rotated clockwise
about its own centre, and only then placed in the middle of the output box.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from .compositor import assemble_document, fmt
from .config import (
    WIND_ARROW_CENTER_X,
    WIND_ARROW_CENTER_Y,
    WIND_ARROW_GLYPH,
    WIND_ARROW_GLYPH_HEIGHT,
    WIND_ARROW_GLYPH_WIDTH,
)
from .errors import FragmentParseError, InvalidInput, RenderFailure, ResourceMissing
from .extractor import extract_svg_parts
from .models import RenderParams
from .optimizer import optimize_svg
from .validators import is_valid_angle

log = logging.getLogger("weather_symbols.wind")

GlyphLoader = Callable[[str], Awaitable[str]]


@dataclass(frozen=True)
class WindArrowPlacement:
    """Parameters of the glyph transform, outermost first."""

    center_x: float
    center_y: float
    rotation: float
    scale: float
    origin_x: float = WIND_ARROW_CENTER_X
    origin_y: float = WIND_ARROW_CENTER_Y

    @property
    def transform(self) -> str:
        return (
            f"translate({fmt(self.center_x)} {fmt(self.center_y)}) "
            f"rotate({fmt(self.rotation)}) "
            f"scale({fmt(self.scale)}) "
            f"translate({fmt(-self.origin_x)} {fmt(-self.origin_y)})"
        )


def compute_wind_arrow_placement(angle: float, params: RenderParams) -> WindArrowPlacement:
    """
    Fit the glyph to the viewBox without distortion and centre it there.

    The smaller of the two axis ratios is used so the arrow never overflows
    a non-square box.
    """
    min_x, min_y, box_width, box_height = params.box
    scale = min(box_width / WIND_ARROW_GLYPH_WIDTH, box_height / WIND_ARROW_GLYPH_HEIGHT)
    return WindArrowPlacement(
        center_x=min_x + box_width / 2,
        center_y=min_y + box_height / 2,
        rotation=angle,
        scale=scale,
    )


async def render_wind_arrow(
    angle: float,
    load_glyph: GlyphLoader,
    params: RenderParams,
    *,
    skip_optimization: bool = False,
) -> str:
    """
    Render the wind arrow pointing at `angle` degrees (0 = north, clockwise).

    Raises:
        InvalidInput: If the angle is not a number in [0, 360).
        RenderFailure: If the glyph is missing or malformed.
    """
    if not is_valid_angle(angle):
        raise InvalidInput(
            f"Invalid wind direction angle {angle!r}: expected integer degrees 0-359."
        )

    try:
        raw = await load_glyph(WIND_ARROW_GLYPH)
        glyph = extract_svg_parts(raw, name=WIND_ARROW_GLYPH)
    except (ResourceMissing, FragmentParseError) as e:
        log.error("Cannot render wind arrow: %s", e)
        raise RenderFailure("Failed to generate wind direction SVG.", cause=e) from e

    placement = compute_wind_arrow_placement(float(angle), params)
    document = assemble_document(
        params,
        glyph.style,
        [glyph.defs] if glyph.defs.strip() else [],
        [f'<g transform="{placement.transform}">{glyph.main_content}</g>'],
    )
    if skip_optimization:
        return document
    return optimize_svg(document)
