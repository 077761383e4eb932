"""
Weather Symbol Models

Pydantic schemas for the values that flow between the decoder, the
compositor and the HTTP layer. All of them are request-scoped and immutable.
"""

from __future__ import annotations

import math
import re

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .config import APP_NAME, DEFAULT_HEIGHT, DEFAULT_VIEW_BOX, DEFAULT_WIDTH
from .errors import InvalidInput

_VIEW_BOX_SEPARATOR = re.compile(r"[\s,]+")

# SVG <length>: a number with an optional unit identifier.
_SVG_LENGTH = re.compile(
    r"(?P<number>[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)"
    r"(?P<unit>px|em|ex|pt|pc|cm|mm|in|%)?"
)


def _positive_length(raw: str) -> float:
    match = _SVG_LENGTH.fullmatch(raw)
    if match is None:
        raise ValueError(f"{raw!r} is not a number or SVG length")
    value = float(match.group("number"))
    if not math.isfinite(value) or value <= 0:
        raise ValueError(f"{raw!r} is not a positive length")
    return value


def parse_view_box(raw: str) -> tuple[float, float, float, float]:
    """Split an SVG viewBox into (min_x, min_y, width, height)."""
    parts = [p for p in _VIEW_BOX_SEPARATOR.split(raw.strip()) if p]
    if len(parts) != 4:
        raise ValueError(f"viewBox must have four numbers, got {raw!r}")
    try:
        min_x, min_y, width, height = (float(p) for p in parts)
    except ValueError:
        raise ValueError(f"viewBox {raw!r} contains a non-numeric value") from None
    if not all(math.isfinite(v) for v in (min_x, min_y, width, height)):
        raise ValueError(f"viewBox {raw!r} contains a non-finite value")
    if width <= 0 or height <= 0:
        raise ValueError(f"viewBox {raw!r} must have a positive width and height")
    return min_x, min_y, width, height


# -----------------------------------------------------------------------------
# Decoder Output
# -----------------------------------------------------------------------------


class Rotation(BaseModel):
    """Rotation by `angle` degrees about (cx, cy) in fragment coordinates."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    angle: float
    cx: float = 0.0
    cy: float = 0.0


class IconFragmentRef(BaseModel):
    """
    One named fragment placed on the composite canvas.

    The decoder emits these in paint order: later entries are drawn on top.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    x: float = 0.0
    y: float = 0.0
    scale: float = 1.0
    rotation: Rotation | None = None


# -----------------------------------------------------------------------------
# Extracted Fragment
# -----------------------------------------------------------------------------


class ParsedFragment(BaseModel):
    """The style, defs and drawable body pulled out of one fragment file."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    style: str = ""
    defs: str = ""
    main_content: str = ""


# -----------------------------------------------------------------------------
# Render Parameters
# -----------------------------------------------------------------------------


class RenderParams(BaseModel):
    """
    Output box of the rendered document.

    Values are kept as the caller sent them so they can be written back into
    the root element verbatim. `width` and `height` are positive SVG lengths
    ("64", "64px", "100%"); `viewBox` is four numbers.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    viewBox: str = DEFAULT_VIEW_BOX  # noqa: N815 (SVG attribute name)
    width: str = DEFAULT_WIDTH
    height: str = DEFAULT_HEIGHT

    @field_validator("width", "height")
    @classmethod
    def check_dimension(cls, value: str) -> str:
        value = value.strip()
        _positive_length(value)
        return value

    @field_validator("viewBox")
    @classmethod
    def check_view_box(cls, value: str) -> str:
        value = value.strip()
        parse_view_box(value)
        return value

    @classmethod
    def from_query(
        cls,
        view_box: str | None = None,
        width: str | None = None,
        height: str | None = None,
    ) -> RenderParams:
        """Build params from optional query values, raising InvalidInput."""
        supplied = {
            key: value
            for key, value in (("viewBox", view_box), ("width", width), ("height", height))
            if value is not None and value != ""
        }
        try:
            return cls(**supplied)
        except ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
                for err in e.errors()
            )
            raise InvalidInput(f"Invalid render parameters: {problems}", cause=e) from e

    @property
    def box(self) -> tuple[float, float, float, float]:
        return parse_view_box(self.viewBox)


# -----------------------------------------------------------------------------
# Service Info
# -----------------------------------------------------------------------------


class ServiceInfo(BaseModel):
    """Response body of the liveness/info route."""

    ts: str
    appName: str = APP_NAME  # noqa: N815
    version: str
    commitHash: str  # noqa: N815
    buildDate: str  # noqa: N815
    env: str
