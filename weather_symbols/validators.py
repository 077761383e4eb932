"""Input predicates for weather codes and wind angles."""

from __future__ import annotations

import math
import numbers
import re
from decimal import Decimal

# Day/night, cloudiness 0-6, precipitation rate 0-4, precipitation type 0-2.
WEATHER_CODE_PATTERN = re.compile(r"[dn][0-6][0-4][0-2]")

_INTEGER_ANGLE = re.compile(r"[+-]?[0-9]+")


def is_valid_weather_code(code: object) -> bool:
    """True iff `code` is a 4-character weather code such as "d240"."""
    return isinstance(code, str) and WEATHER_CODE_PATTERN.fullmatch(code) is not None


def is_valid_angle(angle: object) -> bool:
    """True iff `angle` is a finite real number in [0, 360)."""
    # Decimal is not registered as numbers.Real.
    if isinstance(angle, bool) or not isinstance(angle, (numbers.Real, Decimal)):
        return False
    try:
        finite = math.isfinite(angle)
    except (OverflowError, ValueError):
        # Signalling NaN, or an int too large for a float.
        return False
    return finite and 0 <= angle < 360


def parse_angle(raw: str) -> int | None:
    """
    Parse a path segment as base-10 integer degrees.

    Returns None for anything that is not a plain integer, so the caller can
    report it through the same channel as an out-of-range angle.
    """
    raw = raw.strip()
    if not _INTEGER_ANGLE.fullmatch(raw):
        return None
    try:
        return int(raw)
    except ValueError:
        # Digit strings past the interpreter's int conversion limit.
        return None
