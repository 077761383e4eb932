"""
Weather Code Decoder

Turns a 4-character weather code into the ordered list of icon fragments
that make up its symbol:

    position 0  day/night       d | n
    position 1  cloudiness      0 clear .. 4 overcast, 5 thin high cloud, 6 fog
    position 2  precip rate     0 none, 1 light, 2 showers, 3 continuous, 4 thunder
    position 3  precip type     0 rain, 1 sleet, 2 snow

Fragments are appended in paint order: celestial body, cloud, precipitation.
"""

from __future__ import annotations

import logging

from .errors import InvalidInput
from .models import IconFragmentRef
from .validators import is_valid_weather_code

log = logging.getLogger("weather_symbols.decoder")

# -----------------------------------------------------------------------------
# Placement Tables
# -----------------------------------------------------------------------------

# Levels at which the sky body is hidden entirely.
HIDDEN_BODY_CLOUDINESS = frozenset({4, 6})
# Levels at which the sky body peeks out from behind the cloud.
PARTIAL_CLOUDINESS = frozenset({1, 2})

BODY_X, BODY_Y, BODY_SCALE = 0.0, 0.0, 1.0
PEEK_X, PEEK_Y, PEEK_SCALE = -15.0, -15.0, 0.7

CLOUD_FRAGMENTS: dict[int, IconFragmentRef] = {
    1: IconFragmentRef(name="cloud-1", x=20, y=10, scale=0.7),  # few clouds
    2: IconFragmentRef(name="cloud-2", x=5, y=5, scale=0.9),  # partly cloudy
    3: IconFragmentRef(name="cloud-3", x=0, y=0, scale=1.0),  # broken
    4: IconFragmentRef(name="cloud-4", x=0, y=0, scale=1.0),  # overcast
    5: IconFragmentRef(name="cloud-5", x=0, y=0, scale=1.0),  # thin high cloud
    6: IconFragmentRef(name="cloud-6", x=0, y=0, scale=1.0),  # fog
}

# Precipitation has to fall from something.
PRECIP_CLOUD = IconFragmentRef(name="cloud-4", x=0, y=0, scale=1.0)

PRECIP_X, PRECIP_Y = 0.0, 20.0
PRECIP_SCALES: dict[int, float] = {1: 0.8, 2: 0.9, 3: 1.0}

THUNDERSTORM_RATE = 4
THUNDERBOLT = IconFragmentRef(name="thunderbolt", x=30, y=30, scale=1.0)
STORM_SCALE = 1.0


# -----------------------------------------------------------------------------
# Layers
# -----------------------------------------------------------------------------


def _celestial_body(day_night: str, cloudiness: int) -> list[IconFragmentRef]:
    if cloudiness in HIDDEN_BODY_CLOUDINESS:
        return []
    name = "sun" if day_night == "d" else "moon"
    if cloudiness in PARTIAL_CLOUDINESS:
        return [IconFragmentRef(name=name, x=PEEK_X, y=PEEK_Y, scale=PEEK_SCALE)]
    return [IconFragmentRef(name=name, x=BODY_X, y=BODY_Y, scale=BODY_SCALE)]


def _cloud(cloudiness: int, rate: int) -> list[IconFragmentRef]:
    cloud = CLOUD_FRAGMENTS.get(cloudiness)
    if cloud is None and rate > 0:
        cloud = PRECIP_CLOUD
    return [cloud] if cloud is not None else []


def _precipitation(rate: int, kind: int) -> list[IconFragmentRef]:
    if rate <= 0:
        return []
    if rate == THUNDERSTORM_RATE:
        return [
            THUNDERBOLT,
            IconFragmentRef(name=f"storm-{kind}", x=PRECIP_X, y=PRECIP_Y, scale=STORM_SCALE),
        ]
    return [
        IconFragmentRef(
            name=f"precip-{rate}{kind}",
            x=PRECIP_X,
            y=PRECIP_Y,
            scale=PRECIP_SCALES[rate],
        )
    ]


def decode_weather_code(code: str) -> list[IconFragmentRef]:
    """
    Decode a weather code into fragments in paint order.

    Raises:
        InvalidInput: If the code is malformed or decodes to no fragments.
    """
    if not is_valid_weather_code(code):
        raise InvalidInput(
            f"Invalid weather code {code!r}: expected [dn][0-6][0-4][0-2], e.g. 'd240'."
        )

    day_night = code[0]
    cloudiness, rate, kind = (int(c) for c in code[1:])

    fragments = [
        *_celestial_body(day_night, cloudiness),
        *_cloud(cloudiness, rate),
        *_precipitation(rate, kind),
    ]

    if not fragments:
        raise InvalidInput(f"Weather code {code!r} produced no symbol fragments.")

    log.debug("Decoded %s into %s", code, [f.name for f in fragments])
    return fragments
