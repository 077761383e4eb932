"""
Shared test fixtures for the weather symbol service tests.

Provides in-memory fragment lookups, a temporary asset tree and a service
bound to it.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from pathlib import Path

import pytest

from weather_symbols.config import ServiceConfig
from weather_symbols.errors import ResourceMissing
from weather_symbols.service import SymbolService


# -----------------------------------------------------------------------------
# Test Fragments
# -----------------------------------------------------------------------------


SHARED_DEFS = '<linearGradient id="g"><stop offset="0" stop-color="#fff"/></linearGradient>'

SUN_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 64 64">'
    "<style>.sun{fill:#fc0}</style>"
    '<circle class="sun" cx="32" cy="32" r="12"/>'
    "</svg>"
)

CLOUD_A_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 64 64">'
    "<style>.cloud{stroke:#999}</style>"
    f"<defs>{SHARED_DEFS}</defs>"
    '<path class="cloud" fill="url(#g)" d="M10 40h40v-10H10z"/>'
    "</svg>"
)

CLOUD_B_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 64 64">'
    f"<defs>{SHARED_DEFS}</defs>"
    '<path class="cloud" fill="url(#g)" d="M12 44h36v-8H12z"/>'
    "</svg>"
)

RAIN_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 64 64">'
    '<line x1="32" y1="20" x2="30" y2="30" stroke="#06f"/>'
    "</svg>"
)

WIND_ARROW_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">'
    "<style>.arrow{fill:#17c}</style>"
    '<path class="arrow" d="M12 2l6 9h-4v11h-4V11H6z"/>'
    "</svg>"
)

NOT_AN_SVG = "<html><body>not a fragment</body></html>"


def make_lookup(markups: dict[str, str]) -> Callable[[str], Awaitable[str | None]]:
    """Async lookup returning None for unknown names, like read_optional."""

    async def lookup(name: str) -> str | None:
        return markups.get(name)

    return lookup


def make_loader(markups: dict[str, str]) -> Callable[[str], Awaitable[str]]:
    """Async loader raising ResourceMissing for unknown names, like read."""

    async def load(name: str) -> str:
        if name not in markups:
            raise ResourceMissing(f"SVG fragment '{name}.svg' not found", name=name)
        return markups[name]

    return load


# -----------------------------------------------------------------------------
# Fixtures
# -----------------------------------------------------------------------------


@pytest.fixture
def asset_root(tmp_path: Path) -> Path:
    """A minimal asset tree: the wind glyph plus sun, moon and two clouds."""
    assets = tmp_path / "assets"
    elements = assets / "elements"
    elements.mkdir(parents=True)

    (assets / "wind-arrow.svg").write_text(WIND_ARROW_SVG, encoding="utf-8")
    (elements / "sun.svg").write_text(SUN_SVG, encoding="utf-8")
    (elements / "moon.svg").write_text(SUN_SVG.replace("sun", "moon"), encoding="utf-8")
    (elements / "cloud-2.svg").write_text(CLOUD_A_SVG, encoding="utf-8")
    (elements / "cloud-4.svg").write_text(CLOUD_B_SVG, encoding="utf-8")
    (elements / "precip-10.svg").write_text(RAIN_SVG, encoding="utf-8")
    return tmp_path


@pytest.fixture
def tmp_config(asset_root: Path) -> ServiceConfig:
    """Configuration over the temporary asset tree, with optimization off."""
    return ServiceConfig.from_assets_root(asset_root, skip_optimization=True)


@pytest.fixture
def service(tmp_config: ServiceConfig) -> SymbolService:
    return SymbolService(tmp_config)
