"""
Centralized configuration for the weather symbol service.

Fixed rendering constants live here as module values. Deployment settings are
read from the environment once, into a ServiceConfig, which is then passed
explicitly to the service. Nothing reads the environment after startup.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .errors import ConfigurationError

# -----------------------------------------------------------------------------
# Application Metadata
# -----------------------------------------------------------------------------

APP_NAME = "Weather Symbol Microservice"
PACKAGE_DIR = Path(__file__).resolve().parent

# -----------------------------------------------------------------------------
# Render Defaults
# -----------------------------------------------------------------------------

DEFAULT_VIEW_BOX = "0 0 64 64"
DEFAULT_WIDTH = "64"
DEFAULT_HEIGHT = "64"

SVG_NAMESPACE = "http://www.w3.org/2000/svg"

# -----------------------------------------------------------------------------
# Wind Arrow Glyph
# The glyph is drawn in a 24x24 local box, pointing north, centred at (12, 12).
# -----------------------------------------------------------------------------

WIND_ARROW_GLYPH = "wind-arrow"
WIND_ARROW_GLYPH_WIDTH = 24.0
WIND_ARROW_GLYPH_HEIGHT = 24.0
WIND_ARROW_CENTER_X = WIND_ARROW_GLYPH_WIDTH / 2
WIND_ARROW_CENTER_Y = WIND_ARROW_GLYPH_HEIGHT / 2

# -----------------------------------------------------------------------------
# Fragment Store
# -----------------------------------------------------------------------------

FRAGMENT_SUFFIX = ".svg"
FRAGMENT_NAME_PATTERN = r"[a-z0-9][a-z0-9-]*"
ASSETS_DIRNAME = "assets"
ELEMENTS_DIRNAME = "elements"

# -----------------------------------------------------------------------------
# Environment Parsing
# -----------------------------------------------------------------------------

_YES_VALUES = frozenset({"y", "yes", "true", "1", "on"})


def parse_yes(value: object) -> bool:
    """Interpret a loosely typed flag ("yes", "on", 1, True, ...) as a bool."""
    if isinstance(value, bool):
        return value
    if not isinstance(value, (str, int)):
        return False
    return str(value).strip().lower() in _YES_VALUES


@dataclass(frozen=True)
class ServiceConfig:
    """
    Read-only process configuration.

    Built once at startup (normally via from_env) and handed by reference to
    the service. The assets directory holds the wind arrow glyph; the
    elements directory holds the weather symbol fragments.
    """

    assets_dir: Path
    elements_dir: Path
    skip_optimization: bool = False
    host: str = "0.0.0.0"
    port: int = 4000
    app_version: str = "unknown"
    git_commit: str = "unknown"
    app_env: str = "production"
    log_level: str = "INFO"

    @classmethod
    def from_assets_root(cls, root: Path, **overrides: Any) -> ServiceConfig:
        assets_dir = Path(root).resolve() / ASSETS_DIRNAME
        return cls(
            assets_dir=assets_dir,
            elements_dir=assets_dir / ELEMENTS_DIRNAME,
            **overrides,
        )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ServiceConfig:
        """Build configuration from environment variables."""
        env = os.environ if environ is None else environ

        root = env.get("ASSETS_BASE_PATH") or str(PACKAGE_DIR)
        port_raw = env.get("PORT", "4000")
        try:
            port = int(port_raw)
        except ValueError as e:
            raise ConfigurationError(f"PORT must be an integer, got {port_raw!r}", cause=e) from e

        return cls.from_assets_root(
            Path(root),
            skip_optimization=parse_yes(env.get("NOOPTSVG", "")),
            host=env.get("HOST", "0.0.0.0"),
            port=port,
            app_version=env.get("APP_VERSION", "unknown"),
            git_commit=env.get("GIT_COMMIT_HASH", "unknown"),
            app_env=env.get("APP_ENV", "production"),
            log_level=env.get("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> None:
        """Fail fast if the asset directories are missing."""
        for label, directory in (
            ("assets", self.assets_dir),
            ("elements", self.elements_dir),
        ):
            if not directory.is_dir():
                raise ConfigurationError(
                    f"{label} directory does not exist: {directory}"
                )
