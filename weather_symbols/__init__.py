"""Weather symbol SVG service package."""

from .compositor import (
    assemble_document,
    build_transform,
    compose_fragments,
    render_composite,
)
from .config import (
    APP_NAME,
    DEFAULT_HEIGHT,
    DEFAULT_VIEW_BOX,
    DEFAULT_WIDTH,
    ServiceConfig,
    parse_yes,
)
from .decoder import decode_weather_code
from .errors import (
    ConfigurationError,
    FragmentParseError,
    InvalidInput,
    RenderFailure,
    ResourceMissing,
    SymbolServiceFailure,
)
from .extractor import extract_svg_parts
from .models import (
    IconFragmentRef,
    ParsedFragment,
    RenderParams,
    Rotation,
    ServiceInfo,
)
from .optimizer import optimize_svg
from .service import SymbolService, create_symbol_service
from .store import FragmentStore
from .validators import is_valid_angle, is_valid_weather_code, parse_angle
from .wind import WindArrowPlacement, compute_wind_arrow_placement, render_wind_arrow

__all__ = [
    # Service
    "SymbolService",
    "create_symbol_service",
    "FragmentStore",
    # Config
    "APP_NAME",
    "DEFAULT_VIEW_BOX",
    "DEFAULT_WIDTH",
    "DEFAULT_HEIGHT",
    "ServiceConfig",
    "parse_yes",
    # Validation and decoding
    "is_valid_weather_code",
    "is_valid_angle",
    "parse_angle",
    "decode_weather_code",
    # Composition
    "extract_svg_parts",
    "build_transform",
    "assemble_document",
    "compose_fragments",
    "render_composite",
    "optimize_svg",
    # Wind arrow
    "WindArrowPlacement",
    "compute_wind_arrow_placement",
    "render_wind_arrow",
    # Models
    "Rotation",
    "IconFragmentRef",
    "ParsedFragment",
    "RenderParams",
    "ServiceInfo",
    # Errors
    "SymbolServiceFailure",
    "InvalidInput",
    "ResourceMissing",
    "FragmentParseError",
    "RenderFailure",
    "ConfigurationError",
]
