"""
Tests for the Pydantic models.
"""

import pytest
from pydantic import ValidationError

from weather_symbols.errors import InvalidInput
from weather_symbols.models import (
    IconFragmentRef,
    ParsedFragment,
    RenderParams,
    Rotation,
    ServiceInfo,
    parse_view_box,
)


class TestRenderParams:
    """Output box parameters."""

    def test_defaults(self):
        params = RenderParams()
        assert (params.viewBox, params.width, params.height) == ("0 0 64 64", "64", "64")
        assert params.box == (0, 0, 64, 64)

    def test_from_query_fills_missing_values(self):
        params = RenderParams.from_query(None, "128", None)
        assert params.width == "128"
        assert params.height == "64"
        assert params.viewBox == "0 0 64 64"

    def test_from_query_treats_empty_as_missing(self):
        assert RenderParams.from_query("", "", "") == RenderParams()

    def test_values_kept_verbatim(self):
        params = RenderParams.from_query("0,0,32,16", "10.5", "  20 ")
        assert params.viewBox == "0,0,32,16"
        assert params.width == "10.5"
        assert params.height == "20"
        assert params.box == (0, 0, 32, 16)

    @pytest.mark.parametrize("width", ["100%", "64px", "2em", "1.5in", "10mm", ".5cm", "12pt"])
    def test_dimension_accepts_svg_units(self, width):
        assert RenderParams.from_query(width=width, height=width).width == width

    @pytest.mark.parametrize(
        "width",
        ["abc", "0", "-4", "nan", "inf", "1e999", '64" onload="x', "0%", "64 px", "64vw", "px", '100%" x="1'],
    )
    def test_invalid_dimension(self, width):
        with pytest.raises(InvalidInput) as exc_info:
            RenderParams.from_query(width=width)
        assert "width" in str(exc_info.value)

    @pytest.mark.parametrize("view_box", ["0 0 64", "0 0 64 64 1", "a b c d", "0 0 0 64", "0 0 64 -1"])
    def test_invalid_view_box(self, view_box):
        with pytest.raises(InvalidInput) as exc_info:
            RenderParams.from_query(view_box=view_box)
        assert "viewBox" in str(exc_info.value)

    def test_extra_fields_rejected(self):
        with pytest.raises(ValidationError):
            RenderParams(depth="3")

    def test_parse_view_box_separators(self):
        assert parse_view_box(" -5, 10  20,30 ") == (-5, 10, 20, 30)


class TestFragmentModels:
    """Decoder and extractor value types."""

    def test_ref_defaults(self):
        ref = IconFragmentRef(name="sun")
        assert (ref.x, ref.y, ref.scale, ref.rotation) == (0, 0, 1, None)

    def test_ref_is_frozen(self):
        ref = IconFragmentRef(name="sun", rotation=Rotation(angle=10))
        with pytest.raises(ValidationError):
            ref.name = "moon"
        with pytest.raises(ValidationError):
            ref.rotation.angle = 20

    def test_ref_rejects_unknown_fields(self):
        with pytest.raises(ValidationError):
            IconFragmentRef(name="sun", opacity=0.5)

    def test_refs_compare_by_value(self):
        assert IconFragmentRef(name="sun", x=1) == IconFragmentRef(name="sun", x=1.0)

    def test_parsed_fragment_defaults(self):
        assert ParsedFragment() == ParsedFragment(style="", defs="", main_content="")


class TestServiceInfo:
    """Info route payload."""

    def test_serialization_uses_camel_case(self):
        info = ServiceInfo(
            ts="2024-01-01T00:00:00+00:00",
            version="1.2.3",
            commitHash="abc123",
            buildDate="2024-01-01T00:00:00+00:00",
            env="test",
        )
        data = info.model_dump()
        assert data["appName"] == "Weather Symbol Microservice"
        assert data["commitHash"] == "abc123"
        assert set(data) == {"ts", "appName", "version", "commitHash", "buildDate", "env"}
