"""
Tests for the file-backed fragment store.
"""

from pathlib import Path

import pytest

from weather_symbols.store import FragmentStore
from weather_symbols.errors import ResourceMissing

from conftest import SUN_SVG


@pytest.fixture
def store(asset_root: Path) -> FragmentStore:
    return FragmentStore(asset_root / "assets" / "elements")


class TestFragmentStore:
    """Reading fragments by name."""

    @pytest.mark.asyncio
    async def test_read(self, store):
        assert await store.read("sun") == SUN_SVG

    @pytest.mark.asyncio
    async def test_read_missing_raises(self, store):
        with pytest.raises(ResourceMissing) as exc_info:
            await store.read("cloud-9")
        assert exc_info.value.name == "cloud-9"
        assert "cloud-9.svg" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_read_optional_missing_returns_none(self, store, caplog):
        assert await store.read_optional("cloud-9") is None
        assert "cloud-9.svg" in caplog.text
        assert "skipped" in caplog.text

    @pytest.mark.asyncio
    async def test_read_optional_present(self, store):
        assert await store.read_optional("sun") == SUN_SVG

    @pytest.mark.parametrize("name", ["../wind-arrow", "sun.svg", "Sun", "", "-sun", "a/b", "sun\x00"])
    def test_unsafe_names_rejected(self, store, name):
        with pytest.raises(ResourceMissing):
            store.path_for(name)

    def test_path_for(self, store):
        assert store.path_for("precip-10") == store.directory / "precip-10.svg"
