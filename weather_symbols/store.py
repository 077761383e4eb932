"""
Fragment Store

Reads icon fragments from a directory of `<name>.svg` files. Reads are
asynchronous so a composite can fan out all of its reads at once.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

import aiofiles

from .config import FRAGMENT_NAME_PATTERN, FRAGMENT_SUFFIX
from .errors import ResourceMissing

log = logging.getLogger("weather_symbols.store")

_NAME_RE = re.compile(FRAGMENT_NAME_PATTERN)


class FragmentStore:
    """Read-only access to the fragment files under one directory."""

    def __init__(self, directory: Path):
        self.directory = Path(directory)

    def path_for(self, name: str) -> Path:
        """
        Resolve a fragment name to its file.

        Names are restricted to lowercase letters, digits and dashes so a
        caller-supplied name can never leave the directory.
        """
        if not _NAME_RE.fullmatch(name):
            raise ResourceMissing(f"Invalid fragment name: {name!r}", name=name)
        return self.directory / f"{name}{FRAGMENT_SUFFIX}"

    async def read(self, name: str) -> str:
        """
        Read one fragment.

        Raises:
            ResourceMissing: If the name is invalid or the file does not exist.
        """
        path = self.path_for(name)
        try:
            async with aiofiles.open(path, mode="r", encoding="utf-8") as f:
                return await f.read()
        except FileNotFoundError as e:
            raise ResourceMissing(
                f"SVG fragment '{name}{FRAGMENT_SUFFIX}' not found", name=name, cause=e
            ) from e

    async def read_optional(self, name: str) -> str | None:
        """Read one fragment, logging and returning None if it is missing."""
        try:
            return await self.read(name)
        except ResourceMissing as e:
            log.warning("%s in %s; it will be skipped", e, self.directory)
            return None
