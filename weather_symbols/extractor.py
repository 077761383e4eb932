"""
SVG Region Extraction

Fragments are a narrow, self-authored subset of SVG: one root <svg> element,
at most one <style> block and at most one <defs> block. That is enough to
pull them apart with regular expressions instead of an XML parser; a fragment
needing more than that should not be added to the asset set.
"""

from __future__ import annotations

import re

from .errors import FragmentParseError
from .models import ParsedFragment

_SVG_RE = re.compile(r"<svg\b[^>]*>(.*?)</svg>", re.DOTALL)
_STYLE_RE = re.compile(r"<style\b[^>]*>(.*?)</style>", re.DOTALL)
_DEFS_RE = re.compile(r"<defs\b[^>]*>(.*?)</defs>", re.DOTALL)


def _take(pattern: re.Pattern[str], content: str) -> tuple[str, str]:
    """Return (captured, content with the first match removed)."""
    match = pattern.search(content)
    if match is None:
        return "", content
    return match.group(1), content[: match.start()] + content[match.end() :]


def extract_svg_parts(markup: str, *, name: str | None = None) -> ParsedFragment:
    """
    Split fragment markup into its style, defs and drawable body.

    Style is removed before defs, so a <style> nested in <defs> is taken as
    the style sheet and the defs keep only their definitions.

    Raises:
        FragmentParseError: If there is no <svg>...</svg> region.
    """
    match = _SVG_RE.search(markup)
    if match is None:
        label = f"'{name}'" if name else "markup"
        raise FragmentParseError(f"Fragment {label} has no <svg> root element")

    inner = match.group(1)
    style, inner = _take(_STYLE_RE, inner)
    defs, inner = _take(_DEFS_RE, inner)

    return ParsedFragment(style=style, defs=defs, main_content=inner.strip())
