"""
SVG Compositor

Merges several icon fragments into one SVG document:

1. Resolve every fragment's markup through an async lookup (fan-out).
2. Extract style, defs and body from each; unusable fragments are skipped.
3. Wrap each body in a <g> carrying translate/scale/rotate for its placement.
4. Concatenate style sheets, de-duplicate defs by exact content.
5. Emit one root <svg> with a single <defs> block, then the groups in order.
6. Minify, unless optimization is skipped.

A missing or unparsable fragment degrades the composite; a composite with
nothing left to draw is a RenderFailure.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence

from .config import SVG_NAMESPACE
from .errors import FragmentParseError, RenderFailure
from .extractor import extract_svg_parts
from .models import IconFragmentRef, ParsedFragment, RenderParams
from .optimizer import optimize_svg

log = logging.getLogger("weather_symbols.compositor")

FragmentLookup = Callable[[str], Awaitable[str | None]]


def fmt(value: float) -> str:
    """Format a number for an SVG attribute: 20.0 -> '20', 0.7 -> '0.7'."""
    return f"{value:g}"


def build_transform(ref: IconFragmentRef) -> str:
    """translate(x y) scale(s), then rotate(angle cx cy) when rotation is set."""
    transform = f"translate({fmt(ref.x)} {fmt(ref.y)}) scale({fmt(ref.scale)})"
    if ref.rotation is not None:
        r = ref.rotation
        transform += f" rotate({fmt(r.angle)} {fmt(r.cx)} {fmt(r.cy)})"
    return transform


def assemble_document(
    params: RenderParams,
    style: str,
    defs: Sequence[str],
    groups: Sequence[str],
) -> str:
    """Build the root <svg> around a merged defs block and drawable groups."""
    lines = [
        f'<svg width="{params.width}" height="{params.height}" '
        f'viewBox="{params.viewBox}" xmlns="{SVG_NAMESPACE}">',
        "<defs>",
    ]
    if style.strip():
        lines.append(f'<style type="text/css">\n{style}\n</style>')
    lines.extend(defs)
    lines.append("</defs>")
    lines.extend(groups)
    lines.append("</svg>")
    return "\n".join(lines)


def _parse_fragments(
    refs: Sequence[IconFragmentRef],
    raw_markups: Sequence[str | None],
) -> list[tuple[IconFragmentRef, ParsedFragment]]:
    parsed: list[tuple[IconFragmentRef, ParsedFragment]] = []
    for ref, raw in zip(refs, raw_markups):
        if raw is None:
            continue
        try:
            parsed.append((ref, extract_svg_parts(raw, name=ref.name)))
        except FragmentParseError as e:
            log.warning("%s; it will be skipped", e)
    return parsed


def compose_fragments(
    refs: Sequence[IconFragmentRef],
    raw_markups: Sequence[str | None],
    params: RenderParams,
) -> str:
    """
    Compose already-loaded fragments into one unoptimized document.

    `raw_markups[i]` is the markup for `refs[i]`, or None if it was not found.

    Raises:
        RenderFailure: If no fragment could be used.
    """
    if len(refs) != len(raw_markups):
        raise ValueError("refs and raw_markups must be the same length")

    parsed = _parse_fragments(refs, raw_markups)
    if not parsed:
        names = [r.name for r in refs]
        log.error("None of the fragments %s could be rendered", names)
        raise RenderFailure("Failed to generate weather symbol SVG.")

    styles = [fragment.style for _, fragment in parsed if fragment.style.strip()]
    # dict preserves first-seen order
    defs = dict.fromkeys(fragment.defs for _, fragment in parsed if fragment.defs.strip())
    groups = [
        f'<g transform="{build_transform(ref)}">{fragment.main_content}</g>'
        for ref, fragment in parsed
    ]

    return assemble_document(params, "\n".join(styles), list(defs), groups)


async def render_composite(
    refs: Sequence[IconFragmentRef],
    lookup: FragmentLookup,
    params: RenderParams,
    *,
    skip_optimization: bool = False,
) -> str:
    """Load, compose and (optionally) minify a multi-fragment symbol."""
    raw_markups = await asyncio.gather(*(lookup(ref.name) for ref in refs))
    document = compose_fragments(refs, raw_markups, params)
    if skip_optimization:
        return document
    return optimize_svg(document)
