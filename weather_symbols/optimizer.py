"""SVG minification through scour."""

from __future__ import annotations

import logging
from xml.parsers.expat import ExpatError

from scour import scour

from .errors import RenderFailure

log = logging.getLogger("weather_symbols.optimizer")


def _scour_options():
    options = scour.sanitizeOptions()
    options.strip_xml_prolog = True
    options.strip_comments = True
    options.remove_metadata = True
    options.indent_type = "none"
    options.newlines = False
    options.shorten_ids = False
    options.strip_ids = False
    return options


def optimize_svg(markup: str) -> str:
    """
    Minify an assembled document without changing what it draws.

    Raises:
        RenderFailure: If the document is not well-formed XML.
    """
    try:
        return scour.scourString(markup, _scour_options()).strip()
    except ExpatError as e:
        log.error("Optimizer rejected assembled SVG: %s", e)
        raise RenderFailure("Failed to optimize SVG.", cause=e) from e
