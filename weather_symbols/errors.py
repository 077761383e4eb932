"""
Service Failure Types

Every failure raised by the decode and render paths is an instance of one of
these types. The HTTP layer maps them to a status code and a short message.
"""

from __future__ import annotations


class SymbolServiceFailure(Exception):
    """Base class for all weather symbol service failures."""

    failure_category: str = "unknown"
    http_status: int = 500

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class InvalidInput(SymbolServiceFailure):
    """
    The caller supplied a malformed angle, weather code or render parameter,
    or a weather code that decodes to nothing drawable.

    - Fatality: Fatal to the request. Never retried.
    - HTTP Representation: 400 with a message naming the expected format.
    """

    failure_category = "invalid_input"
    http_status = 400


class ResourceMissing(SymbolServiceFailure):
    """
    A fragment file is absent from the asset store.

    - Fatality: Non-fatal inside a composite (the fragment is skipped and
      logged). Fatal when the fragment itself was requested.
    - HTTP Representation: 404 when surfaced.
    """

    failure_category = "resource_missing"
    http_status = 404

    def __init__(
        self,
        message: str,
        *,
        name: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.name = name


class FragmentParseError(SymbolServiceFailure):
    """
    Fragment markup has no top-level <svg>...</svg> region.

    - Fatality: Non-fatal inside a composite (treated like a missing
      fragment). Fatal for the wind glyph, where it becomes a RenderFailure.
    """

    failure_category = "parse_error"
    http_status = 500


class RenderFailure(SymbolServiceFailure):
    """
    A mandatory fragment could not be used, nothing renderable remained, or
    the optimizer rejected the assembled document.

    - Fatality: Fatal to the request. Never retried.
    - HTTP Representation: 500 with a generic message; detail is logged.
    """

    failure_category = "render_failure"
    http_status = 500


class ConfigurationError(SymbolServiceFailure):
    """
    The service is misconfigured and cannot operate correctly.

    - Fatality: Fatal. The service refuses to start.
    """

    failure_category = "configuration_error"
    http_status = 500
