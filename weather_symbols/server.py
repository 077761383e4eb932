"""
Weather Symbol Server

FastAPI application serving SVG weather symbols and wind arrows:

- GET /wind_direction/{angle}          rotated wind arrow
- GET /weather_symbol/{weather_code}   composite symbol for a 4-character code
- GET /symbol/{symbol_name}            one raw fragment
- GET /                                service info
- GET /health                          health check

Every route accepts the optional query parameters viewBox, width and height.
Failures are returned as plain text with the status of the failure type.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.responses import PlainTextResponse, Response

from .config import APP_NAME, ServiceConfig
from .errors import SymbolServiceFailure
from .models import RenderParams, ServiceInfo
from .service import SymbolService, create_symbol_service

log = logging.getLogger("weather_symbols.server")

SVG_MEDIA_TYPE = "image/svg+xml"
LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"
STARTED_AT = datetime.now(timezone.utc).isoformat()


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)


# -----------------------------------------------------------------------------
# Application Lifecycle
# -----------------------------------------------------------------------------

service: SymbolService | None = None


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Build the service from the environment once, at startup."""
    global service
    config = ServiceConfig.from_env()
    configure_logging(config.log_level)
    service = create_symbol_service(config)
    log.info(
        "%s starting: version=%s commit=%s assets=%s optimize=%s",
        APP_NAME,
        config.app_version,
        config.git_commit,
        config.assets_dir,
        not config.skip_optimization,
    )
    yield
    service = None


def get_service() -> SymbolService:
    if service is None:
        raise HTTPException(status_code=503, detail="Service not initialized")
    return service


# -----------------------------------------------------------------------------
# FastAPI Application
# -----------------------------------------------------------------------------

app = FastAPI(
    title=APP_NAME,
    description="Renders wind arrows and weather code symbols as SVG.",
    version="0.1.0",
    lifespan=lifespan,
)


@app.exception_handler(SymbolServiceFailure)
async def handle_service_failure(
    request: Request, exc: SymbolServiceFailure
) -> PlainTextResponse:
    """Map typed failures to a status code and a short plain-text message."""
    if exc.http_status >= 500:
        log.error(
            "%s %s failed (%s): %s; cause: %r",
            request.method,
            request.url.path,
            exc.failure_category,
            exc,
            exc.cause,
        )
    else:
        log.info("%s %s rejected: %s", request.method, request.url.path, exc)
    return PlainTextResponse(str(exc) or "Server error", status_code=exc.http_status)


def _svg(body: str) -> Response:
    return Response(content=body, media_type=SVG_MEDIA_TYPE)


@app.get("/wind_direction/{angle}")
async def wind_direction(
    angle: str,
    view_box: str | None = Query(default=None, alias="viewBox"),
    width: str | None = None,
    height: str | None = None,
) -> Response:
    """Wind arrow rotated to `angle` degrees (0 = north, clockwise)."""
    params = RenderParams.from_query(view_box, width, height)
    svg = await get_service().wind_direction_svg(angle, params)
    return _svg(svg)


@app.get("/weather_symbol/{weather_code}")
async def weather_symbol(
    weather_code: str,
    view_box: str | None = Query(default=None, alias="viewBox"),
    width: str | None = None,
    height: str | None = None,
) -> Response:
    """Composite symbol for a weather code such as `d240`."""
    params = RenderParams.from_query(view_box, width, height)
    svg = await get_service().weather_symbol_svg(weather_code, params)
    return _svg(svg)


@app.get("/symbol/{symbol_name}")
async def symbol(symbol_name: str) -> Response:
    """
    Raw markup of one fragment.

    Useful when debugging a composite: each layer can be inspected on its own.
    """
    return _svg(await get_service().raw_fragment(symbol_name))


@app.get("/")
async def info() -> ServiceInfo:
    """Liveness check with version metadata."""
    config = get_service().config
    return ServiceInfo(
        ts=datetime.now(timezone.utc).isoformat(),
        version=config.app_version,
        commitHash=config.git_commit,
        buildDate=STARTED_AT,
        env=config.app_env,
    )


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


def main() -> None:
    import uvicorn

    config = ServiceConfig.from_env()
    uvicorn.run(app, host=config.host, port=config.port)


if __name__ == "__main__":
    main()
