from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from .catalog.loader import load_catalog
from .catalog.models import Catalog
from .config import DEFAULT_SERVICE_CONFIG, ServiceConfig
from .logging_config import setup_logging
from .query.errors import CafeQueryError
from .query.handler import handle_cafe_query

logger = logging.getLogger(__name__)


def _first_param(request: Request, name: str) -> str | None:
    """Return the first value of a repeated query parameter, or ``None``."""
    values = request.query_params.getlist(name)
    return values[0] if values else None


def create_app(
    catalog: Catalog | None = None,
    config: ServiceConfig = DEFAULT_SERVICE_CONFIG,
) -> FastAPI:
    """
    Build the café API around a catalog.

    The catalog is loaded from ``config.catalog_path`` when not given and is
    shared read-only by every request.
    """
    setup_logging(config.log_level)

    if catalog is None:
        catalog = load_catalog(config)

    app = FastAPI(title="Cafe Lookup API", version="1.0.0")
    app.state.catalog = catalog
    app.state.config = config

    @app.exception_handler(CafeQueryError)
    def cafe_query_error(request: Request, exc: CafeQueryError) -> PlainTextResponse:
        logger.info("Rejected %s: %s", request.url.path, exc)
        return PlainTextResponse(exc.message, status_code=exc.status_code)

    # ── Public endpoints ─────────────────────────────────────────────────

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/cities")
    def cities(request: Request) -> dict[str, list[str]]:
        return {"cities": list(request.app.state.catalog)}

    @app.get("/cafe", response_class=PlainTextResponse)
    def cafe(request: Request) -> PlainTextResponse:
        # Parameters are read raw so a bad count is answered with
        # "incorrect count" rather than FastAPI's 422.
        body = handle_cafe_query(
            request.app.state.catalog,
            _first_param(request, "city"),
            count=_first_param(request, "count"),
            search=_first_param(request, "search"),
        )
        return PlainTextResponse(body)

    return app


app = create_app()
