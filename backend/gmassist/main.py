# backend/gmassist/main.py
import logging
import time
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from gmassist.config import get_settings, Settings
from gmassist.services.exceptions import (
    UpstreamError, AIUnavailableError, SpreadsheetError,
)
from gmassist.services.metrics import MetricsSink, RequestSample
from gmassist.api.auth import router as auth_router
from gmassist.api.scenarios import router as scenarios_router
from gmassist.api.regions import router as regions_router
from gmassist.api.npcs import router as npcs_router
from gmassist.api.quests import router as quests_router
from gmassist.api.conditions import router as conditions_router
from gmassist.api.characters import router as characters_router
from gmassist.api.sessions import router as sessions_router
from gmassist.api.session_players import router as session_players_router
from gmassist.api.nodes import router as nodes_router
from gmassist.api.timeline import router as timeline_router
from gmassist.api.ai import router as ai_router
from gmassist.api.pacing import router as pacing_router
from gmassist.api.metrics import router as metrics_router
from gmassist.api.entity_schemas import router as entity_schemas_router

logger = logging.getLogger(__name__)

ERROR_NAMES = {
    400: "bad_request",
    401: "unauthorized",
    403: "forbidden",
    404: "not_found",
    405: "method_not_allowed",
    409: "conflict",
    422: "validation_error",
    502: "upstream_error",
    503: "service_unavailable",
}


def error_envelope(
    status_code: int,
    message: str,
    details: Any = None,
    errors: Optional[list] = None,
    headers: Optional[dict] = None,
):
    content = {
        "error": ERROR_NAMES.get(status_code, "http_error"),
        "message": message,
    }
    if errors is not None:
        content["errors"] = errors
    if details is not None:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content, headers=headers)


def _field_name(loc) -> str:
    # Drop the request part ("body", "query"...) and keep the field path
    parts = [str(p) for p in loc]
    if len(parts) > 1 and parts[0] in ("body", "query", "path", "header", "form"):
        parts = parts[1:]
    return ".".join(parts)


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = [
            {"field": _field_name(err["loc"]), "message": err["msg"]}
            for err in exc.errors()
        ]
        return error_envelope(422, "Request validation failed", errors=errors)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        # Handlers report field errors as a list of {field, message}
        if exc.status_code == 422 and isinstance(exc.detail, list):
            return error_envelope(422, "Request validation failed", errors=exc.detail)
        return error_envelope(
            exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None)
        )

    @app.exception_handler(UpstreamError)
    async def upstream_exception_handler(request: Request, exc: UpstreamError):
        return error_envelope(502, str(exc))

    @app.exception_handler(AIUnavailableError)
    async def ai_unavailable_exception_handler(request: Request, exc: AIUnavailableError):
        return error_envelope(503, str(exc))

    @app.exception_handler(SpreadsheetError)
    async def spreadsheet_exception_handler(request: Request, exc: SpreadsheetError):
        return error_envelope(400, str(exc))

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return error_envelope(500, "Internal server error", details={"type": type(exc).__name__})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title=settings.app_name,
        description="Scenario builder and session assistant for tabletop game masters",
        version="0.1.0",
    )
    app.state.metrics = MetricsSink(
        capacity=settings.metrics_capacity,
        slow_threshold_ms=settings.slow_request_ms,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def record_timing(request: Request, call_next):
        start = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            # Route template keeps ids out of the per-route summary
            route = request.scope.get("route")
            path = getattr(route, "path", request.url.path)
            sample = RequestSample(request.method, path, status_code, elapsed_ms)
            sink = request.app.state.metrics
            sink.record(sample)
            message = f"{request.method} {request.url.path} {status_code} in {elapsed_ms:.1f}ms"
            if sink.is_slow(sample):
                logger.warning(f"Slow request: {message}")
            else:
                logger.info(message)

    register_exception_handlers(app)

    # Include routers
    for router in (
        auth_router,
        scenarios_router,
        regions_router,
        npcs_router,
        quests_router,
        conditions_router,
        characters_router,
        sessions_router,
        session_players_router,
        nodes_router,
        timeline_router,
        ai_router,
        pacing_router,
        metrics_router,
        entity_schemas_router,
    ):
        app.include_router(router, prefix="/api")

    @app.get("/health")
    async def health_check():
        return {"status": "healthy", "app": settings.app_name}

    return app


app = create_app()
