"""
FastAPI application entry point.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from records_api.core.auth import AccessDenied, AccessGate, TokenCodec, failure_response
from records_api.core.config import Settings, get_settings
from records_api.core.exceptions import RecordsError
from records_api.core.logging import configure_logging
from records_api.models.database import (
    close_db,
    create_engine,
    create_session_factory,
    init_db,
)
from records_api.api.routes import router as api_router
from records_api.api.middleware import (
    AccessGateMiddleware,
    LoggingMiddleware,
    RequestIdMiddleware,
)

logger = structlog.get_logger()

SERVER_ERROR_MESSAGE = "something went wrong"


def server_error_headers(request: Request, settings: Settings) -> dict[str, str]:
    """
    Headers for a 500 rendered outside the middleware stack.

    Unhandled exceptions are answered by the outermost server error
    middleware, after AccessGateMiddleware and RequestIdMiddleware have
    unwound, so their response headers are added here.
    """
    headers = {"Access-Control-Allow-Origin": settings.cors_origin}
    request_id = getattr(request.state, "request_id", None)
    if request_id:
        headers["X-Request-ID"] = request_id
    return headers


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan events."""
    settings: Settings = app.state.settings
    if settings.database.create_schema:
        await init_db(app.state.engine)
    logger.info("app_started", environment=settings.environment)

    yield

    await close_db(app.state.engine)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure FastAPI application."""
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
    )

    codec = TokenCodec.from_settings(settings.auth)
    gate = AccessGate(codec)
    engine = create_engine(settings.database)

    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    app.state.token_codec = codec
    app.state.access_gate = gate

    # Middleware (order matters - last added is outermost)
    app.add_middleware(AccessGateMiddleware, gate=gate, cors_origin=settings.cors_origin)
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(RequestIdMiddleware)

    app.include_router(api_router)

    # Exception handlers
    @app.exception_handler(AccessDenied)
    async def access_denied_handler(request: Request, exc: AccessDenied):
        logger.warning(
            "access_denied",
            kind=exc.failure.kind.value,
            detail=exc.failure.detail,
            method=request.method,
            path=request.url.path,
        )
        return failure_response(exc.failure)

    @app.exception_handler(RecordsError)
    async def records_error_handler(request: Request, exc: RecordsError):
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.info("invalid_request_body", path=request.url.path, errors=len(exc.errors()))
        return JSONResponse(status_code=400, content={"message": "invalid request body"})

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error("database_error", path=request.url.path, error=str(exc))
        return JSONResponse(status_code=500, content={"message": SERVER_ERROR_MESSAGE})

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler."""
        logger.exception("unhandled_error", path=request.url.path)
        return JSONResponse(
            status_code=500,
            content={"message": str(exc) if settings.debug else SERVER_ERROR_MESSAGE},
            headers=server_error_headers(request, settings),
        )

    # Health checks
    @app.get("/health")
    async def health_check():
        """Quick health check endpoint (for load balancers)."""
        return {
            "status": "healthy",
            "version": settings.app_version,
            "environment": settings.environment,
        }

    @app.get("/health/detailed")
    async def health_check_detailed():
        """Health check including a database round trip."""
        try:
            async with app.state.session_factory() as session:
                await session.execute(text("SELECT 1"))
        except SQLAlchemyError as exc:
            logger.error("health_check_failed", component="database", error=str(exc))
            return JSONResponse(
                status_code=503,
                content={"status": "unhealthy", "database": "unavailable"},
            )
        return {"status": "healthy", "database": "ok", "version": settings.app_version}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    _settings = get_settings()
    uvicorn.run(
        "records_api.main:app",
        host=_settings.host,
        port=_settings.port,
        reload=_settings.reload,
        workers=_settings.workers,
    )
