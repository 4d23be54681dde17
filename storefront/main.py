"""FastAPI application for the storefront API."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import structlog
from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette import status
from starlette.exceptions import HTTPException as StarletteHTTPException

from storefront import constants
from storefront.config import configure_logging, get_settings
from storefront.database import dispose_engine, initialize_database
from storefront.domain.common.exceptions import DomainError
from storefront.exceptions import ApiError
from storefront.infrastructure.catalog.routers import products
from storefront.infrastructure.common.rate_limit import limiter
from storefront.infrastructure.common.schemas import ApiErrorResponse
from storefront.infrastructure.graphql_api.schema import create_graphql_router
from storefront.infrastructure.identity.routers import auth, users

settings = get_settings()
configure_logging(settings.ENVIRONMENT)
logger = structlog.get_logger(__name__)


def _envelope(
    status_code: int,
    message: str,
    error: str,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    body = ApiErrorResponse(message=message, error=error)
    return JSONResponse(status_code=status_code, content=body.model_dump(), headers=headers)


async def api_error_handler(request: Request, exc: Exception) -> JSONResponse:
    if not isinstance(exc, ApiError):
        return await unhandled_exception_handler(request, exc)
    return _envelope(exc.status_code, exc.message, exc.error, exc.headers)


async def domain_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Service errors that reached the app without a router translating them."""
    if not isinstance(exc, DomainError):
        return await unhandled_exception_handler(request, exc)
    return _envelope(status.HTTP_400_BAD_REQUEST, constants.INVALID_REQUEST, exc.message)


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    if not isinstance(exc, StarletteHTTPException):
        return await unhandled_exception_handler(request, exc)
    return _envelope(
        exc.status_code, constants.INVALID_REQUEST, str(exc.detail), getattr(exc, "headers", None)
    )


async def validation_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Malformed JSON and wrongly typed fields are reported as 400."""
    if not isinstance(exc, RequestValidationError):
        return await unhandled_exception_handler(request, exc)

    errors = exc.errors()
    logger.warning(
        "request_validation_failed",
        path=request.url.path,
        method=request.method,
        error_count=len(errors),
    )
    detail = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in errors
    )
    return _envelope(status.HTTP_400_BAD_REQUEST, constants.INVALID_REQUEST, detail)


async def rate_limit_exceeded_handler(request: Request, exc: Exception) -> JSONResponse:
    detail = exc.detail if isinstance(exc, RateLimitExceeded) else str(exc)
    logger.warning("rate_limit_exceeded", path=request.url.path)
    return _envelope(status.HTTP_429_TOO_MANY_REQUESTS, constants.TOO_MANY_REQUESTS, detail)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler for unhandled exceptions."""
    logger.exception(
        "unhandled_exception",
        exc_type=type(exc).__name__,
        path=request.url.path,
        method=request.method,
    )
    return _envelope(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        constants.INTERNAL_ERROR,
        "An unexpected error occurred. Please try again later.",
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create the database engine at startup, dispose on shutdown."""
    initialize_database(settings)
    logger.info("startup_complete", environment=settings.ENVIRONMENT)
    try:
        yield
    finally:
        dispose_engine()


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    lifespan=lifespan,
)

app.state.limiter = limiter
app.add_exception_handler(ApiError, api_error_handler)
app.add_exception_handler(DomainError, domain_error_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials="*" not in settings.CORS_ORIGINS,
    allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Authorization", "Content-Type"],
)


@app.middleware("http")
async def bind_request_context(request: Request, call_next: Any) -> Response:
    """Tag every log line of a request with its method and path."""
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(method=request.method, path=request.url.path)
    return await call_next(request)


app.include_router(auth.router, prefix=settings.API_PREFIX)
app.include_router(users.router, prefix=settings.API_PREFIX)
app.include_router(products.router, prefix=settings.API_PREFIX)
app.include_router(create_graphql_router(), prefix=settings.GRAPHQL_PATH)


@app.get("/health")
def health_check() -> dict[str, str]:
    return {"status": "healthy"}
