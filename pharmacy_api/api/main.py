from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, List, Optional
from uuid import uuid4

from fastapi import APIRouter, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from pharmacy_api.api.crud import build_crud_router
from pharmacy_api.api.resources import RESOURCES
from pharmacy_api.api.routes.sales import router as checkout_router
from pharmacy_api.core.logging import configure_logging, correlation_id_var
from pharmacy_api.core.settings import get_app_settings
from pharmacy_api.db.run_migrations import main as run_alembic
from pharmacy_api.db.seed import seed_all
from pharmacy_api.db.session import check_database, dispose_engine
from pharmacy_api.schemas.common import MessageResponse, message_body

settings = get_app_settings()

# Configure structured logging once at import
configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "An internal error occurred."

openapi_tags = [
    {"name": "Health", "description": "Liveness and readiness probes."},
    {"name": "Users", "description": "Back-office user accounts."},
    {"name": "Master Data", "description": "Manufacturers, active ingredients and products."},
    {"name": "Inventory", "description": "Stock batches with expiry dates and locations."},
    {"name": "Procurement", "description": "Suppliers and purchase orders."},
    {"name": "Sales", "description": "Customers, sales and point-of-sale checkout."},
]

app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
    openapi_tags=openapi_tags,
)

# CORS - avoid wildcard with credentials
cors_allow_credentials = settings.CORS_ALLOW_CREDENTIALS
if settings.CORS_ORIGINS == ["*"] and cors_allow_credentials:
    logger.warning("CORS_ALLOW_CREDENTIALS=True with '*' origins is not permitted; disabling credentials.")
    cors_allow_credentials = False

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=cors_allow_credentials,
    allow_methods=settings.CORS_ALLOW_METHODS,
    allow_headers=settings.CORS_ALLOW_HEADERS,
)


@app.middleware("http")
async def request_context_middleware(request: Request, call_next):
    """
    Bind a correlation id to the request for logging and error responses.
    Adds 'X-Correlation-ID' to every response.
    """
    corr = request.headers.get("X-Correlation-ID") or request.headers.get("X-Request-ID") or str(uuid4())
    token_corr = correlation_id_var.set(corr)
    request.state.correlation_id = corr

    logger.info("Incoming request %s %s", request.method, request.url.path)
    try:
        response = await call_next(request)
    finally:
        correlation_id_var.reset(token_corr)

    response.headers["X-Correlation-ID"] = corr
    return response


def _error_response(status_code: int, message: str, details: Any = None, error_id: Optional[str] = None) -> JSONResponse:
    """Build the `{message, details?, error_id?}` error envelope."""
    return JSONResponse(
        status_code=status_code,
        content=message_body(message, details=details, error_id=error_id),
    )


def _validation_details(errors: List[Dict[str, Any]]) -> List[Dict[str, str]]:
    details = []
    for err in errors:
        loc = [str(p) for p in err.get("loc", ()) if p not in ("body", "query")]
        details.append({"field": ".".join(loc) or "body", "error": str(err.get("msg", "invalid"))})
    return details


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """
    Global handler for HTTP errors (raised by handlers or by routing) producing `{message}`.
    """
    if exc.status_code == 405:
        return _error_response(405, "Method not allowed.")
    if isinstance(exc.detail, dict):
        return _error_response(exc.status_code, str(exc.detail.get("message")), exc.detail.get("details"))
    return _error_response(exc.status_code, str(exc.detail))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Request validation errors are client errors: 400 with field-level details.
    """
    errors = exc.errors()
    if any(err.get("type") == "json_invalid" for err in errors):
        return _error_response(400, "Request body is not valid JSON.")
    details = _validation_details(errors)
    fields = sorted({d["field"].split(".")[0] for d in details})
    return _error_response(400, f"Missing or invalid required fields: {', '.join(fields)}.", details)


@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    """
    Database failures (constraint violations, lost connections) become a generic 500.
    The driver message is logged, never returned.
    """
    corr = getattr(request.state, "correlation_id", None)
    logger.error("Database error on %s %s: %s", request.method, request.url.path, exc)
    return _error_response(500, INTERNAL_ERROR_MESSAGE, error_id=corr)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """
    Catch-all handler to avoid leaking stack traces and to return a structured error.
    """
    corr = getattr(request.state, "correlation_id", None)
    logger.exception("Unhandled error processing request")
    return _error_response(500, INTERNAL_ERROR_MESSAGE, error_id=corr)


@app.on_event("startup")
async def on_startup() -> None:
    """
    Optionally run migrations and seeding, then report database reachability.

    None of these steps is fatal: the service starts and answers health probes either way.
    """
    if settings.RUN_MIGRATIONS_ON_STARTUP:
        try:
            logger.info("Running Alembic migrations: upgrade head")
            # Alembic's env drives its own event loop
            await asyncio.to_thread(run_alembic, ["upgrade", "head"])
            logger.info("Migrations completed.")
        except Exception as exc:
            logger.exception("Migration step failed: %s", exc)

    if settings.AUTO_SEED:
        try:
            logger.info("Running database seeding...")
            await seed_all()
        except Exception as exc:
            logger.exception("Seeding step failed: %s", exc)

    try:
        await check_database()
        logger.info("Database reachable.")
    except Exception as exc:
        logger.warning("Database not reachable at startup: %s", exc)


@app.on_event("shutdown")
async def on_shutdown() -> None:
    await dispose_engine()


# Build API v1 router and include sub-routers
api_v1 = APIRouter(prefix="/api/v1")


# PUBLIC_INTERFACE
@api_v1.get(
    "/health",
    response_model=MessageResponse,
    response_model_exclude_none=True,
    summary="Health Check",
    tags=["Health"],
)
def health_check() -> MessageResponse:
    """
    Basic liveness health check endpoint.

    Returns:
        MessageResponse: Simple confirmation that the service is running.
    """
    return MessageResponse(message="Healthy")


# PUBLIC_INTERFACE
@api_v1.get(
    "/health/db",
    response_model=MessageResponse,
    response_model_exclude_none=True,
    summary="Database Health Check",
    description="Execute a trivial statement against the database; 500 when it is unreachable.",
    tags=["Health"],
)
async def database_health() -> MessageResponse:
    await check_database()
    return MessageResponse(message="Database reachable")


# Checkout is registered ahead of the generic /sales resource
api_v1.include_router(checkout_router)
for descriptor in RESOURCES:
    api_v1.include_router(build_crud_router(descriptor))

# Attach api_v1 to app
app.include_router(api_v1)
