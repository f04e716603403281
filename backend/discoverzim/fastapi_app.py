"""
FastAPI Application Factory.
Creates and configures the FastAPI application with all routers, middleware, and DI.

Endpoints:
- accommodations, destinations, events, cities (public browsing)
- cart, chat, notifications, bookings, payments, wishlist, reviews,
  itineraries, profile (signed-in users)
- admin (administrators)
- auth (session introspection, sign-out)
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka

from discoverzim import __version__
from discoverzim.config.logging_config import setup_logging, correlation_id_var
from discoverzim.config.settings import get_config
from discoverzim.domain.exceptions import (
    AccessDeniedError,
    BookingFailedError,
    DomainValidationError,
    EntityNotFoundError,
)
from discoverzim.presentation.api import (
    accommodations_router,
    admin_router,
    auth_router,
    bookings_router,
    cart_router,
    chat_router,
    cities_router,
    destinations_router,
    events_router,
    itineraries_router,
    notifications_router,
    payments_router,
    profile_router,
    reviews_router,
    wishlist_router,
)
from discoverzim.presentation.dependencies.auth import AccessGateInterrupt, gate_response
from discoverzim.setup.ioc import create_container

logger = logging.getLogger(__name__)


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Middleware to extract and set correlation ID from request headers."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get("X-Correlation-ID", "NO Correlation ID")

        # Set in contextvars (propagates to async tasks and logging)
        correlation_id_var.set(correlation_id)

        response = await call_next(request)
        response.headers["X-Correlation-ID"] = correlation_id
        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan context manager.

    - Startup: container and Dishka are already set up by the factory
    - Shutdown: close the DI container
    """
    logger.info("FastAPI application started. DI container initialized.")
    yield
    await app.state.dishka_container.close()
    logger.info("FastAPI application shutdown. DI container closed.")


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def create_fastapi_app(container: Optional[AsyncContainer] = None) -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Args:
        container: DI container to use; built from the environment's config
            when omitted

    Returns:
        FastAPI application instance
    """
    config = get_config()
    setup_logging(config.LOG_LEVEL, config.LOG_PATH)

    app = FastAPI(
        title="Discover Zimbabwe API",
        description="Booking backend for the Discover Zimbabwe tourism app",
        version=__version__,
        lifespan=lifespan,
    )

    # Setup Dishka BEFORE app starts (must add middleware before startup)
    setup_dishka(container or create_container(config), app)

    # Correlation ID middleware (must be added before CORS)
    app.add_middleware(CorrelationIdMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Access-Notice", "X-Correlation-ID"],
    )

    @app.exception_handler(AccessGateInterrupt)
    async def access_gate_handler(request: Request, exc: AccessGateInterrupt):
        return gate_response(exc.decision)

    @app.exception_handler(AccessDeniedError)
    async def access_denied_handler(request: Request, exc: AccessDeniedError):
        return _error(403, str(exc))

    @app.exception_handler(EntityNotFoundError)
    async def not_found_handler(request: Request, exc: EntityNotFoundError):
        return _error(404, str(exc))

    @app.exception_handler(DomainValidationError)
    async def domain_validation_handler(request: Request, exc: DomainValidationError):
        return _error(422, exc.message)

    @app.exception_handler(BookingFailedError)
    async def booking_failed_handler(request: Request, exc: BookingFailedError):
        return _error(502, exc.message)

    # Validation error handler - shows detailed Pydantic errors
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = jsonable_encoder(exc.errors())
        logger.warning(f"Validation error on {request.url.path}: {errors}")
        return JSONResponse(
            status_code=400,
            content={"error": "Validation error", "details": errors},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        logger.info(f"HTTP {exc.status_code} on {request.url.path}: {exc.detail}")
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.url.path}: {type(exc).__name__}: {exc}")
        return _error(500, f"Internal server error: {str(exc)}")

    # Health check routes
    @app.get("/", tags=["health"])
    async def root():
        return {"message": "Discover Zimbabwe API is running."}

    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "healthy"}

    app.include_router(auth_router)
    app.include_router(accommodations_router)
    app.include_router(destinations_router)
    app.include_router(events_router)
    app.include_router(cities_router)
    app.include_router(cart_router)
    app.include_router(chat_router)
    app.include_router(notifications_router)
    app.include_router(bookings_router)
    app.include_router(payments_router)
    app.include_router(wishlist_router)
    app.include_router(reviews_router)
    app.include_router(itineraries_router)
    app.include_router(profile_router)
    app.include_router(admin_router)

    return app


# Create the app instance
app = create_fastapi_app()
