"""
DormiDine FastAPI Application
Main entry point: configuration, logging, composition root and middleware
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import uvicorn
from contextlib import asynccontextmanager
import anyio

from api.routes import health, meals, payments, requests, reviews, users
from api.dependencies import build_services

from adapters.mongo_adapter import MongoStore
from adapters.payment_gateway import StripeGateway
from repositories.factory import create_repositories

from app.config import settings, RepositoryBackend

from api.middleware import (
    RequestLoggingMiddleware,
    validation_exception_handler,
    http_exception_handler,
    service_validation_exception_handler,
    not_found_exception_handler,
    conflict_exception_handler,
    gateway_exception_handler,
    storage_exception_handler,
    general_exception_handler,
)
from app.exceptions import (
    ServiceValidationError,
    NotFoundError,
    ConflictError,
    GatewayError,
    StorageError,
)

# Setup logging with configured level and format
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()), format=settings.log_format
)
_logger = logging.getLogger("dormidine.main")


def _open_store() -> MongoStore:
    store = MongoStore(
        settings.mongo_uri, settings.mongo_db_name, settings.mongo_timeout_ms
    ).connect()
    store.ensure_indexes()
    return store


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager owning the store and gateway lifecycles.
    Builds repositories and services and publishes them on app.state.
    """
    _logger.info(f"Starting DormiDine in {settings.environment.value} mode")

    store = None
    if settings.repository_backend == RepositoryBackend.MONGODB:
        # Blocking driver calls run in a thread to avoid blocking the event loop
        store = await anyio.to_thread.run_sync(_open_store)
    else:
        _logger.warning("Using in-memory repositories; data will not persist")

    gateway = StripeGateway(
        settings.stripe_secret_key,
        api_base=settings.stripe_api_base,
        timeout=settings.gateway_timeout_sec,
    )
    if not settings.stripe_secret_key:
        _logger.warning("STRIPE_SECRET_KEY is not set; payment intents will fail")

    repos = create_repositories(settings.repository_backend, store)
    app.state.store = store
    app.state.services = build_services(repos, gateway, settings.payment_currency)

    try:
        yield
    finally:
        _logger.info("Shutting down DormiDine")
        gateway.close()
        if store is not None:
            store.close()


# Create FastAPI application with enhanced configuration
app = FastAPI(
    title=settings.api_title,
    version=settings.app_version,
    description=settings.api_description,
    lifespan=lifespan,
    debug=settings.debug,
    openapi_url=(
        f"{settings.api_prefix}/openapi.json" if not settings.is_production() else None
    ),
    docs_url=f"{settings.api_prefix}/docs" if not settings.is_production() else None,
    redoc_url=f"{settings.api_prefix}/redoc" if not settings.is_production() else None,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

# Add request logging middleware
app.add_middleware(RequestLoggingMiddleware)

# Register exception handlers
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(ServiceValidationError, service_validation_exception_handler)
app.add_exception_handler(NotFoundError, not_found_exception_handler)
app.add_exception_handler(ConflictError, conflict_exception_handler)
app.add_exception_handler(GatewayError, gateway_exception_handler)
app.add_exception_handler(StorageError, storage_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

# Include routers
app.include_router(health.router, prefix=settings.api_prefix)
app.include_router(meals.router, prefix=settings.api_prefix)
app.include_router(meals.upcoming_router, prefix=settings.api_prefix)
app.include_router(requests.router, prefix=settings.api_prefix)
app.include_router(payments.router, prefix=settings.api_prefix)
app.include_router(users.router, prefix=settings.api_prefix)
app.include_router(reviews.router, prefix=settings.api_prefix)


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development(),
        log_level=settings.log_level.lower(),
    )
