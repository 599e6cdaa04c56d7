"""
Restaurant Management API entry point.

``create_app`` wires settings, middleware, exception handlers and routers;
the lifespan opens the MongoDB collections unless they were injected.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import anyio
import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from pymongo.errors import PyMongoError
from starlette.exceptions import HTTPException as StarletteHTTPException

from adapters import mongo_adapter
from adapters.mongo_adapter import Collections
from api.middleware import (
    RequestLoggingMiddleware,
    general_exception_handler,
    http_exception_handler,
    persistence_exception_handler,
    restaurant_exception_handler,
    validation_exception_handler,
)
from api.routes import employees, foods, health, invoices, menus, order_items, orders, tables
from app.config import Settings, settings as default_settings
from app.exceptions import RestaurantError

ROUTERS = (foods, menus, orders, order_items, tables, invoices, employees, health)

_logger = logging.getLogger("restaurant.main")


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(level=settings.log_level, format=settings.log_format)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Connect on startup, close on shutdown.

    An unreachable server aborts startup. Injected collections are used as-is
    and left open.
    """
    settings: Settings = app.state.settings
    _logger.info("Starting %s (%s)", settings.app_name, settings.environment.value)

    client = None
    if app.state.collections is None:
        # connect() pings synchronously
        client = await anyio.to_thread.run_sync(
            mongo_adapter.connect, settings.mongo_uri, settings.mongo_connect_timeout_ms
        )
        app.state.collections = mongo_adapter.open_collections(
            client[settings.mongo_db_name]
        )
        _logger.info("Using database %s", settings.mongo_db_name)

    try:
        yield
    finally:
        _logger.info("Stopping %s", settings.app_name)
        if client is not None:
            mongo_adapter.close(client)
            app.state.collections = None


def create_app(
    settings: Optional[Settings] = None, collections: Optional[Collections] = None
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: configuration, defaults to the environment-loaded settings
        collections: pre-opened collection handles; when given, the lifespan
            does not connect to MongoDB
    """
    settings = settings or default_settings
    prefix = settings.api_prefix
    expose_docs = not settings.is_production()

    app = FastAPI(
        title=settings.api_title,
        version=settings.app_version,
        description=settings.api_description,
        lifespan=lifespan,
        debug=settings.debug,
        openapi_url=f"{prefix}/openapi.json" if expose_docs else None,
        docs_url=f"{prefix}/docs" if expose_docs else None,
        redoc_url=f"{prefix}/redoc" if expose_docs else None,
    )
    app.state.settings = settings
    app.state.collections = collections

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )
    app.add_middleware(RequestLoggingMiddleware)

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RestaurantError, restaurant_exception_handler)
    app.add_exception_handler(PyMongoError, persistence_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    for module in ROUTERS:
        app.include_router(module.router, prefix=prefix)

    return app


configure_logging(default_settings)
app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=default_settings.host,
        port=default_settings.port,
        reload=default_settings.is_development(),
        log_level=default_settings.log_level.lower(),
    )
