# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Storefront API.
# It configures the FastAPI application with middleware, routers, and handlers,
# and starts the dependency bootstrap when the server starts.
#
# Usage:
#   uvicorn app.main:app --reload
#   python -m app
# =============================================================================

import asyncio
import logging
import os
from contextlib import asynccontextmanager
from typing import Any, Callable, Mapping

from fastapi import APIRouter, FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.routing import Route

from app.config import Settings, settings
from app.exceptions import (
    RouteNotFoundApp,
    StorefrontError,
    storefront_exception_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)
from app.middleware import ErrorTranslationMiddleware, JSONBodyMiddleware
from app.routers import health, product, user
from core.models.bootstrap import BootstrapOutcome
from core.services.bootstrap_service import Bootstrapper
from lib.cloudinary_client import cloudinary_storage
from lib.mongodb_client import mongodb

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

BootstrapFailureHandler = Callable[[BootstrapOutcome], None]


def exit_process(outcome: BootstrapOutcome) -> None:
    """
    Default reaction to a failed bootstrap: end the process immediately.

    In-flight requests are abandoned; there is no drain and no retry.
    """
    logger.critical(
        f"Exiting: {outcome.failed_step} could not be initialized ({outcome.message})"
    )
    logging.shutdown()
    os._exit(outcome.exit_code)


async def run_bootstrap(app: FastAPI) -> BootstrapOutcome:
    """Connect dependencies and hand a failed outcome to the failure handler."""
    outcome = await app.state.bootstrapper.initialize()
    app.state.bootstrap_outcome = outcome
    if not outcome.success:
        app.state.on_bootstrap_failure(outcome)
    return outcome


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    - Startup: start the bootstrap sequence in the background. The listener
      does not wait for it, so requests may arrive before the database is up.
    - Shutdown: stop an unfinished bootstrap and close the database.
    """
    config: Settings = app.state.settings
    logger.info(f"Starting Storefront API in {config.ENVIRONMENT} mode")

    app.state.bootstrap_task = asyncio.create_task(run_bootstrap(app))

    logger.info(f"Server is running on port {config.PORT}")
    logger.info(f"Local: http://localhost:{config.PORT}")
    logger.info(f"Status: http://localhost:{config.PORT}/api/status")

    yield

    logger.info("Shutting down Storefront API")

    task = app.state.bootstrap_task
    if not task.done():
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
    elif not task.cancelled() and task.exception() is not None:
        logger.error(f"Bootstrap task failed: {task.exception()!r}")

    await app.state.database.disconnect()


def mount_routes(app: FastAPI, mounts: Mapping[str, APIRouter]) -> None:
    """Bind each collaborator router under its path prefix, unmodified."""
    for prefix, router in mounts.items():
        app.include_router(router, prefix=prefix)
        logger.debug(f"Mounted {len(router.routes)} route(s) under {prefix}")


def create_app(
    config: Settings | None = None,
    database: Any = None,
    media_storage: Any = None,
    user_router: APIRouter | None = None,
    product_router: APIRouter | None = None,
    on_bootstrap_failure: BootstrapFailureHandler = exit_process,
) -> FastAPI:
    """
    Build the application.

    Every collaborator defaults to the process-wide instance; tests pass
    fakes instead.

    Args:
        config: Settings (defaults to the global settings)
        database: Database connection exposing connect/disconnect and
            ready_state, database_name, host
        media_storage: Media storage exposing connect and is_configured
        user_router: Routes mounted under /api/user
        product_router: Routes mounted under /api/product
        on_bootstrap_failure: Called with the outcome when bootstrap fails

    Returns:
        FastAPI: Configured application
    """
    config = config or settings
    database = database if database is not None else mongodb
    media_storage = media_storage if media_storage is not None else cloudinary_storage

    app = FastAPI(
        title="Storefront API",
        description="JSON API for the storefront: users, products and operational status.",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.state.settings = config
    app.state.database = database
    app.state.media_storage = media_storage
    app.state.bootstrapper = Bootstrapper([
        ("MongoDB", database.connect),
        ("Cloudinary", media_storage.connect),
    ])
    app.state.on_bootstrap_failure = on_bootstrap_failure
    app.state.bootstrap_outcome = None

    # =========================================================================
    # Middleware
    # =========================================================================
    # Added innermost first: requests see the body parser, then CORS, then
    # error translation, so 500 envelopes still get cross-origin headers.

    app.add_middleware(ErrorTranslationMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(JSONBodyMiddleware, max_body_bytes=config.MAX_JSON_BODY_BYTES)

    # =========================================================================
    # Exception Handlers
    # =========================================================================

    app.add_exception_handler(StorefrontError, storefront_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    # Backstop for errors raised outside ErrorTranslationMiddleware
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # =========================================================================
    # Routers
    # =========================================================================

    app.include_router(health.router, tags=["Health"])

    mount_routes(app, {
        "/api/user": user_router if user_router is not None else user.router,
        "/api/product": product_router if product_router is not None else product.router,
    })

    # Must stay last: claims every method and path nothing above matched.
    # An ASGI endpoint has no method list, so unclaimed methods get 404, not 405.
    app.router.routes.append(
        Route("/{path:path}", RouteNotFoundApp(), include_in_schema=False)
    )

    return app


app = create_app()
