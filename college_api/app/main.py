"""
Main entrypoint for the Colleges API.

``create_app`` assembles the FastAPI application: logging, exception
handlers, middleware, the response cache and the versioned routers.
The dataset is either injected by the caller or loaded from
``settings.dataset_path`` while the application starts, so the server
never accepts requests before the data is complete.  A dataset that
cannot be loaded aborts startup.

Run it with uvicorn, e.g.::

    uvicorn college_api.app.main:app --port 3000
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import PlainTextResponse

from .api.v1.router import router as v1_router
from .core.cache import TTLCache
from .core.config import Settings, settings
from .core.dataset import Dataset, load_dataset
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.middleware import (
    FixedWindowRateLimiter,
    RateLimitMiddleware,
    RequestLoggingMiddleware,
    SecurityHeadersMiddleware,
)
from .services.college_service import CollegeService

logger = logging.getLogger(__name__)

BANNER = "Colleges API"


def create_app(app_settings: Optional[Settings] = None, dataset: Optional[Dataset] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Settings to use instead of the environment-derived defaults.
    dataset : Optional[Dataset]
        Pre-loaded records.  When omitted the dataset is read from
        ``app_settings.dataset_path`` during startup.

    Returns
    -------
    FastAPI
        A configured application instance.
    """
    app_settings = app_settings or settings
    setup_logging(app_settings.log_level, app_settings.log_file or None, app_settings.log_format)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if dataset is None:
            # DatasetLoadError propagates and the server refuses to start.
            app.state.college_service = CollegeService(load_dataset(app_settings.dataset_path))
        logger.info("%s ready with %d records", BANNER, app.state.college_service.total())
        yield
        logger.info("%s shutting down", BANNER)

    app = FastAPI(title=app_settings.project_name, version=app_settings.api_version, lifespan=lifespan)
    app.state.settings = app_settings
    app.state.cache = TTLCache(app_settings.cache_ttl_seconds, app_settings.cache_max_entries)
    if dataset is not None:
        app.state.college_service = CollegeService(dataset)

    register_exception_handlers(app)

    # Last added runs first: logging wraps compression, which wraps the
    # security headers and the rate limiter.
    if app_settings.rate_limit_requests > 0:
        limiter = FixedWindowRateLimiter(
            app_settings.rate_limit_requests, app_settings.rate_limit_window_seconds
        )
        app.add_middleware(RateLimitMiddleware, limiter=limiter)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(GZipMiddleware, minimum_size=app_settings.gzip_minimum_size)
    app.add_middleware(RequestLoggingMiddleware)

    app.include_router(v1_router)

    @app.get("/", response_class=PlainTextResponse, include_in_schema=False)
    async def root() -> str:
        return BANNER

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
