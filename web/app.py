"""FastAPI application factory: routers, error mapping, middleware, state."""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from slowapi.errors import RateLimitExceeded

from config import WebConfig, CatalogConfig
from data.query_engine import CatalogQueryEngine, VideoNotFound, EmptyCatalog
from version import __version__
from web.shared import limiter
from web.helpers import _ERROR_MESSAGES
from web.middleware import SecurityHeadersMiddleware, AccessLogMiddleware
from web.routers.videos import router as videos_router
from web.routers.search import router as search_router
from web.routers.sampling import router as sampling_router
from web.routers.sitemap import router as sitemap_router

logger = logging.getLogger(__name__)


async def not_found_handler(request: Request, exc: VideoNotFound):
    return PlainTextResponse(_ERROR_MESSAGES["not_found"], status_code=404)


async def empty_catalog_handler(request: Request, exc: EmptyCatalog):
    logger.error("Request to %s hit an empty catalog", request.url.path)
    return PlainTextResponse(_ERROR_MESSAGES["empty"], status_code=500)


async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
    return PlainTextResponse(_ERROR_MESSAGES["rate_limited"], status_code=429)


def create_app(engine: CatalogQueryEngine,
               web_config: WebConfig | None = None,
               catalog_config: CatalogConfig | None = None) -> FastAPI:
    """Build a FastAPI app serving the given engine.

    Each call returns a fresh app so tests never share middleware stacks.
    """
    web_config = web_config or WebConfig()
    catalog_config = catalog_config or CatalogConfig()

    app = FastAPI(title="Video Catalog", version=__version__)
    app.state.limiter = limiter

    # Routers
    app.include_router(videos_router)
    app.include_router(search_router)
    app.include_router(sampling_router)
    app.include_router(sitemap_router)

    # Error mapping
    app.add_exception_handler(VideoNotFound, not_found_handler)
    app.add_exception_handler(EmptyCatalog, empty_catalog_handler)
    app.add_exception_handler(RateLimitExceeded, rate_limit_handler)

    # State
    state = app.state
    state.engine = engine
    state.web_config = web_config
    state.catalog_config = catalog_config

    # Middleware (last added = first executed)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(AccessLogMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=web_config.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    return app
