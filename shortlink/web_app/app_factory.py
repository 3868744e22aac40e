"""FastAPI application factory."""

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..common.url_builder import route_prefix
from ..config import Config
from ..database.base import LinkStoreBase
from ..database.cache import RedisCache
from ..redirect import RedirectService
from ..registry import LinkRegistry
from .api import api_router
from .errors import register_exception_handlers
from .middleware.logging import LoggingMiddleware
from .web import web_router


def create_app(
    store: Optional[LinkStoreBase],
    cache: Optional[RedisCache],
    registry: Optional[LinkRegistry],
    redirects: Optional[RedirectService],
    config: Config,
) -> FastAPI:
    """Create and configure FastAPI application.
    
    Components may be None when they are created later in a lifespan handler.
    
    Args:
        store: Link store
        cache: Optional Redis cache
        registry: Link registry
        redirects: Redirect service
        config: Configuration instance
        
    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title="Short Link Service",
        description="Shorten URLs, redirect visitors and count clicks",
        version="1.0.0",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
    )
    
    # Store instances in app state for access in routes
    app.state.store = store
    app.state.cache = cache
    app.state.registry = registry
    app.state.redirects = redirects
    app.state.config = config
    
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[config.frontend_url],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggingMiddleware)
    
    register_exception_handlers(app)
    
    app.include_router(api_router, prefix="/api", tags=["API"])
    app.include_router(web_router, tags=["Redirect"])

    # Short URLs carry the prefix, so redirects are served there as well
    prefix = route_prefix(config.path_prefix)
    if prefix:
        app.include_router(web_router, prefix=prefix, tags=["Redirect"])
    
    return app
