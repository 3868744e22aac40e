"""
Main entry point for the short link service.

Concurrency: requests are handled with async I/O (FastAPI + asyncpg
connection pool + redis.asyncio). Set WORKERS > 1 for multi-process scaling;
each worker has its own pool and shares nothing but the database.

Usage:
    shortlink            (installed console script)
    python -m shortlink.app

Environment variables:
    DATABASE_URL - PostgreSQL connection URL (memory:// for in-process store)
    CREATE_TABLES - Create the links table on startup
    REDIS_URL - Redis connection URL (optional)
    BASE_URL - Base URL for short links
    FRONTEND_URL - Origin allowed by CORS
    PORT - Port to listen on
    WORKERS - Number of uvicorn worker processes (default 1)
    LOG_LEVEL - Logging level
"""

import logging
import signal
import sys
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Optional

import uvicorn
from fastapi import FastAPI

from .common.logging_config import setup_logging
from .config import Config, load_config
from .database.base import LinkStoreBase
from .database.cache import RedisCache
from .database.memory import InMemoryLinkStore
from .database.postgres import PostgresLinkStore
from .redirect import RedirectService
from .registry import LinkRegistry
from .shortcode import ShortCodeGenerator
from .web_app import create_app


@dataclass
class Components:
    """Everything a request handler needs, built once per process."""

    store: LinkStoreBase
    cache: Optional[RedisCache]
    registry: LinkRegistry
    redirects: RedirectService

    async def close(self) -> None:
        await self.store.close()
        if self.cache:
            await self.cache.close()


def create_store(config: Config, logger: logging.Logger) -> LinkStoreBase:
    """Pick the store implementation from DATABASE_URL."""
    if config.uses_memory_store:
        logger.warning("Using in-memory store; links are lost on restart")
        return InMemoryLinkStore(logger=logger)

    return PostgresLinkStore(
        db_config=config.database_url,
        pool_max_size=config.db_pool_max_size,
        connection_timeout_seconds=config.db_timeout_seconds,
        create_tables=config.create_tables,
        logger=logger,
    )


async def build_components(config: Config, logger: logging.Logger) -> Components:
    """Connect the store and cache and wire up the services."""
    store = create_store(config, logger)
    await store.initialize()

    cache = None
    if config.redis_url:
        logger.info("Connecting to Redis")
        cache = RedisCache(
            redis_url=config.redis_url,
            ttl_seconds=config.cache_ttl_seconds,
            logger=logger,
        )
        await cache.connect()
    else:
        logger.info("Redis caching disabled")

    generator = ShortCodeGenerator(
        default_length=config.short_code_length,
        alphabet=config.short_code_alphabet,
    )
    logger.info(
        f"Short codes: length={generator.default_length}, "
        f"keyspace={generator.keyspace_size():,}"
    )

    registry = LinkRegistry(
        store=store,
        base_url=config.base_url,
        short_code_generator=generator,
        path_prefix=config.path_prefix,
        max_collision_retries=config.max_collision_retries,
        logger=logger.getChild("registry"),
    )
    redirects = RedirectService(
        store=store,
        cache=cache,
        logger=logger.getChild("redirect"),
    )

    return Components(store=store, cache=cache, registry=registry, redirects=redirects)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown."""
    config = app.state.config
    logger = app.state.logger

    logger.info("Starting short link service...")

    components = await build_components(config, logger)

    app.state.store = components.store
    app.state.cache = components.cache
    app.state.registry = components.registry
    app.state.redirects = components.redirects

    logger.info("Service started successfully")

    yield

    logger.info("Shutting down short link service...")
    await components.close()
    logger.info("Service stopped")


def main():
    """Main entry point."""
    config = load_config()

    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )

    logger.info("Short Link Service")
    logger.info(f"Configuration: {config.safe_dump()}")

    # Components are created in the lifespan handler
    app = create_app(
        store=None,
        cache=None,
        registry=None,
        redirects=None,
        config=config,
    )
    app.state.logger = logger
    app.router.lifespan_context = lifespan

    uvicorn_config = uvicorn.Config(
        app,
        host=config.host,
        port=config.port,
        workers=config.workers,
        log_level=config.log_level.lower(),
        access_log=True,
    )

    server = uvicorn.Server(uvicorn_config)

    def handle_signal(signum, frame):
        logger.info(f"Received signal {signum}, initiating graceful shutdown...")
        server.should_exit = True

    signal.signal(signal.SIGINT, handle_signal)
    signal.signal(signal.SIGTERM, handle_signal)

    try:
        logger.info(f"Starting server on {config.host}:{config.port}")
        server.run()
    except Exception as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
