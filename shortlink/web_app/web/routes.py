"""Redirect and health routes served at the site root."""

from datetime import datetime, timezone

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse, RedirectResponse

from ...common.validators import is_valid_short_code
from ...errors import NotFoundError
from ..api.schemas import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse, summary="Health check")
async def health_check(request: Request):
    """Health check endpoint for load balancers and monitoring."""
    store = request.app.state.store
    cache = request.app.state.cache

    db_healthy = await store.health_check()
    if cache is not None and cache.enabled:
        cache_status = "healthy" if await cache.ping() else "unhealthy"
    else:
        cache_status = "disabled"

    health = HealthResponse(
        success=db_healthy,
        message="Server is running" if db_healthy else "Database unavailable",
        database="healthy" if db_healthy else "unhealthy",
        cache=cache_status,
        timestamp=datetime.now(timezone.utc),
    )
    return JSONResponse(
        status_code=status.HTTP_200_OK if db_healthy else status.HTTP_503_SERVICE_UNAVAILABLE,
        content=health.model_dump(mode="json", by_alias=True),
    )


@router.get("/{short_code}", include_in_schema=False)
async def redirect_to_url(request: Request, short_code: str):
    """Redirect to the original URL and count the click."""
    redirects = request.app.state.redirects

    # Paths like /favicon.ico can never be codes; skip the store
    is_valid, _ = is_valid_short_code(short_code)
    if not is_valid:
        raise NotFoundError("URL not found")

    original_url = await redirects.resolve_and_count(short_code)

    return RedirectResponse(url=original_url, status_code=status.HTTP_302_FOUND)
