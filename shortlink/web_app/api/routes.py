"""API routes implementation."""

from fastapi import APIRouter, Request, Response, status

from .schemas import (
    AnalyticsData,
    AnalyticsResponse,
    ErrorResponse,
    LinkOut,
    ShortenRequest,
    ShortenResponse,
    ShortLinkData,
)

router = APIRouter()


@router.post(
    "/shorten",
    response_model=ShortenResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        200: {"model": ShortenResponse, "description": "URL was already shortened"},
        400: {"model": ErrorResponse, "description": "Missing or invalid URL"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
    summary="Create short URL",
    description="Shorten a URL. Submitting a URL that is already known returns its existing short link.",
)
async def shorten_url(request: Request, response: Response, body: ShortenRequest):
    """Create or fetch the short link for a URL."""
    registry = request.app.state.registry

    result = await registry.shorten(body.original_url)

    if not result.created:
        response.status_code = status.HTTP_200_OK

    return ShortenResponse(data=ShortLinkData(**result.to_dict()))


@router.get(
    "/analytics",
    response_model=AnalyticsResponse,
    responses={
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
    summary="List links",
    description="List every short link, newest first, with total link and click counts.",
)
async def get_analytics(request: Request):
    """List links with aggregates."""
    registry = request.app.state.registry

    listing = await registry.list_all()

    return AnalyticsResponse(
        data=AnalyticsData(
            urls=[LinkOut.model_validate(link) for link in listing.links],
            total_urls=listing.total_urls,
            total_clicks=listing.total_clicks,
        )
    )
