"""Pydantic schemas for API requests and responses.

Field names are snake_case in Python and camelCase on the wire.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialized with camelCase aliases."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ShortenRequest(CamelModel):
    """Request to shorten a URL."""

    # Optional so that a missing value gets the service's own error message
    original_url: Optional[str] = Field(None, description="The URL to shorten")

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"originalUrl": "https://example.com/very/long/path/to/resource"},
                {"originalUrl": "example.com/without/scheme"},
            ]
        }
    )


class ShortLinkData(CamelModel):
    """The short link triple returned by /api/shorten."""

    original_url: str = Field(..., description="The normalized original URL")
    short_url: str = Field(..., description="The complete short URL")
    short_code: str = Field(..., description="The generated short code")


class ShortenResponse(CamelModel):
    """Response after shortening a URL."""

    success: bool = True
    data: ShortLinkData


class LinkOut(CamelModel):
    """A link as listed in analytics."""

    original_url: str
    short_code: str
    short_url: str
    clicks: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class AnalyticsData(CamelModel):
    urls: List[LinkOut]
    total_urls: int
    total_clicks: int


class AnalyticsResponse(CamelModel):
    """All links, newest first, with totals."""

    success: bool = True
    data: AnalyticsData


class HealthResponse(CamelModel):
    """Health check response."""

    success: bool = Field(..., description="Overall status")
    message: str
    database: str = Field(..., description="Store status")
    cache: str = Field(..., description="Cache status")
    timestamp: datetime = Field(..., description="Check timestamp")


class ErrorResponse(CamelModel):
    """Error response."""

    success: bool = False
    message: str = Field(..., description="Human-readable error message")
