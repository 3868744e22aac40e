"""Short link service: URL shortening, redirects and click counting."""

from .errors import (
    DuplicateShortCodeError,
    NotFoundError,
    ShortLinkError,
    StoreError,
    ValidationError,
)
from .redirect import RedirectService
from .registry import LinkListing, LinkRegistry, ShortenResult
from .shortcode import ShortCodeGenerator

__version__ = "1.0.0"

__all__ = [
    "DuplicateShortCodeError",
    "NotFoundError",
    "ShortLinkError",
    "StoreError",
    "ValidationError",
    "RedirectService",
    "LinkListing",
    "LinkRegistry",
    "ShortenResult",
    "ShortCodeGenerator",
]
