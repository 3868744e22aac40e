"""Root-level routes: health and short code redirects."""

from .routes import router as web_router

__all__ = ["web_router"]
