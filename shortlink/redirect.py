"""Redirect resolution and click accounting."""

import logging
from typing import Optional

from .database.base import LinkStoreBase
from .database.cache import RedisCache
from .errors import NotFoundError, StoreError, ValidationError


class RedirectService:
    """Resolves short codes to their target and counts the visit."""

    def __init__(
        self,
        store: LinkStoreBase,
        cache: Optional[RedisCache] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.store = store
        self.cache = cache
        self.logger = logger or logging.getLogger(__name__)

    async def resolve_and_count(self, short_code: str) -> str:
        """Return the original URL for a code and record one click.

        Click accounting is best-effort: if the increment fails the error is
        logged and the original URL is still returned.

        Args:
            short_code: The short code from the request path

        Returns:
            The original URL to redirect to

        Raises:
            ValidationError: If the short code is empty
            NotFoundError: If no link has this code
            StoreError: If the lookup itself fails
        """
        if not short_code or not short_code.strip():
            raise ValidationError("Short code is required")

        original_url = await self._lookup(short_code)
        if original_url is None:
            self.logger.warning(f"Short code not found: {short_code}")
            raise NotFoundError("URL not found")

        try:
            await self.store.increment_clicks(short_code)
        except StoreError:
            self.logger.exception(f"Failed to record click for {short_code}")

        return original_url

    async def _lookup(self, short_code: str) -> Optional[str]:
        if self.cache:
            cache_key = self.cache.get_cache_key(short_code)
            cached_url = await self.cache.get(cache_key)
            if cached_url:
                self.logger.debug(f"Cache hit for {short_code}")
                return cached_url

        link = await self.store.get_by_short_code(short_code)
        if link is None:
            return None

        if self.cache:
            await self.cache.set(self.cache.get_cache_key(short_code), link.original_url)

        self.logger.debug(f"Resolved {short_code} -> {link.original_url}")
        return link.original_url
