"""Link registry: validates, deduplicates and stores short links."""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .common.url_builder import build_short_url
from .common.validators import is_valid_url, normalize_url
from .database.base import LinkStoreBase
from .database.models import LinkRecord
from .errors import DuplicateShortCodeError, NotFoundError, StoreError, ValidationError
from .shortcode import ShortCodeGenerator


@dataclass
class ShortenResult:
    """Outcome of a shorten request."""

    link: LinkRecord
    created: bool

    def to_dict(self) -> Dict[str, str]:
        return {
            "originalUrl": self.link.original_url,
            "shortUrl": self.link.short_url,
            "shortCode": self.link.short_code,
        }


@dataclass
class LinkListing:
    """All links, newest first, with aggregates computed from the same snapshot."""

    links: List[LinkRecord] = field(default_factory=list)

    @property
    def total_urls(self) -> int:
        return len(self.links)

    @property
    def total_clicks(self) -> int:
        return sum(link.clicks for link in self.links)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "urls": [link.to_dict() for link in self.links],
            "totalUrls": self.total_urls,
            "totalClicks": self.total_clicks,
        }


class LinkRegistry:
    """Creates short links and answers lookups by code."""

    def __init__(
        self,
        store: LinkStoreBase,
        base_url: str,
        short_code_generator: Optional[ShortCodeGenerator] = None,
        path_prefix: str = "",
        max_collision_retries: int = 10,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize link registry.

        Args:
            store: Link store
            base_url: Base URL that short codes are appended to
            short_code_generator: Optional short code generator
            path_prefix: Optional path segment between base URL and code
            max_collision_retries: Attempts before giving up on a unique code
            logger: Optional logger
        """
        self.store = store
        self.base_url = base_url
        self.generator = short_code_generator or ShortCodeGenerator()
        self.path_prefix = path_prefix
        self.max_collision_retries = max_collision_retries
        self.logger = logger or logging.getLogger(__name__)

    async def shorten(self, candidate_url: Optional[str]) -> ShortenResult:
        """Return the short link for a URL, creating it on first submission.

        Args:
            candidate_url: URL as submitted; a missing scheme means https

        Returns:
            ShortenResult with the stored link and whether it was just created

        Raises:
            ValidationError: If the URL is missing or invalid
            StoreError: If the store fails or no unique code could be found
        """
        if not isinstance(candidate_url, str) or not candidate_url.strip():
            raise ValidationError("Original URL is required")

        original_url = normalize_url(candidate_url)

        is_valid, error = is_valid_url(original_url)
        if not is_valid:
            self.logger.info(f"Rejected URL {candidate_url!r}: {error}")
            raise ValidationError("Please provide a valid URL")

        existing = await self.store.get_by_original_url(original_url)
        if existing:
            self.logger.debug(f"Existing short URL: {existing.short_code} -> {original_url}")
            return ShortenResult(link=existing, created=False)

        link = await self._insert_with_unique_code(original_url)
        self.logger.info(f"Created short URL: {link.short_code} -> {original_url}")
        return ShortenResult(link=link, created=True)

    async def get(self, short_code: str) -> LinkRecord:
        """Look up a link without counting a click.

        Raises:
            ValidationError: If the short code is empty
            NotFoundError: If no link has this code
        """
        if not short_code or not short_code.strip():
            raise ValidationError("Short code is required")

        link = await self.store.get_by_short_code(short_code)
        if link is None:
            raise NotFoundError("URL not found")
        return link

    async def list_all(self) -> LinkListing:
        """List every link, newest first, with totals."""
        return LinkListing(links=await self.store.list_links())

    async def _insert_with_unique_code(self, original_url: str) -> LinkRecord:
        # The existence check only saves a round trip; the store's uniqueness
        # constraint decides, and a lost race is retried with a new code.
        for attempt in range(1, self.max_collision_retries + 1):
            short_code = self.generator.generate_random()

            if await self.store.short_code_exists(short_code):
                self.logger.debug(f"Collision on {short_code} (attempt {attempt})")
                continue

            short_url = build_short_url(
                short_code=short_code,
                base_url=self.base_url,
                path_prefix=self.path_prefix,
            )
            try:
                return await self.store.insert(original_url, short_code, short_url)
            except DuplicateShortCodeError:
                self.logger.warning(f"Short code {short_code} taken concurrently (attempt {attempt})")

        self.logger.error(
            f"Unable to generate unique short code after {self.max_collision_retries} attempts"
        )
        raise StoreError("Unable to generate a unique short code")
