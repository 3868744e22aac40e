"""In-process link store.

Used for local development (``DATABASE_URL=memory://``) and tests. Each
operation completes without awaiting, so it runs atomically with respect to
other coroutines on the same event loop. Data lives only as long as the
process.
"""

import itertools
import logging
from dataclasses import replace
from datetime import datetime, timezone
from typing import Dict, List, Optional

from ..errors import DuplicateShortCodeError
from .base import LinkStoreBase
from .models import LinkRecord


class InMemoryLinkStore(LinkStoreBase):
    """Dictionary-backed link store keyed by short code."""

    def __init__(self, db_config: str = "memory://", logger: Optional[logging.Logger] = None):
        super().__init__(db_config)
        self.logger = logger or logging.getLogger(__name__)
        self._links: Dict[str, LinkRecord] = {}
        self._by_original_url: Dict[str, str] = {}
        self._ids = itertools.count(1)

    async def insert(self, original_url: str, short_code: str, short_url: str) -> LinkRecord:
        if short_code in self._links:
            raise DuplicateShortCodeError(short_code)

        now = datetime.now(timezone.utc)
        record = LinkRecord(
            id=next(self._ids),
            original_url=original_url,
            short_code=short_code,
            short_url=short_url,
            clicks=0,
            created_at=now,
            updated_at=now,
        )
        self._links[short_code] = record
        self._by_original_url.setdefault(original_url, short_code)

        self.logger.debug(f"Stored link {short_code} -> {original_url}")
        return replace(record)

    async def get_by_short_code(self, short_code: str) -> Optional[LinkRecord]:
        record = self._links.get(short_code)
        return replace(record) if record else None

    async def get_by_original_url(self, original_url: str) -> Optional[LinkRecord]:
        short_code = self._by_original_url.get(original_url)
        if short_code is None:
            return None
        return replace(self._links[short_code])

    async def short_code_exists(self, short_code: str) -> bool:
        return short_code in self._links

    async def increment_clicks(self, short_code: str) -> bool:
        record = self._links.get(short_code)
        if record is None:
            return False
        record.clicks += 1
        record.updated_at = datetime.now(timezone.utc)
        return True

    async def list_links(self) -> List[LinkRecord]:
        ordered = sorted(
            self._links.values(),
            key=lambda r: (r.created_at, r.id),
            reverse=True,
        )
        return [replace(r) for r in ordered]

    async def health_check(self) -> bool:
        return True
