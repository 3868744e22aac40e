"""Abstract base class for link store implementations."""

from abc import ABC, abstractmethod
from typing import List, Optional

from .models import LinkRecord


class LinkStoreBase(ABC):
    """Abstract base class for link store operations.

    Implementations must reject a second record with the same short code by
    raising ``DuplicateShortCodeError`` from :meth:`insert`, and must apply
    :meth:`increment_clicks` as a single atomic update. Any other failure is
    raised as ``StoreError``.
    """

    def __init__(self, db_config: str):
        """Initialize store.

        Args:
            db_config: Store connection string
        """
        self.db_config = db_config

    @abstractmethod
    async def insert(
        self,
        original_url: str,
        short_code: str,
        short_url: str,
    ) -> LinkRecord:
        """Persist a new link with zero clicks.

        Args:
            original_url: Normalized original URL
            short_code: The short code to use
            short_url: Fully qualified short URL

        Returns:
            The stored record, with timestamps set by the store

        Raises:
            DuplicateShortCodeError: If the short code is already taken
            StoreError: On any other failure
        """
        pass

    @abstractmethod
    async def get_by_short_code(self, short_code: str) -> Optional[LinkRecord]:
        """Find a link by exact short code."""
        pass

    @abstractmethod
    async def get_by_original_url(self, original_url: str) -> Optional[LinkRecord]:
        """Find a link by exact normalized original URL."""
        pass

    @abstractmethod
    async def short_code_exists(self, short_code: str) -> bool:
        """Check if a short code is already taken."""
        pass

    @abstractmethod
    async def increment_clicks(self, short_code: str) -> bool:
        """Atomically add one to the click counter of a link.

        Args:
            short_code: The short code to update

        Returns:
            True if a record was updated, False if the code is unknown
        """
        pass

    @abstractmethod
    async def list_links(self) -> List[LinkRecord]:
        """List every link, newest first."""
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Check if the store is reachable."""
        pass

    async def initialize(self) -> None:
        """Prepare the store (create schema, open pools). Optional."""
        pass

    async def close(self) -> None:
        """Release store resources."""
        pass
