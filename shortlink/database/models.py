"""Data models for the short link store."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional


@dataclass
class LinkRecord:
    """Represents a short link in the store."""

    original_url: str
    short_code: str
    short_url: str
    clicks: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    id: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the camelCase wire representation."""
        return {
            "originalUrl": self.original_url,
            "shortCode": self.short_code,
            "shortUrl": self.short_url,
            "clicks": self.clicks,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }

    @classmethod
    def from_row(cls, row: Any) -> "LinkRecord":
        """Create from a database row (asyncpg Record or mapping)."""
        return cls(
            id=row["id"],
            original_url=row["original_url"],
            short_code=row["short_code"],
            short_url=row["short_url"],
            clicks=row["clicks"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )
