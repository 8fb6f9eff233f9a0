"""Data models for textpub."""

from dataclasses import dataclass
from datetime import datetime, timezone


@dataclass(frozen=True)
class PageRecord:
    """A published page as kept by the store."""

    id: str
    text: str
    created_at: datetime
    url: str

    def to_dict(self) -> dict:
        """Convert to the stored JSON shape."""
        return {
            "id": self.id,
            "text": self.text,
            "createdAt": self.created_at.isoformat(),
            "url": self.url,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "PageRecord":
        """Create from the stored JSON shape."""
        created_at = data.get("createdAt", data.get("created_at"))
        if not isinstance(created_at, datetime):
            # JavaScript toISOString() ends in 'Z', which fromisoformat rejects before 3.11
            created_at = datetime.fromisoformat(str(created_at).replace("Z", "+00:00"))
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)
        return cls(
            id=data["id"],
            text=data["text"],
            created_at=created_at,
            url=data.get("url", ""),
        )
