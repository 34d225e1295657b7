from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Tuple


def format_timestamp(dt: datetime) -> str:
    """Render ``dt`` as ISO-8601 UTC with millisecond precision, e.g. ``2026-10-18T06:00:00.000Z``."""
    return dt.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_timestamp(value: str) -> datetime:
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value).astimezone(timezone.utc)


@dataclass(frozen=True)
class FeedSource:
    url: str
    label: str


@dataclass(frozen=True)
class NewsItem:
    """
    A single entry extracted from a feed.

    ``summary`` is already sanitized (no markup, no entities, at most 300 chars).
    ``published_at`` is a timezone-aware UTC datetime, or None when the feed date
    was missing or could not be parsed.
    """
    title: str
    link: str
    published_at: Optional[datetime]
    summary: str
    source: str

    def to_dict(self) -> Dict[str, Any]:
        # Wire names follow the published news.json contract.
        return {
            "title": self.title,
            "link": self.link,
            "pubDate": format_timestamp(self.published_at) if self.published_at else None,
            "description": self.summary,
            "source": self.source,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "NewsItem":
        pub = data.get("pubDate")
        return cls(
            title=data.get("title") or "",
            link=data.get("link") or "",
            published_at=parse_timestamp(pub) if pub else None,
            summary=data.get("description") or "",
            source=data.get("source") or "",
        )


@dataclass(frozen=True)
class CurationResult:
    """Ranked output of one curation run; superseded wholesale by the next run."""
    generated_at: datetime
    items: Tuple[NewsItem, ...] = field(default_factory=tuple)

    @property
    def count(self) -> int:
        return len(self.items)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "lastUpdated": format_timestamp(self.generated_at),
            "itemCount": self.count,
            "items": [it.to_dict() for it in self.items],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CurationResult":
        return cls(
            generated_at=parse_timestamp(data["lastUpdated"]),
            items=tuple(NewsItem.from_dict(d) for d in data.get("items") or []),
        )
