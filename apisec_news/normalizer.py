from __future__ import annotations

import calendar
import time
from datetime import datetime, timezone
from typing import Mapping, Optional

from feedparser.datetimes import _parse_date

from .models import NewsItem
from .sanitizer import sanitize


def parse_published_at(text: str) -> Optional[datetime]:
    """
    Convert a feed date string (RFC 822, ISO 8601, W3CDTF, ...) to an aware UTC datetime.

    Returns None when the text is empty or feedparser cannot make sense of it.
    """
    text = (text or "").strip()
    if not text:
        return None
    parsed = _parse_date(text)
    if not isinstance(parsed, time.struct_time):
        return None
    try:
        return datetime.fromtimestamp(calendar.timegm(parsed), tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None


def to_news_item(fields: Mapping[str, str], source: str) -> NewsItem:
    """
    Build a NewsItem from raw tag text.

    Expects the keys ``title``, ``link``, ``pubDate`` and ``description``; missing
    keys become empty strings (or an absent date) rather than errors.
    """
    return NewsItem(
        title=fields.get("title") or "",
        link=fields.get("link") or "",
        published_at=parse_published_at(fields.get("pubDate") or ""),
        summary=sanitize(fields.get("description") or ""),
        source=source,
    )
