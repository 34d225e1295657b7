from __future__ import annotations

from datetime import datetime, timedelta, timezone
from email.utils import format_datetime
from typing import Optional

NOW = datetime(2026, 10, 18, 6, 0, tzinfo=timezone.utc)


def rss_item(
    title: str,
    *,
    link: str = "",
    age: Optional[timedelta] = None,
    description: str = "",
) -> str:
    pub = f"<pubDate>{format_datetime(NOW - age)}</pubDate>" if age is not None else ""
    return (
        "<item>"
        f"<title>{title}</title>"
        f"<link>{link}</link>"
        f"{pub}"
        f"<description><![CDATA[{description}]]></description>"
        "</item>"
    )


def rss_document(*items: str) -> str:
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        '<rss version="2.0"><channel><title>Feed</title>'
        + "".join(items)
        + "</channel></rss>"
    )
