from __future__ import annotations

from typing import Iterable

from .models import NewsItem


def _contains_any(text: str, keywords: Iterable[str]) -> bool:
    t = text.lower()
    return any(k.lower() in t for k in keywords)


def is_relevant(item: NewsItem, keywords: Iterable[str]) -> bool:
    """
    True when the item's title or summary mentions any keyword (case-insensitive substring).

    An empty keyword set never matches.
    """
    text = f"{item.title} {item.summary}"
    return _contains_any(text, [k for k in keywords if k])
