from __future__ import annotations

from typing import Iterable, List, Set, Tuple, Union

from .models import NewsItem


def _story_key(item: NewsItem) -> Union[str, Tuple[str, str]]:
    return item.link or (item.source, item.title)


def deduplicate(items: Iterable[NewsItem]) -> List[NewsItem]:
    """Keep the first item per link (or per source+title when the link is empty)."""
    seen: Set[Union[str, Tuple[str, str]]] = set()
    out: List[NewsItem] = []
    for it in items:
        key = _story_key(it)
        if key not in seen:
            seen.add(key)
            out.append(it)
    return out
