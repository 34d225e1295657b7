from __future__ import annotations

import re
from typing import List

from .extractor import extract_tag_text
from .models import NewsItem
from .normalizer import to_news_item

# Non-greedy: an <item> nested inside another <item> ends the outer match early.
_ITEM_RE = re.compile(r"<item[\s>](.*?)</item>", re.IGNORECASE | re.DOTALL)

ITEM_FIELDS = ("title", "link", "pubDate", "description")


def parse_items(document: str, source_label: str) -> List[NewsItem]:
    """
    Extract every ``<item>`` block of an RSS document as a NewsItem, in document order.

    Items with missing fields are kept; filtering happens later in the pipeline.
    """
    if not document:
        return []
    items: List[NewsItem] = []
    for match in _ITEM_RE.finditer(document):
        block = match.group(1)
        fields = {name: extract_tag_text(block, name) for name in ITEM_FIELDS}
        items.append(to_news_item(fields, source_label))
    return items
