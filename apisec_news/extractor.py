"""
Best-effort tag extraction for RSS markup.

This is a pattern scan, not an XML parser: the first plausible closing tag ends
the match, so documents with nested same-named elements can be misread.
"""
from __future__ import annotations

import re
from functools import lru_cache
from typing import Pattern


@lru_cache(maxsize=32)
def _tag_pattern(tag_name: str) -> Pattern[str]:
    tag = re.escape(tag_name)
    return re.compile(
        rf"<{tag}[^>]*>\s*<!\[CDATA\[(.*?)\]\]>\s*</{tag}>"
        rf"|<{tag}[^>]*>(.*?)</{tag}>",
        re.DOTALL,
    )


def extract_tag_text(document: str, tag_name: str) -> str:
    """
    Return the text of the first ``tag_name`` element in ``document``.

    CDATA content is unwrapped when the element holds a CDATA block; otherwise the
    raw inner text is returned. Missing tags yield an empty string.
    """
    if not document:
        return ""
    match = _tag_pattern(tag_name).search(document)
    if not match:
        return ""
    value = match.group(1)
    if value is None:
        value = match.group(2)
    return (value or "").strip()
