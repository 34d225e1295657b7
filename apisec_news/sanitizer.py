from __future__ import annotations

import re

MAX_SUMMARY_LENGTH = 300

# Tag-shaped sequences only; bare comparison brackets fall through to _ANGLE_RE.
_TAG_RE = re.compile(r"<!--.*?-->|<[!/?]?[A-Za-z][^<>]*>", re.DOTALL)
_ANGLE_RE = re.compile(r"[<>]")
_WS_RE = re.compile(r"\s+")

# Order matters: "&amp;" is decoded first so double-escaped text resolves on the next pass.
_ENTITIES = (
    ("&nbsp;", " "),
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#039;", "'"),
    ("&#39;", "'"),
    ("&apos;", "'"),
)


def _decode_entities(text: str) -> str:
    for entity, char in _ENTITIES:
        text = text.replace(entity, char)
    return text


def sanitize(raw_text: str, max_length: int = MAX_SUMMARY_LENGTH) -> str:
    """
    Turn a feed description into plain text.

    Tags are stripped and the fixed entity table is decoded until nothing changes,
    so escaped markup inside descriptions is removed as well. Any angle bracket left
    over (e.g. a literal "a < b") is dropped but the surrounding text is kept.
    Whitespace is collapsed, and the text is hard-cut to ``max_length`` characters.
    """
    if not raw_text:
        return ""
    text = raw_text
    while True:
        cleaned = _decode_entities(_TAG_RE.sub("", text))
        if cleaned == text:
            # Only drop stray brackets once no tag or entity is left to resolve.
            cleaned = _ANGLE_RE.sub("", text)
            if cleaned == text:
                break
        text = cleaned
    text = _WS_RE.sub(" ", text).strip()
    if max_length > 0:
        text = text[:max_length].rstrip()
    return text
