from __future__ import annotations

import asyncio
import logging
from typing import Iterable, List, Optional

import httpx

from .config import DEFAULT_TIMEOUT_SEC, DEFAULT_USER_AGENT
from .exceptions import FeedFetchError
from .models import FeedSource, NewsItem
from .parser import parse_items

logger = logging.getLogger(__name__)


async def fetch_feed_document(client: httpx.AsyncClient, source: FeedSource) -> str:
    """
    Fetch a single feed URL and return its body.

    Raises FeedFetchError on transport errors or a non-success status.
    """
    try:
        response = await client.get(source.url)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise FeedFetchError(f"{type(e).__name__}: {e}") from e
    if not response.is_success:
        raise FeedFetchError(f"HTTP {response.status_code}", status_code=response.status_code)
    return response.text


async def fetch_feed(
    client: httpx.AsyncClient,
    source: FeedSource,
    timeout_sec: float = DEFAULT_TIMEOUT_SEC,
) -> List[NewsItem]:
    """
    Fetch and parse one feed. Never raises: any failure is logged and yields [].

    The whole attempt, body included, is bounded by ``timeout_sec``; hitting it
    cancels only this fetch.
    """
    try:
        document = await asyncio.wait_for(fetch_feed_document(client, source), timeout=timeout_sec)
    except asyncio.TimeoutError:
        logger.error("  [ERR] %s: timed out after %ss", source.label, timeout_sec)
        return []
    except FeedFetchError as e:
        if e.status_code is not None:
            logger.warning("  [WARN] %s: %s", source.label, e)
        else:
            logger.error("  [ERR] %s: %s", source.label, e)
        return []
    except Exception as e:
        logger.error("  [ERR] %s: %s: %s", source.label, type(e).__name__, e)
        return []

    items = parse_items(document, source.label)
    logger.info("  [OK] %s: %d items fetched", source.label, len(items))
    return items


async def fetch_many(
    sources: Iterable[FeedSource],
    *,
    timeout_sec: float = DEFAULT_TIMEOUT_SEC,
    user_agent: str = DEFAULT_USER_AGENT,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> List[List[NewsItem]]:
    """
    Fetch all feeds concurrently and return one item list per source, in source order.

    Failures on individual feeds are isolated: a dead feed contributes an empty list
    and never cancels its siblings.
    """
    sources = list(sources)
    if not sources:
        return []
    async with httpx.AsyncClient(
        timeout=timeout_sec,
        headers={"User-Agent": user_agent},
        follow_redirects=True,
        transport=transport,
    ) as client:
        results = await asyncio.gather(
            *(fetch_feed(client, src, timeout_sec) for src in sources)
        )
    return list(results)
