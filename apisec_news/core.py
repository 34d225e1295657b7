from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone
from typing import Callable, Iterable, List, Optional

import httpx

from .classifier import is_relevant
from .config import CurationConfig
from .dedup import deduplicate
from .fetcher import fetch_many
from .models import CurationResult, NewsItem
from .storage import write_result

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class NewsCurator:
    """
    High-level API: fetch the configured feeds and produce the ranked news artifact.

    Pipeline: fetch (concurrent) → parse → classify (keyword relevance) → deduplicate
    → recency window → sort (newest first) → cap → write JSON
    """

    def __init__(
        self,
        config: Optional[CurationConfig] = None,
        *,
        clock: Optional[Callable[[], datetime]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.config = config or CurationConfig()
        self._clock = clock or _utcnow
        self._transport = transport

    async def collect(self) -> List[NewsItem]:
        """Fetch every feed concurrently and concatenate the results in feed order."""
        logger.info("Fetching RSS feeds...")
        results = await fetch_many(
            self.config.feeds,
            timeout_sec=self.config.timeout_sec,
            user_agent=self.config.user_agent,
            transport=self._transport,
        )
        items = [it for feed_items in results for it in feed_items]
        logger.info("Total items fetched: %d", len(items))
        return items

    def curate(self, candidates: Iterable[NewsItem], now: Optional[datetime] = None) -> CurationResult:
        now = now or self._clock()
        # news.json stores milliseconds; keep the in-memory result identical to it.
        now = now.replace(microsecond=now.microsecond // 1000 * 1000)
        cfg = self.config

        relevant = [it for it in candidates if is_relevant(it, cfg.keywords)]
        logger.info("API-related items: %d", len(relevant))

        relevant = deduplicate(relevant)

        # Items without a parseable date cannot be placed in the window.
        recent = [
            it for it in relevant
            if it.published_at is not None and now - it.published_at <= cfg.window
        ]
        logger.info("Within last %d days: %d", cfg.window.days, len(recent))

        recent.sort(key=lambda x: x.published_at, reverse=True)
        recent = recent[: cfg.max_items]

        return CurationResult(generated_at=now, items=tuple(recent))

    async def run_async(self) -> CurationResult:
        candidates = await self.collect()
        result = self.curate(candidates)
        write_result(result, self.config.output_path)
        return result

    def run(self) -> CurationResult:
        """Run one full curation pass and overwrite the output artifact."""
        return asyncio.run(self.run_async())
