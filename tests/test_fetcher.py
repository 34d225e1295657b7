from __future__ import annotations

import asyncio
import logging
import ssl
from datetime import timedelta

import httpx

from apisec_news.fetcher import fetch_many
from apisec_news.models import FeedSource

from tests.helpers import rss_document, rss_item

GOOD = FeedSource(url="https://good.example/rss", label="Good")
BROKEN = FeedSource(url="https://broken.example/rss", label="Broken")
SLOW = FeedSource(url="https://slow.example/rss", label="Slow")
GARBAGE = FeedSource(url="https://garbage.example/rss", label="Garbage")
DOWN = FeedSource(url="https://down.example/rss", label="Down")

GOOD_DOC = rss_document(
    rss_item("API one", link="https://good.example/1", age=timedelta(hours=1)),
    rss_item("API two", link="https://good.example/2", age=timedelta(hours=2)),
)


async def _never_answers(request: httpx.Request) -> httpx.Response:
    await asyncio.sleep(5)
    return httpx.Response(200, text=GOOD_DOC)


def test_failures_are_isolated_per_feed(mock_transport, caplog) -> None:
    transport = mock_transport(
        {
            GOOD.url: GOOD_DOC,
            BROKEN.url: 500,
            SLOW.url: _never_answers,
            GARBAGE.url: "<html><body>Maintenance</body>",
            DOWN.url: httpx.ConnectError("connection refused"),
        }
    )

    with caplog.at_level(logging.INFO):
        results = asyncio.run(
            fetch_many([GOOD, BROKEN, SLOW, GARBAGE, DOWN], timeout_sec=0.2, transport=transport)
        )

    assert [len(r) for r in results] == [2, 0, 0, 0, 0]
    assert [it.title for it in results[0]] == ["API one", "API two"]
    assert "[OK] Good: 2 items fetched" in caplog.text
    assert "[WARN] Broken: HTTP 500" in caplog.text
    assert "[ERR] Slow: timed out" in caplog.text
    assert "[ERR] Down" in caplog.text


def test_good_feed_count_is_unaffected_by_failing_siblings(mock_transport) -> None:
    alone = asyncio.run(fetch_many([GOOD], transport=mock_transport({GOOD.url: GOOD_DOC})))
    mixed = asyncio.run(
        fetch_many(
            [BROKEN, GOOD],
            transport=mock_transport({GOOD.url: GOOD_DOC, BROKEN.url: 503}),
        )
    )

    assert len(alone[0]) == len(mixed[1]) == 2
    assert mixed[0] == []


def test_sends_user_agent_header() -> None:
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["ua"] = request.headers.get("User-Agent")
        return httpx.Response(200, text=GOOD_DOC)

    asyncio.run(
        fetch_many([GOOD], user_agent="API-Security-Hub-Bot/1.0", transport=httpx.MockTransport(handler))
    )

    assert seen["ua"] == "API-Security-Hub-Bot/1.0"


def test_no_sources() -> None:
    assert asyncio.run(fetch_many([])) == []


def test_unexpected_exception_is_isolated(mock_transport, caplog) -> None:
    transport = mock_transport({GOOD.url: GOOD_DOC, BROKEN.url: ssl.SSLError("bad record")})

    with caplog.at_level(logging.INFO):
        results = asyncio.run(fetch_many([GOOD, BROKEN], transport=transport))

    assert [len(r) for r in results] == [2, 0]
    assert "[ERR] Broken: SSLError" in caplog.text
