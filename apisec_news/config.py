"""Static feed/keyword tables and the run configuration passed to the curator."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from datetime import timedelta
from pathlib import Path
from typing import Optional, Sequence, Tuple

from dotenv import find_dotenv, load_dotenv

from .exceptions import ConfigurationError
from .models import FeedSource

DEFAULT_FEEDS: Tuple[FeedSource, ...] = (
    FeedSource(url="https://feeds.feedburner.com/TheHackersNews", label="The Hacker News"),
    FeedSource(url="https://www.bleepingcomputer.com/feed/", label="BleepingComputer"),
    FeedSource(url="https://www.securityweek.com/feed/", label="SecurityWeek"),
    FeedSource(url="https://portswigger.net/daily-swig/rss", label="PortSwigger Daily Swig"),
    FeedSource(url="https://blog.cloudflare.com/tag/security/rss", label="Cloudflare Blog"),
)

DEFAULT_KEYWORDS: Tuple[str, ...] = (
    "api",
    "oauth",
    "jwt",
    "token",
    "authentication bypass",
    "authorization",
    "ssrf",
    "injection",
    "endpoint",
    "rest api",
    "graphql",
    "webhook",
    "api key",
    "rate limit",
    "cors",
    "openapi",
    "swagger",
    "microservice",
    "api gateway",
    "broken access",
    "bola",
    "idor",
    "credential",
    "owasp",
    "cve-",
    "vulnerability",
    "exploit",
    "breach",
    "data leak",
    "data exposure",
    "security flaw",
)

DEFAULT_OUTPUT_PATH = Path("data") / "news.json"
DEFAULT_TIMEOUT_SEC = 15.0
DEFAULT_WINDOW = timedelta(days=7)
DEFAULT_MAX_ITEMS = 20
DEFAULT_USER_AGENT = "API-Security-Hub-Bot/1.0"


@dataclass(frozen=True)
class CurationConfig:
    feeds: Tuple[FeedSource, ...] = DEFAULT_FEEDS
    keywords: Tuple[str, ...] = DEFAULT_KEYWORDS
    timeout_sec: float = DEFAULT_TIMEOUT_SEC
    window: timedelta = DEFAULT_WINDOW
    max_items: int = DEFAULT_MAX_ITEMS
    output_path: Path = field(default=DEFAULT_OUTPUT_PATH)
    user_agent: str = DEFAULT_USER_AGENT

    def __post_init__(self) -> None:
        if self.timeout_sec <= 0:
            raise ConfigurationError(f"timeout_sec must be positive, got {self.timeout_sec}")
        if self.max_items < 0:
            raise ConfigurationError(f"max_items must not be negative, got {self.max_items}")
        if self.window <= timedelta(0):
            raise ConfigurationError(f"window must be positive, got {self.window}")


def _env_number(name: str, cast):
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        return cast(raw.strip())
    except ValueError as e:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from e


def load_config(
    *,
    feeds: Optional[Sequence[FeedSource]] = None,
    keywords: Optional[Sequence[str]] = None,
    output_path: Optional[Path | str] = None,
    timeout_sec: Optional[float] = None,
    max_items: Optional[int] = None,
    window_days: Optional[float] = None,
) -> CurationConfig:
    """
    Build the run configuration.

    Precedence: explicit arguments, then environment variables (a ``.env`` file in
    the working directory is loaded first), then the static defaults.

    Environment variables: APISEC_NEWS_OUTPUT, APISEC_NEWS_TIMEOUT,
    APISEC_NEWS_MAX_ITEMS, APISEC_NEWS_WINDOW_DAYS.
    """
    load_dotenv(find_dotenv(usecwd=True))

    if output_path is None:
        output_path = os.getenv("APISEC_NEWS_OUTPUT") or DEFAULT_OUTPUT_PATH
    if timeout_sec is None:
        env_timeout = _env_number("APISEC_NEWS_TIMEOUT", float)
        timeout_sec = DEFAULT_TIMEOUT_SEC if env_timeout is None else env_timeout
    if max_items is None:
        env_max = _env_number("APISEC_NEWS_MAX_ITEMS", int)
        max_items = DEFAULT_MAX_ITEMS if env_max is None else env_max
    if window_days is None:
        window_days = _env_number("APISEC_NEWS_WINDOW_DAYS", float)
    window = timedelta(days=window_days) if window_days is not None else DEFAULT_WINDOW

    return CurationConfig(
        feeds=tuple(feeds) if feeds is not None else DEFAULT_FEEDS,
        keywords=tuple(keywords) if keywords is not None else DEFAULT_KEYWORDS,
        timeout_sec=float(timeout_sec),
        window=window,
        max_items=int(max_items),
        output_path=Path(output_path),
    )
