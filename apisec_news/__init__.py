"""
apisec_news

Curates API-security news from a handful of security RSS feeds into a single JSON file
for a static front-end.

Core ideas:
- Input: a static list of feeds and relevance keywords
- Process: fetch (concurrently) → parse → keyword filter → deduplicate → last 7 days → newest first → top 20
- Output: data/news.json

Example
-------
from apisec_news import NewsCurator, load_config

result = NewsCurator(load_config(output_path="data/news.json")).run()
for item in result.items:
    print(item.published_at, item.source, item.title)
"""
from .models import CurationResult, FeedSource, NewsItem
from .config import CurationConfig, load_config
from .core import NewsCurator

__all__ = [
    "CurationConfig",
    "CurationResult",
    "FeedSource",
    "NewsCurator",
    "NewsItem",
    "load_config",
]
