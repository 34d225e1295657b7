"""Command-line entry point: one curation run, exit code 0 on success and 1 on fatal failure."""
from __future__ import annotations

import argparse
import logging
import os
import sys
from datetime import datetime, timezone
from typing import List, Optional

from .config import load_config
from .core import NewsCurator
from .exceptions import ConfigurationError, OutputWriteError
from .models import format_timestamp

logger = logging.getLogger("apisec_news")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="apisec-news",
        description="Fetch security RSS feeds and write the latest API security news to JSON.",
    )
    parser.add_argument("--output", help="Path of the JSON artifact (default: data/news.json)")
    parser.add_argument("--timeout", type=float, help="Per-feed timeout in seconds (default: 15)")
    parser.add_argument("--max-items", type=int, help="Maximum number of items to keep (default: 20)")
    parser.add_argument(
        "--log-level",
        default=os.getenv("APISEC_NEWS_LOG_LEVEL", "INFO"),
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s: %(message)s", stream=sys.stderr)

    logger.info("=== API Security News Fetcher ===")
    logger.info("Time: %s", format_timestamp(datetime.now(timezone.utc)))

    try:
        config = load_config(
            output_path=args.output,
            timeout_sec=args.timeout,
            max_items=args.max_items,
        )
        result = NewsCurator(config).run()
    except (ConfigurationError, OutputWriteError) as e:
        logger.error("Fatal error: %s", e)
        return 1
    except Exception:
        logger.exception("Fatal error")
        return 1

    logger.info("Done. %d items in %s", result.count, config.output_path)
    return 0
