"""Command-line entrypoint for the portfolio blog-post feeds.

Loads the configured sources (a YAML file, or a single source described by
environment variables), fetches their latest posts and prints them as JSON,
keyed by source name, in the shape the landing page renders.
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from .models import BlogSource
from .orchestrator import PostsOrchestrator
from .utils.config_loader import ConfigError, load_sources_config
from .utils.logging import configure_logging, get_logger
from .utils.settings import BlogSettings


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Fetch the latest blog posts for the portfolio page")
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a sources configuration file (YAML); defaults to environment settings",
    )
    parser.add_argument(
        "--provider",
        choices=["feed", "notion"],
        default=None,
        help="Provider to use when no config file is given (overrides BLOG_PROVIDER)",
    )
    parser.add_argument(
        "--username",
        default=None,
        help="Feed username when no config file is given (overrides BLOG_FEED_USERNAME)",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Maximum number of posts per source",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging verbosity",
    )
    return parser.parse_args(argv)


def _resolve_sources(args: argparse.Namespace, settings: BlogSettings) -> List[BlogSource]:
    if args.config:
        sources = load_sources_config(Path(args.config))
    else:
        if args.provider:
            settings.provider = args.provider
        if args.username:
            settings.feed_username = args.username
        sources = [settings.to_source()]

    if args.limit is not None:
        if args.limit <= 0:
            raise ConfigError("--limit must be a positive integer")
        for source in sources:
            source.limit = args.limit
    return sources


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv(override=False)
    args = parse_args(argv)
    configure_logging(level=args.log_level)
    logger = get_logger("pf.cli")

    try:
        settings = BlogSettings()
        sources = _resolve_sources(args, settings)
    except (ConfigError, ValueError) as exc:
        logger.error("Invalid configuration: %s", exc)
        return 1

    logger.info("Loaded %d source(s)", len(sources))
    results = PostsOrchestrator(timeout=settings.http_timeout).fetch_all(sources)
    payload = {name: [post.to_dict() for post in posts] for name, posts in results.items()}
    print(json.dumps(payload, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":  # pragma: no cover - script entrypoint
    raise SystemExit(main())
