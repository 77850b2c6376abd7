from __future__ import annotations

from typing import Any, Dict, List, Optional

import requests

from ..models import PLACEHOLDER_LINK, UNTITLED, PostSummary
from ..processors.nodes import Node, as_list, as_text, as_text_list, child, first_non_empty, pick_text
from ..processors.normalize import now_iso, strip_tags
from ..processors.xml_tree import parse_xml
from ..utils.logging import get_logger
from .base import FetchResult, fail_soft

logger = get_logger("pf.fetchers.feed")

FEED_BASE_URL = "https://api.velog.io/rss/"

# Where the entry list lives, tried in order: RSS 2.0, Atom, bare channel.
_ITEM_PATHS = (
    ("rss", "channel", "item"),
    ("feed", "entry"),
    ("channel", "item"),
)


def build_feed_url(username: str, base_url: str = FEED_BASE_URL) -> str:
    return f"{base_url}@{username}"


def find_items(document: Dict[str, Node]) -> List[Any]:
    for path in _ITEM_PATHS:
        items = as_list(child(document, *path))
        if items:
            return items
    return []


def item_to_post(item: Node, username: str) -> PostSummary:
    """Build a summary from one feed entry, defaulting every missing field."""
    return PostSummary(
        title=pick_text(item, "title", default=UNTITLED),
        description=strip_tags(pick_text(item, "description", "summary", "content")),
        publish_date=pick_text(item, "pubDate", "published", "updated") or now_iso(),
        link=_item_link(item),
        categories=tuple(as_text_list(child(item, "category"))),
        author=first_non_empty(
            lambda: as_text(child(item, "dc:creator")),
            lambda: as_text(child(item, "author", "name")),
            default=username,
        ),
    )


def _item_link(item: Node) -> str:
    # Atom entries may list several links; prefer rel="alternate" (or no rel).
    links = as_list(child(item, "link"))
    for link in links:
        rel = as_text(child(link, "$", "rel"))
        if rel in ("", "alternate") and as_text(link):
            return as_text(link)
    return as_text(links, default=PLACEHOLDER_LINK)


@fail_soft("Feed fetch")
def fetch_feed_posts(
    username: str,
    limit: int = 3,
    *,
    timeout: Optional[float] = None,
    base_url: str = FEED_BASE_URL,
) -> FetchResult:
    """Fetch the latest posts of ``username`` from their syndication feed.

    Returns at most ``limit`` posts in feed order. Never raises: transport,
    status and parse failures are logged and produce an empty list.
    """
    url = build_feed_url(username, base_url)
    logger.debug("Fetching feed from %s", url)
    try:
        resp = requests.get(url, timeout=timeout)
    except requests.RequestException as exc:
        return FetchResult.failure(f"request error for {url}: {exc}")
    if not 200 <= resp.status_code < 300:
        return FetchResult.failure(f"HTTP {resp.status_code} from {url}")

    document = parse_xml(resp.text)
    items = find_items(document)
    if not items:
        logger.warning("No items found in feed %s", url)
        return FetchResult.success([])

    posts = [item_to_post(item, username) for item in items[: max(limit, 0)]]
    logger.info("Fetched %d feed post(s) for %s", len(posts), username)
    return FetchResult.success(posts)
