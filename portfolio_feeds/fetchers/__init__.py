"""Blog-post fetchers for syndication feeds and Notion databases."""

from .base import FetchResult, fail_soft
from .feed import fetch_feed_posts
from .notion import fetch_notion_posts

__all__ = ["FetchResult", "fail_soft", "fetch_feed_posts", "fetch_notion_posts"]
