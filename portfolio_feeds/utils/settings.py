from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional

from ..models import BlogSource


def _optional_float(value: Optional[str]) -> Optional[float]:
    return float(value) if value else None


@dataclass(slots=True)
class BlogSettings:
    provider: str = field(default_factory=lambda: os.getenv("BLOG_PROVIDER", "feed"))
    feed_username: str = field(default_factory=lambda: os.getenv("BLOG_FEED_USERNAME", ""))
    notion_token: str = field(default_factory=lambda: os.getenv("NOTION_TOKEN", ""))
    notion_database_id: str = field(default_factory=lambda: os.getenv("NOTION_DATABASE_ID", ""))
    posts_limit: int = field(default_factory=lambda: int(os.getenv("BLOG_POSTS_LIMIT", "3")))
    # Unset means the HTTP client's default: no timeout
    http_timeout: Optional[float] = field(default_factory=lambda: _optional_float(os.getenv("HTTP_TIMEOUT")))

    def to_source(self) -> BlogSource:
        if self.provider == "notion":
            return BlogSource(
                name="notion",
                type="notion",
                token=self.notion_token or None,
                database_id=self.notion_database_id or None,
                limit=self.posts_limit,
            )
        return BlogSource(name="feed", type="feed", username=self.feed_username or None, limit=self.posts_limit)
