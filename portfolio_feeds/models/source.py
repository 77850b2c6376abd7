from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

SourceType = Literal["feed", "notion"]


@dataclass(slots=True)
class BlogSource:
    """Configuration for one blog-post provider (syndication feed or Notion)."""

    name: str
    type: SourceType
    username: Optional[str] = None
    token: Optional[str] = None
    database_id: Optional[str] = None
    limit: int = 3
