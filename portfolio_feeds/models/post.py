from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, Optional, Tuple

# Shown when an entry carries no title at all ("no title").
UNTITLED = "제목 없음"
PLACEHOLDER_LINK = "#"


@dataclass(frozen=True, slots=True)
class PostSummary:
    title: str
    description: str
    publish_date: str
    link: str = PLACEHOLDER_LINK

    # Feed-only fields
    categories: Tuple[str, ...] = ()
    author: Optional[str] = None

    def to_dict(self) -> Dict[str, object]:
        data = asdict(self)
        data["categories"] = list(self.categories)
        return data
