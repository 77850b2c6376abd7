from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Tuple

from ..models import PostSummary
from ..utils.logging import get_logger

logger = get_logger("pf.fetchers")


@dataclass(frozen=True, slots=True)
class FetchResult:
    """Outcome of a fetch pipeline: posts on success, a reason on failure."""

    posts: Tuple[PostSummary, ...] = ()
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, posts: Iterable[PostSummary]) -> "FetchResult":
        return cls(posts=tuple(posts))

    @classmethod
    def failure(cls, reason: str) -> "FetchResult":
        return cls(error=reason)


def fail_soft(label: str) -> Callable[[Callable[..., FetchResult]], Callable[..., List[PostSummary]]]:
    """Turn a ``FetchResult`` pipeline into a function that never raises.

    Failures, whether returned or raised, are logged and become ``[]``.
    """

    def decorator(fn: Callable[..., FetchResult]) -> Callable[..., List[PostSummary]]:
        @functools.wraps(fn)
        def wrapper(*args, **kwargs) -> List[PostSummary]:
            try:
                result = fn(*args, **kwargs)
            except Exception as exc:  # noqa: BLE001 - posts must never break the page
                logger.exception("%s failed: %s", label, exc)
                return []
            if not result.ok:
                logger.error("%s failed: %s", label, result.error)
                return []
            return list(result.posts)

        return wrapper

    return decorator
