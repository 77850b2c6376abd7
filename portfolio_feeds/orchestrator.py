from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Dict, Iterable, List, Optional

from .fetchers import fetch_feed_posts, fetch_notion_posts
from .models import BlogSource, PostSummary
from .utils.logging import get_logger

logger = get_logger("pf.orchestrator")


class PostsOrchestrator:
    def __init__(self, *, timeout: Optional[float] = None) -> None:
        self.timeout = timeout

    def fetch_source(self, source: BlogSource) -> List[PostSummary]:
        if source.type == "feed":
            if not source.username:
                logger.warning("Feed source %s has no username; skipping", source.name)
                return []
            return fetch_feed_posts(source.username, source.limit, timeout=self.timeout)
        if source.type == "notion":
            return fetch_notion_posts(source.token, source.database_id, source.limit, timeout=self.timeout)
        logger.warning("Unknown source type: %s", source.type)
        return []

    def fetch_all(self, sources: Iterable[BlogSource]) -> Dict[str, List[PostSummary]]:
        """Fetch every source concurrently.

        The result maps source name to its posts, in configuration order.
        """
        src_list = list(sources)
        if not src_list:
            return {}

        collected: Dict[str, List[PostSummary]] = {}
        max_workers = min(8, len(src_list))
        logger.debug("Starting concurrent fetch for %d sources (workers=%d)", len(src_list), max_workers)
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            future_map = {executor.submit(self.fetch_source, s): s for s in src_list}
            for fut in as_completed(future_map):
                s = future_map[fut]
                try:
                    collected[s.name] = fut.result()
                except Exception as exc:  # noqa: BLE001 - one source must not sink the others
                    logger.exception("Fetch failed for %s: %s", s.name, exc)
                    collected[s.name] = []

        results = {s.name: collected[s.name] for s in src_list}
        logger.info(
            "Fetch complete: posts=%d from sources=%d",
            sum(len(posts) for posts in results.values()),
            len(src_list),
        )
        return results
