from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

import requests

from ..models import PLACEHOLDER_LINK, UNTITLED, PostSummary
from ..processors.nodes import first_non_empty
from ..processors.normalize import now_iso
from ..processors.notion_props import date_start, plain_text_of_rich_text, plain_text_of_title, strip_dashes
from ..utils.logging import get_logger
from .base import FetchResult, fail_soft

logger = get_logger("pf.fetchers.notion")

NOTION_API_URL = "https://api.notion.com/v1"
NOTION_VERSION = "2022-06-28"


def build_query_url(database_id: str, api_url: str = NOTION_API_URL) -> str:
    return f"{api_url}/databases/{strip_dashes(database_id)}/query"


def build_query_body(limit: int) -> Dict[str, Any]:
    return {
        "page_size": limit,
        "sorts": [{"timestamp": "created_time", "direction": "descending"}],
    }


def page_to_post(page: Any) -> PostSummary:
    """Build a summary from one database page, defaulting every missing field."""
    if not isinstance(page, Mapping):
        page = {}
    props = page.get("properties")
    if not isinstance(props, Mapping):
        props = {}

    return PostSummary(
        title=first_non_empty(
            lambda: plain_text_of_title(props.get("Name")),
            lambda: plain_text_of_title(props.get("Title")),
            lambda: _str_field(page, "id"),
            default=UNTITLED,
        ),
        description=first_non_empty(
            lambda: plain_text_of_rich_text(props.get("Description")),
            lambda: plain_text_of_rich_text(props.get("Summary")),
        ),
        publish_date=first_non_empty(
            lambda: date_start(props.get("Date")) or "",
            lambda: _str_field(page, "created_time"),
            now_iso,
        ),
        link=_str_field(page, "url") or PLACEHOLDER_LINK,
    )


def _str_field(page: Mapping[str, Any], key: str) -> str:
    value = page.get(key)
    return value if isinstance(value, str) else ""


@fail_soft("Notion fetch")
def fetch_notion_posts(
    token: Optional[str] = None,
    database_id: Optional[str] = None,
    limit: int = 3,
    *,
    timeout: Optional[float] = None,
    api_url: str = NOTION_API_URL,
) -> FetchResult:
    """Fetch the newest pages of a Notion database as post summaries.

    Without both ``token`` and ``database_id`` the feature is off and no
    request is made. Never raises; failures are logged and produce ``[]``.
    """
    if not token or not database_id:
        logger.debug("Notion posts disabled: token or database id not configured")
        return FetchResult.success([])

    url = build_query_url(database_id, api_url)
    headers = {
        "Authorization": f"Bearer {token}",
        "Notion-Version": NOTION_VERSION,
        "Content-Type": "application/json",
    }
    logger.debug("Querying Notion database %s", url)
    try:
        resp = requests.post(url, headers=headers, json=build_query_body(limit), timeout=timeout)
    except requests.RequestException as exc:
        return FetchResult.failure(f"request error for {url}: {exc}")
    if not 200 <= resp.status_code < 300:
        return FetchResult.failure(f"Notion API error {resp.status_code}: {resp.text}")

    payload = resp.json()
    results: List[Any] = []
    if isinstance(payload, Mapping) and isinstance(payload.get("results"), list):
        results = payload["results"]

    posts = [page_to_post(page) for page in results[: max(limit, 0)]]
    logger.info("Fetched %d Notion post(s)", len(posts))
    return FetchResult.success(posts)
