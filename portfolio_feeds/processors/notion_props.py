"""Readers for Notion page property values.

Each takes one entry of a page's ``properties`` mapping and tolerates the
property, its nested value, or any list element being missing or null.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional


def _plain_text(prop: Any, kind: str) -> str:
    if not isinstance(prop, Mapping):
        return ""
    parts = prop.get(kind)
    if not isinstance(parts, list) or not parts:
        return ""
    texts = []
    for part in parts:
        text = part.get("plain_text") if isinstance(part, Mapping) else None
        texts.append(text if isinstance(text, str) else "")
    return "".join(texts).strip()


def plain_text_of_title(prop: Any) -> str:
    return _plain_text(prop, "title")


def plain_text_of_rich_text(prop: Any) -> str:
    return _plain_text(prop, "rich_text")


def date_start(prop: Any) -> Optional[str]:
    if not isinstance(prop, Mapping):
        return None
    date = prop.get("date")
    if not isinstance(date, Mapping):
        return None
    start = date.get("start")
    return start if isinstance(start, str) and start else None


def strip_dashes(identifier: str) -> str:
    return identifier.replace("-", "")
