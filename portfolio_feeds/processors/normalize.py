from __future__ import annotations

import re
from datetime import datetime, timezone

_tag_re = re.compile(r"<[^>]*>")
_whitespace_re = re.compile(r"\s+")


def strip_tags(text: str | None) -> str:
    """Remove every ``<...>`` substring and collapse whitespace.

    Entities are left escaped so decoding cannot reintroduce markup.
    """
    if not text:
        return ""
    text = _tag_re.sub("", str(text))
    return _whitespace_re.sub(" ", text).strip()


def now_iso() -> str:
    """Current UTC time as ISO 8601, used when a source gives no date."""
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")
