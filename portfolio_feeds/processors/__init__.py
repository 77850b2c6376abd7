"""Field extraction and normalization helpers shared by the fetchers."""

from .nodes import as_list, as_text, as_text_list, child, first, first_non_empty, pick_text
from .normalize import now_iso, strip_tags
from .notion_props import date_start, plain_text_of_rich_text, plain_text_of_title, strip_dashes
from .xml_tree import parse_xml

__all__ = [
    "as_list",
    "as_text",
    "as_text_list",
    "child",
    "first",
    "first_non_empty",
    "pick_text",
    "now_iso",
    "strip_tags",
    "date_start",
    "plain_text_of_rich_text",
    "plain_text_of_title",
    "strip_dashes",
    "parse_xml",
]
