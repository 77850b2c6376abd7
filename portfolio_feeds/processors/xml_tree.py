"""Parse XML documents into a generic nested structure.

The shape mirrors what JavaScript-style XML-to-object converters produce, so
feed handling code can probe paths like ``rss.channel.item`` without caring
whether the document is RSS or Atom:

- the result is ``{root_tag: root_node}``
- an element with neither children nor attributes becomes its stripped text
- any other element becomes a dict mapping each child tag to a *list* of
  child nodes, with attributes under ``"$"`` and own text under ``"_"``
- namespaced tags keep the prefix declared in the document (``dc:creator``);
  tags in a default namespace use their local name (``entry``)
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Any, Dict

from .nodes import ATTRS_KEY, TEXT_KEY, Node


def parse_xml(text: str) -> Dict[str, Node]:
    """Parse ``text`` into nested nodes.

    Raises ``xml.etree.ElementTree.ParseError`` for malformed or empty input.
    """
    parser = ET.XMLPullParser(events=("start-ns", "end"))
    parser.feed(text)
    parser.close()

    prefixes: Dict[str, str] = {}
    root: ET.Element | None = None
    for event, payload in parser.read_events():
        if event == "start-ns":
            prefix, uri = payload
            if prefix:
                prefixes.setdefault(uri, prefix)
        else:
            root = payload
    if root is None:
        raise ET.ParseError("no root element found")

    return {_qualified(root.tag, prefixes): _to_node(root, prefixes)}


def _qualified(tag: str, prefixes: Dict[str, str]) -> str:
    if not tag.startswith("{"):
        return tag
    uri, _, local = tag[1:].partition("}")
    prefix = prefixes.get(uri)
    return f"{prefix}:{local}" if prefix else local


def _to_node(element: ET.Element, prefixes: Dict[str, str]) -> Node:
    children: Dict[str, Any] = {}
    for sub in element:
        children.setdefault(_qualified(sub.tag, prefixes), []).append(_to_node(sub, prefixes))

    text = (element.text or "").strip()
    if not children and not element.attrib:
        return text

    node: Dict[str, Any] = dict(children)
    if element.attrib:
        node[ATTRS_KEY] = {_qualified(k, prefixes): v for k, v in element.attrib.items()}
    if text:
        node[TEXT_KEY] = text
    return node
