"""Tolerant accessors over loosely-structured parsed nodes.

A node is whatever a parser hands back for a field: a plain string, a list
of nodes (XML parsers often wrap even single values in a one-element list),
a mapping for elements with children or attributes, or ``None`` when the
field is absent. Every helper here is total: on a shape it does not expect
it returns its default instead of raising.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping, Union

Node = Union[str, List[Any], Dict[str, Any], None]

# Keys used by the XML tree builder for element text and attributes.
TEXT_KEY = "_"
ATTRS_KEY = "$"


def first(node: Node) -> Node:
    """Unwrap a single-element sequence; scalars pass through unchanged."""
    if isinstance(node, (list, tuple)):
        return node[0] if node else None
    return node


def as_list(node: Node) -> List[Any]:
    if node is None:
        return []
    if isinstance(node, (list, tuple)):
        return list(node)
    return [node]


def as_text(node: Node, default: str = "") -> str:
    """Coerce a node to a stripped string.

    Mappings contribute their element text, or failing that an ``href`` or
    ``term`` attribute (Atom links and categories carry their value there).
    """
    value = first(node)
    if value is None:
        return default
    if isinstance(value, Mapping):
        text = value.get(TEXT_KEY)
        if isinstance(text, str) and text.strip():
            return text.strip()
        attrs = value.get(ATTRS_KEY)
        if isinstance(attrs, Mapping):
            for key in ("href", "term"):
                attr = attrs.get(key)
                if isinstance(attr, str) and attr.strip():
                    return attr.strip()
        return default
    if isinstance(value, (list, tuple)):
        return as_text(value, default)
    text = str(value).strip()
    return text or default


def as_text_list(node: Node) -> List[str]:
    texts = [as_text(item) for item in as_list(node)]
    return [t for t in texts if t]


def child(node: Node, *path: str) -> Node:
    """Walk ``path`` through nested mappings, unwrapping lists on the way."""
    current = node
    for key in path:
        current = first(current)
        if not isinstance(current, Mapping):
            return None
        current = current.get(key)
    return current


def first_non_empty(*accessors: Callable[[], str], default: str = "") -> str:
    """Evaluate ``accessors`` left to right and return the first non-empty result."""
    for accessor in accessors:
        value = accessor()
        if value:
            return value
    return default


def pick_text(node: Node, *keys: str, default: str = "") -> str:
    """Text of the first of ``keys`` present and non-empty on ``node``."""
    return first_non_empty(*(lambda k=key: as_text(child(node, k)) for key in keys), default=default)
