from __future__ import annotations

import xml.etree.ElementTree as ET

import pytest

from portfolio_feeds.processors.xml_tree import parse_xml


def test_rss_document_shape(feed_fixture) -> None:
    doc = parse_xml(feed_fixture("velog_rss.xml"))
    channel = doc["rss"]["channel"]
    assert isinstance(channel, list) and len(channel) == 1
    items = channel[0]["item"]
    assert len(items) == 5
    assert items[0]["title"] == ["Remix loaders on Cloudflare"]
    assert items[0]["dc:creator"] == ["minki"]
    assert items[0]["category"] == ["remix", "cloudflare"]
    assert doc["rss"]["$"] == {"version": "2.0"}


def test_atom_default_namespace_uses_local_names(feed_fixture) -> None:
    doc = parse_xml(feed_fixture("atom.xml"))
    entries = doc["feed"]["entry"]
    assert len(entries) == 2
    assert entries[0]["title"] == [{"_": "Atom entry one", "$": {"type": "html"}}]
    assert entries[0]["link"][1] == {"$": {"rel": "alternate", "href": "https://example.com/entries/1"}}


def test_malformed_xml_raises() -> None:
    with pytest.raises(ET.ParseError):
        parse_xml("<rss><channel></rss>")


def test_empty_body_raises() -> None:
    with pytest.raises(ET.ParseError):
        parse_xml("")
