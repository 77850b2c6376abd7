from __future__ import annotations

import time

from portfolio_feeds import orchestrator as orchestrator_module
from portfolio_feeds.models import BlogSource, PostSummary
from portfolio_feeds.orchestrator import PostsOrchestrator


def _post(title: str) -> PostSummary:
    return PostSummary(title=title, description="", publish_date="2025-01-01")


def test_dispatches_by_source_type(monkeypatch) -> None:
    calls = []

    def fake_feed(username, limit, **kwargs):
        calls.append(("feed", username, limit, kwargs))
        return [_post("feed")]

    def fake_notion(token, database_id, limit, **kwargs):
        calls.append(("notion", token, database_id, limit))
        return [_post("notion")]

    monkeypatch.setattr(orchestrator_module, "fetch_feed_posts", fake_feed)
    monkeypatch.setattr(orchestrator_module, "fetch_notion_posts", fake_notion)
    orch = PostsOrchestrator(timeout=5.0)

    assert orch.fetch_source(BlogSource(name="a", type="feed", username="u", limit=2)) == [_post("feed")]
    assert orch.fetch_source(BlogSource(name="b", type="notion", token="t", database_id="d")) == [_post("notion")]
    assert calls == [("feed", "u", 2, {"timeout": 5.0}), ("notion", "t", "d", 3)]


def test_feed_without_username_and_unknown_type_are_empty() -> None:
    orch = PostsOrchestrator()
    assert orch.fetch_source(BlogSource(name="a", type="feed")) == []
    assert orch.fetch_source(BlogSource(name="b", type="rss")) == []  # type: ignore[arg-type]


def test_fetch_all_keeps_config_order_and_isolates_failures(monkeypatch) -> None:
    def fake_feed(username, limit, **kwargs):
        if username == "slow":
            time.sleep(0.05)
        if username == "broken":
            raise RuntimeError("boom")
        return [_post(username)]

    monkeypatch.setattr(orchestrator_module, "fetch_feed_posts", fake_feed)
    sources = [
        BlogSource(name="first", type="feed", username="slow"),
        BlogSource(name="second", type="feed", username="broken"),
        BlogSource(name="third", type="feed", username="fast"),
    ]

    results = PostsOrchestrator().fetch_all(sources)

    assert list(results) == ["first", "second", "third"]
    assert results["first"] == [_post("slow")]
    assert results["second"] == []
    assert results["third"] == [_post("fast")]


def test_fetch_all_without_sources() -> None:
    assert PostsOrchestrator().fetch_all([]) == {}
