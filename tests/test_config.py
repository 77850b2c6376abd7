from __future__ import annotations

import pytest

from portfolio_feeds.utils.config_loader import ConfigError, load_sources_config
from portfolio_feeds.utils.settings import BlogSettings


def _write(tmp_path, text: str):
    path = tmp_path / "sources.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_loads_feed_and_notion_sources(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("MY_TOKEN", "secret")
    monkeypatch.setenv("NOTION_DATABASE_ID", "abc-123")
    path = _write(
        tmp_path,
        """
sources:
  - name: velog
    type: feed
    username: " 93minki "
  - name: notes
    type: notion
    token_env: MY_TOKEN
    limit: 5
""",
    )

    feed, notes = load_sources_config(path)

    assert (feed.type, feed.username, feed.limit) == ("feed", "93minki", 3)
    assert (notes.token, notes.database_id, notes.limit) == ("secret", "abc-123", 5)


def test_missing_notion_env_leaves_source_disabled(tmp_path, monkeypatch) -> None:
    monkeypatch.delenv("NOTION_TOKEN", raising=False)
    monkeypatch.delenv("NOTION_DATABASE_ID", raising=False)
    (source,) = load_sources_config(_write(tmp_path, "sources:\n  - {name: n, type: notion}\n"))
    assert source.token is None and source.database_id is None


@pytest.mark.parametrize(
    "body",
    [
        "sources:\n  - {type: feed, username: u}\n",
        "sources:\n  - {name: a, type: rss}\n",
        "sources:\n  - {name: a, type: feed}\n",
        "sources:\n  - {name: a, type: feed, username: u, limit: 0}\n",
        "sources:\n  - {name: a, type: feed, username: u, limit: many}\n",
        "sources:\n  - {name: a, type: feed, username: u}\n  - {name: a, type: feed, username: v}\n",
        "sources: {name: a}\n",
        "sources:\n  - just-a-string\n",
        "- a\n- b\n",
    ],
)
def test_invalid_configs_raise(tmp_path, body) -> None:
    with pytest.raises(ConfigError):
        load_sources_config(_write(tmp_path, body))


def test_missing_file_raises(tmp_path) -> None:
    with pytest.raises(ConfigError):
        load_sources_config(tmp_path / "absent.yaml")


def test_empty_file_has_no_sources(tmp_path) -> None:
    assert load_sources_config(_write(tmp_path, "")) == []


def test_settings_from_env(monkeypatch) -> None:
    monkeypatch.setenv("BLOG_PROVIDER", "notion")
    monkeypatch.setenv("NOTION_TOKEN", "secret")
    monkeypatch.setenv("NOTION_DATABASE_ID", "db")
    monkeypatch.setenv("BLOG_POSTS_LIMIT", "4")
    monkeypatch.setenv("HTTP_TIMEOUT", "2.5")

    settings = BlogSettings()
    source = settings.to_source()

    assert settings.http_timeout == 2.5
    assert (source.type, source.token, source.database_id, source.limit) == ("notion", "secret", "db", 4)


def test_settings_default_to_feed(monkeypatch) -> None:
    for key in ("BLOG_PROVIDER", "BLOG_FEED_USERNAME", "BLOG_POSTS_LIMIT", "HTTP_TIMEOUT"):
        monkeypatch.delenv(key, raising=False)

    settings = BlogSettings()
    source = settings.to_source()

    assert settings.http_timeout is None
    assert (source.type, source.username, source.limit) == ("feed", None, 3)
