"""Top-level package for the portfolio blog-post feeds.

Fetches the latest posts shown on the portfolio landing page, either from a
syndication feed or from a Notion database, and normalizes them into
``PostSummary`` records for the rendering layer.
"""

__all__ = []
