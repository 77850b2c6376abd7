"""Typed models used across the application."""

from .post import PostSummary, UNTITLED, PLACEHOLDER_LINK
from .source import BlogSource, SourceType

__all__ = ["PostSummary", "UNTITLED", "PLACEHOLDER_LINK", "BlogSource", "SourceType"]
