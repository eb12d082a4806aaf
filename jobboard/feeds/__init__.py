"""Syndication feeds (RSS 2.0, Atom 1.0, JSON Feed 1.1) for active jobs."""

from .builder import (
    build_feed,
    create_job_description,
    ensure_feed_enabled,
    is_feed_enabled,
    job_categories,
)
from .exceptions import FeedDisabledError, FeedError, FeedRenderError
from .models import Feed, FeedItem
from .renderers import (
    CONTENT_TYPES,
    FeedRenderer,
    render_atom,
    render_feed,
    render_json_feed,
    render_rss,
)

__all__ = [
    "CONTENT_TYPES",
    "Feed",
    "FeedDisabledError",
    "FeedError",
    "FeedItem",
    "FeedRenderError",
    "FeedRenderer",
    "build_feed",
    "create_job_description",
    "ensure_feed_enabled",
    "is_feed_enabled",
    "job_categories",
    "render_atom",
    "render_feed",
    "render_json_feed",
    "render_rss",
]
