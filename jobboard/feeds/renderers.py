"""Feed serialization: RSS 2.0 and Atom 1.0 via Jinja2, JSON Feed 1.1 via json.

XML templates live in the jobboard.feeds.templates package directory and
are rendered with autoescaping and strict undefined checking.
"""

import json
import logging
from typing import Any, Dict, Optional, Union

from jinja2 import Environment, PackageLoader, StrictUndefined, TemplateError

from jobboard.config.models import FeedFormat
from jobboard.utils.timestamps import format_rfc822, format_timestamp

from .exceptions import FeedRenderError
from .models import Feed

logger = logging.getLogger(__name__)

JSON_FEED_VERSION = "https://jsonfeed.org/version/1.1"

CONTENT_TYPES = {
    FeedFormat.RSS: "application/rss+xml; charset=utf-8",
    FeedFormat.ATOM: "application/atom+xml; charset=utf-8",
    FeedFormat.JSON: "application/feed+json; charset=utf-8",
}


class FeedRenderer:
    """Renders Feed documents to their wire formats."""

    def __init__(
        self,
        template_dir: str = "templates",
        rss_template: str = "rss.xml.j2",
        atom_template: str = "atom.xml.j2",
    ):
        self.rss_template_name = rss_template
        self.atom_template_name = atom_template

        self.env = Environment(
            loader=PackageLoader("jobboard.feeds", template_dir),
            autoescape=True,
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["rfc822"] = format_rfc822
        self.env.filters["iso8601"] = format_timestamp

    def render(self, feed: Feed, feed_format: Union[FeedFormat, str]) -> str:
        """Render a feed in the requested format."""
        fmt = FeedFormat(feed_format)
        if fmt == FeedFormat.RSS:
            return self.render_rss(feed)
        if fmt == FeedFormat.ATOM:
            return self.render_atom(feed)
        return self.render_json_feed(feed)

    def render_rss(self, feed: Feed) -> str:
        return self._render_template(self.rss_template_name, feed)

    def render_atom(self, feed: Feed) -> str:
        return self._render_template(self.atom_template_name, feed)

    def render_json_feed(self, feed: Feed) -> str:
        """Serialize as JSON Feed 1.1."""
        document: Dict[str, Any] = {
            "version": JSON_FEED_VERSION,
            "title": feed.title,
            "home_page_url": feed.link,
            "feed_url": feed.feed_links.get(FeedFormat.JSON.value),
            "description": feed.description,
            "icon": feed.image,
            "favicon": feed.favicon,
            "language": feed.language,
            "items": [],
        }

        for item in feed.items:
            entry: Dict[str, Any] = {
                "id": item.id,
                "url": item.link,
                "title": item.title,
                "content_text": item.content,
                "summary": item.description,
                "date_published": format_timestamp(item.date),
                "authors": [_json_author(item.author_name, item.author_link)],
                "tags": item.categories,
            }
            if item.image:
                entry["image"] = item.image
            document["items"].append(entry)

        try:
            return json.dumps(
                {key: value for key, value in document.items() if value is not None},
                indent=2,
                ensure_ascii=False,
            )
        except (TypeError, ValueError) as e:
            logger.error(f"JSON feed serialization failed: {e}", exc_info=True)
            raise FeedRenderError(f"JSON feed serialization failed: {e}") from e

    def _render_template(self, template_name: str, feed: Feed) -> str:
        try:
            template = self.env.get_template(template_name)
            output = template.render(feed=feed)
        except TemplateError as e:
            error_msg = f"Feed template rendering failed: {e}"
            logger.error(error_msg, exc_info=True)
            raise FeedRenderError(error_msg) from e

        logger.debug(
            "Rendered feed template",
            extra={"event": "feed.render.completed", "template": template_name, "items": len(feed.items)},
        )
        return output


def _json_author(name: str, url: Optional[str]) -> Dict[str, str]:
    author = {"name": name}
    if url:
        author["url"] = url
    return author


_default_renderer: Optional[FeedRenderer] = None


def get_renderer() -> FeedRenderer:
    """Shared renderer; the Jinja2 environment caches compiled templates."""
    global _default_renderer
    if _default_renderer is None:
        _default_renderer = FeedRenderer()
    return _default_renderer


def render_rss(feed: Feed) -> str:
    return get_renderer().render_rss(feed)


def render_atom(feed: Feed) -> str:
    return get_renderer().render_atom(feed)


def render_json_feed(feed: Feed) -> str:
    return get_renderer().render_json_feed(feed)


def render_feed(feed: Feed, feed_format: Union[FeedFormat, str]) -> str:
    return get_renderer().render(feed, feed_format)
