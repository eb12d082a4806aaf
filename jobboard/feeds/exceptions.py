"""Feed exceptions."""


class FeedError(Exception):
    """Base exception for feed generation."""


class FeedRenderError(FeedError):
    """Serializing a feed to RSS, Atom or JSON failed."""


class FeedDisabledError(FeedError):
    """The requested feed format is switched off in configuration."""

    def __init__(self, feed_format: str) -> None:
        super().__init__(f"{feed_format} feed not enabled")
        self.feed_format = feed_format
