"""Configuration schema models using Pydantic."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator


class SortOrder(str, Enum):
    """Job listing sort orders."""

    NEWEST = "newest"
    OLDEST = "oldest"
    SALARY = "salary"


class FeedFormat(str, Enum):
    """Syndication feed formats."""

    RSS = "rss"
    ATOM = "atom"
    JSON = "json"


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log output formats."""

    JSON = "json"
    KEY_VALUE = "key-value"


class SiteConfig(BaseModel):
    """Public identity of the job board."""

    title: str = Field("Job Board", min_length=1, description="Site title")
    description: str = Field(
        "Browse curated opportunities from leading companies.",
        description="Site description used by feeds",
    )
    url: str = Field("http://localhost:3000", description="Public base URL")

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Require an http(s) URL and drop any trailing slash."""
        stripped = v.strip().rstrip("/")
        if not stripped.startswith(("http://", "https://")):
            raise ValueError(f"url must start with http:// or https://, got: {v}")
        return stripped

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        """Strip whitespace from the title."""
        stripped = v.strip()
        if not stripped:
            raise ValueError("title cannot be empty")
        return stripped


class JobListingsConfig(BaseModel):
    """Defaults for the job listing pipeline."""

    default_per_page: int = Field(10, ge=1, le=100, description="Jobs per page")
    default_sort_order: SortOrder = Field(SortOrder.NEWEST, description="Default sort order")

    model_config = {"use_enum_values": True}


class FeedFormatsConfig(BaseModel):
    """Which feed formats are published."""

    rss: bool = True
    atom: bool = True
    json_feed: bool = Field(True, alias="json")

    model_config = {"populate_by_name": True}


class FeedConfig(BaseModel):
    """Syndication feed settings."""

    enabled: bool = Field(True, description="Whether feeds are published at all")
    formats: FeedFormatsConfig = Field(default_factory=FeedFormatsConfig)
    title: Optional[str] = Field(None, description="Feed title (defaults to '<site title> | Job Feed')")
    description_length: int = Field(
        500, ge=50, le=10000, description="Description characters included per item"
    )


class StoreConfig(BaseModel):
    """Record store (Airtable) connection settings."""

    table_name: str = Field("Jobs", min_length=1, description="Table holding job records")
    api_url: str = Field("https://api.airtable.com/v0", description="REST API base URL")
    http_request_timeout: int = Field(
        30, ge=5, le=300, description="Request timeout for store API calls (seconds)"
    )
    user_agent: str = Field(
        "JobBoard/1.0",
        min_length=1,
        description="User-Agent string for HTTP requests",
    )
    page_size: int = Field(100, ge=1, le=100, description="Records requested per page")

    @field_validator("user_agent", "table_name")
    @classmethod
    def strip_whitespace(cls, v: str) -> str:
        """Strip whitespace from string fields."""
        stripped = v.strip()
        if not stripped:
            raise ValueError("Field cannot be empty or whitespace-only")
        return stripped

    @field_validator("api_url")
    @classmethod
    def strip_api_url(cls, v: str) -> str:
        """Drop any trailing slash from the API base URL."""
        return v.strip().rstrip("/")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.INFO, description="Log level")
    format: LogFormat = Field(
        LogFormat.KEY_VALUE, description="Log output format (json or key-value)"
    )

    model_config = {"use_enum_values": True}


class BoardConfig(BaseModel):
    """Root configuration object for the job board."""

    site: SiteConfig = Field(default_factory=SiteConfig, description="Site identity")
    job_listings: JobListingsConfig = Field(
        default_factory=JobListingsConfig, description="Listing defaults"
    )
    feed: FeedConfig = Field(default_factory=FeedConfig, description="Feed settings")
    store: StoreConfig = Field(default_factory=StoreConfig, description="Record store settings")
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )

    @model_validator(mode="after")
    def validate_feed_formats(self):
        """An enabled feed must publish at least one format."""
        formats = self.feed.formats
        if self.feed.enabled and not (formats.rss or formats.atom or formats.json_feed):
            raise ValueError(
                "feed is enabled but every format is disabled. "
                "Enable at least one of rss, atom, json or set feed.enabled to false."
            )
        return self

    def feed_title(self) -> str:
        """Feed title with the site-title fallback applied."""
        return self.feed.title or f"{self.site.title} | Job Feed"
