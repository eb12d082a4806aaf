"""Feed data models shared by every output format."""

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

GENERATOR = "Job Board"


class FeedItem(BaseModel):
    """One job entry in a syndication feed."""

    id: str = Field(..., description="Permanent item id (the job URL)")
    title: str
    link: str
    description: str = Field(..., description="Markdown summary of the job")
    content: str = Field(..., description="Full item body")
    author_name: str = ""
    author_link: Optional[str] = None
    date: datetime
    image: Optional[str] = None
    categories: List[str] = Field(default_factory=list)


class Feed(BaseModel):
    """Format-independent feed document."""

    id: str
    title: str
    description: str
    link: str
    language: str = "en"
    image: Optional[str] = None
    favicon: Optional[str] = None
    copyright: str = ""
    updated: datetime
    generator: str = GENERATOR
    feed_links: Dict[str, str] = Field(
        default_factory=dict, description="Self links keyed by format: rss, atom, json"
    )
    items: List[FeedItem] = Field(default_factory=list)
