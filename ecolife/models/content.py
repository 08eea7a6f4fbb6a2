"""Static content model definitions."""
from ecolife.models.common import CamelModel


class BlogPost(CamelModel):
    """Blog post."""

    id: str
    title: str
    excerpt: str
    category: str
    author: str
    date: str
    image_url: str
    read_time: str
    content: str


class Recommendation(CamelModel):
    """A set of eco tips for one area."""

    id: str
    title: str
    tips: list[str]
