"""Content service - lookups over the static blog and recommendation catalog."""
from typing import Optional, Union

from ecolife.catalog import BLOG_POSTS, RECOMMENDATIONS
from ecolife.models.content import BlogPost, Recommendation


class ContentService:
    """Read-only access to static content."""

    def __init__(self, posts=BLOG_POSTS, recommendations=RECOMMENDATIONS):
        self.posts = posts
        self.recommendations = recommendations

    def list_posts(self) -> list[BlogPost]:
        return list(self.posts)

    def get_post(self, post_id: str) -> BlogPost:
        """
        Get a blog post by ID.

        Raises:
            ValueError: If post not found
        """
        for post in self.posts:
            if post.id == post_id:
                return post
        raise ValueError("Post not found.")

    def get_recommendations(
        self, area: Optional[str] = None
    ) -> Union[Recommendation, list[Recommendation]]:
        """
        Get recommendations, optionally for a single area.

        Args:
            area: Area ID (e.g., transport, home); empty means all areas

        Returns:
            The matching recommendation set, or all of them when no area is given

        Raises:
            ValueError: If no recommendation set exists for the area
        """
        if not area:
            return list(self.recommendations)

        for recommendation in self.recommendations:
            if recommendation.id == area:
                return recommendation
        raise ValueError("No recommendations for that area.")
