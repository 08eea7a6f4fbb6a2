"""Content router - blog posts and eco recommendations."""
from typing import Optional, Union

from fastapi import APIRouter, HTTPException, Query, status

from ecolife.models.content import BlogPost, Recommendation
from ecolife.services.content_service import ContentService


blog_router = APIRouter(prefix="/api/blog", tags=["blog"])
recommendations_router = APIRouter(prefix="/api/recommendations", tags=["recommendations"])


@blog_router.get("", response_model=list[BlogPost])
async def list_posts():
    """List all blog posts."""
    return ContentService().list_posts()


@blog_router.get("/{post_id}", response_model=BlogPost)
async def get_post(post_id: str):
    """Get a single blog post. Returns 404 if post not found."""
    try:
        return ContentService().get_post(post_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@recommendations_router.get("", response_model=Union[Recommendation, list[Recommendation]])
async def get_recommendations(
    area: Optional[str] = Query(None, description="Area ID (transport, home, habits)"),
):
    """
    Get eco recommendations.

    - Without an area, returns every recommendation set
    - With an area, returns that set or 404
    """
    try:
        return ContentService().get_recommendations(area)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
