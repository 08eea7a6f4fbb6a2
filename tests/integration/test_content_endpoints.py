"""Integration tests for blog, recommendation, dashboard and fallback endpoints."""
import pytest

from ecolife.main import app
from ecolife.state import get_state


@pytest.mark.asyncio
class TestBlogEndpoints:
    """Tests for blog posts."""

    async def test_list_posts(self, app_client):
        response = await app_client.get("/api/blog")

        assert response.status_code == 200
        posts = response.json()
        assert [p["id"] for p in posts] == ["1", "2", "3"]
        assert "imageUrl" in posts[0]
        assert "readTime" in posts[0]

    async def test_get_post(self, app_client):
        response = await app_client.get("/api/blog/2")

        assert response.status_code == 200
        assert response.json()["author"] == "Michael Chen"

    async def test_get_post_not_found(self, app_client):
        response = await app_client.get("/api/blog/99")

        assert response.status_code == 404
        assert response.json() == {"error": "Post not found."}


@pytest.mark.asyncio
class TestRecommendationEndpoints:
    """Tests for eco recommendations."""

    async def test_list_recommendations(self, app_client):
        response = await app_client.get("/api/recommendations")

        assert response.status_code == 200
        assert [r["id"] for r in response.json()] == ["transport", "home", "habits"]

    async def test_get_recommendation_by_area(self, app_client):
        response = await app_client.get("/api/recommendations?area=transport")

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == "transport"
        assert len(data["tips"]) == 3

    async def test_unknown_area(self, app_client):
        response = await app_client.get("/api/recommendations?area=unknown")

        assert response.status_code == 404
        assert response.json() == {"error": "No recommendations for that area."}


@pytest.mark.asyncio
class TestServiceEndpoints:
    """Tests for health, dashboard and error handling."""

    async def test_health(self, app_client):
        response = await app_client.get("/api/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "message": "Eco Life backend is running"}

    async def test_dashboard_counts(self, app_client):
        await app_client.post(
            "/api/contact",
            json={"name": "Ada", "email": "ada@example.com", "message": "Hi"},
        )
        await app_client.post("/api/productivity/tasks", json={"title": "New"})

        response = await app_client.get("/api/dashboard")

        assert response.status_code == 200
        assert response.json() == {"contacts": 1, "goals": 2, "tasks": 4, "habits": 3}

    async def test_unknown_api_path(self, app_client):
        response = await app_client.get("/api/does-not-exist")

        assert response.status_code == 404
        assert response.json() == {"error": "Endpoint not found."}

    async def test_unhandled_error_returns_500(self, app_client):
        """Test an exception inside a handler becomes a generic 500."""
        def broken_state():
            raise RuntimeError("boom")

        app.dependency_overrides[get_state] = broken_state

        response = await app_client.get("/api/productivity")

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error."}

        # Still serving afterwards
        app.dependency_overrides.clear()
        health = await app_client.get("/api/health")
        assert health.status_code == 200
