"""Tests for ContentService and ContactService."""
import pytest

from ecolife.models.contact import ContactCreate
from ecolife.models.content import Recommendation
from ecolife.services.contact_service import ContactService
from ecolife.services.content_service import ContentService


class TestContentService:
    """Tests for static content lookups."""

    def test_empty_area_returns_all(self):
        result = ContentService().get_recommendations("")

        assert isinstance(result, list)
        assert len(result) == 3

    def test_area_lookup(self):
        result = ContentService().get_recommendations("home")

        assert isinstance(result, Recommendation)
        assert result.title == "Low-Energy Home Tweaks"

    def test_unknown_area(self):
        with pytest.raises(ValueError, match="No recommendations for that area."):
            ContentService().get_recommendations("ocean")

    def test_unknown_post(self):
        with pytest.raises(ValueError, match="Post not found."):
            ContentService().get_post("404")


class TestContactService:
    """Tests for contact intake."""

    @pytest.mark.parametrize("missing", ["name", "email", "message"])
    def test_required_fields(self, fresh_state, missing):
        fields = {"name": "Ada", "email": "ada@example.com", "message": "Hi"}
        fields[missing] = ""

        with pytest.raises(ValueError, match="Name, email, and message are required."):
            ContactService(fresh_state).submit_message(ContactCreate(**fields))
        assert fresh_state.contact_messages == []

    def test_submit_sets_timestamp_and_subject(self, fresh_state):
        entry = ContactService(fresh_state).submit_message(
            ContactCreate(name="Ada", email="ada@example.com", message="Hi")
        )

        assert entry.subject == ""
        assert entry.created_at.tzinfo is not None
        assert ContactService(fresh_state).list_messages().count == 1


class TestCatalog:
    """Tests for the static blog catalog."""

    def test_post_bodies_are_complete(self):
        posts = {p.id: p for p in ContentService().list_posts()}

        assert posts["1"].content.startswith("Cutting your carbon footprint does not require perfection.")
        assert "5) Buy once, buy well." in posts["1"].content
        assert len(posts["1"].content.split("\n\n")) == 7
        assert len(posts["2"].content.split("\n\n")) == 6
        assert posts["3"].content.endswith("make your days feel lighter and more meaningful.")
