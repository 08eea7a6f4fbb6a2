"""Tests for identifier generation."""
from ecolife.utils.ids import generate_id


class TestGenerateId:
    """Tests for generate_id function."""

    def test_uses_millisecond_timestamp(self):
        assert generate_id(now=1700000000.123) == "1700000000123"

    def test_bumps_on_collision(self):
        existing = ["1700000000000", "1700000000001"]

        assert generate_id(existing, now=1700000000.0) == "1700000000002"

    def test_accepts_generator(self):
        existing = (str(n) for n in [1700000000000])

        assert generate_id(existing, now=1700000000.0) == "1700000000001"

    def test_default_is_numeric(self):
        assert generate_id().isdigit()
