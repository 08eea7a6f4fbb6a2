"""Habit model definitions."""
from pydantic import Field

from ecolife.models.common import CamelModel


class Habit(CamelModel):
    """Habit as held by the API."""

    id: str
    name: str
    description: str = ""
    streak: int = Field(default=0, ge=0)


class TrackedHabit(Habit):
    """Habit as held in a user's productivity record, with completion history."""

    completed_dates: list[str] = Field(default_factory=list)
