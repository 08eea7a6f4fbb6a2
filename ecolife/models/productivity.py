"""Composite productivity models."""
from pydantic import BaseModel, Field

from ecolife.models.goal import Goal
from ecolife.models.habit import Habit, TrackedHabit
from ecolife.models.task import Task


class ProductivitySnapshot(BaseModel):
    """Full in-memory productivity state served by the API."""

    goals: list[Goal] = Field(default_factory=list)
    tasks: list[Task] = Field(default_factory=list)
    habits: list[Habit] = Field(default_factory=list)


class ProductivityRecord(BaseModel):
    """A user's composite record: goals, tasks and habits stored as one document."""

    goals: list[Goal] = Field(default_factory=list)
    tasks: list[Task] = Field(default_factory=list)
    habits: list[TrackedHabit] = Field(default_factory=list)

    def to_document(self) -> dict:
        """Serialize to a JSON-compatible document with wire field names."""
        return self.model_dump(mode="json", by_alias=True)


class DashboardStats(BaseModel):
    """Usage counts across the in-memory collections."""

    contacts: int
    goals: int
    tasks: int
    habits: int
