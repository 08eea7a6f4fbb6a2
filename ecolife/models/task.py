"""Task model definitions."""
from enum import Enum
from typing import Optional

from pydantic import field_validator

from ecolife.models.common import CamelModel

DEFAULT_TASK_CATEGORY = "General"


class TaskPriority(str, Enum):
    """Task priorities."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class TaskCreate(CamelModel):
    """Task creation model. Title presence is checked by the service."""

    title: Optional[str] = None
    priority: Optional[TaskPriority] = None
    category: Optional[str] = None

    @field_validator("priority", mode="before")
    @classmethod
    def blank_priority_is_default(cls, value):
        # An empty string falls back to the default priority
        return value or None


class Task(CamelModel):
    """Full task model."""

    id: str
    title: str
    completed: bool = False
    priority: TaskPriority = TaskPriority.MEDIUM
    category: str = DEFAULT_TASK_CATEGORY
