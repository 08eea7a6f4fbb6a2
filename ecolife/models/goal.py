"""Goal model definitions."""
import math
from datetime import date
from typing import Any, Optional

from pydantic import Field

from ecolife.models.common import CamelModel

DEFAULT_GOAL_CATEGORY = "Personal"
GOAL_HORIZON_DAYS = 30


def is_progress_value(value: Any) -> bool:
    """Return True for numbers usable as goal progress (bools and NaN excluded)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not math.isnan(value)


def clamp_progress(value: float) -> int:
    """Clamp a progress value to the 0-100 range."""
    return int(round(min(100, max(0, value))))


class GoalCreate(CamelModel):
    """Goal creation model. Title presence is checked by the service."""

    title: Optional[str] = None
    target_date: Optional[date] = None
    category: Optional[str] = None


class GoalUpdate(CamelModel):
    """Goal update model - only a numeric progress is applied."""

    progress: Any = None


class Goal(CamelModel):
    """Full goal model."""

    id: str
    title: str
    progress: int = Field(default=0, ge=0, le=100)
    target_date: date
    category: str = DEFAULT_GOAL_CATEGORY
