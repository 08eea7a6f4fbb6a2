"""Default productivity dataset loaded into the in-memory state at startup."""
from datetime import date

from ecolife.models.goal import Goal
from ecolife.models.habit import Habit
from ecolife.models.productivity import ProductivitySnapshot
from ecolife.models.task import Task, TaskPriority


def default_productivity_state() -> ProductivitySnapshot:
    """Build a fresh copy of the seed goals, tasks and habits."""
    return ProductivitySnapshot(
        goals=[
            Goal(
                id="1",
                title="Reduce plastic usage by 50%",
                progress=65,
                target_date=date(2025, 12, 31),
                category="Sustainability",
            ),
            Goal(
                id="2",
                title="Meditate daily for 30 days",
                progress=23,
                target_date=date(2025, 12, 15),
                category="Wellness",
            ),
        ],
        tasks=[
            Task(id="1", title="Buy reusable shopping bags", priority=TaskPriority.HIGH, category="Shopping"),
            Task(id="2", title="Research solar panel options", priority=TaskPriority.MEDIUM, category="Home"),
            Task(id="3", title="Start composting bin", completed=True, priority=TaskPriority.HIGH, category="Waste"),
        ],
        habits=[
            Habit(id="1", name="Morning Meditation", description="10 minutes daily", streak=7),
            Habit(id="2", name="Zero Waste Shopping", description="Use reusable bags", streak=14),
            Habit(id="3", name="Bike to Work", description="Reduce carbon footprint", streak=5),
        ],
    )
