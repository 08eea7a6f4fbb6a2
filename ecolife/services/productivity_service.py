"""Productivity service - business logic for goals, tasks and habits."""
from datetime import datetime, timedelta, timezone

from ecolife.models.goal import (
    DEFAULT_GOAL_CATEGORY,
    GOAL_HORIZON_DAYS,
    Goal,
    GoalCreate,
    GoalUpdate,
    clamp_progress,
    is_progress_value,
)
from ecolife.models.habit import Habit
from ecolife.models.productivity import ProductivitySnapshot
from ecolife.models.task import DEFAULT_TASK_CATEGORY, Task, TaskCreate, TaskPriority
from ecolife.state import InMemoryState
from ecolife.utils.ids import generate_id


def _find(items, item_id: str):
    return next((item for item in items if item.id == item_id), None)


class ProductivityService:
    """Service for handling productivity operations over the in-memory state."""

    def __init__(self, state: InMemoryState):
        """Initialize service with the shared state."""
        self.state = state

    def get_snapshot(self) -> ProductivitySnapshot:
        """Return the full goals, tasks and habits collections."""
        with self.state.lock:
            return ProductivitySnapshot(
                goals=list(self.state.goals),
                tasks=list(self.state.tasks),
                habits=list(self.state.habits),
            )

    def create_goal(self, goal_create: GoalCreate) -> Goal:
        """
        Create a new goal.

        Args:
            goal_create: Goal creation data

        Returns:
            Created goal with progress 0, a target date 30 days out and the
            "Personal" category unless given

        Raises:
            ValueError: If the title is missing
        """
        title = (goal_create.title or "").strip()
        if not title:
            raise ValueError("Goal title is required.")

        target_date = goal_create.target_date or (
            datetime.now(timezone.utc).date() + timedelta(days=GOAL_HORIZON_DAYS)
        )

        with self.state.lock:
            goal = Goal(
                id=generate_id(g.id for g in self.state.goals),
                title=title,
                progress=0,
                target_date=target_date,
                category=goal_create.category or DEFAULT_GOAL_CATEGORY,
            )
            self.state.goals.append(goal)
        return goal

    def update_goal(self, goal_id: str, goal_update: GoalUpdate) -> Goal:
        """
        Update goal progress.

        A numeric progress is clamped to 0-100; anything else leaves the
        goal unchanged.

        Raises:
            ValueError: If goal not found
        """
        with self.state.lock:
            goal = _find(self.state.goals, goal_id)
            if goal is None:
                raise ValueError("Goal not found.")

            if is_progress_value(goal_update.progress):
                goal.progress = clamp_progress(goal_update.progress)
            return goal

    def create_task(self, task_create: TaskCreate) -> Task:
        """
        Create a new task.

        Raises:
            ValueError: If the title is missing
        """
        title = (task_create.title or "").strip()
        if not title:
            raise ValueError("Task title is required.")

        with self.state.lock:
            task = Task(
                id=generate_id(t.id for t in self.state.tasks),
                title=title,
                completed=False,
                priority=task_create.priority or TaskPriority.MEDIUM,
                category=task_create.category or DEFAULT_TASK_CATEGORY,
            )
            self.state.tasks.append(task)
        return task

    def toggle_task(self, task_id: str) -> Task:
        """
        Flip a task's completed flag.

        Raises:
            ValueError: If task not found
        """
        with self.state.lock:
            task = _find(self.state.tasks, task_id)
            if task is None:
                raise ValueError("Task not found.")
            task.completed = not task.completed
            return task

    def delete_task(self, task_id: str) -> dict:
        """
        Remove a task.

        Raises:
            ValueError: If task not found
        """
        with self.state.lock:
            remaining = [t for t in self.state.tasks if t.id != task_id]
            if len(remaining) == len(self.state.tasks):
                raise ValueError("Task not found.")
            self.state.tasks = remaining
        return {"success": True}

    def tick_habit(self, habit_id: str) -> Habit:
        """
        Increment a habit's streak by one.

        Raises:
            ValueError: If habit not found
        """
        with self.state.lock:
            habit = _find(self.state.habits, habit_id)
            if habit is None:
                raise ValueError("Habit not found.")
            habit.streak += 1
            return habit
