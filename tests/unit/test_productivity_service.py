"""Tests for ProductivityService."""
import threading

import pytest

from ecolife.models.goal import GoalCreate, GoalUpdate
from ecolife.models.task import TaskCreate, TaskPriority
from ecolife.services.productivity_service import ProductivityService


class TestGoals:
    """Tests for goal operations."""

    def test_create_goal_appends(self, fresh_state):
        service = ProductivityService(fresh_state)

        goal = service.create_goal(GoalCreate(title="  Grow herbs  "))

        assert goal.title == "Grow herbs"
        assert goal.progress == 0
        assert goal.category == "Personal"
        assert fresh_state.goals[-1] is goal

    def test_create_goal_empty_category_uses_default(self, fresh_state):
        service = ProductivityService(fresh_state)

        goal = service.create_goal(GoalCreate(title="Grow herbs", category=""))

        assert goal.category == "Personal"

    def test_create_goal_requires_title(self, fresh_state):
        service = ProductivityService(fresh_state)

        with pytest.raises(ValueError, match="Goal title is required."):
            service.create_goal(GoalCreate(title=""))
        assert len(fresh_state.goals) == 2

    def test_update_goal_ignores_bool_progress(self, fresh_state):
        service = ProductivityService(fresh_state)

        goal = service.update_goal("1", GoalUpdate(progress=True))

        assert goal.progress == 65

    def test_update_goal_ignores_nan(self, fresh_state):
        service = ProductivityService(fresh_state)

        goal = service.update_goal("1", GoalUpdate(progress=float("nan")))

        assert goal.progress == 65

    def test_update_goal_clamps_infinity(self, fresh_state):
        service = ProductivityService(fresh_state)

        goal = service.update_goal("1", GoalUpdate(progress=float("inf")))

        assert goal.progress == 100

    def test_update_goal_not_found(self, fresh_state):
        service = ProductivityService(fresh_state)

        with pytest.raises(ValueError, match="Goal not found."):
            service.update_goal("missing", GoalUpdate(progress=5))


class TestTasks:
    """Tests for task operations."""

    def test_create_task_defaults(self, fresh_state):
        service = ProductivityService(fresh_state)

        task = service.create_task(TaskCreate(title="Compost"))

        assert task.completed is False
        assert task.priority == TaskPriority.MEDIUM
        assert task.category == "General"

    def test_create_task_blank_priority_uses_default(self, fresh_state):
        service = ProductivityService(fresh_state)

        task = service.create_task(TaskCreate(title="Compost", priority=""))

        assert task.priority == TaskPriority.MEDIUM

    def test_created_ids_are_unique(self, fresh_state):
        service = ProductivityService(fresh_state)

        ids = {service.create_task(TaskCreate(title=f"Task {i}")).id for i in range(20)}

        assert len(ids) == 20

    def test_delete_task(self, fresh_state):
        service = ProductivityService(fresh_state)

        assert service.delete_task("2") == {"success": True}
        assert [t.id for t in fresh_state.tasks] == ["1", "3"]

    def test_delete_missing_task(self, fresh_state):
        service = ProductivityService(fresh_state)

        with pytest.raises(ValueError, match="Task not found."):
            service.delete_task("missing")
        assert len(fresh_state.tasks) == 3

    def test_concurrent_toggles_are_serialized(self, fresh_state):
        """An even number of toggles from several threads leaves the flag unchanged."""
        service = ProductivityService(fresh_state)

        def toggle_many():
            for _ in range(100):
                service.toggle_task("1")

        threads = [threading.Thread(target=toggle_many) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert fresh_state.tasks[0].completed is False


class TestHabits:
    """Tests for habit operations."""

    def test_tick_habit(self, fresh_state):
        service = ProductivityService(fresh_state)

        service.tick_habit("2")
        habit = service.tick_habit("2")

        assert habit.streak == 16

    def test_tick_missing_habit(self, fresh_state):
        service = ProductivityService(fresh_state)

        with pytest.raises(ValueError, match="Habit not found."):
            service.tick_habit("missing")


class TestStateReset:
    """Tests for re-seeding."""

    def test_reset_restores_seed(self, fresh_state):
        service = ProductivityService(fresh_state)
        service.delete_task("1")
        service.tick_habit("1")

        fresh_state.reset()

        assert len(fresh_state.tasks) == 3
        assert fresh_state.habits[0].streak == 7
        assert fresh_state.contact_messages == []

    def test_seed_copies_are_independent(self, fresh_state):
        from ecolife.state import InMemoryState

        other = InMemoryState()
        ProductivityService(fresh_state).tick_habit("1")

        assert other.habits[0].streak == 7
