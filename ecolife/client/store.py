"""Client-side productivity store with optimistic updates and remote persistence."""
import logging
from datetime import date, datetime, timedelta, timezone
from typing import Callable, Optional

from pydantic import ValidationError

from ecolife.client.documents import DocumentStore, RemoteStoreError
from ecolife.models.goal import (
    DEFAULT_GOAL_CATEGORY,
    GOAL_HORIZON_DAYS,
    Goal,
    clamp_progress,
    is_progress_value,
)
from ecolife.models.habit import TrackedHabit
from ecolife.models.productivity import ProductivityRecord
from ecolife.models.task import DEFAULT_TASK_CATEGORY, Task, TaskPriority
from ecolife.utils.ids import generate_id

logger = logging.getLogger(__name__)

Listener = Callable[["ProductivityStore"], None]


def _utc_today() -> date:
    return datetime.now(timezone.utc).date()


class ProductivityStore:
    """
    Holds the signed-in user's goals, tasks and habits.

    Every mutation is applied to local state and announced to listeners
    before the remote write starts. The full record is then written to the
    user's document. If the write fails, local state is restored to the
    snapshot taken before the mutation and ``error`` is set.

    Rollback restores the whole pre-mutation snapshot, so a mutation that
    completes while an earlier one is still being written is lost if the
    earlier write fails. A failed write never touches local state once
    ``load`` has run again.
    """

    def __init__(self, documents: DocumentStore, today: Callable[[], date] = _utc_today):
        self.documents = documents
        self.today = today

        self.user_id: Optional[str] = None
        self.goals: list[Goal] = []
        self.tasks: list[Task] = []
        self.habits: list[TrackedHabit] = []

        self.loaded = False
        self.loading = False
        self.saving = False
        self.error: Optional[str] = None

        self._listeners: list[Listener] = []
        # Bumped by every load so in-flight writes can tell they are stale
        self._generation = 0

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a callback run after every state change. Returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    def snapshot(self) -> ProductivityRecord:
        """Return an independent copy of the current record."""
        return ProductivityRecord(
            goals=self.goals,
            tasks=self.tasks,
            habits=self.habits,
        ).model_copy(deep=True)

    def _apply(self, record: ProductivityRecord) -> None:
        self.goals = list(record.goals)
        self.tasks = list(record.tasks)
        self.habits = list(record.habits)

    async def load(self, user_id: Optional[str]) -> None:
        """
        Load the composite record for a user.

        Signing out (``user_id`` None) clears everything without a fetch.
        A missing document yields empty collections. A failed fetch sets
        ``error`` and leaves the collections empty.
        """
        self.user_id = user_id
        self.error = None
        self._generation += 1

        if user_id is None:
            self._apply(ProductivityRecord())
            self.loading = False
            self.loaded = True
            self._notify()
            return

        self.loading = True
        self._notify()

        try:
            doc = await self.documents.get(user_id)
            record = ProductivityRecord() if doc is None else ProductivityRecord.model_validate(doc)
        except (RemoteStoreError, ValidationError) as e:
            if self.user_id != user_id:
                return
            logger.warning("Failed to load productivity record for %s: %s", user_id, e)
            self._apply(ProductivityRecord())
            self.error = "Unable to load productivity data."
        else:
            if self.user_id != user_id:
                # Another sign-in or sign-out replaced this load
                return
            self._apply(record)

        self.loading = False
        self.loaded = True
        self._notify()

    async def _commit(self, previous: ProductivityRecord, failure_message: str) -> bool:
        """Announce a local change and persist it, rolling back on failure."""
        self._notify()

        user_id = self.user_id
        if user_id is None:
            return True
        generation = self._generation

        self.saving = True
        try:
            await self.documents.set(user_id, self.snapshot().to_document())
        except RemoteStoreError as e:
            logger.warning("Failed to save productivity record for %s: %s", user_id, e)
            if self._generation == generation:
                self._apply(previous)
                self.error = failure_message
            return False
        finally:
            self.saving = False
            self._notify()

        if self._generation == generation:
            self.error = None
        return True

    async def add_task(
        self,
        title: str,
        priority: TaskPriority = TaskPriority.MEDIUM,
        category: str = DEFAULT_TASK_CATEGORY,
    ) -> Optional[Task]:
        """
        Add a task. Blank titles are ignored.

        Returns:
            The new task, or None if nothing was added or the save failed
        """
        title = title.strip()
        if not title:
            return None

        previous = self.snapshot()
        task = Task(
            id=generate_id(t.id for t in self.tasks),
            title=title,
            completed=False,
            priority=priority,
            category=category,
        )
        self.tasks = [*self.tasks, task]

        if not await self._commit(previous, "Unable to add task."):
            return None
        return task

    async def toggle_task(self, task_id: str) -> Optional[Task]:
        """Flip a task's completed flag. Unknown IDs are ignored."""
        if not any(t.id == task_id for t in self.tasks):
            return None

        previous = self.snapshot()
        toggled = next(t for t in self.tasks if t.id == task_id)
        toggled = toggled.model_copy(update={"completed": not toggled.completed})
        self.tasks = [toggled if t.id == task_id else t for t in self.tasks]

        if not await self._commit(previous, "Unable to update task."):
            return None
        return toggled

    async def delete_task(self, task_id: str) -> bool:
        """Remove a task. Returns False if it was not found or the save failed."""
        if not any(t.id == task_id for t in self.tasks):
            return False

        previous = self.snapshot()
        self.tasks = [t for t in self.tasks if t.id != task_id]

        return await self._commit(previous, "Unable to delete task.")

    async def add_goal(
        self,
        title: str,
        target_date: Optional[date] = None,
        category: str = DEFAULT_GOAL_CATEGORY,
    ) -> Optional[Goal]:
        """
        Add a goal with 0% progress. Blank titles are ignored.

        The target date defaults to 30 days from today.

        Returns:
            The new goal, or None if nothing was added or the save failed
        """
        title = title.strip()
        if not title:
            return None

        previous = self.snapshot()
        goal = Goal(
            id=generate_id(g.id for g in self.goals),
            title=title,
            progress=0,
            target_date=target_date or self.today() + timedelta(days=GOAL_HORIZON_DAYS),
            category=category or DEFAULT_GOAL_CATEGORY,
        )
        self.goals = [*self.goals, goal]

        if not await self._commit(previous, "Unable to add goal."):
            return None
        return goal

    async def update_goal_progress(self, goal_id: str, progress: float) -> Optional[Goal]:
        """Set a goal's progress, clamped to 0-100. Unknown IDs are ignored."""
        if not is_progress_value(progress) or not any(g.id == goal_id for g in self.goals):
            return None

        previous = self.snapshot()
        updated = next(g for g in self.goals if g.id == goal_id)
        updated = updated.model_copy(update={"progress": clamp_progress(progress)})
        self.goals = [updated if g.id == goal_id else g for g in self.goals]

        if not await self._commit(previous, "Unable to update goal."):
            return None
        return updated

    async def tick_habit(self, habit_id: str) -> Optional[TrackedHabit]:
        """Bump a habit's streak and record today as completed. Unknown IDs are ignored."""
        if not any(h.id == habit_id for h in self.habits):
            return None

        previous = self.snapshot()
        today = self.today().isoformat()

        habit = next(h for h in self.habits if h.id == habit_id)
        dates = habit.completed_dates
        if today not in dates:
            dates = [*dates, today]
        ticked = habit.model_copy(update={"streak": habit.streak + 1, "completed_dates": dates})
        self.habits = [ticked if h.id == habit_id else h for h in self.habits]

        if not await self._commit(previous, "Unable to update habit."):
            return None
        return ticked
