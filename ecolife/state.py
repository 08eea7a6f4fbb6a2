"""Process-local state backing the API. Not persisted: a restart re-seeds it."""
import threading

from ecolife.models.contact import ContactMessage
from ecolife.models.goal import Goal
from ecolife.models.habit import Habit
from ecolife.models.task import Task
from ecolife.seed import default_productivity_state


class InMemoryState:
    """
    In-memory collections shared by all requests.

    Handlers that find and then mutate an entry must hold ``lock`` for the
    whole sequence; sync handlers may run on worker threads.
    """

    goals: list[Goal]
    tasks: list[Task]
    habits: list[Habit]
    contact_messages: list[ContactMessage]

    def __init__(self):
        self.lock = threading.RLock()
        self.reset()

    def reset(self) -> None:
        """Restore the seed productivity data and drop contact messages."""
        seed = default_productivity_state()
        with self.lock:
            self.goals = seed.goals
            self.tasks = seed.tasks
            self.habits = seed.habits
            self.contact_messages = []


# Global state instance
state = InMemoryState()


def get_state() -> InMemoryState:
    """Dependency to get the in-memory state."""
    return state
