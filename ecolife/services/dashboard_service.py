"""Dashboard service - usage counts across the in-memory collections."""
from ecolife.models.productivity import DashboardStats
from ecolife.state import InMemoryState


class DashboardService:
    """Service for summarizing stored data."""

    def __init__(self, state: InMemoryState):
        self.state = state

    def get_stats(self) -> DashboardStats:
        with self.state.lock:
            return DashboardStats(
                contacts=len(self.state.contact_messages),
                goals=len(self.state.goals),
                tasks=len(self.state.tasks),
                habits=len(self.state.habits),
            )
