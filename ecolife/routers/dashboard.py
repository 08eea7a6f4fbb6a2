"""Dashboard router - usage counts."""
from fastapi import APIRouter, Depends

from ecolife.models.productivity import DashboardStats
from ecolife.services.dashboard_service import DashboardService
from ecolife.state import get_state


router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardStats)
async def get_dashboard(state=Depends(get_state)):
    """Counts of contact messages, goals, tasks and habits."""
    return DashboardService(state).get_stats()
