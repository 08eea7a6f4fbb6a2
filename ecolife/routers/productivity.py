"""Productivity router - API endpoints for goals, tasks and habits."""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status

from ecolife.models.goal import Goal, GoalCreate, GoalUpdate
from ecolife.models.habit import Habit
from ecolife.models.productivity import ProductivitySnapshot
from ecolife.models.task import Task, TaskCreate
from ecolife.services.productivity_service import ProductivityService
from ecolife.state import get_state


router = APIRouter(prefix="/api/productivity", tags=["productivity"])


@router.get("", response_model=ProductivitySnapshot)
async def get_productivity(state=Depends(get_state)):
    """Return the full goals, tasks and habits snapshot."""
    service = ProductivityService(state)
    return service.get_snapshot()


@router.post("/goals", response_model=Goal, status_code=status.HTTP_201_CREATED)
async def create_goal(
    goal: Optional[GoalCreate] = None,
    state=Depends(get_state),
):
    """
    Create a new goal.

    - Title is required (400 otherwise)
    - Progress starts at 0
    - Target date defaults to 30 days from now, category to "Personal"
    """
    service = ProductivityService(state)
    try:
        return service.create_goal(goal or GoalCreate())
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.patch("/goals/{goal_id}", response_model=Goal)
async def update_goal(
    goal_id: str,
    goal_update: Optional[GoalUpdate] = None,
    state=Depends(get_state),
):
    """
    Update goal progress.

    - Numeric progress is clamped to 0-100
    - Returns the goal unchanged when progress is omitted
    - Returns 404 if goal not found
    """
    service = ProductivityService(state)
    try:
        return service.update_goal(goal_id, goal_update or GoalUpdate())
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("/tasks", response_model=Task, status_code=status.HTTP_201_CREATED)
async def create_task(
    task: Optional[TaskCreate] = None,
    state=Depends(get_state),
):
    """
    Create a new task.

    - Title is required (400 otherwise)
    - Defaults: not completed, medium priority, "General" category
    """
    service = ProductivityService(state)
    try:
        return service.create_task(task or TaskCreate())
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.patch("/tasks/{task_id}/toggle", response_model=Task)
async def toggle_task(task_id: str, state=Depends(get_state)):
    """Flip a task's completed flag. Returns 404 if task not found."""
    service = ProductivityService(state)
    try:
        return service.toggle_task(task_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.delete("/tasks/{task_id}")
async def delete_task(task_id: str, state=Depends(get_state)):
    """Remove a task. Returns 404 if task not found."""
    service = ProductivityService(state)
    try:
        return service.delete_task(task_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("/habits/{habit_id}/tick", response_model=Habit)
async def tick_habit(habit_id: str, state=Depends(get_state)):
    """Increment a habit's streak. Returns 404 if habit not found."""
    service = ProductivityService(state)
    try:
        return service.tick_habit(habit_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
