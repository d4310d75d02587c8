"""
Habit Routes - Endpoints for habit management
"""
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException

from habit_tracker.core.dependencies import get_habit_repository
from habit_tracker.core.exceptions import HabitNotFoundError, InvalidHabitDataError
from habit_tracker.models.habit import AddHabitRequest
from habit_tracker.services import habits as habit_service
from habit_tracker.services.habits.repository import HabitRepository

router = APIRouter(prefix="/habits", tags=["habits"])


@router.post("", status_code=201)
async def add_habit(request: Optional[AddHabitRequest] = None,
                    repository: HabitRepository = Depends(get_habit_repository)):
    """Add a new habit with a daily goal"""
    if request is None:
        request = AddHabitRequest()
    try:
        return habit_service.add_habit(repository, request.name, request.daily_goal)
    except InvalidHabitDataError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("")
async def get_habits(repository: HabitRepository = Depends(get_habit_repository)):
    """Get all habits and their progress"""
    return habit_service.get_all_habits(repository)


@router.get("/report")
async def get_weekly_report(repository: HabitRepository = Depends(get_habit_repository)):
    """Get each habit's completions over the trailing week"""
    return habit_service.get_weekly_report(repository)


@router.put("/{habit_id}")
async def complete_habit(habit_id: str, repository: HabitRepository = Depends(get_habit_repository)):
    """Mark a habit as complete for today"""
    try:
        return habit_service.complete_habit(repository, habit_id)
    except HabitNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
