"""
Pydantic models for habits
"""
from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict, Field


class Habit(BaseModel):
    """A tracked habit and the days it was completed"""
    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., description="Identifier assigned at creation")
    name: str = Field(..., min_length=1, description="Habit name")
    daily_goal: Any = Field(..., alias="dailyGoal", description="Daily goal, stored as given")
    progress: List[str] = Field(default_factory=list, description="Completion dates in YYYY-MM-DD format")


class AddHabitRequest(BaseModel):
    """Request model for adding a new habit"""
    model_config = ConfigDict(populate_by_name=True)

    # Presence is checked by the service so both fields stay optional here
    name: Optional[str] = Field(None, description="Habit name")
    daily_goal: Any = Field(None, alias="dailyGoal", description="Daily goal, any non-empty value")


class WeeklyReportEntry(BaseModel):
    """One habit's line in the weekly report"""
    model_config = ConfigDict(populate_by_name=True)

    name: str
    weekly_completion: int = Field(..., alias="weeklyCompletion")
    daily_goal: Any = Field(..., alias="dailyGoal")
