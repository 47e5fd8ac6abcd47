"""
Pydantic schemas for progress tracking and quizzes.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from yavin.core.catalog import MAX_TIME_SPENT_SECONDS


class ProgressUpdate(BaseModel):
    """Schema for a section progress update."""

    section_id: str
    completed: bool
    time_spent: Optional[int] = Field(
        default=None, ge=0, le=MAX_TIME_SPENT_SECONDS, description="Seconds spent on the section"
    )


class ProgressEntry(BaseModel):
    """Stored progress for one section."""

    model_config = ConfigDict(from_attributes=True)

    section_id: str
    completed: bool
    completed_at: Optional[datetime] = None
    time_spent_seconds: int = 0
    quiz_score: Optional[int] = None


class ProgressResponse(BaseModel):
    success: bool = True
    xp_earned: int
    total_xp: int
    streak_days: int


class QuizSubmission(BaseModel):
    """Schema for a quiz result."""

    section: str
    score: int
    total: int


class QuizResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    success: bool = True
    score: int
    total: int
    percentage: int
    bonus_xp: int = 0
    logged_in: bool
