"""
Request bodies of the analytics API.

The API is stateless: every request carries the training-history snapshot
(and, optionally, the exercise library and engine config) it should be
evaluated against.  A missing library means the built-in one.
"""

from __future__ import annotations

import datetime
from typing import Optional

from pydantic import BaseModel, Field

from app.engine.config import ReadinessConfig
from app.engine.progression import ProgressionSettings
from app.engine.strength import EstimationSettings
from app.schemas.fatigue import ActivityType, ExternalActivity
from app.schemas.library import ExerciseLibraryItem
from app.schemas.training import TrainingSession


class HistoryRequest(BaseModel):
    history: list[TrainingSession] = Field(default_factory=list)
    library: Optional[list[ExerciseLibraryItem]] = Field(
        None, description="Exercise library; the built-in library when omitted",
    )
    as_of: Optional[datetime.datetime] = Field(
        None, description="Reference datetime (defaults to now)",
    )


class SessionFatigueRequest(BaseModel):
    session: TrainingSession
    library: Optional[list[ExerciseLibraryItem]] = None
    config: Optional[ReadinessConfig] = None


class ReadinessRequest(HistoryRequest):
    config: Optional[ReadinessConfig] = None
    activities: list[ExternalActivity] = Field(default_factory=list)


class DailyFatigueRequest(ReadinessRequest):
    days_back: int = Field(7, ge=1, le=90)


class OneRMRequest(HistoryRequest):
    exercise_id: int
    settings: EstimationSettings = Field(default_factory=EstimationSettings)


class ProgressionRequest(HistoryRequest):
    exercise_id: int
    settings: Optional[ProgressionSettings] = None


class RawActivity(BaseModel):
    """An unscored workout as reported by a health platform."""

    id: Optional[str] = None
    activity_type: ActivityType = ActivityType.OTHER
    start_time: datetime.datetime
    end_time: datetime.datetime


class ActivityScoringRequest(BaseModel):
    activities: list[RawActivity] = Field(default_factory=list)
    history: list[TrainingSession] = Field(
        default_factory=list,
        description="Logged workouts used to flag duplicate activities",
    )
