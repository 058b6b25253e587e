"""
Training history schemas.

A :class:`TrainingSession` is one logged workout: a date and the ordered
list of sets performed.  Sets are immutable once logged.

Dates are day-granularity strings in the ``yyyy/MM/dd`` format used by the
logging app (e.g. ``"2026/02/08"``).  The engine parses them lazily and
skips any record whose date does not parse.
"""

from __future__ import annotations

import uuid
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

RPE_MIN = 6.0
RPE_MAX = 10.0

WorkoutType = Literal["heavy", "light", "custom"]


def sanitize_rpe(value: Optional[float]) -> Optional[float]:
    """Return *value* if it lies in the accepted RPE domain, else ``None``.

    Out-of-range RPE is treated as absent, never clamped.
    """
    if value is None:
        return None
    try:
        rpe = float(value)
    except (TypeError, ValueError):
        return None
    if rpe != rpe or not RPE_MIN <= rpe <= RPE_MAX:
        return None
    return rpe


class ExerciseSet(BaseModel):
    """A single logged set."""

    model_config = ConfigDict(frozen=True)

    exercise_id: int
    exercise_name: str = ""
    set_number: int = Field(1, ge=1)
    date: str = Field(..., description="Session date, yyyy/MM/dd")
    weight: float = Field(..., ge=0.0, description="Load in kilograms")
    reps: int = Field(..., ge=1)
    rpe: Optional[float] = Field(
        None,
        description="Rate of perceived exertion (6.0-10.0); other values are dropped",
    )
    completed: Optional[bool] = Field(
        None,
        description="False when the set was explicitly marked incomplete",
    )
    note: Optional[str] = None
    workout_type: Optional[WorkoutType] = None

    @field_validator("rpe", mode="before")
    @classmethod
    def _drop_out_of_range_rpe(cls, value):
        return sanitize_rpe(value)

    @field_validator("workout_type", mode="before")
    @classmethod
    def _lowercase_workout_type(cls, value):
        if isinstance(value, str):
            return value.lower()
        return value


class TrainingSession(BaseModel):
    """One logged workout."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    training_number: int = Field(0, ge=0)
    date: str = Field(..., description="Session date, yyyy/MM/dd")
    exercises: list[ExerciseSet] = Field(default_factory=list)
    default_workout_type: Optional[str] = None
    duration_seconds: Optional[int] = Field(
        None, ge=0,
        description="Session duration; the session is assumed to start at noon",
    )
    plan_id: Optional[str] = None
    plan_name: Optional[str] = None
