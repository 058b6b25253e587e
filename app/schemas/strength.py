"""
One-repetition-maximum estimation schemas.
"""

from __future__ import annotations

import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class OneRMSessionPoint(BaseModel):
    """Best estimated 1RM of one session (chart point)."""

    model_config = ConfigDict(frozen=True)

    date: datetime.date
    one_rm: float = Field(..., ge=0.0)
    workout_type: str = Field("heavy", description="Normalised session workout type")


class OneRMEstimationResult(BaseModel):
    """Projected 1RM trend for one exercise."""

    model_config = ConfigDict(frozen=True)

    current_1rm: float = Field(..., ge=0.0, description="1RM of the most recent session")
    expected_1rm: float = Field(..., description="Damped projection at projection_date")
    projection_date: Optional[datetime.date] = None
    improvement_kg: float
    improvement_percent: float
    is_qualified: bool = Field(
        ...,
        description="Enough, recent and consistent data for a trustworthy projection",
    )
    warnings: list[str] = Field(default_factory=list)
    slope_kg_per_day: float = 0.0
    standard_error: float = 0.0
    sessions: list[OneRMSessionPoint] = Field(default_factory=list)
