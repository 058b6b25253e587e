"""
Fatigue and readiness schemas.

Fatigue is tracked on three channels:

- ``lower``:    lower-body regional fatigue
- ``upper``:    upper-body regional fatigue
- ``systemic``: whole-body (CNS) fatigue

When computed directly from logged sets, ``systemic = lower + upper``.
External activities and the continuous timeline carry ``systemic`` as an
independent quantity.
"""

from __future__ import annotations

import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class FatigueScores(BaseModel):
    """Three-channel fatigue value.  All channels are non-negative."""

    model_config = ConfigDict(frozen=True)

    lower: float = Field(0.0, ge=0.0, description="Lower-body fatigue")
    upper: float = Field(0.0, ge=0.0, description="Upper-body fatigue")
    systemic: float = Field(0.0, ge=0.0, description="Systemic / CNS fatigue")

    def add(self, other: FatigueScores) -> FatigueScores:
        """Channel-wise addition."""
        return FatigueScores(
            lower=self.lower + other.lower,
            upper=self.upper + other.upper,
            systemic=self.systemic + other.systemic,
        )

    @classmethod
    def zero(cls) -> FatigueScores:
        return cls()


class ActivityType(str, Enum):
    """Activity-type code of an externally recorded workout."""
    RUNNING = "RUNNING"
    FOOTBALL_AMERICAN = "FOOTBALL_AMERICAN"
    SOCCER = "SOCCER"
    HIKING = "HIKING"
    BIKING = "BIKING"
    BIKING_STATIONARY = "BIKING_STATIONARY"
    SWIMMING_POOL = "SWIMMING_POOL"
    SWIMMING_OPEN_WATER = "SWIMMING_OPEN_WATER"
    WEIGHTLIFTING = "WEIGHTLIFTING"
    WALKING = "WALKING"
    YOGA = "YOGA"
    OTHER = "OTHER"


class ExternalActivity(BaseModel):
    """A workout recorded outside the app, already fatigue-scored upstream."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Deduplication key assigned upstream")
    start_time: datetime.datetime
    end_time: datetime.datetime
    activity_type: ActivityType = ActivityType.OTHER
    fatigue: FatigueScores = Field(default_factory=FatigueScores)
    ignored: bool = False
    ignore_reason: Optional[str] = None


class ActivityStatus(str, Enum):
    GREEN = "GREEN"    # ready to go
    YELLOW = "YELLOW"  # caution
    RED = "RED"        # blocked, rest required


class ActivityReadiness(BaseModel):
    """Readiness for one activity category."""

    model_config = ConfigDict(frozen=True)

    status: ActivityStatus
    time_until_fresh_ms: Optional[int] = Field(
        None, ge=0,
        description="Milliseconds until recovered (None when already fresh)",
    )
    message: str


class ReadinessResponse(BaseModel):
    """Current fatigue plus per-activity readiness."""

    fatigue: FatigueScores
    run_cycle: ActivityReadiness
    swim: ActivityReadiness
    lower_lift: ActivityReadiness
    upper_lift: ActivityReadiness
    as_of: datetime.datetime
    context_note: str


class FatiguePoint(BaseModel):
    """Post-decay fatigue at one hourly bucket of the timeline."""

    model_config = ConfigDict(frozen=True)

    timestamp: datetime.datetime = Field(..., description="Start of the hour bucket")
    fatigue: FatigueScores


class FatigueTimeline(BaseModel):
    """Hourly simulated fatigue plus one end-of-day snapshot per day."""

    graph_points: list[FatiguePoint] = Field(default_factory=list)
    daily_end_values: dict[datetime.date, FatigueScores] = Field(default_factory=dict)


class DailyFatigue(BaseModel):
    """End-of-day fatigue for one calendar day."""

    model_config = ConfigDict(frozen=True)

    date: datetime.date
    end_of_day: FatigueScores
    raw_systemic: float = Field(
        0.0, ge=0.0,
        description="Systemic fatigue logged on this day, before any decay",
    )
