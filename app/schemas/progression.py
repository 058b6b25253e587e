"""
Progression suggestion schemas.

A suggestion carries both machine-readable fields (weights, trend,
condition flags, badge) and the human-readable text produced by the
adjustment branch that fired.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

Confidence = Literal["low", "medium", "high"]


class ProgressionSuggestion(BaseModel):
    """Next-session weight recommendation for one exercise."""

    model_config = ConfigDict(frozen=True)

    exercise_id: int
    exercise_name: str
    is_first_time: bool

    proposed_heavy_weight: Optional[float] = Field(
        None, ge=0.0,
        description="Suggested working weight (None on first-time suggestions)",
    )
    proposed_light_weight: Optional[float] = Field(
        None, ge=0.0,
        description="Light-day weight, novice users only",
    )
    proposed_reps: Optional[int] = None

    last_weight: Optional[float] = None
    last_rpe: Optional[float] = None
    adjustment: float = Field(0.0, description="Clamped change applied to last_weight (kg)")
    trend: float = Field(0.0, description="Average weight change per session (kg)")
    confidence: Confidence = "low"
    badge: Optional[str] = None

    deload_recommended: bool = False
    plateau_detected: bool = False
    recent_failure: bool = False
    time_decay_multiplier: float = 1.0
    days_since_last_session: Optional[int] = None
    sessions_analyzed: int = 0

    reasoning: str = ""
    human_explanation: str = ""
