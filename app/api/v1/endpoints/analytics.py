"""
Analytics endpoints: fatigue, readiness, 1RM projection and progression.
"""

from typing import Optional

from fastapi import APIRouter

from app.engine.fatigue import calculate_fatigue_scores
from app.engine.progression import get_suggestion
from app.engine.readiness import evaluate_readiness
from app.engine.strength import (
    estimate_one_rm_progression,
    session_workout_types,
    sets_for_exercise,
)
from app.engine.timeline import (
    calculate_continuous_fatigue_timeline,
    calculate_daily_fatigue_with_decay,
)
from app.library import default_library
from app.schemas.analytics import (
    DailyFatigueRequest,
    OneRMRequest,
    ProgressionRequest,
    ReadinessRequest,
    SessionFatigueRequest,
)
from app.schemas.fatigue import (
    DailyFatigue,
    FatigueScores,
    FatigueTimeline,
    ReadinessResponse,
)
from app.schemas.library import ExerciseLibrary, ExerciseLibraryItem
from app.schemas.progression import ProgressionSuggestion
from app.schemas.strength import OneRMEstimationResult

router = APIRouter()


def _library(items: Optional[list[ExerciseLibraryItem]]) -> ExerciseLibrary:
    if items is None:
        return default_library()
    return ExerciseLibrary(items)


@router.post(
    "/fatigue",
    summary="Raw fatigue deposited by one session.",
    response_model=FatigueScores,
)
def get_session_fatigue(body: SessionFatigueRequest):
    return calculate_fatigue_scores(body.session, _library(body.library), body.config)


@router.post(
    "/readiness",
    summary="Current fatigue and per-activity readiness.",
    response_model=ReadinessResponse,
)
def get_readiness(body: ReadinessRequest):
    return evaluate_readiness(
        body.history,
        _library(body.library),
        body.config,
        body.activities,
        as_of=body.as_of,
    )


@router.post(
    "/timeline",
    summary="Hourly fatigue simulation from 7 days back to 48 hours ahead.",
    response_model=FatigueTimeline,
)
def get_timeline(body: ReadinessRequest):
    return calculate_continuous_fatigue_timeline(
        body.history,
        _library(body.library),
        body.config,
        body.activities,
        as_of=body.as_of,
    )


@router.post(
    "/daily-fatigue",
    summary="End-of-day fatigue for each of the last N days.",
    response_model=list[DailyFatigue],
)
def get_daily_fatigue(body: DailyFatigueRequest):
    return calculate_daily_fatigue_with_decay(
        body.history,
        _library(body.library),
        body.config,
        body.activities,
        days_back=body.days_back,
        as_of=body.as_of,
    )


@router.post(
    "/one-rm",
    summary="Projected 1RM of one exercise.",
    response_model=OneRMEstimationResult,
)
def get_one_rm_projection(body: OneRMRequest):
    return estimate_one_rm_progression(
        sets_for_exercise(body.history, body.exercise_id),
        session_workout_types(body.history),
        projection_months=body.settings.projection_months,
        min_data_points=body.settings.min_data_points,
        recent_data_window_days=body.settings.recent_data_window_days,
        as_of=body.as_of,
    )


@router.post(
    "/progression",
    summary="Next-session weight suggestion for one exercise.",
    response_model=ProgressionSuggestion,
)
def get_progression(body: ProgressionRequest):
    return get_suggestion(
        body.exercise_id,
        body.history,
        _library(body.library),
        body.settings,
        as_of=body.as_of,
    )
