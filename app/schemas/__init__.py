"""Pydantic schemas for training history, library metadata and engine results."""

from app.schemas.library import (
    BodyRegion,
    ExerciseLibrary,
    ExerciseLibraryItem,
    Mechanics,
    MovementPattern,
    TargetMuscle,
    Tier,
    UserLevel,
)
from app.schemas.training import ExerciseSet, TrainingSession, sanitize_rpe
from app.schemas.fatigue import (
    ActivityReadiness,
    ActivityStatus,
    ActivityType,
    DailyFatigue,
    ExternalActivity,
    FatiguePoint,
    FatigueScores,
    FatigueTimeline,
    ReadinessResponse,
)
from app.schemas.strength import OneRMEstimationResult, OneRMSessionPoint
from app.schemas.progression import ProgressionSuggestion

__all__ = [
    "BodyRegion",
    "ExerciseLibrary",
    "ExerciseLibraryItem",
    "Mechanics",
    "MovementPattern",
    "TargetMuscle",
    "Tier",
    "UserLevel",
    "ExerciseSet",
    "TrainingSession",
    "sanitize_rpe",
    "ActivityReadiness",
    "ActivityStatus",
    "ActivityType",
    "DailyFatigue",
    "ExternalActivity",
    "FatiguePoint",
    "FatigueScores",
    "FatigueTimeline",
    "ReadinessResponse",
    "OneRMEstimationResult",
    "OneRMSessionPoint",
    "ProgressionSuggestion",
]
