"""Training analytics engines: fatigue/readiness, 1RM estimation, progression."""

from app.engine.config import DEFAULT_READINESS_CONFIG, ReadinessConfig, Thresholds
from app.engine.fatigue import calculate_fatigue_scores, get_decayed_score
from app.engine.progression import ProgressionSettings, get_suggestion, suggest_rpe
from app.engine.readiness import evaluate_readiness
from app.engine.strength import (
    EstimationSettings,
    calculate_one_rm,
    estimate_one_rm_progression,
)
from app.engine.timeline import (
    calculate_continuous_fatigue_timeline,
    calculate_daily_fatigue_with_decay,
)

__all__ = [
    "DEFAULT_READINESS_CONFIG",
    "ReadinessConfig",
    "Thresholds",
    "calculate_fatigue_scores",
    "get_decayed_score",
    "ProgressionSettings",
    "get_suggestion",
    "suggest_rpe",
    "evaluate_readiness",
    "EstimationSettings",
    "calculate_one_rm",
    "estimate_one_rm_progression",
    "calculate_continuous_fatigue_timeline",
    "calculate_daily_fatigue_with_decay",
]
