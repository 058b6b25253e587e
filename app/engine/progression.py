"""
Progression suggestion: next-session working weight for one exercise.

Only heavy (or untagged) sets are considered.  They are grouped into
per-session summaries, the trailing ``lookback_count`` sessions are
inspected for four conditions and exactly one adjustment branch fires:

    1. DELOAD WEEK    last N sessions all at RPE >= deload_rpe_threshold
    2. FAILED REPS    a failed set in either of the last two sessions
    3. TIME DECAY     long layoff (multiplier < 1.0)
    4. PLATEAU BOOST  same weight, low effort, no failures
    5. normal         RPE step plus a trend nudge

The adjustment is clamped per session, floored at ``min_weight`` and
rounded to the loadable increment.
"""

from __future__ import annotations

import datetime
import logging
import math
from collections import defaultdict
from typing import Iterable, NamedTuple, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from app.engine.common import HEAVY, LIGHT, parse_session_date, resolve_as_of
from app.schemas.library import ExerciseLibrary, ExerciseLibraryItem, UserLevel
from app.schemas.progression import Confidence, ProgressionSuggestion
from app.schemas.training import ExerciseSet, TrainingSession

logger = logging.getLogger(__name__)

# ======================================================================
# Configuration
# ======================================================================

FAILED_SET_RPE = 9.5
UNKNOWN_SET_RPE = 8.0
RECENT_FAILURE_WINDOW = 2
FIRST_TIME_REPS = 5

BADGE_DELOAD = "DELOAD WEEK"
BADGE_FAILED = "FAILED REPS"
BADGE_TIME_DECAY = "TIME DECAY"
BADGE_PLATEAU = "PLATEAU BOOST"


class ProgressionSettings(BaseModel):
    """Tunable constants of the progression policy."""

    model_config = ConfigDict(frozen=True)

    user_level: UserLevel = UserLevel.NOVICE
    lookback_count: int = Field(5, ge=1)
    round_to: float = Field(1.25, gt=0.0)
    increase_step: float = Field(2.5, ge=0.0)
    small_step: float = Field(1.25, ge=0.0)

    time_decay_thresholds: list[int] = Field(default_factory=lambda: [14, 30, 60])
    time_decay_multipliers: list[float] = Field(default_factory=lambda: [0.95, 0.90, 0.85])

    deload_threshold: int = Field(3, ge=1)
    deload_rpe_threshold: float = 9.0
    deload_percent: float = Field(0.70, gt=0.0, le=1.0)

    plateau_session_count: int = Field(3, ge=2)
    plateau_rpe_max: float = 8.0
    plateau_boost: float = Field(2.0, ge=0.0)

    max_increase_per_session: float = Field(5.0, ge=0.0)
    max_decrease_per_session: float = Field(50.0, ge=0.0)
    min_weight: float = Field(0.0, ge=0.0)
    light_percent: float = Field(0.80, gt=0.0, le=1.0)

    @model_validator(mode="after")
    def _check_time_decay_pairs(self) -> "ProgressionSettings":
        if len(self.time_decay_thresholds) != len(self.time_decay_multipliers):
            raise ValueError(
                "time_decay_thresholds and time_decay_multipliers must have the same length"
            )
        if self.time_decay_thresholds != sorted(self.time_decay_thresholds):
            raise ValueError("time_decay_thresholds must be in ascending order")
        return self


DEFAULT_PROGRESSION_SETTINGS = ProgressionSettings()


# ======================================================================
# Session summaries
# ======================================================================


class SessionSummary(NamedTuple):
    date: str
    max_weight: float
    reps_at_max: int
    rpe: float
    had_failure: bool


def _set_rpe(s: ExerciseSet) -> float:
    if s.rpe is not None:
        return s.rpe
    if s.completed is False:
        return FAILED_SET_RPE
    return UNKNOWN_SET_RPE


def _is_heavy(s: ExerciseSet) -> bool:
    return s.workout_type is None or s.workout_type == HEAVY


def extract_session_summaries(
    exercise_id: int,
    history: Iterable[TrainingSession],
) -> list[SessionSummary]:
    """Heavy-set summaries of one exercise, oldest first (date-string order)."""
    by_date: dict[str, list[ExerciseSet]] = defaultdict(list)
    for session in history:
        for s in session.exercises:
            if s.exercise_id == exercise_id and _is_heavy(s):
                by_date[session.date].append(s)

    summaries: list[SessionSummary] = []
    for date_str in sorted(by_date):
        sets = by_date[date_str]
        max_weight = max(s.weight for s in sets)
        top_sets = [s for s in sets if s.weight == max_weight]
        summaries.append(SessionSummary(
            date=date_str,
            max_weight=max_weight,
            reps_at_max=max(s.reps for s in top_sets),
            rpe=max(_set_rpe(s) for s in top_sets),
            had_failure=any(s.completed is False for s in sets),
        ))
    return summaries


# ======================================================================
# Metrics and condition detection
# ======================================================================


def calculate_trend(sessions: list[SessionSummary]) -> float:
    """Average weight change per session across *sessions*."""
    if len(sessions) < 2:
        return 0.0
    return (sessions[-1].max_weight - sessions[0].max_weight) / (len(sessions) - 1)


def days_since(date_str: str, today: datetime.date) -> Optional[int]:
    day = parse_session_date(date_str)
    if day is None:
        return None
    return max((today - day).days, 0)


def calculate_confidence(session_count: int, days: Optional[int]) -> Confidence:
    if session_count >= 5 and (days is None or days < 14):
        return "high"
    if session_count >= 3 and (days is None or days < 30):
        return "medium"
    return "low"


def time_decay_multiplier(
    days: Optional[int],
    settings: ProgressionSettings,
) -> float:
    """Multiplier of the largest threshold not exceeding *days* (1.0 if none)."""
    if days is None:
        return 1.0
    pairs = zip(settings.time_decay_thresholds, settings.time_decay_multipliers)
    for threshold, multiplier in reversed(list(pairs)):
        if days >= threshold:
            return multiplier
    return 1.0


def needs_deload(sessions: list[SessionSummary], settings: ProgressionSettings) -> bool:
    window = sessions[-settings.deload_threshold:]
    return (
        len(window) >= settings.deload_threshold
        and all(s.rpe >= settings.deload_rpe_threshold for s in window)
    )


def is_plateau(sessions: list[SessionSummary], settings: ProgressionSettings) -> bool:
    window = sessions[-settings.plateau_session_count:]
    if len(window) < settings.plateau_session_count:
        return False
    if len({s.max_weight for s in window}) != 1:
        return False
    if any(s.had_failure for s in window):
        return False
    average_rpe = sum(s.rpe for s in window) / len(window)
    return average_rpe <= settings.plateau_rpe_max


def has_recent_failure(sessions: list[SessionSummary]) -> bool:
    return any(s.had_failure for s in sessions[-RECENT_FAILURE_WINDOW:])


def rpe_step(rpe: float, settings: ProgressionSettings) -> float:
    if rpe <= 7.0:
        return settings.increase_step
    if rpe <= 8.5:
        return settings.small_step
    if rpe < 9.5:
        return 0.0
    return -settings.increase_step


def trend_nudge(trend: float, settings: ProgressionSettings) -> float:
    if trend > 0:
        return settings.small_step
    if trend < 0:
        return -settings.small_step
    return 0.0


def round_to_increment(value: float, increment: float) -> float:
    """Nearest multiple of *increment*; exact halves round up."""
    if increment <= 0:
        return value
    return round(math.floor(value / increment + 0.5) * increment, 6)


def suggest_rpe(user_level: UserLevel, workout_type: str) -> float:
    """Default RPE slider value for a new set."""
    novice = user_level == UserLevel.NOVICE
    if workout_type == LIGHT:
        return 7.0 if novice else 7.5
    return 8.0 if novice else 8.5


# ======================================================================
# Suggestion builders
# ======================================================================


def _exercise_name(lib: ExerciseLibrary, exercise_id: int) -> str:
    exercise = lib.get(exercise_id)
    return exercise.name if exercise is not None else "Unknown"


def _first_time_suggestion(exercise_id: int, name: str) -> ProgressionSuggestion:
    return ProgressionSuggestion(
        exercise_id=exercise_id,
        exercise_name=name,
        is_first_time=True,
        proposed_reps=FIRST_TIME_REPS,
        confidence="low",
        reasoning="New exercise",
        human_explanation=f"First time! Start light. Aim for {FIRST_TIME_REPS} clean reps.",
    )


class _Branch(NamedTuple):
    adjustment: float
    badge: Optional[str]
    reasoning: str
    explanation: str


def _choose_branch(
    last: SessionSummary,
    trend: float,
    days: Optional[int],
    decay: float,
    deload: bool,
    plateau: bool,
    failure: bool,
    settings: ProgressionSettings,
) -> _Branch:
    """Priority cascade: the first matching rule wins."""
    if deload:
        new_weight = last.max_weight * settings.deload_percent
        percent = round((1.0 - settings.deload_percent) * 100)
        return _Branch(
            adjustment=new_weight - last.max_weight,
            badge=BADGE_DELOAD,
            reasoning=(
                f"Last {settings.deload_threshold} sessions at RPE "
                f"{settings.deload_rpe_threshold:g}+. -{percent}% deload"
            ),
            explanation="You've been grinding hard. Take a lighter week to recover.",
        )

    if failure:
        return _Branch(
            adjustment=-settings.increase_step,
            badge=BADGE_FAILED,
            reasoning=f"Missed reps recently. -{settings.increase_step:g}kg to reset",
            explanation="Missed reps last time. Back off slightly and build again.",
        )

    if decay < 1.0:
        new_weight = last.max_weight * decay
        percent = round((1.0 - decay) * 100)
        return _Branch(
            adjustment=new_weight - last.max_weight,
            badge=BADGE_TIME_DECAY,
            reasoning=f"{days} days off. -{percent}% reset",
            explanation="Welcome back! Ease in after the break.",
        )

    if plateau:
        base = settings.increase_step if last.rpe <= 7.0 else settings.small_step
        adjustment = base * settings.plateau_boost
        return _Branch(
            adjustment=adjustment,
            badge=BADGE_PLATEAU,
            reasoning=(
                f"Same weight for {settings.plateau_session_count} sessions at low effort. "
                f"+{adjustment:g}kg"
            ),
            explanation="You've outgrown this weight. Time for a bigger jump.",
        )

    adjustment = rpe_step(last.rpe, settings) + trend_nudge(trend, settings)
    if adjustment > 0:
        explanation = "Strong work! Add weight."
    elif adjustment < 0:
        explanation = "That was a grind. Ease off a little."
    else:
        explanation = "Let's stabilize here."
    return _Branch(
        adjustment=adjustment,
        badge=None,
        reasoning=f"Last RPE {last.rpe:.1f}, trend {trend:+.2f}kg/session",
        explanation=explanation,
    )


# ======================================================================
# Main entry point
# ======================================================================


def get_suggestion(
    exercise_id: int,
    history: Iterable[TrainingSession],
    library: ExerciseLibrary | Iterable[ExerciseLibraryItem] | None,
    settings: Optional[ProgressionSettings] = None,
    as_of: Optional[datetime.datetime] = None,
) -> ProgressionSuggestion:
    """Suggest the next heavy working weight for *exercise_id*.

    Args:
        exercise_id: Exercise to suggest for.
        history: Logged sessions.
        library: Exercise library (or a list of items), used for the name.
        settings: Optional progression settings override.
        as_of: Reference datetime (defaults to now).

    Returns:
        :class:`ProgressionSuggestion`.  Without any heavy history a
        first-time suggestion with no weights is returned.
    """
    cfg = settings or DEFAULT_PROGRESSION_SETTINGS
    lib = ExerciseLibrary.coerce(library)
    name = _exercise_name(lib, exercise_id)
    today = resolve_as_of(as_of).date()

    sessions = extract_session_summaries(exercise_id, history)[-cfg.lookback_count:]
    if not sessions:
        return _first_time_suggestion(exercise_id, name)

    last = sessions[-1]
    trend = calculate_trend(sessions)
    days = days_since(last.date, today)
    confidence = calculate_confidence(len(sessions), days)

    deload = needs_deload(sessions, cfg)
    plateau = is_plateau(sessions, cfg)
    failure = has_recent_failure(sessions)
    decay = time_decay_multiplier(days, cfg)

    branch = _choose_branch(last, trend, days, decay, deload, plateau, failure, cfg)

    adjustment = min(
        max(branch.adjustment, -cfg.max_decrease_per_session),
        cfg.max_increase_per_session,
    )
    heavy = round_to_increment(max(last.max_weight + adjustment, cfg.min_weight), cfg.round_to)
    light = (
        round_to_increment(heavy * cfg.light_percent, cfg.round_to)
        if cfg.user_level == UserLevel.NOVICE
        else None
    )

    logger.debug(
        "Suggestion for exercise %s: %.2f -> %.2f (badge=%s)",
        exercise_id, last.max_weight, heavy, branch.badge,
    )

    return ProgressionSuggestion(
        exercise_id=exercise_id,
        exercise_name=name,
        is_first_time=False,
        proposed_heavy_weight=heavy,
        proposed_light_weight=light,
        proposed_reps=last.reps_at_max,
        last_weight=last.max_weight,
        last_rpe=last.rpe,
        adjustment=adjustment,
        trend=trend,
        confidence=confidence,
        badge=branch.badge,
        deload_recommended=deload,
        plateau_detected=plateau,
        recent_failure=failure,
        time_decay_multiplier=decay,
        days_since_last_session=days,
        sessions_analyzed=len(sessions),
        reasoning=branch.reasoning,
        human_explanation=branch.explanation,
    )
