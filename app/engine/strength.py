"""
One-repetition-maximum estimation and projection.

Per-set 1RM
-----------
Sets are normalised to "reps at failure" with the reps in reserve implied
by RPE, then converted with a formula suited to the rep range:

    effective_reps = reps + (10 - rpe)        (reps when RPE is absent)
    effective_reps <= 8   → Epley:    w × (1 + r / 30)
    9 <= r <= 36          → Brzycki:  w × 36 / (37 - r)

Sets logged below RPE 6.5 are not predictive and sets beyond 15 effective
reps are statistically unreliable; both yield no estimate.

Projection
----------
The best 1RM of each session forms a series that is fitted with a
recency-weighted linear regression (``w = e^(-0.02 × days_ago)``, roughly
a 35-day half-life of influence).  The projected gain is damped by a
factor that shrinks with the projection horizon (diminishing returns).
"""

from __future__ import annotations

import datetime
import logging
import math
from collections import defaultdict
from typing import Iterable, Mapping, NamedTuple, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.engine.common import (
    add_months,
    normalize_workout_type,
    parse_session_date,
    resolve_as_of,
)
from app.schemas.strength import OneRMEstimationResult, OneRMSessionPoint
from app.schemas.training import ExerciseSet, TrainingSession, sanitize_rpe

logger = logging.getLogger(__name__)

# ======================================================================
# Configuration
# ======================================================================

MIN_PREDICTIVE_RPE = 6.5
MAX_RELIABLE_REPS = 15
EPLEY_MAX_REPS = 8
BRZYCKI_LIMIT_REPS = 37

RECENCY_LAMBDA = 0.02
MAX_COEFFICIENT_OF_VARIATION = 0.15

# (max projection months, damping factor), checked in order.
_DAMPING_TABLE: list[tuple[int, float]] = [
    (1, 1.0),
    (2, 0.9),
    (3, 0.8),
    (6, 0.5),
]
_LONG_HORIZON_DAMPING = 0.3


class EstimationSettings(BaseModel):
    """Settings for the 1RM projection."""

    model_config = ConfigDict(frozen=True)

    projection_months: int = Field(3, ge=1, le=24)
    min_data_points: int = Field(4, ge=1, description="Sessions needed for a qualified estimate")
    recent_data_window_days: int = Field(30, ge=1, description="Maximum age of the last session")


DEFAULT_ESTIMATION_SETTINGS = EstimationSettings()


# ======================================================================
# Per-set 1RM
# ======================================================================


def calculate_one_rm(
    weight: float,
    actual_reps: int,
    rpe: Optional[float] = None,
) -> Optional[float]:
    """Estimate 1RM from one set.

    Args:
        weight: Weight lifted (kg).
        actual_reps: Repetitions performed.
        rpe: Optional RPE; values outside 6.0-10.0 are treated as absent.

    Returns:
        Estimated 1RM in kg, or ``None`` if the set is not predictive.
    """
    rpe = sanitize_rpe(rpe)
    if rpe is not None and rpe < MIN_PREDICTIVE_RPE:
        return None

    if rpe is not None:
        effective_reps = int(actual_reps + (10.0 - rpe))
    else:
        effective_reps = actual_reps

    if effective_reps > MAX_RELIABLE_REPS:
        return None
    if effective_reps <= 1:
        return weight
    if effective_reps <= EPLEY_MAX_REPS:
        return weight * (1.0 + effective_reps / 30.0)
    if effective_reps >= BRZYCKI_LIMIT_REPS:
        return None
    return weight * (36.0 / (37.0 - effective_reps))


def get_damping_factor(projection_months: int) -> float:
    """Damping applied to projected gains for a horizon of *projection_months*."""
    for max_months, factor in _DAMPING_TABLE:
        if projection_months <= max_months:
            return factor
    return _LONG_HORIZON_DAMPING


# ======================================================================
# Weighted regression
# ======================================================================


class RegressionResult(NamedTuple):
    slope: float
    intercept: float
    standard_error: float
    mean_x: float
    sum_squared_deviations: float


def perform_weighted_linear_regression(
    points: list[tuple[datetime.date, float]],
    today: datetime.date,
) -> RegressionResult:
    """Recency-weighted least squares over ``(date, 1RM)`` points.

    X is days since the first point; each point is weighted by
    ``exp(-0.02 × days_ago)`` relative to *today*.  A zero X spread gives a
    zero slope.
    """
    first = points[0][0]
    xs = [float((d - first).days) for d, _ in points]
    ys = [v for _, v in points]
    weights = [math.exp(-RECENCY_LAMBDA * (today - d).days) for d, _ in points]

    sum_w = sum(weights)
    mean_x = sum(w * x for w, x in zip(weights, xs)) / sum_w
    mean_y = sum(w * y for w, y in zip(weights, ys)) / sum_w

    numerator = 0.0
    denominator = 0.0
    for w, x, y in zip(weights, xs, ys):
        numerator += w * (x - mean_x) * (y - mean_y)
        denominator += w * (x - mean_x) ** 2

    slope = numerator / denominator if denominator != 0.0 else 0.0
    intercept = mean_y - slope * mean_x

    weighted_sq_residuals = sum(
        w * (y - (slope * x + intercept)) ** 2
        for w, x, y in zip(weights, xs, ys)
    )
    sum_w_sq = sum(w * w for w in weights)
    effective_n = sum_w * sum_w / sum_w_sq if sum_w_sq > 0 else float(len(points))
    if effective_n > 2.0 and sum_w > 0:
        standard_error = math.sqrt(weighted_sq_residuals / (effective_n - 2.0) / sum_w)
    else:
        standard_error = 0.0

    return RegressionResult(
        slope=slope,
        intercept=intercept,
        standard_error=standard_error,
        mean_x=mean_x,
        sum_squared_deviations=denominator,
    )


# ======================================================================
# Input collection
# ======================================================================


def sets_for_exercise(
    history: Iterable[TrainingSession],
    exercise_id: int,
) -> list[ExerciseSet]:
    """All logged sets of one exercise, in history order."""
    return [
        s
        for session in history
        for s in session.exercises
        if s.exercise_id == exercise_id
    ]


def session_workout_types(history: Iterable[TrainingSession]) -> dict[str, str]:
    """Map each session date to its declared default workout type."""
    return {
        session.date: session.default_workout_type
        for session in history
        if session.default_workout_type
    }


def _session_points(
    sets: Iterable[ExerciseSet],
    workout_types: Mapping[str, Optional[str]],
) -> list[OneRMSessionPoint]:
    by_date: dict[str, list[ExerciseSet]] = defaultdict(list)
    for s in sets:
        by_date[s.date].append(s)

    points: list[OneRMSessionPoint] = []
    for date_str, session_sets in by_date.items():
        day = parse_session_date(date_str)
        if day is None:
            continue
        estimates = [
            one_rm
            for one_rm in (calculate_one_rm(s.weight, s.reps, s.rpe) for s in session_sets)
            if one_rm is not None
        ]
        if not estimates:
            continue
        points.append(OneRMSessionPoint(
            date=day,
            one_rm=max(estimates),
            workout_type=normalize_workout_type(workout_types.get(date_str)),
        ))

    points.sort(key=lambda p: p.date)
    return points


def _coefficient_of_variation(values: list[float]) -> float:
    mean = sum(values) / len(values)
    if mean <= 0:
        return 0.0
    variance = sum((v - mean) ** 2 for v in values) / len(values)
    return math.sqrt(variance) / mean


# ======================================================================
# Main entry point
# ======================================================================


def estimate_one_rm_progression(
    sets: Iterable[ExerciseSet],
    session_workout_types: Optional[Mapping[str, Optional[str]]] = None,
    projection_months: int = DEFAULT_ESTIMATION_SETTINGS.projection_months,
    min_data_points: int = DEFAULT_ESTIMATION_SETTINGS.min_data_points,
    recent_data_window_days: int = DEFAULT_ESTIMATION_SETTINGS.recent_data_window_days,
    as_of: Optional[datetime.datetime] = None,
) -> OneRMEstimationResult:
    """Project the 1RM of one exercise *projection_months* ahead.

    Args:
        sets: Logged sets of the exercise.
        session_workout_types: Session date → declared workout type.
        projection_months: Projection horizon in calendar months.
        min_data_points: Sessions required for a qualified estimate.
        recent_data_window_days: Maximum age (days) of the last session.
        as_of: Reference datetime (defaults to now).

    Returns:
        :class:`OneRMEstimationResult`.  Data-quality problems are
        reported through ``warnings`` and ``is_qualified``; they never
        raise.
    """
    today = resolve_as_of(as_of).date()
    points = _session_points(sets, session_workout_types or {})

    if not points:
        return OneRMEstimationResult(
            current_1rm=0.0,
            expected_1rm=0.0,
            projection_date=None,
            improvement_kg=0.0,
            improvement_percent=0.0,
            is_qualified=False,
            warnings=["Insufficient data for estimation: no qualifying sets"],
        )

    current = points[-1]
    current_1rm = current.one_rm
    session_count = len(points)

    warnings: list[str] = []
    if session_count < min_data_points:
        plural = "s" if session_count > 1 else ""
        warnings.append(
            f"Limited data: Estimation based on only {session_count} session{plural}"
        )

    days_since_last = (today - current.date).days
    if days_since_last > recent_data_window_days:
        warnings.append(f"No recent data: Last session was {days_since_last} days ago")

    cv = _coefficient_of_variation([p.one_rm for p in points])
    if cv > MAX_COEFFICIENT_OF_VARIATION:
        warnings.append("Inconsistent progression: Results may vary")

    if session_count < 2:
        return OneRMEstimationResult(
            current_1rm=current_1rm,
            expected_1rm=current_1rm,
            projection_date=current.date,
            improvement_kg=0.0,
            improvement_percent=0.0,
            is_qualified=False,
            warnings=warnings + ["Insufficient data for estimation"],
            sessions=points,
        )

    regression = perform_weighted_linear_regression(
        [(p.date, p.one_rm) for p in points], today,
    )

    projection_date = add_months(current.date, projection_months)
    days_to_project = (projection_date - current.date).days

    undamped = regression.slope * days_to_project + regression.intercept
    damped_gain = (undamped - current_1rm) * get_damping_factor(projection_months)
    expected_1rm = current_1rm + damped_gain

    improvement_kg = expected_1rm - current_1rm
    improvement_percent = improvement_kg / current_1rm * 100.0 if current_1rm > 0 else 0.0

    is_qualified = (
        session_count >= min_data_points
        and days_since_last <= recent_data_window_days
        and cv <= MAX_COEFFICIENT_OF_VARIATION
    )

    logger.debug(
        "1RM projection: %d sessions, slope=%.3f kg/day, expected=%.1f (qualified=%s)",
        session_count, regression.slope, expected_1rm, is_qualified,
    )

    return OneRMEstimationResult(
        current_1rm=current_1rm,
        expected_1rm=expected_1rm,
        projection_date=projection_date,
        improvement_kg=improvement_kg,
        improvement_percent=improvement_percent,
        is_qualified=is_qualified,
        warnings=warnings,
        slope_kg_per_day=regression.slope,
        standard_error=regression.standard_error,
        sessions=points,
    )
