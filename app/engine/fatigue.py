"""
Session fatigue: region/tier-weighted load and exponential recovery.

Model
-----
Every set deposits a load on the body region trained by its exercise:

    set_load = (rpe or default_rpe) × tier_multiplier

Loads are summed per exercise and distributed by region:

    LOWER → lower
    UPPER → upper
    FULL  → 0.7 × lower  +  0.5 × upper
    CORE  → nothing

``FULL`` distributes 120 % of the load in total.  ``CORE`` work
contributes zero.

Residual fatigue decays with a 48-hour half-life:

    fatigue(t) = fatigue₀ × 0.5^(t / 48)

Recovery-time estimates grow with diminishing returns above the high
threshold and are capped at 96 hours.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Iterable, Optional

from app.engine.config import DEFAULT_READINESS_CONFIG, ReadinessConfig
from app.schemas.fatigue import FatigueScores
from app.schemas.library import (
    BodyRegion,
    ExerciseLibrary,
    ExerciseLibraryItem,
    TargetMuscle,
    Tier,
)
from app.schemas.training import ExerciseSet, TrainingSession

logger = logging.getLogger(__name__)

# ======================================================================
# Constants
# ======================================================================

HALF_LIFE_HOURS = 48.0

_TIER_MULTIPLIERS: dict[Tier, float] = {
    Tier.TIER_1: 1.5,
    Tier.TIER_2: 1.2,
    Tier.TIER_3: 0.8,
}
_UNKNOWN_TIER_MULTIPLIER = 1.0

# Share of a FULL-body exercise's load per channel.
FULL_BODY_LOWER_SHARE = 0.7
FULL_BODY_UPPER_SHARE = 0.5

# Recovery-time model (hours).
_HIGH_BASE_HOURS = 48.0
_HIGH_HOURS_PER_POINT = 0.15
_MAX_RECOVERY_HOURS = 96.0
_MODERATE_HOURS = 24.0
_LOW_HOURS = 12.0

LOWER_BODY_MUSCLES = frozenset({
    TargetMuscle.QUADS, TargetMuscle.HAMSTRINGS, TargetMuscle.GLUTES,
    TargetMuscle.CALVES, TargetMuscle.TIBIALIS, TargetMuscle.ADDUCTORS,
    TargetMuscle.ABDUCTORS, TargetMuscle.HIPFLEXORS,
})

UPPER_BODY_MUSCLES = frozenset({
    TargetMuscle.CHEST_UPPER, TargetMuscle.CHEST_MIDDLE, TargetMuscle.CHEST_LOWER,
    TargetMuscle.LATS, TargetMuscle.TRAPS_MID, TargetMuscle.TRAPS_UPPER,
    TargetMuscle.LOWER_BACK, TargetMuscle.DELT_FRONT, TargetMuscle.DELT_SIDE,
    TargetMuscle.DELT_REAR, TargetMuscle.BICEPS, TargetMuscle.TRICEPS_LONG,
    TargetMuscle.TRICEPS_LATERAL, TargetMuscle.FOREARMS,
})

CORE_MUSCLES = frozenset({TargetMuscle.ABS, TargetMuscle.OBLIQUES})


# ======================================================================
# Region / tier resolution
# ======================================================================


def derive_region_from_targets(
    primary_targets: Iterable[TargetMuscle],
) -> Optional[BodyRegion]:
    """Derive a body region from an exercise's primary target muscles.

    Returns ``None`` when no target belongs to a known muscle group.
    """
    targets = set(primary_targets)
    has_lower = bool(targets & LOWER_BODY_MUSCLES)
    has_upper = bool(targets & UPPER_BODY_MUSCLES)
    has_core = bool(targets & CORE_MUSCLES)

    if has_lower and has_upper:
        return BodyRegion.FULL
    if has_lower:
        return BodyRegion.LOWER
    if has_upper:
        return BodyRegion.UPPER
    if has_core:
        return BodyRegion.CORE
    return None


def resolve_region(exercise: ExerciseLibraryItem) -> Optional[BodyRegion]:
    """Explicit region, else the one derived from primary targets."""
    return exercise.region or derive_region_from_targets(exercise.primary_targets)


def tier_multiplier(tier: Optional[Tier]) -> float:
    if tier is None:
        return _UNKNOWN_TIER_MULTIPLIER
    return _TIER_MULTIPLIERS.get(tier, _UNKNOWN_TIER_MULTIPLIER)


# ======================================================================
# Session fatigue
# ======================================================================


def _exercise_load(
    sets: list[ExerciseSet],
    multiplier: float,
    default_rpe: float,
) -> float:
    return sum(
        (s.rpe if s.rpe is not None else default_rpe) * multiplier
        for s in sets
    )


def calculate_fatigue_scores(
    session: TrainingSession,
    library: ExerciseLibrary | Iterable[ExerciseLibraryItem] | None,
    config: Optional[ReadinessConfig] = None,
) -> FatigueScores:
    """Compute raw (undecayed) fatigue deposited by one session.

    Exercises missing from the library, or whose region cannot be
    determined, contribute nothing.

    Args:
        session: The logged session.
        library: Exercise library (or a list of items).
        config: Optional readiness config (for ``default_rpe``).

    Returns:
        :class:`FatigueScores` with ``systemic = lower + upper``.
    """
    cfg = config or DEFAULT_READINESS_CONFIG
    lib = ExerciseLibrary.coerce(library)

    grouped: dict[int, list[ExerciseSet]] = defaultdict(list)
    for s in session.exercises:
        grouped[s.exercise_id].append(s)

    lower = 0.0
    upper = 0.0

    for exercise_id, sets in grouped.items():
        exercise = lib.get(exercise_id)
        if exercise is None:
            logger.debug("Exercise %s not in library, skipping", exercise_id)
            continue

        region = resolve_region(exercise)
        if region is None:
            logger.debug("No region for exercise %s (%s), skipping", exercise_id, exercise.name)
            continue

        load = _exercise_load(sets, tier_multiplier(exercise.tier), cfg.default_rpe)

        if region == BodyRegion.LOWER:
            lower += load
        elif region == BodyRegion.UPPER:
            upper += load
        elif region == BodyRegion.FULL:
            lower += load * FULL_BODY_LOWER_SHARE
            upper += load * FULL_BODY_UPPER_SHARE
        # CORE: no contribution.

    return FatigueScores(lower=lower, upper=upper, systemic=lower + upper)


# ======================================================================
# Decay
# ======================================================================


def get_decayed_score(score: float, hours_elapsed: float) -> float:
    """Decay *score* by a 48-hour half-life.  Non-positive scores yield 0."""
    if score <= 0.0:
        return 0.0
    hours = max(hours_elapsed, 0.0)
    return score * 0.5 ** (hours / HALF_LIFE_HOURS)


def decay_scores(scores: FatigueScores, hours_elapsed: float) -> FatigueScores:
    """Decay each channel independently."""
    return FatigueScores(
        lower=get_decayed_score(scores.lower, hours_elapsed),
        upper=get_decayed_score(scores.upper, hours_elapsed),
        systemic=get_decayed_score(scores.systemic, hours_elapsed),
    )


# ======================================================================
# Recovery time
# ======================================================================


def calculate_recovery_hours(
    fatigue: float,
    config: Optional[ReadinessConfig] = None,
) -> float:
    """Estimated hours until *fatigue* is no longer limiting."""
    cfg = config or DEFAULT_READINESS_CONFIG
    thresholds = cfg.thresholds

    if fatigue > thresholds.high:
        hours = min(
            _HIGH_BASE_HOURS + _HIGH_HOURS_PER_POINT * (fatigue - thresholds.high),
            _MAX_RECOVERY_HOURS,
        )
    elif fatigue >= thresholds.moderate:
        hours = _MODERATE_HOURS
    else:
        hours = _LOW_HOURS

    return hours / cfg.recovery_speed_multiplier


def calculate_recovery_time_ms(
    fatigue: float,
    config: Optional[ReadinessConfig] = None,
) -> int:
    """Recovery time in milliseconds."""
    return int(round(calculate_recovery_hours(fatigue, config) * 3_600_000))
