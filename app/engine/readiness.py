"""
Activity readiness: fatigue channels mapped to GREEN / YELLOW / RED.

Four activity categories read different channels:

    run / cycle   → lower
    swim          → upper
    lower lift    → systemic (CNS check), then lower
    upper lift    → systemic (CNS check), then upper

Rules, in order:

1. **Weekend override**: with ``ignore_weekends`` set, Saturday and
   Sunday are always GREEN.
2. **CNS burnout** (lifts only): ``systemic > cns_max`` is RED regardless
   of the regional channel.
3. **Regional check**: ``> high`` RED, ``>= moderate`` YELLOW, else
   GREEN.  Running with ``allow_running_on_tired_legs`` downgrades the
   high-fatigue RED to a YELLOW easy-zone-only run.

Every non-GREEN result carries the recovery time of the value that
triggered it.
"""

from __future__ import annotations

import datetime
import logging
from typing import Iterable, Optional

from app.engine.common import resolve_as_of
from app.engine.config import DEFAULT_READINESS_CONFIG, ReadinessConfig
from app.engine.fatigue import calculate_recovery_time_ms
from app.engine.timeline import (
    calculate_continuous_fatigue_timeline,
    current_fatigue_from_timeline,
)
from app.schemas.fatigue import (
    ActivityReadiness,
    ActivityStatus,
    ExternalActivity,
    FatigueScores,
    ReadinessResponse,
)
from app.schemas.library import ExerciseLibrary, ExerciseLibraryItem
from app.schemas.training import TrainingSession

logger = logging.getLogger(__name__)

MSG_READY = "Ready to go"
MSG_WEEKEND = "Weekend mode - Warnings disabled"
MSG_BLOCKED = "Blocked - Rest required"
MSG_CNS_BURNOUT = "CNS burnout - Full rest required"
MSG_EASY_ZONE = "Caution - Easy Zone 2 only"
MSG_EASY_PACE = "Caution - Easy pace only"
MSG_LIGHT_WORK = "Caution - Light work only"


# ======================================================================
# Helpers
# ======================================================================


def is_weekend(as_of: datetime.datetime) -> bool:
    return as_of.weekday() >= 5


def _weekend_override(
    cfg: ReadinessConfig,
    as_of: datetime.datetime,
) -> Optional[ActivityReadiness]:
    if cfg.ignore_weekends and is_weekend(as_of):
        return ActivityReadiness(status=ActivityStatus.GREEN, message=MSG_WEEKEND)
    return None


def _not_ready(
    status: ActivityStatus,
    fatigue: float,
    message: str,
    cfg: ReadinessConfig,
) -> ActivityReadiness:
    return ActivityReadiness(
        status=status,
        time_until_fresh_ms=calculate_recovery_time_ms(fatigue, cfg),
        message=message,
    )


def _regional_status(
    fatigue: float,
    cfg: ReadinessConfig,
    caution_message: str,
) -> ActivityReadiness:
    """Shared moderate/high classification of one channel."""
    if fatigue > cfg.thresholds.high:
        return _not_ready(ActivityStatus.RED, fatigue, MSG_BLOCKED, cfg)
    if fatigue >= cfg.thresholds.moderate:
        return _not_ready(ActivityStatus.YELLOW, fatigue, caution_message, cfg)
    return ActivityReadiness(status=ActivityStatus.GREEN, message=MSG_READY)


def _cns_burnout(
    scores: FatigueScores,
    cfg: ReadinessConfig,
) -> Optional[ActivityReadiness]:
    if scores.systemic > cfg.thresholds.cns_max:
        return _not_ready(ActivityStatus.RED, scores.systemic, MSG_CNS_BURNOUT, cfg)
    return None


# ======================================================================
# Per-activity status
# ======================================================================


def get_run_cycle_status(
    scores: FatigueScores,
    config: Optional[ReadinessConfig] = None,
    as_of: Optional[datetime.datetime] = None,
) -> ActivityReadiness:
    """Readiness for running / cycling (lower-body channel)."""
    cfg = config or DEFAULT_READINESS_CONFIG
    override = _weekend_override(cfg, resolve_as_of(as_of))
    if override:
        return override

    lower = scores.lower
    if lower > cfg.thresholds.high and cfg.allow_running_on_tired_legs:
        return _not_ready(ActivityStatus.YELLOW, lower, MSG_EASY_ZONE, cfg)
    return _regional_status(lower, cfg, MSG_EASY_ZONE)


def get_swim_status(
    scores: FatigueScores,
    config: Optional[ReadinessConfig] = None,
    as_of: Optional[datetime.datetime] = None,
) -> ActivityReadiness:
    """Readiness for swimming (upper-body channel)."""
    cfg = config or DEFAULT_READINESS_CONFIG
    override = _weekend_override(cfg, resolve_as_of(as_of))
    if override:
        return override
    return _regional_status(scores.upper, cfg, MSG_EASY_PACE)


def get_lower_lift_status(
    scores: FatigueScores,
    config: Optional[ReadinessConfig] = None,
    as_of: Optional[datetime.datetime] = None,
) -> ActivityReadiness:
    """Readiness for lower-body lifting (CNS check, then lower channel)."""
    cfg = config or DEFAULT_READINESS_CONFIG
    override = _weekend_override(cfg, resolve_as_of(as_of))
    if override:
        return override
    return _cns_burnout(scores, cfg) or _regional_status(scores.lower, cfg, MSG_LIGHT_WORK)


def get_upper_lift_status(
    scores: FatigueScores,
    config: Optional[ReadinessConfig] = None,
    as_of: Optional[datetime.datetime] = None,
) -> ActivityReadiness:
    """Readiness for upper-body lifting (CNS check, then upper channel)."""
    cfg = config or DEFAULT_READINESS_CONFIG
    override = _weekend_override(cfg, resolve_as_of(as_of))
    if override:
        return override
    return _cns_burnout(scores, cfg) or _regional_status(scores.upper, cfg, MSG_LIGHT_WORK)


# ======================================================================
# Context note
# ======================================================================


def _generate_readiness_note(
    run_cycle: ActivityReadiness,
    swim: ActivityReadiness,
    lower_lift: ActivityReadiness,
    upper_lift: ActivityReadiness,
) -> str:
    """Generate a human-readable readiness note."""
    labelled = [
        ("run/cycle", run_cycle),
        ("swim", swim),
        ("lower-body lifting", lower_lift),
        ("upper-body lifting", upper_lift),
    ]
    if MSG_CNS_BURNOUT in (lower_lift.message, upper_lift.message):
        return "Systemic fatigue above the CNS ceiling. Take a full rest day."

    blocked = [name for name, r in labelled if r.status == ActivityStatus.RED]
    caution = [name for name, r in labelled if r.status == ActivityStatus.YELLOW]

    parts: list[str] = []
    if blocked:
        parts.append(f"Rest recommended for: {', '.join(blocked)}")
    if caution:
        parts.append(f"Go easy on: {', '.join(caution)}")

    if not parts:
        return "All activities ready."
    return ". ".join(parts) + "."


# ======================================================================
# Main entry point
# ======================================================================


def evaluate_readiness(
    history: Iterable[TrainingSession],
    library: ExerciseLibrary | Iterable[ExerciseLibraryItem] | None,
    config: Optional[ReadinessConfig] = None,
    activities: Iterable[ExternalActivity] = (),
    as_of: Optional[datetime.datetime] = None,
) -> ReadinessResponse:
    """Current fatigue and per-activity readiness.

    Runs the continuous timeline simulation, reads the current fatigue off
    it and classifies the four activity categories.

    Args:
        history: Logged sessions.
        library: Exercise library (or a list of items).
        config: Optional readiness config override.
        activities: External activities (already deduplicated and scored).
        as_of: Reference datetime (defaults to now).

    Returns:
        :class:`ReadinessResponse`.
    """
    cfg = config or DEFAULT_READINESS_CONFIG
    now = resolve_as_of(as_of)

    timeline = calculate_continuous_fatigue_timeline(
        history, library, cfg, activities, as_of=now,
    )
    fatigue = current_fatigue_from_timeline(timeline, now)

    run_cycle = get_run_cycle_status(fatigue, cfg, now)
    swim = get_swim_status(fatigue, cfg, now)
    lower_lift = get_lower_lift_status(fatigue, cfg, now)
    upper_lift = get_upper_lift_status(fatigue, cfg, now)

    logger.debug(
        "Readiness at %s: lower=%.1f upper=%.1f systemic=%.1f",
        now.isoformat(), fatigue.lower, fatigue.upper, fatigue.systemic,
    )

    return ReadinessResponse(
        fatigue=fatigue,
        run_cycle=run_cycle,
        swim=swim,
        lower_lift=lower_lift,
        upper_lift=upper_lift,
        as_of=now,
        context_note=_generate_readiness_note(run_cycle, swim, lower_lift, upper_lift),
    )
