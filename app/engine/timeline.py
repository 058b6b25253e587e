"""
Continuous fatigue timeline: hourly discrete simulation.

The window runs from 7 days before the current hour to 48 hours after it.
Three independent stacks are simulated:

    lower, upper, systemic

``systemic`` is accumulated from its own raw contributions and decays on
its own; it is **not** recomputed as ``lower + upper`` inside the
simulation, so the two diverge once contributions with independent
systemic impact (external activities) enter the history.

At each hourly step:

1. add the raw fatigue of every session / external activity whose
   effective end time falls in the bucket,
2. multiply every stack by ``0.5^(1/48)`` (48 h half-life, discretised),
3. record the post-decay triple as a graph point,
4. record the end-of-day snapshot (the last bucket of each calendar day
   inside the window, i.e. 23:00 unless the window ends earlier).

A session without a time of day is assumed to start at noon; its duration,
when known, is added to get the end time.
"""

from __future__ import annotations

import datetime
import logging
from collections import defaultdict
from typing import Iterable, Optional

from app.engine.common import (
    floor_hour,
    parse_session_date,
    resolve_as_of,
    to_local_naive,
)
from app.engine.config import DEFAULT_READINESS_CONFIG, ReadinessConfig
from app.engine.fatigue import (
    HALF_LIFE_HOURS,
    calculate_fatigue_scores,
    decay_scores,
)
from app.schemas.fatigue import (
    DailyFatigue,
    ExternalActivity,
    FatiguePoint,
    FatigueScores,
    FatigueTimeline,
)
from app.schemas.library import ExerciseLibrary, ExerciseLibraryItem
from app.schemas.training import TrainingSession

logger = logging.getLogger(__name__)

LOOKBACK_DAYS = 7
LOOKAHEAD_HOURS = 48
HOURLY_DECAY_FACTOR = 0.5 ** (1.0 / HALF_LIFE_HOURS)

_ONE_HOUR = datetime.timedelta(hours=1)
_SESSION_START = datetime.time(12, 0)


# ======================================================================
# Event placement
# ======================================================================


def session_end_time(session: TrainingSession) -> Optional[datetime.datetime]:
    """Noon of the session date plus its duration.  ``None`` on a bad date."""
    day = parse_session_date(session.date)
    if day is None:
        return None
    start = datetime.datetime.combine(day, _SESSION_START)
    if session.duration_seconds:
        return start + datetime.timedelta(seconds=session.duration_seconds)
    return start


def _bucket_index(
    moment: datetime.datetime,
    window_start: datetime.datetime,
    steps: int,
) -> Optional[int]:
    index = int((moment - window_start) // _ONE_HOUR)
    if 0 <= index < steps:
        return index
    return None


def _collect_contributions(
    history: Iterable[TrainingSession],
    lib: ExerciseLibrary,
    cfg: ReadinessConfig,
    activities: Iterable[ExternalActivity],
    window_start: datetime.datetime,
    steps: int,
) -> dict[int, FatigueScores]:
    """Raw fatigue added per hour bucket."""
    contributions: dict[int, FatigueScores] = defaultdict(FatigueScores.zero)

    for session in history:
        end = session_end_time(session)
        if end is None:
            continue
        index = _bucket_index(end, window_start, steps)
        if index is None:
            continue
        scores = calculate_fatigue_scores(session, lib, cfg)
        contributions[index] = contributions[index].add(scores)

    for activity in activities:
        if activity.ignored:
            continue
        index = _bucket_index(to_local_naive(activity.end_time), window_start, steps)
        if index is None:
            continue
        contributions[index] = contributions[index].add(activity.fatigue)

    return contributions


# ======================================================================
# Simulation
# ======================================================================


def calculate_continuous_fatigue_timeline(
    history: Iterable[TrainingSession],
    library: ExerciseLibrary | Iterable[ExerciseLibraryItem] | None,
    config: Optional[ReadinessConfig] = None,
    activities: Iterable[ExternalActivity] = (),
    as_of: Optional[datetime.datetime] = None,
    lookback_days: int = LOOKBACK_DAYS,
) -> FatigueTimeline:
    """Simulate hourly fatigue around *as_of*.

    Args:
        history: Logged sessions.
        library: Exercise library (or a list of items).
        config: Optional readiness config override.
        activities: External activities; ignored ones are left out.
        as_of: Reference datetime (defaults to now).
        lookback_days: Days simulated before the current hour.

    Returns:
        :class:`FatigueTimeline` with one point per hour bucket and one
        end-of-day snapshot per calendar day in the window.
    """
    cfg = config or DEFAULT_READINESS_CONFIG
    lib = ExerciseLibrary.coerce(library)
    anchor = floor_hour(resolve_as_of(as_of))

    window_start = anchor - datetime.timedelta(days=lookback_days)
    window_end = anchor + datetime.timedelta(hours=LOOKAHEAD_HOURS)
    steps = int((window_end - window_start) // _ONE_HOUR)

    contributions = _collect_contributions(
        history, lib, cfg, activities, window_start, steps,
    )

    lower = upper = systemic = 0.0
    graph_points: list[FatiguePoint] = []
    daily_end_values: dict[datetime.date, FatigueScores] = {}

    for step in range(steps):
        bucket = window_start + step * _ONE_HOUR

        added = contributions.get(step)
        if added is not None:
            lower += added.lower
            upper += added.upper
            systemic += added.systemic

        lower *= HOURLY_DECAY_FACTOR
        upper *= HOURLY_DECAY_FACTOR
        systemic *= HOURLY_DECAY_FACTOR

        scores = FatigueScores(lower=lower, upper=upper, systemic=systemic)
        graph_points.append(FatiguePoint(timestamp=bucket, fatigue=scores))

        # Buckets are chronological: the last write per day is the 23:00
        # bucket, or the last one before the window end.
        daily_end_values[bucket.date()] = scores

    logger.debug(
        "Simulated %d hourly steps from %s (%d contributing buckets)",
        steps, window_start.isoformat(), len(contributions),
    )

    return FatigueTimeline(graph_points=graph_points, daily_end_values=daily_end_values)


# ======================================================================
# Readouts
# ======================================================================


def current_fatigue_from_timeline(
    timeline: FatigueTimeline,
    as_of: Optional[datetime.datetime] = None,
) -> FatigueScores:
    """Fatigue at *as_of*, decayed from the last point at or before it.

    When every point lies after *as_of* the last point is used as is.
    An empty timeline yields zero fatigue.
    """
    if not timeline.graph_points:
        return FatigueScores.zero()

    now = resolve_as_of(as_of)
    past = [p for p in timeline.graph_points if p.timestamp <= now]
    if not past:
        return timeline.graph_points[-1].fatigue

    point = past[-1]
    hours = (now - point.timestamp).total_seconds() / 3600.0
    return decay_scores(point.fatigue, hours)


def calculate_daily_fatigue_with_decay(
    history: Iterable[TrainingSession],
    library: ExerciseLibrary | Iterable[ExerciseLibraryItem] | None,
    config: Optional[ReadinessConfig] = None,
    activities: Iterable[ExternalActivity] = (),
    days_back: int = LOOKBACK_DAYS,
    as_of: Optional[datetime.datetime] = None,
) -> list[DailyFatigue]:
    """End-of-day fatigue for each of the last *days_back* calendar days.

    Always returns exactly *days_back* entries, oldest first with today
    last.  Days without any fatigue are zero-filled.
    """
    cfg = config or DEFAULT_READINESS_CONFIG
    lib = ExerciseLibrary.coerce(library)
    sessions = list(history)
    now = resolve_as_of(as_of)

    timeline = calculate_continuous_fatigue_timeline(
        sessions, lib, cfg, activities, as_of=now,
        lookback_days=max(days_back, LOOKBACK_DAYS),
    )

    raw_by_date: dict[datetime.date, float] = defaultdict(float)
    for session in sessions:
        day = parse_session_date(session.date)
        if day is None:
            continue
        raw_by_date[day] += calculate_fatigue_scores(session, lib, cfg).systemic

    today = now.date()
    days: list[DailyFatigue] = []
    for offset in range(days_back - 1, -1, -1):
        day = today - datetime.timedelta(days=offset)
        days.append(DailyFatigue(
            date=day,
            end_of_day=timeline.daily_end_values.get(day, FatigueScores.zero()),
            raw_systemic=raw_by_date.get(day, 0.0),
        ))
    return days
