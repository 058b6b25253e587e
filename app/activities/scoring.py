"""
Scoring and deduplication of raw external workouts.

:func:`score_activity` turns a raw workout (type and time range) into an
:class:`ExternalActivity` using the registered profile for its type.

:func:`flag_overlapping_activities` marks activities that duplicate a
workout already logged in the app (same calendar day, similar duration)
as ignored, so their fatigue is not counted twice.
"""

from __future__ import annotations

import datetime
import logging
import uuid
from typing import Iterable, Optional

from app.activities.registry import ActivityRegistry
from app.engine.common import parse_session_date, to_local_naive
from app.schemas.fatigue import ActivityType, ExternalActivity, FatigueScores
from app.schemas.training import TrainingSession

logger = logging.getLogger(__name__)

FALLBACK_PROFILE_ID = "general"
DEFAULT_WORKOUT_DURATION = datetime.timedelta(hours=1)
OVERLAP_DURATION_TOLERANCE = datetime.timedelta(minutes=20)
OVERLAP_REASON = "Overlaps with registered workout"


def duration_minutes(
    start_time: datetime.datetime,
    end_time: datetime.datetime,
) -> int:
    """Whole minutes between *start_time* and *end_time* (never negative)."""
    seconds = (to_local_naive(end_time) - to_local_naive(start_time)).total_seconds()
    return max(int(seconds // 60), 0)


def score_activity(
    activity_type: ActivityType,
    start_time: datetime.datetime,
    end_time: datetime.datetime,
    activity_id: Optional[str] = None,
) -> ExternalActivity:
    """Build a fatigue-scored :class:`ExternalActivity`.

    Types without a registered profile are scored with the general
    profile; if that is missing too the activity carries zero fatigue.
    """
    profile = (
        ActivityRegistry.for_type(activity_type)
        or ActivityRegistry.get(FALLBACK_PROFILE_ID)
    )
    minutes = duration_minutes(start_time, end_time)

    if profile is None:
        logger.warning("No activity profile for %s, scoring as zero", activity_type.value)
        fatigue = FatigueScores.zero()
    else:
        fatigue = profile.compute_fatigue(minutes)

    return ExternalActivity(
        id=activity_id or str(uuid.uuid4()),
        start_time=start_time,
        end_time=end_time,
        activity_type=activity_type,
        fatigue=fatigue,
    )


def check_workout_overlap(
    activity: ExternalActivity,
    history: Iterable[TrainingSession],
) -> bool:
    """True when a logged workout on the same day has a similar duration.

    Workouts without a recorded duration are assumed to last one hour.
    """
    start = to_local_naive(activity.start_time)
    activity_duration = to_local_naive(activity.end_time) - start

    for session in history:
        if parse_session_date(session.date) != start.date():
            continue
        if session.duration_seconds:
            workout_duration = datetime.timedelta(seconds=session.duration_seconds)
        else:
            workout_duration = DEFAULT_WORKOUT_DURATION
        if abs(activity_duration - workout_duration) <= OVERLAP_DURATION_TOLERANCE:
            return True
    return False


def flag_overlapping_activities(
    activities: Iterable[ExternalActivity],
    history: Iterable[TrainingSession],
) -> list[ExternalActivity]:
    """Return *activities* with duplicates of logged workouts marked ignored.

    Activities sharing an id with an earlier one are dropped.
    """
    sessions = list(history)
    seen: set[str] = set()
    result: list[ExternalActivity] = []

    for activity in activities:
        if activity.id in seen:
            continue
        seen.add(activity.id)

        if not activity.ignored and check_workout_overlap(activity, sessions):
            logger.info("Ignoring activity %s: overlaps a logged workout", activity.id)
            activity = activity.model_copy(
                update={"ignored": True, "ignore_reason": OVERLAP_REASON},
            )
        result.append(activity)

    return result
