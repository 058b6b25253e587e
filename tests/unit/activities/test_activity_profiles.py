"""Tests for external activity profiles, scoring and overlap flagging."""

import datetime

import pytest

from app.activities import (
    ActivityRegistry,
    ActivitySource,
    StaticActivitySource,
    flag_overlapping_activities,
    score_activity,
)
from app.activities.base import ActivityProfile
from app.activities.scoring import (
    OVERLAP_REASON,
    check_workout_overlap,
    duration_minutes,
)
from app.schemas.fatigue import ActivityType, ExternalActivity, FatigueScores
from app.schemas.training import TrainingSession

MORNING = datetime.datetime(2026, 2, 8, 10, 0)


# ======================================================================
# Helpers
# ======================================================================


def _score(activity_type: ActivityType, minutes: float, activity_id: str = "a1") -> ExternalActivity:
    return score_activity(
        activity_type,
        MORNING,
        MORNING + datetime.timedelta(minutes=minutes),
        activity_id=activity_id,
    )


class _ExtraRunningProfile(ActivityProfile):
    """Claims an activity type that the running profile already owns."""

    @property
    def profile_id(self) -> str:
        return "trail_running"

    @property
    def display_name(self) -> str:
        return "Trail Running"

    @property
    def activity_types(self) -> frozenset[ActivityType]:
        return frozenset({ActivityType.RUNNING})

    @property
    def fatigue_per_minute(self) -> float:
        return 2.0

    def distribute(self, score: float) -> FatigueScores:
        return FatigueScores(lower=score, upper=0.0, systemic=score)


# ======================================================================
# Registry
# ======================================================================


class TestRegistry:

    def test_builtin_profiles_registered(self):
        assert ActivityRegistry.available_profile_ids() == [
            "cycling", "general", "running", "swimming", "weightlifting",
        ]

    def test_every_activity_type_is_claimed(self):
        for activity_type in ActivityType:
            assert ActivityRegistry.for_type(activity_type) is not None, activity_type

    @pytest.mark.parametrize("activity_type,profile_id", [
        (ActivityType.RUNNING, "running"),
        (ActivityType.SOCCER, "running"),
        (ActivityType.HIKING, "running"),
        (ActivityType.BIKING_STATIONARY, "cycling"),
        (ActivityType.SWIMMING_OPEN_WATER, "swimming"),
        (ActivityType.WEIGHTLIFTING, "weightlifting"),
        (ActivityType.YOGA, "general"),
    ])
    def test_for_type(self, activity_type, profile_id):
        assert ActivityRegistry.for_type(activity_type).profile_id == profile_id

    def test_duplicate_id_rejected(self):
        with pytest.raises(ValueError):
            ActivityRegistry.register(ActivityRegistry.get_or_raise("running").__class__())

    def test_claimed_type_rejected(self):
        with pytest.raises(ValueError):
            ActivityRegistry.register(_ExtraRunningProfile())
        assert ActivityRegistry.get("trail_running") is None

    def test_get_or_raise_unknown(self):
        with pytest.raises(KeyError):
            ActivityRegistry.get_or_raise("rowing")

    def test_all_returns_copy(self):
        profiles = ActivityRegistry.all()
        profiles.pop("running")
        assert ActivityRegistry.get("running") is not None


# ======================================================================
# Scoring
# ======================================================================


class TestScoring:

    def test_running(self):
        activity = _score(ActivityType.RUNNING, 30)
        assert activity.fatigue.lower == pytest.approx(45.0)
        assert activity.fatigue.upper == 0.0
        assert activity.fatigue.systemic == pytest.approx(36.0)
        assert not activity.ignored

    def test_cycling(self):
        activity = _score(ActivityType.BIKING, 60)
        assert activity.fatigue.lower == pytest.approx(60.0)
        assert activity.fatigue.systemic == pytest.approx(36.0)

    def test_swimming_loads_upper_body(self):
        activity = _score(ActivityType.SWIMMING_POOL, 20)
        assert activity.fatigue.lower == pytest.approx(4.8)
        assert activity.fatigue.upper == pytest.approx(24.0)
        assert activity.fatigue.systemic == pytest.approx(24.0)

    def test_weightlifting_scores_zero(self):
        assert _score(ActivityType.WEIGHTLIFTING, 90).fatigue == FatigueScores.zero()

    def test_general(self):
        activity = _score(ActivityType.WALKING, 40)
        assert activity.fatigue.lower == pytest.approx(10.0)
        assert activity.fatigue.systemic == pytest.approx(10.0)

    def test_partial_minutes_truncated(self):
        assert duration_minutes(MORNING, MORNING + datetime.timedelta(seconds=30 * 60 + 59)) == 30

    def test_negative_duration_is_zero(self):
        activity = score_activity(ActivityType.RUNNING, MORNING, MORNING - datetime.timedelta(hours=1))
        assert activity.fatigue == FatigueScores.zero()

    def test_generated_id(self):
        activity = score_activity(ActivityType.RUNNING, MORNING, MORNING + datetime.timedelta(minutes=10))
        assert activity.id


# ======================================================================
# Overlap flagging
# ======================================================================


class TestOverlap:

    def test_same_day_similar_duration(self):
        history = [TrainingSession(date="2026/02/08", duration_seconds=3600)]
        assert check_workout_overlap(_score(ActivityType.WEIGHTLIFTING, 70), history)

    def test_duration_too_different(self):
        history = [TrainingSession(date="2026/02/08", duration_seconds=3600)]
        assert not check_workout_overlap(_score(ActivityType.RUNNING, 30), history)

    def test_other_day(self):
        history = [TrainingSession(date="2026/02/07", duration_seconds=3600)]
        assert not check_workout_overlap(_score(ActivityType.WEIGHTLIFTING, 60), history)

    def test_missing_duration_assumes_one_hour(self):
        history = [TrainingSession(date="2026/02/08")]
        assert check_workout_overlap(_score(ActivityType.WEIGHTLIFTING, 50), history)

    def test_flagging_marks_and_deduplicates(self):
        history = [TrainingSession(date="2026/02/08", duration_seconds=3600)]
        overlapping = _score(ActivityType.WEIGHTLIFTING, 60, activity_id="lift")
        run = _score(ActivityType.RUNNING, 20, activity_id="run")

        flagged = flag_overlapping_activities([overlapping, run, overlapping], history)

        assert [a.id for a in flagged] == ["lift", "run"]
        assert flagged[0].ignored
        assert flagged[0].ignore_reason == OVERLAP_REASON
        assert not flagged[1].ignored
        assert not overlapping.ignored


# ======================================================================
# Activity source
# ======================================================================


class TestActivitySource:

    def test_static_source_is_an_activity_source(self):
        assert isinstance(StaticActivitySource(), ActivitySource)

    def test_since_filters_on_end_time(self):
        early = _score(ActivityType.RUNNING, 30, activity_id="early")
        late = score_activity(
            ActivityType.RUNNING,
            MORNING + datetime.timedelta(days=1),
            MORNING + datetime.timedelta(days=1, minutes=30),
            activity_id="late",
        )
        source = StaticActivitySource([early, late])

        assert len(source) == 2
        assert [a.id for a in source.fetch_activities()] == ["early", "late"]
        since = MORNING + datetime.timedelta(hours=12)
        assert [a.id for a in source.fetch_activities(since)] == ["late"]
