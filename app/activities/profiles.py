"""
Built-in activity fatigue profiles.

Per-minute rates and channel splits::

    profile         rate   lower        upper   systemic
    running         1.5    score        0       0.8 × score
    cycling         1.0    score        0       0.6 × score
    swimming        1.2    0.2 × score  score   score
    weightlifting   0      0            0       0
    general         0.5    0.5 × score  0       0.5 × score

Weightlifting scores zero: lifting sessions are logged set by set in the
app and already counted from the training history.
"""

from app.activities.base import ActivityProfile
from app.schemas.fatigue import ActivityType, FatigueScores


class RunningProfile(ActivityProfile):
    """Running, field sports and hiking: high lower-body fatigue."""

    @property
    def profile_id(self) -> str:
        return "running"

    @property
    def display_name(self) -> str:
        return "Running & Field Sports"

    @property
    def activity_types(self) -> frozenset[ActivityType]:
        return frozenset({
            ActivityType.RUNNING,
            ActivityType.FOOTBALL_AMERICAN,
            ActivityType.SOCCER,
            ActivityType.HIKING,
        })

    @property
    def fatigue_per_minute(self) -> float:
        return 1.5

    def distribute(self, score: float) -> FatigueScores:
        return FatigueScores(lower=score, upper=0.0, systemic=score * 0.8)


class CyclingProfile(ActivityProfile):
    """Outdoor and stationary cycling: moderate lower-body fatigue."""

    @property
    def profile_id(self) -> str:
        return "cycling"

    @property
    def display_name(self) -> str:
        return "Cycling"

    @property
    def activity_types(self) -> frozenset[ActivityType]:
        return frozenset({ActivityType.BIKING, ActivityType.BIKING_STATIONARY})

    @property
    def fatigue_per_minute(self) -> float:
        return 1.0

    def distribute(self, score: float) -> FatigueScores:
        return FatigueScores(lower=score, upper=0.0, systemic=score * 0.6)


class SwimmingProfile(ActivityProfile):
    """Pool and open-water swimming: high upper-body and systemic fatigue."""

    @property
    def profile_id(self) -> str:
        return "swimming"

    @property
    def display_name(self) -> str:
        return "Swimming"

    @property
    def activity_types(self) -> frozenset[ActivityType]:
        return frozenset({ActivityType.SWIMMING_POOL, ActivityType.SWIMMING_OPEN_WATER})

    @property
    def fatigue_per_minute(self) -> float:
        return 1.2

    def distribute(self, score: float) -> FatigueScores:
        return FatigueScores(lower=score * 0.2, upper=score, systemic=score)


class WeightliftingProfile(ActivityProfile):

    @property
    def profile_id(self) -> str:
        return "weightlifting"

    @property
    def display_name(self) -> str:
        return "Weightlifting"

    @property
    def activity_types(self) -> frozenset[ActivityType]:
        return frozenset({ActivityType.WEIGHTLIFTING})

    @property
    def fatigue_per_minute(self) -> float:
        return 0.0

    def distribute(self, score: float) -> FatigueScores:
        return FatigueScores.zero()


class GeneralActivityProfile(ActivityProfile):
    """Walking, yoga and anything unrecognised."""

    @property
    def profile_id(self) -> str:
        return "general"

    @property
    def display_name(self) -> str:
        return "General Activity"

    @property
    def activity_types(self) -> frozenset[ActivityType]:
        return frozenset({ActivityType.WALKING, ActivityType.YOGA, ActivityType.OTHER})

    @property
    def fatigue_per_minute(self) -> float:
        return 0.5

    def distribute(self, score: float) -> FatigueScores:
        return FatigueScores(lower=score * 0.5, upper=0.0, systemic=score * 0.5)
