"""
External activity profiles.

Import this module to register all built-in activity profiles.
New activity types are added by:
  1. Creating a profile class implementing :class:`ActivityProfile`
  2. Adding a registration line below
"""

from app.activities.profiles import (
    CyclingProfile,
    GeneralActivityProfile,
    RunningProfile,
    SwimmingProfile,
    WeightliftingProfile,
)
from app.activities.registry import ActivityRegistry
from app.activities.scoring import flag_overlapping_activities, score_activity
from app.activities.source import ActivitySource, StaticActivitySource

# Register all built-in profiles
ActivityRegistry.register(RunningProfile())
ActivityRegistry.register(CyclingProfile())
ActivityRegistry.register(SwimmingProfile())
ActivityRegistry.register(WeightliftingProfile())
ActivityRegistry.register(GeneralActivityProfile())

__all__ = [
    "ActivityRegistry",
    "ActivitySource",
    "StaticActivitySource",
    "flag_overlapping_activities",
    "score_activity",
]
