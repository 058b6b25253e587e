"""
Abstract base class for external activity fatigue profiles.

Workouts recorded outside the app (runs, rides, swims...) arrive as an
activity type and a time range.  A profile turns that into the three
fatigue channels the readiness engine tracks.  Each profile defines:

- A unique profile identifier (slug)
- A display name
- The activity types it scores
- A fatigue rate per minute of activity
- How the per-minute score is split across lower / upper / systemic
"""

from abc import ABC, abstractmethod

from app.schemas.fatigue import ActivityType, FatigueScores


class ActivityProfile(ABC):
    """Abstract base class that every activity profile must implement."""

    @property
    @abstractmethod
    def profile_id(self) -> str:
        """Unique slug identifier, e.g. ``'running'``."""
        ...

    @property
    @abstractmethod
    def display_name(self) -> str:
        """Human-readable name, e.g. ``'Running & Field Sports'``."""
        ...

    @property
    @abstractmethod
    def activity_types(self) -> frozenset[ActivityType]:
        """Activity types scored by this profile."""
        ...

    @property
    @abstractmethod
    def fatigue_per_minute(self) -> float:
        """Base fatigue score accumulated per minute of activity."""
        ...

    @abstractmethod
    def distribute(self, score: float) -> FatigueScores:
        """Split a base *score* across the three fatigue channels."""
        ...

    # ------------------------------------------------------------------
    # Shared behaviour
    # ------------------------------------------------------------------

    def compute_fatigue(self, duration_minutes: float) -> FatigueScores:
        """Fatigue deposited by *duration_minutes* of this activity."""
        score = max(duration_minutes, 0.0) * self.fatigue_per_minute
        return self.distribute(score)
