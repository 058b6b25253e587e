"""
Activity profile registry.

Central registry for all available activity profiles.  Profiles are
registered at import time via :func:`ActivityRegistry.register`.
The registry provides lookup by ``profile_id`` and by activity type.
"""

from __future__ import annotations

from typing import Optional

from app.activities.base import ActivityProfile
from app.schemas.fatigue import ActivityType


class ActivityRegistry:
    """Singleton registry of available activity profiles."""

    _profiles: dict[str, ActivityProfile] = {}
    _by_type: dict[ActivityType, ActivityProfile] = {}

    @classmethod
    def register(cls, profile: ActivityProfile) -> None:
        """Register an activity profile.

        Raises :class:`ValueError` if ``profile_id`` is already taken or one
        of its activity types is already claimed by another profile.
        """
        if profile.profile_id in cls._profiles:
            raise ValueError(
                f"Activity profile '{profile.profile_id}' already registered"
            )
        claimed = [t.value for t in profile.activity_types if t in cls._by_type]
        if claimed:
            raise ValueError(
                f"Activity types {claimed} already claimed by another profile"
            )
        cls._profiles[profile.profile_id] = profile
        for activity_type in profile.activity_types:
            cls._by_type[activity_type] = profile

    @classmethod
    def get(cls, profile_id: str) -> Optional[ActivityProfile]:
        """Get a profile by *profile_id*.  Returns ``None`` if not found."""
        return cls._profiles.get(profile_id)

    @classmethod
    def get_or_raise(cls, profile_id: str) -> ActivityProfile:
        """Get a profile by *profile_id*.

        Raises :class:`KeyError` if not found.
        """
        profile = cls._profiles.get(profile_id)
        if not profile:
            raise KeyError(
                f"Activity profile '{profile_id}' not registered. "
                f"Available: {list(cls._profiles.keys())}"
            )
        return profile

    @classmethod
    def for_type(cls, activity_type: ActivityType) -> Optional[ActivityProfile]:
        """Profile scoring *activity_type*.  Returns ``None`` if unclaimed."""
        return cls._by_type.get(activity_type)

    @classmethod
    def all(cls) -> dict[str, ActivityProfile]:
        """Return all registered profiles as ``{profile_id: profile}``."""
        return dict(cls._profiles)

    @classmethod
    def available_profile_ids(cls) -> list[str]:
        return sorted(cls._profiles.keys())

    @classmethod
    def clear(cls) -> None:
        """Remove all profiles.  Useful for testing."""
        cls._profiles.clear()
        cls._by_type.clear()
