"""
External activity feed.

The engine never talks to a health platform itself.  Callers hand it
already-fetched activities through an :class:`ActivitySource`; the
in-memory :class:`StaticActivitySource` covers tests, scripts and the
HTTP API, where the activities travel with the request.
"""

from __future__ import annotations

import datetime
from typing import Iterable, Optional, Protocol, runtime_checkable

from app.engine.common import to_local_naive
from app.schemas.fatigue import ExternalActivity


@runtime_checkable
class ActivitySource(Protocol):
    """Anything that can list external activities ending after *since*."""

    def fetch_activities(
        self,
        since: Optional[datetime.datetime] = None,
    ) -> list[ExternalActivity]:
        ...


class StaticActivitySource:
    """Activity source backed by a fixed list."""

    def __init__(self, activities: Iterable[ExternalActivity] = ()) -> None:
        self._activities = list(activities)

    def fetch_activities(
        self,
        since: Optional[datetime.datetime] = None,
    ) -> list[ExternalActivity]:
        if since is None:
            return list(self._activities)
        cutoff = to_local_naive(since)
        return [
            a for a in self._activities
            if to_local_naive(a.end_time) >= cutoff
        ]

    def __len__(self) -> int:
        return len(self._activities)
