"""
External activity endpoints.
"""

from fastapi import APIRouter

from app.activities import ActivityRegistry, flag_overlapping_activities, score_activity
from app.schemas.analytics import ActivityScoringRequest
from app.schemas.fatigue import ExternalActivity

router = APIRouter()


@router.get(
    "/profiles",
    summary="List the registered activity fatigue profiles.",
)
def list_activity_profiles():
    return [
        {
            "profile_id": p.profile_id,
            "display_name": p.display_name,
            "activity_types": sorted(t.value for t in p.activity_types),
            "fatigue_per_minute": p.fatigue_per_minute,
        }
        for p in ActivityRegistry.all().values()
    ]


@router.post(
    "/score",
    summary="Score raw workouts and flag duplicates of logged sessions.",
    response_model=list[ExternalActivity],
)
def score_activities(body: ActivityScoringRequest):
    scored = [
        score_activity(raw.activity_type, raw.start_time, raw.end_time, raw.id)
        for raw in body.activities
    ]
    return flag_overlapping_activities(scored, body.history)
