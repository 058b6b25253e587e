"""
Exercise library endpoints.
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status

from app.library import EXERCISE_CATALOG, get_exercise
from app.schemas.library import BodyRegion, ExerciseLibraryItem, Tier

router = APIRouter()


@router.get(
    "/exercises",
    summary="List the built-in exercise library.",
    response_model=list[ExerciseLibraryItem],
)
def list_exercises(
    region: Optional[BodyRegion] = Query(None, description="Filter by body region"),
    tier: Optional[Tier] = Query(None, description="Filter by tier"),
):
    items = sorted(EXERCISE_CATALOG.values(), key=lambda item: item.id)
    if region is not None:
        items = [item for item in items if item.region == region]
    if tier is not None:
        items = [item for item in items if item.tier == tier]
    return items


@router.get(
    "/exercises/{exercise_id}",
    summary="Get one built-in exercise.",
    response_model=ExerciseLibraryItem,
)
def read_exercise(exercise_id: int):
    item = get_exercise(exercise_id)
    if item is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Exercise {exercise_id} not found",
        )
    return item
