"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import activities, analytics, library

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    analytics.router, prefix="/analytics", tags=["Analytics"]
)
api_router.include_router(
    library.router, prefix="/library", tags=["Exercise library"]
)
api_router.include_router(
    activities.router, prefix="/activities", tags=["External activities"]
)
