"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from gymtrack.api.v1.endpoints import auth, workouts

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    auth.router, prefix="/auth", tags=["Authentication"]
)
api_router.include_router(
    workouts.router, prefix="/workouts", tags=["Workouts"]
)
