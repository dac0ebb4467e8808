"""Pydantic schemas for domain state and request/response validation."""

from gymtrack.schemas.user import Token, UserCreate, UserLogin, UserProfile, UserResponse
from gymtrack.schemas.workout import (
    Day,
    DayCreate,
    RepRange,
    SetsUpdate,
    Workout,
    WorkoutSet,
    WorkoutSnapshot,
    WorkoutTemplate,
    WorkoutUpdate,
)

__all__ = [
    "Token",
    "UserCreate",
    "UserLogin",
    "UserProfile",
    "UserResponse",
    "Day",
    "DayCreate",
    "RepRange",
    "SetsUpdate",
    "Workout",
    "WorkoutSet",
    "WorkoutSnapshot",
    "WorkoutTemplate",
    "WorkoutUpdate",
]
