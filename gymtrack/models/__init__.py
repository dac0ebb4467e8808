"""SQLModel database models."""

from gymtrack.models.user import User
from gymtrack.models.workout_day import WorkoutDay
from gymtrack.models.exercise import Exercise
from gymtrack.models.workout_session import WorkoutSession
from gymtrack.models.set_entry import SetEntry

__all__ = [
    "User",
    "WorkoutDay",
    "Exercise",
    "WorkoutSession",
    "SetEntry",
]
