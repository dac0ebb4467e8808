"""Database repositories."""

from gymtrack.db.repositories.user import UserRepository
from gymtrack.db.repositories.workout_day import WorkoutDayRepository
from gymtrack.db.repositories.exercise import ExerciseRepository
from gymtrack.db.repositories.workout_session import WorkoutSessionRepository

__all__ = [
    "UserRepository",
    "WorkoutDayRepository",
    "ExerciseRepository",
    "WorkoutSessionRepository",
]
