"""Business logic services."""

from gymtrack.services.tracker import MutationError, MutationResult, WorkoutTracker
from gymtrack.services.app_session import AppSession
from gymtrack.services.user_service import UserService
from gymtrack.services.workout_service import WorkoutService

__all__ = [
    "MutationError",
    "MutationResult",
    "WorkoutTracker",
    "AppSession",
    "UserService",
    "WorkoutService",
]
