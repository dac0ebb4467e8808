"""
Workout service.

HTTP-facing wrapper around :class:`WorkoutTracker` backed by the remote
store.  Each request loads the caller's snapshot, applies one operation
and returns the resulting snapshot; façade failures become HTTP errors.
"""

import datetime
from typing import Callable

from fastapi import HTTPException, status
from sqlmodel import Session

from gymtrack.schemas.workout import WorkoutSet, WorkoutSnapshot, WorkoutTemplate, WorkoutUpdate
from gymtrack.services.tracker import MutationError, MutationResult, WorkoutTracker
from gymtrack.stores.remote import RemoteSyncStore

_STATUS_BY_ERROR = {
    MutationError.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    MutationError.INVALID: status.HTTP_422_UNPROCESSABLE_ENTITY,
    MutationError.NOT_SYNCED: status.HTTP_503_SERVICE_UNAVAILABLE,
}


class WorkoutService:
    """Service for routine editing and set logging."""

    def __init__(self, session: Session, user_id: str,
                 clock: Callable[[], datetime.date] = datetime.date.today, ):
        self.tracker = WorkoutTracker(RemoteSyncStore(session), user_id, clock=clock)

    def get_snapshot(self) -> WorkoutSnapshot:
        return self.tracker.load()

    def add_day(self, name: str) -> WorkoutSnapshot:
        return self._check(self.tracker.add_day(name))

    def remove_day(self, day_id: str) -> WorkoutSnapshot:
        return self._check(self.tracker.remove_day(day_id))

    def complete_day(self, day_id: str) -> WorkoutSnapshot:
        return self._check(self.tracker.mark_day_completed(day_id))

    def add_workout(self, day_id: str, template: WorkoutTemplate) -> WorkoutSnapshot:
        if template.previous_sets is not None:
            raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                                detail="previousSets cannot be set; they come from logged sessions")
        return self._check(self.tracker.add_workout(day_id, template))

    def update_workout(self, day_id: str, workout_id: str, update: WorkoutUpdate) -> WorkoutSnapshot:
        return self._check(self.tracker.update_workout(day_id, workout_id, update))

    def remove_workout(self, day_id: str, workout_id: str) -> WorkoutSnapshot:
        return self._check(self.tracker.remove_workout(day_id, workout_id))

    def save_sets(self, day_id: str, workout_id: str, sets: list[WorkoutSet]) -> WorkoutSnapshot:
        return self._check(self.tracker.update_workout_sets(day_id, workout_id, sets))

    def toggle_workout(self, day_id: str, workout_id: str) -> WorkoutSnapshot:
        return self._check(self.tracker.toggle_workout_completed(day_id, workout_id))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _check(self, result: MutationResult) -> WorkoutSnapshot:
        if not result.ok:
            raise HTTPException(status_code=_STATUS_BY_ERROR[result.error], detail=result.detail)
        return self.tracker.snapshot
