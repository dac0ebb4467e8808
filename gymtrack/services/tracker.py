"""
Workout tracker façade.

The single API the presentation layer talks to.  A :class:`WorkoutTracker`
owns one user's in-memory snapshot and a :class:`WorkoutStore` strategy:

1. the snapshot is rolled over if the date moved since the last call,
2. the mutation is applied in memory (optimistically, never rolled back),
3. the strategy persists it.

Failures come back as a :class:`MutationResult` instead of exceptions.
A failed write leaves ``(kind, record id)`` in :attr:`WorkoutTracker.unsynced`
until a later write of the same kind to the same record succeeds, or a
store that rewrites the whole snapshot saves successfully.
"""

import datetime
import threading
from enum import Enum
from typing import Callable, Optional

from loguru import logger
from pydantic import BaseModel

from gymtrack.schemas.workout import WorkoutSet, WorkoutSnapshot, WorkoutTemplate, WorkoutUpdate
from gymtrack.stores.base import Change, ChangeKind, StoreError, WorkoutStore
from gymtrack.tracker import mutations
from gymtrack.tracker.mutations import RecordNotFoundError
from gymtrack.tracker.rollover import reconcile


class MutationError(str, Enum):
    NOT_FOUND = "not_found"
    INVALID = "invalid"
    NOT_SYNCED = "not_synced"


class MutationResult(BaseModel):
    """Outcome of a façade operation."""

    ok: bool
    record_id: Optional[str] = None
    error: Optional[MutationError] = None
    detail: Optional[str] = None


def _utcnow() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


class WorkoutTracker:
    """Mutation façade over one user's snapshot."""

    def __init__(self, store: WorkoutStore, user_id: str, clock: Callable[[], datetime.date] = datetime.date.today,
                 now: Callable[[], datetime.datetime] = _utcnow, ):
        self.store = store
        self.user_id = user_id
        self.clock = clock
        self.now = now
        self.unsynced: set[tuple[ChangeKind, str]] = set()
        self._snapshot: Optional[WorkoutSnapshot] = None
        self._lock = threading.RLock()

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    def load(self) -> WorkoutSnapshot:
        """(Re)load the snapshot from the store."""
        with self._lock:
            self._snapshot = self.store.load_snapshot(self.user_id, self.clock())
            return self._snapshot

    @property
    def snapshot(self) -> WorkoutSnapshot:
        with self._lock:
            if self._snapshot is None:
                return self.load()
            self._roll_over()
            return self._snapshot

    @property
    def has_unsynced_changes(self) -> bool:
        return bool(self.unsynced)

    @property
    def unsynced_records(self) -> set[str]:
        return {record_id for _, record_id in self.unsynced}

    def _roll_over(self) -> None:
        rolled = reconcile(self._snapshot, self.clock())
        if rolled is not self._snapshot:
            self._snapshot = rolled
            self._persist(Change(kind=ChangeKind.ROLLOVER))

    def _persist(self, change: Change) -> bool:
        try:
            self.store.persist(self._snapshot, change)
        except StoreError as e:
            logger.error(f"Could not persist {change.kind.value} for user {self.user_id}; "
                         f"{change.record_id} marked unsynced: {e}")
            self.unsynced.add((change.kind, change.record_id))
            return False
        if self.store.writes_full_snapshot:
            self.unsynced.clear()
        else:
            self.unsynced.discard((change.kind, change.record_id))
        return True

    def _run(self, kind: ChangeKind, apply: Callable[[WorkoutSnapshot], object], day_id: Optional[str] = None,
             workout_id: Optional[str] = None, ) -> MutationResult:
        with self._lock:
            if self._snapshot is None:
                self.load()
            self._roll_over()
            try:
                record = apply(self._snapshot)
            except RecordNotFoundError as e:
                logger.warning(f"{kind.value} rejected for user {self.user_id}: {e}")
                return MutationResult(ok=False, error=MutationError.NOT_FOUND, detail=str(e.args[0]))
            except ValueError as e:
                logger.warning(f"{kind.value} rejected for user {self.user_id}: {e}")
                return MutationResult(ok=False, error=MutationError.INVALID, detail=str(e))

            record_id = getattr(record, "id", None)
            if kind == ChangeKind.ADD_DAY:
                day_id = record_id
            elif kind == ChangeKind.ADD_WORKOUT:
                workout_id = record_id

            if not self._persist(Change(kind=kind, day_id=day_id, workout_id=workout_id)):
                return MutationResult(ok=False, record_id=record_id, error=MutationError.NOT_SYNCED,
                                      detail="Change kept locally but not persisted")
            return MutationResult(ok=True, record_id=record_id)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def select_day(self, day_id: str) -> MutationResult:
        return self._run(ChangeKind.SELECT_DAY, lambda s: mutations.select_day(s, day_id), day_id=day_id)

    def mark_day_completed(self, day_id: str) -> MutationResult:
        return self._run(ChangeKind.COMPLETE_DAY, lambda s: mutations.mark_day_completed(s, day_id, self.now()),
                         day_id=day_id)

    def update_workout_sets(self, day_id: str, workout_id: str, sets: list[WorkoutSet]) -> MutationResult:
        return self._run(ChangeKind.SAVE_SETS, lambda s: mutations.set_today_sets(s, day_id, workout_id, sets),
                         day_id=day_id, workout_id=workout_id)

    def toggle_workout_completed(self, day_id: str, workout_id: str) -> MutationResult:
        return self._run(ChangeKind.SAVE_SETS, lambda s: mutations.toggle_workout_completed(s, day_id, workout_id),
                         day_id=day_id, workout_id=workout_id)

    def add_day(self, name: str) -> MutationResult:
        return self._run(ChangeKind.ADD_DAY, lambda s: mutations.add_day(s, name))

    def remove_day(self, day_id: str) -> MutationResult:
        return self._run(ChangeKind.REMOVE_DAY, lambda s: mutations.remove_day(s, day_id), day_id=day_id)

    def add_workout(self, day_id: str, template: WorkoutTemplate) -> MutationResult:
        return self._run(ChangeKind.ADD_WORKOUT, lambda s: mutations.add_workout(s, day_id, template), day_id=day_id)

    def remove_workout(self, day_id: str, workout_id: str) -> MutationResult:
        return self._run(ChangeKind.REMOVE_WORKOUT, lambda s: mutations.remove_workout(s, day_id, workout_id),
                         day_id=day_id, workout_id=workout_id)

    def update_workout(self, day_id: str, workout_id: str, update: WorkoutUpdate) -> MutationResult:
        return self._run(ChangeKind.UPDATE_WORKOUT,
                         lambda s: mutations.update_workout(s, day_id, workout_id, update),
                         day_id=day_id, workout_id=workout_id)
