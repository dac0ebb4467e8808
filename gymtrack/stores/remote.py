"""
Remote sync store.

Maps tracker mutations onto the relational schema (users, workout_days,
workouts, workout_sessions, workout_sets) and rebuilds snapshots from it.

Reads never raise: a failed :meth:`RemoteSyncStore.load_snapshot`
returns a snapshot with no days, which callers cannot tell apart from a
user who has no routine yet.  Writes raise :class:`StoreError`.
"""

import datetime
from typing import Optional, Sequence

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from gymtrack.core.config import settings
from gymtrack.db.repositories.exercise import ExerciseRepository
from gymtrack.db.repositories.user import UserRepository
from gymtrack.db.repositories.workout_day import WorkoutDayRepository
from gymtrack.db.repositories.workout_session import WorkoutSessionRepository
from gymtrack.models.exercise import Exercise
from gymtrack.models.set_entry import SetEntry
from gymtrack.models.user import User
from gymtrack.models.workout_day import WorkoutDay
from gymtrack.schemas.user import UserProfile
from gymtrack.schemas.workout import Day, WorkoutSet, WorkoutSnapshot, WorkoutTemplate, WorkoutUpdate
from gymtrack.stores.base import Change, ChangeKind, StoreError, WorkoutStore
from gymtrack.tracker.mutations import get_day, get_workout
from gymtrack.tracker.reconstruction import build_snapshot


def _to_profile(user: User) -> UserProfile:
    return UserProfile(id=user.id, name=user.name, access_code=user.access_code)


class RemoteSyncStore(WorkoutStore):
    """Persistence strategy backed by the relational store."""

    def __init__(self, session: Session, lookback_days: int = settings.PREVIOUS_SETS_LOOKBACK_DAYS):
        self.session = session
        self.lookback_days = lookback_days
        self.user_repo = UserRepository(session)
        self.day_repo = WorkoutDayRepository(session)
        self.exercise_repo = ExerciseRepository(session)
        self.session_repo = WorkoutSessionRepository(session)

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    def authenticate(self, access_code: str) -> Optional[UserProfile]:
        # TODO: throttle failed lookups per client before exposing this publicly
        try:
            user = self.user_repo.get_by_access_code(access_code)
        except SQLAlchemyError as e:
            logger.error(f"Authentication lookup failed: {e}")
            self.session.rollback()
            return None
        return _to_profile(user) if user else None

    def get_user(self, user_id: str) -> Optional[UserProfile]:
        try:
            user = self.user_repo.get_by_id(user_id)
        except SQLAlchemyError as e:
            logger.error(f"User lookup failed for {user_id}: {e}")
            self.session.rollback()
            return None
        return _to_profile(user) if user else None

    # ------------------------------------------------------------------
    # Snapshot
    # ------------------------------------------------------------------

    def load_snapshot(self, user_id: str, today: datetime.date) -> WorkoutSnapshot:
        """Rebuild the user's snapshot for *today*.

        Fetches the user's days and their exercises, today's sessions and the
        sessions of the trailing ``lookback_days`` (today excluded) with all
        their sets.  Any failure yields an empty snapshot.
        """
        try:
            days = self.day_repo.get_by_user(user_id)
            exercises = self.exercise_repo.get_by_days([d.id for d in days])
            start = today - datetime.timedelta(days=self.lookback_days)
            sessions = self.session_repo.get_by_user_date_range(user_id, start, today)
            sets = self.session_repo.get_sets([s.id for s in sessions])
            return build_snapshot(user_id, today, days, exercises, sessions, sets)
        except Exception as e:
            logger.error(f"Error loading workout data for user {user_id}: {e}")
            self.session.rollback()
            return WorkoutSnapshot(user_id=user_id, days=[], selected_day_id=None, selected_date=today)

    # ------------------------------------------------------------------
    # Routine editing
    # ------------------------------------------------------------------

    def add_day(self, user_id: str, name: str, day_id: Optional[str] = None) -> str:
        day = WorkoutDay(user_id=user_id, name=name, order_index=self.day_repo.next_order_index(user_id))
        if day_id:
            day.id = day_id
        return self.day_repo.create(day).id

    def remove_day(self, user_id: str, day_id: str) -> bool:
        """Delete one of the user's days with everything that hangs off it."""
        day = self.day_repo.get_by_id(day_id)
        if not day or day.user_id != user_id:
            return False
        return self.day_repo.delete(day_id)

    def add_workout(self, day_id: str, template: WorkoutTemplate, workout_id: Optional[str] = None) -> str:
        exercise = Exercise(day_id=day_id, name=template.name, default_sets=template.default_sets,
                            default_reps_min=template.default_reps.min, default_reps_max=template.default_reps.max,
                            machine_setup_notes=template.machine_setup_notes,
                            order_index=self.exercise_repo.next_order_index(day_id), )
        if workout_id:
            exercise.id = workout_id
        return self.exercise_repo.create(exercise).id

    def remove_workout(self, workout_id: str) -> bool:
        return self.exercise_repo.delete(workout_id)

    def update_workout(self, workout_id: str, update: WorkoutUpdate) -> bool:
        exercise = self.exercise_repo.get_by_id(workout_id)
        if not exercise:
            return False
        if update.name is not None:
            exercise.name = update.name
        if update.default_sets is not None:
            exercise.default_sets = update.default_sets
        if update.default_reps is not None:
            exercise.default_reps_min = update.default_reps.min
            exercise.default_reps_max = update.default_reps.max
        if update.machine_setup_notes is not None:
            exercise.machine_setup_notes = update.machine_setup_notes
        self.exercise_repo.update(exercise)
        return True

    def seed_routine(self, user_id: str, days: Sequence[Day]) -> None:
        """Insert a routine (e.g. the default one) for a new user, with fresh ids."""
        for day in days:
            day_id = self.add_day(user_id, day.name)
            for workout in day.workouts:
                self.add_workout(day_id, WorkoutTemplate(name=workout.name, default_sets=workout.default_sets,
                                                         default_reps=workout.default_reps,
                                                         machine_setup_notes=workout.machine_setup_notes, ))

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------

    def save_sets(self, user_id: str, day_id: str, workout_id: str, sets: Sequence[WorkoutSet],
                  today: datetime.date, ) -> None:
        """Replace the workout's sets in today's session for the day, in one transaction."""
        entries = [SetEntry(session_id="", workout_id=workout_id, set_number=0, reps=s.reps, weight=s.weight,
                            completed=s.completed) for s in sets]
        self.session_repo.replace_sets(user_id, day_id, workout_id, today, entries)

    def mark_day_completed(self, user_id: str, day_id: str, today: datetime.date,
                           completed_at: Optional[datetime.datetime] = None, ) -> bool:
        """Stamp today's session of the day.  False (and nothing written) if no session exists yet."""
        stamp = completed_at or datetime.datetime.now(datetime.timezone.utc)
        return self.session_repo.mark_completed(user_id, day_id, today, stamp) is not None

    # ------------------------------------------------------------------
    # Strategy entry point
    # ------------------------------------------------------------------

    def persist(self, snapshot: WorkoutSnapshot, change: Change) -> None:
        try:
            self._apply(snapshot, change)
        except SQLAlchemyError as e:
            self.session.rollback()
            raise StoreError(f"{change.kind.value} failed for {change.record_id}: {e}") from e

    def _apply(self, snapshot: WorkoutSnapshot, change: Change) -> None:
        user_id = snapshot.user_id
        kind = change.kind

        if kind in (ChangeKind.SELECT_DAY, ChangeKind.ROLLOVER):
            # Selection and rollover are device state; sessions are already keyed by date.
            return

        if kind == ChangeKind.ADD_DAY:
            day = get_day(snapshot, change.day_id)
            self.add_day(user_id, day.name, day_id=day.id)
        elif kind == ChangeKind.REMOVE_DAY:
            if not self.remove_day(user_id, change.day_id):
                raise StoreError(f"Day {change.day_id} not found for user {user_id}")
        elif kind == ChangeKind.ADD_WORKOUT:
            workout = get_workout(snapshot, change.day_id, change.workout_id)
            # previous sets are rebuilt from past sessions, never stored on the exercise
            template = WorkoutTemplate(name=workout.name, default_sets=workout.default_sets,
                                       default_reps=workout.default_reps,
                                       machine_setup_notes=workout.machine_setup_notes, )
            self.add_workout(change.day_id, template, workout_id=workout.id)
        elif kind == ChangeKind.UPDATE_WORKOUT:
            workout = get_workout(snapshot, change.day_id, change.workout_id)
            update = WorkoutUpdate(name=workout.name, default_sets=workout.default_sets,
                                   default_reps=workout.default_reps,
                                   machine_setup_notes=workout.machine_setup_notes, )
            if not self.update_workout(workout.id, update):
                raise StoreError(f"Workout {workout.id} not found")
        elif kind == ChangeKind.REMOVE_WORKOUT:
            if not self.remove_workout(change.workout_id):
                raise StoreError(f"Workout {change.workout_id} not found")
        elif kind == ChangeKind.SAVE_SETS:
            workout = get_workout(snapshot, change.day_id, change.workout_id)
            self.save_sets(user_id, change.day_id, workout.id, workout.today_sets, snapshot.selected_date)
        elif kind == ChangeKind.COMPLETE_DAY:
            day = get_day(snapshot, change.day_id)
            if not self.mark_day_completed(user_id, day.id, snapshot.selected_date, day.completed_at):
                logger.debug(f"No session yet for day {day.id} on {snapshot.selected_date}, completion not stored")
