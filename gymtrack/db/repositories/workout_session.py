"""
Workout session repository.

Handles database operations for :class:`WorkoutSession` and the
:class:`SetEntry` rows logged inside sessions.
"""

import datetime
from typing import Optional, Sequence

from sqlalchemy import delete
from sqlmodel import Session, col, select

from gymtrack.models.set_entry import SetEntry
from gymtrack.models.workout_session import WorkoutSession


class WorkoutSessionRepository:
    """Repository for WorkoutSession and SetEntry database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get_for_date(self, user_id: str, day_id: str, date: datetime.date) -> Optional[WorkoutSession]:
        statement = select(WorkoutSession).where(WorkoutSession.user_id == user_id, WorkoutSession.day_id == day_id,
                                                 WorkoutSession.session_date == date, )
        return self.session.exec(statement).first()

    def get_by_user_date_range(self, user_id: str, start: datetime.date,
                               end: datetime.date, ) -> list[WorkoutSession]:
        """Sessions with ``start <= session_date <= end``, newest first."""
        statement = (select(WorkoutSession).where(WorkoutSession.user_id == user_id,
                                                  WorkoutSession.session_date >= start,
                                                  WorkoutSession.session_date <= end, )
                     .order_by(col(WorkoutSession.session_date).desc()))
        return list(self.session.exec(statement).all())

    def get_sets(self, session_ids: Sequence[str]) -> list[SetEntry]:
        if not session_ids:
            return []
        statement = (select(SetEntry).where(col(SetEntry.session_id).in_(session_ids))
                     .order_by(SetEntry.session_id, SetEntry.workout_id, SetEntry.set_number))
        return list(self.session.exec(statement).all())

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def replace_sets(self, user_id: str, day_id: str, workout_id: str, date: datetime.date,
                     sets: Sequence[SetEntry], ) -> WorkoutSession:
        """Replace a workout's sets in the (user, day, date) session, creating the session if needed.

        Lookup, delete and insert share one transaction, so readers never
        see the workout with its old sets removed and the new ones missing.
        ``set_number`` is assigned 1..n in the given order.
        """
        try:
            workout_session = self.get_for_date(user_id, day_id, date)
            if workout_session is None:
                workout_session = WorkoutSession(user_id=user_id, day_id=day_id, session_date=date)
                self.session.add(workout_session)
                self.session.flush()

            self.session.execute(delete(SetEntry).where(SetEntry.session_id == workout_session.id,
                                                        SetEntry.workout_id == workout_id, ))
            for number, entry in enumerate(sets, start=1):
                entry.session_id = workout_session.id
                entry.workout_id = workout_id
                entry.set_number = number
                self.session.add(entry)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        self.session.refresh(workout_session)
        return workout_session

    def mark_completed(self, user_id: str, day_id: str, date: datetime.date,
                       completed_at: datetime.datetime, ) -> Optional[WorkoutSession]:
        """Stamp the day's session for *date*.  Returns None when there is no session yet."""
        workout_session = self.get_for_date(user_id, day_id, date)
        if workout_session is None:
            return None
        workout_session.completed_at = completed_at
        self.session.add(workout_session)
        self.session.commit()
        self.session.refresh(workout_session)
        return workout_session
