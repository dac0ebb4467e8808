"""
Workout day repository.

Handles database operations for :class:`WorkoutDay`, including the
cascade that removes a day's exercises, sessions and sets.
"""

from typing import Optional

from sqlalchemy import delete, func, or_
from sqlmodel import Session, col, select

from gymtrack.models.exercise import Exercise
from gymtrack.models.set_entry import SetEntry
from gymtrack.models.workout_day import WorkoutDay
from gymtrack.models.workout_session import WorkoutSession


class WorkoutDayRepository:
    """Repository for WorkoutDay database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, day: WorkoutDay) -> WorkoutDay:
        self.session.add(day)
        self.session.commit()
        self.session.refresh(day)
        return day

    def get_by_id(self, day_id: str) -> Optional[WorkoutDay]:
        return self.session.get(WorkoutDay, day_id)

    def get_by_user(self, user_id: str) -> list[WorkoutDay]:
        statement = select(WorkoutDay).where(WorkoutDay.user_id == user_id).order_by(WorkoutDay.order_index,
                                                                                     WorkoutDay.created_at)
        return list(self.session.exec(statement).all())

    def next_order_index(self, user_id: str) -> int:
        """Index that places a new day after the user's existing ones."""
        statement = select(func.max(WorkoutDay.order_index)).where(WorkoutDay.user_id == user_id)
        current = self.session.exec(statement).first()
        return 0 if current is None else current + 1

    def delete(self, day_id: str) -> bool:
        """Delete a day together with its exercises, sessions and sets in one transaction.

        Returns:
            True if deleted, False if not found
        """
        day = self.get_by_id(day_id)
        if not day:
            return False

        session_ids = select(WorkoutSession.id).where(WorkoutSession.day_id == day_id)
        exercise_ids = select(Exercise.id).where(Exercise.day_id == day_id)
        try:
            self.session.execute(delete(SetEntry).where(
                or_(col(SetEntry.session_id).in_(session_ids), col(SetEntry.workout_id).in_(exercise_ids))),
                execution_options={ "synchronize_session": False })
            self.session.execute(delete(WorkoutSession).where(WorkoutSession.day_id == day_id))
            self.session.execute(delete(Exercise).where(Exercise.day_id == day_id))
            self.session.delete(day)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        return True
