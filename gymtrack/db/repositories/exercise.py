"""
Exercise repository.

Handles database operations for :class:`Exercise` (the ``workouts`` table).
"""

from typing import Optional, Sequence

from sqlalchemy import delete, func
from sqlmodel import Session, col, select

from gymtrack.models.exercise import Exercise
from gymtrack.models.set_entry import SetEntry


class ExerciseRepository:
    """Repository for Exercise database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, exercise: Exercise) -> Exercise:
        self.session.add(exercise)
        self.session.commit()
        self.session.refresh(exercise)
        return exercise

    def get_by_id(self, exercise_id: str) -> Optional[Exercise]:
        return self.session.get(Exercise, exercise_id)

    def get_by_days(self, day_ids: Sequence[str]) -> list[Exercise]:
        if not day_ids:
            return []
        statement = (select(Exercise).where(col(Exercise.day_id).in_(day_ids))
                     .order_by(Exercise.order_index, Exercise.created_at))
        return list(self.session.exec(statement).all())

    def next_order_index(self, day_id: str) -> int:
        statement = select(func.max(Exercise.order_index)).where(Exercise.day_id == day_id)
        current = self.session.exec(statement).first()
        return 0 if current is None else current + 1

    def update(self, exercise: Exercise) -> Exercise:
        self.session.add(exercise)
        self.session.commit()
        self.session.refresh(exercise)
        return exercise

    def delete(self, exercise_id: str) -> bool:
        """Delete an exercise and every set logged against it."""
        exercise = self.get_by_id(exercise_id)
        if not exercise:
            return False
        try:
            self.session.execute(delete(SetEntry).where(SetEntry.workout_id == exercise_id))
            self.session.delete(exercise)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        return True
