"""
Exercise database model.

One row per workout (exercise) inside a routine day.  The table keeps
the ``workouts`` name; ``Exercise`` avoids clashing with the
:class:`~gymtrack.schemas.workout.Workout` domain schema.
"""

import uuid
from datetime import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class Exercise(SQLModel, table=True):
    """Exercise template: default targets and machine setup notes."""

    __tablename__ = "workouts"

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True, max_length=36)
    day_id: str = Field(foreign_key="workout_days.id", ondelete="CASCADE", nullable=False, index=True)
    name: str = Field(nullable=False, max_length=255)

    default_sets: int = Field(default=3, nullable=False)
    default_reps_min: int = Field(default=8, nullable=False)
    default_reps_max: Optional[int] = Field(default=None)
    machine_setup_notes: str = Field(default="", nullable=False)

    order_index: int = Field(default=0, nullable=False)

    created_at: Optional[datetime] = Field(default_factory=datetime.utcnow)
