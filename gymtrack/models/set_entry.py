"""Logged set database model."""

import uuid
from datetime import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class SetEntry(SQLModel, table=True):
    """One set of an exercise within a session, numbered from 1."""

    __tablename__ = "workout_sets"

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True, max_length=36)
    session_id: str = Field(foreign_key="workout_sessions.id", ondelete="CASCADE", nullable=False, index=True)
    workout_id: str = Field(foreign_key="workouts.id", ondelete="CASCADE", nullable=False, index=True)
    set_number: int = Field(nullable=False)
    reps: int = Field(default=0, nullable=False)
    weight: float = Field(default=0.0, nullable=False)
    completed: bool = Field(default=False, nullable=False)

    created_at: Optional[datetime] = Field(default_factory=datetime.utcnow)
