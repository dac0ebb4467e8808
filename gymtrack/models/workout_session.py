"""
Workout session database model.

A session ties a user's routine day to one calendar date and groups the
sets logged for it.  There is at most one session per (user, day, date).
"""

import datetime
import uuid
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel


class WorkoutSession(SQLModel, table=True):
    """Logging session for one day of the routine on one date."""

    __tablename__ = "workout_sessions"
    __table_args__ = (UniqueConstraint("user_id", "day_id", "session_date", name="uq_session_user_day_date", ),)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True, max_length=36)
    user_id: str = Field(foreign_key="users.id", ondelete="CASCADE", nullable=False, index=True)
    day_id: str = Field(foreign_key="workout_days.id", ondelete="CASCADE", nullable=False, index=True)
    session_date: datetime.date = Field(nullable=False, index=True)
    completed_at: Optional[datetime.datetime] = Field(default=None)

    created_at: Optional[datetime.datetime] = Field(default_factory=datetime.datetime.utcnow)
