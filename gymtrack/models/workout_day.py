"""Routine day database model."""

import uuid
from datetime import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class WorkoutDay(SQLModel, table=True):
    """A named routine day (e.g. "Push") owned by a user, ordered by ``order_index``."""

    __tablename__ = "workout_days"

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True, max_length=36)
    user_id: str = Field(foreign_key="users.id", ondelete="CASCADE", nullable=False, index=True)
    name: str = Field(nullable=False, max_length=255)
    order_index: int = Field(default=0, nullable=False)

    created_at: Optional[datetime] = Field(default_factory=datetime.utcnow)
