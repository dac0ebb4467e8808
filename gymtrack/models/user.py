"""
User database model.

Users are created by the administrative seed process and identified at
login by their access code.
"""

import uuid
from datetime import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class User(SQLModel, table=True):
    """Owner of a workout routine."""
    __tablename__ = "users"

    id: str = Field(default_factory=lambda: str(uuid.uuid4()), primary_key=True, max_length=36)
    name: str = Field(nullable=False, max_length=255)
    access_code: str = Field(unique=True, index=True, max_length=64, nullable=False)

    created_at: Optional[datetime] = Field(default_factory=datetime.utcnow)
