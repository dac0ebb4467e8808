"""
Base database configuration.

Import all models here so Alembic can detect them for migrations.
"""

# Import all models for Alembic autogenerate
from gymtrack.models.user import User  # noqa: F401
from gymtrack.models.workout_day import WorkoutDay  # noqa: F401
from gymtrack.models.exercise import Exercise  # noqa: F401
from gymtrack.models.workout_session import WorkoutSession  # noqa: F401
from gymtrack.models.set_entry import SetEntry  # noqa: F401
