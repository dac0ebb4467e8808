"""
Workout domain schemas.

These models are the shape of a user's tracking state, both in memory and
as the persisted local record.  They carry no behaviour; the rollover,
reconstruction and mutation rules live in :mod:`gymtrack.tracker`.

Field names are snake_case in Python and camelCase on the wire, so the
JSON record reads ``{"userId": ..., "selectedDate": ..., "days": [...]}``.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialising to camelCase while accepting either spelling."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RepRange(CamelModel):
    """Target rep count, or an inclusive range when ``max`` is set."""

    min: int = Field(..., ge=1)
    max: Optional[int] = Field(None, ge=1)

    @model_validator(mode="after")
    def _check_bounds(self) -> "RepRange":
        if self.max is not None and self.max < self.min:
            raise ValueError(f"max ({self.max}) must not be below min ({self.min})")
        return self


class WorkoutSet(CamelModel):
    """One performed or planned set."""

    reps: int = Field(0, ge=0)
    weight: float = Field(0.0, ge=0.0)
    completed: bool = False


class Workout(CamelModel):
    """An exercise within a day, with today's logged sets and the last reference sets."""

    id: str
    name: str
    default_sets: int = Field(3, ge=1)
    default_reps: RepRange
    machine_setup_notes: str = ""
    today_sets: list[WorkoutSet] = Field(default_factory=list)
    previous_sets: Optional[list[WorkoutSet]] = None

    @computed_field
    @property
    def completed(self) -> bool:
        """True iff at least one set is logged today and every one of them is completed."""
        return bool(self.today_sets) and all(s.completed for s in self.today_sets)


class Day(CamelModel):
    """A named routine (e.g. "Push") plus its logging state for the current date."""

    id: str
    name: str
    workouts: list[Workout] = Field(default_factory=list)
    completed_at: Optional[datetime.datetime] = None


class WorkoutSnapshot(CamelModel):
    """Full tracking state for one user on one device."""

    user_id: str
    days: list[Day] = Field(default_factory=list)
    selected_day_id: Optional[str] = None
    selected_date: datetime.date
    workout_history: dict[datetime.date, list[Day]] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _check_history_dates(self) -> "WorkoutSnapshot":
        for archived in self.workout_history:
            if archived >= self.selected_date:
                raise ValueError(f"history entry {archived} is not before selected date {self.selected_date}")
        return self

    def find_day(self, day_id: str) -> Optional[Day]:
        return next((d for d in self.days if d.id == day_id), None)


# ----------------------------------------------------------------------
# Mutation payloads
# ----------------------------------------------------------------------

class WorkoutTemplate(CamelModel):
    """Editable fields of a new workout.

    ``previous_sets`` seeds the reference sets of the new workout in the local
    cache only.  The relational store derives reference sets from logged
    sessions, so the HTTP API rejects templates that carry them.
    """

    name: str = Field(..., min_length=1, max_length=255)
    default_sets: int = Field(3, ge=1)
    default_reps: RepRange
    machine_setup_notes: str = ""
    previous_sets: Optional[list[WorkoutSet]] = None


class WorkoutUpdate(CamelModel):
    """Partial update of a workout's template fields."""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    default_sets: Optional[int] = Field(None, ge=1)
    default_reps: Optional[RepRange] = None
    machine_setup_notes: Optional[str] = None


class DayCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)


class SetsUpdate(CamelModel):
    sets: list[WorkoutSet]
