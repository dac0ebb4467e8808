"""
Snapshot mutations.

Each operation edits a :class:`WorkoutSnapshot` in place and returns the
record it touched, so callers can both update their in-memory view and
hand the record to a persistence strategy.  Unknown ids raise
:class:`RecordNotFoundError` before anything is changed.
"""

import datetime
import uuid
from typing import Optional

from gymtrack.schemas.workout import Day, Workout, WorkoutSet, WorkoutSnapshot, WorkoutTemplate, WorkoutUpdate


class RecordNotFoundError(KeyError):
    """Raised when a day or workout id is not part of the snapshot."""


def new_id() -> str:
    return str(uuid.uuid4())


def get_day(snapshot: WorkoutSnapshot, day_id: str) -> Day:
    day = snapshot.find_day(day_id)
    if day is None:
        raise RecordNotFoundError(f"Day '{day_id}' not found")
    return day


def get_workout(snapshot: WorkoutSnapshot, day_id: str, workout_id: str) -> Workout:
    day = get_day(snapshot, day_id)
    for workout in day.workouts:
        if workout.id == workout_id:
            return workout
    raise RecordNotFoundError(f"Workout '{workout_id}' not found in day '{day_id}'")


def _workout_ids(snapshot: WorkoutSnapshot) -> set[str]:
    return {w.id for d in snapshot.days for w in d.workouts}


# ----------------------------------------------------------------------
# Day selection and completion
# ----------------------------------------------------------------------

def select_day(snapshot: WorkoutSnapshot, day_id: str) -> Day:
    day = get_day(snapshot, day_id)
    snapshot.selected_day_id = day.id
    return day


def mark_day_completed(snapshot: WorkoutSnapshot, day_id: str, at: datetime.datetime) -> Day:
    day = get_day(snapshot, day_id)
    day.completed_at = at
    return day


# ----------------------------------------------------------------------
# Routine editing
# ----------------------------------------------------------------------

def add_day(snapshot: WorkoutSnapshot, name: str, day_id: Optional[str] = None) -> Day:
    day_id = day_id or new_id()
    if snapshot.find_day(day_id) is not None:
        raise ValueError(f"Day id '{day_id}' already exists")
    day = Day(id=day_id, name=name)
    snapshot.days.append(day)
    return day


def remove_day(snapshot: WorkoutSnapshot, day_id: str) -> Day:
    """Remove a day with its workouts, clearing the selection if it pointed at it."""
    day = get_day(snapshot, day_id)
    snapshot.days = [d for d in snapshot.days if d.id != day_id]
    if snapshot.selected_day_id == day_id:
        snapshot.selected_day_id = None
    return day


def add_workout(snapshot: WorkoutSnapshot, day_id: str, template: WorkoutTemplate,
                workout_id: Optional[str] = None, ) -> Workout:
    day = get_day(snapshot, day_id)
    workout_id = workout_id or new_id()
    if workout_id in _workout_ids(snapshot):
        raise ValueError(f"Workout id '{workout_id}' already exists")
    workout = Workout(id=workout_id, name=template.name, default_sets=template.default_sets,
                      default_reps=template.default_reps.model_copy(),
                      machine_setup_notes=template.machine_setup_notes,
                      previous_sets=[s.model_copy() for s in template.previous_sets] if template.previous_sets else None,
                      today_sets=[], )
    day.workouts.append(workout)
    return workout


def remove_workout(snapshot: WorkoutSnapshot, day_id: str, workout_id: str) -> Workout:
    workout = get_workout(snapshot, day_id, workout_id)
    day = get_day(snapshot, day_id)
    day.workouts = [w for w in day.workouts if w.id != workout_id]
    return workout


def update_workout(snapshot: WorkoutSnapshot, day_id: str, workout_id: str, update: WorkoutUpdate) -> Workout:
    """Apply the fields explicitly set on *update*."""
    workout = get_workout(snapshot, day_id, workout_id)
    for field, value in update.model_dump(exclude_unset=True).items():
        if value is None:
            continue
        if field == "default_reps":
            value = update.default_reps.model_copy()
        setattr(workout, field, value)
    return workout


# ----------------------------------------------------------------------
# Logging
# ----------------------------------------------------------------------

def set_today_sets(snapshot: WorkoutSnapshot, day_id: str, workout_id: str, sets: list[WorkoutSet]) -> Workout:
    workout = get_workout(snapshot, day_id, workout_id)
    workout.today_sets = [s.model_copy() for s in sets]
    return workout


def planned_sets(workout: Workout) -> list[WorkoutSet]:
    """Blank sets for a workout nothing has been logged for yet."""
    return [WorkoutSet(reps=workout.default_reps.min, weight=0.0, completed=False)
            for _ in range(workout.default_sets)]


def next_set(workout: Workout, sets: list[WorkoutSet]) -> WorkoutSet:
    """Set appended by "add set": target reps, carrying the last weight forward."""
    return WorkoutSet(reps=workout.default_reps.min, weight=sets[-1].weight if sets else 0.0, completed=False)


def toggle_workout_completed(snapshot: WorkoutSnapshot, day_id: str, workout_id: str) -> Workout:
    """Flip the derived completion of a workout by flipping all of today's sets.

    With nothing logged yet, the planned sets are filled in first and then
    marked completed.
    """
    workout = get_workout(snapshot, day_id, workout_id)
    target = not workout.completed
    sets = workout.today_sets or planned_sets(workout)
    workout.today_sets = [s.model_copy(update={ "completed": target }) for s in sets]
    return workout
