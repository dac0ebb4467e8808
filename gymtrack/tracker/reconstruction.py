"""
Snapshot reconstruction from relational rows.

The remote store keeps routine templates (days, exercises) apart from
logging data (sessions, sets).  :func:`build_snapshot` joins them back
into a :class:`WorkoutSnapshot` for one date:

* ``today_sets`` come from the day's session dated *today*, in set order.
* ``previous_sets`` come from the single most recent earlier session of
  the same day that holds any sets for the exercise.  Older sessions are
  never merged in.
* ``completed_at`` is today's session completion stamp.

The function is pure; the caller is responsible for fetching the rows,
including limiting past sessions to the lookback window.
"""

import datetime
from collections import defaultdict
from typing import Iterable, Optional, Sequence

from gymtrack.models.exercise import Exercise
from gymtrack.models.set_entry import SetEntry
from gymtrack.models.workout_day import WorkoutDay
from gymtrack.models.workout_session import WorkoutSession
from gymtrack.schemas.workout import Day, RepRange, Workout, WorkoutSet, WorkoutSnapshot


def _to_set(entry: SetEntry) -> WorkoutSet:
    return WorkoutSet(reps=entry.reps, weight=entry.weight, completed=entry.completed)


def _sets_for(entries: Iterable[SetEntry], workout_id: str) -> list[WorkoutSet]:
    matching = sorted((e for e in entries if e.workout_id == workout_id), key=lambda e: e.set_number)
    return [_to_set(e) for e in matching]


def rep_range_from_row(exercise: Exercise) -> RepRange:
    # 0 and NULL both mean "no upper bound"
    return RepRange(min=exercise.default_reps_min, max=exercise.default_reps_max or None)


def find_previous_sets(day_id: str, workout_id: str, past_sessions: Sequence[WorkoutSession],
                       sets_by_session: dict[str, list[SetEntry]], ) -> Optional[list[WorkoutSet]]:
    """Sets of the most recent past session of *day_id* that logged *workout_id*.

    *past_sessions* must already be ordered newest first.
    """
    for session in past_sessions:
        if session.day_id != day_id:
            continue
        found = _sets_for(sets_by_session.get(session.id, []), workout_id)
        if found:
            return found
    return None


def build_snapshot(user_id: str, today: datetime.date, days: Sequence[WorkoutDay], exercises: Sequence[Exercise],
                   sessions: Sequence[WorkoutSession], sets: Sequence[SetEntry], ) -> WorkoutSnapshot:
    """Assemble the snapshot for *today* from fetched rows.

    Args:
        user_id: Owner of the rows
        today: Date whose session supplies ``today_sets``
        days: The user's routine days, in display order
        exercises: Exercises of those days, in display order
        sessions: Today's sessions plus the past sessions to search for reference sets
        sets: Every set row belonging to *sessions*

    Returns:
        Snapshot with no selected day and an empty history
    """
    sets_by_session: dict[str, list[SetEntry]] = defaultdict(list)
    for entry in sets:
        sets_by_session[entry.session_id].append(entry)

    today_by_day: dict[str, WorkoutSession] = {}
    for session in sessions:
        if session.session_date == today:
            today_by_day.setdefault(session.day_id, session)

    past_sessions = sorted((s for s in sessions if s.session_date < today), key=lambda s: s.session_date,
                           reverse=True)

    exercises_by_day: dict[str, list[Exercise]] = defaultdict(list)
    for exercise in exercises:
        exercises_by_day[exercise.day_id].append(exercise)

    snapshot_days = []
    for day in days:
        today_session = today_by_day.get(day.id)
        today_entries = sets_by_session.get(today_session.id, []) if today_session else []

        workouts = [
            Workout(id=exercise.id, name=exercise.name, default_sets=exercise.default_sets,
                    default_reps=rep_range_from_row(exercise), machine_setup_notes=exercise.machine_setup_notes,
                    today_sets=_sets_for(today_entries, exercise.id),
                    previous_sets=find_previous_sets(day.id, exercise.id, past_sessions, sets_by_session), )
            for exercise in exercises_by_day.get(day.id, [])]

        snapshot_days.append(Day(id=day.id, name=day.name, workouts=workouts,
                                 completed_at=today_session.completed_at if today_session else None, ))

    return WorkoutSnapshot(user_id=user_id, days=snapshot_days, selected_day_id=None, selected_date=today)
