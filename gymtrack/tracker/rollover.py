"""
Daily rollover.

A snapshot's ``today_sets`` and ``completed_at`` belong to
``selected_date``.  When the calendar moves on, :func:`reconcile` turns
that stale state into reference data for the new day:

1. If the selected day had any logged sets, every day is archived into
   ``workout_history`` under the stale date.
2. Each workout with logged sets keeps them as ``previous_sets``
   (replacing older reference sets); ``today_sets`` is cleared on every
   workout, which also clears the derived ``completed`` flag.
3. ``completed_at`` is cleared on every day.
4. ``selected_date`` moves to today.  ``selected_day_id`` is kept.

Only one step runs no matter how many days were skipped.  A clock that
went backwards leaves the snapshot untouched.
"""

import datetime

from loguru import logger

from gymtrack.schemas.workout import WorkoutSnapshot


def has_progress(snapshot: WorkoutSnapshot) -> bool:
    """True if the selected day has at least one workout with sets logged."""
    if not snapshot.selected_day_id:
        return False
    day = snapshot.find_day(snapshot.selected_day_id)
    return day is not None and any(w.today_sets for w in day.workouts)


def reconcile(snapshot: WorkoutSnapshot, today: datetime.date) -> WorkoutSnapshot:
    """Bring *snapshot* up to *today*.

    Returns the input object itself when nothing has to change, otherwise a
    new snapshot; the input is never modified.
    """
    stale_date = snapshot.selected_date
    if stale_date == today:
        return snapshot
    if stale_date > today:
        logger.warning(f"Snapshot for user {snapshot.user_id} is dated {stale_date}, after {today}; not rolling back")
        return snapshot

    rolled = snapshot.model_copy(deep=True)

    if has_progress(snapshot):
        rolled.workout_history[stale_date] = [day.model_copy(deep=True) for day in snapshot.days]

    for day in rolled.days:
        for workout in day.workouts:
            if workout.today_sets:
                workout.previous_sets = workout.today_sets
            workout.today_sets = []
        day.completed_at = None

    rolled.selected_date = today

    logger.info(f"Rolled over snapshot for user {snapshot.user_id} from {stale_date} to {today} "
                f"(archived: {stale_date in rolled.workout_history})")
    return rolled
