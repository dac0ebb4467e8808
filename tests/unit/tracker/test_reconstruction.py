"""Tests for rebuilding snapshots from relational rows.

Rows are plain model instances; nothing touches a database here.
"""

import datetime

import pytest

from gymtrack.models.exercise import Exercise
from gymtrack.models.set_entry import SetEntry
from gymtrack.models.workout_day import WorkoutDay
from gymtrack.models.workout_session import WorkoutSession
from gymtrack.schemas.workout import RepRange, WorkoutSet
from gymtrack.tracker.reconstruction import build_snapshot

TODAY = datetime.date(2024, 3, 15)


def _ago(days: int) -> datetime.date:
    return TODAY - datetime.timedelta(days=days)


def _session(session_id: str, date: datetime.date, day_id: str = "push", completed_at=None) -> WorkoutSession:
    return WorkoutSession(id=session_id, user_id="u1", day_id=day_id, session_date=date, completed_at=completed_at)


def _set(session_id: str, number: int, weight: float, workout_id: str = "bench", completed: bool = True) -> SetEntry:
    return SetEntry(id=f"{session_id}-{workout_id}-{number}", session_id=session_id, workout_id=workout_id,
                    set_number=number, reps=8, weight=weight, completed=completed)


@pytest.fixture
def days():
    return [
        WorkoutDay(id="push", user_id="u1", name="Push", order_index=0),
        WorkoutDay(id="pull", user_id="u1", name="Pull", order_index=1),
    ]


@pytest.fixture
def exercises():
    return [
        Exercise(id="bench", day_id="push", name="Bench Press", default_sets=4, default_reps_min=6,
                 default_reps_max=8, machine_setup_notes="Flat bench", order_index=0),
        Exercise(id="ohp", day_id="push", name="Shoulder Press", default_sets=3, default_reps_min=10,
                 default_reps_max=None, machine_setup_notes="", order_index=1),
        Exercise(id="row", day_id="pull", name="Row", default_sets=3, default_reps_min=8, default_reps_max=0,
                 machine_setup_notes="", order_index=0),
    ]


def _build(days, exercises, sessions=(), sets=()):
    return build_snapshot("u1", TODAY, days, exercises, list(sessions), list(sets))


# ======================================================================
# Structure
# ======================================================================


class TestStructure:
    def test_days_and_workouts_in_order(self, days, exercises):
        snapshot = _build(days, exercises)
        assert [d.id for d in snapshot.days] == ["push", "pull"]
        assert [w.id for w in snapshot.days[0].workouts] == ["bench", "ohp"]
        assert [w.id for w in snapshot.days[1].workouts] == ["row"]

    def test_snapshot_header(self, days, exercises):
        snapshot = _build(days, exercises)
        assert snapshot.user_id == "u1"
        assert snapshot.selected_date == TODAY
        assert snapshot.selected_day_id is None
        assert snapshot.workout_history == {}

    def test_template_fields(self, days, exercises):
        bench = _build(days, exercises).days[0].workouts[0]
        assert bench.name == "Bench Press"
        assert bench.default_sets == 4
        assert bench.default_reps == RepRange(min=6, max=8)
        assert bench.machine_setup_notes == "Flat bench"

    def test_null_max_means_fixed_target(self, days, exercises):
        assert _build(days, exercises).days[0].workouts[1].default_reps.max is None

    def test_zero_max_means_fixed_target(self, days, exercises):
        assert _build(days, exercises).days[1].workouts[0].default_reps.max is None

    def test_no_rows_gives_empty_days(self):
        assert build_snapshot("u1", TODAY, [], [], [], []).days == []


# ======================================================================
# Today's session
# ======================================================================


class TestTodaySets:
    def test_sets_ordered_by_set_number(self, days, exercises):
        sessions = [_session("s-today", TODAY)]
        sets = [_set("s-today", 3, 70.0), _set("s-today", 1, 60.0), _set("s-today", 2, 65.0)]
        bench = _build(days, exercises, sessions, sets).days[0].workouts[0]
        assert [s.weight for s in bench.today_sets] == [60.0, 65.0, 70.0]

    def test_completed_when_all_sets_completed(self, days, exercises):
        sessions = [_session("s-today", TODAY)]
        sets = [_set("s-today", 1, 60.0), _set("s-today", 2, 60.0)]
        assert _build(days, exercises, sessions, sets).days[0].workouts[0].completed is True

    def test_not_completed_when_any_set_open(self, days, exercises):
        sessions = [_session("s-today", TODAY)]
        sets = [_set("s-today", 1, 60.0), _set("s-today", 2, 60.0, completed=False)]
        assert _build(days, exercises, sessions, sets).days[0].workouts[0].completed is False

    def test_not_completed_without_sets(self, days, exercises):
        workout = _build(days, exercises).days[0].workouts[1]
        assert workout.today_sets == []
        assert workout.completed is False

    def test_completed_at_from_today_session(self, days, exercises):
        stamp = datetime.datetime(2024, 3, 15, 19, 0)
        snapshot = _build(days, exercises, [_session("s-today", TODAY, completed_at=stamp)])
        assert snapshot.days[0].completed_at == stamp
        assert snapshot.days[1].completed_at is None

    def test_other_day_session_not_used(self, days, exercises):
        sessions = [_session("s-pull", TODAY, day_id="pull")]
        sets = [_set("s-pull", 1, 60.0, workout_id="row")]
        snapshot = _build(days, exercises, sessions, sets)
        assert snapshot.days[0].workouts[0].today_sets == []
        assert snapshot.days[1].workouts[0].today_sets == [WorkoutSet(reps=8, weight=60.0, completed=True)]


# ======================================================================
# Previous sets
# ======================================================================


class TestPreviousSets:
    def test_most_recent_of_three_sessions(self, days, exercises):
        sessions = [_session("s-10", _ago(10)), _session("s-2", _ago(2)), _session("s-5", _ago(5))]
        sets = [_set("s-10", 1, 50.0), _set("s-2", 1, 70.0), _set("s-2", 2, 72.5), _set("s-5", 1, 60.0)]
        bench = _build(days, exercises, sessions, sets).days[0].workouts[0]
        assert [s.weight for s in bench.previous_sets] == [70.0, 72.5]

    def test_skips_recent_session_without_this_workout(self, days, exercises):
        sessions = [_session("s-2", _ago(2)), _session("s-5", _ago(5))]
        sets = [_set("s-2", 1, 30.0, workout_id="ohp"), _set("s-5", 1, 60.0)]
        snapshot = _build(days, exercises, sessions, sets)
        assert [s.weight for s in snapshot.days[0].workouts[0].previous_sets] == [60.0]
        assert [s.weight for s in snapshot.days[0].workouts[1].previous_sets] == [30.0]

    def test_sessions_of_other_days_ignored(self, days, exercises):
        sessions = [_session("s-pull", _ago(1), day_id="pull")]
        sets = [_set("s-pull", 1, 99.0, workout_id="bench")]
        assert _build(days, exercises, sessions, sets).days[0].workouts[0].previous_sets is None

    def test_today_is_not_previous(self, days, exercises):
        sessions = [_session("s-today", TODAY)]
        sets = [_set("s-today", 1, 60.0)]
        assert _build(days, exercises, sessions, sets).days[0].workouts[0].previous_sets is None

    def test_absent_without_history(self, days, exercises):
        assert _build(days, exercises).days[0].workouts[0].previous_sets is None
