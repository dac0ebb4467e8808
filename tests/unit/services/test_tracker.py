"""Tests for the tracker façade: optimistic updates, sync bookkeeping and rollover."""

import datetime
import threading
from typing import Optional

import pytest

from gymtrack.schemas.user import UserProfile
from gymtrack.schemas.workout import RepRange, WorkoutSet, WorkoutSnapshot, WorkoutTemplate, WorkoutUpdate
from gymtrack.services.tracker import MutationError, WorkoutTracker
from gymtrack.stores.base import Change, ChangeKind, StoreError, WorkoutStore
from gymtrack.tracker.defaults import default_snapshot

JAN_1 = datetime.date(2024, 1, 1)
NOON = datetime.datetime(2024, 1, 1, 12, 0, tzinfo=datetime.timezone.utc)


class RecordingStore(WorkoutStore):
    """In-memory store that records every change and can be told to fail."""

    def __init__(self, snapshot: Optional[WorkoutSnapshot] = None):
        self.initial = snapshot
        self.changes: list[Change] = []
        self.persisted: Optional[WorkoutSnapshot] = None
        self.fail = False

    def authenticate(self, access_code):
        return None

    def get_user(self, user_id):
        return UserProfile(id=user_id, name="Test", access_code="TEST")

    def load_snapshot(self, user_id, today):
        if self.initial is not None:
            return self.initial.model_copy(deep=True)
        return default_snapshot(user_id, today)

    def persist(self, snapshot, change):
        self.changes.append(change)
        if self.fail:
            raise StoreError("backend unavailable")
        self.persisted = snapshot.model_copy(deep=True)

    @property
    def kinds(self) -> list[ChangeKind]:
        return [c.kind for c in self.changes]


class Clock:
    def __init__(self, today: datetime.date):
        self.today = today

    def __call__(self) -> datetime.date:
        return self.today


@pytest.fixture
def store() -> RecordingStore:
    return RecordingStore()


@pytest.fixture
def clock() -> Clock:
    return Clock(JAN_1)


@pytest.fixture
def tracker(store, clock) -> WorkoutTracker:
    return WorkoutTracker(store, "u1", clock=clock, now=lambda: NOON)


def _bench(tracker: WorkoutTracker):
    return tracker.snapshot.days[0].workouts[0]


class TestOptimisticUpdates:
    def test_success_persists_change(self, tracker, store):
        result = tracker.update_workout_sets("push", "bench-press", [WorkoutSet(reps=8, weight=60.0)])
        assert result.ok
        assert result.record_id == "bench-press"
        assert store.changes == [Change(kind=ChangeKind.SAVE_SETS, day_id="push", workout_id="bench-press")]
        assert store.persisted.days[0].workouts[0].today_sets == [WorkoutSet(reps=8, weight=60.0)]

    def test_failed_write_keeps_memory_and_flags_unsynced(self, tracker, store):
        store.fail = True
        result = tracker.update_workout_sets("push", "bench-press", [WorkoutSet(reps=8, weight=60.0)])

        assert not result.ok
        assert result.error == MutationError.NOT_SYNCED
        assert _bench(tracker).today_sets == [WorkoutSet(reps=8, weight=60.0)]
        assert tracker.unsynced == {(ChangeKind.SAVE_SETS, "bench-press")}
        assert tracker.unsynced_records == {"bench-press"}
        assert tracker.has_unsynced_changes

    def test_later_success_clears_unsynced(self, tracker, store):
        store.fail = True
        tracker.update_workout_sets("push", "bench-press", [WorkoutSet(reps=8, weight=60.0)])
        store.fail = False
        assert tracker.update_workout_sets("push", "bench-press", [WorkoutSet(reps=8, weight=62.5)]).ok
        assert not tracker.has_unsynced_changes

    def test_other_write_to_same_record_keeps_unsynced(self, tracker, store):
        store.fail = True
        tracker.update_workout_sets("push", "bench-press", [WorkoutSet(reps=8, weight=60.0)])
        store.fail = False
        assert tracker.update_workout("push", "bench-press", WorkoutUpdate(name="Bench")).ok
        assert tracker.unsynced == {(ChangeKind.SAVE_SETS, "bench-press")}

    def test_full_snapshot_write_clears_everything(self, tracker, store):
        store.writes_full_snapshot = True
        store.fail = True
        tracker.update_workout_sets("push", "bench-press", [WorkoutSet(reps=8, weight=60.0)])
        tracker.add_day("Arms")
        assert len(tracker.unsynced) == 2
        store.fail = False
        assert tracker.select_day("legs").ok
        assert not tracker.has_unsynced_changes

    def test_unknown_workout_not_persisted(self, tracker, store):
        result = tracker.update_workout_sets("push", "nope", [])
        assert result.error == MutationError.NOT_FOUND
        assert "nope" in result.detail
        assert store.changes == []

    def test_unknown_day(self, tracker, store):
        assert tracker.select_day("rest").error == MutationError.NOT_FOUND
        assert tracker.snapshot.selected_day_id is None
        assert store.changes == []


class TestOperations:
    def test_select_day_persisted(self, tracker, store):
        assert tracker.select_day("legs").ok
        assert tracker.snapshot.selected_day_id == "legs"
        assert store.kinds == [ChangeKind.SELECT_DAY]

    def test_completion_uses_injected_now(self, tracker, store):
        assert tracker.mark_day_completed("push").ok
        assert tracker.snapshot.days[0].completed_at == NOON
        assert store.changes[-1] == Change(kind=ChangeKind.COMPLETE_DAY, day_id="push")

    def test_add_day_reports_new_id(self, tracker, store):
        result = tracker.add_day("Arms")
        assert result.ok
        assert tracker.snapshot.days[-1].id == result.record_id
        assert store.changes[-1].day_id == result.record_id

    def test_add_workout_reports_new_id(self, tracker, store):
        result = tracker.add_workout("legs", WorkoutTemplate(name="Leg Curl", default_reps=RepRange(min=10, max=12)))
        assert result.ok
        assert store.changes[-1] == Change(kind=ChangeKind.ADD_WORKOUT, day_id="legs", workout_id=result.record_id)
        workout = tracker.snapshot.days[2].workouts[-1]
        assert workout.id == result.record_id
        assert workout.today_sets == []
        assert workout.previous_sets is None

    def test_update_workout(self, tracker):
        assert tracker.update_workout("push", "bench-press", WorkoutUpdate(default_sets=5)).ok
        assert _bench(tracker).default_sets == 5
        assert _bench(tracker).name == "Bench Press"

    def test_remove_workout(self, tracker):
        assert tracker.remove_workout("push", "bench-press").ok
        assert [w.id for w in tracker.snapshot.days[0].workouts] == ["shoulder-press"]

    def test_remove_selected_day_clears_selection(self, tracker):
        tracker.select_day("pull")
        assert tracker.remove_day("pull").ok
        assert tracker.snapshot.selected_day_id is None
        assert [d.id for d in tracker.snapshot.days] == ["push", "legs"]

    def test_toggle_fills_planned_sets(self, tracker, store):
        assert tracker.toggle_workout_completed("push", "bench-press").ok
        bench = _bench(tracker)
        assert bench.today_sets == [WorkoutSet(reps=6, weight=0.0, completed=True)] * 4
        assert bench.completed
        assert store.kinds == [ChangeKind.SAVE_SETS]

    def test_toggle_twice_uncompletes(self, tracker):
        tracker.update_workout_sets("push", "bench-press", [WorkoutSet(reps=8, weight=60.0, completed=True),
                                                            WorkoutSet(reps=6, weight=65.0)])
        tracker.toggle_workout_completed("push", "bench-press")
        assert _bench(tracker).completed
        tracker.toggle_workout_completed("push", "bench-press")
        bench = _bench(tracker)
        assert not bench.completed
        assert [s.completed for s in bench.today_sets] == [False, False]
        assert [s.weight for s in bench.today_sets] == [60.0, 65.0]


class TestRollover:
    def test_same_day_no_rollover(self, tracker, store):
        tracker.select_day("push")
        tracker.select_day("pull")
        assert ChangeKind.ROLLOVER not in store.kinds

    def test_date_change_mid_session(self, tracker, store, clock):
        tracker.select_day("push")
        tracker.update_workout_sets("push", "bench-press", [WorkoutSet(reps=8, weight=60.0, completed=True)])
        clock.today = JAN_1 + datetime.timedelta(days=1)

        tracker.select_day("push")
        assert store.kinds == [ChangeKind.SELECT_DAY, ChangeKind.SAVE_SETS, ChangeKind.ROLLOVER, ChangeKind.SELECT_DAY]

        snapshot = tracker.snapshot
        assert snapshot.selected_date == clock.today
        assert snapshot.days[0].workouts[0].today_sets == []
        assert snapshot.days[0].workouts[0].previous_sets == [WorkoutSet(reps=8, weight=60.0, completed=True)]
        assert list(snapshot.workout_history) == [JAN_1]
        # a second read on the same day rolls nothing over
        assert store.kinds.count(ChangeKind.ROLLOVER) == 1

    def test_snapshot_read_triggers_rollover(self, tracker, store, clock):
        tracker.mark_day_completed("push")
        clock.today = JAN_1 + datetime.timedelta(days=1)
        assert tracker.snapshot.days[0].completed_at is None
        assert store.kinds[-1] == ChangeKind.ROLLOVER

    def test_rollover_without_progress_archives_nothing(self, tracker, store, clock):
        tracker.update_workout_sets("push", "bench-press", [WorkoutSet(reps=8, weight=60.0)])
        clock.today = JAN_1 + datetime.timedelta(days=1)
        snapshot = tracker.snapshot
        assert snapshot.workout_history == {}
        assert snapshot.days[0].workouts[0].previous_sets == [WorkoutSet(reps=8, weight=60.0)]
        assert store.kinds[-1] == ChangeKind.ROLLOVER

    def test_concurrent_callers_roll_over_once(self, tracker, store, clock):
        tracker.select_day("push")
        tracker.update_workout_sets("push", "bench-press", [WorkoutSet(reps=8, weight=60.0, completed=True)])
        clock.today = JAN_1 + datetime.timedelta(days=1)
        barrier = threading.Barrier(8)

        def read():
            barrier.wait()
            tracker.snapshot

        threads = [threading.Thread(target=read) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert store.kinds.count(ChangeKind.ROLLOVER) == 1
        assert list(tracker.snapshot.workout_history) == [JAN_1]
        assert _bench(tracker).previous_sets == [WorkoutSet(reps=8, weight=60.0, completed=True)]

    def test_load_restores_stored_state(self, store, clock):
        first = WorkoutTracker(store, "u1", clock=clock)
        first.select_day("legs")
        store.initial = store.persisted

        second = WorkoutTracker(store, "u1", clock=clock)
        assert second.snapshot.selected_day_id == "legs"
