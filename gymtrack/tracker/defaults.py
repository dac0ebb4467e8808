"""
Seeded default routine.

A push / pull / legs split with example reference sets, given to a user
whose local record is missing or unreadable and to new users created by
the seed script.
"""

import datetime

from gymtrack.schemas.user import UserProfile
from gymtrack.schemas.workout import Day, RepRange, Workout, WorkoutSet, WorkoutSnapshot

DEFAULT_USERS: list[UserProfile] = [
    UserProfile(id="demo", name="Demo", access_code="DEMO2024"),
]


def _sets(*pairs: tuple[int, float]) -> list[WorkoutSet]:
    return [WorkoutSet(reps=reps, weight=weight, completed=True) for reps, weight in pairs]


def default_routine() -> list[Day]:
    """Fresh copy of the default routine days."""
    return [
        Day(id="push", name="Push", workouts=[
            Workout(id="bench-press", name="Bench Press", default_sets=4, default_reps=RepRange(min=6, max=8),
                    machine_setup_notes="Adjust bench to flat position, ensure proper bar path",
                    previous_sets=_sets((8, 60), (8, 60), (6, 65), (5, 65))),
            Workout(id="shoulder-press", name="Shoulder Press", default_sets=3, default_reps=RepRange(min=8, max=12),
                    machine_setup_notes="Seat height at shoulder level, back support engaged",
                    previous_sets=_sets((10, 35), (9, 37.5), (8, 37.5))),
        ]),
        Day(id="pull", name="Pull", workouts=[
            Workout(id="lat-pulldown", name="Lat Pulldown", default_sets=4, default_reps=RepRange(min=8, max=12),
                    machine_setup_notes="Wide grip, slight lean back, pull to upper chest",
                    previous_sets=_sets((10, 55), (10, 60), (8, 65), (7, 65))),
        ]),
        Day(id="legs", name="Legs", workouts=[
            Workout(id="squats", name="Squats", default_sets=4, default_reps=RepRange(min=10, max=15),
                    machine_setup_notes="Bar at shoulder height, feet shoulder-width apart",
                    previous_sets=_sets((12, 85), (12, 90), (10, 95), (8, 95))),
        ]),
    ]


def default_snapshot(user_id: str, today: datetime.date) -> WorkoutSnapshot:
    return WorkoutSnapshot(user_id=user_id, days=default_routine(), selected_day_id=None, selected_date=today)
