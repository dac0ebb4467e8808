"""
Workout endpoints.

Routine editing and set logging for the current user.  Every mutation
responds with the user's full snapshot for today.
"""

from fastapi import APIRouter, Depends, status

from gymtrack.api.dependencies import get_workout_service
from gymtrack.schemas.workout import DayCreate, SetsUpdate, WorkoutSnapshot, WorkoutTemplate, WorkoutUpdate
from gymtrack.services.workout_service import WorkoutService

router = APIRouter()


@router.get("", summary="Get today's snapshot.", response_model=WorkoutSnapshot)
def get_snapshot(service: WorkoutService = Depends(get_workout_service)):
    return service.get_snapshot()


@router.post("/days", summary="Add a routine day.", response_model=WorkoutSnapshot,
             status_code=status.HTTP_201_CREATED, )
def add_day(data: DayCreate, service: WorkoutService = Depends(get_workout_service)):
    return service.add_day(data.name)


@router.delete("/days/{day_id}", summary="Remove a routine day and its workouts.", response_model=WorkoutSnapshot)
def remove_day(day_id: str, service: WorkoutService = Depends(get_workout_service)):
    return service.remove_day(day_id)


@router.post("/days/{day_id}/complete", summary="Mark a day completed for today.", response_model=WorkoutSnapshot)
def complete_day(day_id: str, service: WorkoutService = Depends(get_workout_service)):
    return service.complete_day(day_id)


@router.post("/days/{day_id}/workouts", summary="Add a workout to a day.", response_model=WorkoutSnapshot,
             status_code=status.HTTP_201_CREATED, )
def add_workout(day_id: str, template: WorkoutTemplate, service: WorkoutService = Depends(get_workout_service)):
    return service.add_workout(day_id, template)


@router.patch("/days/{day_id}/workouts/{workout_id}", summary="Edit a workout's template fields.",
              response_model=WorkoutSnapshot, )
def update_workout(day_id: str, workout_id: str, update: WorkoutUpdate,
                   service: WorkoutService = Depends(get_workout_service), ):
    return service.update_workout(day_id, workout_id, update)


@router.delete("/days/{day_id}/workouts/{workout_id}", summary="Remove a workout.", response_model=WorkoutSnapshot)
def remove_workout(day_id: str, workout_id: str, service: WorkoutService = Depends(get_workout_service)):
    return service.remove_workout(day_id, workout_id)


@router.put("/days/{day_id}/workouts/{workout_id}/sets", summary="Replace today's sets for a workout.",
            response_model=WorkoutSnapshot, )
def save_sets(day_id: str, workout_id: str, data: SetsUpdate, service: WorkoutService = Depends(get_workout_service)):
    return service.save_sets(day_id, workout_id, data.sets)


@router.post("/days/{day_id}/workouts/{workout_id}/toggle", summary="Toggle a workout's completion.",
             response_model=WorkoutSnapshot, )
def toggle_workout(day_id: str, workout_id: str, service: WorkoutService = Depends(get_workout_service)):
    return service.toggle_workout(day_id, workout_id)
