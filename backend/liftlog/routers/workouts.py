import uuid
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from liftlog import actions
from liftlog.dates import local_day_bounds, parse_local_date
from liftlog.db import get_db
from liftlog.deps.auth import get_current_user_id, get_optional_user_id
from liftlog.repositories import WorkoutExerciseRepository, WorkoutRepository
from liftlog.routers._respond import ViewInvalidations, form_data, get_invalidations, respond
from liftlog.schemas.workout import WorkoutRead
from liftlog.schemas.workout_exercise import WorkoutExerciseRead

router = APIRouter(prefix="/workouts", tags=["workouts"])

@router.get("", response_model=list[WorkoutRead])
def list_my_workouts(
    date: Optional[str] = Query(None, description="Local calendar day, YYYY-MM-DD"),
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    day = None
    if date is not None:
        try:
            day = parse_local_date(date)
            # 9999-12-31 parses but has no next day to close the interval
            local_day_bounds(day)
        except (ValueError, OverflowError):
            raise HTTPException(status_code=422, detail="date must be YYYY-MM-DD")
    workouts = WorkoutRepository(db).list_for_user(user_id, on=day)
    return [WorkoutRead.model_validate(w) for w in workouts]

# Create/update validate before checking identity, so they take the optional
# user and let the action raise UnauthorizedError (-> 401).
@router.post("")
def create_workout(
    payload: Any = Body(None),
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_optional_user_id),
    invalidations: ViewInvalidations = Depends(get_invalidations),
):
    result = actions.create_workout(db, user_id, form_data(payload), invalidations)
    return respond(result, invalidations, created=True)

@router.get("/{workout_id}", response_model=WorkoutRead)
def get_workout(
    workout_id: uuid.UUID,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    workout = WorkoutRepository(db).get_for_user(user_id, workout_id)
    if not workout:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Workout not found")
    return WorkoutRead.model_validate(workout)

@router.patch("/{workout_id}")
def update_workout(
    workout_id: str,
    payload: Any = Body(None),
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_optional_user_id),
    invalidations: ViewInvalidations = Depends(get_invalidations),
):
    data = form_data(payload, workout_id=workout_id)
    result = actions.update_workout(db, user_id, data, invalidations)
    return respond(result, invalidations)

@router.get("/{workout_id}/exercises", response_model=list[WorkoutExerciseRead])
def list_workout_exercises(
    workout_id: uuid.UUID,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
):
    items = WorkoutExerciseRepository(db).list_for_workout(user_id, workout_id)
    return [WorkoutExerciseRead.model_validate(we) for we in items]

@router.post("/{workout_id}/exercises")
def add_exercise(
    workout_id: str,
    payload: Any = Body(None),
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_optional_user_id),
    invalidations: ViewInvalidations = Depends(get_invalidations),
):
    data = form_data(payload, workout_id=workout_id)
    result = actions.add_exercise_to_workout(db, user_id, data, invalidations)
    return respond(result, invalidations, created=True)
