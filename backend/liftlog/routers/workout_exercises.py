from typing import Any, Optional

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from liftlog import actions
from liftlog.db import get_db
from liftlog.deps.auth import get_optional_user_id
from liftlog.routers._respond import ViewInvalidations, form_data, get_invalidations, respond

router = APIRouter(prefix="/workout-exercises", tags=["workout-exercises"])

@router.delete("/{workout_exercise_id}")
def remove_exercise(
    workout_exercise_id: str,
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_optional_user_id),
    invalidations: ViewInvalidations = Depends(get_invalidations),
):
    data = {"workout_exercise_id": workout_exercise_id}
    result = actions.remove_exercise_from_workout(db, user_id, data, invalidations)
    return respond(result, invalidations)

@router.post("/{workout_exercise_id}/sets")
def add_set(
    workout_exercise_id: str,
    payload: Any = Body(None),
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_optional_user_id),
    invalidations: ViewInvalidations = Depends(get_invalidations),
):
    data = form_data(payload, workout_exercise_id=workout_exercise_id)
    result = actions.add_set(db, user_id, data, invalidations)
    return respond(result, invalidations, created=True)
