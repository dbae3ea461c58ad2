from typing import Any, Optional

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from liftlog import actions
from liftlog.db import get_db
from liftlog.deps.auth import get_current_user_id, get_optional_user_id
from liftlog.repositories import ExerciseRepository
from liftlog.routers._respond import ViewInvalidations, form_data, get_invalidations, respond
from liftlog.schemas.exercise import ExerciseRead

router = APIRouter(prefix="/exercises", tags=["exercises"])

@router.get("", response_model=list[ExerciseRead])
def list_exercises(
    db: Session = Depends(get_db),
    _user_id: str = Depends(get_current_user_id),
):
    # shared library: same list for every signed-in user
    return [ExerciseRead.model_validate(e) for e in ExerciseRepository(db).list_all()]

@router.post("")
def create_exercise(
    payload: Any = Body(None),
    db: Session = Depends(get_db),
    user_id: Optional[str] = Depends(get_optional_user_id),
    invalidations: ViewInvalidations = Depends(get_invalidations),
):
    result = actions.create_exercise(db, user_id, form_data(payload), invalidations)
    return respond(result, invalidations, created=True)
