"""Set actions. Same result contract as the exercise actions."""
from typing import Any, Mapping, Optional

from pydantic import ValidationError
from sqlalchemy.orm import Session

from liftlog.actions._attempt import attempt
from liftlog.actions.exercises import UNAUTHORIZED
from liftlog.actions.results import Failed, Ok, Reason, SetAdded
from liftlog.actions.validation import first_error, parse
from liftlog.actions.views import Revalidate, no_revalidate, workout_view
from liftlog.repositories import SetRepository
from liftlog.schemas.exercise_set import SetCreate, SetDelete, SetUpdate


def add_set(
    db: Session,
    user_id: Optional[str],
    data: Mapping[str, Any],
    revalidate: Revalidate = no_revalidate,
) -> SetAdded | Failed:
    try:
        form = parse(SetCreate, data)
    except ValidationError as exc:
        return Failed(error=first_error(exc), reason=Reason.validation)
    if not user_id:
        return UNAUTHORIZED

    def run():
        s = SetRepository(db).add(
            user_id, form.workout_exercise_id, reps=form.reps, weight=form.weight
        )
        revalidate(workout_view(s.workout_exercise.workout_id))
        return SetAdded(set_id=s.id, set_number=s.set_number)

    return attempt(db, "add set", run)


def update_set(
    db: Session,
    user_id: Optional[str],
    data: Mapping[str, Any],
    revalidate: Revalidate = no_revalidate,
) -> Ok | Failed:
    try:
        form = parse(SetUpdate, data)
    except ValidationError as exc:
        return Failed(error=first_error(exc), reason=Reason.validation)
    if not user_id:
        return UNAUTHORIZED

    def run():
        changes = form.model_dump(exclude_unset=True, exclude={"set_id"})
        s = SetRepository(db).update(user_id, form.set_id, **changes)
        revalidate(workout_view(s.workout_exercise.workout_id))
        return Ok()

    return attempt(db, "update set", run)


def delete_set(
    db: Session,
    user_id: Optional[str],
    data: Mapping[str, Any],
    revalidate: Revalidate = no_revalidate,
) -> Ok | Failed:
    try:
        form = parse(SetDelete, data)
    except ValidationError as exc:
        return Failed(error=first_error(exc), reason=Reason.validation)
    if not user_id:
        return UNAUTHORIZED

    def run():
        workout_id = SetRepository(db).delete(user_id, form.set_id)
        revalidate(workout_view(workout_id))
        return Ok()

    return attempt(db, "delete set", run)
