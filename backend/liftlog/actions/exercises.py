"""Exercise library and workout-exercise actions.

Secondary actions: a missing identity is a Failed result, not an exception.
"""
import logging
from typing import Any, Mapping, Optional

from pydantic import ValidationError
from sqlalchemy.orm import Session

from liftlog.actions._attempt import attempt
from liftlog.actions.results import ExerciseCreated, Failed, Ok, Reason, WorkoutExerciseAdded
from liftlog.actions.validation import first_error, parse
from liftlog.actions.views import Revalidate, no_revalidate, workout_view
from liftlog.repositories import ExerciseRepository, WorkoutExerciseRepository
from liftlog.schemas.exercise import ExerciseCreate
from liftlog.schemas.workout_exercise import WorkoutExerciseAdd, WorkoutExerciseRemove

log = logging.getLogger("uvicorn")

UNAUTHORIZED = Failed(error="Unauthorized", reason=Reason.unauthorized)


def create_exercise(
    db: Session,
    user_id: Optional[str],
    data: Mapping[str, Any],
    revalidate: Revalidate = no_revalidate,
) -> ExerciseCreated | Failed:
    try:
        form = parse(ExerciseCreate, data)
    except ValidationError as exc:
        return Failed(error=first_error(exc), reason=Reason.validation)
    if not user_id:
        return UNAUTHORIZED

    def run():
        exercise = ExerciseRepository(db).create(user_id, name=form.name)
        log.info("exercise created id=%s name=%r", exercise.id, exercise.name)
        return ExerciseCreated(exercise_id=exercise.id)

    return attempt(db, "create exercise", run)


def add_exercise_to_workout(
    db: Session,
    user_id: Optional[str],
    data: Mapping[str, Any],
    revalidate: Revalidate = no_revalidate,
) -> WorkoutExerciseAdded | Failed:
    try:
        form = parse(WorkoutExerciseAdd, data)
    except ValidationError as exc:
        return Failed(error=first_error(exc), reason=Reason.validation)
    if not user_id:
        return UNAUTHORIZED

    def run():
        we = WorkoutExerciseRepository(db).add(user_id, form.workout_id, form.exercise_id)
        revalidate(workout_view(form.workout_id))
        return WorkoutExerciseAdded(workout_exercise_id=we.id, order=we.order)

    return attempt(db, "add exercise", run)


def remove_exercise_from_workout(
    db: Session,
    user_id: Optional[str],
    data: Mapping[str, Any],
    revalidate: Revalidate = no_revalidate,
) -> Ok | Failed:
    try:
        form = parse(WorkoutExerciseRemove, data)
    except ValidationError as exc:
        return Failed(error=first_error(exc), reason=Reason.validation)
    if not user_id:
        return UNAUTHORIZED

    def run():
        workout_id = WorkoutExerciseRepository(db).remove(user_id, form.workout_exercise_id)
        revalidate(workout_view(workout_id))
        return Ok()

    return attempt(db, "remove exercise", run)
