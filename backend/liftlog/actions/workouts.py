"""Workout form actions: create and edit.

These are the primary flows. A missing identity raises UnauthorizedError
rather than returning a result, and store faults propagate to the caller.
"""
import logging
from typing import Any, Mapping, Optional

from pydantic import ValidationError
from sqlalchemy.orm import Session

from liftlog.actions.results import FormFailed, Reason, WorkoutSaved
from liftlog.actions.validation import field_errors, parse
from liftlog.actions.views import DASHBOARD, Revalidate, dashboard_for, no_revalidate, workout_view
from liftlog.dates import from_store, utcnow
from liftlog.errors import UnauthorizedError
from liftlog.repositories import WorkoutRepository
from liftlog.schemas.workout import WorkoutCreate, WorkoutUpdate

log = logging.getLogger("uvicorn")


def create_workout(
    db: Session,
    user_id: Optional[str],
    data: Mapping[str, Any],
    revalidate: Revalidate = no_revalidate,
) -> WorkoutSaved | FormFailed:
    try:
        form = parse(WorkoutCreate, data)
    except ValidationError as exc:
        return FormFailed(field_errors=field_errors(exc))

    if not user_id:
        raise UnauthorizedError()

    workout = WorkoutRepository(db).create_for_user(
        user_id, name=form.name, started_at=form.started_at
    )
    log.info("workout created id=%s user=%s", workout.id, user_id)
    revalidate(DASHBOARD)
    return WorkoutSaved(workout_id=workout.id, redirect_url=dashboard_for(form.started_at))


def update_workout(
    db: Session,
    user_id: Optional[str],
    data: Mapping[str, Any],
    revalidate: Revalidate = no_revalidate,
) -> WorkoutSaved | FormFailed:
    try:
        form = parse(WorkoutUpdate, data)
    except ValidationError as exc:
        return FormFailed(field_errors=field_errors(exc))

    if not user_id:
        raise UnauthorizedError()

    changes = form.model_dump(exclude_unset=True, exclude={"workout_id"})
    workout = WorkoutRepository(db).update_for_user(user_id, form.workout_id, **changes)
    if workout is None:
        # zero rows: either no such workout or not this user's
        return FormFailed(error="Workout not found", reason=Reason.not_found)

    log.info("workout updated id=%s fields=%s", workout.id, sorted(changes))
    revalidate(DASHBOARD)
    revalidate(workout_view(workout.id))
    day = form.started_at or workout.started_at or utcnow()
    return WorkoutSaved(workout_id=workout.id, redirect_url=dashboard_for(from_store(day)))
