"""Discriminated results returned by every action.

``{"success": true, ...payload}`` or ``{"success": false, ...errors}``.
``reason`` is kept off the wire; routers use it to pick a status code.
"""
import uuid
from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field


class Reason(str, Enum):
    validation = "validation"
    unauthorized = "unauthorized"
    not_found = "not_found"
    error = "error"


class Ok(BaseModel):
    success: Literal[True] = True


class WorkoutSaved(Ok):
    workout_id: uuid.UUID
    redirect_url: str


class ExerciseCreated(Ok):
    exercise_id: uuid.UUID


class WorkoutExerciseAdded(Ok):
    workout_exercise_id: uuid.UUID
    order: int


class SetAdded(Ok):
    set_id: uuid.UUID
    set_number: int


class Failed(BaseModel):
    """Exercise/set actions: one message for the whole request."""
    success: Literal[False] = False
    error: str
    reason: Reason = Field(default=Reason.error, exclude=True)


class FormFailed(BaseModel):
    """Workout form actions: first message per field, plus an optional form-level error."""
    success: Literal[False] = False
    field_errors: dict[str, str] = {}
    error: str | None = None
    reason: Reason = Field(default=Reason.validation, exclude=True)
