import uuid
from datetime import datetime
from pydantic import BaseModel, Field, model_validator

from liftlog.schemas.common import Reps, SetId, Weight, WorkoutExerciseId, drop_blank

_NUMERIC = ("reps", "weight")

class SetCreate(BaseModel):
    workout_exercise_id: WorkoutExerciseId = Field(default=None, validate_default=True)
    reps: Reps | None = None
    weight: Weight | None = None

    @model_validator(mode="before")
    @classmethod
    def blank_means_omitted(cls, data):
        return drop_blank(data, _NUMERIC)

class SetUpdate(BaseModel):
    """Partial update: only fields present after blank-dropping are written."""
    set_id: SetId = Field(default=None, validate_default=True)
    reps: Reps | None = None
    weight: Weight | None = None

    @model_validator(mode="before")
    @classmethod
    def blank_means_omitted(cls, data):
        return drop_blank(data, _NUMERIC)

class SetDelete(BaseModel):
    set_id: SetId = Field(default=None, validate_default=True)

class SetRead(BaseModel):
    id: uuid.UUID
    workout_exercise_id: uuid.UUID
    set_number: int
    reps: int | None = None
    weight: float | None = None
    created_at: datetime

    model_config = {"from_attributes": True}
