import uuid
from datetime import datetime
from pydantic import BaseModel, Field

from liftlog.schemas.common import ExerciseId, WorkoutExerciseId, WorkoutId
from liftlog.schemas.exercise import ExerciseRead
from liftlog.schemas.exercise_set import SetRead

class WorkoutExerciseAdd(BaseModel):
    workout_id: WorkoutId = Field(default=None, validate_default=True)
    exercise_id: ExerciseId = Field(default=None, validate_default=True)

class WorkoutExerciseRemove(BaseModel):
    workout_exercise_id: WorkoutExerciseId = Field(default=None, validate_default=True)

class WorkoutExerciseRead(BaseModel):
    id: uuid.UUID
    workout_id: uuid.UUID
    exercise_id: uuid.UUID
    order: int
    created_at: datetime
    exercise: ExerciseRead
    sets: list[SetRead] = []

    model_config = {"from_attributes": True}
