import uuid
from datetime import datetime
from pydantic import BaseModel, Field, computed_field

from liftlog.dates import format_display_date, from_store
from liftlog.schemas.common import StartedAt, WorkoutId, WorkoutName
from liftlog.schemas.workout_exercise import WorkoutExerciseRead

class WorkoutCreate(BaseModel):
    # defaults are validated so a missing key reports the same message as ""
    name: WorkoutName = Field(default=None, validate_default=True)
    started_at: StartedAt = Field(default=None, validate_default=True)

class WorkoutUpdate(BaseModel):
    """Omitted fields stay as they are; supplied ones follow the create rules."""
    workout_id: WorkoutId = Field(default=None, validate_default=True)
    name: WorkoutName = None
    started_at: StartedAt = None

class WorkoutRead(BaseModel):
    id: uuid.UUID
    name: str | None = None
    started_at: datetime | None = None
    created_at: datetime
    updated_at: datetime
    workout_exercises: list[WorkoutExerciseRead] = []

    model_config = {"from_attributes": True}

    @computed_field
    @property
    def display_date(self) -> str | None:
        """Heading label for the workout page, e.g. ``15th Jan 2025``."""
        if self.started_at is None:
            return None
        return format_display_date(from_store(self.started_at))
