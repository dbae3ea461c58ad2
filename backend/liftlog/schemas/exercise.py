import uuid
from datetime import datetime
from pydantic import BaseModel, Field

from liftlog.schemas.common import ExerciseName

class ExerciseCreate(BaseModel):
    name: ExerciseName = Field(default=None, validate_default=True)

class ExerciseRead(BaseModel):
    id: uuid.UUID
    name: str
    created_by: str | None = None
    created_at: datetime

    model_config = {"from_attributes": True}
