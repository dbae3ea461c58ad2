from __future__ import annotations
import uuid
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from liftlog.errors import ExerciseInUseError
from liftlog.models import Exercise
from liftlog.repositories.base import BaseRepository

class ExerciseRepository(BaseRepository[Exercise]):
    """The shared exercise library. No ownership filter: every user sees every entry."""

    # READS
    def list_all(self) -> list[Exercise]:
        stmt = select(Exercise).order_by(Exercise.name.asc())
        return list(self.db.execute(stmt).scalars().all())

    def get(self, exercise_id: uuid.UUID) -> Optional[Exercise]:
        return self.db.get(Exercise, exercise_id)

    # WRITES
    def create(self, user_id: Optional[str], *, name: str) -> Exercise:
        # duplicate names are allowed
        return self.save(Exercise(name=name, created_by=user_id))

    def delete(self, exercise_id: uuid.UUID) -> bool:
        """Not routed; the store refuses while any workout references the exercise."""
        exercise = self.get(exercise_id)
        if not exercise:
            return False
        try:
            self.db.delete(exercise)
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise ExerciseInUseError(exercise_id)
        return True
