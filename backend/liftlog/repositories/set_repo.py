from __future__ import annotations
import uuid
from decimal import Decimal
from typing import Any, Optional

from sqlalchemy import select

from liftlog.errors import NotFoundOrUnauthorized
from liftlog.models import ExerciseSet, Workout, WorkoutExercise
from liftlog.repositories.base import BaseRepository
from liftlog.repositories.workout_exercise_repo import WorkoutExerciseRepository

_UPDATABLE = ("reps", "weight")

class SetRepository(BaseRepository[ExerciseSet]):

    # READS
    def get_owned(self, user_id: str, set_id: uuid.UUID) -> ExerciseSet:
        """Ownership check via set -> workout_exercise -> workout -> user."""
        stmt = (
            select(ExerciseSet)
            .join(ExerciseSet.workout_exercise)
            .join(WorkoutExercise.workout)
            .where(ExerciseSet.id == set_id, Workout.user_id == user_id)
        )
        s = self.db.execute(stmt).scalar_one_or_none()
        if not s:
            raise NotFoundOrUnauthorized("Set not found")
        return s

    # WRITES
    def add(
        self,
        user_id: str,
        workout_exercise_id: uuid.UUID,
        *,
        reps: Optional[int] = None,
        weight: Optional[Decimal] = None,
    ) -> ExerciseSet:
        WorkoutExerciseRepository(self.db).get_owned(user_id, workout_exercise_id)
        # numbers are never reused: deleting set 2 of 3 makes the next one 4
        set_number = self.next_in_sequence(
            ExerciseSet.set_number, ExerciseSet.workout_exercise_id == workout_exercise_id, start=1
        )
        s = ExerciseSet(
            workout_exercise_id=workout_exercise_id,
            set_number=set_number,
            reps=reps,
            weight=weight,
        )
        return self.save(s)

    def update(self, user_id: str, set_id: uuid.UUID, /, **fields: Any) -> ExerciseSet:
        """Only the keys passed are written; omitted fields keep their value."""
        unknown = set(fields) - set(_UPDATABLE)
        if unknown:
            raise ValueError(f"cannot update set fields: {sorted(unknown)}")
        s = self.get_owned(user_id, set_id)
        for key, value in fields.items():
            setattr(s, key, value)
        self.db.commit()
        self.db.refresh(s)
        return s

    def delete(self, user_id: str, set_id: uuid.UUID) -> uuid.UUID:
        """Returns the workout id the set belonged to."""
        s = self.get_owned(user_id, set_id)
        workout_id = s.workout_exercise.workout_id
        self.db.delete(s)
        self.db.commit()
        return workout_id
