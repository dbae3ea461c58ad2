from __future__ import annotations
import uuid

from sqlalchemy import select

from liftlog.errors import NotFoundOrUnauthorized
from liftlog.models import Exercise, Workout, WorkoutExercise
from liftlog.repositories.base import BaseRepository

class WorkoutExerciseRepository(BaseRepository[WorkoutExercise]):

    def _owned_workout(self, user_id: str, workout_id: uuid.UUID) -> Workout:
        stmt = select(Workout).where(Workout.id == workout_id, Workout.user_id == user_id)
        workout = self.db.execute(stmt).scalar_one_or_none()
        if not workout:
            raise NotFoundOrUnauthorized("Workout not found")
        return workout

    # READS
    def get_owned(self, user_id: str, workout_exercise_id: uuid.UUID) -> WorkoutExercise:
        """Resolve workout_exercise -> workout -> owner, or raise."""
        stmt = (
            select(WorkoutExercise)
            .join(WorkoutExercise.workout)
            .where(WorkoutExercise.id == workout_exercise_id, Workout.user_id == user_id)
        )
        we = self.db.execute(stmt).scalar_one_or_none()
        if not we:
            raise NotFoundOrUnauthorized("Workout exercise not found")
        return we

    def list_for_workout(self, user_id: str, workout_id: uuid.UUID) -> list[WorkoutExercise]:
        self._owned_workout(user_id, workout_id)
        stmt = (
            select(WorkoutExercise)
            .where(WorkoutExercise.workout_id == workout_id)
            .order_by(WorkoutExercise.order.asc())
        )
        return list(self.db.execute(stmt).scalars().all())

    # WRITES
    def add(self, user_id: str, workout_id: uuid.UUID, exercise_id: uuid.UUID) -> WorkoutExercise:
        self._owned_workout(user_id, workout_id)
        if not self.db.get(Exercise, exercise_id):
            raise NotFoundOrUnauthorized("Exercise not found")
        order = self.next_in_sequence(
            WorkoutExercise.order, WorkoutExercise.workout_id == workout_id, start=0
        )
        we = WorkoutExercise(workout_id=workout_id, exercise_id=exercise_id, order=order)
        return self.save(we)

    def remove(self, user_id: str, workout_exercise_id: uuid.UUID) -> uuid.UUID:
        """Delete the link (its sets cascade). Returns the parent workout id."""
        we = self.get_owned(user_id, workout_exercise_id)
        workout_id = we.workout_id
        self.db.delete(we)
        self.db.commit()
        return workout_id
