from __future__ import annotations
import uuid
from datetime import date, datetime
from typing import Any, Optional

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from liftlog.dates import local_day_bounds, to_utc
from liftlog.models import Workout, WorkoutExercise
from liftlog.repositories.base import BaseRepository

_UPDATABLE = ("name", "started_at")

def _with_detail(stmt):
    # workout -> workout_exercises (by order) -> exercise + sets (by set_number)
    return stmt.options(
        selectinload(Workout.workout_exercises).selectinload(WorkoutExercise.exercise),
        selectinload(Workout.workout_exercises).selectinload(WorkoutExercise.sets),
    )

class WorkoutRepository(BaseRepository[Workout]):
    """Workouts are always read and written through their owner's id."""

    # READS
    def list_for_user(self, user_id: str, *, on: Optional[date] = None) -> list[Workout]:
        stmt = select(Workout).where(Workout.user_id == user_id)
        if on is None:
            stmt = stmt.order_by(Workout.created_at.desc())
        else:
            start, end = local_day_bounds(on)
            stmt = stmt.where(Workout.started_at >= start, Workout.started_at < end)\
                       .order_by(Workout.started_at.desc())
        return list(self.db.execute(_with_detail(stmt)).scalars().all())

    def get_for_user(self, user_id: str, workout_id: uuid.UUID) -> Optional[Workout]:
        """None when the workout is missing *or* belongs to another user."""
        stmt = select(Workout).where(Workout.id == workout_id, Workout.user_id == user_id)
        return self.db.execute(_with_detail(stmt)).scalar_one_or_none()

    # WRITES
    def create_for_user(self, user_id: str, *, name: str, started_at: datetime) -> Workout:
        return self.save(Workout(user_id=user_id, name=name, started_at=to_utc(started_at)))

    def update_for_user(self, user_id: str, workout_id: uuid.UUID, /, **fields: Any) -> Optional[Workout]:
        """
        Partial update of name/started_at. Returns None when nothing matched
        the (id, owner) pair; absent and not-owned look the same.
        """
        unknown = set(fields) - set(_UPDATABLE)
        if unknown:
            raise ValueError(f"cannot update workout fields: {sorted(unknown)}")
        stmt = select(Workout).where(Workout.id == workout_id, Workout.user_id == user_id)
        workout = self.db.execute(stmt).scalar_one_or_none()
        if not workout:
            return None
        if fields.get("started_at") is not None:
            fields["started_at"] = to_utc(fields["started_at"])
        for key, value in fields.items():
            setattr(workout, key, value)
        self.db.commit()
        self.db.refresh(workout)
        return workout

    def delete_for_user(self, user_id: str, workout_id: uuid.UUID) -> bool:
        """Not routed. Workout exercises and their sets go with it (ON DELETE CASCADE)."""
        stmt = select(Workout).where(Workout.id == workout_id, Workout.user_id == user_id)
        workout = self.db.execute(stmt).scalar_one_or_none()
        if not workout:
            return False
        self.db.delete(workout)
        self.db.commit()
        return True
