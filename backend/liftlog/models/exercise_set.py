import uuid
from datetime import datetime
from decimal import Decimal
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, ForeignKey, DateTime, Numeric, Index, Uuid
from liftlog.db import Base
from liftlog.dates import utcnow

class ExerciseSet(Base):
    __tablename__ = "sets"
    __table_args__ = (
        Index("ix_sets_workout_exercise_id_set_number", "workout_exercise_id", "set_number"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    workout_exercise_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("workout_exercises.id", ondelete="CASCADE"), nullable=False, index=True
    )
    # 1-based sequence marker, never reused after a delete
    set_number: Mapped[int] = mapped_column(Integer, nullable=False)
    reps: Mapped[int | None] = mapped_column(Integer, nullable=True)
    weight: Mapped[Decimal | None] = mapped_column(Numeric(10, 2), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)

    workout_exercise = relationship("WorkoutExercise", back_populates="sets")
