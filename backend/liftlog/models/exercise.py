import uuid
from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import String, DateTime, Uuid
from liftlog.db import Base
from liftlog.dates import utcnow

class Exercise(Base):
    """Library entry shared by every user."""
    __tablename__ = "exercises"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    # null for seeded entries
    created_by: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow
    )

    # passive_deletes="all": let the RESTRICT foreign key reject deletes instead of nulling children
    workout_exercises = relationship("WorkoutExercise", back_populates="exercise", passive_deletes="all")
