# liftlog/repositories/base.py
from __future__ import annotations
from typing import Generic, TypeVar

from sqlalchemy import select, func
from sqlalchemy.orm import Session

T = TypeVar("T")  # SQLAlchemy model type

class BaseRepository(Generic[T]):
    """Lightweight base for repositories using SQLAlchemy 2.0 style."""
    def __init__(self, db: Session):
        self.db = db

    def save(self, entity: T) -> T:
        self.db.add(entity)
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def next_in_sequence(self, column, *where, start: int) -> int:
        """
        max(column) + 1 over the filtered rows, or ``start`` when there are none.

        Read-then-insert: two concurrent writers can compute the same value.
        """
        current = self.db.execute(select(func.max(column)).where(*where)).scalar_one()
        return start if current is None else current + 1
