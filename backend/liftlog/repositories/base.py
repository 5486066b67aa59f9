# liftlog/repositories/base.py
from __future__ import annotations
from typing import Generic, TypeVar

from sqlalchemy.orm import Session
from sqlalchemy import select, func

T = TypeVar("T")  # SQLAlchemy model type

class BaseRepository(Generic[T]):
    """Lightweight base for repositories using SQLAlchemy 2.0 style.

    Methods that take a ``user_id`` return ``None`` both when the row does not
    exist and when it belongs to someone else, so callers cannot tell the two
    apart.
    """
    def __init__(self, db: Session):
        self.db = db

    def next_sequence_value(self, column, scope_column, scope_id: int, *, baseline: int) -> int:
        """(max(column) within the parent scope, or baseline when empty) + 1.

        Callers hold a lock on the parent row so concurrent inserts under the
        same parent serialize here.
        """
        current = self.db.execute(
            select(func.max(column)).where(scope_column == scope_id)
        ).scalar_one()
        return (baseline if current is None else current) + 1

    def add_and_commit(self, entity: T) -> T:
        self.db.add(entity)
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def delete_and_commit(self, entity: T) -> T:
        self.db.delete(entity)
        self.db.commit()
        return entity
