from __future__ import annotations
from datetime import date, datetime, tzinfo
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import joinedload, selectinload

from liftlog.dates import day_bounds
from liftlog.models import Workout, WorkoutExercise
from liftlog.repositories.base import BaseRepository

class WorkoutRepository(BaseRepository[Workout]):
    # user_id is fixed at creation
    UPDATABLE = ("name", "started_at", "completed_at")

    def _owned(self, workout_id: int, user_id: str):
        return select(Workout).where(Workout.id == workout_id, Workout.user_id == user_id)

    # READS
    def get(self, workout_id: int, user_id: str) -> Optional[Workout]:
        return self.db.execute(self._owned(workout_id, user_id)).scalar_one_or_none()

    def list_by_user(self, user_id: str) -> list[Workout]:
        stmt = select(Workout).where(Workout.user_id == user_id).order_by(Workout.started_at.asc(), Workout.id.asc())
        return list(self.db.execute(stmt).scalars().all())

    def list_by_user_and_range(self, user_id: str, start: datetime, end: datetime) -> list[Workout]:
        stmt = (
            select(Workout)
            .where(Workout.user_id == user_id, Workout.started_at >= start, Workout.started_at <= end)
            .order_by(Workout.started_at.asc(), Workout.id.asc())
        )
        return list(self.db.execute(stmt).scalars().all())

    def list_by_user_and_date(self, user_id: str, day: date, tz: tzinfo | None = None) -> list[Workout]:
        start, end = day_bounds(day, tz)
        return self.list_by_user_and_range(user_id, start, end)

    def get_with_exercises(self, workout_id: int, user_id: str) -> Optional[Workout]:
        """Workout with its exercise entries, catalog names and sets, all in display order."""
        stmt = self._owned(workout_id, user_id).options(
            selectinload(Workout.exercises).options(
                joinedload(WorkoutExercise.exercise),
                selectinload(WorkoutExercise.sets),
            )
        ).execution_options(populate_existing=True)
        return self.db.execute(stmt).scalar_one_or_none()

    def get_exercises_with_sets(self, workout_id: int, user_id: str) -> Optional[list[WorkoutExercise]]:
        """Exercise entries of an owned workout, each with its sets.

        Entries come back ordered by ``order`` and sets by ``set_number``.
        Returns None when the workout is missing or not the caller's.
        """
        if self.get(workout_id, user_id) is None:
            return None
        stmt = (
            select(WorkoutExercise)
            .where(WorkoutExercise.workout_id == workout_id)
            .options(joinedload(WorkoutExercise.exercise), selectinload(WorkoutExercise.sets))
            .order_by(WorkoutExercise.order.asc())
            .execution_options(populate_existing=True)
        )
        return list(self.db.execute(stmt).scalars().all())

    # WRITES
    def create(self, user_id: str, *, name: str, started_at: datetime) -> Workout:
        return self.add_and_commit(Workout(user_id=user_id, name=name, started_at=started_at))

    def update(self, workout_id: int, user_id: str, **fields) -> Optional[Workout]:
        """Apply only the fields passed in; an explicit None clears a nullable column."""
        unknown = set(fields) - set(self.UPDATABLE)
        if unknown:
            raise TypeError(f"cannot update {sorted(unknown)}")
        workout = self.db.execute(self._owned(workout_id, user_id).with_for_update()).scalar_one_or_none()
        if not workout:
            self.db.rollback()
            return None
        for key, value in fields.items():
            setattr(workout, key, value)
        self.db.commit()
        self.db.refresh(workout)
        return workout

    def delete(self, workout_id: int, user_id: str) -> Optional[Workout]:
        workout = self.db.execute(self._owned(workout_id, user_id).with_for_update()).scalar_one_or_none()
        if not workout:
            self.db.rollback()
            return None
        return self.delete_and_commit(workout)
