from __future__ import annotations
from decimal import Decimal
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import contains_eager

from liftlog.models import Workout, WorkoutExercise, WorkoutSet
from liftlog.repositories.base import BaseRepository

class SetRepository(BaseRepository[WorkoutSet]):
    """Sets come back with `workout_exercise` loaded so callers can reach the workout id."""

    def _owned(self, set_id: int, user_id: str):
        # Set -> WorkoutExercise -> Workout.user_id
        return (
            select(WorkoutSet)
            .join(WorkoutExercise, WorkoutSet.workout_exercise_id == WorkoutExercise.id)
            .join(Workout, WorkoutExercise.workout_id == Workout.id)
            .where(WorkoutSet.id == set_id, Workout.user_id == user_id)
            .options(contains_eager(WorkoutSet.workout_exercise))
        )

    def _owned_parent(self, workout_exercise_id: int, user_id: str):
        return (
            select(WorkoutExercise)
            .join(Workout, WorkoutExercise.workout_id == Workout.id)
            .where(WorkoutExercise.id == workout_exercise_id, Workout.user_id == user_id)
        )

    # READS
    def get(self, set_id: int, user_id: str) -> Optional[WorkoutSet]:
        return self.db.execute(self._owned(set_id, user_id)).scalar_one_or_none()

    def list_by_workout_exercise(self, workout_exercise_id: int, user_id: str) -> Optional[list[WorkoutSet]]:
        if self.db.execute(self._owned_parent(workout_exercise_id, user_id)).scalar_one_or_none() is None:
            return None
        stmt = (
            select(WorkoutSet)
            .where(WorkoutSet.workout_exercise_id == workout_exercise_id)
            .order_by(WorkoutSet.set_number.asc())
        )
        return list(self.db.execute(stmt).scalars().all())

    # WRITES
    def create(self, workout_exercise_id: int, user_id: str, *, reps: int, weight: Decimal) -> Optional[WorkoutSet]:
        parent = self.db.execute(
            self._owned_parent(workout_exercise_id, user_id).with_for_update(of=WorkoutExercise)
        ).scalar_one_or_none()
        if not parent:
            self.db.rollback()
            return None

        set_number = self.next_sequence_value(
            WorkoutSet.set_number, WorkoutSet.workout_exercise_id, workout_exercise_id, baseline=0
        )
        s = WorkoutSet(workout_exercise=parent, set_number=set_number, reps=reps, weight=weight)
        return self.add_and_commit(s)

    def update(self, set_id: int, user_id: str, *, reps: int, weight: Decimal) -> Optional[WorkoutSet]:
        s = self.db.execute(self._owned(set_id, user_id).with_for_update(of=WorkoutSet)).scalar_one_or_none()
        if not s:
            self.db.rollback()
            return None
        s.reps = reps
        s.weight = weight
        self.db.commit()
        self.db.refresh(s)
        return s

    def delete(self, set_id: int, user_id: str) -> Optional[WorkoutSet]:
        s = self.db.execute(self._owned(set_id, user_id).with_for_update(of=WorkoutSet)).scalar_one_or_none()
        if not s:
            self.db.rollback()
            return None
        return self.delete_and_commit(s)
