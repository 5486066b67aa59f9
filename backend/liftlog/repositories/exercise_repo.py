from __future__ import annotations
from typing import Optional

from sqlalchemy import select, func
from sqlalchemy.exc import IntegrityError

from liftlog.models import Exercise, Workout, WorkoutExercise
from liftlog.repositories.base import BaseRepository

class ExerciseRepository(BaseRepository[Exercise]):
    """Global catalog; no ownership filter applies."""

    def get(self, exercise_id: int) -> Optional[Exercise]:
        return self.db.get(Exercise, exercise_id)

    def get_by_name(self, name: str) -> Optional[Exercise]:
        stmt = select(Exercise).where(func.lower(Exercise.name) == name.lower())
        return self.db.execute(stmt).scalar_one_or_none()

    def list_all(self) -> list[Exercise]:
        stmt = select(Exercise).order_by(Exercise.name.asc())
        return list(self.db.execute(stmt).scalars().all())

    def create(self, *, name: str) -> Exercise:
        try:
            return self.add_and_commit(Exercise(name=name))
        except IntegrityError:
            self.db.rollback()
            # Re-raise a clean marker the router maps to 409
            raise ValueError("exercise_already_exists")


class WorkoutExerciseRepository(BaseRepository[WorkoutExercise]):
    """Exercise entries inside a workout, scoped through Workout.user_id."""

    def _owned(self, workout_exercise_id: int, user_id: str):
        return (
            select(WorkoutExercise)
            .join(Workout, WorkoutExercise.workout_id == Workout.id)
            .where(WorkoutExercise.id == workout_exercise_id, Workout.user_id == user_id)
        )

    def get(self, workout_exercise_id: int, user_id: str) -> Optional[WorkoutExercise]:
        return self.db.execute(self._owned(workout_exercise_id, user_id)).scalar_one_or_none()

    def add_to_workout(self, workout_id: int, exercise_id: int, user_id: str) -> Optional[WorkoutExercise]:
        # Lock the parent workout so order assignment is serialized per workout
        workout = self.db.execute(
            select(Workout)
            .where(Workout.id == workout_id, Workout.user_id == user_id)
            .with_for_update()
        ).scalar_one_or_none()
        if not workout:
            self.db.rollback()
            return None
        if ExerciseRepository(self.db).get(exercise_id) is None:
            self.db.rollback()
            return None

        next_order = self.next_sequence_value(
            WorkoutExercise.order, WorkoutExercise.workout_id, workout_id, baseline=-1
        )
        entry = WorkoutExercise(workout_id=workout_id, exercise_id=exercise_id, order=next_order)
        return self.add_and_commit(entry)

    def remove(self, workout_exercise_id: int, user_id: str) -> Optional[WorkoutExercise]:
        entry = self.db.execute(
            self._owned(workout_exercise_id, user_id).with_for_update(of=WorkoutExercise)
        ).scalar_one_or_none()
        if not entry:
            self.db.rollback()
            return None
        return self.delete_and_commit(entry)
