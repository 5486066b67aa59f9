from typing import Annotated
from datetime import datetime
from pydantic import BaseModel, Field, StringConstraints

from liftlog.schemas.workout_set import SetRead

ExerciseName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=120)]
PosInt = Annotated[int, Field(ge=1)]

class ExerciseCreate(BaseModel):
    name: ExerciseName

class ExerciseRead(BaseModel):
    id: int
    name: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}

class WorkoutExerciseCreate(BaseModel):
    exercise_id: PosInt

class WorkoutExerciseRead(BaseModel):
    id: int
    workout_id: int
    exercise_id: int
    order: int
    created_at: datetime

    model_config = {"from_attributes": True}

class WorkoutExerciseDetail(WorkoutExerciseRead):
    exercise_name: str
    sets: list[SetRead] = []
