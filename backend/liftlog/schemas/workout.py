from typing import Annotated
from datetime import datetime
from pydantic import BaseModel, StringConstraints, field_validator

from liftlog.dates import to_utc
from liftlog.schemas.exercise import WorkoutExerciseDetail

# Trimmed, 1..100 chars
NameStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]

class WorkoutCreate(BaseModel):
    name: NameStr
    started_at: datetime

    @field_validator("started_at")
    @classmethod
    def normalise_started_at(cls, v: datetime) -> datetime:
        return to_utc(v)

class WorkoutUpdate(BaseModel):
    name: NameStr | None = None
    started_at: datetime | None = None
    completed_at: datetime | None = None

    @field_validator("name", "started_at")
    @classmethod
    def required_columns_not_null(cls, v):
        # Omit these to leave them alone; null would blank a required column
        if v is None:
            raise ValueError("may be omitted but not null")
        return v

    @field_validator("started_at", "completed_at")
    @classmethod
    def normalise_datetimes(cls, v: datetime | None) -> datetime | None:
        return to_utc(v) if v is not None else None

class WorkoutRead(BaseModel):
    id: int
    user_id: str
    name: str
    started_at: datetime
    completed_at: datetime | None = None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}

class WorkoutDetail(WorkoutRead):
    exercises: list[WorkoutExerciseDetail]
