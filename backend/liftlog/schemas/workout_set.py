from typing import Annotated
from datetime import datetime
from decimal import Decimal
from pydantic import BaseModel, Field

Reps = Annotated[int, Field(ge=1, le=1000)]
# Accepts numbers or numeric strings ("135", "142.5")
Weight = Annotated[Decimal, Field(ge=0)]

class SetCreate(BaseModel):
    reps: Reps
    weight: Weight

class SetUpdate(SetCreate):
    pass

class SetRead(BaseModel):
    id: int
    workout_exercise_id: int
    set_number: int
    reps: int
    weight: Decimal
    created_at: datetime

    model_config = {"from_attributes": True}
