from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, String, DateTime, Index, func
from liftlog.db import Base

class Exercise(Base):
    """Shared catalog entry; not owned by any user."""
    __tablename__ = "exercises"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    workout_exercises = relationship(
        "WorkoutExercise", back_populates="exercise", cascade="all, delete-orphan", passive_deletes=True
    )

# "Squat" and "squat" are the same catalog entry
Index("uq_exercises_name_lower", func.lower(Exercise.name), unique=True)
