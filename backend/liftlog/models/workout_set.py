from datetime import datetime
from decimal import Decimal
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, ForeignKey, DateTime, Numeric, UniqueConstraint, CheckConstraint, func
from liftlog.db import Base

class WorkoutSet(Base):
    __tablename__ = "sets"
    __table_args__ = (
        UniqueConstraint("workout_exercise_id", "set_number", name="uq_sets_workout_exercise_set_number"),
        CheckConstraint("reps > 0", name="ck_sets_reps_positive"),
        CheckConstraint("weight >= 0", name="ck_sets_weight_nonnegative"),
    )
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    workout_exercise_id: Mapped[int] = mapped_column(
        ForeignKey("workout_exercises.id", ondelete="CASCADE"), index=True
    )
    set_number: Mapped[int] = mapped_column(Integer, nullable=False)
    reps: Mapped[int] = mapped_column(Integer, nullable=False)
    # Unscaled, stored exactly as entered
    weight: Mapped[Decimal] = mapped_column(Numeric(), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    workout_exercise = relationship("WorkoutExercise", back_populates="sets")
