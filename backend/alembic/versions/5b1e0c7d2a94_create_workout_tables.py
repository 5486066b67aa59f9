"""create workouts/exercises/workout_exercises/sets

Revision ID: 5b1e0c7d2a94
Revises:
Create Date: 2026-10-19 09:12:40.318806

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5b1e0c7d2a94'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # 1) workouts (user_id is the identity provider's id, not a local FK)
    op.create_table(
        'workouts',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.String(length=255), nullable=False, index=True),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('started_at', sa.DateTime(timezone=True), nullable=False, index=True),
        sa.Column('completed_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    )

    # 2) exercise catalog
    op.create_table(
        'exercises',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    )
    # case-insensitive catalog names
    op.create_index('uq_exercises_name_lower', 'exercises', [sa.text('lower(name)')], unique=True)

    # 3) workout_exercises
    op.create_table(
        'workout_exercises',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('workout_id', sa.Integer(), sa.ForeignKey('workouts.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('exercise_id', sa.Integer(), sa.ForeignKey('exercises.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('order', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.UniqueConstraint('workout_id', 'order', name='uq_workout_exercises_workout_order'),
    )

    # 4) sets
    op.create_table(
        'sets',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('workout_exercise_id', sa.Integer(), sa.ForeignKey('workout_exercises.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('set_number', sa.Integer(), nullable=False),
        sa.Column('reps', sa.Integer(), nullable=False),
        sa.Column('weight', sa.Numeric(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.UniqueConstraint('workout_exercise_id', 'set_number', name='uq_sets_workout_exercise_set_number'),
        sa.CheckConstraint('reps > 0', name='ck_sets_reps_positive'),
        sa.CheckConstraint('weight >= 0', name='ck_sets_weight_nonnegative'),
    )


def downgrade() -> None:
    # drop child tables in reverse order
    op.drop_table('sets')
    op.drop_table('workout_exercises')
    op.drop_index('uq_exercises_name_lower', table_name='exercises')
    op.drop_table('exercises')
    op.drop_table('workouts')
