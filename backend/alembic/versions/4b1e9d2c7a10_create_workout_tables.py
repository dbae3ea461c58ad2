"""create exercises/workouts/workout_exercises/sets

Revision ID: 4b1e9d2c7a10
Revises:
Create Date: 2026-10-17 09:12:40.118203

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4b1e9d2c7a10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # 1) shared exercise library
    op.create_table(
        'exercises',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('created_by', sa.String(length=255), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    )
    op.create_index('ix_exercises_name', 'exercises', ['name'])
    op.create_index('ix_exercises_created_by', 'exercises', ['created_by'])

    # 2) workouts (owned by the identity provider's user id)
    op.create_table(
        'workouts',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('user_id', sa.String(length=255), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=True),
        sa.Column('started_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    )
    op.create_index('ix_workouts_user_id', 'workouts', ['user_id'])
    op.create_index('ix_workouts_created_at', 'workouts', ['created_at'])

    # 3) workout_exercises: cascade with the workout, restrict on the exercise
    op.create_table(
        'workout_exercises',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('workout_id', sa.Uuid(), sa.ForeignKey('workouts.id', ondelete='CASCADE'), nullable=False),
        sa.Column('exercise_id', sa.Uuid(), sa.ForeignKey('exercises.id', ondelete='RESTRICT'), nullable=False),
        sa.Column('order', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    )
    op.create_index('ix_workout_exercises_workout_id', 'workout_exercises', ['workout_id'])
    op.create_index('ix_workout_exercises_workout_id_order', 'workout_exercises', ['workout_id', 'order'])

    # 4) sets
    op.create_table(
        'sets',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('workout_exercise_id', sa.Uuid(), sa.ForeignKey('workout_exercises.id', ondelete='CASCADE'), nullable=False),
        sa.Column('set_number', sa.Integer(), nullable=False),
        sa.Column('reps', sa.Integer(), nullable=True),
        sa.Column('weight', sa.Numeric(10, 2), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    )
    op.create_index('ix_sets_workout_exercise_id', 'sets', ['workout_exercise_id'])
    op.create_index('ix_sets_workout_exercise_id_set_number', 'sets', ['workout_exercise_id', 'set_number'])


def downgrade() -> None:
    # drop child tables first
    op.drop_table('sets')
    op.drop_table('workout_exercises')
    op.drop_table('workouts')
    op.drop_table('exercises')
