"""Initial schema

Revision ID: 001
Revises:
Create Date: 2026-10-18 09:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
import sqlmodel
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

AutoString = sqlmodel.sql.sqltypes.AutoString

_USER_DATE_TABLES = ('body_metrics', 'sleep_logs', 'heart_rate_logs', 'recovery_scores', 'meals', 'water_logs',
                     'workouts', 'cardio_sessions')


def _user_fk() -> sa.Column:
    return sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False)


def upgrade() -> None:
    """Create all tables."""
    op.create_table('users', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('email', AutoString(length=255), nullable=False),
        sa.Column('full_name', AutoString(length=255), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default='true'),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)

    # Health
    op.create_table('body_metrics', sa.Column('id', sa.Integer(), primary_key=True), _user_fk(),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('weight_kg', sa.Float(), nullable=True),
        sa.Column('body_fat_percent', sa.Float(), nullable=True),
        sa.Column('chest_cm', sa.Float(), nullable=True),
        sa.Column('waist_cm', sa.Float(), nullable=True),
        sa.Column('hips_cm', sa.Float(), nullable=True),
        sa.Column('left_arm_cm', sa.Float(), nullable=True),
        sa.Column('right_arm_cm', sa.Float(), nullable=True),
        sa.Column('left_thigh_cm', sa.Float(), nullable=True),
        sa.Column('right_thigh_cm', sa.Float(), nullable=True),
        sa.Column('notes', AutoString(length=1000), nullable=True),
        sa.Column('logged_at', sa.DateTime(), nullable=False))

    op.create_table('sleep_logs', sa.Column('id', sa.Integer(), primary_key=True), _user_fk(),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('bedtime', sa.Time(), nullable=True),
        sa.Column('wake_time', sa.Time(), nullable=True),
        sa.Column('hours_slept', sa.Float(), nullable=True),
        sa.Column('quality_rating', sa.Integer(), nullable=True),
        sa.Column('notes', AutoString(length=1000), nullable=True),
        sa.Column('logged_at', sa.DateTime(), nullable=False),
        sa.UniqueConstraint('user_id', 'date', name='uq_sleep_user_date'))

    op.create_table('heart_rate_logs', sa.Column('id', sa.Integer(), primary_key=True), _user_fk(),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('resting_hr', sa.Integer(), nullable=True),
        sa.Column('avg_hr', sa.Integer(), nullable=True),
        sa.Column('max_hr', sa.Integer(), nullable=True),
        sa.Column('measured_at', sa.DateTime(), nullable=False),
        sa.UniqueConstraint('user_id', 'date', name='uq_heart_rate_user_date'))

    op.create_table('recovery_scores', sa.Column('id', sa.Integer(), primary_key=True), _user_fk(),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('recovery_score', sa.Integer(), nullable=False),
        sa.Column('sleep_score', sa.Integer(), nullable=True),
        sa.Column('hrv_score', sa.Integer(), nullable=True),
        sa.Column('muscle_soreness', sa.Integer(), nullable=False),
        sa.Column('energy_level', sa.Integer(), nullable=False),
        sa.Column('calculated_at', sa.DateTime(), nullable=False),
        sa.UniqueConstraint('user_id', 'date', name='uq_recovery_user_date'))

    # Nutrition
    op.create_table('meals', sa.Column('id', sa.Integer(), primary_key=True), _user_fk(),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('meal_type', AutoString(length=20), nullable=False),
        sa.Column('meal_name', AutoString(length=255), nullable=True),
        sa.Column('notes', AutoString(length=1000), nullable=True),
        sa.Column('logged_at', sa.DateTime(), nullable=False))

    op.create_table('food_items', sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('meal_id', sa.Integer(), sa.ForeignKey('meals.id', ondelete='CASCADE'), nullable=False),
        sa.Column('food_name', AutoString(length=255), nullable=False),
        sa.Column('quantity', sa.Float(), nullable=False),
        sa.Column('unit', AutoString(length=50), nullable=False),
        sa.Column('calories', sa.Float(), nullable=False),
        sa.Column('protein_g', sa.Float(), nullable=False),
        sa.Column('carbs_g', sa.Float(), nullable=False),
        sa.Column('fats_g', sa.Float(), nullable=False),
        sa.Column('fiber_g', sa.Float(), nullable=True),
        sa.Column('sugar_g', sa.Float(), nullable=True))

    op.create_table('frequent_foods', sa.Column('id', sa.Integer(), primary_key=True), _user_fk(),
        sa.Column('meal_type', AutoString(length=20), nullable=False),
        sa.Column('food_name', AutoString(length=255), nullable=False),
        sa.Column('unit', AutoString(length=50), nullable=False),
        sa.Column('calories', sa.Float(), nullable=False),
        sa.Column('protein_g', sa.Float(), nullable=False),
        sa.Column('carbs_g', sa.Float(), nullable=False),
        sa.Column('fats_g', sa.Float(), nullable=False),
        sa.Column('use_count', sa.Integer(), nullable=False, server_default='1'),
        sa.Column('last_used_at', sa.DateTime(), nullable=False),
        sa.UniqueConstraint('user_id', 'meal_type', 'food_name', 'unit', name='uq_frequent_food'))

    op.create_table('nutrition_goals', sa.Column('id', sa.Integer(), primary_key=True), _user_fk(),
        sa.Column('daily_calories', sa.Integer(), nullable=False),
        sa.Column('protein_g', sa.Integer(), nullable=False),
        sa.Column('carbs_g', sa.Integer(), nullable=False),
        sa.Column('fats_g', sa.Integer(), nullable=False),
        sa.Column('water_ml', sa.Integer(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False))

    op.create_table('water_logs', sa.Column('id', sa.Integer(), primary_key=True), _user_fk(),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('amount_ml', sa.Integer(), nullable=False),
        sa.Column('logged_at', sa.DateTime(), nullable=False))

    # Workouts
    op.create_table('workouts', sa.Column('id', sa.Integer(), primary_key=True), _user_fk(),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('workout_type', AutoString(length=20), nullable=False),
        sa.Column('title', AutoString(length=255), nullable=False),
        sa.Column('duration_minutes', sa.Integer(), nullable=True),
        sa.Column('total_volume', sa.Float(), nullable=True),
        sa.Column('notes', AutoString(length=1000), nullable=True),
        sa.Column('started_at', sa.DateTime(), nullable=True),
        sa.Column('completed_at', sa.DateTime(), nullable=True))

    op.create_table('exercises', sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('workout_id', sa.Integer(), sa.ForeignKey('workouts.id'), nullable=False),
        sa.Column('exercise_name', AutoString(length=255), nullable=False),
        sa.Column('muscle_group', AutoString(length=50), nullable=True),
        sa.Column('target_sets', sa.Integer(), nullable=False),
        sa.Column('sets_completed', sa.Integer(), nullable=False),
        sa.Column('weight_kg', sa.Float(), nullable=True),
        sa.Column('notes', AutoString(length=1000), nullable=True))

    op.create_table('exercise_sets', sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('exercise_id', sa.Integer(), sa.ForeignKey('exercises.id'), nullable=False),
        sa.Column('set_number', sa.Integer(), nullable=False),
        sa.Column('reps', sa.Integer(), nullable=False),
        sa.Column('weight_kg', sa.Float(), nullable=False),
        sa.Column('rest_seconds', sa.Integer(), nullable=True),
        sa.Column('rpe', sa.Float(), nullable=True))

    op.create_table('cardio_sessions', sa.Column('id', sa.Integer(), primary_key=True), _user_fk(),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('cardio_type', AutoString(length=20), nullable=False),
        sa.Column('duration_minutes', sa.Integer(), nullable=False),
        sa.Column('distance_km', sa.Float(), nullable=True),
        sa.Column('avg_heart_rate', sa.Integer(), nullable=True),
        sa.Column('calories_burned', sa.Integer(), nullable=True),
        sa.Column('notes', AutoString(length=1000), nullable=True),
        sa.Column('logged_at', sa.DateTime(), nullable=False))

    for table in _USER_DATE_TABLES:
        op.create_index(op.f(f'ix_{table}_user_id'), table, ['user_id'])
        op.create_index(op.f(f'ix_{table}_date'), table, ['date'])
    op.create_index(op.f('ix_frequent_foods_user_id'), 'frequent_foods', ['user_id'])
    op.create_index(op.f('ix_nutrition_goals_user_id'), 'nutrition_goals', ['user_id'], unique=True)
    op.create_index(op.f('ix_food_items_meal_id'), 'food_items', ['meal_id'])
    op.create_index(op.f('ix_exercises_workout_id'), 'exercises', ['workout_id'])
    op.create_index(op.f('ix_exercise_sets_exercise_id'), 'exercise_sets', ['exercise_id'])


def downgrade() -> None:
    """Drop all tables."""
    for table in ('exercise_sets', 'exercises', 'workouts', 'cardio_sessions', 'food_items', 'meals',
                  'frequent_foods', 'nutrition_goals', 'water_logs', 'recovery_scores', 'heart_rate_logs',
                  'sleep_logs', 'body_metrics', 'users'):
        op.drop_table(table)
