"""Create sample, activity, progress, achievement, goal and plan tables

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


def upgrade() -> None:
    """Create all engine tables."""
    op.create_table('physiological_samples', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('subject_id', sqlmodel.sql.sqltypes.AutoString(length=64), nullable=False),
        sa.Column('weight_kg', sa.Float(), nullable=False),
        sa.Column('height_cm', sa.Float(), nullable=False),
        sa.Column('sex', sqlmodel.sql.sqltypes.AutoString(length=10), nullable=False),
        sa.Column('age_years', sa.Integer(), nullable=False),
        sa.Column('body_fat_pct', sa.Float(), nullable=True),
        sa.Column('muscle_mass_kg', sa.Float(), nullable=True),
        sa.Column('waist_cm', sa.Float(), nullable=True),
        sa.Column('measured_at', sa.DateTime(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_physiological_samples_subject_id'), 'physiological_samples', ['subject_id'])
    op.create_index(op.f('ix_physiological_samples_measured_at'), 'physiological_samples', ['measured_at'])

    op.create_table('activity_events', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('subject_id', sqlmodel.sql.sqltypes.AutoString(length=64), nullable=False),
        sa.Column('type', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False),
        sa.Column('duration_min', sa.Float(), nullable=False),
        sa.Column('calories_burned', sa.Float(), nullable=True),
        sa.Column('occurred_at', sa.DateTime(), nullable=False),
        sa.Column('local_date', sa.Date(), nullable=False),
        sa.Column('xp_gained', sa.Integer(), nullable=False),
        sa.Column('metadata', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_activity_events_subject_id'), 'activity_events', ['subject_id'])
    op.create_index(op.f('ix_activity_events_type'), 'activity_events', ['type'])
    op.create_index(op.f('ix_activity_events_occurred_at'), 'activity_events', ['occurred_at'])
    op.create_index(op.f('ix_activity_events_local_date'), 'activity_events', ['local_date'])

    op.create_table('progress_states', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('subject_id', sqlmodel.sql.sqltypes.AutoString(length=64), nullable=False),
        sa.Column('total_workouts', sa.Integer(), nullable=False),
        sa.Column('total_minutes', sa.Float(), nullable=False),
        sa.Column('total_calories', sa.Float(), nullable=False),
        sa.Column('videos_watched', sa.Integer(), nullable=False),
        sa.Column('current_streak', sa.Integer(), nullable=False),
        sa.Column('longest_streak', sa.Integer(), nullable=False),
        sa.Column('last_activity_date', sa.Date(), nullable=True),
        sa.Column('last_workout_date', sa.Date(), nullable=True),
        sa.Column('active_days', sa.Integer(), nullable=False),
        sa.Column('last_login_date', sa.Date(), nullable=True),
        sa.Column('total_xp', sa.Integer(), nullable=False),
        sa.Column('level', sa.Integer(), nullable=False),
        sa.Column('achievements_count', sa.Integer(), nullable=False),
        sa.Column('version', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_progress_states_subject_id'), 'progress_states', ['subject_id'], unique=True)

    op.create_table('achievement_unlocks', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('subject_id', sqlmodel.sql.sqltypes.AutoString(length=64), nullable=False),
        sa.Column('achievement_id', sqlmodel.sql.sqltypes.AutoString(length=50), nullable=False),
        sa.Column('unlocked_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('subject_id', 'achievement_id', name='uq_unlock_subject_achievement'))
    op.create_index(op.f('ix_achievement_unlocks_subject_id'), 'achievement_unlocks', ['subject_id'])

    op.create_table('goals', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('subject_id', sqlmodel.sql.sqltypes.AutoString(length=64), nullable=False),
        sa.Column('type', sqlmodel.sql.sqltypes.AutoString(length=30), nullable=False),
        sa.Column('title', sqlmodel.sql.sqltypes.AutoString(length=200), nullable=False),
        sa.Column('description', sqlmodel.sql.sqltypes.AutoString(length=1000), nullable=True),
        sa.Column('target_value', sa.Float(), nullable=False),
        sa.Column('current_value', sa.Float(), nullable=False),
        sa.Column('unit', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False),
        sa.Column('target_date', sa.Date(), nullable=False),
        sa.Column('completed', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('completed_at', sa.DateTime(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_goals_subject_id'), 'goals', ['subject_id'])

    op.create_table('generated_plans', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('subject_id', sqlmodel.sql.sqltypes.AutoString(length=64), nullable=False),
        sa.Column('objective', sqlmodel.sql.sqltypes.AutoString(length=30), nullable=False),
        sa.Column('periodization', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False),
        sa.Column('goal', sa.JSON(), nullable=False),
        sa.Column('profile', sa.JSON(), nullable=False),
        sa.Column('training_plan', sa.JSON(), nullable=False),
        sa.Column('nutrition_plan', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_generated_plans_subject_id'), 'generated_plans', ['subject_id'])
    op.create_index(op.f('ix_generated_plans_created_at'), 'generated_plans', ['created_at'])


def downgrade() -> None:
    """Drop all engine tables."""
    op.drop_index(op.f('ix_generated_plans_created_at'), table_name='generated_plans')
    op.drop_index(op.f('ix_generated_plans_subject_id'), table_name='generated_plans')
    op.drop_table('generated_plans')
    op.drop_index(op.f('ix_goals_subject_id'), table_name='goals')
    op.drop_table('goals')
    op.drop_index(op.f('ix_achievement_unlocks_subject_id'), table_name='achievement_unlocks')
    op.drop_table('achievement_unlocks')
    op.drop_index(op.f('ix_progress_states_subject_id'), table_name='progress_states')
    op.drop_table('progress_states')
    op.drop_index(op.f('ix_activity_events_local_date'), table_name='activity_events')
    op.drop_index(op.f('ix_activity_events_occurred_at'), table_name='activity_events')
    op.drop_index(op.f('ix_activity_events_type'), table_name='activity_events')
    op.drop_index(op.f('ix_activity_events_subject_id'), table_name='activity_events')
    op.drop_table('activity_events')
    op.drop_index(op.f('ix_physiological_samples_measured_at'), table_name='physiological_samples')
    op.drop_index(op.f('ix_physiological_samples_subject_id'), table_name='physiological_samples')
    op.drop_table('physiological_samples')
