"""Create users, environmental_data, catch_logs, predictions and hotspots

Revision ID: 3f9a1c2d7e10
Revises:
Create Date: 2026-10-18 09:12:41.204117

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f9a1c2d7e10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('password_hash', sa.String(255), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_users_id', 'users', ['id'], unique=False)
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'environmental_data',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('latitude', sa.Float(), nullable=False),
        sa.Column('longitude', sa.Float(), nullable=False),
        sa.Column('timestamp', sa.DateTime(timezone=True), nullable=False),
        sa.Column('sea_temperature', sa.Float(), nullable=False),
        sa.Column('current_speed', sa.Float(), nullable=False),
        sa.Column('current_direction', sa.Integer(), nullable=False),
        sa.Column('chlorophyll', sa.Float(), nullable=False),
        sa.Column('wind_speed', sa.Float(), nullable=False),
        sa.Column('wind_direction', sa.Integer(), nullable=False),
        sa.Column('wave_height', sa.Float(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_environmental_data_id', 'environmental_data', ['id'], unique=False)

    op.create_table(
        'catch_logs',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('species', sa.String(100), nullable=False),
        sa.Column('weight', sa.Float(), nullable=False),
        sa.Column('length', sa.Float(), nullable=True),
        sa.Column('gear_type', sa.String(100), nullable=False),
        sa.Column('latitude', sa.Float(), nullable=False),
        sa.Column('longitude', sa.Float(), nullable=False),
        sa.Column('depth', sa.Float(), nullable=True),
        sa.Column('water_temp', sa.Float(), nullable=True),
        sa.Column('time_caught', sa.DateTime(timezone=True), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('photo_url', sa.String(500), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_catch_logs_id', 'catch_logs', ['id'], unique=False)

    op.create_table(
        'predictions',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('location_name', sa.String(100), nullable=True),
        sa.Column('latitude', sa.Float(), nullable=False),
        sa.Column('longitude', sa.Float(), nullable=False),
        sa.Column('timestamp', sa.DateTime(timezone=True), nullable=False),
        sa.Column('species', sa.String(100), nullable=False),
        sa.Column('probability', sa.Integer(), nullable=False),
        sa.Column('conditions', sa.JSON(), nullable=True),
        sa.Column('factors', sa.JSON(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_predictions_id', 'predictions', ['id'], unique=False)

    op.create_table(
        'hotspots',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(100), nullable=False, unique=True),
        sa.Column('latitude', sa.Float(), nullable=False),
        sa.Column('longitude', sa.Float(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('species_common', sa.JSON(), nullable=True),
        sa.Column('best_months', sa.JSON(), nullable=True),
        sa.Column('avg_success_rate', sa.Float(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_hotspots_id', 'hotspots', ['id'], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table('hotspots')
    op.drop_table('predictions')
    op.drop_table('catch_logs')
    op.drop_table('environmental_data')
    op.drop_table('users')
