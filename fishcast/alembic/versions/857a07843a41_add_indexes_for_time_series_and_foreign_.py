"""Add indexes for time-series and foreign key columns

Revision ID: 857a07843a41
Revises: 3f9a1c2d7e10
Create Date: 2026-10-18 09:40:02.518330

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '857a07843a41'
down_revision: Union[str, Sequence[str], None] = '3f9a1c2d7e10'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # Indexes for environmental_data
    op.create_index('ix_environmental_data_timestamp', 'environmental_data', ['timestamp'], unique=False)

    # Indexes for catch_logs
    op.create_index('ix_catch_logs_user_id', 'catch_logs', ['user_id'], unique=False)
    op.create_index('ix_catch_logs_species', 'catch_logs', ['species'], unique=False)
    op.create_index('ix_catch_logs_time_caught', 'catch_logs', ['time_caught'], unique=False)

    # Indexes for predictions
    op.create_index('ix_predictions_timestamp', 'predictions', ['timestamp'], unique=False)
    op.create_index('ix_predictions_species', 'predictions', ['species'], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    # Drop indexes in reverse order
    op.drop_index('ix_predictions_species', table_name='predictions')
    op.drop_index('ix_predictions_timestamp', table_name='predictions')

    op.drop_index('ix_catch_logs_time_caught', table_name='catch_logs')
    op.drop_index('ix_catch_logs_species', table_name='catch_logs')
    op.drop_index('ix_catch_logs_user_id', table_name='catch_logs')

    op.drop_index('ix_environmental_data_timestamp', table_name='environmental_data')
