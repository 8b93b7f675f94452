"""add_jobs_and_events

Revision ID: 9e3a5b17c8d2
Revises: 4c1d7e92a0b3
Create Date: 2026-10-19 14:03:27.918264

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '9e3a5b17c8d2'
down_revision: Union[str, Sequence[str], None] = '4c1d7e92a0b3'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create jobs and events tables."""
    op.create_table('jobs',
        sa.Column('id', sa.String(length=24), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('media_type', sa.String(length=10), nullable=True),
        sa.Column('media_url', sa.String(length=1000), nullable=True),
        sa.Column('posted_by', sa.String(length=128), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.CheckConstraint("media_type IS NULL OR media_type IN ('image', 'video')", name='ck_jobs_media_type'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_jobs_posted_by', 'jobs', ['posted_by'], unique=False)
    op.create_index('ix_jobs_created_at', 'jobs', ['created_at'], unique=False)

    op.create_table('events',
        sa.Column('id', sa.String(length=24), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('media_type', sa.String(length=10), nullable=True),
        sa.Column('media_url', sa.String(length=1000), nullable=True),
        sa.Column('organizer', sa.String(length=128), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.CheckConstraint("media_type IS NULL OR media_type IN ('image', 'video')", name='ck_events_media_type'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_events_organizer', 'events', ['organizer'], unique=False)
    op.create_index('ix_events_created_at', 'events', ['created_at'], unique=False)


def downgrade() -> None:
    """Drop events and jobs tables."""
    op.drop_index('ix_events_created_at', table_name='events')
    op.drop_index('ix_events_organizer', table_name='events')
    op.drop_table('events')

    op.drop_index('ix_jobs_created_at', table_name='jobs')
    op.drop_index('ix_jobs_posted_by', table_name='jobs')
    op.drop_table('jobs')
