"""create_directory_mentorship_messaging

Revision ID: 4c1d7e92a0b3
Revises:
Create Date: 2026-10-19 09:12:44.310551

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = '4c1d7e92a0b3'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

OPEN_REQUEST_CLAUSE = "status IN ('pending', 'accepted')"


def upgrade() -> None:
    """Create profiles, mentorship_requests, conversations and messages tables."""
    op.create_table('profiles',
        sa.Column('id', sa.String(length=24), nullable=False),
        sa.Column('user_id', sa.String(length=128), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('photo_url', sa.String(length=500), nullable=True),
        sa.Column('batch', sa.String(length=20), nullable=False),
        sa.Column('graduation_year', sa.Integer(), nullable=False),
        sa.Column('degree', sa.String(length=255), nullable=True),
        sa.Column('major', sa.String(length=255), nullable=True),
        sa.Column('current_job_title', sa.String(length=255), nullable=True),
        sa.Column('company', sa.String(length=255), nullable=True),
        sa.Column('location', sa.String(length=255), nullable=True),
        sa.Column('bio', sa.Text(), nullable=True),
        sa.Column('linkedin', sa.String(length=500), nullable=True),
        sa.Column('twitter', sa.String(length=500), nullable=True),
        sa.Column('github', sa.String(length=500), nullable=True),
        sa.Column('website', sa.String(length=500), nullable=True),
        sa.Column('achievements', postgresql.JSONB(), server_default='[]', nullable=False),
        sa.Column('skills', postgresql.JSONB(), server_default='[]', nullable=False),
        sa.Column('experience', postgresql.JSONB(), server_default='[]', nullable=False),
        sa.Column('is_mentor', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column('mentorship_areas', postgresql.JSONB(), server_default='[]', nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id'),
        sa.UniqueConstraint('email'),
    )
    op.create_index('ix_profiles_batch', 'profiles', ['batch'], unique=False)
    op.create_index('ix_profiles_is_mentor', 'profiles', ['is_mentor'], unique=False)

    # Identities on both sides, no FK: students may not have a profile yet
    op.create_table('mentorship_requests',
        sa.Column('id', sa.String(length=24), nullable=False),
        sa.Column('mentor_id', sa.String(length=128), nullable=False),
        sa.Column('student_id', sa.String(length=128), nullable=False),
        sa.Column('area', sa.String(length=255), nullable=False),
        sa.Column('message', sa.Text(), nullable=True),
        sa.Column('status', sa.String(length=20), server_default='pending', nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.CheckConstraint("status IN ('pending', 'accepted', 'rejected')", name='ck_mentorship_requests_status'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_mentorship_requests_mentor_id', 'mentorship_requests', ['mentor_id'], unique=False)
    op.create_index('ix_mentorship_requests_student_id', 'mentorship_requests', ['student_id'], unique=False)
    op.create_index(
        'uq_mentorship_requests_open_pair',
        'mentorship_requests',
        ['mentor_id', 'student_id'],
        unique=True,
        postgresql_where=sa.text(OPEN_REQUEST_CLAUSE),
    )

    op.create_table('conversations',
        sa.Column('id', sa.String(length=24), nullable=False),
        sa.Column('first_participant_id', sa.String(length=128), nullable=False),
        sa.Column('second_participant_id', sa.String(length=128), nullable=False),
        sa.Column('pair_key', sa.String(length=257), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.CheckConstraint('first_participant_id <> second_participant_id', name='ck_conversations_distinct_participants'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('pair_key'),
    )
    op.create_index('ix_conversations_first_participant_id', 'conversations', ['first_participant_id'], unique=False)
    op.create_index('ix_conversations_second_participant_id', 'conversations', ['second_participant_id'], unique=False)
    op.create_index('ix_conversations_updated_at', 'conversations', ['updated_at'], unique=False)

    op.create_table('messages',
        sa.Column('id', sa.String(length=24), nullable=False),
        sa.Column('conversation_id', sa.String(length=24), nullable=False),
        sa.Column('sender_id', sa.String(length=128), nullable=False),
        sa.Column('recipient_id', sa.String(length=128), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('timestamp', sa.DateTime(), nullable=False),
        sa.Column('read', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.ForeignKeyConstraint(['conversation_id'], ['conversations.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_messages_conversation_timestamp', 'messages', ['conversation_id', 'timestamp'], unique=False)
    op.create_index('ix_messages_recipient_read', 'messages', ['recipient_id', 'read'], unique=False)


def downgrade() -> None:
    """Drop messaging, mentorship and profile tables."""
    op.drop_index('ix_messages_recipient_read', table_name='messages')
    op.drop_index('ix_messages_conversation_timestamp', table_name='messages')
    op.drop_table('messages')

    op.drop_index('ix_conversations_updated_at', table_name='conversations')
    op.drop_index('ix_conversations_second_participant_id', table_name='conversations')
    op.drop_index('ix_conversations_first_participant_id', table_name='conversations')
    op.drop_table('conversations')

    op.drop_index('uq_mentorship_requests_open_pair', table_name='mentorship_requests')
    op.drop_index('ix_mentorship_requests_student_id', table_name='mentorship_requests')
    op.drop_index('ix_mentorship_requests_mentor_id', table_name='mentorship_requests')
    op.drop_table('mentorship_requests')

    op.drop_index('ix_profiles_is_mentor', table_name='profiles')
    op.drop_index('ix_profiles_batch', table_name='profiles')
    op.drop_table('profiles')
