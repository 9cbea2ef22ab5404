"""Create volunteers, events and volunteer_matches tables

Revision ID: 5a2d9c7e1b43
Revises:
Create Date: 2025-10-20 10:14:32.118204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5a2d9c7e1b43'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table('volunteers',
    sa.Column('id', sa.Integer(), nullable=False),
    sa.Column('email', sa.String(length=255), nullable=False),
    sa.Column('password', sa.String(length=255), nullable=False),
    sa.Column('first_name', sa.String(length=100), nullable=True),
    sa.Column('last_name', sa.String(length=100), nullable=True),
    sa.Column('city', sa.String(length=100), nullable=True),
    sa.Column('state_code', sa.String(length=10), nullable=True),
    sa.Column('skills', sa.Text(), nullable=True),
    sa.Column('availability', sa.Text(), nullable=True),
    sa.Column('preferences', sa.Text(), nullable=True),
    sa.Column('completed', sa.Integer(), nullable=False, server_default='0'),
    sa.Column('is_active', sa.Integer(), nullable=False, server_default='1'),
    sa.Column('is_manager', sa.Integer(), nullable=False, server_default='0'),
    sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_volunteers_id'), 'volunteers', ['id'], unique=False)
    op.create_index(op.f('ix_volunteers_email'), 'volunteers', ['email'], unique=True)

    op.create_table('events',
    sa.Column('id', sa.Integer(), nullable=False),
    sa.Column('name', sa.String(length=255), nullable=False),
    sa.Column('description', sa.Text(), nullable=True),
    sa.Column('location', sa.String(length=255), nullable=True),
    sa.Column('required_skills', sa.Text(), nullable=True),
    sa.Column('urgency', sa.Enum('low', 'medium', 'high', name='event_urgency'), nullable=False),
    sa.Column('event_date', sa.Date(), nullable=False),
    sa.Column('max_volunteers', sa.Integer(), nullable=False),
    sa.Column('current_volunteers', sa.Integer(), nullable=False, server_default='0'),
    sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_events_id'), 'events', ['id'], unique=False)

    op.create_table('volunteer_matches',
    sa.Column('id', sa.Integer(), nullable=False),
    sa.Column('event_id', sa.Integer(), nullable=True),
    sa.Column('volunteer_id', sa.Integer(), nullable=False),
    sa.Column('match_score', sa.Integer(), nullable=False),
    sa.Column('status', sa.Enum('pending', 'assigned', 'completed', 'cancelled', name='match_status'), nullable=False),
    sa.Column('assigned_date', sa.Date(), nullable=False),
    sa.Column('notes', sa.Text(), nullable=False, server_default=''),
    sa.Column('created_at', sa.DateTime(), nullable=False),
    sa.Column('updated_at', sa.DateTime(), nullable=False),
    sa.CheckConstraint('match_score >= 0 AND match_score <= 100', name='ck_volunteer_matches_score_range'),
    sa.ForeignKeyConstraint(['event_id'], ['events.id'], ondelete='SET NULL'),
    sa.ForeignKeyConstraint(['volunteer_id'], ['volunteers.id'], ),
    sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_volunteer_matches_id'), 'volunteer_matches', ['id'], unique=False)
    op.create_index(
        'uq_volunteer_matches_active_pair',
        'volunteer_matches',
        ['event_id', 'volunteer_id'],
        unique=True,
        sqlite_where=sa.text("status != 'cancelled'"),
        postgresql_where=sa.text("status != 'cancelled'"),
    )


def downgrade() -> None:
    op.drop_index('uq_volunteer_matches_active_pair', table_name='volunteer_matches')
    op.drop_index(op.f('ix_volunteer_matches_id'), table_name='volunteer_matches')
    op.drop_table('volunteer_matches')
    op.drop_index(op.f('ix_events_id'), table_name='events')
    op.drop_table('events')
    op.drop_index(op.f('ix_volunteers_email'), table_name='volunteers')
    op.drop_index(op.f('ix_volunteers_id'), table_name='volunteers')
    op.drop_table('volunteers')
    sa.Enum(name='match_status').drop(op.get_bind(), checkfirst=True)
    sa.Enum(name='event_urgency').drop(op.get_bind(), checkfirst=True)
