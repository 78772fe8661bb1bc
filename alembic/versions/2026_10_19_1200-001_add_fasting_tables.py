"""Add users, fasting session and fast history tables

Revision ID: 001
Revises:
Create Date: 2026-10-19 12:00:00.000000

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
    """Create users, fasting_sessions and fast_history tables."""
    op.create_table('users', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('principal', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('current_day', sa.Integer(), nullable=False, server_default='1'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_users_principal'), 'users', ['principal'], unique=True)

    op.create_table('fasting_sessions', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('status', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False),
        sa.Column('goal_hours', sa.Integer(), nullable=True),
        sa.Column('start_time', sa.DateTime(timezone=True), nullable=True),
        sa.Column('elapsed_hours', sa.Integer(), nullable=True),
        sa.Column('reflection_journal', sqlmodel.sql.sqltypes.AutoString(), nullable=False, server_default=''),
        sa.Column('timestamp', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_fasting_sessions_user_id'), 'fasting_sessions', ['user_id'], unique=True)

    op.create_table('fast_history', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('start_time', sa.DateTime(timezone=True), nullable=False),
        sa.Column('end_time', sa.DateTime(timezone=True), nullable=False),
        sa.Column('goal_hours', sa.Integer(), nullable=False),
        sa.Column('reflection_journal', sqlmodel.sql.sqltypes.AutoString(), nullable=False, server_default=''),
        sa.Column('timestamp', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_fast_history_user_id'), 'fast_history', ['user_id'], unique=False)
    op.create_index(op.f('ix_fast_history_end_time'), 'fast_history', ['end_time'], unique=False)


def downgrade() -> None:
    """Drop fasting and user tables."""
    op.drop_index(op.f('ix_fast_history_end_time'), table_name='fast_history')
    op.drop_index(op.f('ix_fast_history_user_id'), table_name='fast_history')
    op.drop_table('fast_history')
    op.drop_index(op.f('ix_fasting_sessions_user_id'), table_name='fasting_sessions')
    op.drop_table('fasting_sessions')
    op.drop_index(op.f('ix_users_principal'), table_name='users')
    op.drop_table('users')
