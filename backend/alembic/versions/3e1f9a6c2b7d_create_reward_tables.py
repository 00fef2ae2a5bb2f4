"""create piano_sessions, weekly_awards, tests, incidents, transactions

Revision ID: 3e1f9a6c2b7d
Revises:
Create Date: 2026-02-01 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3e1f9a6c2b7d'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _created_at() -> sa.Column:
    return sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False)


def upgrade() -> None:
    bind = op.get_bind()
    inspector = sa.inspect(bind)
    tables = inspector.get_table_names()

    # Databases bootstrapped by create_all on app startup already have these
    if 'piano_sessions' not in tables:
        op.create_table(
            'piano_sessions',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('date', sa.Date(), nullable=False),
            sa.Column('minutes', sa.Integer(), nullable=False),
            _created_at(),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index('ix_piano_sessions_id', 'piano_sessions', ['id'])
        op.create_index('ix_piano_sessions_date', 'piano_sessions', ['date'])

    if 'transactions' not in tables:
        op.create_table(
            'transactions',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('date', sa.Date(), nullable=False),
            sa.Column('type', sa.String(length=20), nullable=False),
            sa.Column('amount', sa.Integer(), nullable=False),
            sa.Column('description', sa.String(), nullable=True),
            _created_at(),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index('ix_transactions_id', 'transactions', ['id'])
        op.create_index('ix_transactions_date', 'transactions', ['date'])

    if 'weekly_awards' not in tables:
        op.create_table(
            'weekly_awards',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('week_start', sa.Date(), nullable=False),
            sa.Column('transaction_id', sa.Integer(), nullable=False),
            _created_at(),
            sa.ForeignKeyConstraint(['transaction_id'], ['transactions.id'], ondelete='CASCADE'),
            sa.PrimaryKeyConstraint('id'),
            sa.UniqueConstraint('week_start')
        )
        op.create_index('ix_weekly_awards_id', 'weekly_awards', ['id'])
        op.create_index('ix_weekly_awards_transaction_id', 'weekly_awards', ['transaction_id'])

    if 'tests' not in tables:
        op.create_table(
            'tests',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('date', sa.Date(), nullable=False),
            sa.Column('subject', sa.String(length=255), nullable=False),
            sa.Column('score', sa.Integer(), nullable=False),
            sa.Column('max_score', sa.Integer(), nullable=False),
            sa.Column('awarded', sa.Boolean(), nullable=False),
            _created_at(),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index('ix_tests_id', 'tests', ['id'])
        op.create_index('ix_tests_date', 'tests', ['date'])

    if 'incidents' not in tables:
        op.create_table(
            'incidents',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('date', sa.Date(), nullable=False),
            sa.Column('note', sa.String(), nullable=False),
            _created_at(),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index('ix_incidents_id', 'incidents', ['id'])
        op.create_index('ix_incidents_date', 'incidents', ['date'])


def downgrade() -> None:
    # Safe drop if exists; awards first, they reference transactions
    for table in ('weekly_awards', 'transactions', 'piano_sessions', 'tests', 'incidents'):
        op.execute(f'DROP TABLE IF EXISTS {table}')
