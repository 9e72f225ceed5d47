# alembic/versions/001_initial.py

"""Initial schema

Revision ID: 001
Revises:
Create Date: 2024-07-30
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision = '001'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    # Create holding table
    op.create_table('holding',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('symbol', sa.String(length=20), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('avg_price', sa.Numeric(precision=14, scale=2), nullable=False),
        sa.Column('current_price', sa.Numeric(precision=14, scale=2), nullable=False),
        sa.Column('sector', sa.String(length=100), nullable=False),
        sa.Column('market_cap', sa.String(length=50), nullable=False),
        sa.Column('exchange', sa.String(length=20), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('symbol')
    )
    op.create_index(op.f('ix_holding_symbol'), 'holding', ['symbol'], unique=True)

    # Create performance_history table
    op.create_table('performance_history',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('timeline', sa.JSON(), nullable=False),
        sa.Column('returns', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('id')
    )

    # Create activity table
    op.create_table('activity',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('type', sa.Enum('BUY', 'SELL', name='activitytype'), nullable=False),
        sa.Column('symbol', sa.String(length=20), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('price', sa.Numeric(precision=14, scale=2), nullable=False),
        sa.Column('date', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_activity_date', 'activity', ['date'], unique=False)


def downgrade():
    op.drop_index('ix_activity_date', table_name='activity')
    op.drop_table('activity')
    sa.Enum(name='activitytype').drop(op.get_bind(), checkfirst=True)
    op.drop_table('performance_history')
    op.drop_index(op.f('ix_holding_symbol'), table_name='holding')
    op.drop_table('holding')
