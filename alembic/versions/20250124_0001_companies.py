"""Companies table

Revision ID: 0001
Revises:
Create Date: 2025-01-24

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'companies',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=False),
        sa.Column('name', sa.String(500), nullable=False),
        sa.Column('domain', sa.String(255), nullable=False, server_default=''),
        sa.Column('industry', sa.String(255), nullable=False, server_default=''),
        sa.Column('category', sa.String(255), nullable=False, server_default=''),
        sa.Column('hq_country', sa.String(100), nullable=False, server_default=''),
        sa.Column('founded', sa.Integer()),
        sa.Column('revenue', sa.BigInteger(), nullable=False, server_default='0'),
        sa.Column('employees', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('technologies', postgresql.JSONB(), nullable=False, server_default='[]'),
        sa.Column('office_locations', postgresql.JSONB(), nullable=False, server_default='[]'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), onupdate=sa.func.now(), nullable=False),
    )


def downgrade() -> None:
    op.drop_table('companies')
