"""Create catalog_brand, catalog_type and catalog_item tables.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create catalog tables."""
    op.create_table(
        'catalog_brand',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('brand', sa.String(100), nullable=False),
    )

    op.create_table(
        'catalog_type',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('type', sa.String(100), nullable=False),
    )

    op.create_table(
        'catalog_item',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('price', sa.Numeric(18, 2), nullable=False),
        sa.Column('available_stock', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('catalog_brand_id', sa.Integer(),
                  sa.ForeignKey('catalog_brand.id'), nullable=False, index=True),
        sa.Column('catalog_type_id', sa.Integer(),
                  sa.ForeignKey('catalog_type.id'), nullable=False, index=True),
        sa.Column('picture_file_name', sa.String(255), nullable=True),
    )


def downgrade() -> None:
    """Drop catalog tables."""
    op.drop_table('catalog_item')
    op.drop_table('catalog_type')
    op.drop_table('catalog_brand')
