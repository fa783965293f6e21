"""create_profiles_and_listings

Revision ID: 4b1d9c7e2a10
Revises:
Create Date: 2026-10-12 09:14:22.418305

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4b1d9c7e2a10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create profiles and listings tables."""
    op.create_table('profiles',
        sa.Column('id', sa.UUID(), nullable=False),
        sa.Column('owner_id', sa.UUID(), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False, server_default=''),
        sa.Column('name', sa.String(length=50), nullable=True),
        sa.Column('phone', sa.String(length=20), nullable=True),
        sa.Column('location', sa.String(length=100), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('website', sa.String(length=500), nullable=True),
        sa.Column('avatar_url', sa.String(length=500), nullable=True),
        sa.Column('seller_type', sa.String(length=20), nullable=False, server_default='individual'),
        sa.Column('verified', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('rating', sa.Float(), nullable=False, server_default='0'),
        sa.Column('reviews_count', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.CheckConstraint("seller_type IN ('individual', 'dealer')", name='ck_profiles_seller_type'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_profiles_owner_id', 'profiles', ['owner_id'], unique=True)

    op.create_table('listings',
        sa.Column('id', sa.UUID(), nullable=False),
        sa.Column('seller_id', sa.UUID(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False, server_default=''),
        sa.Column('price', sa.Numeric(precision=12, scale=2), nullable=True),
        sa.Column('status', sa.String(length=20), nullable=False, server_default='active'),
        sa.Column('views_count', sa.Integer(), nullable=True, server_default='0'),
        sa.Column('favorites_count', sa.Integer(), nullable=True, server_default='0'),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.CheckConstraint("status IN ('active', 'sold', 'pending')", name='ck_listings_status'),
        sa.ForeignKeyConstraint(['seller_id'], ['profiles.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    # Profile pages list a seller's listings newest first
    op.create_index('ix_listings_seller_created', 'listings', ['seller_id', 'created_at'], unique=False)


def downgrade() -> None:
    """Drop profiles and listings tables."""
    op.drop_index('ix_listings_seller_created', table_name='listings')
    op.drop_table('listings')
    op.drop_index('ix_profiles_owner_id', table_name='profiles')
    op.drop_table('profiles')
