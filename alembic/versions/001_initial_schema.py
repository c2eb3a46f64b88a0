"""Create card, profile and completion tables

Revision ID: 001_initial_schema
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '001_initial_schema'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    """Create the catalog, profile and completion tables."""
    op.create_table(
        'card',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('description', sa.String(), nullable=False),
        sa.Column('category', sa.String(), nullable=False),
        sa.Column('difficulty', sa.String(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_card_category', 'card', ['category'], unique=False)

    op.create_table(
        'profile',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('display_name', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_profile_display_name', 'profile', ['display_name'], unique=True)

    op.create_table(
        'completion',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('profile_id', sa.Integer(), nullable=False),
        sa.Column('card_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['profile_id'], ['profile.id'], ),
        sa.ForeignKeyConstraint(['card_id'], ['card.id'], ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('profile_id', 'card_id', name='uq_completion_profile_card')
    )
    op.create_index('ix_completion_profile_id', 'completion', ['profile_id'], unique=False)


def downgrade() -> None:
    """Drop all tables."""
    op.drop_index('ix_completion_profile_id', table_name='completion')
    op.drop_table('completion')
    op.drop_index('ix_profile_display_name', table_name='profile')
    op.drop_table('profile')
    op.drop_index('ix_card_category', table_name='card')
    op.drop_table('card')
