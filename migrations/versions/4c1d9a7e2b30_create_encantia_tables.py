"""create_encantia_tables

Revision ID: 4c1d9a7e2b30
Revises:
Create Date: 2025-06-02 17:20:41.118203

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4c1d9a7e2b30'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create profiles, ownerinfo and content tables."""
    op.create_table('profiles',
        sa.Column('user_id', sa.UUID(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=True),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('avatar_url', sa.String(length=500), nullable=True),
        sa.Column('pin', sa.String(length=6), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('now()')),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.text('now()')),
        sa.CheckConstraint("pin IS NULL OR pin ~ '^[0-9]{4,6}$'", name='ck_profiles_pin'),
        sa.PrimaryKeyConstraint('user_id'),
        sa.UniqueConstraint('email'),
    )
    # One row per member; the primary key enforces uniqueness per owner
    op.create_table('ownerinfo',
        sa.Column('uuid', sa.UUID(), nullable=False),
        sa.Column('nombresyapellidos', sa.String(length=200), nullable=False),
        sa.Column('fechadenacimiento', sa.Date(), nullable=True),
        sa.Column('nacionalidad', sa.String(length=100), nullable=False),
        sa.Column('edad', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('now()')),
        sa.CheckConstraint("length(trim(nombresyapellidos)) > 0", name='ck_ownerinfo_name'),
        sa.CheckConstraint("length(trim(nacionalidad)) > 0", name='ck_ownerinfo_nationality'),
        sa.ForeignKeyConstraint(['uuid'], ['profiles.user_id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('uuid'),
    )
    op.create_table('events',
        sa.Column('id', sa.Integer(), sa.Identity(), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('winner', sa.String(length=200), nullable=True),
        sa.Column('cover', sa.String(length=500), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_events_date', 'events', ['date'], unique=False)
    op.create_table('books',
        sa.Column('id', sa.Integer(), sa.Identity(), nullable=False),
        sa.Column('title', sa.String(length=300), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('cover_url', sa.String(length=500), nullable=True),
        sa.Column('portada_url', sa.String(length=500), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('now()')),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_books_created_at', 'books', ['created_at'], unique=False)
    op.create_table('musicas',
        sa.Column('id', sa.Integer(), sa.Identity(), nullable=False),
        sa.Column('titulo', sa.String(length=300), nullable=False),
        sa.Column('autor', sa.String(length=200), nullable=True),
        sa.Column('categoria', sa.String(length=100), nullable=True),
        sa.Column('musica_url', sa.String(length=500), nullable=True),
        sa.Column('portada_url', sa.String(length=500), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )


def downgrade() -> None:
    """Drop all Encantia tables."""
    op.drop_table('musicas')
    op.drop_index('ix_books_created_at', table_name='books')
    op.drop_table('books')
    op.drop_index('ix_events_date', table_name='events')
    op.drop_table('events')
    op.drop_table('ownerinfo')
    op.drop_table('profiles')
