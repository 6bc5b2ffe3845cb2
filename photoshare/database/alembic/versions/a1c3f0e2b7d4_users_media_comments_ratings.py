"""users, media items, comments and ratings

Revision ID: a1c3f0e2b7d4
Revises:
Create Date: 2026-10-18 10:12:41.118204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

from photoshare.database.core.main import Base

# revision identifiers, used by Alembic.
revision: str = 'a1c3f0e2b7d4'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

SCHEMA = Base.metadata.schema


def _fk(col: str) -> str:
    return f"{SCHEMA}.{col}" if SCHEMA else col


def _service_object_columns() -> list:
    return [
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('date_created', sa.DateTime(timezone=True), nullable=True),
        sa.Column('last_updated', sa.DateTime(timezone=True), nullable=True),
        sa.Column('data_origin', sa.Text(), nullable=True),
        sa.Column('meta_data', sa.JSON().with_variant(postgresql.JSONB(), 'postgresql'), nullable=True),
    ]


def upgrade() -> None:
    op.create_table(
        'users',
        *_service_object_columns(),
        sa.Column('username', sa.String(length=50), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('role', sa.Enum('creator', 'consumer', name='user_role'), nullable=False),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_users')),
        sa.UniqueConstraint('username', name=op.f('uq_users_username')),
        sa.UniqueConstraint('email', name=op.f('uq_users_email')),
        schema=SCHEMA,
    )
    op.create_index(op.f('ix_users_date_created'), 'users', ['date_created'], unique=False, schema=SCHEMA)

    op.create_table(
        'media_item',
        *_service_object_columns(),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('title', sa.String(length=100), nullable=False),
        sa.Column('caption', sa.String(length=500), nullable=True),
        sa.Column('location', sa.String(length=100), nullable=True),
        sa.Column('people', sa.JSON(), nullable=False),
        sa.Column('media_type', sa.Enum('image', 'video', name='media_kind'), nullable=False),
        sa.Column('image_url', sa.Text(), nullable=False),
        sa.Column('storage_id', sa.Text(), nullable=False),
        sa.Column('average_rating', sa.Float(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], [_fk('users.id')],
                                name=op.f('fk_media_item_user_id_users'), ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_media_item')),
        schema=SCHEMA,
    )
    op.create_index(op.f('ix_media_item_date_created'), 'media_item', ['date_created'], unique=False, schema=SCHEMA)
    op.create_index('ix_mediaitem_user_created', 'media_item', ['user_id', 'date_created'], unique=False, schema=SCHEMA)

    op.create_table(
        'comment',
        *_service_object_columns(),
        sa.Column('media_item_id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('text', sa.String(length=500), nullable=False),
        sa.CheckConstraint('length(text) BETWEEN 1 AND 500', name=op.f('ck_comment_text_length')),
        sa.ForeignKeyConstraint(['media_item_id'], [_fk('media_item.id')],
                                name=op.f('fk_comment_media_item_id_media_item'), ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['user_id'], [_fk('users.id')],
                                name=op.f('fk_comment_user_id_users'), ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_comment')),
        schema=SCHEMA,
    )
    op.create_index(op.f('ix_comment_date_created'), 'comment', ['date_created'], unique=False, schema=SCHEMA)
    op.create_index('ix_comment_media_created', 'comment', ['media_item_id', 'date_created'], unique=False, schema=SCHEMA)

    op.create_table(
        'rating',
        *_service_object_columns(),
        sa.Column('media_item_id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('value', sa.Integer(), nullable=False),
        sa.CheckConstraint('value BETWEEN 1 AND 5', name=op.f('ck_rating_value_1_5')),
        sa.ForeignKeyConstraint(['media_item_id'], [_fk('media_item.id')],
                                name=op.f('fk_rating_media_item_id_media_item'), ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['user_id'], [_fk('users.id')],
                                name=op.f('fk_rating_user_id_users'), ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_rating')),
        sa.UniqueConstraint('media_item_id', 'user_id', name='uq_rating_media_item_user'),
        schema=SCHEMA,
    )
    op.create_index(op.f('ix_rating_date_created'), 'rating', ['date_created'], unique=False, schema=SCHEMA)


def downgrade() -> None:
    op.drop_index(op.f('ix_rating_date_created'), table_name='rating', schema=SCHEMA)
    op.drop_table('rating', schema=SCHEMA)
    op.drop_index('ix_comment_media_created', table_name='comment', schema=SCHEMA)
    op.drop_index(op.f('ix_comment_date_created'), table_name='comment', schema=SCHEMA)
    op.drop_table('comment', schema=SCHEMA)
    op.drop_index('ix_mediaitem_user_created', table_name='media_item', schema=SCHEMA)
    op.drop_index(op.f('ix_media_item_date_created'), table_name='media_item', schema=SCHEMA)
    op.drop_table('media_item', schema=SCHEMA)
    op.drop_index(op.f('ix_users_date_created'), table_name='users', schema=SCHEMA)
    op.drop_table('users', schema=SCHEMA)
    sa.Enum(name='media_kind').drop(op.get_bind(), checkfirst=True)
    sa.Enum(name='user_role').drop(op.get_bind(), checkfirst=True)
