"""Initial schema with all tables

Revision ID: 001_initial
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = '001_initial'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    like_action_enum = postgresql.ENUM(
        'LIKE', 'PASS',
        name='likeaction',
        create_type=False
    )
    like_action_enum.create(op.get_bind(), checkfirst=True)

    op.create_table(
        'profiles',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('user_id', sa.String(128), nullable=False),
        sa.Column('first_name', sa.String(100), nullable=True),
        sa.Column('last_name', sa.String(100), nullable=True),
        sa.Column('username', sa.String(100), nullable=True),
        sa.Column('bio', sa.Text(), nullable=True),
        sa.Column('profile_image_url', sa.String(500), nullable=True),
        sa.Column('skill_level', sa.Float(), nullable=False, server_default='0'),
        sa.Column('skill_tier', sa.String(50), nullable=True),
        sa.Column('preferred_location', sa.String(255), nullable=True),
        sa.Column('preferred_game_types', postgresql.JSONB(), nullable=True),
        sa.Column('availability', postgresql.JSONB(), nullable=True),
        sa.Column('seq', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
    )
    op.create_index('ix_profiles_user_id', 'profiles', ['user_id'], unique=True)
    op.create_index('ix_profiles_created_at', 'profiles', ['created_at'])
    op.create_index('ix_profiles_seq', 'profiles', ['seq'])
    op.create_index('ix_profiles_username', 'profiles', ['username'], unique=True)

    op.create_table(
        'likes',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('user_id', sa.String(128), nullable=False),
        sa.Column('target_user_id', sa.String(128), nullable=False),
        sa.Column('action', like_action_enum, nullable=False),
        sa.Column('is_match', sa.Boolean(), nullable=True, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(), nullable=True),
    )
    op.create_index('ix_likes_user_id', 'likes', ['user_id'])
    op.create_index('ix_likes_target_user_id', 'likes', ['target_user_id'])

    op.create_table(
        'notifications',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('user_id', sa.String(128), nullable=False),
        sa.Column('type', sa.String(50), nullable=False),
        sa.Column('related_user_id', sa.String(128), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('is_read', sa.Boolean(), nullable=True, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(), nullable=True),
    )
    op.create_index('ix_notifications_user_id', 'notifications', ['user_id'])

    op.create_table(
        'usernames',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('username', sa.String(100), nullable=False),
        sa.Column('display_username', sa.String(100), nullable=False),
        sa.Column('user_id', sa.String(128), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
    )
    op.create_index('ix_usernames_username', 'usernames', ['username'], unique=True)
    op.create_index('ix_usernames_user_id', 'usernames', ['user_id'])

    op.create_table(
        'wishlists',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('user_id', sa.String(128), nullable=False),
        sa.Column('name', sa.String(50), nullable=False),
        sa.Column('venue_ids', postgresql.JSONB(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
    )
    op.create_index('ix_wishlists_user_id', 'wishlists', ['user_id'])


def downgrade() -> None:
    op.drop_table('wishlists')
    op.drop_table('usernames')
    op.drop_table('notifications')
    op.drop_table('likes')
    op.drop_table('profiles')

    op.execute('DROP TYPE IF EXISTS likeaction')
