"""initial_decoration_schema

Revision ID: a1c3e5f7b9d1
Revises:
Create Date: 2026-10-19 10:00:00.000000

사용자, 카테고리, 게시글, 게시글 이미지, 스티커 카테고리, 스티커, 게시글 장식 테이블 생성.
게시글 → 이미지 → 장식 순으로 ON DELETE CASCADE 연결.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'a1c3e5f7b9d1'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # users — 사용자 계정
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('login_id', sa.String(50), nullable=False, unique=True),
        sa.Column('password_hash', sa.String(255), nullable=False),
        sa.Column('email', sa.String(255), nullable=False, unique=True),
        sa.Column('nickname', sa.String(50), nullable=False, unique=True),
        sa.Column('role', sa.String(20), nullable=False, server_default='USER'),
        sa.Column('status', sa.String(20), nullable=False, server_default='ACTIVE'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sqlite_autoincrement=True,
    )

    # categories — 게시판 카테고리
    op.create_table(
        'categories',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('category_name', sa.String(100), nullable=False, unique=True),
        sa.Column('is_active', sa.Boolean(), server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sqlite_autoincrement=True,
    )

    # posts — 게시글 (작성자 삭제는 RESTRICT)
    op.create_table(
        'posts',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('category_id', sa.Integer(), sa.ForeignKey('categories.id'), nullable=False),
        sa.Column('title', sa.String(200), nullable=False),
        sa.Column('content', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sqlite_autoincrement=True,
    )
    op.create_index('ix_posts_user_id', 'posts', ['user_id'])
    op.create_index('ix_posts_category_id', 'posts', ['category_id'])

    # post_images — 게시글 이미지
    op.create_table(
        'post_images',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('post_id', sa.Integer(), sa.ForeignKey('posts.id', ondelete='CASCADE'), nullable=False),
        sa.Column('image_url', sa.String(500), nullable=False),
        sa.Column('sort_order', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('is_representative', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sqlite_autoincrement=True,
    )
    op.create_index('ix_post_images_post_id', 'post_images', ['post_id'])

    # sticker_categories / stickers — 스티커 에셋
    op.create_table(
        'sticker_categories',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(100), nullable=False, unique=True),
        sa.Column('is_active', sa.Boolean(), server_default=sa.true()),
        sqlite_autoincrement=True,
    )
    op.create_table(
        'stickers',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('sticker_category_id', sa.Integer(), sa.ForeignKey('sticker_categories.id'), nullable=False),
        sa.Column('sticker_name', sa.String(100), nullable=False),
        sa.Column('sticker_image_url', sa.String(500), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sqlite_autoincrement=True,
    )
    op.create_index('ix_stickers_sticker_category_id', 'stickers', ['sticker_category_id'])

    # post_decorations — 이미지 위 스티커 배치
    op.create_table(
        'post_decorations',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('image_id', sa.Integer(), sa.ForeignKey('post_images.id', ondelete='CASCADE'), nullable=False),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('sticker_id', sa.Integer(), sa.ForeignKey('stickers.id'), nullable=False),
        sa.Column('pos_x', sa.Float(), nullable=False),
        sa.Column('pos_y', sa.Float(), nullable=False),
        sa.Column('scale', sa.Float(), nullable=False, server_default='1.0'),
        sa.Column('rotation', sa.Float(), nullable=False, server_default='0.0'),
        sa.Column('z_index', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sqlite_autoincrement=True,
    )
    op.create_index('ix_post_decorations_image_id', 'post_decorations', ['image_id'])

    # 인덱스 — 도배 방지 카운트 (user_id, image_id)
    op.create_index('ix_post_decorations_user_image', 'post_decorations', ['user_id', 'image_id'])


def downgrade() -> None:
    op.drop_index('ix_post_decorations_user_image', table_name='post_decorations')
    op.drop_index('ix_post_decorations_image_id', table_name='post_decorations')
    op.drop_table('post_decorations')
    op.drop_index('ix_stickers_sticker_category_id', table_name='stickers')
    op.drop_table('stickers')
    op.drop_table('sticker_categories')
    op.drop_index('ix_post_images_post_id', table_name='post_images')
    op.drop_table('post_images')
    op.drop_index('ix_posts_category_id', table_name='posts')
    op.drop_index('ix_posts_user_id', table_name='posts')
    op.drop_table('posts')
    op.drop_table('categories')
    op.drop_table('users')
