"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package ensures all models are registered with the
SQLAlchemy metadata, which is required for Alembic migrations and
relationship resolution.

Modules:
    user: 사용자 (User, role and status enums)
    post: 카테고리, 게시글, 게시글 이미지 (Category, Post, PostImage)
    sticker: 스티커 카테고리, 스티커, 게시글 장식 (StickerCategory, Sticker, PostDecoration)
"""

from decostore.models.user import User, UserRole, UserStatus
from decostore.models.post import Category, Post, PostImage
from decostore.models.sticker import StickerCategory, Sticker, PostDecoration

__all__ = [
    "User", "UserRole", "UserStatus",
    "Category", "Post", "PostImage",
    "StickerCategory", "Sticker", "PostDecoration",
]
