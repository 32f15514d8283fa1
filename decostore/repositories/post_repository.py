"""게시글 레포지토리 — 게시글 CRUD 및 이미지 포함 조회.

Post Repository — CRUD for posts plus image-eager detail loading.
Deleting a post through `delete_by_id` cascades to its images and their
decorations.
"""

from typing import Sequence

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from decostore.models.post import Post
from decostore.repositories.base import BaseRepository, translate_db_errors


class PostRepository(BaseRepository[Post]):
    """posts 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the posts table.
    """

    def __init__(self) -> None:
        super().__init__(Post)

    async def get_with_images(
        self,
        db: AsyncSession,
        post_id: int,
    ) -> Post | None:
        """게시글을 이미지 목록과 함께 조회합니다.

        Retrieve a post with its images eagerly loaded in sort order.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            post_id: 게시글 ID (Post id)

        Returns:
            Post | None: 이미지가 로드된 게시글 또는 None (Post with images, or None)
        """
        query: Select = (
            select(Post)
            .options(selectinload(Post.images))
            .where(Post.id == post_id)
        )
        with translate_db_errors():
            result = await db.execute(query)
        return result.scalar_one_or_none()

    async def get_by_user(
        self,
        db: AsyncSession,
        user_id: int,
    ) -> Sequence[Post]:
        """작성자의 게시글을 최신순으로 조회합니다.

        Retrieve posts written by a user, newest first.
        """
        query: Select = (
            select(Post)
            .where(Post.user_id == user_id)
            .order_by(Post.id.desc())
        )
        with translate_db_errors():
            result = await db.execute(query)
        return result.scalars().all()


# 싱글턴 인스턴스 — Singleton instance
post_repository: PostRepository = PostRepository()
