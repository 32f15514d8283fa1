"""게시글 이미지 레포지토리 — 이미지 CRUD, 정렬 조회, 대표 이미지 관리.

Post Image Repository — CRUD, sort-ordered listing and representative-flag
maintenance for post images.
"""

from sqlalchemy import Select, Update, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from decostore.models.post import PostImage
from decostore.repositories.base import BaseRepository, translate_db_errors


class PostImageRepository(BaseRepository[PostImage]):
    """post_images 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the post_images table.
    """

    def __init__(self) -> None:
        super().__init__(PostImage)

    async def get_by_post(
        self,
        db: AsyncSession,
        post_id: int,
    ) -> list[PostImage]:
        """게시글의 이미지를 정렬 순서대로 조회합니다.

        Retrieve a post's images by sort order, then id.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            post_id: 게시글 ID (Post id)

        Returns:
            list[PostImage]: 이미지 목록 (Images in display order)
        """
        query: Select = (
            select(PostImage)
            .where(PostImage.post_id == post_id)
            .order_by(PostImage.sort_order, PostImage.id)
        )
        with translate_db_errors():
            result = await db.execute(query)
        return list(result.scalars().all())

    async def get_representative(
        self,
        db: AsyncSession,
        post_id: int,
    ) -> PostImage | None:
        """게시글의 대표 이미지를 조회합니다.

        Retrieve the post's representative image, if one is flagged.
        """
        query: Select = (
            select(PostImage)
            .where(PostImage.post_id == post_id, PostImage.is_representative == True)  # noqa: E712
            .order_by(PostImage.id)
            .limit(1)
        )
        with translate_db_errors():
            result = await db.execute(query)
        return result.scalar_one_or_none()

    async def clear_representative(
        self,
        db: AsyncSession,
        post_id: int,
        except_image_id: int | None = None,
    ) -> int:
        """게시글의 대표 이미지 표시를 해제합니다.

        Clear the representative flag on every image of the post, except
        `except_image_id` when given. Single UPDATE statement.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            post_id: 게시글 ID (Post id)
            except_image_id: 유지할 이미지 ID (Image to leave untouched)

        Returns:
            int: 변경된 행 수 (Rows changed)
        """
        stmt: Update = (
            update(PostImage)
            .where(PostImage.post_id == post_id, PostImage.is_representative == True)  # noqa: E712
            .values(is_representative=False)
        )
        if except_image_id is not None:
            stmt = stmt.where(PostImage.id != except_image_id)

        with translate_db_errors():
            result = await db.execute(stmt.execution_options(synchronize_session="evaluate"))
        return result.rowcount or 0


# 싱글턴 인스턴스 — Singleton instance
post_image_repository: PostImageRepository = PostImageRepository()
