"""게시글 서비스 — 게시글 작성 및 연쇄 삭제.

Post Service — Post creation and cascading deletion.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from decostore.models.post import Post
from decostore.repositories.category_repository import category_repository
from decostore.repositories.post_repository import post_repository
from decostore.schemas.post import PostCreate
from decostore.services.decoration_service import decoration_service
from decostore.utils.exceptions import NotFoundError
from decostore.utils.logging import logger


class PostService:
    """게시글 관련 로직을 처리하는 서비스 (Service handling posts)."""

    async def create_post(
        self,
        db: AsyncSession,
        data: PostCreate,
    ) -> Post:
        """게시글을 작성합니다.

        Create a post in an active category.

        Raises:
            NotFoundError: 카테고리가 없거나 비활성일 때 (Category missing or inactive)
            ConstraintViolationError: 작성자가 없을 때 (Author missing)
        """
        category = await category_repository.get_by_id(db, data.category_id)
        if category is None or not category.is_active:
            raise NotFoundError("Category not found")

        return await post_repository.create(db, data.model_dump())

    async def delete_post(
        self,
        db: AsyncSession,
        post_id: int,
    ) -> bool:
        """게시글과 그 이미지, 장식을 모두 삭제합니다.

        Delete a post: its decorations go first in one bulk statement, then
        the post and its images. Missing posts are a no-op.

        Returns:
            bool: 삭제 여부 (Whether the post existed)
        """
        if not await post_repository.exists_by_id(db, post_id):
            return False

        await decoration_service.clear_post(db, post_id)
        deleted: bool = await post_repository.delete_by_id(db, post_id)
        logger.info(f"Post {post_id} deleted")
        return deleted


# 싱글턴 인스턴스 — Singleton instance
post_service: PostService = PostService()
