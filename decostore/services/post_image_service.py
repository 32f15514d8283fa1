"""게시글 이미지 서비스 — 이미지 첨부 및 대표 이미지 지정.

Post Image Service — Image attachment and representative-image selection.
At most one image per post carries the representative flag; marking an
image representative clears the flag on its siblings in the same
transaction.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from decostore.models.post import PostImage
from decostore.repositories.post_image_repository import post_image_repository
from decostore.repositories.post_repository import post_repository
from decostore.schemas.post import PostImageCreate
from decostore.utils.exceptions import NotFoundError


class PostImageService:
    """게시글 이미지 로직을 처리하는 서비스 (Service handling post images)."""

    async def attach_image(
        self,
        db: AsyncSession,
        data: PostImageCreate,
    ) -> PostImage:
        """게시글에 이미지를 첨부합니다.

        Attach an image to a post. The first image of a post becomes
        representative even when not requested.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 이미지 첨부 데이터 (Image attach data)

        Returns:
            PostImage: 생성된 이미지 (Created image)

        Raises:
            NotFoundError: 게시글이 없을 때 (Post not found)
        """
        if not await post_repository.exists_by_id(db, data.post_id):
            raise NotFoundError("Post not found")

        has_images: bool = await post_image_repository.exists(db, {"post_id": data.post_id})
        representative: bool = data.is_representative or not has_images

        if representative:
            await post_image_repository.clear_representative(db, data.post_id)

        return await post_image_repository.create(
            db,
            {
                "post_id": data.post_id,
                "image_url": data.image_url,
                "sort_order": data.sort_order,
                "is_representative": representative,
            },
        )

    async def set_representative(
        self,
        db: AsyncSession,
        image_id: int,
    ) -> PostImage:
        """기존 이미지를 대표 이미지로 지정합니다.

        Mark an existing image as its post's representative image.

        Raises:
            NotFoundError: 이미지가 없을 때 (Image not found)
        """
        image: PostImage | None = await post_image_repository.get_by_id(db, image_id)
        if image is None:
            raise NotFoundError("Post image not found")

        await post_image_repository.clear_representative(db, image.post_id, except_image_id=image.id)
        await post_image_repository.update(db, image.id, {"is_representative": True})
        return image


# 싱글턴 인스턴스 — Singleton instance
post_image_service: PostImageService = PostImageService()
