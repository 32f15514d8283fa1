"""장식 서비스 — 스티커 배치, 이동, 게시글 단위 정리.

Decoration Service — Sticker placement with the anti-spam throttle,
transform updates and post-wide cleanup.

The throttle threshold is policy supplied by the caller (or the
DECORATION_THROTTLE_LIMIT setting); the store only provides the count.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from decostore.config import settings
from decostore.models.sticker import PostDecoration
from decostore.repositories.post_decoration_repository import post_decoration_repository
from decostore.schemas.decoration import DecorationCreate, DecorationTransform
from decostore.utils.exceptions import ThrottleExceededError
from decostore.utils.logging import logger


class DecorationService:
    """장식 관련 로직을 처리하는 서비스 (Service handling post decorations)."""

    async def place_sticker(
        self,
        db: AsyncSession,
        user_id: int,
        data: DecorationCreate,
        limit: int | None = None,
    ) -> PostDecoration:
        """이미지에 스티커를 붙입니다.

        Place a sticker on a post image for a user. When a limit applies and
        the user already has `limit` decorations on the image, the placement
        is rejected.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            user_id: 사용자 ID (Placing user id)
            data: 장식 생성 데이터 (Decoration data)
            limit: 유저-이미지별 상한, None이면 설정값 사용
                   (Per user/image cap; None falls back to settings, which may also be None)

        Returns:
            PostDecoration: 생성된 장식 (Created decoration)

        Raises:
            ThrottleExceededError: 상한 도달 (Cap reached)
            ConstraintViolationError: 이미지/사용자/스티커가 없을 때 (Missing FK target)
        """
        cap: int | None = limit if limit is not None else settings.DECORATION_THROTTLE_LIMIT
        if cap is not None:
            count: int = await post_decoration_repository.count_by_user_and_image(db, user_id, data.image_id)
            if count >= cap:
                logger.warning(
                    f"Sticker throttled: user={user_id} image={data.image_id} count={count} limit={cap}"
                )
                raise ThrottleExceededError(count, cap)

        z_index: int | None = data.z_index
        if z_index is None:
            z_index = await post_decoration_repository.next_z_index(db, data.image_id)

        return await post_decoration_repository.create(
            db,
            {
                "image_id": data.image_id,
                "user_id": user_id,
                "sticker_id": data.sticker_id,
                "pos_x": data.pos_x,
                "pos_y": data.pos_y,
                "scale": data.scale,
                "rotation": data.rotation,
                "z_index": z_index,
            },
        )

    async def move_sticker(
        self,
        db: AsyncSession,
        decoration_id: int,
        data: DecorationTransform,
    ) -> bool:
        """장식의 위치/크기/회전을 변경합니다.

        Rewrite a decoration's transform. A missing decoration is logged and
        skipped rather than raised.

        Returns:
            bool: 변경 여부 (Whether a decoration was updated)
        """
        updated: bool = await post_decoration_repository.update_single_sticker(
            db, decoration_id, data.pos_x, data.pos_y, data.scale, data.rotation
        )
        if not updated:
            logger.warning(f"Decoration {decoration_id} not found, transform skipped")
        return updated

    async def clear_post(
        self,
        db: AsyncSession,
        post_id: int,
    ) -> int:
        """게시글의 모든 장식을 일괄 삭제합니다.

        Remove every decoration on the post's images in one statement.

        Returns:
            int: 삭제된 장식 수 (Decorations removed)
        """
        removed: int = await post_decoration_repository.delete_by_post_id(db, post_id)
        logger.info(f"Cleared {removed} decoration(s) from post {post_id}")
        return removed


# 싱글턴 인스턴스 — Singleton instance
decoration_service: DecorationService = DecorationService()
