"""스티커 서비스 — 스티커 등록.

Sticker Service — Sticker registration into active sticker categories.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from decostore.models.sticker import Sticker
from decostore.repositories.sticker_repository import sticker_category_repository, sticker_repository
from decostore.schemas.decoration import StickerCreate
from decostore.utils.exceptions import NotFoundError
from decostore.utils.logging import logger


class StickerService:
    """스티커 관련 로직을 처리하는 서비스 (Service handling stickers)."""

    async def create_sticker(
        self,
        db: AsyncSession,
        data: StickerCreate,
    ) -> Sticker:
        """활성 스티커 카테고리에 스티커를 등록합니다.

        Register a sticker in an active sticker category.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 스티커 생성 데이터 (Sticker data)

        Returns:
            Sticker: 생성된 스티커 (Created sticker)

        Raises:
            NotFoundError: 스티커 카테고리가 없거나 비활성일 때
                           (Sticker category missing or inactive)
        """
        group = await sticker_category_repository.get_by_id(db, data.sticker_category_id)
        if group is None or not group.is_active:
            raise NotFoundError("Sticker category not found")

        sticker: Sticker = await sticker_repository.create(db, data.model_dump())
        logger.debug(f"Sticker {sticker.id} added to category {group.id}")
        return sticker


# 싱글턴 인스턴스 — Singleton instance
sticker_service: StickerService = StickerService()
