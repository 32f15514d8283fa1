"""스티커 레포지토리 — 스티커 및 스티커 카테고리 CRUD.

Sticker Repository — CRUD for stickers and sticker categories.
"""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from decostore.models.sticker import Sticker, StickerCategory
from decostore.repositories.base import BaseRepository, translate_db_errors


class StickerCategoryRepository(BaseRepository[StickerCategory]):
    """sticker_categories 테이블 레포지토리 (Repository for sticker categories)."""

    def __init__(self) -> None:
        super().__init__(StickerCategory)

    async def get_active(self, db: AsyncSession) -> list[StickerCategory]:
        """활성 스티커 카테고리를 이름순으로 조회합니다."""
        categories = await self.get_all(db, {"is_active": True}, order_by=StickerCategory.name)
        return list(categories)


class StickerRepository(BaseRepository[Sticker]):
    """stickers 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the stickers table.
    """

    def __init__(self) -> None:
        super().__init__(Sticker)

    async def get_by_category(
        self,
        db: AsyncSession,
        sticker_category_id: int,
    ) -> list[Sticker]:
        """카테고리에 속한 스티커를 카테고리와 함께 조회합니다.

        Retrieve stickers of a sticker category, with the category joined.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            sticker_category_id: 스티커 카테고리 ID (Sticker category id)

        Returns:
            list[Sticker]: 스티커 목록 (Stickers ordered by id)
        """
        query: Select = (
            select(Sticker)
            .options(joinedload(Sticker.sticker_category, innerjoin=True))
            .where(Sticker.sticker_category_id == sticker_category_id)
            .order_by(Sticker.id)
        )
        with translate_db_errors():
            result = await db.execute(query)
        return list(result.scalars().all())


# 싱글턴 인스턴스 — Singleton instances
sticker_category_repository: StickerCategoryRepository = StickerCategoryRepository()
sticker_repository: StickerRepository = StickerRepository()
