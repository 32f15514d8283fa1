"""초기 데이터 시드 스크립트 — 기본 카테고리와 스티커 세트 생성.

Seed script — Creates the default post categories and sticker set.

Usage:
    python -m decostore.seed

Idempotent: 이미 존재하는 카테고리/스티커는 건너뜁니다 (Existing rows are skipped).
"""

import asyncio

from sqlalchemy.ext.asyncio import AsyncSession

from decostore.database import Base, engine, unit_of_work
from decostore.models import Category, StickerCategory
from decostore.repositories.category_repository import category_repository
from decostore.repositories.sticker_repository import sticker_category_repository, sticker_repository
from decostore.schemas.decoration import StickerCreate
from decostore.services.sticker_service import sticker_service
from decostore.utils.logging import logger

# 기본 게시판 카테고리 — Default post categories
DEFAULT_CATEGORIES: list[str] = ["자유게시판", "공지사항", "Q&A", "정보공유", "이벤트"]

# 기본 스티커 세트 — {스티커 카테고리: [(스티커 이름, 이미지 URL)]}
DEFAULT_STICKERS: dict[str, list[tuple[str, str]]] = {
    "감정표현": [("웃는 얼굴", "smile.png"), ("우는 얼굴", "cry.png"), ("하트", "heart.png")],
    "꾸미기": [("별", "star.png"), ("리본", "ribbon.png")],
}


async def seed_defaults(db: AsyncSession) -> int:
    """기본 카테고리와 스티커를 생성합니다.

    Insert the default categories, sticker categories and stickers that
    are not present yet.

    Args:
        db: 비동기 데이터베이스 세션 (Async database session)

    Returns:
        int: 새로 생성된 레코드 수 (Number of rows inserted)
    """
    created: int = 0

    for name in DEFAULT_CATEGORIES:
        if not await category_repository.exists(db, {"category_name": name}):
            await category_repository.save(db, Category(category_name=name, is_active=True))
            created += 1

    for group_name, stickers in DEFAULT_STICKERS.items():
        existing = await sticker_category_repository.get_all(db, {"name": group_name})
        if existing:
            group: StickerCategory = existing[0]
        else:
            group = await sticker_category_repository.save(db, StickerCategory(name=group_name, is_active=True))
            created += 1

        for sticker_name, image_url in stickers:
            exists: bool = await sticker_repository.exists(
                db, {"sticker_category_id": group.id, "sticker_name": sticker_name}
            )
            if not exists:
                await sticker_service.create_sticker(
                    db,
                    StickerCreate(sticker_category_id=group.id, sticker_name=sticker_name, sticker_image_url=image_url),
                )
                created += 1

    return created


async def seed() -> None:
    """테이블을 만들고 기본 데이터를 시드합니다 (Create tables and seed defaults)."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with unit_of_work() as db:
        created: int = await seed_defaults(db)

    if created:
        logger.info(f"Seeded {created} row(s)")
    else:
        logger.info("Already seeded. Skipping.")


if __name__ == "__main__":
    asyncio.run(seed())
