"""카테고리 레포지토리 — 게시판 카테고리 CRUD.

Category Repository — CRUD for post categories.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from decostore.models.post import Category
from decostore.repositories.base import BaseRepository


class CategoryRepository(BaseRepository[Category]):
    """categories 테이블 레포지토리 (Repository for the categories table)."""

    def __init__(self) -> None:
        super().__init__(Category)

    async def get_active(self, db: AsyncSession) -> list[Category]:
        """활성 카테고리를 이름순으로 조회합니다.

        Retrieve active categories ordered by name.
        """
        categories = await self.get_all(db, {"is_active": True}, order_by=Category.category_name)
        return list(categories)


# 싱글턴 인스턴스 — Singleton instance
category_repository: CategoryRepository = CategoryRepository()
