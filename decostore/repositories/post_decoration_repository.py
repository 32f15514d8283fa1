"""게시글 장식 레포지토리 — 스티커 배치 CRUD 및 조회/일괄 쿼리.

Post Decoration Repository — CRUD plus the decoration query surface:
per-image listing with the sticker eagerly joined, the post-wide bulk delete
and its matching read, the anti-spam throttle count, and the targeted
four-field transform update.

Every mutation here is a single SQL statement executed inside the caller's
transaction, so readers never observe a partially applied bulk delete or a
half-updated transform.
"""

from typing import Sequence

from sqlalchemy import Delete, Select, Update, delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from decostore.models.post import PostImage
from decostore.models.sticker import PostDecoration
from decostore.repositories.base import BaseRepository, translate_db_errors


class PostDecorationRepository(BaseRepository[PostDecoration]):
    """post_decorations 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the post_decorations table.
    """

    def __init__(self) -> None:
        super().__init__(PostDecoration)

    async def find_by_image(
        self,
        db: AsyncSession,
        image_id: int,
    ) -> list[PostDecoration]:
        """이미지에 붙은 모든 장식을 스티커와 함께 조회합니다.

        Retrieve every decoration attached to a post image, ordered by id.
        The sticker is loaded in the same statement through an explicit
        join, so `decoration.sticker.sticker_name` needs no further query.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            image_id: 게시글 이미지 ID (Post image id)

        Returns:
            list[PostDecoration]: 장식 목록 (Decorations, sticker pre-resolved)
        """
        query: Select = (
            select(PostDecoration)
            .options(joinedload(PostDecoration.sticker, innerjoin=True))
            .where(PostDecoration.image_id == image_id)
            .order_by(PostDecoration.id)
        )
        with translate_db_errors():
            result = await db.execute(query)
        return list(result.scalars().all())

    async def find_by_post_id(
        self,
        db: AsyncSession,
        post_id: int,
    ) -> list[PostDecoration]:
        """게시글의 모든 이미지에 붙은 장식을 조회합니다.

        Retrieve every decoration reachable from a post through its images.
        Uses the same post -> image join path as `delete_by_post_id`.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            post_id: 게시글 ID (Post id)

        Returns:
            list[PostDecoration]: 장식 목록 (Decorations ordered by id)
        """
        query: Select = (
            select(PostDecoration)
            .join(PostImage, PostImage.id == PostDecoration.image_id)
            .options(joinedload(PostDecoration.sticker, innerjoin=True))
            .where(PostImage.post_id == post_id)
            .order_by(PostDecoration.id)
        )
        with translate_db_errors():
            result = await db.execute(query)
        return list(result.scalars().all())

    async def delete_by_post_id(
        self,
        db: AsyncSession,
        post_id: int,
    ) -> int:
        """게시글에 속한 모든 장식을 한 번의 DELETE로 일괄 삭제합니다.

        Bulk-delete every decoration whose image belongs to the post in one
        DELETE statement. A post with no images or no decorations is fine.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            post_id: 게시글 ID (Post id)

        Returns:
            int: 삭제된 행 수 (Number of rows deleted)

        Raises:
            TransientStoreError: 연결/타임아웃 오류 (Connection or timeout failure)
        """
        image_ids: Select = select(PostImage.id).where(PostImage.post_id == post_id)
        stmt: Delete = (
            delete(PostDecoration)
            .where(PostDecoration.image_id.in_(image_ids))
            .execution_options(synchronize_session=False)
        )
        with translate_db_errors():
            result = await db.execute(stmt)
        return result.rowcount or 0

    async def count_by_user_and_image(
        self,
        db: AsyncSession,
        user_id: int,
        image_id: int,
    ) -> int:
        """유저가 특정 이미지에 붙인 장식 수를 셉니다 (도배 방지용).

        Count decorations with exactly this (user, image) pair. Read-only;
        served by the `ix_post_decorations_user_image` index. The threshold
        itself is the caller's policy.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            user_id: 사용자 ID (User id)
            image_id: 게시글 이미지 ID (Post image id)

        Returns:
            int: 장식 수 (Throttle count)
        """
        query: Select = (
            select(func.count())
            .select_from(PostDecoration)
            .where(PostDecoration.user_id == user_id, PostDecoration.image_id == image_id)
        )
        with translate_db_errors():
            total: int = (await db.execute(query)).scalar() or 0
        return total

    async def update_single_sticker(
        self,
        db: AsyncSession,
        decoration_id: int,
        pos_x: float,
        pos_y: float,
        scale: float,
        rotation: float,
    ) -> bool:
        """장식 하나의 위치, 배율, 회전을 한 번의 UPDATE로 수정합니다.

        Overwrite position, scale and rotation of one decoration in a single
        UPDATE statement, without loading the row first. All four columns
        change together and every other column, timestamps included, keeps
        its value. A missing id is a no-op.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            decoration_id: 장식 ID (Decoration id)
            pos_x: 새 X 좌표 (New horizontal position)
            pos_y: 새 Y 좌표 (New vertical position)
            scale: 새 배율 (New scale factor)
            rotation: 새 회전 각도 (New rotation in degrees)

        Returns:
            bool: 수정된 행이 있었는지 여부 (Whether a row matched)
        """
        stmt: Update = (
            update(PostDecoration)
            .where(PostDecoration.id == decoration_id)
            .values(
                pos_x=pos_x,
                pos_y=pos_y,
                scale=scale,
                rotation=rotation,
                # onupdate 억제 — keep the column's onupdate from firing
                updated_at=PostDecoration.updated_at,
            )
            .execution_options(synchronize_session="evaluate")
        )
        with translate_db_errors():
            result = await db.execute(stmt)
        return (result.rowcount or 0) > 0

    async def find_by_user(
        self,
        db: AsyncSession,
        user_id: int,
    ) -> Sequence[PostDecoration]:
        """유저가 붙인 모든 장식을 조회합니다.

        Retrieve every decoration placed by a user, newest first.
        """
        query: Select = (
            select(PostDecoration)
            .where(PostDecoration.user_id == user_id)
            .order_by(PostDecoration.id.desc())
        )
        with translate_db_errors():
            result = await db.execute(query)
        return result.scalars().all()

    async def next_z_index(
        self,
        db: AsyncSession,
        image_id: int,
    ) -> int:
        """이미지에서 가장 위에 올 z-index 값을 계산합니다.

        Return one above the highest z-index on the image, or 0 when empty.
        """
        query: Select = select(func.max(PostDecoration.z_index)).where(PostDecoration.image_id == image_id)
        with translate_db_errors():
            top: int | None = (await db.execute(query)).scalar()
        return 0 if top is None else top + 1


# 싱글턴 인스턴스 — Singleton instance
post_decoration_repository: PostDecorationRepository = PostDecorationRepository()
