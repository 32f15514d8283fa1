"""서비스 계층 테스트.

Service layer tests — registration hashing, representative-image
uniqueness, sticker throttle, transform updates, post deletion and
sticker registration.
"""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from decostore.config import settings
from decostore.models import UserStatus
from decostore.repositories import (
    post_decoration_repository,
    post_image_repository,
    post_repository,
    sticker_category_repository,
    user_repository,
)
from decostore.schemas.decoration import DecorationCreate, DecorationTransform, StickerCreate
from decostore.schemas.post import PostCreate, PostImageCreate
from decostore.schemas.user import UserCreate
from decostore.services.decoration_service import decoration_service
from decostore.services.post_image_service import post_image_service
from decostore.services.post_service import post_service
from decostore.services.sticker_service import sticker_service
from decostore.services.user_service import user_service
from decostore.utils.exceptions import (
    ConstraintViolationError,
    DuplicateError,
    NotFoundError,
    ThrottleExceededError,
)
from decostore.utils.password import verify_password
from tests.conftest import make_category, make_decoration, make_image, make_sticker


def _signup(suffix: str = "1") -> UserCreate:
    return UserCreate(
        login_id=f"user_{suffix}",
        password="1111",
        email=f"moana_{suffix}@test.com",
        nickname=f"모아나_{suffix}",
    )


class TestUserService:
    """사용자 가입 테스트."""

    async def test_register_hashes_password(self, db: AsyncSession):
        user = await user_service.register_user(db, _signup())

        assert user.id is not None
        assert user.password_hash != "1111"
        assert user.password_hash.startswith("$2")
        assert verify_password("1111", user.password_hash)

    async def test_register_duplicate_login_id(self, db: AsyncSession):
        await user_service.register_user(db, _signup("dup"))
        again = _signup("dup")
        again.email = "other@test.com"

        with pytest.raises(DuplicateError):
            await user_service.register_user(db, again)

    async def test_register_duplicate_email(self, db: AsyncSession):
        await user_service.register_user(db, _signup("a"))
        clash = _signup("b")
        clash.email = "moana_a@test.com"

        with pytest.raises(DuplicateError):
            await user_service.register_user(db, clash)

    async def test_register_duplicate_nickname(self, db: AsyncSession):
        await user_service.register_user(db, _signup("c"))
        clash = _signup("d")
        clash.nickname = "모아나_c"

        with pytest.raises(DuplicateError) as exc_info:
            await user_service.register_user(db, clash)
        assert "Nickname" in exc_info.value.detail

    async def test_authenticate(self, db: AsyncSession):
        user = await user_service.register_user(db, _signup("auth"))

        assert (await user_service.authenticate(db, "user_auth", "1111")).id == user.id
        assert await user_service.authenticate(db, "user_auth", "wrong") is None
        assert await user_service.authenticate(db, "ghost", "1111") is None

    async def test_authenticate_inactive_user(self, db: AsyncSession):
        user = await user_service.register_user(db, _signup("off"))
        await user_repository.update(db, user.id, {"status": UserStatus.INACTIVE})

        assert await user_service.authenticate(db, "user_off", "1111") is None


class TestPostImageService:
    """대표 이미지 지정 테스트."""

    async def test_first_image_becomes_representative(self, db: AsyncSession, post):
        image = await post_image_service.attach_image(db, PostImageCreate(post_id=post.id, image_url="a.jpg"))
        assert image.is_representative is True

    async def test_only_one_representative(self, db: AsyncSession, post):
        first = await post_image_service.attach_image(db, PostImageCreate(post_id=post.id, image_url="a.jpg"))
        second = await post_image_service.attach_image(
            db, PostImageCreate(post_id=post.id, image_url="b.jpg", sort_order=1, is_representative=True)
        )
        third = await post_image_service.attach_image(
            db, PostImageCreate(post_id=post.id, image_url="c.jpg", sort_order=2)
        )

        representative = await post_image_repository.get_representative(db, post.id)
        flags = {i.id: i.is_representative for i in await post_image_repository.get_by_post(db, post.id)}

        assert representative.id == second.id
        assert flags == {first.id: False, second.id: True, third.id: False}

    async def test_set_representative(self, db: AsyncSession, post):
        first = await post_image_service.attach_image(db, PostImageCreate(post_id=post.id, image_url="a.jpg"))
        second = await post_image_service.attach_image(db, PostImageCreate(post_id=post.id, image_url="b.jpg"))

        await post_image_service.set_representative(db, second.id)

        assert (await post_image_repository.get_representative(db, post.id)).id == second.id
        assert (await post_image_repository.get_by_id(db, first.id)).is_representative is False

    async def test_attach_to_missing_post(self, db: AsyncSession):
        with pytest.raises(NotFoundError):
            await post_image_service.attach_image(db, PostImageCreate(post_id=31337, image_url="a.jpg"))

    async def test_set_representative_missing_image(self, db: AsyncSession):
        with pytest.raises(NotFoundError):
            await post_image_service.set_representative(db, 31337)


class TestDecorationService:
    """스티커 배치 및 도배 방지 테스트."""

    async def test_place_sticker_stacks_on_top(self, db: AsyncSession, image, user, sticker):
        data = DecorationCreate(image_id=image.id, sticker_id=sticker.id, pos_x=10.0, pos_y=20.0)

        first = await decoration_service.place_sticker(db, user.id, data)
        second = await decoration_service.place_sticker(db, user.id, data)

        assert (first.z_index, second.z_index) == (0, 1)

    async def test_explicit_z_index(self, db: AsyncSession, image, user, sticker):
        data = DecorationCreate(image_id=image.id, sticker_id=sticker.id, pos_x=0, pos_y=0, z_index=42)
        deco = await decoration_service.place_sticker(db, user.id, data)
        assert deco.z_index == 42

    async def test_throttle_limit(self, db: AsyncSession, image, user, sticker):
        data = DecorationCreate(image_id=image.id, sticker_id=sticker.id, pos_x=0, pos_y=0)
        for _ in range(2):
            await decoration_service.place_sticker(db, user.id, data, limit=2)

        with pytest.raises(ThrottleExceededError) as exc_info:
            await decoration_service.place_sticker(db, user.id, data, limit=2)

        assert (exc_info.value.count, exc_info.value.limit) == (2, 2)
        assert await post_decoration_repository.count_by_user_and_image(db, user.id, image.id) == 2

    async def test_throttle_from_settings(self, db: AsyncSession, image, user, sticker, monkeypatch):
        monkeypatch.setattr(settings, "DECORATION_THROTTLE_LIMIT", 1)
        data = DecorationCreate(image_id=image.id, sticker_id=sticker.id, pos_x=0, pos_y=0)
        await decoration_service.place_sticker(db, user.id, data)

        with pytest.raises(ThrottleExceededError):
            await decoration_service.place_sticker(db, user.id, data)

    async def test_no_limit_by_default(self, db: AsyncSession, image, user, sticker):
        data = DecorationCreate(image_id=image.id, sticker_id=sticker.id, pos_x=0, pos_y=0)
        for _ in range(5):
            await decoration_service.place_sticker(db, user.id, data)
        assert await post_decoration_repository.count_by_user_and_image(db, user.id, image.id) == 5

    async def test_place_on_missing_image(self, db: AsyncSession, user, sticker):
        data = DecorationCreate(image_id=404_404, sticker_id=sticker.id, pos_x=0, pos_y=0)
        with pytest.raises(ConstraintViolationError):
            await decoration_service.place_sticker(db, user.id, data)

    async def test_move_sticker(self, db: AsyncSession, image, user, sticker):
        deco = await make_decoration(db, image, user, sticker)

        moved = await decoration_service.move_sticker(
            db, deco.id, DecorationTransform(pos_x=500.0, pos_y=300.0, scale=1.5, rotation=405.0)
        )
        found = await post_decoration_repository.get_by_id(db, deco.id)

        assert moved is True
        assert (found.pos_x, found.pos_y, found.scale, found.rotation) == (500.0, 300.0, 1.5, 45.0)

    async def test_move_missing_sticker(self, db: AsyncSession):
        moved = await decoration_service.move_sticker(db, 1, DecorationTransform(pos_x=1, pos_y=1))
        assert moved is False


class TestPostService:
    """게시글 작성/삭제 테스트."""

    async def test_create_post(self, db: AsyncSession, user, category):
        post = await post_service.create_post(
            db, PostCreate(user_id=user.id, category_id=category.id, title="테스트 포스트")
        )
        assert post.id is not None
        assert post.content is None

    async def test_create_post_in_inactive_category(self, db: AsyncSession, user):
        closed = await make_category(db, is_active=False)
        with pytest.raises(NotFoundError):
            await post_service.create_post(db, PostCreate(user_id=user.id, category_id=closed.id, title="x"))

    async def test_delete_post_removes_decorations(self, db: AsyncSession, post, image, user, sticker):
        second_image = await make_image(db, post, sort_order=2)
        await make_decoration(db, image, user, sticker)
        await make_decoration(db, second_image, user, sticker)

        assert await post_service.delete_post(db, post.id) is True

        assert await post_decoration_repository.find_by_post_id(db, post.id) == []
        assert await post_repository.exists_by_id(db, post.id) is False
        assert await post_image_repository.get_by_post(db, post.id) == []

    async def test_delete_missing_post(self, db: AsyncSession):
        assert await post_service.delete_post(db, 8080) is False


class TestStickerService:
    """스티커 등록 테스트."""

    async def test_create_sticker(self, db: AsyncSession, sticker):
        created = await sticker_service.create_sticker(
            db,
            StickerCreate(
                sticker_category_id=sticker.sticker_category_id, sticker_name="별", sticker_image_url="star.png"
            ),
        )

        assert created.id is not None
        assert created.sticker_category_id == sticker.sticker_category_id

    async def test_inactive_category_rejected(self, db: AsyncSession):
        existing = await make_sticker(db)
        await sticker_category_repository.update(db, existing.sticker_category_id, {"is_active": False})

        with pytest.raises(NotFoundError):
            await sticker_service.create_sticker(
                db,
                StickerCreate(
                    sticker_category_id=existing.sticker_category_id, sticker_name="x", sticker_image_url="x.png"
                ),
            )

    async def test_missing_category_rejected(self, db: AsyncSession):
        with pytest.raises(NotFoundError):
            await sticker_service.create_sticker(
                db, StickerCreate(sticker_category_id=424_242, sticker_name="x", sticker_image_url="x.png")
            )
