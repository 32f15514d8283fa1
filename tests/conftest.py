"""테스트 인프라 — 임시 DB, 세션, 레코드 팩토리 픽스처.

Test infrastructure — Temporary database, session and record factory fixtures.
Uses TEST_DATABASE_URL when set (e.g. postgresql+asyncpg://...), otherwise a
throwaway SQLite file via aiosqlite. Schema is applied once per session,
data is deleted after each test.
"""

import os
import uuid
from collections.abc import AsyncGenerator

# 설정 싱글턴이 만들어지기 전에 테스트용 값 지정
# Test overrides must be in place before decostore.config is imported
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from sqlalchemy import delete  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
)

from decostore.database import Base, build_engine  # noqa: E402
from decostore.models import *  # noqa: F401,F403,E402 — register all models with metadata
from decostore.models import (  # noqa: E402
    Category,
    Post,
    PostDecoration,
    PostImage,
    Sticker,
    StickerCategory,
    User,
    UserRole,
    UserStatus,
)
from decostore.utils.password import hash_password  # noqa: E402

_schema_created = False


def _next() -> str:
    """고유 접미사 생성 — Unique suffix for unique columns."""
    return uuid.uuid4().hex[:10]


# ---------------------------------------------------------------------------
# Session-scoped: DB URL
# ---------------------------------------------------------------------------
@pytest.fixture(scope="session")
def database_url(tmp_path_factory: pytest.TempPathFactory) -> str:
    """테스트 DB URL — 환경 변수 또는 임시 SQLite 파일."""
    url = os.environ.get("TEST_DATABASE_URL")
    if url:
        return url
    return f"sqlite+aiosqlite:///{tmp_path_factory.mktemp('db') / 'decostore_test.db'}"


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine(database_url: str) -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 첫 호출 시 스키마를 생성합니다."""
    global _schema_created
    eng = build_engine(database_url)

    if not _schema_created:
        async with eng.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
        _schema_created = True

    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db(session_factory: async_sessionmaker[AsyncSession]) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    async with session_factory() as session:
        yield session
        # 커밋되지 않은 변경 처리 (실패한 flush 이후에는 롤백)
        try:
            await session.commit()
        except Exception:
            await session.rollback()

    # 테스트 후 모든 데이터 정리 — 자식 테이블부터 삭제
    async with session_factory() as cleanup:
        for table in reversed(Base.metadata.sorted_tables):
            await cleanup.execute(delete(table))
        await cleanup.commit()


# ---------------------------------------------------------------------------
# 헬퍼: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
async def make_user(db: AsyncSession, **overrides) -> User:
    """테스트 사용자를 생성합니다."""
    n = _next()
    data = {
        "login_id": f"user_{n}",
        "password_hash": hash_password("1111"),
        "email": f"moana_{n}@test.com",
        "nickname": f"모아나_{n}",
        "role": UserRole.USER,
        "status": UserStatus.ACTIVE,
    }
    data.update(overrides)
    user = User(**data)
    db.add(user)
    await db.flush()
    await db.refresh(user)
    return user


async def make_category(db: AsyncSession, **overrides) -> Category:
    data = {"category_name": f"테스트카테고리_{_next()}", "is_active": True}
    data.update(overrides)
    category = Category(**data)
    db.add(category)
    await db.flush()
    await db.refresh(category)
    return category


async def make_post(db: AsyncSession, user: User, category: Category, **overrides) -> Post:
    data = {"title": "테스트 포스트", "user_id": user.id, "category_id": category.id}
    data.update(overrides)
    post = Post(**data)
    db.add(post)
    await db.flush()
    await db.refresh(post)
    return post


async def make_image(db: AsyncSession, post: Post, **overrides) -> PostImage:
    data = {"post_id": post.id, "image_url": "background.jpg", "sort_order": 1, "is_representative": False}
    data.update(overrides)
    image = PostImage(**data)
    db.add(image)
    await db.flush()
    await db.refresh(image)
    return image


async def make_sticker(db: AsyncSession, name: str = "기본스티커") -> Sticker:
    """스티커 카테고리와 스티커를 함께 생성합니다."""
    group = StickerCategory(name=f"테스트카테_{_next()}", is_active=True)
    db.add(group)
    await db.flush()
    sticker = Sticker(sticker_category_id=group.id, sticker_name=name, sticker_image_url="test.png")
    db.add(sticker)
    await db.flush()
    await db.refresh(sticker)
    return sticker


async def make_decoration(
    db: AsyncSession,
    image: PostImage,
    user: User,
    sticker: Sticker,
    **overrides,
) -> PostDecoration:
    data = {
        "image_id": image.id,
        "user_id": user.id,
        "sticker_id": sticker.id,
        "pos_x": 150.5,
        "pos_y": 200.0,
        "scale": 1.2,
        "rotation": 0.0,
        "z_index": 10,
    }
    data.update(overrides)
    decoration = PostDecoration(**data)
    db.add(decoration)
    await db.flush()
    await db.refresh(decoration)
    return decoration


@pytest_asyncio.fixture
async def user(db: AsyncSession) -> User:
    return await make_user(db)


@pytest_asyncio.fixture
async def category(db: AsyncSession) -> Category:
    return await make_category(db)


@pytest_asyncio.fixture
async def post(db: AsyncSession, user: User, category: Category) -> Post:
    return await make_post(db, user, category)


@pytest_asyncio.fixture
async def image(db: AsyncSession, post: Post) -> PostImage:
    return await make_image(db, post, is_representative=True)


@pytest_asyncio.fixture
async def sticker(db: AsyncSession) -> Sticker:
    return await make_sticker(db)
