"""데이터베이스 엔진 및 세션 설정 모듈.

Database engine and session configuration module.
Sets up the async SQLAlchemy engine, session factory, ORM base class and the
unit-of-work helper that owns commit/rollback for store callers.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncSession, AsyncEngine, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase

from decostore.config import settings


def _enable_sqlite_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
    """SQLite 연결마다 외래 키 제약을 활성화합니다.

    SQLite ships with foreign keys off; turn them on for every new connection
    so ON DELETE CASCADE and FK checks behave like PostgreSQL.
    """
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(url: str, echo: bool = False) -> AsyncEngine:
    """URL에 맞는 비동기 엔진을 생성합니다.

    Create an async engine configured for the URL's backend.

    Args:
        url: 비동기 SQLAlchemy URL (Async SQLAlchemy URL)
        echo: SQL 로그 출력 여부 (Echo SQL statements)

    Returns:
        AsyncEngine: 생성된 엔진 (Configured async engine)
    """
    backend: str = make_url(url).get_backend_name()
    kwargs: dict[str, Any] = {"echo": echo, "pool_pre_ping": True}

    if backend == "postgresql":
        kwargs["pool_size"] = settings.DB_POOL_SIZE
        kwargs["max_overflow"] = settings.DB_MAX_OVERFLOW
        # 트랜잭션 모드 풀러에서 prepared statement 캐시 비활성화
        # Disable prepared statement caches for transaction-mode poolers
        kwargs["connect_args"] = {"statement_cache_size": 0}

    eng: AsyncEngine = create_async_engine(url, **kwargs)

    if backend == "sqlite":
        event.listen(eng.sync_engine, "connect", _enable_sqlite_foreign_keys)

    return eng


# 비동기 데이터베이스 엔진 — Async database engine
engine: AsyncEngine = build_engine(settings.DATABASE_URL, echo=settings.DEBUG)

# 비동기 세션 팩토리 — Async session factory
# expire_on_commit=False: 커밋 후에도 객체 속성 접근 가능 (Allows attribute access after commit without refresh)
async_session: async_sessionmaker[AsyncSession] = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """SQLAlchemy 선언적 베이스 클래스.

    Declarative base class for all ORM models.
    """

    pass


@asynccontextmanager
async def unit_of_work(
    factory: async_sessionmaker[AsyncSession] | None = None,
) -> AsyncGenerator[AsyncSession, None]:
    """하나의 트랜잭션 단위로 세션을 제공합니다.

    Provide a session bound to one atomic unit of work. Commits when the
    block exits normally, rolls back and re-raises on any exception.

    Args:
        factory: 세션 팩토리, None이면 기본 팩토리 사용
                 (Session factory; defaults to the module-level one)

    Yields:
        AsyncSession: 트랜잭션 세션 (Session inside the transaction)
    """
    session_factory = factory or async_session
    async with session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
