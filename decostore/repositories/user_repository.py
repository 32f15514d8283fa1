"""사용자 레포지토리 — 사용자 CRUD 및 로그인 아이디/이메일/닉네임 조회.

User Repository — CRUD and lookup-by-login-id/email/nickname queries for users.
"""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from decostore.models.user import User
from decostore.repositories.base import BaseRepository, translate_db_errors


class UserRepository(BaseRepository[User]):
    """users 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the users table.
    """

    def __init__(self) -> None:
        super().__init__(User)

    async def get_by_login_id(
        self,
        db: AsyncSession,
        login_id: str,
    ) -> User | None:
        """로그인 아이디로 사용자를 조회합니다.

        Retrieve a user by login id.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            login_id: 로그인 아이디 (Login id)

        Returns:
            User | None: 사용자 또는 None (User or None)
        """
        query: Select = select(User).where(User.login_id == login_id)
        with translate_db_errors():
            result = await db.execute(query)
        return result.scalar_one_or_none()

    async def get_by_email(
        self,
        db: AsyncSession,
        email: str,
    ) -> User | None:
        """이메일로 사용자를 조회합니다 (Retrieve a user by email)."""
        query: Select = select(User).where(User.email == email)
        with translate_db_errors():
            result = await db.execute(query)
        return result.scalar_one_or_none()

    async def get_by_nickname(
        self,
        db: AsyncSession,
        nickname: str,
    ) -> User | None:
        query: Select = select(User).where(User.nickname == nickname)
        with translate_db_errors():
            result = await db.execute(query)
        return result.scalar_one_or_none()


# 싱글턴 인스턴스 — Singleton instance
user_repository: UserRepository = UserRepository()
