"""사용자 서비스 — 가입 및 자격 증명 확인.

User Service — Registration and credential checks.
Only the bcrypt hash of a password is ever persisted.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from decostore.models.user import User, UserStatus
from decostore.repositories.user_repository import user_repository
from decostore.schemas.user import UserCreate
from decostore.utils.exceptions import DuplicateError
from decostore.utils.logging import logger
from decostore.utils.password import hash_password, verify_password


class UserService:
    """사용자 관련 로직을 처리하는 서비스 (Service handling user registration)."""

    async def register_user(
        self,
        db: AsyncSession,
        data: UserCreate,
    ) -> User:
        """새 사용자를 가입시킵니다.

        Register a new user, storing a salted bcrypt hash of the password.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 가입 요청 데이터 (Registration data)

        Returns:
            User: 생성된 사용자 (Created user)

        Raises:
            DuplicateError: 로그인 아이디, 이메일 또는 닉네임이 이미 존재할 때
                            (Login id, email or nickname already taken)
        """
        if await user_repository.get_by_login_id(db, data.login_id) is not None:
            raise DuplicateError("Login id already exists")
        if await user_repository.get_by_email(db, data.email) is not None:
            raise DuplicateError("Email already exists")
        if await user_repository.get_by_nickname(db, data.nickname) is not None:
            raise DuplicateError("Nickname already exists")

        user: User = await user_repository.create(
            db,
            {
                "login_id": data.login_id,
                "password_hash": hash_password(data.password),
                "email": data.email,
                "nickname": data.nickname,
                "role": data.role,
                "status": data.status,
            },
        )
        logger.info(f"User registered: id={user.id} login_id={user.login_id}")
        return user

    async def authenticate(
        self,
        db: AsyncSession,
        login_id: str,
        password: str,
    ) -> User | None:
        """로그인 아이디와 비밀번호를 확인합니다.

        Return the active user whose credentials match, otherwise None.
        """
        user: User | None = await user_repository.get_by_login_id(db, login_id)
        if user is None or user.status != UserStatus.ACTIVE:
            return None
        if not verify_password(password, user.password_hash):
            return None
        return user


# 싱글턴 인스턴스 — Singleton instance
user_service: UserService = UserService()
