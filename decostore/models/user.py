"""사용자 관련 SQLAlchemy ORM 모델 정의.

User SQLAlchemy ORM model definitions.

Tables:
    - users: 사용자 계정 (User accounts; login id, email and nickname are unique)
"""

import enum
from datetime import datetime, timezone

from sqlalchemy import DateTime, Enum, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from decostore.database import Base


class UserRole(str, enum.Enum):
    """사용자 역할 (User role)."""

    USER = "USER"
    ADMIN = "ADMIN"


class UserStatus(str, enum.Enum):
    """계정 상태 (Account status)."""

    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    SUSPENDED = "SUSPENDED"
    DELETED = "DELETED"


class User(Base):
    """사용자 모델 — 게시글 작성자이자 스티커를 붙이는 주체.

    User model — Authors posts and places stickers on post images.
    Identity fields are fixed at registration; only role and status change
    afterwards.

    Attributes:
        id: 고유 식별자 (Surrogate integer id, never reused)
        login_id: 로그인 아이디 (Login id, globally unique)
        password_hash: bcrypt 해시된 비밀번호 (bcrypt-hashed password)
        email: 이메일 (Email address, unique)
        nickname: 닉네임 (Display nickname, unique)
        role: 역할 (USER / ADMIN)
        status: 계정 상태 (ACTIVE / INACTIVE / SUSPENDED / DELETED)
        created_at: 생성 일시 UTC (Creation timestamp)
        updated_at: 수정 일시 UTC (Last update timestamp)
    """

    __tablename__ = "users"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # 로그인 아이디 — Login id (전역 고유, globally unique)
    login_id: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    # 비밀번호 해시 — bcrypt hashed password (평문 저장 금지, never store plaintext)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    nickname: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    role: Mapped[UserRole] = mapped_column(
        Enum(UserRole, native_enum=False, length=20), default=UserRole.USER, nullable=False
    )
    status: Mapped[UserStatus] = mapped_column(
        Enum(UserStatus, native_enum=False, length=20), default=UserStatus.ACTIVE, nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))
