"""사용자 관련 Pydantic 요청 스키마 정의.

User Pydantic request schema definitions.
"""

from pydantic import BaseModel, Field, field_validator

from decostore.models.user import UserRole, UserStatus


class UserCreate(BaseModel):
    """사용자 가입 요청 스키마.

    User registration request schema. The password is plaintext here and is
    bcrypt-hashed by the registration service before it reaches the store.

    Attributes:
        login_id: 로그인 아이디 (Login id, unique)
        password: 비밀번호 (Plain text, will be bcrypt-hashed)
        email: 이메일 (Email address, unique)
        nickname: 닉네임 (Display nickname, unique)
        role: 역할 (Role, default USER)
        status: 상태 (Status, default ACTIVE)
    """

    login_id: str = Field(..., min_length=3, max_length=50)
    password: str = Field(..., min_length=4, max_length=72)
    email: str = Field(..., pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$", max_length=255)
    nickname: str = Field(..., min_length=1, max_length=50)
    role: UserRole = UserRole.USER
    status: UserStatus = UserStatus.ACTIVE

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        # bcrypt는 72바이트까지만 사용 (bcrypt only reads the first 72 bytes)
        if len(value.encode("utf-8")) > 72:
            raise ValueError("password must be at most 72 bytes in UTF-8")
        return value
