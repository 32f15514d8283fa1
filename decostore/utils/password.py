"""비밀번호 해싱 및 검증 유틸리티 모듈.

Password hashing and verification utility module.
Registration stores only the bcrypt hash; the plaintext never reaches the
users table.
"""

import bcrypt

from decostore.config import settings

# bcrypt는 72바이트 이후를 무시함 — bcrypt only uses the first 72 bytes
_BCRYPT_MAX_BYTES: int = 72


def hash_password(password: str, rounds: int | None = None) -> str:
    """평문 비밀번호를 솔트가 포함된 bcrypt 해시로 변환합니다.

    Hash a plain text password with a fresh random salt.

    Args:
        password: 평문 비밀번호 (Plain text password)
        rounds: bcrypt cost, None이면 설정값 사용 (Cost factor; defaults to settings)

    Returns:
        str: bcrypt 해시 문자열 (Bcrypt hash string, ~60 chars)

    Raises:
        ValueError: 비어 있거나 72바이트를 넘는 비밀번호 (Empty or longer than 72 bytes)
    """
    raw: bytes = password.encode("utf-8")
    if not raw:
        raise ValueError("Password must not be empty")
    if len(raw) > _BCRYPT_MAX_BYTES:
        raise ValueError(f"Password must be at most {_BCRYPT_MAX_BYTES} bytes")

    salt: bytes = bcrypt.gensalt(rounds=rounds or settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(raw, salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """평문 비밀번호와 bcrypt 해시를 비교 검증합니다.

    Verify a plain text password against a stored bcrypt hash.
    A malformed stored hash counts as a mismatch.

    Returns:
        bool: 일치하면 True (True if the password matches)
    """
    raw: bytes = plain_password.encode("utf-8")
    if len(raw) > _BCRYPT_MAX_BYTES:
        return False
    try:
        return bcrypt.checkpw(raw, hashed_password.encode("utf-8"))
    except ValueError:
        return False
