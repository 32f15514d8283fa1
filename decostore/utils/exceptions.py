"""데코레이션 스토어 예외 클래스 모듈.

Decoration store exception classes module.
Repositories translate driver-level SQLAlchemy errors into this taxonomy so
callers can react without importing database drivers. "Not found" is never
an exception at the repository level — lookups return None.

Usage:
    from decostore.utils.exceptions import ConstraintViolationError
    try:
        await post_decoration_repository.save(db, decoration)
    except ConstraintViolationError:
        ...
"""


class StoreError(Exception):
    """스토어 예외 베이스 클래스.

    Base class for every error raised by the store and its service helpers.

    Args:
        detail: 오류 메시지 (Error message)
    """

    default_detail: str = "Store error"

    def __init__(self, detail: str | None = None) -> None:
        self.detail: str = detail or self.default_detail
        super().__init__(self.detail)


class ConstraintViolationError(StoreError):
    """제약 조건 위반 — 존재하지 않는 FK 참조 또는 고유 제약 위반.

    Raised when an insert/update references a nonexistent foreign key or
    violates a uniqueness rule.
    """

    default_detail = "Constraint violation"


class DuplicateError(ConstraintViolationError):
    """중복 리소스 — 서비스 계층의 사전 고유성 검사 실패.

    Raised by services when a uniqueness pre-check fails
    (e.g. duplicate login id or email at registration).
    """

    default_detail = "Resource already exists"


class TransientStoreError(StoreError):
    """일시적 저장소 오류 — 연결 끊김, 타임아웃 등.

    Raised for connection or timeout failures from the database. The store
    does not retry; the caller decides.
    """

    default_detail = "Transient store failure"


class NotFoundError(StoreError):
    """리소스 없음 — 서비스 계층에서 반드시 존재해야 하는 레코드가 없을 때.

    Raised only by services when a referenced record must exist.
    Repositories return None instead.
    """

    default_detail = "Resource not found"


class ThrottleExceededError(StoreError):
    """도배 방지 한도 초과 — 유저가 이미지에 붙인 스티커 수가 한도에 도달.

    Raised when a user has already placed `limit` stickers on an image.

    Args:
        count: 현재 장식 수 (Current decoration count)
        limit: 허용 상한 (Configured cap)
    """

    default_detail = "Too many stickers on this image"

    def __init__(self, count: int, limit: int) -> None:
        self.count: int = count
        self.limit: int = limit
        super().__init__(f"{self.default_detail} ({count}/{limit})")
