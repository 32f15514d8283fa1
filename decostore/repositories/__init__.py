"""레포지토리 패키지 — 데이터베이스 쿼리 계층.

Repository package — Database query layer.
One repository per record kind; each extends BaseRepository for the shared
CRUD set and adds record-specific queries. Module-level singletons are the
intended entry points.
"""

from decostore.repositories.category_repository import category_repository
from decostore.repositories.post_decoration_repository import post_decoration_repository
from decostore.repositories.post_image_repository import post_image_repository
from decostore.repositories.post_repository import post_repository
from decostore.repositories.sticker_repository import sticker_category_repository, sticker_repository
from decostore.repositories.user_repository import user_repository

__all__ = [
    "category_repository",
    "post_decoration_repository",
    "post_image_repository",
    "post_repository",
    "sticker_category_repository",
    "sticker_repository",
    "user_repository",
]
