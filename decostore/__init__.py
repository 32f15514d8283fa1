"""데코레이션 스토어 — 게시글 이미지 스티커 장식 영속성 계층.

Decoration store — Persistence layer for users, categories, posts, post
images, stickers and the sticker placements ("decorations") users overlay
on post images.
"""

__version__ = "1.0.0"
