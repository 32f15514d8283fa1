"""스티커 및 장식 관련 SQLAlchemy ORM 모델 정의.

Sticker and decoration SQLAlchemy ORM model definitions.

Tables:
    - sticker_categories: 스티커 카테고리 (Named sticker groupings)
    - stickers: 스티커 (Reusable decorative assets)
    - post_decorations: 게시글 장식 (Sticker placements on a post image)
"""

from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Float, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from decostore.database import Base


class StickerCategory(Base):
    """스티커 카테고리 모델.

    Sticker category model — Named grouping for stickers with an active flag.
    """

    __tablename__ = "sticker_categories"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)

    stickers = relationship("Sticker", back_populates="sticker_category")


class Sticker(Base):
    """스티커 모델 — 이름과 이미지 URL을 가진 재사용 가능한 장식 에셋.

    Sticker model — Reusable decorative asset belonging to exactly one
    sticker category.

    Attributes:
        id: 고유 식별자 (Surrogate integer id)
        sticker_category_id: 스티커 카테고리 FK (Owning sticker category)
        sticker_name: 스티커 이름 (Display name)
        sticker_image_url: 스티커 이미지 URL (Asset location)
    """

    __tablename__ = "stickers"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    sticker_category_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("sticker_categories.id"), nullable=False, index=True
    )
    sticker_name: Mapped[str] = mapped_column(String(100), nullable=False)
    sticker_image_url: Mapped[str] = mapped_column(String(500), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    sticker_category = relationship("StickerCategory", back_populates="stickers")


class PostDecoration(Base):
    """게시글 장식 모델 — 한 유저가 한 이미지에 붙인 스티커 하나.

    Post decoration model — Placement of one sticker onto one post image by
    one user, with continuous position, scale and rotation and an integer
    stacking order. No uniqueness on (user, image): a user may stack several
    stickers on the same image, capped externally via the throttle count.

    Attributes:
        id: 고유 식별자 (Surrogate integer id, never reused)
        image_id: 대상 이미지 FK (Decorated post image, CASCADE)
        user_id: 장식한 사용자 FK (User who placed the sticker, CASCADE)
        sticker_id: 사용된 스티커 FK (Sticker placed)
        pos_x: X 좌표 (Horizontal position)
        pos_y: Y 좌표 (Vertical position)
        scale: 배율 (Scale factor, 1.0 = original size)
        rotation: 회전 각도 (Rotation in degrees)
        z_index: 쌓임 순서 (Stacking order, higher draws on top)

    Relationships:
        post_image: 대상 이미지 (Decorated image)
        user: 장식한 사용자 (Placing user)
        sticker: 사용된 스티커 (Sticker asset)

    Indexes:
        ix_post_decorations_user_image: 도배 방지 카운트용 (Throttle count lookup)
    """

    __tablename__ = "post_decorations"
    __table_args__ = (
        Index("ix_post_decorations_user_image", "user_id", "image_id"),
        {"sqlite_autoincrement": True},
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    image_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("post_images.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    sticker_id: Mapped[int] = mapped_column(Integer, ForeignKey("stickers.id"), nullable=False)
    pos_x: Mapped[float] = mapped_column(Float, nullable=False)
    pos_y: Mapped[float] = mapped_column(Float, nullable=False)
    scale: Mapped[float] = mapped_column(Float, default=1.0, nullable=False)
    rotation: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)
    z_index: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    # 관계 — Relationships
    post_image = relationship("PostImage", back_populates="decorations")
    user = relationship("User")
    sticker = relationship("Sticker")
