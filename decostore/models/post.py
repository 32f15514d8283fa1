"""게시글 관련 SQLAlchemy ORM 모델 정의.

Post-related SQLAlchemy ORM model definitions.

Tables:
    - categories: 게시판 카테고리 (Post categories with an active flag)
    - posts: 게시글 (Posts owned by one user, filed under one category)
    - post_images: 게시글 이미지 (Images attached to a post, ordered, one representative)
"""

from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from decostore.database import Base


class Category(Base):
    """카테고리 모델 — 게시글을 묶는 이름 있는 그룹.

    Category model — Named grouping for posts. Posts reference it by id.

    Attributes:
        id: 고유 식별자 (Surrogate integer id)
        category_name: 카테고리 이름 (Unique display name)
        is_active: 활성 여부 (Active flag)
    """

    __tablename__ = "categories"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    category_name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))


class Post(Base):
    """게시글 모델.

    Post model — Authored content owned by exactly one user and filed under
    exactly one category. Deleting a post deletes its images and, through
    them, every decoration placed on those images.

    Attributes:
        id: 고유 식별자 (Surrogate integer id)
        user_id: 작성자 FK (Author foreign key)
        category_id: 카테고리 FK (Category foreign key)
        title: 제목 (Post title)
        content: 본문 (Optional body text)

    Relationships:
        user: 작성자 (Author)
        category: 카테고리 (Category)
        images: 첨부 이미지 목록 (Attached images, cascade delete)
    """

    __tablename__ = "posts"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # 작성자 FK — 게시글이 있는 사용자는 삭제 불가 (RESTRICT)
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    category_id: Mapped[int] = mapped_column(Integer, ForeignKey("categories.id"), nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    content: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    # 관계 — Relationships
    user = relationship("User")
    category = relationship("Category")
    images = relationship(
        "PostImage",
        back_populates="post",
        cascade="all, delete-orphan",
        order_by="PostImage.sort_order",
    )


class PostImage(Base):
    """게시글 이미지 모델.

    Post image model — One image attached to a post, with a sort order for
    multi-image posts and a representative flag marking the thumbnail.

    Attributes:
        id: 고유 식별자 (Surrogate integer id)
        post_id: 소속 게시글 FK (Parent post, CASCADE)
        image_url: 이미지 URL (Stored image location)
        sort_order: 정렬 순서 (Display order within the post)
        is_representative: 대표 이미지 여부 (Primary thumbnail flag)

    Relationships:
        post: 소속 게시글 (Parent post)
        decorations: 이 이미지에 붙은 장식 (Decorations on this image, cascade delete)
    """

    __tablename__ = "post_images"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    post_id: Mapped[int] = mapped_column(Integer, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False, index=True)
    image_url: Mapped[str] = mapped_column(String(500), nullable=False)
    sort_order: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    is_representative: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    # 관계 — Relationships
    post = relationship("Post", back_populates="images")
    decorations = relationship("PostDecoration", back_populates="post_image", cascade="all, delete-orphan")
