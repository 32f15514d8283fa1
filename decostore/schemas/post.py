"""게시글 및 이미지 관련 Pydantic 요청 스키마 정의.

Post and post image Pydantic request schema definitions.
"""

from pydantic import BaseModel, Field


class PostCreate(BaseModel):
    """게시글 생성 요청 스키마."""

    user_id: int
    category_id: int
    title: str = Field(..., min_length=1, max_length=200)
    content: str | None = None


class PostImageCreate(BaseModel):
    """게시글 이미지 첨부 요청 스키마.

    Post image attach request schema.

    Attributes:
        post_id: 게시글 ID (Parent post id)
        image_url: 이미지 URL (Stored image location)
        sort_order: 정렬 순서 (Display order, 0 or more)
        is_representative: 대표 이미지 여부 (Marks the post thumbnail)
    """

    post_id: int
    image_url: str = Field(..., min_length=1, max_length=500)
    sort_order: int = Field(0, ge=0)
    is_representative: bool = False
