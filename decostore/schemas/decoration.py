"""스티커 및 장식 관련 Pydantic 요청 스키마 정의.

Sticker and decoration Pydantic request schema definitions.
Rotation is normalised into [0, 360) and scale must be positive.
"""

import math

from pydantic import BaseModel, Field, field_validator


def _normalize_rotation(value: float) -> float:
    if not math.isfinite(value):
        raise ValueError("rotation must be a finite number")
    result = value % 360.0
    # -1e-20 % 360.0 rounds up to 360.0
    return 0.0 if result >= 360.0 else result


class StickerCreate(BaseModel):
    """스티커 생성 요청 스키마."""

    sticker_category_id: int
    sticker_name: str = Field(..., min_length=1, max_length=100)
    sticker_image_url: str = Field(..., min_length=1, max_length=500)


class DecorationTransform(BaseModel):
    """장식 위치/크기/회전 변경 요청 스키마.

    Decoration transform request schema — the four fields rewritten by
    `update_single_sticker`.

    Attributes:
        pos_x: X 좌표 (Horizontal position)
        pos_y: Y 좌표 (Vertical position)
        scale: 배율, 0보다 커야 함 (Scale factor, must be > 0)
        rotation: 회전 각도, [0, 360)으로 정규화 (Degrees, normalised into [0, 360))
    """

    pos_x: float = Field(..., allow_inf_nan=False)
    pos_y: float = Field(..., allow_inf_nan=False)
    scale: float = Field(1.0, gt=0, allow_inf_nan=False)
    rotation: float = 0.0

    @field_validator("rotation")
    @classmethod
    def normalize_rotation(cls, value: float) -> float:
        return _normalize_rotation(value)


class DecorationCreate(DecorationTransform):
    """장식 생성 요청 스키마.

    Decoration creation request schema. When `z_index` is omitted the
    sticker is stacked on top of the image's current decorations.

    Attributes:
        image_id: 대상 이미지 ID (Post image id)
        sticker_id: 스티커 ID (Sticker id)
        z_index: 쌓임 순서, None이면 맨 위 (Stacking order; None = on top)
    """

    image_id: int
    sticker_id: int
    z_index: int | None = None
