from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class ImageStyleConfig(BaseModel):
    name: str = Field(..., min_length=1, pattern=r"^[a-z0-9_]+$")
    width: int | None = Field(default=None, ge=1)
    height: int | None = Field(default=None, ge=1)
    effect: Literal["scale", "scale_and_crop"] = "scale"
