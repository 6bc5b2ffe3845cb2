from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field

from photoshare.domain.entities.media_artifact import RATING_MAX, RATING_MIN
from photoshare.services.schemas.base import CamelModel


class RatingCreate(CamelModel):
    rating: int = Field(..., ge=RATING_MIN, le=RATING_MAX, strict=True)


class RatingRead(CamelModel):
    id: UUID = Field(alias="_id")
    media_item_id: UUID = Field(alias="photo")
    user_id: UUID = Field(alias="user")
    rating: int
    created_at: Optional[datetime] = None


class RatingCreatedRead(CamelModel):
    rating: RatingRead
    new_average: float
