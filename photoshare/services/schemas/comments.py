from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field, field_validator

from photoshare.domain.entities.media_artifact import COMMENT_MAX_LEN
from photoshare.services.schemas.base import AuthorRead, CamelModel


class CommentCreate(CamelModel):
    text: str = Field(..., min_length=1, max_length=COMMENT_MAX_LEN)

    @field_validator("text", mode="before")
    @classmethod
    def _strip_text(cls, v):
        # length bounds apply to the trimmed text
        return v.strip() if isinstance(v, str) else v


class CommentRead(CamelModel):
    id: UUID = Field(alias="_id")
    media_item_id: UUID = Field(alias="photo")
    user: AuthorRead
    text: str
    created_at: Optional[datetime] = None
