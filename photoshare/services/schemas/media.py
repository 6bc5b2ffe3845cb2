# photoshare/services/schemas/media.py
from __future__ import annotations

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import Field, field_validator

from photoshare.common.strings.splitters import json_or_csv_to_list
from photoshare.domain.enums.media_kind import MediaKind
from photoshare.services.schemas.base import AuthorRead, CamelModel
from photoshare.services.schemas.comments import CommentRead


class PhotoCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=100)
    caption: Optional[str] = Field(None, max_length=500)
    location: Optional[str] = Field(None, max_length=100)
    # JSON list or "Ann, Bo"
    people: List[str] = Field(default_factory=list)

    # produced by the upload/storage collaborator
    image_url: str = Field(..., min_length=1)
    storage_id: str = Field(..., min_length=1)
    media_type: MediaKind = MediaKind.image

    @field_validator("people", mode="before")
    @classmethod
    def _split_people(cls, v):
        return json_or_csv_to_list(v)

    @field_validator("title")
    @classmethod
    def _strip_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("title must not be blank")
        return v


class PhotoRead(CamelModel):
    id: UUID = Field(alias="_id")
    user: AuthorRead
    title: str
    caption: Optional[str] = None
    location: Optional[str] = None
    people: List[str] = Field(default_factory=list)
    media_type: MediaKind
    image_url: str
    comments: List[CommentRead] = Field(default_factory=list)
    ratings: List[UUID] = Field(default_factory=list)
    average_rating: float = 0.0
    engagement_score: int = 0
    created_at: Optional[datetime] = None


class MessageRead(CamelModel):
    message: str
