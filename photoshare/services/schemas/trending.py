# photoshare/services/schemas/trending.py
from __future__ import annotations

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import Field

from photoshare.domain.enums.media_kind import MediaKind
from photoshare.services.schemas.base import AuthorRead, CamelModel


class TrendingPhotoRead(CamelModel):
    id: UUID = Field(alias="_id")
    title: str
    caption: Optional[str] = None
    image_url: str
    location: Optional[str] = None
    media_type: MediaKind = MediaKind.image
    created_at: Optional[datetime] = None
    comments: List[UUID] = Field(default_factory=list)
    ratings: List[UUID] = Field(default_factory=list)
    average_rating: float = 0.0
    engagement_score: int = 0
    user: AuthorRead


class PaginationRead(CamelModel):
    page: int
    limit: int
    total: int
    pages: int


class TrendingPageRead(CamelModel):
    photos: List[TrendingPhotoRead]
    pagination: PaginationRead
