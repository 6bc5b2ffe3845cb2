# photoshare/domain/entities/trending.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from photoshare.domain.enums.media_kind import MediaKind


@dataclass(frozen=True)
class AuthorRef:
    """Minimal author projection carried by ranked items."""
    id: UUID
    username: str


@dataclass
class TrendingRow:
    """
    One media item as produced by the ranked aggregation query: the item's
    public fields, its reference lists, its engagement score and its author.
    """
    id: UUID
    title: str
    image_url: str
    media_type: MediaKind
    author: AuthorRef
    engagement_score: int = 0
    average_rating: float = 0.0
    caption: Optional[str] = None
    location: Optional[str] = None
    date_created: Optional[datetime] = None
    comment_ids: List[UUID] = field(default_factory=list)
    rating_ids: List[UUID] = field(default_factory=list)
