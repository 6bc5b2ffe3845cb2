# photoshare/services/mappers/trending.py
from __future__ import annotations

from photoshare.domain.entities.trending import TrendingRow
from photoshare.services.schemas.base import AuthorRead
from photoshare.services.schemas.trending import TrendingPhotoRead


def to_trending_read(row: TrendingRow) -> TrendingPhotoRead:
    return TrendingPhotoRead(
        id=row.id,
        title=row.title,
        caption=row.caption,
        image_url=row.image_url,
        location=row.location,
        media_type=row.media_type,
        created_at=row.date_created,
        comments=list(row.comment_ids),
        ratings=list(row.rating_ids),
        average_rating=row.average_rating,
        engagement_score=row.engagement_score,
        user=AuthorRead(id=row.author.id, username=row.author.username),
    )
