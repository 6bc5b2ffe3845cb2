# photoshare/services/mappers/media_item.py
from __future__ import annotations

from typing import Iterable

from photoshare.database.models import (
    Comment as DBComment,
    MediaItem as DBMediaItem,
    Rating as DBRating,
    User as DBUser,
)
from photoshare.domain.entities.engagement import engagement_score
from photoshare.services.schemas import (
    AuthorRead,
    CommentRead,
    PhotoRead,
    RatingRead,
    UserRead,
)


def to_author(user: DBUser) -> AuthorRead:
    return AuthorRead(id=user.id, username=user.username)


def to_comment_read(c: DBComment) -> CommentRead:
    return CommentRead(
        id=c.id,
        media_item_id=c.media_item_id,
        user=to_author(c.user),
        text=c.text,
        created_at=c.date_created,
    )


def to_rating_read(r: DBRating) -> RatingRead:
    return RatingRead(
        id=r.id,
        media_item_id=r.media_item_id,
        user_id=r.user_id,
        rating=r.value,
        created_at=r.date_created,
    )


def to_photo_read(item: DBMediaItem, comments: Iterable[DBComment] | None = None) -> PhotoRead:
    """
    Detail view. `comments` lets the caller pass them pre-sorted (newest first);
    defaults to the relationship order. The engagement score is recomputed
    from the loaded collections.
    """
    comment_rows = list(comments) if comments is not None else list(item.comments)
    return PhotoRead(
        id=item.id,
        user=to_author(item.user),
        title=item.title,
        caption=item.caption,
        location=item.location,
        people=list(item.people or []),
        media_type=item.media_type,
        image_url=item.image_url,
        comments=[to_comment_read(c) for c in comment_rows],
        ratings=[r.id for r in item.ratings],
        average_rating=float(item.average_rating or 0.0),
        engagement_score=engagement_score(len(item.comments), len(item.ratings)),
        created_at=item.date_created,
    )


def to_user_read(u: DBUser) -> UserRead:
    return UserRead(
        id=u.id,
        username=u.username,
        email=u.email,
        role=u.role,
        created_at=u.date_created,
    )
