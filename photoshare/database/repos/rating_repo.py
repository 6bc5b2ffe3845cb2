# photoshare/database/repos/rating_repo.py
from __future__ import annotations

from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from photoshare.database.models import MediaItem as DBMediaItem, Rating as DBRating
from photoshare.domain.entities.media_artifact import Rating as DomainRating, mean_rating
from photoshare.domain.errors import DuplicateRating, NotFound

RATING_UNIQUE = "uq_rating_media_item_user"


def _is_duplicate_rating(e: IntegrityError) -> bool:
    """True only when the one-rating-per-user constraint fired."""
    diag = getattr(e.orig, "diag", None)
    if diag is not None and getattr(diag, "constraint_name", None):
        return diag.constraint_name == RATING_UNIQUE
    # SQLite names the columns, not the constraint
    msg = str(e.orig)
    return RATING_UNIQUE in msg or "UNIQUE constraint failed: rating.media_item_id, rating.user_id" in msg


class SqlAlchemyRatingRepo:
    def __init__(self, db: Session) -> None:
        self.db = db

    def get(self, rating_id: UUID) -> Optional[DBRating]:
        return self.db.get(DBRating, rating_id)

    def get_or_404(self, rating_id: UUID) -> DBRating:
        rating = self.get(rating_id)
        if rating is None:
            raise NotFound("Rating", rating_id)
        return rating

    def find(self, *, media_item_id: UUID, user_id: UUID) -> Optional[DBRating]:
        stmt = (
            select(DBRating)
            .where(DBRating.media_item_id == media_item_id, DBRating.user_id == user_id)
            .limit(1)
        )
        return self.db.execute(stmt).scalars().first()

    def add_rating(self, *, media_item_id: UUID, user_id: UUID, value: int) -> tuple[DBRating, float]:
        """
        Insert the caller's single rating for an item and recompute the item's
        average over all of its ratings. Returns (rating, new_average).
        A second rating from the same user raises DuplicateRating and leaves
        the item untouched.
        """
        item = self.db.get(DBMediaItem, media_item_id)
        if item is None:
            raise NotFound("Photo", media_item_id)

        dom = DomainRating(media_item_id=media_item_id, user_id=user_id, value=value)

        if self.find(media_item_id=media_item_id, user_id=user_id) is not None:
            raise DuplicateRating(media_item_id, user_id)

        orm = DBRating(user_id=dom.user_id, value=dom.value)
        item.ratings.append(orm)
        try:
            self.db.flush()
        except IntegrityError as e:
            # the surrounding unit of work rolls back either way
            if not _is_duplicate_rating(e):
                raise
            # lost a race with a concurrent insert for the same pair
            raise DuplicateRating(media_item_id, user_id) from e

        values = self.db.execute(
            select(DBRating.value).where(DBRating.media_item_id == media_item_id)
        ).scalars().all()
        item.average_rating = mean_rating(list(values))
        self.db.flush()
        return orm, item.average_rating
