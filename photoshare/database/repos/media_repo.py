# photoshare/database/repos/media_repo.py
from __future__ import annotations

from typing import List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from photoshare.database.models import MediaItem as DBMediaItem, Comment as DBComment
from photoshare.domain.enums.media_kind import MediaKind
from photoshare.domain.errors import NotAuthorized, NotFound
from photoshare.common.logging import get_logger

logger = get_logger(__name__)


class SqlAlchemyMediaRepo:
    """
    Media item persistence. Caller controls commit (see `transactional`).
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    def get(self, media_item_id: UUID) -> Optional[DBMediaItem]:
        return self.db.get(DBMediaItem, media_item_id)

    def get_or_404(self, media_item_id: UUID) -> DBMediaItem:
        item = self.get(media_item_id)
        if item is None:
            raise NotFound("Photo", media_item_id)
        return item

    def create_media_item(
        self,
        *,
        user_id: UUID,
        title: str,
        image_url: str,
        storage_id: str,
        media_type: MediaKind = MediaKind.image,
        caption: str | None = None,
        location: str | None = None,
        people: List[str] | None = None,
    ) -> DBMediaItem:
        orm = DBMediaItem(
            user_id=user_id,
            title=title.strip(),
            caption=caption.strip() if caption else None,
            location=location.strip() if location else None,
            people=list(people or []),
            media_type=media_type,
            image_url=image_url,
            storage_id=storage_id,
            average_rating=0.0,
        )
        self.db.add(orm)
        self.db.flush()
        return orm

    def list_comments(self, media_item_id: UUID) -> List[DBComment]:
        """Comments on an item, newest first."""
        stmt = (
            select(DBComment)
            .where(DBComment.media_item_id == media_item_id)
            .order_by(DBComment.date_created.desc(), DBComment.id.desc())
        )
        return list(self.db.execute(stmt).scalars().all())

    def delete_media_item(self, media_item_id: UUID, *, requested_by: UUID) -> DBMediaItem:
        """
        Owner-only delete. The ORM cascade removes the item's comments and
        ratings in the same flush.
        """
        item = self.get_or_404(media_item_id)
        if item.user_id != requested_by:
            raise NotAuthorized("Not authorized to delete this photo")
        n_comments, n_ratings = len(item.comments), len(item.ratings)
        self.db.delete(item)
        self.db.flush()
        logger.info(
            "Deleted media item %s with %d comments and %d ratings", media_item_id, n_comments, n_ratings
        )
        return item
