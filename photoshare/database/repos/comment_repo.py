# photoshare/database/repos/comment_repo.py
from __future__ import annotations

from typing import Optional
from uuid import UUID

from sqlalchemy.orm import Session

from photoshare.database.models import Comment as DBComment, MediaItem as DBMediaItem
from photoshare.domain.entities.media_artifact import Comment as DomainComment
from photoshare.domain.errors import NotAuthorized, NotFound


class SqlAlchemyCommentRepo:
    def __init__(self, db: Session) -> None:
        self.db = db

    def get(self, comment_id: UUID) -> Optional[DBComment]:
        return self.db.get(DBComment, comment_id)

    def get_or_404(self, comment_id: UUID) -> DBComment:
        comment = self.get(comment_id)
        if comment is None:
            raise NotFound("Comment", comment_id)
        return comment

    def add_comment(self, *, media_item_id: UUID, user_id: UUID, text: str) -> DBComment:
        item = self.db.get(DBMediaItem, media_item_id)
        if item is None:
            raise NotFound("Photo", media_item_id)
        # validates and trims
        dom = DomainComment(media_item_id=media_item_id, user_id=user_id, text=text)
        orm = DBComment(user_id=dom.user_id, text=dom.text)
        item.comments.append(orm)
        self.db.flush()
        return orm

    def delete_comment(self, comment_id: UUID, *, requested_by: UUID) -> None:
        """Allowed for the comment's author or the owner of the media item."""
        comment = self.get_or_404(comment_id)
        item = self.db.get(DBMediaItem, comment.media_item_id)
        if item is None:
            raise NotFound("Photo", comment.media_item_id)
        if requested_by not in (comment.user_id, item.user_id):
            raise NotAuthorized("Not authorized to delete this comment")
        item.comments.remove(comment)
        self.db.flush()
