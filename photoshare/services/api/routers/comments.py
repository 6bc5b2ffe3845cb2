from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from photoshare.common.settings import get_settings
from photoshare.database.core.transaction import transactional
from photoshare.database.models import User as DBUser
from photoshare.database.repos.comment_repo import SqlAlchemyCommentRepo
from photoshare.domain.errors import PhotoshareError
from photoshare.services.api.auth import get_current_user
from photoshare.services.api.deps import get_db, get_trending_service
from photoshare.services.api.errors import to_http
from photoshare.services.mappers.media_item import to_comment_read
from photoshare.services.schemas import CommentRead, MessageRead
from photoshare.services.trending.service import TrendingService

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/comments", tags=["comments"])


@router.get("/{comment_id}", response_model=CommentRead)
def get_comment(
    comment_id: UUID,
    _caller: DBUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> CommentRead:
    try:
        return to_comment_read(SqlAlchemyCommentRepo(db).get_or_404(comment_id))
    except PhotoshareError as e:
        raise to_http(e) from e


@router.delete("/{comment_id}", response_model=MessageRead)
def delete_comment(
    comment_id: UUID,
    user: DBUser = Depends(get_current_user),
    db: Session = Depends(get_db),
    trending: TrendingService = Depends(get_trending_service),
) -> MessageRead:
    """The comment's author or the photo's owner may delete it."""
    try:
        with transactional(db):
            SqlAlchemyCommentRepo(db).delete_comment(comment_id, requested_by=user.id)
    except PhotoshareError as e:
        raise to_http(e) from e
    trending.on_mutating_event()
    return MessageRead(message="Comment deleted successfully")
