from __future__ import annotations

from http import HTTPStatus
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Path
from sqlalchemy.orm import Session

from photoshare.common.settings import get_settings
from photoshare.database.core.transaction import transactional
from photoshare.database.models import User as DBUser
from photoshare.database.repos.comment_repo import SqlAlchemyCommentRepo
from photoshare.database.repos.media_repo import SqlAlchemyMediaRepo
from photoshare.database.repos.rating_repo import SqlAlchemyRatingRepo
from photoshare.domain.errors import PhotoshareError
from photoshare.services.api.auth import get_current_user, require_creator
from photoshare.services.api.deps import get_db, get_trending_service
from photoshare.services.api.errors import to_http
from photoshare.services.mappers.media_item import to_comment_read, to_photo_read, to_rating_read
from photoshare.services.schemas import (
    CommentCreate,
    CommentRead,
    MessageRead,
    PhotoCreate,
    PhotoRead,
    RatingCreate,
    RatingCreatedRead,
)
from photoshare.services.trending.service import TrendingService

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/photos", tags=["photos"])

# Writes: commit, then invalidate trending, then respond.


@router.post("", response_model=PhotoRead, status_code=HTTPStatus.CREATED)
def create_photo(
    payload: PhotoCreate,
    user: DBUser = Depends(require_creator),
    db: Session = Depends(get_db),
    trending: TrendingService = Depends(get_trending_service),
) -> PhotoRead:
    repo = SqlAlchemyMediaRepo(db)
    with transactional(db):
        item = repo.create_media_item(
            user_id=user.id,
            title=payload.title,
            caption=payload.caption,
            location=payload.location,
            people=payload.people,
            media_type=payload.media_type,
            image_url=payload.image_url,
            storage_id=payload.storage_id,
        )
    trending.on_mutating_event()
    return to_photo_read(item)


@router.get("/{item_id}", response_model=PhotoRead)
def get_photo(
    item_id: UUID = Path(...),
    _caller: DBUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> PhotoRead:
    repo = SqlAlchemyMediaRepo(db)
    try:
        item = repo.get_or_404(item_id)
    except PhotoshareError as e:
        raise to_http(e) from e
    return to_photo_read(item, comments=repo.list_comments(item_id))


@router.delete("/{item_id}", response_model=MessageRead)
def delete_photo(
    item_id: UUID,
    user: DBUser = Depends(get_current_user),
    db: Session = Depends(get_db),
    trending: TrendingService = Depends(get_trending_service),
) -> MessageRead:
    try:
        with transactional(db):
            SqlAlchemyMediaRepo(db).delete_media_item(item_id, requested_by=user.id)
    except PhotoshareError as e:
        raise to_http(e) from e
    trending.on_mutating_event()
    return MessageRead(message="Photo deleted successfully")


@router.post("/{item_id}/comments", response_model=CommentRead, status_code=HTTPStatus.CREATED)
def add_comment(
    item_id: UUID,
    payload: CommentCreate,
    user: DBUser = Depends(get_current_user),
    db: Session = Depends(get_db),
    trending: TrendingService = Depends(get_trending_service),
) -> CommentRead:
    try:
        with transactional(db):
            comment = SqlAlchemyCommentRepo(db).add_comment(media_item_id=item_id, user_id=user.id, text=payload.text)
    except PhotoshareError as e:
        raise to_http(e) from e
    except ValueError as e:
        raise HTTPException(status_code=HTTPStatus.BAD_REQUEST, detail=str(e)) from e
    trending.on_mutating_event()
    return to_comment_read(comment)


@router.post("/{item_id}/ratings", response_model=RatingCreatedRead, status_code=HTTPStatus.CREATED)
def add_rating(
    item_id: UUID,
    payload: RatingCreate,
    user: DBUser = Depends(get_current_user),
    db: Session = Depends(get_db),
    trending: TrendingService = Depends(get_trending_service),
) -> RatingCreatedRead:
    try:
        with transactional(db):
            rating, new_average = SqlAlchemyRatingRepo(db).add_rating(
                media_item_id=item_id, user_id=user.id, value=payload.rating
            )
    except PhotoshareError as e:
        raise to_http(e) from e
    except ValueError as e:
        raise HTTPException(status_code=HTTPStatus.BAD_REQUEST, detail=str(e)) from e
    trending.on_mutating_event()
    return RatingCreatedRead(rating=to_rating_read(rating), new_average=new_average)
