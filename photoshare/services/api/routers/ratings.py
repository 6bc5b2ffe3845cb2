from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from photoshare.common.settings import get_settings
from photoshare.database.models import User as DBUser
from photoshare.database.repos.rating_repo import SqlAlchemyRatingRepo
from photoshare.domain.errors import PhotoshareError
from photoshare.services.api.auth import get_current_user
from photoshare.services.api.deps import get_db
from photoshare.services.api.errors import to_http
from photoshare.services.mappers.media_item import to_rating_read
from photoshare.services.schemas import RatingRead

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/ratings", tags=["ratings"])


@router.get("/{rating_id}", response_model=RatingRead)
def get_rating(
    rating_id: UUID,
    _caller: DBUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> RatingRead:
    try:
        return to_rating_read(SqlAlchemyRatingRepo(db).get_or_404(rating_id))
    except PhotoshareError as e:
        raise to_http(e) from e
