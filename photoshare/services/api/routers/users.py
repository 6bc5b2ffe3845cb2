from __future__ import annotations

from http import HTTPStatus
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from photoshare.common.settings import get_settings
from photoshare.database.models import User as DBUser
from photoshare.database.repos.user_repo import SqlAlchemyUserRepo
from photoshare.services.api.auth import get_current_user
from photoshare.services.api.deps import get_db
from photoshare.services.mappers.media_item import to_user_read
from photoshare.services.schemas import UserRead

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/users", tags=["users"])


@router.get("/me", response_model=UserRead)
def get_me(user: DBUser = Depends(get_current_user)) -> UserRead:
    return to_user_read(user)


@router.get("/{user_id}", response_model=UserRead)
def get_user(
    user_id: UUID,
    _caller: DBUser = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> UserRead:
    user = SqlAlchemyUserRepo(db).get(user_id)
    if not user:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail="User not found")
    return to_user_read(user)
