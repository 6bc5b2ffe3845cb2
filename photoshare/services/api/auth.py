# photoshare/services/api/auth.py
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from http import HTTPStatus
from typing import Optional
from uuid import UUID

import jwt
from fastapi import Depends, HTTPException, Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from photoshare.common.logging import get_logger
from photoshare.common.settings import get_settings
from photoshare.database.models import User as DBUser
from photoshare.database.repos.user_repo import SqlAlchemyUserRepo
from photoshare.domain.enums.user_role import UserRole
from photoshare.services.api.deps import get_db

logger = get_logger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def create_access_token(user_id: UUID, expires_delta: Optional[timedelta] = None) -> str:
    cfg = get_settings()
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(hours=cfg.auth.token_ttl_hours))
    payload = {"sub": str(user_id), "exp": expire}
    return jwt.encode(payload, cfg.auth.jwt_secret, algorithm=cfg.auth.jwt_algo)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=HTTPStatus.UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Security(bearer_scheme),
    db: Session = Depends(get_db),
) -> DBUser:
    """
    Resolve the caller from a bearer token. Token issuance and login live
    outside this service; we only verify and look the subject up.
    """
    if credentials is None:
        raise _unauthorized("No authentication token, access denied")

    cfg = get_settings()
    try:
        payload = jwt.decode(credentials.credentials, cfg.auth.jwt_secret, algorithms=[cfg.auth.jwt_algo])
        user_id = UUID(str(payload["sub"]))
    except (jwt.PyJWTError, KeyError, ValueError) as e:
        logger.debug("Rejected bearer token: %s", e)
        raise _unauthorized("Token is not valid") from e

    user = SqlAlchemyUserRepo(db).get(user_id)
    if user is None:
        raise _unauthorized("User not found")
    return user


def require_creator(user: DBUser = Depends(get_current_user)) -> DBUser:
    if user.role != UserRole.creator:
        raise HTTPException(status_code=HTTPStatus.FORBIDDEN, detail="Access denied. Creator role required.")
    return user
