# photoshare/services/api/errors.py
from __future__ import annotations

from http import HTTPStatus

from fastapi import HTTPException

from photoshare.domain.errors import (
    DuplicateRating,
    NotAuthorized,
    NotFound,
    PhotoshareError,
)


def to_http(e: PhotoshareError) -> HTTPException:
    """Map a domain error onto the status code the client sees."""
    if isinstance(e, NotFound):
        return HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=str(e))
    if isinstance(e, NotAuthorized):
        return HTTPException(status_code=HTTPStatus.FORBIDDEN, detail=str(e))
    if isinstance(e, DuplicateRating):
        return HTTPException(status_code=HTTPStatus.BAD_REQUEST, detail=str(e))
    # DataStoreError and anything unexpected
    return HTTPException(status_code=HTTPStatus.INTERNAL_SERVER_ERROR, detail="Server error")
