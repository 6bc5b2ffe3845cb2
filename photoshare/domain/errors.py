# photoshare/domain/errors.py
from __future__ import annotations


class PhotoshareError(Exception):
    """Base for errors the API layer knows how to translate."""


class NotFound(PhotoshareError, LookupError):
    def __init__(self, what: str, ident: object = None) -> None:
        self.what = what
        self.ident = ident
        super().__init__(f"{what} not found")


class NotAuthorized(PhotoshareError):
    pass


class DuplicateRating(PhotoshareError, ValueError):
    def __init__(self, media_item_id: object, user_id: object) -> None:
        self.media_item_id = media_item_id
        self.user_id = user_id
        super().__init__("You have already rated this photo")


class DataStoreError(PhotoshareError):
    """Primary store query failed. Surfaced to HTTP callers as a 500."""

    def __init__(self, operation: str, cause: BaseException | None = None) -> None:
        self.operation = operation
        self.cause = cause
        super().__init__(f"{operation} failed: {cause}" if cause else f"{operation} failed")


class CacheUnavailable(PhotoshareError):
    """Cache backend unreachable or errored. Callers fall back to the database."""

    def __init__(self, operation: str, key: str, cause: BaseException | None = None) -> None:
        self.operation = operation
        self.key = key
        self.cause = cause
        super().__init__(f"cache {operation} on {key!r} failed: {cause}")
