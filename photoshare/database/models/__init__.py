# photoshare/database/models/__init__.py

from photoshare.database.models.user import User
from photoshare.database.models.media import (
    Base,
    MediaItem,
    Comment,
    Rating,
)

__all__ = [
    "Base",
    "User",
    "MediaItem",
    "Comment",
    "Rating",
]
