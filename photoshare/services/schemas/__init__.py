
from photoshare.services.schemas.base import AuthorRead
from photoshare.services.schemas.trending import (
    TrendingPhotoRead,
    TrendingPageRead,
    PaginationRead,
)
from photoshare.services.schemas.comments import (
    CommentCreate,
    CommentRead,
)
from photoshare.services.schemas.media import (
    PhotoCreate,
    PhotoRead,
    MessageRead,
)
from photoshare.services.schemas.rating import (
    RatingCreate,
    RatingRead,
    RatingCreatedRead,
)
from photoshare.services.schemas.users import UserRead

__all__ = [
    "AuthorRead",
    "TrendingPhotoRead",
    "TrendingPageRead",
    "PaginationRead",
    "CommentCreate",
    "CommentRead",
    "PhotoCreate",
    "PhotoRead",
    "MessageRead",
    "RatingCreate",
    "RatingRead",
    "RatingCreatedRead",
    "UserRead",
]
