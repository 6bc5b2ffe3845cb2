from photoshare.domain.enums.media_kind import MediaKind
from photoshare.domain.enums.user_role import UserRole
__all__ = [
    "MediaKind",
    "UserRole",
]
