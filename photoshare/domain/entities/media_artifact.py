# photoshare/domain/entities/media_artifact.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID

COMMENT_MAX_LEN = 500
RATING_MIN = 1
RATING_MAX = 5


@dataclass
class Comment:
    """
    A user's comment on a media item. Text is trimmed on construction.
    """
    media_item_id: UUID = None  # required
    user_id: UUID = None        # required
    text: str = ""
    id: Optional[UUID] = None
    date_created: Optional[datetime] = None

    def __post_init__(self):
        if self.media_item_id is None:
            raise ValueError("Comment.media_item_id is required")
        if self.user_id is None:
            raise ValueError("Comment.user_id is required")
        self.text = (self.text or "").strip()
        if not self.text:
            raise ValueError("Comment.text is required")
        if len(self.text) > COMMENT_MAX_LEN:
            raise ValueError(f"Comment.text must be at most {COMMENT_MAX_LEN} characters")


@dataclass
class Rating:
    """
    Rating for a media item. Policy & DB enforce *one per (media_item_id, user_id)*.
    """
    media_item_id: UUID = None  # required
    user_id: UUID = None        # required
    value: int = 0              # 1..5 inclusive
    id: Optional[UUID] = None
    date_created: Optional[datetime] = None

    def __post_init__(self):
        if self.media_item_id is None:
            raise ValueError("Rating.media_item_id is required")
        if self.user_id is None:
            raise ValueError("Rating.user_id is required")
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValueError("Rating.value must be an int")
        if self.value < RATING_MIN or self.value > RATING_MAX:
            raise ValueError(f"Rating.value must be between {RATING_MIN} and {RATING_MAX} inclusive")


def mean_rating(values: list[int]) -> float:
    """Average of all rating values; 0.0 when nothing has been rated yet."""
    if not values:
        return 0.0
    return sum(values) / len(values)
