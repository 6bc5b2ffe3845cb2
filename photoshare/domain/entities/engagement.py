# photoshare/domain/entities/engagement.py
from __future__ import annotations

from typing import TypeVar

N = TypeVar("N")


def engagement_score(comment_count: N, rating_count: N) -> N:
    """
    Trending rank key: number of comments plus number of ratings.

    Works on plain ints and on SQLAlchemy column expressions alike, so the
    ranking query and in-memory callers share one definition.
    """
    return comment_count + rating_count  # type: ignore[operator]
