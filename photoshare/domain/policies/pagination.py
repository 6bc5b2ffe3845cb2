# photoshare/domain/policies/pagination.py
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Generic, List, Sequence, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Pagination:
    page: int
    limit: int
    total: int
    pages: int


@dataclass(frozen=True)
class PageWindow(Generic[T]):
    pagination: Pagination
    items: List[T] = field(default_factory=list)


def page_count(total: int, limit: int) -> int:
    return math.ceil(total / limit) if total > 0 else 0


def paginate(collection_or_count: Union[Sequence[T], int], page: int, limit: int) -> PageWindow[T]:
    """
    Window a ranked list (or describe one of known size) for 1-based `page`.

    - A concrete sequence is sliced at [(page-1)*limit, (page-1)*limit + limit);
      a window past the end is simply empty.
    - An int is taken as the total and no items are returned.
    Page clamping is the caller's job; only `limit` is validated here.
    """
    if limit <= 0:
        raise ValueError("limit must be > 0")

    if isinstance(collection_or_count, int):
        total = max(collection_or_count, 0)
        items: List[T] = []
    else:
        total = len(collection_or_count)
        start = max(page - 1, 0) * limit
        items = list(collection_or_count[start:start + limit])

    return PageWindow(
        pagination=Pagination(page=page, limit=limit, total=total, pages=page_count(total, limit)),
        items=items,
    )
