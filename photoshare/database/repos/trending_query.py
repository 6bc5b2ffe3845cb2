# photoshare/database/repos/trending_query.py
from __future__ import annotations
from typing import List
from uuid import UUID

from sqlalchemy import select, func
from sqlalchemy.orm import Session

from photoshare.database.models import (
    MediaItem as DBMediaItem,
    Comment as DBComment,
    Rating as DBRating,
    User as DBUser,
)
from photoshare.domain.entities.engagement import engagement_score
from photoshare.domain.entities.trending import AuthorRef, TrendingRow


class TrendingQueryRepo:
    """
    Read-only ranked aggregation over media items. Satisfies TrendingQueryPort
    via structural typing.

    Order: engagement score desc, then newest first, then id desc so that
    equal scores come back in the same order on every rebuild.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def top_ranked(self, *, limit: int, offset: int = 0) -> List[TrendingRow]:
        MI = DBMediaItem

        comment_count = (
            select(func.count(DBComment.id))
            .where(DBComment.media_item_id == MI.id)
            .correlate(MI)
            .scalar_subquery()
        )
        rating_count = (
            select(func.count(DBRating.id))
            .where(DBRating.media_item_id == MI.id)
            .correlate(MI)
            .scalar_subquery()
        )
        score = engagement_score(comment_count, rating_count).label("engagement_score")

        stmt = (
            select(MI, DBUser.id, DBUser.username, score)
            .join(DBUser, DBUser.id == MI.user_id)
            .order_by(score.desc(), MI.date_created.desc(), MI.id.desc())
            .offset(offset)
            .limit(limit)
        )
        rows = self.session.execute(stmt).all()
        if not rows:
            return []

        ids = [item.id for (item, _uid, _uname, _score) in rows]
        comment_ids = self.batch_comment_ids(ids)
        rating_ids = self.batch_rating_ids(ids)

        return [
            TrendingRow(
                id=item.id,
                title=item.title,
                caption=item.caption,
                image_url=item.image_url,
                location=item.location,
                media_type=item.media_type,
                date_created=item.date_created,
                average_rating=float(item.average_rating or 0.0),
                engagement_score=int(s),
                author=AuthorRef(id=uid, username=uname),
                comment_ids=comment_ids.get(item.id, []),
                rating_ids=rating_ids.get(item.id, []),
            )
            for (item, uid, uname, s) in rows
        ]

    def batch_comment_ids(self, item_ids: list[UUID]) -> dict[UUID, list[UUID]]:
        if not item_ids:
            return {}
        stmt = (
            select(DBComment.media_item_id, DBComment.id)
            .where(DBComment.media_item_id.in_(item_ids))
            .order_by(DBComment.date_created.asc(), DBComment.id.asc())
        )
        out: dict[UUID, list[UUID]] = {}
        for mid, cid in self.session.execute(stmt).all():
            out.setdefault(mid, []).append(cid)
        return out

    def batch_rating_ids(self, item_ids: list[UUID]) -> dict[UUID, list[UUID]]:
        if not item_ids:
            return {}
        stmt = (
            select(DBRating.media_item_id, DBRating.id)
            .where(DBRating.media_item_id.in_(item_ids))
            .order_by(DBRating.date_created.asc(), DBRating.id.asc())
        )
        out: dict[UUID, list[UUID]] = {}
        for mid, rid in self.session.execute(stmt).all():
            out.setdefault(mid, []).append(rid)
        return out
