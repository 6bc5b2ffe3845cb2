from __future__ import annotations

from typing import Optional, List, TYPE_CHECKING
from uuid import UUID as UUID_t

from sqlalchemy import (
    JSON, Enum as SAEnum, Float, ForeignKey, Integer, String, Text, Uuid,
    UniqueConstraint, CheckConstraint, Index,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from photoshare.database.core.main import Base
from photoshare.database.core.service_object import ServiceObject
from photoshare.domain.enums.media_kind import MediaKind

if TYPE_CHECKING:
    from .user import User


def _fk(table_col: str) -> str:
    schema = Base.metadata.schema
    return f"{schema}.{table_col}" if schema else table_col


class MediaItem(ServiceObject, Base):
    __tablename__ = "media_item"
    __table_args__ = (
        Index("ix_mediaitem_user_created", "user_id", "date_created"),
    )

    user_id: Mapped[UUID_t] = mapped_column(
        Uuid(as_uuid=True), ForeignKey(_fk("users.id"), ondelete="CASCADE"), nullable=False
    )

    # curation
    title: Mapped[str] = mapped_column(String(100), nullable=False)
    caption: Mapped[Optional[str]] = mapped_column(String(500))
    location: Mapped[Optional[str]] = mapped_column(String(100))
    people: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)

    # storage (upload happens upstream; we keep the public URL and the backend's handle)
    media_type: Mapped[MediaKind] = mapped_column(
        SAEnum(MediaKind, name="media_kind"), nullable=False, default=MediaKind.image
    )
    image_url: Mapped[str] = mapped_column(Text, nullable=False)
    storage_id: Mapped[str] = mapped_column(Text, nullable=False)

    # recomputed on every rating insert
    average_rating: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)

    # relationships
    user: Mapped["User"] = relationship(back_populates="media_items")
    comments: Mapped[List["Comment"]] = relationship(
        back_populates="media_item", cascade="all, delete-orphan", order_by="Comment.date_created"
    )
    ratings: Mapped[List["Rating"]] = relationship(
        back_populates="media_item", cascade="all, delete-orphan", order_by="Rating.date_created"
    )


class Comment(ServiceObject, Base):
    __tablename__ = "comment"
    __table_args__ = (
        CheckConstraint("length(text) BETWEEN 1 AND 500", name="text_length"),
        Index("ix_comment_media_created", "media_item_id", "date_created"),
    )

    media_item_id: Mapped[UUID_t] = mapped_column(
        Uuid(as_uuid=True), ForeignKey(_fk("media_item.id"), ondelete="CASCADE"), nullable=False
    )
    user_id: Mapped[UUID_t] = mapped_column(
        Uuid(as_uuid=True), ForeignKey(_fk("users.id"), ondelete="CASCADE"), nullable=False
    )
    text: Mapped[str] = mapped_column(String(500), nullable=False)

    media_item: Mapped[MediaItem] = relationship(back_populates="comments")
    user: Mapped["User"] = relationship()


class Rating(ServiceObject, Base):
    __tablename__ = "rating"
    __table_args__ = (
        UniqueConstraint("media_item_id", "user_id", name="uq_rating_media_item_user"),
        CheckConstraint("value BETWEEN 1 AND 5", name="value_1_5"),
    )

    media_item_id: Mapped[UUID_t] = mapped_column(
        Uuid(as_uuid=True), ForeignKey(_fk("media_item.id"), ondelete="CASCADE"), nullable=False
    )
    user_id: Mapped[UUID_t] = mapped_column(
        Uuid(as_uuid=True), ForeignKey(_fk("users.id"), ondelete="CASCADE"), nullable=False
    )
    value: Mapped[int] = mapped_column(Integer, nullable=False)

    media_item: Mapped[MediaItem] = relationship(back_populates="ratings")
