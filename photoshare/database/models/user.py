from __future__ import annotations

from typing import List, TYPE_CHECKING

from sqlalchemy import Enum as SAEnum, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from photoshare.database.core.main import Base
from photoshare.database.core.service_object import ServiceObject
from photoshare.domain.enums.user_role import UserRole

if TYPE_CHECKING:
    from .media import MediaItem


class User(ServiceObject, Base):
    __tablename__ = "users"

    username: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    role: Mapped[UserRole] = mapped_column(
        SAEnum(UserRole, name="user_role"), nullable=False, default=UserRole.consumer
    )

    media_items: Mapped[List["MediaItem"]] = relationship(back_populates="user")
