from __future__ import annotations
from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from photoshare.database.models import User as DBUser
from photoshare.domain.enums.user_role import UserRole


class SqlAlchemyUserRepo:
    def __init__(self, session: Session) -> None:
        self.db = session

    def get(self, user_id: UUID) -> Optional[DBUser]:
        return self.db.get(DBUser, user_id)

    def get_by_username(self, username: str) -> Optional[DBUser]:
        stmt = select(DBUser).where(DBUser.username == username).limit(1)
        return self.db.execute(stmt).scalars().first()

    def create(self, *, username: str, email: str, role: UserRole = UserRole.consumer) -> DBUser:
        if self.get_by_username(username) is not None:
            raise ValueError(f"Username {username!r} is taken")
        obj = DBUser(username=username, email=email, role=role)
        self.db.add(obj)
        self.db.flush()
        return obj
