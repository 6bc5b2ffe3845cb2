from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import Field

from photoshare.domain.enums.user_role import UserRole
from photoshare.services.schemas.base import CamelModel


class UserRead(CamelModel):
    id: UUID = Field(alias="_id")
    username: str
    email: str
    role: UserRole
    created_at: Optional[datetime] = None
