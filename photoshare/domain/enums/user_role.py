from __future__ import annotations
from enum import StrEnum

class UserRole(StrEnum):
    creator = "creator"
    consumer = "consumer"
