from __future__ import annotations
from typing import List, Protocol

from photoshare.domain.entities.trending import TrendingRow


class TrendingQueryPort(Protocol):
    def top_ranked(self, *, limit: int, offset: int = 0) -> List[TrendingRow]: ...
