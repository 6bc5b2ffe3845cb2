from __future__ import annotations
from typing import Any, List, Optional, Protocol


class KeyValueBackend(Protocol):
    """The slice of the redis client API the trending cache relies on."""

    def get(self, name: str) -> Optional[bytes | str]: ...
    def set(self, name: str, value: bytes | str, ex: Optional[int] = None) -> Any: ...
    def delete(self, *names: str) -> int: ...


class TrendingCachePort(Protocol):
    def get(self) -> Optional[List[Any]]: ...
    def set(self, items: List[Any], ttl_seconds: Optional[int] = None) -> None: ...
    def invalidate(self) -> None: ...
