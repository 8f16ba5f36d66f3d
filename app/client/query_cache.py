# app/client/query_cache.py
from typing import Any, Callable, Dict, Tuple

from app.utils.logging import get_logger

logger = get_logger(__name__)

QueryKey = Tuple[Any, ...]


class QueryCache:
    """
    Cache odpowiedzi po stronie klienta, klucz to krotka np. ("/api/products", 5).
    invalidate(("/api/products",)) usuwa wszystkie klucze z tym prefiksem.
    """

    def __init__(self):
        self._entries: Dict[QueryKey, Any] = {}

    def get(self, key: QueryKey, default=None):
        return self._entries.get(tuple(key), default)

    def set(self, key: QueryKey, value) -> None:
        self._entries[tuple(key)] = value

    def __contains__(self, key) -> bool:
        return tuple(key) in self._entries

    def fetch(self, key: QueryKey, loader: Callable[[], Any]):
        key = tuple(key)
        if key not in self._entries:
            self._entries[key] = loader()
        return self._entries[key]

    def invalidate(self, prefix: QueryKey) -> int:
        prefix = tuple(prefix)
        stale = [k for k in self._entries if k[: len(prefix)] == prefix]
        for key in stale:
            del self._entries[key]

        logger.info(f"Invalidated {len(stale)} cached queries for {prefix}")
        return len(stale)
