"""Cache of match results per chunk and query."""

import threading
from collections.abc import Sequence
from typing import Any

from fzfind.chunklist import Chunk
from fzfind.constants import QUERY_CACHE_MAX


class ChunkCache:
    """Maps a full chunk and a query string to the results found for them."""

    def __init__(self) -> None:
        self._cache: dict[Chunk, dict[str, Sequence[Any]]] = {}
        self._lock = threading.Lock()

    def add(self, chunk: Chunk, key: str, results: Sequence[Any]) -> None:
        """Remember ``results``; low-selectivity results are not kept."""
        if not key or not chunk.is_full() or len(results) > QUERY_CACHE_MAX:
            return
        with self._lock:
            self._cache.setdefault(chunk, {})[key] = results

    def lookup(self, chunk: Chunk, key: str) -> Sequence[Any] | None:
        """Return the results stored for exactly ``key``, if any."""
        if not key or not chunk.is_full():
            return None
        with self._lock:
            return self._cache.get(chunk, {}).get(key)

    def search(self, chunk: Chunk, key: str) -> Sequence[Any] | None:
        """Return the results of the longest cached prefix or suffix of ``key``."""
        if not key or not chunk.is_full():
            return None
        with self._lock:
            queries = self._cache.get(chunk)
            if queries is None:
                return None
            for cut in range(1, len(key)):
                for part in (key[: len(key) - cut], key[cut:]):
                    if part in queries:
                        return queries[part]
        return None