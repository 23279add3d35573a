"""Growable list of input items stored in fixed-size chunks."""

import threading
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any

from fzfind.constants import CHUNK_SIZE
from fzfind.item import Item

ItemBuilder = Callable[[Any], "Item | None"]
"""Builds an item from raw input data, or returns None to skip it."""


@dataclass(eq=False)
class Chunk:
    """Up to ``CHUNK_SIZE`` items.  Compared and hashed by identity."""

    items: list[Item] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.items)

    def push(self, trans: ItemBuilder, data: Any) -> bool:
        """Build an item from ``data`` and add it; return whether one was added."""
        if self.is_full():
            raise IndexError("chunk is full")
        item = trans(data)
        if item is None:
            return False
        self.items.append(item)
        return True

    def is_full(self) -> bool:
        return len(self.items) == CHUNK_SIZE

    def copy(self) -> "Chunk":
        return Chunk(list(self.items))


def count_items(chunks: Sequence[Chunk]) -> int:
    """Total number of items in ``chunks``; all but the last must be full."""
    if not chunks:
        return 0
    return CHUNK_SIZE * (len(chunks) - 1) + chunks[-1].count


class ChunkList:
    """Thread-safe list of chunks filled through an item builder."""

    def __init__(self, trans: ItemBuilder) -> None:
        self.trans = trans
        self._chunks: list[Chunk] = []
        self._lock = threading.Lock()

    def push(self, data: Any) -> bool:
        """Add an item built from ``data``; return whether one was added."""
        with self._lock:
            if not self._chunks or self._chunks[-1].is_full():
                self._chunks.append(Chunk())
            return self._chunks[-1].push(self.trans, data)

    def clear(self) -> None:
        with self._lock:
            self._chunks = []

    def snapshot(self) -> tuple[list[Chunk], int]:
        """Return an unchanging view of the chunks and the item count."""
        with self._lock:
            chunks = list(self._chunks)
            if chunks:
                # The last chunk may still grow, so it is copied.
                chunks[-1] = chunks[-1].copy()
        return chunks, count_items(chunks)