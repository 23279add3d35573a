"""A single, globally ordered view over several locally ordered result lists."""

from collections.abc import Callable, Sequence
from typing import Any

from fzfind.chunklist import Chunk
from fzfind.constants import CHUNK_SIZE, MERGER_CACHE_MAX


def _identity(value: Any) -> Any:
    return value


class Merger:
    """Presents partial result lists as one list.

    When ``sorted`` is set, each list must already be ordered by ``key`` and
    items are merged lazily as they are requested; on equal keys the earlier
    list wins.  Otherwise the lists are simply concatenated, in reverse when
    ``tac`` is set.
    """

    def __init__(
        self,
        pattern: Any,
        lists: Sequence[Sequence[Any]],
        sorted: bool = False,
        tac: bool = False,
        key: Callable[[Any], Any] | None = None,
    ) -> None:
        self.pattern = pattern
        self.lists = [list(results) for results in lists]
        self.sorted = sorted
        self.tac = tac
        self.final = False
        self.key = key or _identity
        self._chunks: list[Chunk] | None = None
        self._merged: list[Any] = []
        self._cursors = [0] * len(self.lists)
        self._count = sum(len(results) for results in self.lists)

    @classmethod
    def _passing(cls, chunks: Sequence[Chunk], tac: bool) -> "Merger":
        merger = cls(None, [], False, tac)
        merger._chunks = list(chunks)
        merger._count = sum(chunk.count for chunk in merger._chunks)
        return merger

    def __len__(self) -> int:
        return self._count

    def __getitem__(self, idx: int) -> Any:
        if not 0 <= idx < self._count:
            raise IndexError(f"index out of bounds ({idx}/{self._count})")

        if self._chunks is not None:
            if self.tac:
                idx = self._count - idx - 1
            return self._chunks[idx // CHUNK_SIZE].items[idx % CHUNK_SIZE]

        if self.sorted:
            return self._merged_get(idx)

        if self.tac:
            idx = self._count - idx - 1
        for results in self.lists:
            if idx < len(results):
                return results[idx]
            idx -= len(results)
        raise IndexError(f"index out of bounds ({idx}/{self._count})")

    def cacheable(self) -> bool:
        """Whether the merger is small enough to be worth caching."""
        return self._count < MERGER_CACHE_MAX

    def _merged_get(self, idx: int) -> Any:
        while len(self._merged) <= idx:
            best_list = -1
            best_key: Any = None
            for list_idx, results in enumerate(self.lists):
                cursor = self._cursors[list_idx]
                if cursor >= len(results):
                    continue
                candidate = self.key(results[cursor])
                if best_list < 0 or candidate < best_key:
                    best_list, best_key = list_idx, candidate
            if best_list < 0:
                raise IndexError(
                    f"index out of bounds ({len(self._merged)}/{self._count})"
                )
            self._merged.append(self.lists[best_list][self._cursors[best_list]])
            self._cursors[best_list] += 1
        return self._merged[idx]


def pass_merger(chunks: Sequence[Chunk], tac: bool) -> Merger:
    """Return a merger over all items of ``chunks`` in their original order."""
    return Merger._passing(chunks, tac)


EMPTY_MERGER = Merger(None, [], False, False)
"""A merger with no results."""