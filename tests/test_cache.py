from fzfind.cache import ChunkCache
from fzfind.chunklist import Chunk
from fzfind.constants import CHUNK_SIZE, QUERY_CACHE_MAX
from fzfind.item import Item


def full_chunk():
    return Chunk([Item(text=str(i)) for i in range(CHUNK_SIZE)])


def test_chunk_cache():
    cache = ChunkCache()
    chunk1 = Chunk()
    chunk2 = full_chunk()
    items1 = ["r1"]
    items2 = ["r1", "r2"]
    cache.add(chunk1, "foo", items1)
    cache.add(chunk2, "foo", items1)
    cache.add(chunk2, "bar", items2)

    assert cache.lookup(chunk1, "foo") is None
    assert cache.lookup(chunk2, "foo") == ["r1"]
    assert len(cache.lookup(chunk2, "bar")) == 2
    assert cache.lookup(chunk1, "foobar") is None


def test_empty_key_is_not_cached():
    cache = ChunkCache()
    chunk = full_chunk()
    cache.add(chunk, "", ["r"])
    assert cache.lookup(chunk, "") is None


def test_low_selectivity_results_are_not_cached():
    cache = ChunkCache()
    chunk = full_chunk()
    cache.add(chunk, "a", ["r"] * (QUERY_CACHE_MAX + 1))
    cache.add(chunk, "b", ["r"] * QUERY_CACHE_MAX)
    assert cache.lookup(chunk, "a") is None
    assert len(cache.lookup(chunk, "b")) == QUERY_CACHE_MAX


def test_search_finds_prefix_and_suffix():
    cache = ChunkCache()
    chunk = full_chunk()
    cache.add(chunk, "foo", ["prefix"])
    cache.add(chunk, "bar", ["suffix"])
    assert cache.search(chunk, "foob") == ["prefix"]
    assert cache.search(chunk, "xbar") == ["suffix"]
    assert cache.search(chunk, "baz") is None


def test_search_prefers_longest_part():
    cache = ChunkCache()
    chunk = full_chunk()
    cache.add(chunk, "fo", ["short"])
    cache.add(chunk, "foo", ["long"])
    assert cache.search(chunk, "fooz") == ["long"]


def test_search_unknown_chunk():
    cache = ChunkCache()
    assert cache.search(full_chunk(), "foo") is None
    assert cache.search(Chunk(), "foo") is None