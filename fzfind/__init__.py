"""Latin letter folding, ANSI colour extraction, chunked items, result caching and merging, and query history."""

__version__ = "0.23.1"