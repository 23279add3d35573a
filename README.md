# fzfind

Building blocks for a command-line fuzzy finder, as a plain Python library
with no third-party dependencies.

## What it provides

- **Latin letter folding**: `fzfind.latin_table` holds `LATIN_BASE`, a
  read-only mapping from accented and variant Latin letters to their ASCII
  base letter. `latin_base(char)` looks one character up and returns `None`
  when it has no base; it raises `ValueError` for anything that is not a single
  character. `fzfind.normalize.normalize_rune` and `normalize_runes` fold
  single characters and whole strings, so that "Danço" becomes "Danco".
- **ANSI colours**: `fzfind.ansi.extract_color(text, state, proc)` strips
  escape sequences. It returns the plain text, the coloured ranges as a list of
  `AnsiOffset` objects (or `None` when there are none), and the `AnsiState`
  still in effect at the end, to be passed on with the next line.
  `interpret_code` applies one SGR sequence to a state, and
  `AnsiState.to_string()` turns a state back into an escape sequence.
  Attributes are the `Attr` flags `BOLD`, `DIM`, `ITALIC`, `UNDERLINE`,
  `BLINK` and `REVERSE`.
- **Items and chunks**: `fzfind.item.Item` is one input line: its text, its
  ordinal index, its colour spans and, optionally, the original line it was
  derived from. `Item.as_string(strip_ansi)` returns that original line.
  `fzfind.chunklist.ChunkList` stores items in `Chunk`s of `CHUNK_SIZE`
  (100) items and hands out snapshots that later pushes do not change.
- **Result cache**: `fzfind.cache.ChunkCache` remembers results per full
  chunk and query. `lookup` finds an exact query; `search` finds the longest
  cached prefix or suffix of a query. Result lists longer than
  `QUERY_CACHE_MAX` (20) are not kept.
- **Merging**: `fzfind.merger.Merger` presents several partial result lists
  as one sequence supporting `len()` and indexing. With `sorted=True` the
  lists, each already ordered by `key`, are merged lazily as items are
  requested; otherwise they are concatenated, in reverse when `tac` is set.
  `pass_merger(chunks, tac)` presents all items of a set of chunks in input
  order. `EMPTY_MERGER` has no items.
- **History**: `fzfind.history.History` keeps a bounded query history in a
  file, with a cursor moved by `previous()` and `next()`.
- **Constants**: `fzfind.constants` holds the tuning limits, the `Event`
  and `ExitCode` enums, and `default_command()`, which returns the shell
  command line used to list candidate files on the current platform (or
  `None` where there is none). It only returns the text; nothing is run.

## Installing

```
pip install .
```

## Examples

```python
from fzfind.ansi import extract_color
from fzfind.normalize import normalize_runes

text, offsets, state = extract_color("hello \x1b[34;45;1mworld", None, None)
print(text)                           # hello world
print(offsets[0].start, offsets[0].end)  # 6 11
print(state.fg, state.bg, state.attr)    # 4 5 Attr.BOLD

print(normalize_runes("Só Danço Samba"))  # So Danco Samba
```

```python
from fzfind.chunklist import ChunkList
from fzfind.item import Item
from fzfind.merger import Merger, pass_merger

items = ChunkList(lambda line: Item(text=line))
for line in ("alpha", "beta", "gamma"):
    items.push(line)
chunks, count = items.snapshot()
view = pass_merger(chunks, tac=True)
print(count, [view[i].text for i in range(len(view))])  # 3 ['gamma', 'beta', 'alpha']

merged = Merger(None, [[1, 4], [2, 3]], sorted=True)
print([merged[i] for i in range(len(merged))])  # [1, 2, 3, 4]
```

The item builder passed to `ChunkList` returns an `Item`, or `None` to skip
the input.

## History

```python
from fzfind.history import History

history = History("/tmp/queries", 1000)
history.append("first query")
print(history.previous())  # first query
```

`History` raises `fzfind.history.HistoryError` when the file cannot be read
or created. Empty lines are not recorded, and only the last `max_size`
entries are kept. `override(text)` changes the entry at the cursor in memory
without saving it.

## What it does not do

The package has no matching or scoring algorithms: it does not decide whether
a query matches a line or rank the results. It has no command, no interactive
screen and no input reader; `default_command()` only returns a command line
as text.

## Running the tests

```
pip install .[test]
pytest
```