"""Query history kept in a plain text file, one entry per line."""

import os


class HistoryError(Exception):
    """The history file cannot be read or created."""


def _write(path: str, text: str) -> None:
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    with open(fd, "w", encoding="utf-8", errors="surrogateescape") as handle:
        handle.write(text)


class History:
    """Input history with a cursor for moving back and forth.

    The last line is always the entry being edited.  Edits to older entries
    are remembered in memory only.
    """

    def __init__(self, path: str, max_size: int) -> None:
        self.path = path
        self.max_size = max_size
        try:
            with open(path, encoding="utf-8", errors="surrogateescape") as handle:
                data = handle.read()
        except FileNotFoundError:
            data = ""
            try:
                _write(path, data)
            except OSError as error:
                raise self._error(error) from error
        except OSError as error:
            raise self._error(error) from error

        self.lines = data.strip("\n").split("\n")
        if self.lines[-1]:
            self.lines.append("")
        self.modified: dict[int, str] = {}
        self.cursor = len(self.lines) - 1

    def _error(self, error: OSError) -> HistoryError:
        if isinstance(error, PermissionError):
            return HistoryError(f"permission denied: {self.path}")
        return HistoryError(f"invalid history file: {error}")

    def append(self, line: str) -> None:
        """Record ``line`` and save the history; empty lines are ignored."""
        if not line:
            return
        lines = self.lines[:-1] + [line]
        if len(lines) > self.max_size:
            lines = lines[len(lines) - self.max_size :]
        self.lines = lines + [""]
        _write(self.path, "\n".join(self.lines))

    def override(self, text: str) -> None:
        """Replace the entry at the cursor without saving it to the file."""
        if self.cursor == len(self.lines) - 1:
            self.lines[self.cursor] = text
        elif self.cursor < len(self.lines) - 1:
            self.modified[self.cursor] = text

    def current(self) -> str:
        return self.modified.get(self.cursor, self.lines[self.cursor])

    def previous(self) -> str:
        """Move to the older entry, if any, and return it."""
        if self.cursor > 0:
            self.cursor -= 1
        return self.current()

    def next(self) -> str:
        """Move to the newer entry, if any, and return it."""
        if self.cursor < len(self.lines) - 1:
            self.cursor += 1
        return self.current()