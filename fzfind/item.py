"""A single input line as seen by the finder."""

from dataclasses import dataclass, field

from fzfind.ansi import AnsiOffset, extract_color


@dataclass
class Item:
    """An input line: the text to match, its ordinal and its colour spans.

    ``orig_text`` holds the line as read when ``text`` was derived from it
    by a field transformation.
    """

    text: str
    index: int = 0
    colors: list[AnsiOffset] = field(default_factory=list)
    orig_text: str | None = None

    def as_string(self, strip_ansi: bool) -> str:
        """Return the original line, optionally without escape sequences."""
        if self.orig_text is not None:
            if strip_ansi:
                trimmed, _, _ = extract_color(self.orig_text, None, None)
                return trimmed
            return self.orig_text
        return self.text


MIN_ITEM = Item(text="", index=-1)