"""Parsing of ANSI escape sequences into colour spans and back."""

import re
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import IntFlag


class Attr(IntFlag):
    """Text attributes set by SGR escape codes."""

    BOLD = 1
    DIM = 2
    ITALIC = 4
    UNDERLINE = 8
    BLINK = 16
    REVERSE = 32


_ATTR_CODES = (
    (Attr.BOLD, "1"),
    (Attr.DIM, "2"),
    (Attr.ITALIC, "3"),
    (Attr.UNDERLINE, "4"),
    (Attr.BLINK, "5"),
    (Attr.REVERSE, "7"),
)

_SET_ATTRS = {
    1: Attr.BOLD,
    2: Attr.DIM,
    3: Attr.ITALIC,
    4: Attr.UNDERLINE,
    5: Attr.BLINK,
    7: Attr.REVERSE,
}

_CLEAR_ATTRS = {
    23: Attr.ITALIC,
    24: Attr.UNDERLINE,
}

# Most, though not all, of the commonly used escape sequences.
ANSI_PATTERN = re.compile(
    r"(?:\x1b[\[()][0-9;]*[a-zA-Z@]"
    r"|\x1b\][0-9];[ -~]+(?:\x1b\\|\x07)"
    r"|\x1b."
    r"|[\x0e\x0f]"
    r"|.\x08)"
)

_RGB_FLAG = 1 << 24


@dataclass(frozen=True)
class AnsiState:
    """Foreground, background and attributes in effect; -1 means default."""

    fg: int = -1
    bg: int = -1
    attr: Attr = Attr(0)

    def colored(self) -> bool:
        return self.fg != -1 or self.bg != -1 or self.attr > 0

    def equals(self, other: "AnsiState | None") -> bool:
        """Compare with ``other``; ``None`` stands for the uncoloured state."""
        if other is None:
            return not self.colored()
        return (self.fg, self.bg, self.attr) == (other.fg, other.bg, other.attr)

    def to_string(self) -> str:
        """Return the escape sequence that sets this state."""
        if not self.colored():
            return ""
        parts = [code for flag, code in _ATTR_CODES if self.attr & flag]
        parts.append(_color_code(self.fg, 30))
        parts.append(_color_code(self.bg, 40))
        return "\x1b[" + ";".join(part for part in parts if part) + "m"


@dataclass
class AnsiOffset:
    """A span of characters ``[start, end)`` drawn in ``color``."""

    start: int
    end: int
    color: AnsiState = field(default_factory=AnsiState)


def _color_code(color: int, offset: int) -> str:
    if color == -1:
        return str(offset + 9)
    if color < 8:
        return str(offset + color)
    if color < 16:
        return str(offset - 30 + 90 + color - 8)
    if color < 256:
        return f"{offset + 8};5;{color}"
    if color >= _RGB_FLAG:
        red = (color >> 16) & 0xFF
        green = (color >> 8) & 0xFF
        blue = color & 0xFF
        return f"{offset + 8};2;{red};{green};{blue}"
    return ""


def _find_ansi_start(text: str, start: int) -> int:
    for idx in range(start, len(text)):
        char = text[idx]
        if char in "\x1b\x0e\x0f":
            return idx
        if char == "\x08" and idx > start:
            return idx - 1
    return len(text)


def extract_color(
    text: str,
    state: AnsiState | None,
    proc: Callable[[str, AnsiState | None], bool] | None,
) -> tuple[str, list[AnsiOffset] | None, AnsiState | None]:
    """Strip escape sequences from ``text`` and record the colour spans.

    ``state`` is the state carried over from earlier text.  ``proc``, if
    given, is called with each plain run and the state it is drawn in; when
    it returns false, processing stops and ``("", None, None)`` is returned.
    Returns the stripped text, the spans (or ``None`` if there are none) and
    the state in effect at the end.
    """
    offsets: list[AnsiOffset] = []
    output: list[str] = []
    if state is not None:
        offsets.append(AnsiOffset(0, 0, state))

    prev_idx = 0
    char_count = 0
    idx = 0
    while idx < len(text):
        idx = _find_ansi_start(text, idx)
        if idx == len(text):
            break

        found = ANSI_PATTERN.search(text, idx)
        if found is None:
            idx += 1
            continue
        start, end = found.span()
        idx = end

        prev = text[prev_idx:start]
        if proc is not None and not proc(prev, state):
            return "", None, None

        prev_idx = end
        char_count += len(prev)
        output.append(prev)

        new_state = interpret_code(text[start:end], state)
        if not new_state.equals(state):
            if state is not None:
                offsets[-1].end = char_count
            if new_state.colored():
                state = new_state
                offsets.append(AnsiOffset(char_count, char_count, state))
            else:
                state = None

    if prev_idx == 0:
        rest = text
        trimmed = text
    else:
        rest = text[prev_idx:]
        output.append(rest)
        trimmed = "".join(output)

    if rest and state is not None:
        char_count += len(rest)
        offsets[-1].end = char_count
    if proc is not None:
        proc(rest, state)
    return trimmed, (offsets or None), state


def interpret_code(ansi_code: str, prev_state: AnsiState | None) -> AnsiState:
    """Apply one escape sequence to ``prev_state`` and return the result."""
    if prev_state is None:
        colors = [-1, -1]
        attr = Attr(0)
    else:
        colors = [prev_state.fg, prev_state.bg]
        attr = prev_state.attr

    if not (
        len(ansi_code) >= 3
        and ansi_code.startswith("\x1b[")
        and ansi_code.endswith("m")
    ):
        return AnsiState(colors[0], colors[1], attr)

    target = 0
    state256 = 0
    body = ansi_code[2:-1]
    if not body:
        colors = [-1, -1]
        attr = Attr(0)

    for token in body.split(";"):
        try:
            num = int(token)
        except ValueError:
            continue

        if state256 == 0:
            if num == 38:
                target = 0
                state256 = 1
            elif num == 48:
                target = 1
                state256 = 1
            elif num == 39:
                colors[0] = -1
            elif num == 49:
                colors[1] = -1
            elif num in _SET_ATTRS:
                attr |= _SET_ATTRS[num]
            elif num in _CLEAR_ATTRS:
                attr &= ~_CLEAR_ATTRS[num]
            elif num == 0:
                colors = [-1, -1]
                attr = Attr(0)
            elif 30 <= num <= 37:
                colors[0] = num - 30
            elif 40 <= num <= 47:
                colors[1] = num - 40
            elif 90 <= num <= 97:
                colors[0] = num - 90 + 8
            elif 100 <= num <= 107:
                colors[1] = num - 100 + 8
        elif state256 == 1:
            if num == 2:
                state256 = 10
            elif num == 5:
                state256 = 2
            else:
                state256 = 0
        elif state256 == 2:
            colors[target] = num
            state256 = 0
        elif state256 == 10:
            colors[target] = _RGB_FLAG | (num << 16)
            state256 = 11
        elif state256 == 11:
            colors[target] |= num << 8
            state256 = 12
        elif state256 == 12:
            colors[target] |= num
            state256 = 0

    if state256 > 0:
        colors[target] = -1
    return AnsiState(colors[0], colors[1], Attr(attr))