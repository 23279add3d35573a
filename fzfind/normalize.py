"""Folding of accented and variant Latin letters to their ASCII base."""

from collections.abc import Iterable

from fzfind.latin_table import HIGHEST, LATIN_BASE, LOWEST


def normalize_rune(char: str) -> str:
    """Return the ASCII base of ``char`` if it has one, else ``char`` itself."""
    code = ord(char)
    if code < LOWEST or code > HIGHEST:
        return char
    return LATIN_BASE.get(char, char)


def normalize_runes(runes: Iterable[str]) -> str:
    """Return ``runes`` as a string with every Latin variant letter folded."""
    return "".join(normalize_rune(char) for char in runes)