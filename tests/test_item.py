from fzfind.ansi import AnsiOffset, AnsiState
from fzfind.item import MIN_ITEM, Item


def test_as_string_uses_original_text():
    orig = "\x1b[34mfoo"
    text = "\x1b[34mbar"
    item = Item(text=text, orig_text=orig)
    assert item.as_string(True) == "foo"
    assert item.as_string(False) == orig
    assert item.as_string(True) == "foo"


def test_as_string_without_original_returns_text():
    text = "\x1b[34mbar"
    item = Item(text=text)
    assert item.as_string(True) == text
    assert item.as_string(False) == text


def test_colors_default_to_empty():
    assert Item(text="x").colors == []


def test_colors_are_kept():
    span = AnsiOffset(0, 1, AnsiState(fg=2))
    assert Item(text="x", colors=[span]).colors[0].color.fg == 2


def test_min_item_index():
    assert MIN_ITEM.index == -1
    assert MIN_ITEM.index < Item(text="a", index=0).index