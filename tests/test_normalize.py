import pytest

from fzfind.normalize import normalize_rune, normalize_runes


@pytest.mark.parametrize(
    "char, expected",
    [
        ("á", "a"),
        ("ó", "o"),
        ("ç", "c"),
        ("Ắ", "A"),
        ("ự", "u"),
        ("ß", "s"),
        ("\u00c0", "A"),
        ("\u2184", "c"),
    ],
)
def test_normalize_rune_folds_variants(char, expected):
    assert normalize_rune(char) == expected


@pytest.mark.parametrize("char", ["x", "Z", "1", " ", "Ж", "中", "\u00bf"])
def test_normalize_rune_leaves_other_characters(char):
    assert normalize_rune(char) == char


def test_normalize_runes_phrase():
    assert normalize_runes("Só Danço Samba") == "So Danco Samba"


def test_normalize_runes_word():
    assert normalize_runes("Danço") == "Danco"


def test_normalize_runes_accepts_list_and_keeps_length():
    source = ["É", "t", "é"]
    result = normalize_runes(source)
    assert result == "Ete"
    assert len(result) == len(source)


def test_normalize_runes_empty():
    assert normalize_runes("") == ""


def test_normalize_rune_rejects_multiple_characters():
    with pytest.raises(TypeError):
        normalize_rune("ab")