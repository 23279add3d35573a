import pytest

from fzfind.history import History, HistoryError

MAX_HISTORY = 50


def test_directory_is_rejected(tmp_path):
    with pytest.raises(HistoryError, match="invalid history file"):
        History(str(tmp_path), MAX_HISTORY)


def test_uncreatable_path_is_rejected(tmp_path):
    with pytest.raises(HistoryError):
        History(str(tmp_path / "missing" / "history"), MAX_HISTORY)


def test_missing_file_is_created(tmp_path):
    path = tmp_path / "history"
    history = History(str(path), MAX_HISTORY)
    assert path.exists()
    assert history.lines == [""]
    assert history.cursor == 0


def test_append_and_reread(tmp_path):
    path = str(tmp_path / "history")
    history = History(path, MAX_HISTORY)
    for _ in range(MAX_HISTORY + 10):
        history.append("foobar")

    history = History(path, MAX_HISTORY)
    assert len(history.lines) == MAX_HISTORY + 1
    assert history.lines[:MAX_HISTORY] == ["foobar"] * MAX_HISTORY

    history.append("barfoo")
    history.append("")
    history.append("foobarbaz")

    history = History(path, MAX_HISTORY)
    assert len(history.lines) == MAX_HISTORY + 1
    assert history.lines[MAX_HISTORY - 3] == "foobar"
    assert history.lines[MAX_HISTORY - 2] == "barfoo"
    assert history.lines[MAX_HISTORY - 1] == "foobarbaz"


def test_file_content(tmp_path):
    path = tmp_path / "history"
    history = History(str(path), 10)
    history.append("one")
    history.append("two")
    assert path.read_text() == "one\ntwo\n"


def test_navigation(tmp_path):
    path = tmp_path / "history"
    path.write_text("first\nsecond\n")
    history = History(str(path), 10)
    assert history.lines == ["first", "second", ""]
    assert history.current() == ""
    assert history.previous() == "second"
    assert history.previous() == "first"
    assert history.previous() == "first"
    assert history.next() == "second"
    assert history.next() == ""
    assert history.next() == ""


def test_override_is_kept_in_memory(tmp_path):
    path = tmp_path / "history"
    path.write_text("first\nsecond")
    history = History(str(path), 10)
    history.override("draft")
    assert history.lines[-1] == "draft"
    history.previous()
    history.override("edited")
    assert history.current() == "edited"
    assert history.lines[1] == "second"
    assert history.previous() == "first"
    assert history.next() == "edited"
    assert path.read_text() == "first\nsecond"