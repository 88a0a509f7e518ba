import pytest

from minishell.history import History, HistoryEntry


def _enter(history, text):
    history.start_line()
    for char in text:
        history.type_char(char)
    return history.submit()


def test_submit_returns_typed_line_and_remembers_it():
    history = History()
    assert _enter(history, "ls -l") == "ls -l"
    assert history.lines() == ["ls -l"]


def test_empty_line_is_not_remembered():
    history = History()
    assert _enter(history, "") is None
    assert history.lines() == []


def test_newest_first():
    history = History()
    _enter(history, "one")
    _enter(history, "two")
    assert history.lines() == ["two", "one"]


def test_backspace_removes_last_character():
    history = History()
    history.start_line()
    history.type_char("a")
    history.type_char("b")
    assert history.backspace() == "a"
    assert history.backspace() == ""
    assert history.backspace() == ""


def test_backspaced_to_empty_is_not_submitted():
    history = History()
    history.start_line()
    history.type_char("x")
    history.backspace()
    assert history.submit() is None
    assert history.lines() == []


def test_up_and_down_walk_history():
    history = History()
    _enter(history, "first")
    _enter(history, "second")
    history.start_line()
    assert history.up() == "second"
    assert history.up() == "first"
    assert history.up() == "first"
    assert history.down() == "second"
    assert history.down() == ""
    assert history.down() == ""


def test_editing_recalled_entry_keeps_original():
    history = History()
    _enter(history, "ab")
    history.start_line()
    history.up()
    history.type_char("c")
    assert history.current_text() == "abc"
    assert history.submit() == "abc"
    assert history.lines() == ["abc", "ab"]


def test_cancel_restores_and_drops_scratch():
    history = History()
    _enter(history, "echo")
    history.start_line()
    history.up()
    history.backspace()
    history.cancel()
    assert history.lines() == ["echo"]
    history.start_line()
    assert history.up() == "echo"


def test_lines_excludes_line_in_progress():
    history = History()
    _enter(history, "pwd")
    history.start_line()
    history.type_char("z")
    assert history.lines() == ["pwd"]


def test_operations_need_active_line():
    history = History()
    with pytest.raises(RuntimeError):
        history.type_char("a")
    with pytest.raises(RuntimeError):
        history.submit()
    with pytest.raises(RuntimeError):
        history.up()


def test_start_line_twice_is_an_error():
    history = History()
    history.start_line()
    with pytest.raises(RuntimeError):
        history.start_line()


def test_type_char_rejects_strings():
    history = History()
    history.start_line()
    with pytest.raises(ValueError):
        history.type_char("ab")


def test_entry_defaults_are_empty():
    entry = HistoryEntry()
    assert (entry.original, entry.text) == ("", "")