import pytest

from puzzlebox.utility import load, split


def test_split_on_spaces():
    assert split("alpha beta gamma", " ") == ["alpha", "beta", "gamma"]


def test_split_drops_empty_pieces():
    assert split("3   4", " ") == ["3", "4"]
    assert split(",a,,b,", ",") == ["a", "b"]


def test_split_without_separator_returns_whole_line():
    assert split("abc", ",") == ["abc"]


def test_split_of_empty_line_is_empty():
    assert split("", " ") == []
    assert split("   ", " ") == []


def test_split_pieces_rejoin_to_compacted_line():
    line = "a  b c   d"
    assert " ".join(split(line, " ")) == "a b c d"


def test_load_reads_lines(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("first\nsecond\n\nfourth\n", encoding="utf-8")
    assert load(path) == ["first", "second", "", "fourth"]


def test_load_without_trailing_newline(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("one\ntwo", encoding="utf-8")
    assert load(path) == ["one", "two"]


def test_load_empty_file(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_text("", encoding="utf-8")
    assert load(path) == []


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load(tmp_path / "missing.txt")