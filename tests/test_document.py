import pytest

from plainpad.document import (
    TextBuffer,
    count_words,
    read_text_file,
    sort_word_frequencies,
    word_frequencies,
    write_text_file,
)
from plainpad.errors import FileReadError, FileWriteError, NotepadFileNotFoundError
from plainpad.transforms import SwapCaseTransform, UppercaseTransform


def test_sort_word_frequencies_by_count_then_word():
    pairs = [("b", 2), ("a", 2), ("c", 5)]
    assert sort_word_frequencies(pairs) == [("c", 5), ("a", 2), ("b", 2)]


def test_word_frequencies():
    assert word_frequencies("The cat, the DOG! 42") == [
        ("the", 2),
        ("cat", 1),
        ("dog", 1),
    ]


def test_word_frequencies_total_matches_letter_tokens():
    text = "one two two three three three ... 7"
    result = word_frequencies(text)
    assert sum(count for _, count in result) == len(text.split()) - 2
    assert result == sort_word_frequencies(result)


def test_count_words():
    assert count_words("") == 0
    assert count_words("one, two  three") == 3


def test_file_round_trip(tmp_path):
    path = tmp_path / "note.txt"
    text = "first line\nsecond línea\n"
    write_text_file(path, text)
    assert read_text_file(path) == text


def test_read_missing_file(tmp_path):
    with pytest.raises(NotepadFileNotFoundError):
        read_text_file(tmp_path / "missing.txt")


def test_read_undecodable_file(tmp_path):
    path = tmp_path / "binary.txt"
    path.write_bytes(b"\xff\xfe\xfa")
    with pytest.raises(FileReadError):
        read_text_file(path)


def test_read_directory_fails(tmp_path):
    with pytest.raises(FileReadError):
        read_text_file(tmp_path)


def test_write_into_missing_directory_fails(tmp_path):
    with pytest.raises(FileWriteError):
        write_text_file(tmp_path / "nope" / "note.txt", "text")


def test_line_count_and_cursor():
    buffer = TextBuffer("ab\ncd\nef")
    assert buffer.line_count() == len(buffer.text.splitlines())
    assert buffer.cursor_line_column() == (1, 1)
    buffer.select(buffer.text.index("d"))
    assert buffer.cursor_line_column() == (2, 2)


def test_select_out_of_range():
    with pytest.raises(ValueError):
        TextBuffer("abc").select(0, 10)


def test_find_next_advances_and_wraps():
    buffer = TextBuffer("foo bar foo")
    assert buffer.find_next("foo")
    assert (buffer.selection_start, buffer.selected_text) == (0, "foo")
    assert buffer.find_next("foo")
    assert buffer.selection_start == buffer.text.index("foo", 1)
    assert buffer.find_next("foo")
    assert buffer.selection_start == 0


def test_find_next_case_sensitivity():
    buffer = TextBuffer("Foo bar")
    assert buffer.find_next("FOO") is True
    assert buffer.selected_text == "Foo"
    assert buffer.find_next("FOO", case_sensitive=True) is False


def test_find_next_empty_term():
    buffer = TextBuffer("text")
    assert buffer.find_next("") is False
    assert not buffer.has_selection


def test_replace_current_replaces_then_selects_next():
    buffer = TextBuffer("foo bar foo")
    buffer.find_next("foo")
    assert buffer.replace_current("foo", "baz")
    assert buffer.text == "baz bar foo"
    assert buffer.selection_start == buffer.text.index("foo")


def test_replace_all():
    text = "foo bar foo foofoo"
    buffer = TextBuffer(text)
    assert buffer.replace_all("foo", "foofoo") == text.count("foo")
    assert buffer.text == text.replace("foo", "foofoo")


def test_replace_all_ignores_case_by_default():
    buffer = TextBuffer("Foo foo FOO")
    assert buffer.replace_all("foo", "x") == 3
    assert "foo" not in buffer.text.lower()
    assert buffer.replace_all("", "x") == 0


def test_apply_transform_whole_document_without_selection():
    text = "Hello world"
    buffer = TextBuffer(text)
    buffer.apply_transform(UppercaseTransform())
    assert buffer.text == UppercaseTransform().apply(text)


def test_apply_transform_only_on_selection():
    text = "abc DEF ghi"
    buffer = TextBuffer(text)
    buffer.select(4, 7)
    buffer.apply_transform(SwapCaseTransform())
    assert buffer.text[:4] == text[:4]
    assert buffer.text[7:] == text[7:]
    assert buffer.selected_text == SwapCaseTransform().apply(text[4:7])
    assert (buffer.anchor, buffer.position) == (4, 7)