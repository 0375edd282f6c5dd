import pytest

from plainpad.errors import (
    FileReadError,
    FileWriteError,
    NotepadError,
    NotepadFileNotFoundError,
)


def test_file_not_found_message():
    error = NotepadFileNotFoundError("notes.txt")
    assert str(error) == "File not found: 'notes.txt'"
    assert error.filename == "notes.txt"


def test_file_read_message():
    error = FileReadError("notes.txt")
    assert str(error) == "Failed to read file: 'notes.txt'"
    assert error.filename == "notes.txt"


def test_file_write_message():
    error = FileWriteError("notes.txt")
    assert str(error) == "Failed to write file: 'notes.txt'"
    assert error.filename == "notes.txt"


@pytest.mark.parametrize(
    ("error_type", "expected"),
    [
        (NotepadFileNotFoundError, "File not found: 'data.txt'"),
        (FileReadError, "Failed to read file: 'data.txt'"),
        (FileWriteError, "Failed to write file: 'data.txt'"),
    ],
)
def test_errors_caught_as_notepad_error(error_type, expected):
    error = error_type("data.txt")
    with pytest.raises(NotepadError) as info:
        raise error
    assert info.value is error
    assert str(info.value) == expected
    assert info.value.filename == "data.txt"