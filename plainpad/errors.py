"""Exceptions raised by the notepad for file operations."""


class NotepadError(Exception):
    """Base class for every error the notepad reports to the user."""


class NotepadFileNotFoundError(NotepadError):
    """Raised when a file to be opened does not exist."""

    def __init__(self, filename):
        self.filename = filename
        super().__init__(f"File not found: '{filename}'")


class FileReadError(NotepadError):
    """Raised when an existing file cannot be read."""

    def __init__(self, filename):
        self.filename = filename
        super().__init__(f"Failed to read file: '{filename}'")


class FileWriteError(NotepadError):
    """Raised when a file cannot be written."""

    def __init__(self, filename):
        self.filename = filename
        super().__init__(f"Failed to write file: '{filename}'")