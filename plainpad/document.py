"""Editor text model: searching, replacing, transforming and file I/O."""

import re
from collections import Counter
from pathlib import Path
from string import ascii_letters

from plainpad.errors import FileReadError, FileWriteError, NotepadFileNotFoundError

_LETTERS = frozenset(ascii_letters)
_WORD_PATTERN = re.compile(r"\b\w+\b")


def sort_word_frequencies(frequencies):
    """Sort (word, count) pairs by count descending, then word ascending."""
    return sorted(frequencies, key=lambda item: (-item[1], item[0]))


def word_frequencies(text):
    """Count whitespace-separated words, lower-cased and stripped to letters."""
    counts = Counter()
    for token in text.lower().split():
        word = "".join(ch for ch in token if ch in _LETTERS)
        if word:
            counts[word] += 1
    return sort_word_frequencies(counts.items())


def count_words(text):
    """Number of word-character runs in text, as shown in the status bar."""
    return sum(1 for _ in _WORD_PATTERN.finditer(text))


def read_text_file(path):
    """Read a text file, raising a NotepadError subclass on failure."""
    file_path = Path(path)
    if not file_path.exists():
        raise NotepadFileNotFoundError(str(path))
    try:
        return file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FileReadError(str(path)) from exc


def write_text_file(path, text):
    """Write text to a file, raising FileWriteError on failure."""
    try:
        Path(path).write_text(text, encoding="utf-8")
    except OSError as exc:
        raise FileWriteError(str(path)) from exc


class TextBuffer:
    """Plain text with a cursor that may span a selection from anchor to position."""

    def __init__(self, text=""):
        self.text = text
        self.anchor = 0
        self.position = 0

    def __repr__(self):
        return (
            f"TextBuffer(text={self.text!r}, anchor={self.anchor}, "
            f"position={self.position})"
        )

    @property
    def has_selection(self):
        return self.anchor != self.position

    @property
    def selection_start(self):
        return min(self.anchor, self.position)

    @property
    def selection_end(self):
        return max(self.anchor, self.position)

    @property
    def selected_text(self):
        return self.text[self.selection_start:self.selection_end]

    def select(self, start, end=None):
        """Select from start to end, or just move the cursor when end is omitted."""
        if end is None:
            end = start
        for index in (start, end):
            if not 0 <= index <= len(self.text):
                raise ValueError(f"position {index} outside text of length {len(self.text)}")
        self.anchor = start
        self.position = end

    def line_count(self):
        return self.text.count("\n") + 1

    def cursor_line_column(self):
        """One-based (line, column) of the cursor position."""
        line = self.text.count("\n", 0, self.position) + 1
        line_start = self.text.rfind("\n", 0, self.position) + 1
        return line, self.position - line_start + 1

    def _search(self, term, start, case_sensitive):
        flags = 0 if case_sensitive else re.IGNORECASE
        match = re.compile(re.escape(term), flags).search(self.text, start)
        return match.span() if match else None

    def _insert(self, replacement):
        start, end = self.selection_start, self.selection_end
        self.text = self.text[:start] + replacement + self.text[end:]
        self.anchor = self.position = start + len(replacement)

    def find_next(self, term, case_sensitive=False):
        """Select the next match after the cursor, wrapping to the start once.

        Returns whether a match was found.
        """
        if not term:
            return False
        span = self._search(term, self.selection_end, case_sensitive)
        if span is None:
            span = self._search(term, 0, case_sensitive)
        if span is None:
            return False
        self.anchor, self.position = span
        return True

    def replace_current(self, term, replacement, case_sensitive=False):
        """Replace the selection, if any, then select the next match."""
        if self.has_selection:
            self._insert(replacement)
        return self.find_next(term, case_sensitive)

    def replace_all(self, term, replacement, case_sensitive=False):
        """Replace every match from the start of the text; return the count."""
        if not term:
            return 0
        self.anchor = self.position = 0
        replaced = 0
        while (span := self._search(term, self.position, case_sensitive)) is not None:
            self.anchor, self.position = span
            self._insert(replacement)
            replaced += 1
        return replaced

    def apply_transform(self, transform):
        """Apply a transform to the selection, or to the whole text if none."""
        if self.has_selection:
            start, end = self.selection_start, self.selection_end
        else:
            start, end = 0, len(self.text)
        original = self.text[start:end]
        result = transform.apply(original)
        if result != original:
            self.text = self.text[:start] + result + self.text[end:]
            limit = len(self.text)
            self.anchor = min(self.anchor, limit)
            self.position = min(self.position, limit)