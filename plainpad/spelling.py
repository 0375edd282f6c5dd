"""Dictionary-based spell checking with edit-distance suggestions."""

import re
from pathlib import Path
from string import ascii_letters

_LETTERS = frozenset(ascii_letters)
_WORD_PATTERN = re.compile(r"[A-Za-z]+")


def clean_word(text):
    """Keep only the ASCII letters of text, lower-cased."""
    return "".join(ch for ch in text if ch in _LETTERS).lower()


def edit_distance(left, right, max_distance):
    """Levenshtein distance, giving up with max_distance + 1 once it is exceeded."""
    previous = list(range(len(right) + 1))
    for i, left_ch in enumerate(left, 1):
        current = [i]
        for j, right_ch in enumerate(right, 1):
            current.append(
                min(
                    previous[j] + 1,
                    current[j - 1] + 1,
                    previous[j - 1] + (left_ch != right_ch),
                )
            )
        if min(current) > max_distance:
            return max_distance + 1
        previous = current
    return previous[-1]


class SpellChecker:
    """A word list plus a set of words the user chose to ignore."""

    def __init__(self, words=()):
        self._words = {word for word in map(clean_word, words) if word}
        self._ignored = set()

    def load(self, path):
        """Replace the word list with the words in a file.

        Raises OSError if the file cannot be opened. Returns True when at
        least one word was loaded.
        """
        content = Path(path).read_text(encoding="utf-8", errors="replace")
        self._words = {word for word in map(clean_word, content.split()) if word}
        return self.is_loaded()

    def is_loaded(self):
        return bool(self._words)

    def is_misspelled(self, text):
        word = clean_word(text)
        return bool(word) and word not in self._ignored and word not in self._words

    def ignore_word(self, text):
        word = clean_word(text)
        if word:
            self._ignored.add(word)

    def suggestions(self, text, limit=5):
        """Words within two edits of text that share its first letter.

        Ordered by distance, then alphabetically. A limit of 0 means no limit.
        """
        word = clean_word(text)
        if not word:
            return []

        candidates = []
        for candidate in self._words:
            if candidate[0] != word[0]:
                continue
            if abs(len(candidate) - len(word)) > 2:
                continue
            distance = edit_distance(word, candidate, 2)
            if distance <= 2:
                candidates.append((distance, candidate))

        candidates.sort()
        ranked = [candidate for _, candidate in candidates]
        return ranked if limit == 0 else ranked[:limit]


def misspelled_spans(checker, text):
    """Return (start, end) index pairs of the misspelled words in text."""
    return [
        match.span()
        for match in _WORD_PATTERN.finditer(text)
        if checker.is_misspelled(match.group())
    ]