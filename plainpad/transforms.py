"""Case transformations applied to editor text.

All transformations work on ASCII letters only and leave every other
character untouched, so the result always has the length of the input.
"""

from abc import ABC, abstractmethod
from string import ascii_letters, ascii_lowercase, ascii_uppercase

_TO_UPPER = str.maketrans(ascii_lowercase, ascii_uppercase)
_TO_LOWER = str.maketrans(ascii_uppercase, ascii_lowercase)
_SWAP = str.maketrans(
    ascii_lowercase + ascii_uppercase, ascii_uppercase + ascii_lowercase
)
_LETTERS = frozenset(ascii_letters)
_WHITESPACE = frozenset(" \t\n\v\f\r")


class TextTransform(ABC):
    """A named, length-preserving transformation of text."""

    name: str = ""

    @abstractmethod
    def apply(self, text):
        """Return the transformed text."""

    def __repr__(self):
        return f"{type(self).__name__}()"


class UppercaseTransform(TextTransform):
    name = "To Uppercase"

    def apply(self, text):
        return text.translate(_TO_UPPER)


class LowercaseTransform(TextTransform):
    name = "To Lowercase"

    def apply(self, text):
        return text.translate(_TO_LOWER)


class CapitalizeTransform(TextTransform):
    """Upper-case the first character after whitespace, lower-case the rest."""

    name = "Capitalize Words"

    def apply(self, text):
        result = []
        capitalize_next = True
        for ch in text:
            if ch in _WHITESPACE:
                capitalize_next = True
            elif capitalize_next:
                ch = ch.translate(_TO_UPPER)
                capitalize_next = False
            else:
                ch = ch.translate(_TO_LOWER)
            result.append(ch)
        return "".join(result)


class SentenceCaseTransform(TextTransform):
    """Upper-case the first letter after each full stop, lower-case the rest."""

    name = "Sentence Case"

    def apply(self, text):
        result = []
        capitalize_next = True
        for ch in text:
            if ch == ".":
                capitalize_next = True
            elif ch in _LETTERS:
                if capitalize_next:
                    ch = ch.translate(_TO_UPPER)
                    capitalize_next = False
                else:
                    ch = ch.translate(_TO_LOWER)
            result.append(ch)
        return "".join(result)


class SwapCaseTransform(TextTransform):
    name = "Swap Case"

    def apply(self, text):
        return text.translate(_SWAP)


def default_transforms():
    """Return the transformations offered in the Text Case menu, in order."""
    return [
        UppercaseTransform(),
        LowercaseTransform(),
        CapitalizeTransform(),
        SentenceCaseTransform(),
        SwapCaseTransform(),
    ]