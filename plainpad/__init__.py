"""A small plain-text notepad with case transforms, find and replace, word frequencies and spell checking."""

__version__ = "0.1.0"