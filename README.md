# plainpad

A small plain-text notepad with a Tk window. Besides ordinary editing
(undo, redo, cut, copy, paste, select all) it offers:

- **Text case** transforms: To Uppercase, To Lowercase, Capitalize Words,
  Sentence Case and Swap Case, applied to the selection or, when nothing is
  selected, to the whole document. They change ASCII letters only.
- **Find / Replace** with an optional case-sensitive mode; searching wraps
  around to the start of the document, and Replace All works from the start.
- **Word frequency**: a table of every word in the document, lower-cased and
  stripped to letters, most frequent first, ties in alphabetical order.
- **Spell checking** against a word list: misspelled words are underlined,
  and right-clicking one offers up to five suggestions and an "Ignore" entry.
- **Formatting** of the selection: bold, italic, underline and text colour.
- **Zoom** in, out and back to the original size.
- A status bar showing the word count, the line count and the cursor's line
  and column.

## Installing

```
pip install .
```

The window needs Python's `tkinter`. Without it the `plainpad` command exits
with an error; the rest of the package still works.

## Running

```
plainpad
```

The spell checker reads its dictionary from `data/words.txt`, relative to the
directory the editor is started from. The file holds words separated by
whitespace; if it is missing or holds no words, the editor reports an error
and runs without spell checking.

## Using the pieces from Python

The text handling works without the window.

```python
from plainpad.transforms import UppercaseTransform, default_transforms
from plainpad.spelling import SpellChecker, clean_word, misspelled_spans

UppercaseTransform().apply("hello")      # "HELLO"
[t.name for t in default_transforms()]   # the five transforms, in menu order

clean_word("Hello!")                     # "hello"

checker = SpellChecker(["hello", "help", "world"])
checker.is_misspelled("helo")            # True
checker.suggestions("helo", 5)           # ["hello", "help"]
misspelled_spans(checker, "helo world")  # [(0, 4)]
```

`SpellChecker.load(path)` replaces the word list with the words of a file and
returns whether any were loaded; `ignore_word` stops a word being reported.

`plainpad.document` provides:

- `word_frequencies(text)` and `sort_word_frequencies(pairs)`
- `count_words(text)`
- `read_text_file(path)` and `write_text_file(path, text)`, which read and
  write UTF-8 text
- `TextBuffer`, which holds the text with a cursor and selection and supports
  `select`, `find_next`, `replace_current`, `replace_all`, `apply_transform`,
  `line_count` and `cursor_line_column`

```python
from plainpad.document import TextBuffer

buffer = TextBuffer("one two one")
buffer.replace_all("one", "three")       # 2
buffer.text                              # "three two three"
```

Problems reading or writing files are raised as `plainpad.errors.NotepadError`
subclasses: `NotepadFileNotFoundError`, `FileReadError` and `FileWriteError`.

`plainpad.app.NotepadWindow` is the editor state behind the window. It takes
callables for asking for an open path, asking for a save path and showing an
error, and offers `open_file`, `save_file`, `save_file_as`, `apply_transform`,
`zoom_in`, `zoom_out`, `reset_zoom`, `show_word_frequency`, `check_spelling`,
`spelling_suggestions` and `ignore_word`; its `title` and `status` hold the
window title and status bar text.

## What it does not do

Files are saved as plain text only: bold, italic, underline and colour are
shown in the window but are not written to the file. There is no font
chooser; the editor uses a fixed-width font whose size follows the zoom.

## Tests

```
pip install .[test]
pytest
```