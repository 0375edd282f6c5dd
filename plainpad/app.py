"""The notepad window: editor state, file handling and a Tk front end."""

import argparse
import os

try:
    import tkinter as tk
    from tkinter import colorchooser, filedialog, messagebox, ttk
    from tkinter import font as tkfont
except ImportError:  # Tk is optional; the window model works without it.
    tk = None

from plainpad.document import (
    TextBuffer,
    count_words,
    read_text_file,
    word_frequencies,
    write_text_file,
)
from plainpad.errors import NotepadError
from plainpad.spelling import SpellChecker, clean_word, misspelled_spans
from plainpad.transforms import default_transforms

APP_NAME = "Notepad"
DEFAULT_DICTIONARY = "data/words.txt"
ZOOM_STEP = 3


def window_title(path):
    """Title shown for the window editing path, or for an unsaved document."""
    return f"{APP_NAME}: {path}" if path else APP_NAME


def status_message(buffer):
    """Status bar text: word and line counts and the cursor's line and column."""
    line, column = buffer.cursor_line_column()
    return (
        f"Words: {count_words(buffer.text)}  Lines: {buffer.line_count()}  "
        f"Line: {line}  Column: {column}"
    )


class NotepadWindow:
    """Editor state behind the notepad window.

    User interaction goes through three callables: ask_open_path and
    ask_save_path return a path, or an empty value when cancelled, and
    show_error displays a message. Every reported message is also kept
    in errors.
    """

    def __init__(
        self,
        ask_open_path=None,
        ask_save_path=None,
        show_error=None,
        spell_checker=None,
        dictionary_path=DEFAULT_DICTIONARY,
    ):
        self.buffer = TextBuffer()
        self.current_file = None
        self.transforms = default_transforms()
        self.zoom_steps = 0
        self.title = window_title(None)
        self.status = ""
        self.errors = []
        self._ask_open_path = ask_open_path or (lambda: None)
        self._ask_save_path = ask_save_path or (lambda: None)
        self._show_error = show_error
        self.spell_checker, self.highlighting = self._setup_spell_checker(
            spell_checker, dictionary_path
        )
        self.update_status_bar()

    def _report(self, message):
        self.errors.append(message)
        if self._show_error is not None:
            self._show_error(message)

    def _setup_spell_checker(self, checker, dictionary_path):
        if checker is not None:
            return checker, True
        checker = SpellChecker()
        try:
            loaded = checker.load(dictionary_path)
        except OSError:
            loaded = False
        if not loaded:
            self._report(f"Could not load {dictionary_path}")
        return checker, loaded

    def new_file(self):
        """Clear the document and forget its file."""
        self.buffer = TextBuffer()
        self.current_file = None
        self.update_title()
        self.update_status_bar()

    def open_file(self):
        """Ask for a file and load it; return whether a file was opened."""
        path = self._ask_open_path()
        if not path:
            return False
        try:
            contents = read_text_file(path)
        except NotepadError as exc:
            self._report(str(exc))
            return False
        self.buffer = TextBuffer(contents)
        self.current_file = str(path)
        self.update_title()
        self.update_status_bar()
        return True

    def save_file(self):
        """Save to the current file, asking for one if there is none."""
        if not self.current_file:
            return self.save_file_as()
        try:
            write_text_file(self.current_file, self.buffer.text)
        except NotepadError as exc:
            self._report(str(exc))
            return False
        return True

    def save_file_as(self):
        """Ask for a path and save there; return whether the file was written."""
        path = self._ask_save_path()
        if not path:
            return False
        self.current_file = str(path)
        saved = self.save_file()
        self.update_title()
        return saved

    def update_title(self):
        self.title = window_title(self.current_file)
        return self.title

    def update_status_bar(self):
        self.status = status_message(self.buffer)
        return self.status

    def apply_transform(self, transform):
        """Transform the selection, or the whole text when nothing is selected."""
        self.buffer.apply_transform(transform)
        self.update_status_bar()

    def zoom_in(self):
        self.zoom_steps += ZOOM_STEP

    def zoom_out(self):
        self.zoom_steps -= ZOOM_STEP

    def reset_zoom(self):
        """Return to the original size; return the size change this makes."""
        change = -self.zoom_steps
        self.zoom_steps = 0
        return change

    def show_word_frequency(self):
        """Return (word, count) pairs for the document, most frequent first."""
        return word_frequencies(self.buffer.text)

    def check_spelling(self):
        """Return (start, end) spans of misspelled words, or none without a dictionary."""
        if not self.highlighting:
            return []
        return misspelled_spans(self.spell_checker, self.buffer.text)

    def spelling_suggestions(self, word):
        """Suggestions for a misspelled word, or None if the word is fine."""
        cleaned = clean_word(word)
        if not cleaned or not self.spell_checker.is_misspelled(cleaned):
            return None
        return self.spell_checker.suggestions(cleaned)

    def ignore_word(self, word):
        """Stop reporting word as misspelled and return the new spans."""
        self.spell_checker.ignore_word(word)
        return self.check_spelling()


class _TkNotepad:
    """Tk front end driving a NotepadWindow."""

    def __init__(self, root):
        self.root = root
        root.geometry("800x600")
        self.window = NotepadWindow(
            ask_open_path=lambda: filedialog.askopenfilename(parent=root, title="Open File"),
            ask_save_path=lambda: filedialog.asksaveasfilename(
                parent=root, title="Save File As"
            ),
            show_error=lambda message: messagebox.showerror("Error", message, parent=root),
        )

        self.base_size = 11
        self.font = tkfont.Font(root=root, family="Courier", size=self.base_size)
        self.bold_font = self.font.copy()
        self.bold_font.configure(weight="bold")
        self.italic_font = self.font.copy()
        self.italic_font.configure(slant="italic")
        self.fonts = (self.font, self.bold_font, self.italic_font)

        self.status = tk.Label(root, anchor="w", relief="sunken")
        self.status.pack(side="bottom", fill="x")
        self.editor = tk.Text(root, wrap="word", undo=True, font=self.font)
        self.editor.pack(fill="both", expand=True)

        self.editor.tag_configure("bold", font=self.bold_font)
        self.editor.tag_configure("italic", font=self.italic_font)
        self.editor.tag_configure("underline", underline=True)
        self.editor.tag_configure("misspelled", underline=True)
        try:
            self.editor.tag_configure("misspelled", underlinefg="red")
        except tk.TclError:
            pass

        self.find_dialog = None
        self._build_menus()
        self._bind_keys()
        self._refresh_chrome()

    # Synchronisation between the widget and the text buffer.

    def _index(self, offset):
        return f"1.0 + {offset} chars"

    def _offset(self, index):
        return len(self.editor.get("1.0", index))

    def _pull(self):
        buffer = self.window.buffer
        buffer.text = self.editor.get("1.0", "end-1c")
        selection = self.editor.tag_ranges("sel")
        if selection:
            buffer.anchor = self._offset(selection[0])
            buffer.position = self._offset(selection[1])
        else:
            buffer.anchor = buffer.position = self._offset("insert")

    def _push(self):
        buffer = self.window.buffer
        old = self.editor.get("1.0", "end-1c")
        new = buffer.text
        if old != new and len(old) == len(new):
            for offset, (old_ch, new_ch) in enumerate(zip(old, new)):
                if old_ch != new_ch:
                    index = self._index(offset)
                    tags = tuple(t for t in self.editor.tag_names(index) if t != "sel")
                    self.editor.delete(index)
                    self.editor.insert(index, new_ch, tags)
        elif old != new:
            prefix = len(os.path.commonprefix([old, new]))
            suffix = len(os.path.commonprefix([old[prefix:][::-1], new[prefix:][::-1]]))
            self.editor.delete(self._index(prefix), self._index(len(old) - suffix))
            self.editor.insert(self._index(prefix), new[prefix:len(new) - suffix])
        self.editor.tag_remove("sel", "1.0", "end")
        if buffer.has_selection:
            self.editor.tag_add(
                "sel", self._index(buffer.selection_start), self._index(buffer.selection_end)
            )
        self.editor.mark_set("insert", self._index(buffer.position))
        self.editor.see("insert")
        self._refresh_chrome()

    def _run(self, action):
        self._pull()
        action()
        self._push()

    def _load_editor(self):
        self.editor.delete("1.0", "end")
        self.editor.insert("1.0", self.window.buffer.text)
        self.editor.edit_reset()
        self.editor.mark_set("insert", "1.0")
        self._refresh_chrome()

    def _refresh_chrome(self):
        self._pull()
        self.window.update_status_bar()
        self.status.configure(text=self.window.status)
        self.root.title(self.window.title)
        self._highlight()

    def _highlight(self):
        self.editor.tag_remove("misspelled", "1.0", "end")
        for start, end in self.window.check_spelling():
            self.editor.tag_add("misspelled", self._index(start), self._index(end))

    # Menus and key bindings.

    def _build_menus(self):
        menubar = tk.Menu(self.root)

        file_menu = tk.Menu(menubar, tearoff=False)
        file_menu.add_command(label="New", command=self._new)
        file_menu.add_separator()
        file_menu.add_command(label="Open...", command=self._open)
        file_menu.add_command(label="Save", command=self._save)
        file_menu.add_command(label="Save As...", command=self._save_as)
        file_menu.add_separator()
        file_menu.add_command(label="Exit", command=self.root.destroy)
        menubar.add_cascade(label="File", menu=file_menu)

        edit_menu = tk.Menu(menubar, tearoff=False)
        edit_menu.add_command(label="Undo", accelerator="Ctrl+Z", command=self._undo)
        edit_menu.add_command(label="Redo", accelerator="Ctrl+Y", command=self._redo)
        edit_menu.add_separator()
        for label, event in (("Cut", "<<Cut>>"), ("Copy", "<<Copy>>"), ("Paste", "<<Paste>>")):
            edit_menu.add_command(
                label=label, command=lambda e=event: self.editor.event_generate(e)
            )
        edit_menu.add_separator()
        edit_menu.add_command(label="Select All", accelerator="Ctrl+A", command=self._select_all)
        menubar.add_cascade(label="Edit", menu=edit_menu)

        format_menu = tk.Menu(menubar, tearoff=False)
        case_menu = tk.Menu(format_menu, tearoff=False)
        for transform in self.window.transforms:
            case_menu.add_command(
                label=transform.name,
                command=lambda t=transform: self._run(lambda: self.window.apply_transform(t)),
            )
        format_menu.add_cascade(label="Text Case", menu=case_menu)
        format_menu.add_separator()
        format_menu.add_command(label="Bold", accelerator="Ctrl+B",
                                command=lambda: self._toggle_tag("bold"))
        format_menu.add_command(label="Italic", accelerator="Ctrl+I",
                                command=lambda: self._toggle_tag("italic"))
        format_menu.add_command(label="Underline", accelerator="Ctrl+U",
                                command=lambda: self._toggle_tag("underline"))
        format_menu.add_separator()
        format_menu.add_command(label="Text Color...", command=self._choose_text_color)
        menubar.add_cascade(label="Format", menu=format_menu)

        view_menu = tk.Menu(menubar, tearoff=False)
        view_menu.add_command(label="Zoom In", accelerator="Ctrl++",
                              command=lambda: self._zoom(self.window.zoom_in))
        view_menu.add_command(label="Zoom Out", accelerator="Ctrl+-",
                              command=lambda: self._zoom(self.window.zoom_out))
        view_menu.add_command(label="Reset Zoom", accelerator="Ctrl+0",
                              command=lambda: self._zoom(self.window.reset_zoom))
        menubar.add_cascade(label="View", menu=view_menu)

        search_menu = tk.Menu(menubar, tearoff=False)
        search_menu.add_command(label="Find / Replace...", accelerator="Ctrl+F",
                                command=self._show_find_replace)
        menubar.add_cascade(label="Search", menu=search_menu)

        tools_menu = tk.Menu(menubar, tearoff=False)
        tools_menu.add_command(label="Check Spelling...", command=self._highlight)
        tools_menu.add_separator()
        tools_menu.add_command(label="Word Frequency...", command=self._show_word_frequency)
        menubar.add_cascade(label="Tools", menu=tools_menu)

        self.root.configure(menu=menubar)

    def _bind_keys(self):
        shortcuts = {
            "<Control-b>": lambda: self._toggle_tag("bold"),
            "<Control-i>": lambda: self._toggle_tag("italic"),
            "<Control-u>": lambda: self._toggle_tag("underline"),
            "<Control-f>": self._show_find_replace,
            "<Control-y>": self._redo,
            "<Control-a>": self._select_all,
            "<Control-plus>": lambda: self._zoom(self.window.zoom_in),
            "<Control-equal>": lambda: self._zoom(self.window.zoom_in),
            "<Control-minus>": lambda: self._zoom(self.window.zoom_out),
            "<Control-0>": lambda: self._zoom(self.window.reset_zoom),
        }
        for sequence, action in shortcuts.items():
            self.editor.bind(sequence, lambda _event, a=action: (a(), "break")[1])
        self.editor.bind("<<Modified>>", self._on_modified)
        self.editor.bind("<KeyRelease>", lambda _event: self._refresh_chrome())
        self.editor.bind("<ButtonRelease-1>", lambda _event: self._refresh_chrome())
        self.editor.bind("<Button-3>", self._show_context_menu)

    def _on_modified(self, _event):
        if self.editor.edit_modified():
            self.editor.edit_modified(False)
            self._refresh_chrome()

    # Actions.

    def _new(self):
        self.window.new_file()
        self._load_editor()

    def _open(self):
        if self.window.open_file():
            self._load_editor()

    def _save(self):
        self._pull()
        self.window.save_file()
        self._refresh_chrome()

    def _save_as(self):
        self._pull()
        self.window.save_file_as()
        self._refresh_chrome()

    def _undo(self):
        try:
            self.editor.edit_undo()
        except tk.TclError:
            pass

    def _redo(self):
        try:
            self.editor.edit_redo()
        except tk.TclError:
            pass

    def _select_all(self):
        self.editor.tag_add("sel", "1.0", "end-1c")
        self.editor.mark_set("insert", "end-1c")

    def _selection_or_document(self):
        if self.editor.tag_ranges("sel"):
            return "sel.first", "sel.last"
        return "1.0", "end"

    def _toggle_tag(self, tag):
        if not self.editor.tag_ranges("sel"):
            return
        if tag in self.editor.tag_names("sel.first"):
            self.editor.tag_remove(tag, "sel.first", "sel.last")
        else:
            self.editor.tag_add(tag, "sel.first", "sel.last")

    def _choose_text_color(self):
        _rgb, colour = colorchooser.askcolor(parent=self.root, title="Choose Text Color")
        if not colour:
            return
        start, end = self._selection_or_document()
        for tag in self.editor.tag_names():
            if tag.startswith("color-"):
                self.editor.tag_remove(tag, start, end)
        tag = f"color-{colour}"
        self.editor.tag_configure(tag, foreground=colour)
        self.editor.tag_add(tag, start, end)

    def _zoom(self, action):
        action()
        size = max(1, self.base_size + self.window.zoom_steps)
        for font in self.fonts:
            font.configure(size=size)

    def _show_find_replace(self):
        if self.find_dialog is None:
            dialog = tk.Toplevel(self.root)
            dialog.title("Find / Replace")
            dialog.protocol("WM_DELETE_WINDOW", dialog.withdraw)
            find_var, replace_var = tk.StringVar(), tk.StringVar()
            case_var = tk.BooleanVar()
            tk.Label(dialog, text="Find:").grid(row=0, column=0, sticky="w")
            tk.Entry(dialog, textvariable=find_var).grid(row=0, column=1, sticky="we")
            tk.Label(dialog, text="Replace with:").grid(row=1, column=0, sticky="w")
            tk.Entry(dialog, textvariable=replace_var).grid(row=1, column=1, sticky="we")
            tk.Checkbutton(dialog, text="Case sensitive", variable=case_var).grid(
                row=2, column=1, sticky="w"
            )
            buffer = lambda: self.window.buffer
            buttons = (
                ("Find Next", lambda: buffer().find_next(find_var.get(), case_var.get())),
                ("Replace", lambda: buffer().replace_current(
                    find_var.get(), replace_var.get(), case_var.get())),
                ("Replace All", lambda: buffer().replace_all(
                    find_var.get(), replace_var.get(), case_var.get())),
            )
            for row, (label, action) in enumerate(buttons):
                tk.Button(dialog, text=label, command=lambda a=action: self._run(a)).grid(
                    row=row, column=2, sticky="we"
                )
            tk.Button(dialog, text="Close", command=dialog.withdraw).grid(
                row=3, column=2, sticky="we"
            )
            dialog.columnconfigure(1, weight=1)
            self.find_dialog = dialog
        self.find_dialog.deiconify()
        self.find_dialog.lift()
        self.find_dialog.focus_force()

    def _show_word_frequency(self):
        self._pull()
        dialog = tk.Toplevel(self.root)
        dialog.title("Word Frequency")
        table = ttk.Treeview(dialog, columns=("word", "count"), show="headings")
        table.heading("word", text="Word", anchor="w")
        table.heading("count", text="Count", anchor="e")
        table.column("word", anchor="w", stretch=True)
        table.column("count", anchor="e", stretch=False, width=80)
        for word, count in self.window.show_word_frequency():
            table.insert("", "end", values=(word, count))
        table.pack(fill="both", expand=True)
        dialog.transient(self.root)
        dialog.grab_set()
        self.root.wait_window(dialog)

    def _show_context_menu(self, event):
        index = self.editor.index(f"@{event.x},{event.y}")
        start, end = f"{index} wordstart", f"{index} wordend"
        word = self.editor.get(start, end)
        suggestions = self.window.spelling_suggestions(word)
        menu = tk.Menu(self.root, tearoff=False)
        if suggestions is None:
            for label, virtual in (("Cut", "<<Cut>>"), ("Copy", "<<Copy>>"), ("Paste", "<<Paste>>")):
                menu.add_command(
                    label=label, command=lambda v=virtual: self.editor.event_generate(v)
                )
            menu.add_separator()
            menu.add_command(label="Select All", command=self._select_all)
        else:
            start, end = self.editor.index(start), self.editor.index(end)
            if not suggestions:
                menu.add_command(label="No suggestions", state="disabled")
            for suggestion in suggestions:
                menu.add_command(
                    label=suggestion,
                    command=lambda s=suggestion: self._replace_range(start, end, s),
                )
            menu.add_separator()
            menu.add_command(label="Ignore", command=lambda: self._ignore(word))
        try:
            menu.tk_popup(event.x_root, event.y_root)
        finally:
            menu.grab_release()
        return "break"

    def _replace_range(self, start, end, text):
        self.editor.delete(start, end)
        self.editor.insert(start, text)
        self._refresh_chrome()

    def _ignore(self, word):
        self.window.ignore_word(word)
        self._highlight()


def main(argv=None):
    """Start the notepad window."""
    parser = argparse.ArgumentParser(prog="plainpad", description="A simple notepad.")
    parser.parse_args(argv)
    if tk is None:
        parser.error("the graphical interface needs Tk, which is not available")
    root = tk.Tk()
    _TkNotepad(root)
    root.mainloop()
    return 0