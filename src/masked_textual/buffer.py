"""Editable text surface used by the mask machines.

The buffer mirrors what a text box exposes: the current text, a selection
(start and length), a caret and an optional maximum length.  The mask
machines read and mutate it synchronously while handling one key event.
"""

from __future__ import annotations


def simulate_edit(text: str, selection_start: int, selection_length: int, char: str) -> str:
    """Return the text that results from typing *char* over the selection.

    Args:
        text: The current text.
        selection_start: Index where the selection (or caret) begins.
        selection_length: Number of selected characters, 0 for a bare caret.
        char: The character being typed.

    Returns:
        The candidate text.  The input text is not modified.
    """
    start = max(0, min(selection_start, len(text)))
    end = max(start, min(start + selection_length, len(text)))
    return text[:start] + char + text[end:]


def rescan(text: str, caret: int, delimiter: str) -> tuple[int, int]:
    """Recount the entry state left of the caret.

    Args:
        text: The current text.
        caret: Caret position; only characters before it are considered.
        delimiter: The mask's separator character.

    Returns:
        A ``(digits_since_delimiter, delimiters)`` pair: the length of the
        run after the last separator before the caret (or from index 0 when
        there is none), and the number of separators before the caret.
    """
    head = text[: max(0, min(caret, len(text)))]
    last = head.rfind(delimiter)
    return len(head) - last - 1, head.count(delimiter)


class TextBuffer:
    """Text, selection, and caret of a single field."""

    def __init__(self, text: str = "", max_length: int | None = None) -> None:
        """Initialize the buffer with the caret at the end of *text*.

        Args:
            text: Initial content.
            max_length: Maximum number of characters, or None for unbounded.
        """
        self._text = text
        self._max_length = max_length
        self._selection_start = len(text)
        self._selection_length = 0

    def __repr__(self) -> str:
        return (
            f"TextBuffer(text={self._text!r}, caret={self._selection_start}, "
            f"selection={self._selection_length}, max_length={self._max_length})"
        )

    def current_text(self) -> str:
        return self._text

    def selected_text(self) -> str:
        start = self._selection_start
        return self._text[start : start + self._selection_length]

    def selection_start(self) -> int:
        return self._selection_start

    def selection_length(self) -> int:
        return self._selection_length

    def text_length(self) -> int:
        return len(self._text)

    def max_length(self) -> int | None:
        return self._max_length

    @property
    def caret(self) -> int:
        """Caret position (the end of the selection when one exists)."""
        return self._selection_start + self._selection_length

    def set_max_length(self, max_length: int | None) -> None:
        self._max_length = max_length

    def is_select_all(self) -> bool:
        """Whether the whole text is selected; an empty buffer counts too."""
        return self.selected_text() == self._text

    def at_end(self) -> bool:
        """Whether the caret sits after the last character with no selection."""
        return self._selection_length == 0 and self._selection_start == len(self._text)

    def is_full(self) -> bool:
        """Whether typing over the current selection would exceed the maximum length."""
        if self._max_length is None:
            return False
        return len(self._text) - self._selection_length >= self._max_length

    def sync(self, text: str, selection_start: int, selection_length: int = 0) -> None:
        """Adopt the text and selection reported by the host widget."""
        self._text = text
        self._selection_start = max(0, min(selection_start, len(text)))
        self._selection_length = max(0, min(selection_length, len(text) - self._selection_start))

    def set_text(self, text: str) -> None:
        """Replace the whole text and move the caret to the end."""
        self._text = text
        self.set_caret(len(text))

    def set_caret(self, pos: int) -> None:
        """Move the caret, collapsing any selection."""
        self._selection_start = max(0, min(pos, len(self._text)))
        self._selection_length = 0

    def replace_selection(self, new_text: str) -> None:
        """Replace the selected range with *new_text* and place the caret after it."""
        start = self._selection_start
        self._text = simulate_edit(self._text, start, self._selection_length, new_text)
        self.set_caret(start + len(new_text))

    def append(self, suffix: str) -> None:
        """Add *suffix* at the end of the text and move the caret there."""
        self._text += suffix
        self.set_caret(len(self._text))

    def clear(self) -> None:
        self._text = ""
        self.set_caret(0)

    def insert_default(self, char: str) -> bool:
        """Type *char* the way a plain text box would.

        Returns:
            False when the insertion would exceed the maximum length, in
            which case the buffer is left unchanged.
        """
        new_length = len(self._text) - self._selection_length + len(char)
        if self._max_length is not None and new_length > self._max_length:
            return False
        self.replace_selection(char)
        return True

    def delete_backward(self) -> None:
        """Delete the selection, or the character left of the caret."""
        if self._selection_length:
            self.replace_selection("")
        elif self._selection_start > 0:
            self._selection_start -= 1
            self._selection_length = 1
            self.replace_selection("")
