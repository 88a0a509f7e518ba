"""Line history for the interactive reader, with per-entry editing."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class HistoryEntry:
    """A remembered line and the copy of it being edited."""

    original: str = ""
    text: str = ""


class History:
    """Entered lines, newest first, plus the line being typed.

    While a line is being edited a scratch entry sits at the front. Moving up
    and down selects older or newer entries, and typing edits the selected
    entry's working copy. Submitting or cancelling restores that entry and
    drops the scratch entry.
    """

    def __init__(self) -> None:
        self._entries: list[HistoryEntry] = []
        self._cursor = 0
        self._active = False

    def _current(self) -> HistoryEntry:
        if not self._active:
            raise RuntimeError("no line is being edited")
        return self._entries[self._cursor]

    def _finish(self) -> None:
        del self._entries[0]
        self._cursor = 0
        self._active = False

    def start_line(self) -> None:
        """Begin editing a new, empty line."""
        if self._active:
            raise RuntimeError("a line is already being edited")
        self._entries.insert(0, HistoryEntry())
        self._cursor = 0
        self._active = True

    def current_text(self) -> str:
        """The text of the selected entry as currently edited."""
        return self._current().text

    def type_char(self, char: str) -> str:
        """Append one character to the selected entry; returns the new text."""
        if len(char) != 1:
            raise ValueError("expected a single character")
        entry = self._current()
        entry.text += char
        return entry.text

    def backspace(self) -> str:
        """Remove the last character of the selected entry; returns the new text."""
        entry = self._current()
        entry.text = entry.text[:-1]
        return entry.text

    def up(self) -> str:
        """Select the next older entry, if any; returns its text."""
        self._current()
        if self._cursor + 1 < len(self._entries):
            self._cursor += 1
        return self.current_text()

    def down(self) -> str:
        """Select the next newer entry, if any; returns its text."""
        self._current()
        if self._cursor > 0:
            self._cursor -= 1
        return self.current_text()

    def submit(self) -> str | None:
        """Finish the line; returns it, or None when it is empty.

        A non-empty line is remembered as the newest entry.
        """
        entry = self._current()
        line = entry.text
        entry.text = entry.original
        self._finish()
        if not line:
            return None
        self._entries.insert(0, HistoryEntry(line, line))
        return line

    def cancel(self) -> None:
        """Abandon the line, restoring the selected entry."""
        entry = self._current()
        entry.text = entry.original
        self._finish()

    def lines(self) -> list[str]:
        """Remembered lines, newest first."""
        start = 1 if self._active else 0
        return [entry.original for entry in self._entries[start:]]