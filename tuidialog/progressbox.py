"""Scrolling box that shows lines of text as they are read from a stream."""

from __future__ import annotations

from typing import TextIO

from .inputstr import MAX_LEN, limit_columns

MARGIN = 1
EXIT_OK = 0


class LineReader:
    """Reads lines one character at a time, ending at ``\\n`` or ``\\r``."""

    def __init__(
        self,
        stream: TextIO,
        tab_correct: bool = False,
        tab_len: int = 8,
        max_len: int = MAX_LEN,
    ):
        self.stream = stream
        self.tab_correct = tab_correct
        self.tab_len = tab_len
        self.max_len = max_len
        self.is_eof = False

    def read_line(self) -> str | None:
        """Next line; ``None`` at end of input with nothing read.

        Characters past ``max_len`` are dropped; tabs are expanded when
        ``tab_correct`` is set.
        """
        chars: list[str] = []
        while True:
            ch = self.stream.read(1)
            if not ch:
                self.is_eof = True
                if not chars:
                    return None
                break
            if ch in "\n\r":
                break
            if len(chars) >= self.max_len:
                continue
            if ch == "\t" and self.tab_correct:
                pad = self.tab_len - (len(chars) % self.tab_len)
                chars.extend(" " * min(pad, self.max_len - len(chars)))
            else:
                chars.append(ch)
        return "".join(chars)


class ProgressBox:
    """The text area of a progress box: a fixed number of scrolling rows."""

    def __init__(self, height: int, width: int):
        self.height = height
        self.width = width
        self.rows_high = max(1, height - 2 * MARGIN)
        self.limit = width - 2 * MARGIN
        self.lines: list[str] = [""] * self.rows_high
        self.history: list[str] = []
        self.next_row = 0
        self.result: int | None = None

    def _scroll(self, count: int) -> None:
        count = min(count, self.rows_high)
        self.lines = self.lines[count:] + [""] * count

    def add_line(self, line: str) -> None:
        """Show a line below the previous one, scrolling when full."""
        self.history.append(line)
        shown = line[: limit_columns(line, self.limit)]
        if self.next_row < self.rows_high:
            self.lines[self.next_row] = shown
        else:
            self._scroll(1)
            self.lines[-1] = shown
        self.next_row += 1

    def run(self, reader: LineReader, pause: bool = False) -> int:
        """Show every line from ``reader``; returns the exit status.

        With ``pause`` the text is scrolled up to leave room for an OK
        button below it.
        """
        row = 0
        while (line := reader.read_line()) is not None:
            self.add_line(line)
            if reader.is_eof:
                break
            row += 1

        if pause:
            need = 1 + MARGIN
            base = self.rows_high - need
            if row >= base:
                count = min(row - base, need)
                if count > 0:
                    self._scroll(count)
        self.result = EXIT_OK
        return self.result