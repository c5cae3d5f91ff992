"""Several labelled status entries shown above an overall progress bar."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Sequence

MARGIN = 1
GUTTER = 2
MIN_HIGH = 4
MIN_WIDE = 10 + 2 * (2 + MARGIN)
LEN_TEXT = 15

_STATUS_NAMES = {
    "0": "Succeeded",
    "1": "Failed",
    "2": "Passed",
    "3": "Completed",
    "4": "Checked",
    "5": "Done",
    "6": "Skipped",
    "7": "In Progress",
    "8": "",
    "9": "N/A",
}

_FLOAT = re.compile(
    r"[ \t\n\v\f\r]*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
)


def status_string(given: str) -> str | None:
    """Text shown for an entry's status code.

    A digit names a fixed status, ``-N`` shows ``N`` as a percentage, a
    status that begins with whitespace shows nothing (``None``), and any
    other text is shown as it is.
    """
    if given and given[0].isdigit() and given[0].isascii():
        return _STATUS_NAMES.get(given[0], "?")
    if given.startswith("-"):
        return f"{given[1:]:>3}%"
    if given and given[0].isspace():
        return None
    return given


def percent_cells(status: str, cells: int) -> int:
    """Cells of a ``cells``-wide bar filled for a percentage status text."""
    match = _FLOAT.match(status)
    percent = float(match.group(1)) if match else 0.0
    return int((cells * (percent + 0.5)) / 100.0)


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


@dataclass
class StatusLine:
    """One rendered status row of the dialog."""

    row: int
    name: str
    status: str
    filled: int | None
    text: str


class MixedGauge:
    """Named entries each with a status, plus an overall percentage."""

    def __init__(
        self,
        title: str,
        prompt: str,
        items: Iterable[Sequence[str]],
        percent: int = 0,
    ):
        self.title = title
        self.prompt = prompt.strip()
        self.items: list[tuple[str, str]] = [(name, text) for name, text in items]
        self.percent = percent
        self.len_name = max((len(name) for name, _ in self.items), default=0)
        self.len_text = LEN_TEXT
        self.min_height = MIN_HIGH + len(self.items)
        self.min_width = MIN_WIDE + self.len_name + GUTTER + self.len_text
        if self.prompt:
            self.min_height += 2 * MARGIN
        self.height = self.min_height

    def status_lines(self, width: int) -> list[StatusLine]:
        """The status rows that fit in a dialog ``width`` columns wide."""
        cells = self.len_text - 2
        lm = width - self.len_text - 1
        bottom = self.height - 2 * MARGIN
        lines: list[StatusLine] = []
        for index, (name, code) in enumerate(self.items):
            row = index + MARGIN + 1
            if row > bottom:
                break
            status = status_string(code)
            if not status:
                continue

            buffer = [" "] * width

            def put(col: int, text: str) -> None:
                for offset, char in enumerate(text):
                    if 0 <= col + offset < width:
                        buffer[col + offset] = char

            put(2 * MARGIN, name[: max(0, lm - 2 * MARGIN)])
            put(lm, "[")
            put(lm + _trunc_div(cells - len(status), 2), status)
            put(width - 3, "]")

            filled = percent_cells(status, cells) if code.startswith("-") else None
            lines.append(StatusLine(row, name, status, filled, "".join(buffer)))
        return lines