"""Column accounting and single-line editing for dialog input fields."""

from __future__ import annotations

import enum
from functools import lru_cache

from wcwidth import wcwidth

TAB = "\t"
ESC = "\x1b"
MAX_LEN = 2048


class EditKey(enum.Enum):
    """Function keys understood by the line editor."""

    NONE = "none"
    LEFT = "left"
    RIGHT = "right"
    BEGIN = "begin"
    END = "end"
    DELETE_LEFT = "delete_left"
    DELETE_RIGHT = "delete_right"
    DELETE_ALL = "delete_all"
    ENTER = "enter"
    UP = "up"
    DOWN = "down"
    FIELD_NEXT = "field_next"
    FIELD_PREV = "field_prev"
    RESIZE = "resize"
    ERR = "err"


_NON_EDITING = frozenset(
    {
        EditKey.ENTER,
        EditKey.RESIZE,
        EditKey.UP,
        EditKey.DOWN,
        EditKey.FIELD_NEXT,
        EditKey.FIELD_PREV,
        EditKey.ERR,
    }
)


def _unctrl(char: str) -> str:
    """Printable form of a control character, as a terminal would show it."""
    code = ord(char)
    if code < 0x20:
        return "^" + chr(code + 64)
    if code == 0x7F:
        return "^?"
    if 0x80 <= code < 0xA0:
        return "~" + chr(code - 0x80 + 64)
    return char


def count_wchars(string: str) -> int:
    """Number of characters in the string."""
    return len(string)


@lru_cache(maxsize=256)
def index_wchars(string: str) -> tuple[int, ...]:
    """Offsets at which each character begins, followed by the end offset."""
    return tuple(range(len(string) + 1))


def find_index(indices, to_find: int) -> int:
    """Index into ``indices`` of the character containing offset ``to_find``."""
    limit = len(indices) - 1
    for result in range(limit + 1):
        if (
            to_find == indices[result]
            or result == limit
            or to_find < indices[result + 1]
        ):
            return result
    return limit + 1


@lru_cache(maxsize=256)
def index_columns(string: str) -> tuple[int, ...]:
    """Cumulative display columns: entry ``i`` is where character ``i`` starts."""
    cols = [0]
    for char in string:
        current = cols[-1]
        if char == TAB:
            width = ((current | 7) + 1) - current
        else:
            width = wcwidth(char)
            if width < 0:
                width = len(_unctrl(char))
        cols.append(current + width)
    return tuple(cols)


def count_columns(string: str) -> int:
    """Number of display columns the string occupies."""
    limit = count_wchars(string)
    if limit > 0:
        return index_columns(string)[limit]
    return len(string)


def limit_columns(string: str, limit: int, offset: int = 0) -> int:
    """How many characters fit in ``limit`` columns, measured from ``offset``."""
    cols = index_columns(string)
    result = count_wchars(string)
    while result > 0 and (cols[result] - cols[offset]) > limit:
        result -= 1
    return result


def _compute_edit_offset(string: str, chr_offset: int, x_last: int) -> tuple[int, int]:
    cols = index_columns(string)
    indx = index_wchars(string)
    limit = count_wchars(string)
    offset = find_index(indx, chr_offset)
    scroll = 0
    for n in range(offset + 1):
        if cols[offset] - cols[n] < x_last and (
            offset == limit or cols[offset + 1] - cols[n] < x_last
        ):
            scroll = n
            break
    return cols[offset] - cols[scroll], scroll


def edit_offset(string: str, chr_offset: int, x_last: int) -> int:
    """Display column of the cursor within a field ``x_last`` columns wide."""
    return _compute_edit_offset(string, chr_offset, x_last)[0]


def render_field(
    string: str,
    chr_offset: int,
    width: int,
    hidden: bool = False,
    insecure: bool = False,
) -> tuple[str, int]:
    """Text shown in a field of ``width`` columns and the cursor column.

    A hidden field that is not insecure shows nothing, with the cursor at 0.
    An insecure hidden field shows one ``*`` per character.
    """
    if hidden and not insecure:
        return "", 0

    cols = index_columns(string)
    limit = count_wchars(string)
    input_x, scroll = _compute_edit_offset(string, chr_offset, width)

    parts: list[str] = []
    used = 0
    for i in range(scroll, limit):
        if used >= width:
            break
        check = cols[i + 1] - cols[scroll]
        if check > width:
            break
        char = string[i]
        if hidden:
            parts.append("*")
        elif char == TAB:
            parts.append(" " * (cols[i + 1] - cols[i]))
        else:
            parts.append(_unctrl(char))
        used = check
    if used < width:
        parts.append(" " * (width - used))
    return "".join(parts), input_x


class LineEditor:
    """A one-line text buffer with a cursor, edited key by key."""

    def __init__(self, text: str = "", offset: int | None = None, max_input: int = MAX_LEN):
        self.text = text
        self.offset = len(text) if offset is None else offset
        self.max_input = max_input
        self.bells = 0

    def _beep(self) -> None:
        self.bells += 1

    def edit(self, key, force: bool = False) -> bool:
        """Apply one key; return True if the key was consumed as an edit.

        ``key`` is an :class:`EditKey`, a single character to insert, or
        ``None`` (the same as ``EditKey.NONE``).
        """
        if key is None:
            key = EditKey.NONE
        if isinstance(key, str):
            return self._insert(key)
        if not isinstance(key, EditKey):
            self._beep()
            return True

        text = self.text
        indx = index_wchars(text)
        limit = count_wchars(text)
        offset = find_index(indx, self.offset)

        if key is EditKey.NONE:
            return force
        if key in _NON_EDITING:
            return False
        if key is EditKey.LEFT:
            if self.offset and offset > 0:
                self.offset = indx[offset - 1]
        elif key is EditKey.RIGHT:
            if offset < limit:
                self.offset = indx[offset + 1]
        elif key is EditKey.BEGIN:
            self.offset = 0
        elif key is EditKey.END:
            if offset < limit:
                self.offset = indx[limit]
        elif key is EditKey.DELETE_LEFT:
            if offset:
                start = indx[offset - 1]
                self.offset = start
                self.text = text[:start] + text[indx[offset]:]
        elif key is EditKey.DELETE_RIGHT:
            if limit:
                limit -= 1
                if limit == 0:
                    self.text = ""
                    self.offset = 0
                else:
                    gap = indx[offset + 1] - indx[offset] if offset <= limit else 0
                    if gap > 0:
                        start = indx[offset]
                        self.text = text[:start] + text[start + gap:]
                    elif offset > 0:
                        self.text = text[: indx[offset - 1]]
                    if self.offset > indx[limit]:
                        self.offset = indx[limit]
        elif key is EditKey.DELETE_ALL:
            self.text = ""
            self.offset = 0
        return True

    def _insert(self, key: str) -> bool:
        if len(key) != 1:
            raise ValueError(f"expected a single character, got {key!r}")
        if key == ESC:
            return False
        if len(self.text) < self.max_input:
            pos = self.offset
            self.text = self.text[:pos] + key + self.text[pos:]
            self.offset = pos + 1
        else:
            self._beep()
        return True