"""Numeric value chosen from a range, with a scaled slider and digit editing."""

from __future__ import annotations

import re

_INTEGER = re.compile(r"[ \t\n\v\f\r]*[+-]?\d+")


def digits_of(value: int) -> int:
    """Number of characters in the decimal form of ``value``."""
    return len(str(value))


class RangeValue:
    """A value within ``[min_value, max_value]`` and its slider geometry."""

    def __init__(self, min_value: int, max_value: int, default: int, usable: int):
        if max_value < min_value:
            max_value = min_value
        self.min_value = min_value
        self.max_value = max_value
        self.value = max(min_value, min(default, max_value))
        self.usable = usable

        self.value_len = max(digits_of(max_value), digits_of(min_value))
        self.value_col = self.value_len - 1

        ranges = max_value - min_value + 1
        self.ranges = ranges
        if ranges > usable:
            self.slide_inc = (ranges + usable - 1) // usable
            self.slide_len = 1 + ranges // self.slide_inc
        elif ranges < usable:
            self.slide_inc = usable // ranges
            self.slide_len = ranges * self.slide_inc
        else:
            self.slide_inc = 1
            self.slide_len = usable

    def digit_of(self) -> int:
        """Place value of the digit at the editing column."""
        return 10 ** max(0, self.value_len - 1 - self.value_col)

    def set_digit(self, char: str) -> bool:
        """Replace the digit at the editing column; False if out of range."""
        buffer = list(f"{self.value:>{self.value_len}}")
        buffer[self.value_col] = char
        text = "".join(buffer)
        if _INTEGER.fullmatch(text) is None:
            return False
        check = int(text)
        if self.min_value <= check <= self.max_value:
            self.value = check
            return True
        return False

    def slider_cells(self, value: int | None = None) -> int:
        """Cells of the slider filled for ``value`` (the current one by default)."""
        if value is None:
            value = self.value
        offset = value - self.min_value
        if self.ranges > self.slide_len:
            return (offset + self.slide_inc) // self.slide_inc
        if self.ranges < self.slide_len:
            return (offset + 1) * self.slide_inc
        return offset

    def step(self, delta: int) -> int:
        """Move the value by ``delta``, clamped to the range; returns it."""
        self.value = max(self.min_value, min(self.value + delta, self.max_value))
        return self.value