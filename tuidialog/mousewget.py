"""Reading keys, with mouse clicks translated through registered regions."""

from __future__ import annotations

import sys
from typing import Callable

from .mouse import MouseRegions, RegionMode, mouse_key

KEY_MOUSE = 0o631


def _beep() -> None:
    sys.stdout.write("\a")
    sys.stdout.flush()


def resolve_click(regions: MouseRegions, y: int, x: int) -> int | None:
    """Key code for a click at ``(y, x)``, or ``None`` if no region is there."""
    region = regions.region_at(y, x)
    if region is not None:
        return mouse_key(region.code)

    big = regions.big_region_at(y, x)
    if big is None:
        return None
    dx = x - big.x
    dy = y - big.y
    row = (big.x_end - big.x) // big.step_x
    key = -big.code
    if big.mode == RegionMode.LINES:
        key += dy
    elif big.mode == RegionMode.COLUMNS:
        key += dx // big.step_x
    else:
        key += dx // big.step_x + dy * row
    return key


def read_key(
    get_key: Callable[[], tuple[object, bool]],
    regions: MouseRegions,
    ignore_errors: bool = True,
) -> tuple[object, bool]:
    """Read one ``(key, fkey)`` pair, resolving mouse clicks.

    ``get_key`` returns ``(key, fkey)``; a click is reported as a ``(y, x)``
    tuple in place of the key, or as ``KEY_MOUSE`` when its position is
    unknown.  A click outside every region rings the bell; it is skipped
    when ``ignore_errors`` is true and returned as ``KEY_MOUSE`` otherwise.
    """
    while True:
        key, fkey = get_key()
        is_click = isinstance(key, tuple)
        if not is_click and key != KEY_MOUSE:
            return key, fkey
        code = resolve_click(regions, *key) if is_click else None
        if code is not None:
            return code, fkey
        _beep()
        if not ignore_errors:
            return KEY_MOUSE, fkey