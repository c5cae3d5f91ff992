"""Screen regions that turn mouse clicks into key codes."""

from __future__ import annotations

import enum
from dataclasses import dataclass

M_EVENT = 0x1000


def mouse_key(code: int) -> int:
    """Key code reported for a click on a region registered with ``code``."""
    return M_EVENT + code


class RegionMode(enum.IntEnum):
    """How a click inside a big region is turned into an offset."""

    NONE = -1
    LINES = 1
    COLUMNS = 2
    CELLS = 3


@dataclass
class MouseRegion:
    """A rectangle on screen; ``y_end`` and ``x_end`` are exclusive."""

    y: int = 0
    x: int = 0
    y_end: int = 0
    x_end: int = 0
    code: int = 0
    mode: int = RegionMode.NONE
    step_x: int = 0
    step_y: int = 0

    def contains(self, y: int, x: int) -> bool:
        return self.y <= y < self.y_end and self.x <= x < self.x_end


class MouseRegions:
    """The set of clickable regions of the current dialog."""

    def __init__(self):
        self.base_x = 0
        self.base_y = 0
        self.base_code = 0
        self.regions: list[MouseRegion] = []

    def set_base(self, x: int, y: int) -> None:
        """Set the origin added to coordinates of regions made afterwards."""
        self.base_x = x
        self.base_y = y

    def set_code(self, code: int) -> None:
        """Set the value added to codes of regions made afterwards."""
        self.base_code = code

    def _find_by_code(self, code: int) -> MouseRegion | None:
        return next((r for r in self.regions if r.code == code), None)

    def make_region(self, y: int, x: int, height: int, width: int, code: int) -> MouseRegion:
        """Create, or move, the region that reports ``code``."""
        full_code = self.base_code + code
        region = self._find_by_code(full_code)
        if region is None:
            region = MouseRegion()
            self.regions.insert(0, region)
        region.mode = RegionMode.NONE
        region.step_x = 0
        region.step_y = 0
        region.y = self.base_y + y
        region.y_end = self.base_y + y + height
        region.x = self.base_x + x
        region.x_end = self.base_x + x + width
        region.code = full_code
        return region

    def make_big_region(
        self,
        y: int,
        x: int,
        height: int,
        width: int,
        code: int,
        step_y: int = 1,
        step_x: int = 1,
        mode: int = RegionMode.LINES,
    ) -> MouseRegion:
        """Create a region whose clicks report an offset from ``code``."""
        region = self.make_region(y, x, height, width, -mouse_key(code))
        region.mode = RegionMode(mode)
        region.step_x = max(1, step_x)
        region.step_y = max(1, step_y)
        return region

    def clear(self) -> None:
        """Forget every region."""
        self.regions.clear()

    def _any_region(self, y: int, x: int, small: bool) -> MouseRegion | None:
        for region in self.regions:
            if small != (region.code >= 0):
                continue
            if region.contains(y, x):
                return region
        return None

    def region_at(self, y: int, x: int) -> MouseRegion | None:
        """The plain region under the pointer, if any."""
        return self._any_region(y, x, True)

    def big_region_at(self, y: int, x: int) -> MouseRegion | None:
        """The big (offset-reporting) region under the pointer, if any."""
        return self._any_region(y, x, False)