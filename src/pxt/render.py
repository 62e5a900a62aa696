"""Render target: a cell buffer the size of the terminal.

Modals draw into a ``Frame`` handed to them for one render call. Drawing is
clipped to the frame, so a modal larger than the terminal is cut off rather
than raising.
"""

from collections.abc import Iterable

from rich import box
from rich.style import Style
from rich.text import Text
from textual.geometry import Region, Size

BLANK = " "

Cell = tuple[str, Style]


def centered(outer: Region, width: int, height: int) -> Region:
    """Return the *width* x *height* region centred in *outer*, clamped to it."""
    width = min(width, outer.width)
    height = min(height, outer.height)
    x = outer.x + (outer.width - width) // 2
    y = outer.y + (outer.height - height) // 2
    return Region(x, y, width, height)


class Frame:
    """A grid of (character, style) cells plus its total size."""

    def __init__(self, width: int, height: int) -> None:
        self._width = max(width, 0)
        self._height = max(height, 0)
        self._cells: list[list[Cell]] = [
            [(BLANK, Style.null()) for _ in range(self._width)] for _ in range(self._height)
        ]

    @classmethod
    def of_size(cls, size: Size) -> "Frame":
        return cls(size.width, size.height)

    @property
    def size(self) -> Region:
        return Region(0, 0, self._width, self._height)

    def _clip(self, region: Region) -> Region:
        return region.intersection(self.size)

    def set_cell(self, x: int, y: int, char: str, style: Style | None = None) -> None:
        if 0 <= x < self._width and 0 <= y < self._height:
            self._cells[y][x] = (char, style or Style.null())

    def get_cell(self, x: int, y: int) -> Cell:
        return self._cells[y][x]

    def fill(self, char: str, style: Style | None = None) -> None:
        """Fill the whole frame, e.g. with whatever the main view drew."""
        for y in range(self._height):
            for x in range(self._width):
                self.set_cell(x, y, char, style)

    def clear(self, region: Region) -> None:
        """Reset every cell in *region* to a blank, unstyled cell."""
        region = self._clip(region)
        for y in range(region.y, region.bottom):
            for x in range(region.x, region.right):
                self._cells[y][x] = (BLANK, Style.null())

    def draw_block(
        self, region: Region, style: Style | None = None, border: box.Box = box.ROUNDED
    ) -> None:
        """Draw a bordered panel along the edges of *region*."""
        if region.width < 2 or region.height < 2:
            return
        left, top = region.x, region.y
        right, bottom = region.right - 1, region.bottom - 1
        for x in range(left + 1, right):
            self.set_cell(x, top, border.top, style)
            self.set_cell(x, bottom, border.bottom, style)
        for y in range(top + 1, bottom):
            self.set_cell(left, y, border.mid_left, style)
            self.set_cell(right, y, border.mid_right, style)
        self.set_cell(left, top, border.top_left, style)
        self.set_cell(right, top, border.top_right, style)
        self.set_cell(left, bottom, border.bottom_left, style)
        self.set_cell(right, bottom, border.bottom_right, style)

    def draw_lines(self, region: Region, lines: Iterable[str], style: Style | None = None) -> int:
        """Write *lines* top-down inside *region*, truncating to fit.

        Returns the number of lines drawn.
        """
        region = self._clip(region)
        drawn = 0
        for row, line in zip(range(region.y, region.bottom), lines):
            for x, char in zip(range(region.x, region.right), line):
                self._cells[row][x] = (char, style or Style.null())
            drawn += 1
        return drawn

    def plain_lines(self, region: Region | None = None) -> list[str]:
        region = self._clip(region or self.size)
        return [
            "".join(char for char, _ in self._cells[y][region.x : region.right])
            for y in range(region.y, region.bottom)
        ]

    def to_text(self, region: Region | None = None) -> Text:
        """Render *region* (default: the whole frame) as rich Text."""
        region = self._clip(region or self.size)
        text = Text(no_wrap=True, overflow="crop")
        for index, y in enumerate(range(region.y, region.bottom)):
            if index:
                text.append("\n")
            for char, style in self._cells[y][region.x : region.right]:
                text.append(char, style)
        return text
