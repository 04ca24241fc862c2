from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Sequence

MAX_CHANNEL = 255


@dataclass(frozen=True)
class Pixel:
    """RGB triple. Channels are plain ints and are not range-checked."""

    r: int = 0
    g: int = 0
    b: int = 0


ZERO_PIXEL = Pixel()


@dataclass
class Raster:
    """Row-major width x height grid of pixels, origin at the top-left.

    Reads outside the grid return ``ZERO_PIXEL`` and writes outside the grid
    are ignored, so neighbourhood filters can read neighbour offsets freely.
    """

    width: int
    height: int
    data: List[List[Pixel]] = field(default_factory=list, repr=False)

    @classmethod
    def create(cls, width: int, height: int) -> "Raster":
        width = max(0, width)
        height = max(0, height)
        data = [[ZERO_PIXEL] * width for _ in range(height)]
        return cls(width, height, data)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Sequence[int]]]) -> "Raster":
        """Build a raster from nested ``[[(r, g, b), ...], ...]`` rows.

        The first row fixes the width; shorter rows are zero-padded and
        longer rows are truncated.
        """
        height = len(rows)
        width = len(rows[0]) if rows else 0
        raster = cls.create(width, height)
        for y, row in enumerate(rows):
            for x, value in enumerate(row[:width]):
                raster.set(x, y, Pixel(*value))
        return raster

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> Pixel:
        if not self.in_bounds(x, y):
            return ZERO_PIXEL
        return self.data[y][x]

    def set(self, x: int, y: int, pixel: Pixel) -> None:
        if self.in_bounds(x, y):
            self.data[y][x] = pixel

    def rows(self) -> Iterator[List[Pixel]]:
        for row in self.data:
            yield list(row)

    def copy(self) -> "Raster":
        return Raster(self.width, self.height, [list(row) for row in self.data])
