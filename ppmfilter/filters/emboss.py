from __future__ import annotations

from ..imaging import MAX_CHANNEL, Pixel, Raster
from .base import RasterFilter

EMBOSS_BIAS = 128


def _strongest_diff(cur: Pixel, prev: Pixel) -> int:
    # Red wins ties, then green over blue.
    diff = cur.r - prev.r
    if abs(cur.g - prev.g) > abs(diff):
        diff = cur.g - prev.g
    if abs(cur.b - prev.b) > abs(diff):
        diff = cur.b - prev.b
    return diff


class EmbossFilter(RasterFilter):
    """Gray relief from the difference to the upper-left diagonal neighbour.

    Neighbours are read from a snapshot taken before the pass, so the
    result does not depend on traversal order.
    """

    name = "emboss"

    def apply(self, raster: Raster) -> None:
        source = raster.copy()
        for y in range(raster.height):
            for x in range(raster.width):
                diff = 0
                if x > 0 and y > 0:
                    diff = _strongest_diff(source.get(x, y), source.get(x - 1, y - 1))
                gray = max(0, min(MAX_CHANNEL, EMBOSS_BIAS + diff))
                raster.set(x, y, Pixel(gray, gray, gray))


def emboss(raster: Raster) -> None:
    EmbossFilter().apply(raster)
