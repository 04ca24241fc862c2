from __future__ import annotations

from ..imaging import MAX_CHANNEL, Pixel, Raster
from .base import RasterFilter


class GrayscaleFilter(RasterFilter):
    name = "grayscale"

    def apply(self, raster: Raster) -> None:
        for y in range(raster.height):
            for x in range(raster.width):
                p = raster.get(x, y)
                avg = (p.r + p.g + p.b) // 3
                raster.set(x, y, Pixel(avg, avg, avg))


class InvertFilter(RasterFilter):
    name = "invert"

    def apply(self, raster: Raster) -> None:
        for y in range(raster.height):
            for x in range(raster.width):
                p = raster.get(x, y)
                raster.set(x, y, Pixel(MAX_CHANNEL - p.r, MAX_CHANNEL - p.g, MAX_CHANNEL - p.b))


def grayscale(raster: Raster) -> None:
    GrayscaleFilter().apply(raster)


def invert(raster: Raster) -> None:
    InvertFilter().apply(raster)
