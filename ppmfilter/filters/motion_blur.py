from __future__ import annotations

from ..imaging import Pixel, Raster
from .base import RasterFilter

DEFAULT_BLUR_LENGTH = 1


class MotionBlurFilter(RasterFilter):
    """Horizontal box average over up to ``length`` pixels to the right.

    The window is clipped at the right edge. Windows always read the
    unblurred snapshot of the raster.
    """

    name = "motionblur"

    def __init__(self, length: int = DEFAULT_BLUR_LENGTH) -> None:
        self.length = length

    def apply(self, raster: Raster) -> None:
        if self.length < 1:
            return
        source = raster.copy()
        for y in range(raster.height):
            for x in range(raster.width):
                count = min(self.length, raster.width - x)
                window = [source.get(x + k, y) for k in range(count)]
                raster.set(
                    x,
                    y,
                    Pixel(
                        sum(p.r for p in window) // count,
                        sum(p.g for p in window) // count,
                        sum(p.b for p in window) // count,
                    ),
                )


def motion_blur(raster: Raster, length: int) -> None:
    MotionBlurFilter(length).apply(raster)
