from __future__ import annotations

from ..imaging import Raster


class RasterFilter:
    name = ""

    def apply(self, raster: Raster) -> None:
        """Rewrite every pixel of ``raster`` in place."""
        raise NotImplementedError
