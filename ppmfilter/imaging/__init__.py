from .types import MAX_CHANNEL, Pixel, Raster, ZERO_PIXEL

__all__ = ["MAX_CHANNEL", "Pixel", "Raster", "ZERO_PIXEL"]
