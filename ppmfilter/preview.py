from __future__ import annotations

from PIL import Image

from .codec.ppm import ensure_parent_dir
from .imaging import MAX_CHANNEL, Raster


def _clamp(value: int) -> int:
    return max(0, min(MAX_CHANNEL, value))


def raster_to_image(raster: Raster) -> Image.Image:
    """Render a raster as an RGB image, clamping channels to 0-255."""
    data = bytearray()
    for row in raster.rows():
        for p in row:
            data += bytes((_clamp(p.r), _clamp(p.g), _clamp(p.b)))
    return Image.frombytes("RGB", (raster.width, raster.height), bytes(data))


def save_preview(raster: Raster, path: str) -> None:
    """Write a Pillow-readable preview (PNG, JPEG, ...) chosen by extension."""
    ensure_parent_dir(path)
    raster_to_image(raster).save(path)
