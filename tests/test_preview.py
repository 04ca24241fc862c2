import warnings

from PIL import Image

from ppmfilter.imaging import Raster
from ppmfilter.preview import raster_to_image, save_preview


def test_raster_to_image_pixels():
    raster = Raster.from_rows([[(1, 2, 3), (250, 128, 0)], [(9, 8, 7), (0, 0, 0)]])
    img = raster_to_image(raster)
    assert img.mode == "RGB"
    assert img.size == (2, 2)
    assert img.getpixel((1, 0)) == (250, 128, 0)
    assert img.getpixel((0, 1)) == (9, 8, 7)


def test_raster_to_image_clamps_channels():
    raster = Raster.from_rows([[(-5, 300, 12)]])
    assert raster_to_image(raster).getpixel((0, 0)) == (0, 255, 12)


def test_save_preview_emits_no_deprecation_warnings(tmp_path, sample_raster):
    path = tmp_path / "nested" / "out.png"
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        save_preview(sample_raster, str(path))
    with Image.open(path) as img:
        assert img.size == (3, 2)
        assert img.convert("RGB").getpixel((1, 0)) == (200, 100, 0)
