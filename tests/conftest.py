import pytest

from ppmfilter.imaging import Raster

SAMPLE_PPM = "P3\n2 1\n255\n10 20 30  40 50 60\n"


@pytest.fixture
def sample_raster() -> Raster:
    return Raster.from_rows(
        [
            [(10, 20, 30), (200, 100, 0), (7, 8, 9)],
            [(0, 0, 0), (255, 255, 255), (90, 180, 45)],
        ]
    )


@pytest.fixture
def sample_ppm(tmp_path):
    path = tmp_path / "in.ppm"
    path.write_text(SAMPLE_PPM, encoding="utf-8")
    return path
