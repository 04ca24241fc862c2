import pytest

from ppmfilter.imaging import Pixel, Raster, ZERO_PIXEL


def test_create_fills_with_zero_pixels():
    raster = Raster.create(3, 2)
    assert raster.width == 3
    assert raster.height == 2
    assert all(p == ZERO_PIXEL for row in raster.rows() for p in row)
    assert [len(row) for row in raster.rows()] == [3, 3]


def test_create_empty_and_negative_sizes():
    assert list(Raster.create(0, 0).rows()) == []
    raster = Raster.create(-1, 4)
    assert raster.width == 0
    assert raster.height == 4


@pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (3, 0), (0, 2), (100, 100)])
def test_out_of_range_reads_return_zero(sample_raster, x, y):
    assert sample_raster.get(x, y) == Pixel(0, 0, 0)


@pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (3, 0), (0, 2)])
def test_out_of_range_writes_are_ignored(sample_raster, x, y):
    before = sample_raster.copy()
    sample_raster.set(x, y, Pixel(1, 2, 3))
    assert sample_raster == before


def test_set_replaces_one_cell(sample_raster):
    sample_raster.set(1, 1, Pixel(1, 2, 3))
    assert sample_raster.get(1, 1) == Pixel(1, 2, 3)
    assert sample_raster.get(0, 1) == Pixel(0, 0, 0)


def test_copy_is_independent(sample_raster):
    clone = sample_raster.copy()
    clone.set(0, 0, Pixel(9, 9, 9))
    assert sample_raster.get(0, 0) == Pixel(10, 20, 30)


def test_from_rows_pads_short_rows():
    raster = Raster.from_rows([[(1, 1, 1), (2, 2, 2)], [(3, 3, 3)]])
    assert raster.get(1, 1) == ZERO_PIXEL
    assert raster.get(0, 1) == Pixel(3, 3, 3)
