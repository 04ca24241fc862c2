from .codec import FormatError, decode_ppm, encode_ppm, read_ppm, write_ppm
from .errors import MissingPathError, PPMFilterError
from .filters import FilterSelector, RasterFilter
from .imaging import Pixel, Raster, ZERO_PIXEL
from .pipeline import FilterJob, FilterSettings, run_filter

__version__ = "0.1.0"

__all__ = [
    "decode_ppm",
    "encode_ppm",
    "FilterJob",
    "FilterSelector",
    "FilterSettings",
    "FormatError",
    "MissingPathError",
    "Pixel",
    "PPMFilterError",
    "Raster",
    "RasterFilter",
    "read_ppm",
    "run_filter",
    "write_ppm",
    "ZERO_PIXEL",
]
