from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .codec import read_ppm, write_ppm
from .errors import MissingPathError
from .filters import FilterSelector, RasterFilter
from .imaging import Raster
from .preview import save_preview


@dataclass
class FilterSettings:
    filter_name: str = ""
    length: Optional[str] = None

    def extra_args(self) -> list:
        if self.length is None:
            return []
        return [self.length]


class FilterJob:
    def __init__(self, image_filter: RasterFilter) -> None:
        self.image_filter = image_filter

    def run(
        self,
        input_path: Optional[str],
        output_path: Optional[str],
        preview_path: Optional[str] = None,
    ) -> Raster:
        """Load, filter and write one P3 image. Nothing is written on failure.

        ``preview_path`` additionally saves the result through Pillow; the
        P3 output is always written.
        """
        if not input_path:
            raise MissingPathError("Input file path is required.")
        if not output_path:
            raise MissingPathError("Output file path is required.")
        raster = read_ppm(input_path)
        self.image_filter.apply(raster)
        write_ppm(raster, output_path)
        if preview_path:
            save_preview(raster, preview_path)
        return raster

    @classmethod
    def from_settings(
        cls, settings: FilterSettings, selector: Optional[FilterSelector] = None
    ) -> Optional["FilterJob"]:
        selector = selector or FilterSelector()
        image_filter = selector.select(settings.filter_name, settings.extra_args())
        if image_filter is None:
            return None
        return cls(image_filter)


def run_filter(
    input_path: Optional[str],
    output_path: Optional[str],
    filter_name: str,
    length: Optional[str] = None,
    preview_path: Optional[str] = None,
) -> Optional[Raster]:
    """Apply one named filter to a file. Returns None when the name is not usable."""
    job = FilterJob.from_settings(FilterSettings(filter_name, length))
    if job is None:
        return None
    return job.run(input_path, output_path, preview_path)
