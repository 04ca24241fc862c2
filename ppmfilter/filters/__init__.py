from __future__ import annotations

from typing import Callable, Dict, Optional, Sequence

from ..codec import parse_int
from .base import RasterFilter
from .color import GrayscaleFilter, InvertFilter, grayscale, invert
from .emboss import EmbossFilter, emboss
from .motion_blur import DEFAULT_BLUR_LENGTH, MotionBlurFilter, motion_blur

FilterFactory = Callable[[Sequence[str]], Optional[RasterFilter]]


def _motion_blur_factory(extra: Sequence[str]) -> Optional[RasterFilter]:
    if not extra:
        return None
    return MotionBlurFilter(parse_int(extra[0], default=DEFAULT_BLUR_LENGTH))


class FilterSelector:
    def __init__(self, factories: Optional[Dict[str, FilterFactory]] = None) -> None:
        if factories is None:
            factories = {
                "grayscale": lambda extra: GrayscaleFilter(),
                "greyscale": lambda extra: GrayscaleFilter(),
                "invert": lambda extra: InvertFilter(),
                "emboss": lambda extra: EmbossFilter(),
                "motionblur": _motion_blur_factory,
            }
        self._factories = factories

    def select(self, name: Optional[str], extra: Sequence[str] = ()) -> Optional[RasterFilter]:
        """Return the filter for ``name``, or None when usage should be shown."""
        factory = self._factories.get((name or "").lower())
        if not factory:
            return None
        return factory(list(extra))


__all__ = [
    "DEFAULT_BLUR_LENGTH",
    "emboss",
    "EmbossFilter",
    "FilterSelector",
    "grayscale",
    "GrayscaleFilter",
    "invert",
    "InvertFilter",
    "motion_blur",
    "MotionBlurFilter",
    "RasterFilter",
]
