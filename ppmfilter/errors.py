from __future__ import annotations


class PPMFilterError(Exception):
    """Base class for errors raised by ppmfilter."""


class FormatError(PPMFilterError, ValueError):
    """Input is not a plain-text (P3) PPM image."""


class MissingPathError(PPMFilterError):
    """An input or output path was not provided."""
