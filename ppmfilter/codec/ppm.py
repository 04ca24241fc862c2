from __future__ import annotations

import os
import re
from typing import Iterator, List, Optional

from ..errors import FormatError
from ..imaging import MAX_CHANNEL, Pixel, Raster

PPM_MAGIC = "P3"

_COMMENT_RE = re.compile(r"#[^\n]*\n?")
_INT_PREFIX_RE = re.compile(r"[+-]?[0-9]+")


def parse_int(token: Optional[str], default: int = 0) -> int:
    """Parse the leading base-10 integer of ``token``.

    Trailing garbage is ignored (``"12px"`` -> 12). A missing, empty or
    non-numeric token returns ``default``.
    """
    if token is None:
        return default
    match = _INT_PREFIX_RE.match(token.strip())
    if not match:
        return default
    return int(match.group(0))


def strip_comments(text: str) -> str:
    return _COMMENT_RE.sub("\n", text)


def tokenize(text: str) -> List[str]:
    return strip_comments(text).split()


class _TokenReader:
    def __init__(self, tokens: List[str]) -> None:
        self._tokens = tokens
        self._index = 0

    def next(self) -> Optional[str]:
        if self._index >= len(self._tokens):
            return None
        token = self._tokens[self._index]
        self._index += 1
        return token

    def next_int(self) -> int:
        return parse_int(self.next())


def decode_ppm(text: str) -> Raster:
    """Decode plain-text PPM into a raster.

    The maximum channel value is read and ignored; 8-bit channels are
    assumed. A short body is not an error, missing values decode as 0.
    """
    reader = _TokenReader(tokenize(text))
    if reader.next() != PPM_MAGIC:
        raise FormatError("Unsupported format: only P3 PPM files are allowed.")
    width = reader.next_int()
    height = reader.next_int()
    reader.next()
    raster = Raster.create(width, height)
    for y in range(raster.height):
        for x in range(raster.width):
            r = reader.next_int()
            g = reader.next_int()
            b = reader.next_int()
            raster.set(x, y, Pixel(r, g, b))
    return raster


def _encode_lines(raster: Raster) -> Iterator[str]:
    yield PPM_MAGIC
    yield f"{raster.width} {raster.height}"
    yield str(MAX_CHANNEL)
    for row in raster.rows():
        yield " ".join(f"{p.r} {p.g} {p.b}" for p in row)


def encode_ppm(raster: Raster) -> str:
    return "".join(line + "\n" for line in _encode_lines(raster))


def read_ppm(path: str) -> Raster:
    with open(path, "r", encoding="utf-8") as handle:
        return decode_ppm(handle.read())


def ensure_parent_dir(path: str) -> None:
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)


def write_ppm(raster: Raster, path: str) -> None:
    output = encode_ppm(raster)
    ensure_parent_dir(path)
    with open(path, "w", encoding="utf-8", newline="\n") as handle:
        handle.write(output)
