from ..errors import FormatError
from .ppm import (
    PPM_MAGIC,
    decode_ppm,
    encode_ppm,
    parse_int,
    read_ppm,
    strip_comments,
    tokenize,
    write_ppm,
)

__all__ = [
    "decode_ppm",
    "encode_ppm",
    "FormatError",
    "parse_int",
    "PPM_MAGIC",
    "read_ppm",
    "strip_comments",
    "tokenize",
    "write_ppm",
]
