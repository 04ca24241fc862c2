from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from ..pipeline import FilterJob, FilterSettings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ppmfilter",
        description="Apply a grayscale, invert, emboss or motion blur filter to a P3 PPM image.",
    )
    parser.add_argument("input", nargs="?", help="Input P3 PPM image")
    parser.add_argument("output", nargs="?", help="Output P3 PPM path (parent directories are created)")
    parser.add_argument("filter", nargs="?", help="grayscale | greyscale | invert | emboss | motionblur")
    parser.add_argument("length", nargs="?", help="Blur length in pixels (required for motionblur)")
    parser.add_argument("--preview", metavar="PATH", help="Also save the result as a PNG/JPEG/BMP preview")
    parser.epilog = "Invalid or incomplete invocations print this help and exit without processing."
    return parser


def show_help(parser: argparse.ArgumentParser) -> int:
    parser.print_help()
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args, _ = parser.parse_known_args(argv)
    if args.input is None or args.output is None or args.filter is None:
        return show_help(parser)
    job = FilterJob.from_settings(FilterSettings(args.filter, args.length))
    if job is None:
        return show_help(parser)
    try:
        job.run(args.input, args.output, args.preview)
    except Exception as exc:
        print(str(exc), file=sys.stderr)
        return 2
    print(f"Wrote output to {args.output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
