"""Command line entry point so ``python -m punched_tape`` punches a tape.

Examples::

    python -m punched_tape --bits 3 x0x _*_
    python -m punched_tape --bits 8 --length 6 --frame --wide 1x1 < x1 --png tape.png

A ``<`` argument backs up one character so the next one overpunches it.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import debug
from .config import DrawOptions, TapeConfig
from .constants import DEFAULT_BITS, DEFAULT_ONE, DEFAULT_SCALE, DEFAULT_ZERO, HORIZONTAL, VERTICAL
from .draw import draw_tape
from .surface import PillowSurface
from .tape import OutOfBounds, Tape

logger = logging.getLogger(__name__)

BACK_MARK = "<"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m punched_tape",
        description="Punch characters on a tape and print or draw it.",
    )
    parser.add_argument("data", nargs="*", help=f"characters to punch in order; '{BACK_MARK}' steps back one")
    parser.add_argument("--bits", type=int, default=DEFAULT_BITS, help="channels per character (default: %(default)s)")
    parser.add_argument("--length", type=int, default=None, help="bound the tape to this many characters")
    parser.add_argument("--vertical", action="store_true", help="one line per character")
    parser.add_argument("--wide", action="store_true", help="separate characters with a space")
    parser.add_argument("--frame", action="store_true", help="draw a border around the diagram")
    parser.add_argument("--zero", default=DEFAULT_ZERO, help="symbol for unpunched holes")
    parser.add_argument("--one", default=DEFAULT_ONE, help="symbol for punched holes")
    parser.add_argument("--png", type=Path, default=None, help="also draw the tape into this PNG file")
    parser.add_argument("--scale", type=float, default=DEFAULT_SCALE, help="pixels per millimetre for --png")
    parser.add_argument("--no-feed", action="store_true", help="omit the feed hole row in --png output")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def punch_all(tape: Tape, data: List[str]) -> Tape:
    for item in data:
        if item == BACK_MARK:
            tape.back()
        else:
            tape.punch(item)
    return tape


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        debug.enable(True)

    try:
        tape = Tape.from_config(TapeConfig(bits=args.bits, length=args.length))
    except ValueError as exc:
        print(f"punched_tape: {exc}", file=sys.stderr)
        return 2

    punch_all(tape, args.data)

    try:
        sys.stdout.write(
            tape.show(
                VERTICAL if args.vertical else HORIZONTAL,
                zero=args.zero,
                one=args.one,
                wide=args.wide,
                frame=args.frame,
            )
        )
        if args.png is not None:
            options = DrawOptions(feed_track=None) if args.no_feed else DrawOptions()
            surface = PillowSurface.for_tape(tape, options, scale=args.scale)
            draw_tape(tape, surface, options)
            surface.save(args.png)
            logger.info("wrote %s", args.png)
    except OutOfBounds as exc:
        print(f"punched_tape: {exc}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"punched_tape: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
