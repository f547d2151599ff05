"""Draw images of punched tapes.

:func:`draw_tape` paints a :class:`~punched_tape.tape.Tape` onto any
:class:`~punched_tape.surface.DrawingSurface`.  Geometry follows one inch
tape: tracks 0.1 inch apart, round code holes and a row of smaller feed holes
inserted between two data channels::

    tape = Tape(bits=8, length=20)
    draw_tape(tape, surface, feed_track=3)

The tape is only read, never moved.
"""

from __future__ import annotations

import logging
from numbers import Integral
from typing import Optional, Tuple

from .config import DrawOptions
from .surface import DrawingSurface
from .tape import Tape

__all__ = ["draw_tape", "color", "row_of"]

logger = logging.getLogger(__name__)


def color(*components) -> Tuple[float, ...]:
    """Normalize a color to ``[0, 1]`` components.

    Integers are read as ``0..255`` channel values, anything else is taken
    as already normalized.  Without arguments black is returned.
    """
    if not components:
        return (0.0, 0.0, 0.0)
    return tuple(
        c / 255.0 if isinstance(c, Integral) and not isinstance(c, bool) else float(c)
        for c in components
    )


def row_of(track: int, bits: int, feed_track: Optional[int] = None) -> int:
    """Row of ``track`` counted from the top edge of the tape.

    The highest channel is on top.  With a feed row, channels at or above
    ``feed_track`` move up one row to make room for it.
    """
    if feed_track is None:
        return bits - 1 - track
    row = bits - track
    if track >= feed_track:
        row -= 1
    return row


def draw_tape(
    tape: Tape,
    surface: DrawingSurface,
    options: Optional[DrawOptions] = None,
    **overrides,
) -> int:
    """Draw ``tape`` on ``surface`` and return the number of holes drawn.

    ``options`` defaults to :class:`DrawOptions`; keyword ``overrides``
    replace single fields of it.  Only the first ``tape.length`` characters
    are drawn, or up to the cursor for an unbounded tape.
    A negative cursor draws an empty tape.  Raises :class:`ValueError` when
    the feed row is not inserted at a channel in ``0..bits``.
    """
    opts = options or DrawOptions()
    if overrides:
        opts = opts.replace(**overrides)

    length = max(tape.length if tape.length is not None else tape.position, 0)
    bits = tape.bits
    if opts.has_feed and not 0 <= opts.feed_track <= bits:
        raise ValueError(f"feed_track must lie in 0..{bits}, got {opts.feed_track}")

    # background
    surface.set_color(*color(*opts.background))
    surface.fill_rectangle(0, 0, opts.before + opts.distance * length + opts.after, opts.width)

    rows = bits + 1 if opts.has_feed else bits
    dy = (opts.width - 2 * opts.margin) / rows

    def y_of(row: int) -> float:
        return opts.margin + (row + 0.5) * dy

    feed_rgb = color(*opts.feed_color)
    hole_rgb = color(*opts.hole_color)
    feed_y = y_of(bits - opts.feed_track) if opts.has_feed else None
    track_y = [y_of(row_of(t, bits, opts.feed_track)) for t in range(bits)]

    holes = 0
    for pos in range(length):
        x = opts.before + pos * opts.distance

        if feed_y is not None:
            surface.set_color(*feed_rgb)
            surface.fill_circle(x, feed_y, opts.feed_radius)

        punched = tape.holes(pos)
        for t in range(bits):
            if punched[t]:
                surface.set_color(*hole_rgb)
                surface.fill_circle(x, track_y[t], opts.hole_radius)
                holes += 1

    logger.debug("drew %d characters, %d holes on %s", length, holes, type(surface).__name__)
    return holes
