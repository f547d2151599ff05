"""Configuration records for tapes and tape drawings."""
from __future__ import annotations

from dataclasses import dataclass, fields, replace as _replace
from typing import Optional, Tuple

from .constants import (
    BACKGROUND_RGB,
    DEFAULT_BITS,
    DEFAULT_LENGTH,
    DEFAULT_POSITION,
    FEED_RADIUS,
    FEED_RGB,
    FEED_TRACK,
    HOLE_RADIUS,
    HOLE_RGB,
    LEADER,
    TAPE_MARGIN,
    TAPE_WIDTH,
    TRACK_DISTANCE,
    TRAILER,
)

Color = Tuple[float, float, float]


@dataclass(frozen=True)
class TapeConfig:
    """Construction parameters of a :class:`~punched_tape.tape.Tape`."""

    bits: int = DEFAULT_BITS
    length: Optional[int] = DEFAULT_LENGTH
    position: int = DEFAULT_POSITION

    def __post_init__(self) -> None:
        if self.bits < 1:
            raise ValueError(f"bit width must be positive, got {self.bits}")


@dataclass(frozen=True)
class DrawOptions:
    """Layout of a drawn tape.

    Parameters
    ----------
    width:
        Width of the paper across all tracks.
    distance:
        Pitch between two characters along the tape.
    margin:
        Paper left free above the top row and below the bottom row.
    before, after:
        Blank leader and trailer length.
    background:
        Paper color.
    feed_track:
        Channel index the sprocket row is inserted below, or ``None`` for a
        tape without feed holes.
    feed_radius, feed_color:
        Feed hole geometry and color.
    hole_radius, hole_color:
        Code hole geometry and color.

    Colors are either ``[0, 1]`` floats or ``0..255`` integers; see
    :func:`punched_tape.draw.color`.
    """

    width: float = TAPE_WIDTH
    distance: float = TRACK_DISTANCE
    margin: float = TAPE_MARGIN
    before: float = LEADER
    after: float = TRAILER
    background: Color = BACKGROUND_RGB
    feed_track: Optional[int] = FEED_TRACK
    feed_radius: float = FEED_RADIUS
    feed_color: Color = FEED_RGB
    hole_radius: float = HOLE_RADIUS
    hole_color: Color = HOLE_RGB

    @property
    def has_feed(self) -> bool:
        return self.feed_track is not None

    def replace(self, **changes) -> "DrawOptions":
        """Return a copy with ``changes`` applied."""
        known = {f.name for f in fields(self)}
        unknown = sorted(set(changes) - known)
        if unknown:
            raise TypeError(f"unknown draw option(s): {', '.join(unknown)}")
        return _replace(self, **changes)
