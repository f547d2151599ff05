"""Lightweight shared constants for punched tape modules.

Keeping the defaults here lets the configuration dataclasses, the tape and
the renderer agree on one set of values without importing each other.
"""
from __future__ import annotations

# -- tape ---------------------------------------------------------------
DEFAULT_BITS = 5  # five channel, Honeywell 400 (1964)
DEFAULT_LENGTH = None  # unbounded
DEFAULT_POSITION = 0

# Characters that leave a channel unpunched.
BLANK_MARKS = frozenset(" 0_-")

DEFAULT_ZERO = " "
DEFAULT_ONE = "*"

# ``rewind`` subtracts its argument from the cursor, so stepping forward
# means rewinding by BACKWARD_STEP.
FORWARD_STEP = 1
BACKWARD_STEP = -1

HORIZONTAL = "horizontal"
VERTICAL = "vertical"
ORIENTATIONS = (HORIZONTAL, VERTICAL)

# -- drawing (millimetres) ------------------------------------------------
TAPE_WIDTH = 25.4  # one inch; 17.46 is the other common format
TRACK_DISTANCE = 2.54  # 0.1 inch between characters
TAPE_MARGIN = 2.54
LEADER = 10.0
TRAILER = 10.0
BACKGROUND_RGB = (0xEE, 0xDD, 0xDD)

FEED_TRACK = 2
FEED_RADIUS = 1.17 / 2  # feed hole diameter 1.17mm
FEED_RGB = (0.1, 0.1, 0.1)

HOLE_RADIUS = 1.83 / 2  # code hole diameter 1.83mm
HOLE_RGB = (0.0, 0.0, 0.0)

# Pixels per millimetre for raster surfaces.
DEFAULT_SCALE = 10.0
