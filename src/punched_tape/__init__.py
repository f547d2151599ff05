"""Punched tape emulator.

Build tapes character by character, read them back, print ASCII diagrams
and draw them on a :class:`~punched_tape.surface.DrawingSurface`::

    from punched_tape import Tape

    tape = Tape(bits=5)       # five channel (Honeywell 400, 1964)
    tape.punch("x  xx")       # same as "x xx "
    tape.get(0)               # "*  **"
    tape.punch(" * * *")      # next character
    tape.back()               # rewind one step
    tape.punch(" x")          # overpunch
    print(tape.show(frame=True))
"""

from .config import DrawOptions, TapeConfig
from .debug import _install as _install_logging
from .draw import color, draw_tape
from .surface import DrawingSurface, PillowSurface
from .tape import OutOfBounds, Tape

_install_logging()

__all__ = [
    "Tape",
    "OutOfBounds",
    "TapeConfig",
    "DrawOptions",
    "DrawingSurface",
    "PillowSurface",
    "draw_tape",
    "color",
]
