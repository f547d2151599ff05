from __future__ import annotations

"""Punched tape with a movable cursor.

A tape is a sequence of *characters*, each made of the same number of bits.
Seen along the whole tape the bits form *channels* (or *tracks*).  Characters
and channels are counted from zero.  The diagram below, as produced by
:meth:`Tape.show` with ``wide=True, frame=True`` on a bounded tape, holds
eight characters of three bits::

    +-----------------+
    | * * * *         |  <- channel 2
    | * *     * *     |  <- channel 1
    | *   *   *   *   |  <- channel 0
    +-----------------+

Storage is sparse: only positions that were punched are materialized, every
other position reads as unpunched.  The cursor is plain integer state; it may
be negative or run past the data and is only checked against ``length`` when
a read happens.
"""

import logging
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from .config import TapeConfig
from .constants import (
    BACKWARD_STEP,
    BLANK_MARKS,
    DEFAULT_BITS,
    DEFAULT_LENGTH,
    DEFAULT_ONE,
    DEFAULT_POSITION,
    DEFAULT_ZERO,
    FORWARD_STEP,
    HORIZONTAL,
    ORIENTATIONS,
    VERTICAL,
)

__all__ = ["Tape", "OutOfBounds"]

logger = logging.getLogger(__name__)


class OutOfBounds(IndexError):
    """Read at or beyond the ``length`` of a bounded tape."""

    def __init__(self, position: int, length: int) -> None:
        super().__init__(f"position {position} out of tape of length {length}")
        self.position = position
        self.length = length


class Tape:
    """Sparse, cursor-addressed punched tape.

    Parameters
    ----------
    bits:
        Number of channels per character, fixed for the tape's lifetime.
    length:
        Optional number of valid characters.  ``None`` leaves the tape open
        ended.
    position:
        Start position of the cursor.
    """

    def __init__(
        self,
        bits: int = DEFAULT_BITS,
        length: Optional[int] = DEFAULT_LENGTH,
        position: int = DEFAULT_POSITION,
    ) -> None:
        if bits < 1:
            raise ValueError(f"bit width must be positive, got {bits}")
        self._bits = int(bits)
        self._length = length
        self._cursor = position
        self._cells: Dict[int, np.ndarray] = {}

    @classmethod
    def from_config(cls, config: TapeConfig) -> "Tape":
        return cls(bits=config.bits, length=config.length, position=config.position)

    # -- accessors -------------------------------------------------------
    @property
    def bits(self) -> int:
        return self._bits

    @property
    def length(self) -> Optional[int]:
        return self._length

    @length.setter
    def length(self, value: Optional[int]) -> None:
        self._length = value

    @property
    def position(self) -> int:
        return self._cursor

    @position.setter
    def position(self, value: Optional[int]) -> None:
        self._cursor = DEFAULT_POSITION if value is None else value

    def config(self) -> TapeConfig:
        """Snapshot of the current settings."""
        return TapeConfig(bits=self._bits, length=self._length, position=self._cursor)

    def positions(self) -> List[int]:
        """Sorted positions that hold a materialized character."""
        return sorted(self._cells)

    def holes(self, position: Optional[int] = None) -> np.ndarray:
        """Copy of the channel bits at ``position`` (all ``False`` if blank)."""
        pos = self._cursor if position is None else position
        self._check(pos)
        cell = self._cells.get(pos)
        if cell is None:
            return np.zeros(self._bits, dtype=bool)
        return cell.copy()

    # ------------------------------------------------------------------
    def _check(self, position: int) -> None:
        if self._length is not None and position >= self._length:
            logger.debug("read at %d rejected, length is %d", position, self._length)
            raise OutOfBounds(position, self._length)

    def _symbol(self, position: int, track: int, zero: str, one: str) -> str:
        cell = self._cells.get(position)
        if cell is None or not 0 <= track < self._bits:
            return zero
        return one if cell[track] else zero

    def _span(self, start: Optional[int], end: Optional[int]) -> Tuple[int, int, bool, bool]:
        """Resolve a ``[start, end]`` range and report which ends were defaulted."""
        open_start = start is None
        open_end = end is None and self._length is not None
        if start is None:
            start = 0
        if end is None:
            end = self._length - 1 if self._length is not None else self._cursor
        self._check(max(start, end))
        return start, end, open_start, open_end

    # -- reading ---------------------------------------------------------
    def get(
        self,
        position: Optional[int] = None,
        zero: str = DEFAULT_ZERO,
        one: str = DEFAULT_ONE,
    ) -> str:
        """Return the character at ``position`` (default: the cursor).

        Each channel, starting with channel 0, is rendered as ``one`` when
        punched and ``zero`` otherwise.
        """
        pos = self._cursor if position is None else position
        self._check(pos)
        cell = self._cells.get(pos)
        if cell is None:
            return zero * self._bits
        return "".join(one if hole else zero for hole in cell)

    def next(
        self,
        position: Optional[int] = None,
        zero: str = DEFAULT_ZERO,
        one: str = DEFAULT_ONE,
    ) -> str:
        """Like :meth:`get`, then step the cursor forward by one."""
        char = self.get(position, zero, one)
        self.rewind(BACKWARD_STEP)
        return char

    def __getitem__(self, position: int) -> str:
        return self.get(position)

    # -- writing ---------------------------------------------------------
    def punch(self, data: Sequence[str]) -> int:
        """Punch ``data`` at the cursor and step forward.

        Character ``i`` of ``data`` punches channel ``i`` unless it is one of
        the blank marks (space, ``0``, ``_``, ``-``).  Missing characters are
        blank and extra characters are ignored.  Existing holes are kept, so
        punching the same position again overpunches it.
        """
        add = np.zeros(self._bits, dtype=bool)
        for i, ch in enumerate(data[: self._bits]):
            add[i] = ch not in BLANK_MARKS

        cell = self._cells.get(self._cursor)
        if cell is None:
            self._cells[self._cursor] = add
        else:
            cell |= add
        logger.debug("punch %r at %d", "".join(data[: self._bits]), self._cursor)
        return self.rewind(BACKWARD_STEP)

    # -- moving ----------------------------------------------------------
    def rewind(self, steps: Optional[int] = None) -> int:
        """Move the cursor back by ``steps``, or to zero without argument.

        Negative ``steps`` move forward.  Returns the new position.
        """
        if steps is None:
            self._cursor = DEFAULT_POSITION
        else:
            self._cursor -= steps
        return self._cursor

    def back(self) -> int:
        """Rewind one step."""
        return self.rewind(FORWARD_STEP)

    # -- diagrams --------------------------------------------------------
    def track(
        self,
        track: int,
        start: Optional[int] = None,
        end: Optional[int] = None,
        zero: str = DEFAULT_ZERO,
        one: str = DEFAULT_ONE,
        wide: bool = False,
        frame: bool = False,
    ) -> str:
        """Return one channel over ``[start, end]`` in diagram format.

        ``start`` defaults to 0 and ``end`` to the last position of a bounded
        tape, or to the cursor.  A range with ``start >= end`` has no body.
        """
        start, end, open_start, open_end = self._span(start, end)

        line = ""
        if start < end:
            sep = " " if wide else ""
            line = sep.join(
                self._symbol(pos, track, zero, one) for pos in range(start, end + 1)
            )

        if frame:
            if open_end:
                line += " |"
            if open_start:
                line = "| " + line
        return line

    def show(
        self,
        orientation: str = HORIZONTAL,
        start: Optional[int] = None,
        end: Optional[int] = None,
        zero: str = DEFAULT_ZERO,
        one: str = DEFAULT_ONE,
        wide: bool = False,
        frame: bool = False,
    ) -> str:
        """Return an ASCII diagram of the tape.

        ``horizontal`` prints one line per channel with the highest channel
        on top; ``vertical`` prints one line per character.  ``frame`` only
        applies to the horizontal layout.
        """
        if orientation not in ORIENTATIONS:
            raise ValueError(f"unknown orientation {orientation!r}, expected one of {ORIENTATIONS}")

        first, last, open_start, open_end = self._span(start, end)
        lines: List[str] = []

        if orientation == VERTICAL:
            for pos in range(first, last + 1):
                lines.append(self.get(pos, zero, one))
        else:
            border = None
            if frame:
                n = last - first + 1
                w = n + (n - 1) * int(bool(wide))
                border = ("+-" if open_start else "") + "-" * w + ("-+" if open_end else "")
                lines.append(border)
            for channel in reversed(range(self._bits)):
                lines.append(self.track(channel, start, end, zero, one, wide, frame))
            if border is not None:
                lines.append(border)

        return "".join(line + "\n" for line in lines)

    def __str__(self) -> str:
        return self.show()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(bits={self._bits}, length={self._length}, "
            f"position={self._cursor})"
        )
