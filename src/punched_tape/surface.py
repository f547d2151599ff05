"""Drawing surfaces that :func:`punched_tape.draw.draw_tape` can paint on.

The renderer only needs three primitives, so any vector or raster backend
can be plugged in by implementing :class:`DrawingSurface`.  A Pillow based
raster surface is provided for PNG output.
"""

from __future__ import annotations

from typing import Optional, Protocol, Tuple

from PIL import Image, ImageDraw

from .config import DrawOptions
from .constants import DEFAULT_SCALE

__all__ = ["DrawingSurface", "PillowSurface"]


class DrawingSurface(Protocol):
    def set_color(self, r: float, g: float, b: float) -> None: ...

    def fill_rectangle(self, x: float, y: float, w: float, h: float) -> None: ...

    def fill_circle(self, x: float, y: float, radius: float) -> None: ...


class PillowSurface:
    """Raster :class:`DrawingSurface` backed by :class:`PIL.Image.Image`.

    Parameters
    ----------
    width, height:
        Surface size in drawing units (millimetres for default tapes).
    scale:
        Pixels per drawing unit.
    image:
        Optional existing RGB image to draw into.  When ``None`` a white
        image of ``width * scale`` by ``height * scale`` pixels is created.
    """

    def __init__(
        self,
        width: float,
        height: float,
        scale: float = DEFAULT_SCALE,
        image: Optional[Image.Image] = None,
    ) -> None:
        if image is None:
            size = (max(1, round(width * scale)), max(1, round(height * scale)))
            image = Image.new("RGB", size, (255, 255, 255))
        self.image = image
        self.scale = scale
        self._draw = ImageDraw.Draw(self.image)
        self._fill: Tuple[int, int, int] = (0, 0, 0)

    @classmethod
    def for_tape(
        cls, tape, options: Optional[DrawOptions] = None, scale: float = DEFAULT_SCALE
    ) -> "PillowSurface":
        """Create a surface just large enough for ``tape`` drawn with ``options``."""
        opts = options or DrawOptions()
        n = tape.length if tape.length is not None else tape.position
        return cls(opts.before + opts.distance * max(n, 0) + opts.after, opts.width, scale)

    # -- DrawingSurface --------------------------------------------------
    def set_color(self, r: float, g: float, b: float) -> None:
        self._fill = tuple(max(0, min(255, round(c * 255))) for c in (r, g, b))

    def fill_rectangle(self, x: float, y: float, w: float, h: float) -> None:
        s = self.scale
        self._draw.rectangle([x * s, y * s, (x + w) * s, (y + h) * s], fill=self._fill)

    def fill_circle(self, x: float, y: float, radius: float) -> None:
        s = self.scale
        box = [(x - radius) * s, (y - radius) * s, (x + radius) * s, (y + radius) * s]
        self._draw.ellipse(box, fill=self._fill)

    # ------------------------------------------------------------------
    def save(self, path, format: Optional[str] = None) -> None:
        self.image.save(path, format=format)
