"""Port/Protocol definitions for the charting layer.

Defines the minimal drawing capability the renderer needs, so the same
rendering logic can target any 2D raster backend (Pillow images, a GUI
canvas, a test double).

All coordinates passed to drawing commands are logical (CSS) pixels. The
surface maps them to backing pixels using the scale set by ``resize``.
"""

from collections.abc import Sequence
from typing import Literal, Protocol

from wallet_history.charting.styles import Paint, Rgba

Point = tuple[float, float]
TextAlign = Literal["left", "center", "right"]
TextBaseline = Literal["top", "middle", "bottom"]


class IDrawingSurface(Protocol):
    """Abstract 2D drawing surface.

    Responsibility: Rasterise paths and text.
    Does NOT know about series, axes or layout.
    """

    @property
    def size(self) -> tuple[float, float]:
        """Logical display size (width, height)."""
        ...

    def resize(self, pixel_width: int, pixel_height: int, scale: float) -> None:
        """Reallocate the backing buffer and set the logical-to-pixel scale.

        Resizing discards previous content.
        """
        ...

    def clear(self, x: float, y: float, width: float, height: float) -> None:
        """Reset a logical rectangle to fully transparent."""
        ...

    def stroke_path(
        self,
        points: Sequence[Point],
        color: Rgba,
        width: float,
        closed: bool = False,
    ) -> None:
        """Stroke a polyline through ``points``."""
        ...

    def fill_path(self, points: Sequence[Point], paint: Paint) -> None:
        """Fill the polygon through ``points`` with a colour or gradient."""
        ...

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        *,
        color: Rgba,
        font_size: float,
        align: TextAlign = "center",
        baseline: TextBaseline = "middle",
    ) -> None:
        """Draw ``text`` anchored at (x, y)."""
        ...
