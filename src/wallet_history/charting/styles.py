"""Paint primitives shared by the renderer and drawing surfaces.

Colours are straight (non-premultiplied) RGBA with 8-bit channels. A paint is
either a solid colour or a vertical linear gradient expressed in logical
pixels.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


@dataclass(frozen=True, slots=True)
class Rgba:
    """An RGBA colour with 0-255 channels."""

    r: int
    g: int
    b: int
    a: int = 255

    @classmethod
    def from_hex(cls, value: str) -> Rgba:
        """Parse ``#RRGGBB`` or ``#RRGGBBAA``.

        Raises:
            ValueError: If the string is not a hex colour.
        """
        match = _HEX_RE.match(value.strip())
        if not match:
            raise ValueError(f"Invalid hex colour: {value!r}")
        digits = match.group(1)
        channels = [int(digits[i : i + 2], 16) for i in range(0, len(digits), 2)]
        return cls(*channels)

    def to_tuple(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)

    def lerp(self, other: Rgba, t: float) -> Rgba:
        """Interpolate channel-wise towards ``other``; ``t`` is clamped to [0, 1]."""
        t = min(max(t, 0.0), 1.0)
        return Rgba(
            round(self.r + (other.r - self.r) * t),
            round(self.g + (other.g - self.g) * t),
            round(self.b + (other.b - self.b) * t),
            round(self.a + (other.a - self.a) * t),
        )


@dataclass(frozen=True, slots=True)
class LinearGradient:
    """Vertical gradient between two logical y coordinates.

    Args:
        y0: Logical y where ``stops`` offset 0.0 applies.
        y1: Logical y where ``stops`` offset 1.0 applies.
        stops: (offset, colour) pairs sorted by offset in [0, 1].
    """

    y0: float
    y1: float
    stops: tuple[tuple[float, Rgba], ...]

    def color_at(self, y: float) -> Rgba:
        """Colour at logical ``y``; values outside [y0, y1] take the end stops."""
        if not self.stops:
            raise ValueError("Gradient has no colour stops")
        span = self.y1 - self.y0
        offset = 0.0 if span == 0 else (y - self.y0) / span
        first_offset, first_color = self.stops[0]
        if offset <= first_offset:
            return first_color
        for (lo, lo_color), (hi, hi_color) in zip(self.stops, self.stops[1:]):
            if offset <= hi:
                width = hi - lo
                return lo_color if width == 0 else lo_color.lerp(hi_color, (offset - lo) / width)
        return self.stops[-1][1]


Paint = Rgba | LinearGradient


@dataclass(frozen=True, slots=True)
class ChartStyle:
    """Resolved visual settings for one render call (logical pixels)."""

    padding: float = 40.0
    background: Rgba = Rgba(0, 0, 0, 0)
    grid_color: Rgba = Rgba(59, 130, 246, 26)
    line_color: Rgba = Rgba(59, 130, 246, 255)
    fill_top_color: Rgba = Rgba(59, 130, 246, 77)
    fill_bottom_color: Rgba = Rgba(59, 130, 246, 0)
    marker_color: Rgba = Rgba(59, 130, 246, 255)
    text_color: Rgba = Rgba(156, 163, 175, 255)
    line_width: float = 2.0
    grid_line_width: float = 1.0
    marker_radius: float = 3.0
    font_size: int = 11
    placeholder_text: str = "No balance history yet"


DEFAULT_STYLE = ChartStyle()
