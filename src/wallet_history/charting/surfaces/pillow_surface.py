"""Pillow implementation of the drawing surface port.

Renders into an in-memory RGBA image. Every drawing command is painted on a
transparent layer and alpha-composited onto the image, so translucent grid
lines and fills blend the way a browser canvas blends them.
"""

from collections.abc import Sequence

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from wallet_history.charting.ports import Point, TextAlign, TextBaseline
from wallet_history.charting.styles import LinearGradient, Paint, Rgba
from wallet_history.infrastructure.observability import get_charting_logger
from wallet_history.shared.exceptions import RenderError

logger = get_charting_logger("pillow-surface")

TRANSPARENT = (0, 0, 0, 0)


class PillowSurface:
    """
    Off-screen drawing surface backed by a PIL image.

    Implements IDrawingSurface protocol.

    Args:
        width: Logical display width (CSS pixels)
        height: Logical display height (CSS pixels)
    """

    def __init__(self, width: float, height: float):
        if width <= 0 or height <= 0:
            raise ValueError(f"Surface size must be positive, got {width}x{height}")
        self._width = float(width)
        self._height = float(height)
        self._scale = 1.0
        self._image = Image.new(
            "RGBA", (max(1, round(width)), max(1, round(height))), TRANSPARENT
        )
        self._fonts: dict[int, ImageFont.ImageFont | ImageFont.FreeTypeFont] = {}

    @property
    def size(self) -> tuple[float, float]:
        return (self._width, self._height)

    @property
    def scale(self) -> float:
        return self._scale

    @property
    def image(self) -> Image.Image:
        """The backing image at device resolution."""
        return self._image

    def resize(self, pixel_width: int, pixel_height: int, scale: float) -> None:
        if scale <= 0:
            raise ValueError(f"scale must be positive, got {scale}")
        self._image = Image.new(
            "RGBA", (max(1, pixel_width), max(1, pixel_height)), TRANSPARENT
        )
        self._scale = scale
        logger.debug(
            "surface_resized", pixel_width=pixel_width, pixel_height=pixel_height, scale=scale
        )

    def clear(self, x: float, y: float, width: float, height: float) -> None:
        box = (
            round(x * self._scale),
            round(y * self._scale),
            round((x + width) * self._scale),
            round((y + height) * self._scale),
        )
        self._image.paste(TRANSPARENT, box)

    def stroke_path(
        self,
        points: Sequence[Point],
        color: Rgba,
        width: float,
        closed: bool = False,
    ) -> None:
        if len(points) < 2:
            return
        pixels = self._to_pixels(points)
        if closed:
            pixels.append(pixels[0])
        layer = self._layer()
        ImageDraw.Draw(layer).line(
            pixels,
            fill=color.to_tuple(),
            width=max(1, round(width * self._scale)),
            joint="curve",
        )
        self._image.alpha_composite(layer)

    def fill_path(self, points: Sequence[Point], paint: Paint) -> None:
        if len(points) < 3:
            return
        pixels = self._to_pixels(points)
        if isinstance(paint, Rgba):
            layer = self._layer()
            ImageDraw.Draw(layer).polygon(pixels, fill=paint.to_tuple())
        else:
            mask = Image.new("L", self._image.size, 0)
            ImageDraw.Draw(mask).polygon(pixels, fill=255)
            layer = self._layer()
            layer.paste(self._gradient(paint), (0, 0), mask)
        self._image.alpha_composite(layer)

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
        if not text:
            return
        font = self._font(max(1, round(font_size * self._scale)))
        layer = self._layer()
        draw = ImageDraw.Draw(layer)
        left, top, right, bottom = draw.textbbox((0, 0), text, font=font)
        text_width, text_height = right - left, bottom - top

        px, py = x * self._scale, y * self._scale
        if align == "center":
            px -= text_width / 2
        elif align == "right":
            px -= text_width
        if baseline == "middle":
            py -= text_height / 2
        elif baseline == "bottom":
            py -= text_height

        draw.text((round(px - left), round(py - top)), text, font=font, fill=color.to_tuple())
        self._image.alpha_composite(layer)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _layer(self) -> Image.Image:
        return Image.new("RGBA", self._image.size, TRANSPARENT)

    def _to_pixels(self, points: Sequence[Point]) -> list[tuple[float, float]]:
        return [(px * self._scale, py * self._scale) for px, py in points]

    def _gradient(self, gradient: LinearGradient) -> Image.Image:
        """Full-size image whose rows follow ``gradient`` (sampled at row centres)."""
        width, height = self._image.size
        rows = np.array(
            [
                gradient.color_at((row + 0.5) / self._scale).to_tuple()
                for row in range(height)
            ],
            dtype=np.uint8,
        )
        pixels = np.ascontiguousarray(
            np.broadcast_to(rows[:, np.newaxis, :], (height, width, 4))
        )
        return Image.fromarray(pixels)

    def _font(self, size: int) -> ImageFont.ImageFont | ImageFont.FreeTypeFont:
        if size not in self._fonts:
            try:
                self._fonts[size] = ImageFont.load_default(size=size)
            except OSError as e:
                raise RenderError(f"Could not load default font at size {size}") from e
        return self._fonts[size]
