"""Layout metadata produced by one render pass."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PointPosition:
    """Logical pixel position of a plotted series point."""

    x: float
    y: float


@dataclass(frozen=True, slots=True)
class RenderLayout:
    """Geometry of the most recent render, consumed by hover lookups.

    Replaced wholesale on every render; an empty ``points`` tuple means the
    renderer drew the placeholder and nothing is hoverable.
    """

    origin_x: float
    origin_y: float
    plot_width: float
    plot_height: float
    points: tuple[PointPosition, ...] = ()

    @classmethod
    def empty(cls) -> RenderLayout:
        return cls(origin_x=0.0, origin_y=0.0, plot_width=0.0, plot_height=0.0)

    @property
    def is_empty(self) -> bool:
        return not self.points
