"""
Charting layer: renders balance series and answers hover queries.

Modules:
- ports: drawing surface capability the renderer paints through
- renderer: series -> pixels + RenderLayout
- hover: cursor + RenderLayout -> point index -> tooltip payload
- surfaces: concrete drawing backends (Pillow)
"""

from wallet_history.charting.formatting import format_value
from wallet_history.charting.hover import (
    DEFAULT_HOVER_THRESHOLD,
    TooltipPayload,
    locate,
    tooltip_for,
)
from wallet_history.charting.layout import PointPosition, RenderLayout
from wallet_history.charting.ports import IDrawingSurface
from wallet_history.charting.renderer import render
from wallet_history.charting.styles import DEFAULT_STYLE, ChartStyle, LinearGradient, Rgba

__all__ = [
    "ChartStyle",
    "DEFAULT_HOVER_THRESHOLD",
    "DEFAULT_STYLE",
    "IDrawingSurface",
    "LinearGradient",
    "PointPosition",
    "RenderLayout",
    "Rgba",
    "TooltipPayload",
    "format_value",
    "locate",
    "render",
    "tooltip_for",
]
