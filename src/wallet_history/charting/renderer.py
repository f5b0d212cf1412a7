"""Balance chart renderer.

Draws a reconstructed series as a gradient-filled area with a line, point
markers, horizontal grid lines and axis labels, then returns the layout
snapshot hover lookups need. Every call is a full repaint; nothing is kept
between calls.

Drawing order:
    resize -> clear -> (placeholder | grid -> area -> line -> markers -> labels)
"""

import math
from collections.abc import Sequence

from wallet_history.charting.formatting import (
    DEFAULT_CURRENCY_SYMBOL,
    DEFAULT_DECIMALS,
    format_value,
)
from wallet_history.charting.layout import PointPosition, RenderLayout
from wallet_history.charting.ports import IDrawingSurface, Point
from wallet_history.charting.styles import DEFAULT_STYLE, ChartStyle, LinearGradient
from wallet_history.history.reconstruction import SeriesPoint, series_values
from wallet_history.infrastructure.observability import get_charting_logger
from wallet_history.shared.models.enums import ValueFormat

logger = get_charting_logger("renderer")

MARKER_SEGMENTS = 24
Y_LABEL_GAP = 8.0


def _marker(center: PointPosition, radius: float) -> list[Point]:
    """Polygon approximating a circle around ``center``."""
    return [
        (
            center.x + radius * math.cos(2 * math.pi * i / MARKER_SEGMENTS),
            center.y + radius * math.sin(2 * math.pi * i / MARKER_SEGMENTS),
        )
        for i in range(MARKER_SEGMENTS)
    ]


def _positions(
    values: Sequence[float],
    max_value: float,
    padding: float,
    plot_width: float,
    plot_height: float,
) -> tuple[PointPosition, ...]:
    n = len(values)
    positions = []
    for index, value in enumerate(values):
        # a lone point sits in the middle of the plot
        fraction = index / (n - 1) if n > 1 else 0.5
        positions.append(
            PointPosition(
                x=padding + plot_width * fraction,
                y=padding + plot_height * (1 - value / max_value),
            )
        )
    return tuple(positions)


def render(
    surface: IDrawingSurface,
    series: Sequence[SeriesPoint],
    device_pixel_ratio: float,
    *,
    style: ChartStyle = DEFAULT_STYLE,
    grid_lines: int = 5,
    value_format: ValueFormat = ValueFormat.PLAIN,
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL,
    decimals: int = DEFAULT_DECIMALS,
) -> RenderLayout:
    """
    Paint ``series`` onto ``surface`` at device resolution.

    Args:
        surface: Drawing surface; its ``size`` is the logical display size
        series: Reconstructed balance series, oldest first
        device_pixel_ratio: Backing pixels per logical pixel
        style: Colours, padding and text settings
        grid_lines: Number of equal divisions of the plot height
        value_format: How y-axis values are printed
        currency_symbol: Unit for CURRENCY formatting
        decimals: Decimal places for y-axis values

    Returns:
        RenderLayout with the logical position of every plotted point, or an
        empty layout when the placeholder was drawn

    Raises:
        ValueError: If device_pixel_ratio or grid_lines is not positive
    """
    if device_pixel_ratio <= 0:
        raise ValueError(f"device_pixel_ratio must be positive, got {device_pixel_ratio}")
    if grid_lines < 1:
        raise ValueError(f"grid_lines must be >= 1, got {grid_lines}")

    width, height = surface.size
    surface.resize(
        round(width * device_pixel_ratio),
        round(height * device_pixel_ratio),
        device_pixel_ratio,
    )
    surface.clear(0, 0, width, height)
    if style.background.a:
        surface.fill_path(
            [(0, 0), (width, 0), (width, height), (0, height)], style.background
        )

    values = series_values(series)
    if not values or all(value == 0 for value in values):
        surface.draw_text(
            style.placeholder_text,
            width / 2,
            height / 2,
            color=style.text_color,
            font_size=style.font_size,
            align="center",
            baseline="middle",
        )
        logger.debug("placeholder_rendered", points=len(values))
        return RenderLayout.empty()

    max_value = max(max(values), 1.0)
    padding = style.padding
    plot_width = max(width - 2 * padding, 0.0)
    plot_height = max(height - 2 * padding, 0.0)
    bottom = padding + plot_height

    # Grid
    for i in range(grid_lines + 1):
        y = padding + plot_height * i / grid_lines
        surface.stroke_path(
            [(padding, y), (padding + plot_width, y)],
            style.grid_color,
            style.grid_line_width,
        )

    positions = _positions(values, max_value, padding, plot_width, plot_height)
    line: list[Point] = [(p.x, p.y) for p in positions]

    # Area
    area = [(line[0][0], bottom), *line, (line[-1][0], bottom)]
    gradient = LinearGradient(
        y0=padding,
        y1=bottom,
        stops=((0.0, style.fill_top_color), (1.0, style.fill_bottom_color)),
    )
    surface.fill_path(area, gradient)

    # Line and markers
    surface.stroke_path(line, style.line_color, style.line_width)
    for position, value in zip(positions, values):
        if value != 0:
            surface.fill_path(_marker(position, style.marker_radius), style.marker_color)

    # X-axis labels, centered in the bottom padding band
    for position, point in zip(positions, series):
        if point.bucket.label:
            surface.draw_text(
                point.bucket.label,
                position.x,
                bottom + padding / 2,
                color=style.text_color,
                font_size=style.font_size,
                align="center",
                baseline="middle",
            )

    # Y-axis labels at each grid line
    for i in range(grid_lines + 1):
        fraction = 1 - i / grid_lines
        surface.draw_text(
            format_value(
                max_value * fraction,
                value_format,
                currency_symbol=currency_symbol,
                decimals=decimals,
            ),
            padding - Y_LABEL_GAP,
            padding + plot_height * i / grid_lines,
            color=style.text_color,
            font_size=style.font_size,
            align="right",
            baseline="middle",
        )

    logger.debug(
        "chart_rendered",
        points=len(positions),
        max_value=max_value,
        device_pixel_ratio=device_pixel_ratio,
    )
    return RenderLayout(
        origin_x=padding,
        origin_y=padding,
        plot_width=plot_width,
        plot_height=plot_height,
        points=positions,
    )
