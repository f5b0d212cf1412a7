"""
Balance Chart Workflow
======================

Composes the history and charting layers for one chart view:

    clock -> build_grid -> reconstruct -> render -> ChartSnapshot
    ChartSnapshot + cursor -> locate -> tooltip_for -> TooltipPayload

The workflow holds no drawing state of its own. Each run returns a
ChartSnapshot, and hover queries are answered against the snapshot the
caller passes back in, so a layout is only ever read together with the
series it was rendered from.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from decimal import Decimal

from wallet_history.charting.hover import TooltipPayload, locate, tooltip_for
from wallet_history.charting.layout import RenderLayout
from wallet_history.charting.ports import IDrawingSurface
from wallet_history.charting.renderer import render
from wallet_history.config.state import ConfigState
from wallet_history.history.reconstruction import SeriesPoint, reconstruct
from wallet_history.history.summary import MonthlySummary, monthly_summary
from wallet_history.history.time_grid import TimeBucket, build_grid_for
from wallet_history.infrastructure.impls import SystemClock
from wallet_history.infrastructure.observability import get_orchestration_logger
from wallet_history.infrastructure.ports import IClock
from wallet_history.shared.models import ChartView, TransactionRecord


@dataclass(frozen=True, slots=True)
class ChartSnapshot:
    """Everything one render produced, kept together for hover queries."""

    view: ChartView
    grid: tuple[TimeBucket, ...]
    series: tuple[SeriesPoint, ...]
    layout: RenderLayout

    @property
    def is_placeholder(self) -> bool:
        return self.layout.is_empty


class BalanceChartWorkflow:
    """
    Builds, reconstructs and renders the balance chart of a view.

    Args:
        config: Loaded configuration; defaults are used when omitted
        clock: Source of "now" for the time grid
    """

    def __init__(self, config: ConfigState | None = None, clock: IClock | None = None):
        self.config = config or ConfigState()
        self.clock = clock or SystemClock()

    def run(
        self,
        transactions: Iterable[TransactionRecord],
        current_balance: Decimal | int | float,
        surface: IDrawingSurface,
        device_pixel_ratio: float = 1.0,
        view: ChartView | str = ChartView.DASHBOARD,
    ) -> ChartSnapshot:
        """
        Render the balance history of one wallet for ``view``.

        Args:
            transactions: Wallet transaction log, any order
            current_balance: Balance at the time of the call
            surface: Drawing surface to paint on
            device_pixel_ratio: Backing pixels per logical pixel
            view: Which view's grid shape and axis format to use

        Returns:
            ChartSnapshot for later hover queries

        Raises:
            ValueError: If the view is unknown or device_pixel_ratio is not positive
        """
        view = ChartView(view)
        view_config = self.config.view(view)
        logger = get_orchestration_logger(view=view.value)

        now = self.clock.utcnow()
        grid = build_grid_for(now, view_config.bucket_count, view_config.granularity)
        series = reconstruct(transactions, current_balance, grid)
        layout = render(
            surface,
            series,
            device_pixel_ratio,
            style=self.config.chart.to_style(),
            grid_lines=view_config.grid_lines,
            value_format=view_config.value_format,
            currency_symbol=self.config.formatting.currency_symbol,
            decimals=self.config.formatting.decimals,
        )

        logger.info(
            "chart_workflow_completed",
            buckets=len(grid),
            placeholder=layout.is_empty,
            now=now.isoformat(),
        )
        return ChartSnapshot(view=view, grid=tuple(grid), series=tuple(series), layout=layout)

    def tooltip(
        self,
        snapshot: ChartSnapshot,
        cursor_x: float,
        cursor_y: float,
    ) -> TooltipPayload | None:
        """
        Resolve the tooltip for a cursor position over a rendered chart.

        Returns:
            TooltipPayload, or None when no point is within the hover
            threshold or the snapshot's layout does not match its series
        """
        layout = snapshot.layout
        if layout.is_empty:
            return None
        if len(layout.points) != len(snapshot.series):
            get_orchestration_logger(view=snapshot.view.value).warning(
                "stale_layout",
                points=len(layout.points),
                series=len(snapshot.series),
            )
            return None

        index = locate(cursor_x, cursor_y, layout, self.config.hover.threshold)
        view_config = self.config.view(snapshot.view)
        return tooltip_for(
            index,
            snapshot.series,
            value_format=view_config.value_format,
            currency_symbol=self.config.formatting.currency_symbol,
            decimals=self.config.formatting.decimals,
            granularity=view_config.granularity,
        )

    def summary(
        self,
        transactions: Sequence[TransactionRecord],
        current_balance: Decimal | int | float,
    ) -> MonthlySummary:
        """Month-to-date activity summary shown next to the reports chart."""
        return monthly_summary(transactions, current_balance, self.clock.utcnow())
