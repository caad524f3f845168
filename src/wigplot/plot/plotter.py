"""
wigplot/plot/plotter
~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, Union

import matplotlib.pyplot as plt

from ..core.config import DEFAULT_CONFIG, TrackConfig
from ..core.errors import DataUnavailable
from ..core.mapping import ColorClass, CoordinateMapper, Viewport, compute_origin
from ..core.scale import ScaleRange, ScaleResolution, ScaleResolver
from ..core.signal import InMemorySignalSource, Region, SignalSet, SignalSource, SignalStats
from ..util.logging import get_logger
from .backends import DrawingBackend, MatplotlibBackend
from .renderers.axes import AxesRenderer
from .renderers.base import SeriesOptions
from .renderers.geometry import GeometryBuilder
from .renderers.variance_band import BandGeometry, VarianceBandRenderer
from .style import StyleConfig

logger = get_logger(__name__)


@dataclass
class RenderReport:
    """
    Data class summarizing what one render call drew.
    """

    scale: ScaleRange
    y_origin: int
    points: int = 0
    primitives: int = 0
    skipped: Optional[str] = None
    grid: List[float] = field(default_factory=list)
    ticks: Dict[int, str] = field(default_factory=dict)
    band: Optional[BandGeometry] = None


class PlotOrchestrator:
    """
    Class for rendering one quantitative track into one viewport.

    Each call runs a fixed sequence: resolve the scale, place the zero baseline, draw
    the grid, then (unless the range is empty or the data is unavailable) map and draw
    the series and the variance band, and finally the axis scale, label and description.
    The orchestrator holds only immutable configuration, so one instance may serve
    concurrent calls that each own their backend.
    """

    def __init__(
        self,
        config: TrackConfig = DEFAULT_CONFIG,
        style: Optional[StyleConfig] = None,
    ) -> None:
        """
        Initializes the PlotOrchestrator instance.

        Args:
            config (TrackConfig): Track configuration. Defaults to DEFAULT_CONFIG.
            style (Optional[StyleConfig]): Colors and font metrics. Defaults to None.
        """
        self.config = config
        self.style = style if style is not None else StyleConfig()
        self.scale_resolver = ScaleResolver(config)
        self.geometry = GeometryBuilder(config.graph_type)
        self.variance_band = VarianceBandRenderer(self.style)
        self.axes = AxesRenderer(self.style)

    def render(
        self,
        backend: DrawingBackend,
        source: SignalSource,
        region: Region,
        viewport: Viewport,
        *,
        feature_start: Optional[float] = None,
        x_scale: Optional[float] = None,
        side: Optional[bool] = None,
    ) -> RenderReport:
        """
        Renders the signal of ``region`` into ``viewport``.

        Args:
            backend (DrawingBackend): Drawing backend owned by this call.
            source (SignalSource): Signal data collaborator.
            region (Region): Genomic range shown by the panel.
            viewport (Viewport): Plot body rectangle.

        Kwargs:
            feature_start (Optional[float]): Start of the feature carrying the signal; the
                plot starts at the later of this and the region start. Defaults to None.
            x_scale (Optional[float]): Pixels per genomic unit. Defaults to None, meaning
                the viewport width divided by the region length.
            side (Optional[bool]): Expand bounds to whole numbers. Defaults to None, meaning
                ``config.integer_scale``.

        Returns:
            RenderReport: Summary of the drawn geometry.
        """
        config = self.config
        # Non-bumping overlap hides the scale for the whole call
        scale_side = config.scale if config.scale_visible else "none"
        round_bounds = config.integer_scale if side is None else bool(side)

        signal, global_stats, resolution, skipped = self._resolve(region, source, round_bounds)
        scale = resolution.scale
        y_origin = compute_origin(viewport, scale, pivot_at_min=config.bicolor_pivot == "min")
        report = RenderReport(scale=scale, y_origin=y_origin, skipped=skipped)

        if not config.no_grid:
            report.grid = self.axes.draw_grid(backend, scale, viewport)

        if report.skipped is None and scale.is_empty:
            report.skipped = "empty_range"
        if report.skipped is None:
            if x_scale is None:
                x_scale = viewport.width / region.length if region.length > 0 else 1.0
            f_start = region.start if feature_start is None else max(feature_start, region.start)
            mapper = CoordinateMapper(
                viewport,
                resolution,
                x_scale=x_scale,
                f_start=f_start,
                y_origin=y_origin,
                midpoint=self._midpoint(resolution, global_stats),
                flip=config.flip,
                line_width=config.linewidth,
            )
            points = list(mapper.map_all(signal))
            options = SeriesOptions(
                y_origin=y_origin,
                colors={
                    ColorClass.POSITIVE: config.pos_color,
                    ColorClass.NEGATIVE: config.neg_color,
                },
                line_width=config.linewidth,
                point_symbol=config.point_symbol,
                point_radius=config.point_radius,
            )
            report.points = len(points)
            report.primitives = self.geometry.build(points, backend, options)
            report.band = self._draw_band(backend, resolution, global_stats, viewport, scale_side)
        else:
            logger.debug("Skipping series geometry: %s", report.skipped)

        if scale_side != "none":
            report.ticks = self.axes.draw_scale(backend, scale, viewport, y_origin, scale_side)
        if config.label:
            self.axes.draw_label(backend, config.label, viewport)
        if config.description:
            self.axes.draw_description(backend, config.description, viewport)
        return report

    def _resolve(
        self,
        region: Region,
        source: SignalSource,
        round_bounds: bool,
    ) -> Tuple[SignalSet, Optional[SignalStats], ScaleResolution, Optional[str]]:
        """
        Fetches the signal and resolves the scale, degrading to a placeholder scale when
        the data is unavailable.

        Returns:
            Tuple[SignalSet, Optional[SignalStats], ScaleResolution, Optional[str]]:
                (visible signal, whole-signal stats, resolution, skip reason or None).
        """
        try:
            global_stats = source.get_global_stats()
        except DataUnavailable as exc:
            logger.warning("Whole-signal statistics unavailable: %s", exc)
            global_stats = None
        try:
            signal = source.get_intervals(region)
            view_stats = signal.stats if len(signal) else None
            resolution = self.scale_resolver.resolve(view_stats, global_stats, side=round_bounds)
        except DataUnavailable as exc:
            logger.warning(
                "Signal unavailable for %s..%s (%s); drawing axis only",
                region.start,
                region.end,
                exc,
            )
            return SignalSet(()), global_stats, self._placeholder_resolution(), "data_unavailable"
        return signal, global_stats, resolution, None

    def _placeholder_resolution(self) -> ScaleResolution:
        lo = self.config.min_score if self.config.min_score is not None else 0.0
        hi = self.config.max_score if self.config.max_score is not None else lo + 1.0
        return ScaleResolution(
            scale=ScaleRange(float(lo), float(max(lo, hi))),
            mean=0.0,
            stdev=1.0,
            rescaled=False,
        )

    def _midpoint(
        self,
        resolution: ScaleResolution,
        global_stats: Optional[SignalStats],
    ) -> Optional[float]:
        """
        Resolves the bicolor pivot to a raw score.

        Args:
            resolution (ScaleResolution): Resolved scale.
            global_stats (Optional[SignalStats]): Whole-signal statistics.

        Returns:
            Optional[float]: Pivot score, or None when the track is single-colored.
        """
        pivot = self.config.bicolor_pivot
        if pivot is None:
            return None
        if pivot == "zero":
            return 0.0
        if pivot == "mean":
            return global_stats.mean if global_stats is not None else resolution.mean
        if pivot == "min":
            low = resolution.scale.scaled_min
            if resolution.rescaled:
                return resolution.mean + low * resolution.stdev
            return low
        return float(pivot)

    def _draw_band(
        self,
        backend: DrawingBackend,
        resolution: ScaleResolution,
        global_stats: Optional[SignalStats],
        viewport: Viewport,
        scale_side: str,
    ) -> Optional[BandGeometry]:
        if not self.config.variance_band:
            return None
        if global_stats is None:
            logger.info("Variance band requested but no whole-signal statistics are available")
            return None
        return self.variance_band.render(
            backend,
            global_stats.mean,
            global_stats.stdev,
            resolution.scale,
            viewport,
            rescaled=resolution.rescaled,
            side=scale_side,
        )


def plot_signal(
    signal: Union[SignalSet, SignalSource],
    region: Region,
    *,
    width: int = 800,
    height: int = 100,
    config: TrackConfig = DEFAULT_CONFIG,
    style: Optional[StyleConfig] = None,
    margins: Tuple[int, int, int, int] = (40, 12, 10, 12),
    dpi: float = 100.0,
) -> Tuple[plt.Figure, RenderReport]:
    """
    Renders a signal into a new Matplotlib figure of ``width`` x ``height`` pixels.

    Args:
        signal (Union[SignalSet, SignalSource]): Signal, or a source serving it.
        region (Region): Genomic range to show.

    Kwargs:
        width (int): Canvas width in pixels. Defaults to 800.
        height (int): Canvas height in pixels. Defaults to 100.
        config (TrackConfig): Track configuration. Defaults to DEFAULT_CONFIG.
        style (Optional[StyleConfig]): Track style. Defaults to None.
        margins (Tuple[int, int, int, int]): Left, top, right and bottom space around the
            plot body, in pixels. Defaults to (40, 12, 10, 12).
        dpi (float): Figure resolution. Defaults to 100.0.

    Returns:
        Tuple[plt.Figure, RenderReport]: The figure and the render summary.

    Raises:
        ValueError: If the margins leave no room for the plot body.
    """
    left, top, right, bottom = margins
    if left + right >= width or top + bottom >= height:
        raise ValueError("margins leave no room for the plot body")
    orchestrator = PlotOrchestrator(config, style)
    backend = MatplotlibBackend.for_canvas(
        width, height, dpi=dpi, font_size=float(orchestrator.style["font_size"])
    )
    source = InMemorySignalSource(signal) if isinstance(signal, SignalSet) else signal
    viewport = Viewport(left=left, top=top, right=width - right, bottom=height - bottom)
    report = orchestrator.render(backend, source, region, viewport)
    return backend.ax.figure, report
