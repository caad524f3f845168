"""
wigplot/plot/renderers/geometry
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from typing import Dict, Iterable, Sequence, Tuple, TYPE_CHECKING

from ...core.errors import BackendCapabilityMismatch, UnsupportedMode
from ...util.logging import get_logger
from .base import SeriesOptions, SeriesRenderer

if TYPE_CHECKING:
    from ...core.mapping import RenderPoint
    from ..backends import DrawingBackend

logger = get_logger(__name__)


class BoxesRenderer:
    """
    Class for drawing each point as a filled box between its score row and the baseline.
    """

    def render(
        self,
        points: Sequence[RenderPoint],
        backend: DrawingBackend,
        options: SeriesOptions,
    ) -> int:
        drawn = 0
        for p in points:
            if p.y1 == p.y2:
                continue
            color = options.colors[p.color_class]
            width = abs(p.x2 - p.x1)
            # Slivers become lines; zero width only where the backend cannot fill it
            if width == 1 or (width == 0 and not backend.supports_zero_width_fill):
                backend.draw_line(p.x1, p.y1, p.x1, p.y2, color)
            else:
                backend.fill_rectangle(p.x1, p.y1, p.x2, p.y2, color)
            drawn += 1
        return drawn


class LineRenderer:
    """
    Class for joining consecutive points' top-left corners with straight segments.
    """

    def render(
        self,
        points: Sequence[RenderPoint],
        backend: DrawingBackend,
        options: SeriesOptions,
    ) -> int:
        if not points:
            return 0
        thick = options.line_width > 1
        if thick:
            backend.set_line_width(options.line_width)
        drawn = 0
        current = points[0]
        for p in points[1:]:
            backend.draw_line(current.x1, current.y1, p.x1, p.y1, options.colors[p.color_class])
            current = p
            drawn += 1
        if thick:
            backend.set_line_width(1)
        return drawn


class PointsRenderer:
    """
    Class for stamping a symbol at each point's top-left corner.
    """

    def render(
        self,
        points: Sequence[RenderPoint],
        backend: DrawingBackend,
        options: SeriesOptions,
    ) -> int:
        name, filled = parse_symbol(options.point_symbol)
        if name not in backend.symbols:
            raise BackendCapabilityMismatch(
                f"Backend cannot draw symbol {name!r}; available: {sorted(backend.symbols)}"
            )
        for p in points:
            backend.draw_symbol(
                name,
                p.x1,
                p.y1,
                options.point_radius,
                options.colors[p.color_class],
                filled,
            )
        return len(points)


class HistogramRenderer:
    """
    Class for drawing bars that run from the previous bar's left edge to the current point's
    right edge.
    """

    def render(
        self,
        points: Sequence[RenderPoint],
        backend: DrawingBackend,
        options: SeriesOptions,
    ) -> int:
        if not points:
            return 0
        y_origin = options.y_origin
        drawn = 0
        current = points[0]
        for p in points[1:]:
            # Points on the baseline have no bar and do not advance the left edge
            if p.y1 == p.y2:
                continue
            y_start, y_end = (p.y1, y_origin) if p.y1 < y_origin else (y_origin, p.y1)
            color = options.colors[p.color_class]
            if abs(p.x2 - current.x1) < 2:
                backend.draw_line(current.x1, y_start, current.x1, y_end, color)
            else:
                backend.fill_rectangle(current.x1, y_start, p.x2, y_end, color)
            current = p
            drawn += 1
        return drawn


def parse_symbol(symbol: str) -> Tuple[str, bool]:
    """
    Splits a point symbol option into its shape name and filled flag.

    Args:
        symbol (str): Symbol option, e.g. ``"filled_square"``.

    Returns:
        Tuple[str, bool]: (shape name, filled).
    """
    prefix = "filled_"
    if symbol.startswith(prefix):
        return symbol[len(prefix) :], True
    return symbol, False


_BOXES = BoxesRenderer()
_LINE = LineRenderer()
_POINTS = PointsRenderer()
_HISTOGRAM = HistogramRenderer()

# Graph type -> strategies run in order
_STRATEGIES: Dict[str, Tuple[SeriesRenderer, ...]] = {
    "boxes": (_BOXES,),
    "line": (_LINE,),
    "points": (_POINTS,),
    "linepoints": (_LINE, _POINTS),
    "histogram": (_HISTOGRAM,),
}


class GeometryBuilder:
    """
    Class for turning mapped points into drawing primitives for one graph type.
    """

    def __init__(self, graph_type: str) -> None:
        """
        Initializes the GeometryBuilder instance.

        Args:
            graph_type (str): One of boxes, line, points, linepoints, histogram.

        Raises:
            UnsupportedMode: If ``graph_type`` is not recognized.
        """
        if graph_type not in _STRATEGIES:
            raise UnsupportedMode(
                f"Unknown graph type {graph_type!r}; expected one of {tuple(_STRATEGIES)}"
            )
        self.graph_type = graph_type
        self.strategies = _STRATEGIES[graph_type]

    def build(
        self,
        points: Iterable[RenderPoint],
        backend: DrawingBackend,
        options: SeriesOptions,
    ) -> int:
        """
        Draws the points with every strategy of the graph type.

        Args:
            points (Iterable[RenderPoint]): Mapped points; consumed once.
            backend (DrawingBackend): Drawing backend.
            options (SeriesOptions): Drawing options for this call.

        Returns:
            int: Number of series primitives drawn.
        """
        materialized = list(points)
        drawn = sum(s.render(materialized, backend, options) for s in self.strategies)
        logger.debug(
            "Drew %d %s primitive(s) from %d point(s)", drawn, self.graph_type, len(materialized)
        )
        return drawn
