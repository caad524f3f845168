"""Track layer renderers."""

from .axes import AxesRenderer
from .base import SeriesOptions, SeriesRenderer
from .geometry import (
    BoxesRenderer,
    GeometryBuilder,
    HistogramRenderer,
    LineRenderer,
    PointsRenderer,
    parse_symbol,
)
from .variance_band import BandGeometry, VarianceBandRenderer

__all__ = [
    "AxesRenderer",
    "BandGeometry",
    "BoxesRenderer",
    "GeometryBuilder",
    "HistogramRenderer",
    "LineRenderer",
    "PointsRenderer",
    "SeriesOptions",
    "SeriesRenderer",
    "VarianceBandRenderer",
    "parse_symbol",
]
