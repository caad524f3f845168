"""
wigplot/plot
~~~~~~~~~~~~
"""

from .backends import DrawCommand, DrawingBackend, MatplotlibBackend, RecordingBackend
from .plotter import PlotOrchestrator, RenderReport, plot_signal
from .style import DEFAULT_STYLE, StyleConfig

__all__ = [
    "DEFAULT_STYLE",
    "DrawCommand",
    "DrawingBackend",
    "MatplotlibBackend",
    "PlotOrchestrator",
    "RecordingBackend",
    "RenderReport",
    "StyleConfig",
    "plot_signal",
]
