"""
wigplot
~~~~~~~

Quantitative ("wiggle") track rendering: autoscaling, pixel mapping and
boxes/line/points/histogram geometry with an optional variance band.
"""

from .core.config import TrackConfig
from .core.errors import DataUnavailable, UnsupportedMode, WigplotError
from .core.mapping import Viewport
from .core.signal import InMemorySignalSource, Interval, Region, SignalSet, SignalStats
from .plot.plotter import PlotOrchestrator, RenderReport, plot_signal

__all__ = [
    "DataUnavailable",
    "InMemorySignalSource",
    "Interval",
    "PlotOrchestrator",
    "Region",
    "RenderReport",
    "SignalSet",
    "SignalStats",
    "TrackConfig",
    "UnsupportedMode",
    "Viewport",
    "WigplotError",
    "plot_signal",
]

__version__ = "0.1.0"
