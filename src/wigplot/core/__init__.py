"""
wigplot/core
~~~~~~~~~~~~
"""

from .config import DEFAULT_CONFIG, TrackConfig
from .errors import (
    BackendCapabilityMismatch,
    ConfigError,
    DataUnavailable,
    EmptyRange,
    UnsupportedMode,
    WigplotError,
)
from .mapping import ColorClass, CoordinateMapper, RenderPoint, Viewport, compute_origin
from .scale import ScaleRange, ScaleResolution, ScaleResolver, round_half_up
from .signal import InMemorySignalSource, Interval, Region, SignalSet, SignalSource, SignalStats

__all__ = [
    "BackendCapabilityMismatch",
    "ColorClass",
    "ConfigError",
    "CoordinateMapper",
    "DataUnavailable",
    "DEFAULT_CONFIG",
    "EmptyRange",
    "InMemorySignalSource",
    "Interval",
    "Region",
    "RenderPoint",
    "ScaleRange",
    "ScaleResolution",
    "ScaleResolver",
    "SignalSet",
    "SignalSource",
    "SignalStats",
    "TrackConfig",
    "UnsupportedMode",
    "Viewport",
    "WigplotError",
    "compute_origin",
    "round_half_up",
]
