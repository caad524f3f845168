"""
wigplot/core/errors
~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations


class WigplotError(Exception):
    """
    Base class for all rendering pipeline errors.
    """


class DataUnavailable(WigplotError):
    """
    Raised when no usable signal or statistics exist for a render call.
    The orchestrator degrades to an axis-only plot.
    """


class EmptyRange(WigplotError):
    """
    Raised on request when the resolved scale has no vertical extent.
    """


class UnsupportedMode(WigplotError, ValueError):
    """
    Raised for an unknown graph type.
    """


class BackendCapabilityMismatch(WigplotError):
    """
    Raised when the drawing backend cannot draw what was requested and no fallback exists.
    """


class ConfigError(WigplotError, ValueError):
    """
    Raised when track options fail validation.
    """
