"""
tests/conftest
~~~~~~~~~~~~~~
"""

import pytest

from wigplot.core import (
    ColorClass,
    InMemorySignalSource,
    Interval,
    Region,
    SignalSet,
    Viewport,
)
from wigplot.plot import RecordingBackend
from wigplot.plot.renderers import SeriesOptions


@pytest.fixture
def viewport():
    """
    Returns a 100 x 100 pixel plot body starting at x=10.

    Returns:
        Viewport: Plot body rectangle.
    """
    return Viewport(left=10, top=0, right=110, bottom=100)


@pytest.fixture
def region():
    """
    Returns a 100 bp region, so one genomic unit maps to one pixel in `viewport`.

    Returns:
        Region: Genomic region.
    """
    return Region(0, 100)


@pytest.fixture
def ramp_signal():
    """
    Returns ten adjacent 10 bp intervals scored 0..9.

    Returns:
        SignalSet: Ramp signal.
    """
    return SignalSet([Interval(i * 10, i * 10 + 10, float(i)) for i in range(10)])


@pytest.fixture
def ramp_source(ramp_signal):
    """
    Returns an in-memory source serving the ramp signal.

    Args:
        ramp_signal (SignalSet): Ramp signal fixture.

    Returns:
        InMemorySignalSource: Signal source.
    """
    return InMemorySignalSource(ramp_signal)


@pytest.fixture
def backend():
    """
    Returns a recording backend that can fill zero-width rectangles.

    Returns:
        RecordingBackend: Fresh backend.
    """
    return RecordingBackend()


@pytest.fixture
def series_options():
    """
    Returns series options with the baseline on row 100.

    Returns:
        SeriesOptions: Drawing options.
    """
    return SeriesOptions(
        y_origin=100,
        colors={ColorClass.POSITIVE: "blue", ColorClass.NEGATIVE: "red"},
    )
