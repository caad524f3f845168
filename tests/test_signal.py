"""
tests/test_signal
~~~~~~~~~~~~~~~~~
"""

import math

import pandas as pd
import pytest

from wigplot.core import (
    DataUnavailable,
    InMemorySignalSource,
    Interval,
    Region,
    SignalSet,
    SignalSource,
    SignalStats,
)


@pytest.mark.unit
def test_stats_from_scores_ignores_nan():
    """
    Ensures statistics use the population stdev and skip non-finite values.
    """
    stats = SignalStats.from_scores([1.0, 2.0, math.nan, 3.0, 4.0])

    assert (stats.min, stats.max, stats.mean) == (1.0, 4.0, 2.5)
    assert stats.stdev == pytest.approx(math.sqrt(1.25))


@pytest.mark.unit
def test_stats_from_empty_scores_unavailable():
    """
    Ensures statistics over no finite value raise DataUnavailable.
    """
    with pytest.raises(DataUnavailable):
        SignalStats.from_scores([])
    with pytest.raises(DataUnavailable):
        SignalStats.from_scores([math.nan])


@pytest.mark.unit
def test_signal_set_requires_start_order():
    """
    Ensures intervals out of start order are rejected.

    Raises:
        ValueError: If intervals are unordered.
    """
    with pytest.raises(ValueError):
        SignalSet([Interval(10, 20, 1.0), Interval(0, 10, 2.0)])


@pytest.mark.unit
def test_signal_set_from_frame_sorts_rows():
    """
    Ensures from_frame sorts by start and keeps scores aligned.
    """
    df = pd.DataFrame({"start": [20, 0, 10], "end": [30, 10, 20], "score": [3.0, 1.0, 2.0]})

    signal = SignalSet.from_frame(df)

    assert [iv.start for iv in signal] == [0, 10, 20]
    assert [iv.score for iv in signal] == [1.0, 2.0, 3.0]


@pytest.mark.unit
def test_signal_set_from_frame_requires_columns():
    """
    Ensures a frame without a score column is rejected.

    Raises:
        KeyError: If a column is missing.
    """
    with pytest.raises(KeyError, match="score"):
        SignalSet.from_frame(pd.DataFrame({"start": [0], "end": [1]}))


@pytest.mark.unit
def test_supplied_stats_win_over_computed(ramp_signal):
    """
    Ensures precomputed statistics are returned as supplied.

    Args:
        ramp_signal (SignalSet): Ramp signal fixture.
    """
    supplied = SignalStats(min=-1, max=100, mean=3, stdev=2)

    assert SignalSet(ramp_signal.intervals, stats=supplied).stats == supplied
    assert ramp_signal.stats.max == 9.0


@pytest.mark.unit
def test_visible_subset_overlaps_region(ramp_signal):
    """
    Ensures visible() keeps intervals touching the requested range.

    Args:
        ramp_signal (SignalSet): Ramp signal fixture.
    """
    visible = ramp_signal.visible(25, 40)

    assert [iv.start for iv in visible] == [20, 30, 40]
    assert visible.stats.min == 2.0


@pytest.mark.api
def test_in_memory_source(ramp_signal, region):
    """
    Ensures the in-memory source satisfies the source protocol.

    Args:
        ramp_signal (SignalSet): Ramp signal fixture.
        region (Region): Region fixture.
    """
    source = InMemorySignalSource(ramp_signal)

    assert isinstance(source, SignalSource)
    assert len(source.get_intervals(Region(0, 15))) == 2
    assert source.get_global_stats().mean == pytest.approx(4.5)
    assert InMemorySignalSource(SignalSet([])).get_global_stats() is None


@pytest.mark.unit
def test_region_rejects_inverted_bounds():
    """
    Ensures a region ending before it starts is rejected.

    Raises:
        ValueError: If end < start.
    """
    with pytest.raises(ValueError):
        Region(10, 5)
