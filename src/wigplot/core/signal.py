"""
wigplot/core/signal
~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Protocol, Tuple, runtime_checkable

import numpy as np
import pandas as pd

from .errors import DataUnavailable


@dataclass(frozen=True)
class Interval:
    """
    Data class for one scored genomic span.
    """

    start: float
    end: float
    score: float


@dataclass(frozen=True)
class Region:
    """
    Data class for the genomic range shown by a panel.
    """

    start: float
    end: float

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ValueError(f"region end ({self.end}) must not precede start ({self.start})")

    @property
    def length(self) -> float:
        return self.end - self.start


@dataclass(frozen=True)
class SignalStats:
    """
    Data class for aggregate signal statistics.
    """

    min: float
    max: float
    mean: float
    stdev: float

    @classmethod
    def from_scores(cls, scores: Iterable[float]) -> SignalStats:
        """
        Computes statistics over a set of scores, ignoring non-finite values.

        Args:
            scores (Iterable[float]): Score values.

        Returns:
            SignalStats: Min, max, mean and population standard deviation.

        Raises:
            DataUnavailable: If no finite score is present.
        """
        vals = np.asarray(list(scores), dtype=float)
        vals = vals[np.isfinite(vals)]
        if vals.size == 0:
            raise DataUnavailable("no finite scores to compute statistics from")
        return cls(
            min=float(np.min(vals)),
            max=float(np.max(vals)),
            mean=float(np.mean(vals)),
            stdev=float(np.std(vals)),
        )


class SignalSet:
    """
    Ordered intervals plus the aggregate statistics supplied with them.
    """

    def __init__(
        self,
        intervals: Iterable[Interval],
        stats: Optional[SignalStats] = None,
    ) -> None:
        """
        Initializes the SignalSet instance.

        Args:
            intervals (Iterable[Interval]): Intervals, ordered by start.
            stats (Optional[SignalStats]): Precomputed statistics. Defaults to None.

        Raises:
            ValueError: If intervals are not ordered by start.
        """
        self.intervals: Tuple[Interval, ...] = tuple(intervals)
        starts = [iv.start for iv in self.intervals]
        if any(b < a for a, b in zip(starts, starts[1:])):
            raise ValueError("SignalSet intervals must be ordered by start")
        self._stats = stats

    @classmethod
    def from_frame(cls, df: pd.DataFrame, stats: Optional[SignalStats] = None) -> SignalSet:
        """
        Builds a SignalSet from a DataFrame with ``start``, ``end`` and ``score`` columns.

        Args:
            df (pd.DataFrame): Interval table; rows are sorted by start.
            stats (Optional[SignalStats]): Precomputed statistics. Defaults to None.

        Returns:
            SignalSet: Signal set over the table rows.

        Raises:
            KeyError: If a required column is missing.
        """
        missing = [c for c in ("start", "end", "score") if c not in df.columns]
        if missing:
            raise KeyError(f"signal frame is missing column(s): {missing}")
        ordered = df.sort_values("start", kind="mergesort")
        intervals = [
            Interval(float(s), float(e), float(v))
            for s, e, v in zip(ordered["start"], ordered["end"], ordered["score"])
        ]
        return cls(intervals, stats=stats)

    @property
    def stats(self) -> SignalStats:
        """
        Returns the supplied statistics, or computes them from the interval scores.

        Returns:
            SignalStats: Statistics for this set.

        Raises:
            DataUnavailable: If the set holds no finite score.
        """
        if self._stats is None:
            return SignalStats.from_scores(iv.score for iv in self.intervals)
        return self._stats

    def visible(self, start: float, end: float) -> SignalSet:
        """
        Returns the subset of intervals overlapping ``[start, end]``; statistics are recomputed.

        Args:
            start (float): Region start.
            end (float): Region end.

        Returns:
            SignalSet: Overlapping intervals.
        """
        return SignalSet(iv for iv in self.intervals if iv.end >= start and iv.start <= end)

    def __iter__(self) -> Iterator[Interval]:
        return iter(self.intervals)

    def __len__(self) -> int:
        return len(self.intervals)


@runtime_checkable
class SignalSource(Protocol):
    """
    Class for defining the interface of the signal data collaborator.
    Protocol only; file parsing lives outside this package.
    """

    def get_intervals(self, region: Region) -> SignalSet:
        """
        Returns the intervals covering a region.

        Args:
            region (Region): Genomic region on display.

        Returns:
            SignalSet: Intervals in the region.

        Raises:
            DataUnavailable: If the signal cannot be read.
        """
        ...

    def get_global_stats(self) -> Optional[SignalStats]:
        """
        Returns statistics over the whole signal, or None if the source has none.

        Raises:
            DataUnavailable: If the statistics cannot be read.
        """
        ...


class InMemorySignalSource:
    """
    Class for serving a signal that is already loaded into memory.
    """

    def __init__(self, signal: SignalSet, global_stats: Optional[SignalStats] = None) -> None:
        """
        Initializes the InMemorySignalSource instance.

        Args:
            signal (SignalSet): Whole signal.
            global_stats (Optional[SignalStats]): Whole-signal statistics. When None, they are
                taken from ``signal`` if it carries any finite score. Defaults to None.
        """
        self.signal = signal
        self._global_stats = global_stats

    def get_intervals(self, region: Region) -> SignalSet:
        return self.signal.visible(region.start, region.end)

    def get_global_stats(self) -> Optional[SignalStats]:
        if self._global_stats is not None:
            return self._global_stats
        if len(self.signal) == 0:
            return None
        return self.signal.stats
