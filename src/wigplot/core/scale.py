"""
wigplot/core/scale
~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from wigplot.util.logging import get_logger
from wigplot.util.warnings import warn

from .config import GLOBAL_POLICIES, TrackConfig
from .errors import DataUnavailable, EmptyRange
from .signal import SignalStats

logger = get_logger(__name__)


@dataclass(frozen=True)
class ScaleRange:
    """
    Data class for the vertical axis domain, in score units or z-score units.
    """

    scaled_min: float
    scaled_max: float

    @property
    def is_empty(self) -> bool:
        return self.scaled_max <= self.scaled_min

    @property
    def span(self) -> float:
        return self.scaled_max - self.scaled_min

    def y_scale(self, height: float) -> float:
        """
        Returns pixels per scale unit for a plot body of the given height.

        Args:
            height (float): Plot body height in pixels.

        Returns:
            float: Pixels per unit; 1 for an empty range.
        """
        if self.is_empty:
            return 1.0
        return height / self.span

    def contains(self, value: float) -> bool:
        return self.scaled_min <= value <= self.scaled_max

    def require_non_empty(self) -> ScaleRange:
        """
        Returns self, or raises if the range has no vertical extent.

        Raises:
            EmptyRange: If ``scaled_max <= scaled_min``.
        """
        if self.is_empty:
            raise EmptyRange(f"empty scale range [{self.scaled_min}, {self.scaled_max}]")
        return self


@dataclass(frozen=True)
class ScaleResolution:
    """
    Data class for the outcome of scale resolution.
    """

    scale: ScaleRange
    mean: float
    stdev: float
    rescaled: bool

    def transform(self, value: float) -> float:
        """
        Expresses a raw score in the units of the resolved scale.

        Args:
            value (float): Raw score.

        Returns:
            float: The z-score of ``value`` when rescaled, otherwise ``value``.
        """
        if self.rescaled:
            return (value - self.mean) / self.stdev
        return value


def round_half_up(value: float) -> int:
    """
    Rounds to the nearest integer with ties going toward +infinity.

    Args:
        value (float): Value to round.

    Returns:
        int: ``floor(value + 0.5)``.
    """
    return int(math.floor(value + 0.5))


class ScaleResolver:
    """
    Class for choosing the vertical score range of a track from an autoscale policy.
    """

    def __init__(self, config: TrackConfig) -> None:
        """
        Initializes the ScaleResolver instance.

        Args:
            config (TrackConfig): Track configuration.
        """
        self.config = config

    def resolve(
        self,
        view_stats: Optional[SignalStats],
        global_stats: Optional[SignalStats] = None,
        *,
        side: bool = False,
    ) -> ScaleResolution:
        """
        Resolves the scale range and the mean/stdev used for z-scores.

        Args:
            view_stats (Optional[SignalStats]): Statistics of the visible intervals.
            global_stats (Optional[SignalStats]): Statistics of the whole signal. Defaults to None.

        Kwargs:
            side (bool): Expand raw bounds outward to whole numbers. Ignored for z-scores.
                Defaults to False.

        Returns:
            ScaleResolution: Resolved range plus the applied mean and stdev.

        Raises:
            DataUnavailable: If no statistics are available, or z-scores are requested
                for a signal without spread.
        """
        config = self.config
        stats = self._policy_stats(view_stats, global_stats)
        lo, hi, mean, stdev = stats.min, stats.max, stats.mean, stats.stdev

        # Clip the global range to the z-score bounds when that is narrower
        bound = config.z_score_bounds
        if config.autoscale == "clipped_global":
            lo = max(lo, mean - bound * stdev)
            hi = min(hi, mean + bound * stdev)

        # Explicit overrides win on either end
        if config.min_score is not None:
            lo = float(config.min_score)
        if config.max_score is not None:
            hi = float(config.max_score)

        if config.rescale:
            if not stdev > 0:
                raise DataUnavailable("z_score autoscaling needs a signal with non-zero stdev")
            scaled_min = round_half_up((lo - mean) / stdev)
            scaled_max = round_half_up((hi - mean) / stdev)
            scaled_max = min(scaled_max, bound)
            scaled_min = max(scaled_min, -bound)
        elif side:
            scaled_min = int(math.floor(lo - 0.5))
            scaled_max = math.trunc(hi + 0.5)
        else:
            scaled_min, scaled_max = lo, hi

        if scaled_max < scaled_min:
            warn(
                f"Resolved score range is inverted ({scaled_min} > {scaled_max}); "
                "collapsing to an empty range"
            )
            scaled_max = scaled_min

        logger.debug(
            "Resolved %s scale to [%s, %s] (mean=%s, stdev=%s)",
            config.autoscale,
            scaled_min,
            scaled_max,
            mean,
            stdev,
        )
        return ScaleResolution(
            scale=ScaleRange(scaled_min, scaled_max),
            mean=mean,
            stdev=stdev,
            rescaled=config.rescale,
        )

    def _policy_stats(
        self,
        view_stats: Optional[SignalStats],
        global_stats: Optional[SignalStats],
    ) -> SignalStats:
        """
        Picks the statistics the autoscale policy reads from.

        Args:
            view_stats (Optional[SignalStats]): Statistics of the visible intervals.
            global_stats (Optional[SignalStats]): Statistics of the whole signal.

        Returns:
            SignalStats: Statistics to derive bounds from.

        Raises:
            DataUnavailable: If neither set of statistics is available.
        """
        policy = self.config.autoscale
        if policy in GLOBAL_POLICIES:
            if global_stats is not None:
                return global_stats
            if view_stats is not None:
                logger.warning(
                    "No whole-signal statistics for %s autoscaling; using the visible region",
                    policy,
                )
                return view_stats
        elif view_stats is not None:
            return view_stats
        raise DataUnavailable(f"no statistics available for {policy} autoscaling")
