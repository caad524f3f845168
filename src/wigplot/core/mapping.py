"""
wigplot/core/mapping
~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from .scale import ScaleRange, ScaleResolution, round_half_up
from .signal import Interval


@dataclass(frozen=True)
class Viewport:
    """
    Data class for the pixel rectangle of the plot body. Pixel rows grow downward.
    """

    left: float
    top: float
    right: float
    bottom: float

    def __post_init__(self) -> None:
        if self.right < self.left:
            raise ValueError("viewport right must not be left of left")
        if self.bottom < self.top:
            raise ValueError("viewport bottom must not be above top")

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    def clamp_y(self, y: float) -> float:
        return min(max(y, self.top), self.bottom)


class ColorClass(enum.Enum):
    """
    Which side of the bicolor pivot a value falls on.
    """

    POSITIVE = "positive"
    NEGATIVE = "negative"


@dataclass(frozen=True)
class RenderPoint:
    """
    Data class for the mode-agnostic pixel geometry of one interval.
    """

    x1: int
    y1: int
    x2: int
    y2: int
    color_class: ColorClass
    line_width: int = 1


def compute_origin(viewport: Viewport, scale: ScaleRange, *, pivot_at_min: bool = False) -> int:
    """
    Computes the pixel row of score 0, the shared baseline of boxes and histograms.

    Args:
        viewport (Viewport): Plot body rectangle.
        scale (ScaleRange): Resolved vertical range.

    Kwargs:
        pivot_at_min (bool): The bicolor pivot is pinned to the range minimum. Defaults to False.

    Returns:
        int: Origin row; the bottom edge when 0 is out of range or the pivot is pinned.
    """
    if scale.contains(0) and not pivot_at_min:
        y_origin = viewport.bottom - (0 - scale.scaled_min) * scale.y_scale(viewport.height)
    else:
        y_origin = viewport.bottom
    return round_half_up(y_origin)


class CoordinateMapper:
    """
    Class for mapping scored intervals to clipped, optionally flipped, pixel geometry.
    """

    def __init__(
        self,
        viewport: Viewport,
        resolution: ScaleResolution,
        *,
        x_scale: float,
        f_start: float,
        y_origin: int,
        midpoint: Optional[float] = None,
        flip: bool = False,
        line_width: int = 1,
    ) -> None:
        """
        Initializes the CoordinateMapper instance.

        Args:
            viewport (Viewport): Plot body rectangle.
            resolution (ScaleResolution): Resolved scale and z-score parameters.

        Kwargs:
            x_scale (float): Pixels per genomic unit.
            f_start (float): Genomic position of the viewport's left edge.
            y_origin (int): Baseline row shared by every point.
            midpoint (Optional[float]): Bicolor pivot in raw score units; None classifies
                every value as positive. Defaults to None.
            flip (bool): Mirror x about the viewport center. Defaults to False.
            line_width (int): Line width stamped on each point. Defaults to 1.
        """
        self.viewport = viewport
        self.resolution = resolution
        self.x_scale = float(x_scale)
        self.f_start = float(f_start)
        self.y_origin = int(y_origin)
        self.flip = bool(flip)
        self.line_width = int(line_width)
        self.y_scale = resolution.scale.y_scale(viewport.height)
        if midpoint is None:
            self.midpoint = -math.inf
        else:
            self.midpoint = resolution.transform(midpoint)

    def map(self, interval: Interval) -> Optional[RenderPoint]:
        """
        Maps one interval to pixel geometry.

        Args:
            interval (Interval): Scored interval.

        Returns:
            Optional[RenderPoint]: Pixel geometry, or None if the interval lies wholly
                outside the viewport or has no finite score.
        """
        vp = self.viewport
        x1 = vp.left + (interval.start - self.f_start) * self.x_scale
        x2 = vp.left + (interval.end - self.f_start) * self.x_scale
        if x2 < vp.left or x1 > vp.right:
            return None
        if not math.isfinite(interval.score):
            return None

        score = self.resolution.transform(interval.score)
        # Out-of-range scores are pinned to the plot edges, not dropped
        y1 = vp.clamp_y(vp.bottom - (score - self.resolution.scale.scaled_min) * self.y_scale)

        x1 = max(x1, vp.left)
        x2 = min(x2, vp.right)
        if self.flip:
            x1 = vp.right - (x1 - vp.left)
            x2 = vp.right - (x2 - vp.left)

        color_class = ColorClass.POSITIVE if score > self.midpoint else ColorClass.NEGATIVE
        return RenderPoint(
            x1=round_half_up(x1),
            y1=round_half_up(y1),
            x2=round_half_up(x2),
            y2=self.y_origin,
            color_class=color_class,
            line_width=self.line_width,
        )

    def map_all(self, intervals: Iterable[Interval]) -> Iterator[RenderPoint]:
        """
        Lazily maps intervals in input order, dropping culled ones.

        Args:
            intervals (Iterable[Interval]): Scored intervals.

        Yields:
            RenderPoint: Geometry of each visible interval.
        """
        for interval in intervals:
            point = self.map(interval)
            if point is not None:
                yield point

    def invert_x(self, x: float) -> float:
        """
        Returns the genomic position drawn at pixel column ``x``.

        Args:
            x (float): Pixel column.

        Returns:
            float: Genomic position.
        """
        vp = self.viewport
        if self.flip:
            x = vp.right - (x - vp.left)
        return self.f_start + (x - vp.left) / self.x_scale
