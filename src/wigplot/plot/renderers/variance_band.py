"""
wigplot/plot/renderers/variance_band
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple, TYPE_CHECKING

from ...core.scale import round_half_up
from ...util.logging import get_logger

if TYPE_CHECKING:
    from ...core.mapping import Viewport
    from ...core.scale import ScaleRange
    from ..backends import DrawingBackend
    from ..style import StyleConfig

logger = get_logger(__name__)

# Scale placements that put the axis labels to the left of the plot body
_LEFT_SIDES = ("left", "three")


@dataclass(frozen=True)
class BandGeometry:
    """
    Data class for the pixel rows of a drawn variance band.
    """

    onesd: Tuple[int, int]
    twosd: Tuple[int, int]
    mean_row: int
    clip_top: bool
    clip_bottom: bool
    mean_visible: bool
    labels: List[str] = field(default_factory=list)


class VarianceBandRenderer:
    """
    Class for rendering the translucent +/-1SD and +/-2SD bands and the mean line.
    """

    def __init__(self, style: StyleConfig) -> None:
        """
        Initializes the VarianceBandRenderer instance.

        Args:
            style (StyleConfig): Track style supplying band colors and font metrics.
        """
        self.style = style

    def render(
        self,
        backend: DrawingBackend,
        mean: float,
        stdev: float,
        scale: ScaleRange,
        viewport: Viewport,
        *,
        rescaled: bool = False,
        side: Optional[str] = None,
    ) -> BandGeometry:
        """
        Draws the variance band across the full viewport width.

        Args:
            backend (DrawingBackend): Drawing backend.
            mean (float): Whole-signal mean in raw units.
            stdev (float): Whole-signal standard deviation in raw units.
            scale (ScaleRange): Resolved vertical range.
            viewport (Viewport): Plot body rectangle.

        Kwargs:
            rescaled (bool): The scale is in z-score units; the band becomes the canonical
                mean 0, stdev 1 band. Defaults to False.
            side (Optional[str]): Scale placement; left-hand placements push labels further
                left. Defaults to None.

        Returns:
            BandGeometry: Clipped rows, clip flags and the labels that were drawn.
        """
        style = self.style
        if rescaled:
            mean, stdev = 0.0, 1.0
        top, bottom = viewport.top, viewport.bottom
        y_scale = scale.y_scale(viewport.height)

        def row(value: float) -> float:
            return bottom - (value - scale.scaled_min) * y_scale

        # Clip each bound independently and note which side lost part of the band
        clip_top = clip_bottom = False
        upper = []
        for value in (mean + stdev, mean + 2 * stdev):
            y = row(value)
            clipped = viewport.clamp_y(y)
            clip_top = clip_top or clipped != y
            upper.append(round_half_up(clipped))
        lower = []
        for value in (mean - stdev, mean - 2 * stdev):
            y = row(value)
            clipped = viewport.clamp_y(y)
            clip_bottom = clip_bottom or clipped != y
            lower.append(round_half_up(clipped))
        y1, yy1 = upper
        y2, yy2 = lower
        y_mean = row(mean)
        mean_visible = top <= y_mean <= bottom
        mean_row = round_half_up(y_mean)

        backend.fill_rectangle(viewport.left, y1, viewport.right, y2, style["band_onesd_color"])
        backend.fill_rectangle(viewport.left, yy1, viewport.right, yy2, style["band_twosd_color"])
        if mean_visible:
            backend.draw_line(
                viewport.left, mean_row, viewport.right, mean_row, style["band_mean_color"]
            )

        margin = int(style["band_label_margin"]) if side in _LEFT_SIDES else 0
        half_height = int(style["font_height"]) / 2
        label_color = style["band_label_color"]
        wanted = [
            ("+2sd", yy1, not clip_top),
            ("-2sd", yy2, not clip_bottom),
            ("mn", mean_row, mean_visible),
        ]
        labels = []
        for text, y, show in wanted:
            if not show:
                continue
            x = viewport.left - style.text_width(text) - margin
            backend.draw_text(x, y - half_height, text, label_color)
            labels.append(text)

        if clip_top or clip_bottom:
            logger.debug("Variance band clipped (top=%s, bottom=%s)", clip_top, clip_bottom)
        return BandGeometry(
            onesd=(y1, y2),
            twosd=(yy1, yy2),
            mean_row=mean_row,
            clip_top=clip_top,
            clip_bottom=clip_bottom,
            mean_visible=mean_visible,
            labels=labels,
        )
