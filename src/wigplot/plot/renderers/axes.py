"""Axis scale, grid, label and description renderers."""

from __future__ import annotations

from typing import Dict, List, TYPE_CHECKING

from ...core.scale import round_half_up
from ._label_format import compute_tick_values, format_tick_label

if TYPE_CHECKING:
    from ...core.mapping import Viewport
    from ...core.scale import ScaleRange
    from ..backends import DrawingBackend
    from ..style import StyleConfig

_LEFT_SIDES = ("left", "both", "three")
_RIGHT_SIDES = ("right", "both", "three")


class AxesRenderer:
    """
    Class for rendering the grid, the numeric scale and the track texts around a plot body.
    """

    def __init__(self, style: StyleConfig) -> None:
        self.style = style

    def draw_grid(
        self,
        backend: DrawingBackend,
        scale: ScaleRange,
        viewport: Viewport,
    ) -> List[float]:
        """
        Draws horizontal grid lines at round values inside the scale range.

        Args:
            backend (DrawingBackend): Drawing backend.
            scale (ScaleRange): Resolved vertical range.
            viewport (Viewport): Plot body rectangle.

        Returns:
            List[float]: Values a grid line was drawn at.
        """
        values = compute_tick_values(scale, int(self.style["grid_max_ticks"]))
        color = self.style["grid_color"]
        for value in values:
            y = self._row(value, scale, viewport)
            backend.draw_line(viewport.left, y, viewport.right, y, color)
        return values

    def draw_scale(
        self,
        backend: DrawingBackend,
        scale: ScaleRange,
        viewport: Viewport,
        y_origin: int,
        side: str,
    ) -> Dict[int, str]:
        """
        Draws the vertical axis with tick labels for the range ends and for zero.

        Args:
            backend (DrawingBackend): Drawing backend.
            scale (ScaleRange): Resolved vertical range.
            viewport (Viewport): Plot body rectangle.
            y_origin (int): Row of the zero baseline.
            side (str): Scale placement: none, left, right, both or three.

        Returns:
            Dict[int, str]: Tick label text keyed by pixel row; empty when the scale is hidden.
        """
        if side not in _LEFT_SIDES and side not in _RIGHT_SIDES:
            return {}
        style = self.style
        color = style["axis_color"]
        text_color = style["text_color"]
        tick = int(style["tick_length"])
        decimals = int(style["tick_decimals"])
        half_height = int(style["font_height"]) / 2

        # One label per row; the range ends win over zero when they coincide
        ticks: Dict[int, str] = {}
        if scale.contains(0) and not scale.is_empty:
            ticks[y_origin] = format_tick_label(0, decimals)
        ticks[self._row(scale.scaled_min, scale, viewport)] = format_tick_label(
            scale.scaled_min, decimals
        )
        ticks[self._row(scale.scaled_max, scale, viewport)] = format_tick_label(
            scale.scaled_max, decimals
        )

        edges = []
        if side in _LEFT_SIDES:
            edges.append((viewport.left, -1))
        if side in _RIGHT_SIDES:
            edges.append((viewport.right, 1))
        for x, direction in edges:
            backend.draw_line(x, viewport.top, x, viewport.bottom, color)
            for y, text in ticks.items():
                backend.draw_line(x, y, x + direction * tick, y, color)
                if direction < 0:
                    tx = x - tick - 1 - style.text_width(text)
                else:
                    tx = x + tick + 1
                backend.draw_text(tx, y - half_height, text, text_color)
        return ticks

    def draw_label(self, backend: DrawingBackend, text: str, viewport: Viewport) -> None:
        """
        Draws the track label above the plot body.
        """
        y = viewport.top - int(self.style["font_height"]) - 1
        backend.draw_text(viewport.left, y, text, self.style["text_color"])

    def draw_description(self, backend: DrawingBackend, text: str, viewport: Viewport) -> None:
        backend.draw_text(viewport.left, viewport.bottom + 2, text, self.style["description_color"])

    @staticmethod
    def _row(value: float, scale: ScaleRange, viewport: Viewport) -> int:
        y = viewport.bottom - (value - scale.scaled_min) * scale.y_scale(viewport.height)
        return round_half_up(viewport.clamp_y(y))
