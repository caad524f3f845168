"""
wigplot/plot/renderers/base
~~~~~~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Protocol, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from ...core.mapping import ColorClass, RenderPoint
    from ..backends import ColorValue, DrawingBackend


@dataclass(frozen=True)
class SeriesOptions:
    """
    Data class for the per-call drawing options shared by series renderers.
    """

    y_origin: int
    colors: Mapping[ColorClass, ColorValue]
    line_width: int = 1
    point_symbol: str = "point"
    point_radius: int = 1


class SeriesRenderer(Protocol):
    """
    Class for defining the interface of one graph-type drawing strategy.
    Protocol only; implement in concrete renderers.
    """

    def render(
        self,
        points: Sequence[RenderPoint],
        backend: DrawingBackend,
        options: SeriesOptions,
    ) -> int:
        """
        Draws mapped points.

        Args:
            points (Sequence[RenderPoint]): Mapped points in input order.
            backend (DrawingBackend): Drawing backend.
            options (SeriesOptions): Drawing options for this call.

        Returns:
            int: Number of primitives drawn.
        """
        # Protocol stub; no runtime implementation
        ...
