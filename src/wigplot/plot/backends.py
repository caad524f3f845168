"""
wigplot/plot/backends
~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, FrozenSet, List, Optional, Protocol, Tuple, Union

import matplotlib.pyplot as plt
import pandas as pd
from matplotlib.colors import to_rgba
from matplotlib.lines import Line2D

from ..core.errors import BackendCapabilityMismatch

ColorValue = Union[str, Tuple[float, ...]]

# Symbols every bundled backend can draw
DEFAULT_SYMBOLS: FrozenSet[str] = frozenset({"point", "disc", "square", "triangle", "diamond"})


class DrawingBackend(Protocol):
    """
    Class for defining the drawing primitives the pipeline renders through.
    Protocol only; implement in concrete backends. Coordinates are device pixels
    with rows growing downward.
    """

    supports_zero_width_fill: bool
    symbols: FrozenSet[str]

    def fill_rectangle(self, x1: float, y1: float, x2: float, y2: float, color: ColorValue) -> None:
        ...

    def draw_line(self, x1: float, y1: float, x2: float, y2: float, color: ColorValue) -> None:
        ...

    def draw_symbol(
        self,
        name: str,
        x: float,
        y: float,
        radius: float,
        color: ColorValue,
        filled: bool = False,
    ) -> None:
        ...

    def draw_text(self, x: float, y: float, text: str, color: ColorValue) -> None:
        ...

    def set_line_width(self, width: float) -> None:
        ...


def resolve_color(color: ColorValue) -> Tuple[float, float, float, float]:
    """
    Resolves a color to RGBA, accepting the ``name:alpha`` shorthand (e.g. ``grey:0.30``).

    Args:
        color (ColorValue): Color name, hex string, ``name:alpha`` string or RGB(A) tuple.

    Returns:
        Tuple[float, float, float, float]: RGBA components in 0..1.

    Raises:
        ValueError: If the color cannot be interpreted.
    """
    if isinstance(color, str) and ":" in color:
        name, alpha = color.rsplit(":", 1)
        return to_rgba(name, float(alpha))
    return to_rgba(color)


@dataclass(frozen=True)
class DrawCommand:
    """
    Data class for one recorded drawing primitive.
    """

    op: str
    args: Tuple[Any, ...]
    color: Optional[ColorValue] = None


class RecordingBackend:
    """
    Class for recording drawing primitives instead of rasterizing them.
    """

    def __init__(
        self,
        *,
        supports_zero_width_fill: bool = True,
        symbols: Optional[FrozenSet[str]] = None,
    ) -> None:
        """
        Initializes the RecordingBackend instance.

        Kwargs:
            supports_zero_width_fill (bool): Whether zero-width rectangles can be filled.
                Defaults to True.
            symbols (Optional[FrozenSet[str]]): Drawable symbol names. Defaults to None,
                meaning the bundled symbol set.
        """
        self.supports_zero_width_fill = bool(supports_zero_width_fill)
        self.symbols = frozenset(symbols) if symbols is not None else DEFAULT_SYMBOLS
        self.commands: List[DrawCommand] = []

    def fill_rectangle(self, x1, y1, x2, y2, color) -> None:
        self.commands.append(DrawCommand("fill_rectangle", (x1, y1, x2, y2), color))

    def draw_line(self, x1, y1, x2, y2, color) -> None:
        self.commands.append(DrawCommand("draw_line", (x1, y1, x2, y2), color))

    def draw_symbol(self, name, x, y, radius, color, filled=False) -> None:
        if name not in self.symbols:
            raise BackendCapabilityMismatch(f"Backend cannot draw symbol {name!r}")
        self.commands.append(DrawCommand("draw_symbol", (name, x, y, radius, bool(filled)), color))

    def draw_text(self, x, y, text, color) -> None:
        self.commands.append(DrawCommand("draw_text", (x, y, text), color))

    def set_line_width(self, width) -> None:
        self.commands.append(DrawCommand("set_line_width", (width,)))

    def ops(self, op: str) -> List[DrawCommand]:
        """
        Returns the recorded commands of one kind, in drawing order.

        Args:
            op (str): Primitive name, e.g. ``"fill_rectangle"``.

        Returns:
            List[DrawCommand]: Matching commands.
        """
        return [cmd for cmd in self.commands if cmd.op == op]

    def texts(self) -> List[str]:
        return [cmd.args[2] for cmd in self.commands if cmd.op == "draw_text"]

    def to_frame(self) -> pd.DataFrame:
        """
        Exports the recorded commands as a table, one row per command.

        Returns:
            pd.DataFrame: Columns ``op``, ``args`` and ``color``.
        """
        return pd.DataFrame(
            {
                "op": [cmd.op for cmd in self.commands],
                "args": [cmd.args for cmd in self.commands],
                "color": [cmd.color for cmd in self.commands],
            }
        )


# Bundled symbol names -> Matplotlib markers
_MARKERS = {
    "point": ".",
    "disc": "o",
    "square": "s",
    "triangle": "^",
    "diamond": "D",
}


class MatplotlibBackend:
    """
    Class for drawing primitives onto a Matplotlib Axes laid out in pixel coordinates.
    """

    # A zero-width Rectangle patch renders nothing
    supports_zero_width_fill = False
    symbols = frozenset(_MARKERS)

    def __init__(self, ax: plt.Axes, *, font_size: float = 6.0, zorder: int = 2) -> None:
        """
        Initializes the MatplotlibBackend instance.

        Args:
            ax (plt.Axes): Target axes; x/y limits should span the canvas in pixels with
                the y axis inverted.

        Kwargs:
            font_size (float): Text size in points. Defaults to 6.0.
            zorder (int): Base z-order for drawn artists. Defaults to 2.
        """
        self.ax = ax
        self.font_size = float(font_size)
        self.zorder = zorder
        self._line_width = 1.0

    @classmethod
    def for_canvas(
        cls,
        width: int,
        height: int,
        *,
        dpi: float = 100.0,
        font_size: float = 6.0,
    ) -> MatplotlibBackend:
        """
        Creates a figure of ``width`` x ``height`` pixels and a backend drawing onto it.

        Args:
            width (int): Canvas width in pixels.
            height (int): Canvas height in pixels.

        Kwargs:
            dpi (float): Figure resolution. Defaults to 100.0.
            font_size (float): Text size in points. Defaults to 6.0.

        Returns:
            MatplotlibBackend: Backend whose ``ax.figure`` is the new figure.
        """
        fig = plt.figure(figsize=(width / dpi, height / dpi), dpi=dpi)
        ax = fig.add_axes([0.0, 0.0, 1.0, 1.0], frameon=False)
        ax.set_xlim(0, width)
        ax.set_ylim(height, 0)
        ax.set_axis_off()
        return cls(ax, font_size=font_size)

    def fill_rectangle(self, x1, y1, x2, y2, color) -> None:
        self.ax.add_patch(
            plt.Rectangle(
                (min(x1, x2), min(y1, y2)),
                abs(x2 - x1),
                abs(y2 - y1),
                facecolor=resolve_color(color),
                edgecolor="none",
                linewidth=0,
                zorder=self.zorder,
            )
        )

    def draw_line(self, x1, y1, x2, y2, color) -> None:
        self.ax.add_line(
            Line2D(
                [x1, x2],
                [y1, y2],
                color=resolve_color(color),
                linewidth=self._line_width,
                zorder=self.zorder + 1,
            )
        )

    def draw_symbol(self, name, x, y, radius, color, filled=False) -> None:
        marker = _MARKERS.get(name)
        if marker is None:
            raise BackendCapabilityMismatch(f"Backend cannot draw symbol {name!r}")
        rgba = resolve_color(color)
        self.ax.plot(
            [x],
            [y],
            linestyle="none",
            marker=marker,
            markersize=2 * float(radius) + 1,
            markeredgecolor=rgba,
            markerfacecolor=rgba if filled else "none",
            zorder=self.zorder + 2,
        )

    def draw_text(self, x, y, text, color) -> None:
        self.ax.text(
            x,
            y,
            text,
            color=resolve_color(color),
            fontsize=self.font_size,
            ha="left",
            va="top",
            zorder=self.zorder + 3,
        )

    def set_line_width(self, width) -> None:
        self._line_width = float(width)
