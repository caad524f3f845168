"""
wigplot/plot/renderers/_label_format
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from typing import List

import numpy as np
from matplotlib.ticker import MaxNLocator

from ...core.scale import ScaleRange


def format_tick_label(value: float, max_decimals: int = 2) -> str:
    """
    Formats a scale value, capping decimal precision and trimming trailing zeros.

    Args:
        value (float): Scale value.
        max_decimals (int): Maximum number of decimal places. Defaults to 2.

    Returns:
        str: Tick label text.
    """
    text = f"{value:.{max_decimals}f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def compute_tick_values(scale: ScaleRange, max_ticks: int = 4) -> List[float]:
    """
    Computes grid line values strictly inside the scale range.

    Args:
        scale (ScaleRange): Resolved vertical range.
        max_ticks (int): Upper bound on the number of intervals. Defaults to 4.

    Returns:
        List[float]: Tick values between the range ends, ascending.
    """
    if scale.is_empty:
        return []
    locator = MaxNLocator(nbins=max_ticks, steps=[1, 2, 2.5, 5, 10])
    ticks = locator.tick_values(scale.scaled_min, scale.scaled_max)
    inside = ticks[(ticks > scale.scaled_min) & (ticks < scale.scaled_max)]
    return [float(t) for t in np.round(inside, 10)]
