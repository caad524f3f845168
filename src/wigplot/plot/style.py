"""
wigplot/plot/style
~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from typing import Dict, Mapping, Optional, Tuple, TypedDict, Union

try:
    from typing import TypeAlias
except ImportError:  # Python <3.10
    from typing_extensions import TypeAlias

# Type alias for style values
StyleValue: TypeAlias = Union[str, float, int, bool, None, Tuple[float, ...]]


class StyleDefaults(TypedDict):
    """
    Type class for track style defaults.
    """

    font_width: int
    font_height: int
    font_size: float
    text_color: str
    axis_color: str
    tick_length: int
    tick_decimals: int
    grid_color: str
    grid_max_ticks: int
    band_onesd_color: str
    band_twosd_color: str
    band_mean_color: str
    band_label_color: str
    band_label_margin: int
    description_color: str


DEFAULT_STYLE: StyleDefaults = {
    # Font metrics of the small font used for scale and band labels (pixels)
    "font_width": 5,
    "font_height": 8,
    # Point size handed to raster backends
    "font_size": 6.0,
    "text_color": "black",
    # Axis scale
    "axis_color": "black",
    "tick_length": 3,
    "tick_decimals": 2,
    # Horizontal grid lines
    "grid_color": "lightgrey",
    "grid_max_ticks": 4,
    # Variance band fills and mean line ("name:alpha")
    "band_onesd_color": "grey:0.30",
    "band_twosd_color": "grey:0.20",
    "band_mean_color": "yellow:0.80",
    "band_label_color": "grey:0.50",
    # Extra left offset of band labels when the scale sits on the left
    "band_label_margin": 15,
    "description_color": "dimgray",
}


class StyleConfig:
    """
    Class for storing track style defaults and per-render overrides.
    """

    def __init__(
        self,
        defaults: Optional[Mapping[str, StyleValue]] = None,
        overrides: Optional[Mapping[str, StyleValue]] = None,
    ) -> None:
        """
        Initializes the StyleConfig instance.

        Args:
            defaults (Optional[Mapping[str, StyleValue]]): Base style defaults. Defaults to None.
            overrides (Optional[Mapping[str, StyleValue]]): Initial overrides. Defaults to None.

        Raises:
            KeyError: If an override names an unknown style key.
        """
        if defaults is None:
            defaults = DEFAULT_STYLE
        self._defaults: Dict[str, StyleValue] = dict(defaults)
        self._overrides: Dict[str, StyleValue] = {}
        if overrides:
            self.update(overrides)

    def get(self, key: str, default: Optional[StyleValue] = None) -> StyleValue:
        """
        Gets a style value with override priority.

        Args:
            key (str): Style key.
            default (Optional[StyleValue]): Default value if key not found. Defaults to None.

        Returns:
            StyleValue: Resolved style value.
        """
        if key in self._overrides:
            return self._overrides[key]
        return self._defaults.get(key, default)

    def set(self, key: str, value: StyleValue) -> None:
        """
        Overrides a style value.

        Args:
            key (str): Style key.
            value (StyleValue): Style value to set.

        Raises:
            KeyError: If ``key`` is not a known style key.
        """
        if key not in self._defaults:
            raise KeyError(f"Unknown style key: {key!r}")
        self._overrides[key] = value

    def update(self, overrides: Mapping[str, StyleValue]) -> None:
        for key, value in overrides.items():
            self.set(key, value)

    def as_dict(self) -> Dict[str, StyleValue]:
        """
        Returns a merged view of defaults and overrides.

        Returns:
            Dict[str, StyleValue]: Merged style dictionary.
        """
        merged = dict(self._defaults)
        merged.update(self._overrides)
        return merged

    def text_width(self, text: str) -> int:
        """
        Returns the pixel width of ``text`` in the fixed-width label font.

        Args:
            text (str): Label text.

        Returns:
            int: Width in pixels.
        """
        return len(text) * int(self["font_width"])

    def __getitem__(self, key: str) -> StyleValue:
        return self.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._overrides or key in self._defaults
