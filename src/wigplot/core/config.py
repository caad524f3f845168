"""
wigplot/core/config
~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional, Union

from .errors import ConfigError, UnsupportedMode

AUTOSCALE_POLICIES = ("local", "chromosome", "global", "z_score", "clipped_global")
GLOBAL_POLICIES = ("chromosome", "global", "z_score", "clipped_global")
GRAPH_TYPES = ("boxes", "line", "points", "linepoints", "histogram")
NAMED_PIVOTS = ("mean", "zero", "min")
SCALE_SIDES = ("none", "left", "right", "both", "three")

PivotValue = Union[None, str, float]


@dataclass(frozen=True)
class TrackConfig:
    """
    Data class for the options of one quantitative track.

    Validated once at construction; instances are immutable for the whole render call.
    """

    autoscale: str = "clipped_global"
    graph_type: str = "boxes"
    variance_band: bool = False
    z_score_bounds: int = 4
    min_score: Optional[float] = None
    max_score: Optional[float] = None
    bicolor_pivot: PivotValue = None
    pos_color: str = "blue"
    neg_color: str = "orange"
    point_symbol: str = "point"
    point_radius: int = 1
    linewidth: int = 1
    no_grid: bool = False
    flip: bool = False
    scale: str = "left"
    integer_scale: bool = False
    bump: Optional[str] = None
    label: Optional[str] = None
    description: Optional[str] = None

    def __post_init__(self) -> None:
        if self.autoscale not in AUTOSCALE_POLICIES:
            raise ConfigError(
                f"autoscale must be one of {AUTOSCALE_POLICIES}, got {self.autoscale!r}"
            )
        if self.graph_type not in GRAPH_TYPES:
            raise UnsupportedMode(
                f"graph_type must be one of {GRAPH_TYPES}, got {self.graph_type!r}"
            )
        if isinstance(self.z_score_bounds, bool) or not isinstance(self.z_score_bounds, int):
            raise ConfigError("z_score_bounds must be an integer")
        if self.z_score_bounds < 1:
            raise ConfigError("z_score_bounds must be >= 1")
        if self.scale not in SCALE_SIDES:
            raise ConfigError(f"scale must be one of {SCALE_SIDES}, got {self.scale!r}")
        for name in ("point_radius", "linewidth"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ConfigError(f"{name} must be a positive integer")
        for name in ("min_score", "max_score"):
            value = getattr(self, name)
            if value is not None and (isinstance(value, bool) or not isinstance(value, (int, float))):
                raise ConfigError(f"{name} must be a number or None")
        pivot = self.bicolor_pivot
        if isinstance(pivot, str):
            if pivot not in NAMED_PIVOTS:
                raise ConfigError(
                    f"bicolor_pivot must be None, a number or one of {NAMED_PIVOTS}, got {pivot!r}"
                )
        elif pivot is not None and (isinstance(pivot, bool) or not isinstance(pivot, (int, float))):
            raise ConfigError("bicolor_pivot must be None, a number or a pivot name")
        if not self.point_symbol:
            raise ConfigError("point_symbol must be a non-empty string")

    @property
    def rescale(self) -> bool:
        """
        Returns whether values are expressed as z-scores.
        """
        return self.autoscale == "z_score"

    @property
    def scale_visible(self) -> bool:
        """
        Returns whether the axis scale is drawn for this track.
        """
        return self.scale != "none" and self.bump != "overlap"

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> TrackConfig:
        """
        Builds a TrackConfig from string-keyed options.

        Keys may carry a leading dash (``-autoscale``) and use dashes in place of
        underscores. ``type`` is accepted as an alias of ``graph_type``.

        Args:
            options (Mapping[str, Any]): Option mapping.

        Returns:
            TrackConfig: Validated configuration.

        Raises:
            ConfigError: If an option name is unknown or a value is invalid.
        """
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for raw_key, value in options.items():
            key = str(raw_key).lstrip("-").replace("-", "_")
            if key == "type":
                key = "graph_type"
            if key not in known:
                raise ConfigError(f"Unknown track option: {raw_key!r}")
            kwargs[key] = _coerce_option(key, value)
        return cls(**kwargs)


def _coerce_option(key: str, value: Any) -> Any:
    """
    Coerces loosely typed option values (e.g. strings from a config file).

    Args:
        key (str): Normalized option name.
        value (Any): Raw value.

    Returns:
        Any: Value in the type the option expects.

    Raises:
        ConfigError: If the value cannot be coerced.
    """
    if not isinstance(value, str):
        return value
    try:
        if key in ("variance_band", "no_grid", "flip", "integer_scale"):
            lowered = value.strip().lower()
            if lowered in ("1", "true", "yes", "on"):
                return True
            if lowered in ("0", "false", "no", "off", ""):
                return False
            raise ValueError(value)
        if key in ("z_score_bounds", "point_radius", "linewidth"):
            return int(value)
        if key in ("min_score", "max_score"):
            return float(value) if value.strip() else None
        if key == "bicolor_pivot":
            lowered = value.strip().lower()
            if lowered in NAMED_PIVOTS:
                return lowered
            if lowered in ("", "none"):
                return None
            return float(value)
    except ValueError as exc:
        raise ConfigError(f"Invalid value for {key}: {value!r}") from exc
    return value


DEFAULT_CONFIG = TrackConfig()
