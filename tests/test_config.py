"""
tests/test_config
~~~~~~~~~~~~~~~~~
"""

import pytest

from wigplot.core import ConfigError, TrackConfig, UnsupportedMode


@pytest.mark.unit
def test_defaults_match_glyph_defaults():
    """
    Ensures the default track options.
    """
    config = TrackConfig()

    assert config.autoscale == "clipped_global"
    assert config.graph_type == "boxes"
    assert config.z_score_bounds == 4
    assert config.variance_band is False
    assert config.scale_visible is True


@pytest.mark.unit
def test_from_options_accepts_dashed_string_options():
    """
    Ensures dash-prefixed, string-valued options are normalized and coerced.
    """
    config = TrackConfig.from_options(
        {
            "-autoscale": "z_score",
            "-type": "histogram",
            "-variance_band": "1",
            "-z_score_bounds": "3",
            "-bicolor_pivot": "zero",
            "-min_score": "1.5",
            "-no-grid": "false",
        }
    )

    assert config.autoscale == "z_score"
    assert config.rescale is True
    assert config.graph_type == "histogram"
    assert config.variance_band is True
    assert config.z_score_bounds == 3
    assert config.bicolor_pivot == "zero"
    assert config.min_score == 1.5
    assert config.no_grid is False


@pytest.mark.unit
def test_from_options_parses_numeric_pivot():
    """
    Ensures a numeric bicolor pivot string becomes a float.
    """
    assert TrackConfig.from_options({"bicolor_pivot": "2.5"}).bicolor_pivot == 2.5


@pytest.mark.unit
def test_from_options_rejects_unknown_keys():
    """
    Ensures unknown option names are reported.

    Raises:
        ConfigError: If an option is unknown.
    """
    with pytest.raises(ConfigError, match="smoothing"):
        TrackConfig.from_options({"smoothing": "mean"})


@pytest.mark.unit
@pytest.mark.parametrize(
    "kwargs",
    [
        {"autoscale": "adaptive"},
        {"z_score_bounds": 0},
        {"z_score_bounds": True},
        {"z_score_bounds": 2.5},
        {"bicolor_pivot": "median"},
        {"scale": "top"},
        {"linewidth": 0},
        {"min_score": "low"},
        {"point_symbol": ""},
    ],
)
def test_invalid_values_raise_config_error(kwargs):
    """
    Ensures invalid option values are rejected at construction.

    Args:
        kwargs (dict): Invalid option.

    Raises:
        ConfigError: If the value is invalid.
    """
    with pytest.raises(ConfigError):
        TrackConfig(**kwargs)


@pytest.mark.unit
def test_unknown_graph_type_is_unsupported_mode():
    """
    Ensures an unknown graph type raises UnsupportedMode, which is also a ValueError.
    """
    with pytest.raises(UnsupportedMode):
        TrackConfig(graph_type="pie")
    with pytest.raises(ValueError):
        TrackConfig(graph_type="pie")


@pytest.mark.unit
def test_bad_boolean_string_raises():
    """
    Ensures unparseable boolean strings are reported.

    Raises:
        ConfigError: If the value is not a boolean word.
    """
    with pytest.raises(ConfigError):
        TrackConfig.from_options({"flip": "sometimes"})


@pytest.mark.unit
def test_overlap_bump_hides_scale():
    """
    Ensures non-bumping overlap tracks hide the scale.
    """
    assert TrackConfig(bump="overlap").scale_visible is False
    assert TrackConfig(scale="none").scale_visible is False
