"""
tests/test_variance_band
~~~~~~~~~~~~~~~~~~~~~~~~
"""

import pytest

from wigplot.core import ScaleRange
from wigplot.plot import StyleConfig
from wigplot.plot.renderers import VarianceBandRenderer


@pytest.mark.unit
def test_band_draws_nested_bands_mean_line_and_labels(backend, viewport):
    """
    Ensures an unclipped band draws both bands, the mean line and all three labels.

    Args:
        backend (RecordingBackend): Recording backend fixture.
        viewport (Viewport): Plot body fixture.
    """
    band = VarianceBandRenderer(StyleConfig()).render(
        backend, 5.0, 1.0, ScaleRange(0, 10), viewport
    )

    rects = backend.ops("fill_rectangle")
    assert [r.args for r in rects] == [(10, 40, 110, 60), (10, 30, 110, 70)]
    assert [r.color for r in rects] == ["grey:0.30", "grey:0.20"]
    assert [c.args for c in backend.ops("draw_line")] == [(10, 50, 110, 50)]
    assert backend.texts() == ["+2sd", "-2sd", "mn"]
    assert band.labels == ["+2sd", "-2sd", "mn"]
    assert not band.clip_top and not band.clip_bottom


@pytest.mark.unit
def test_top_clipping_suppresses_only_plus_label(backend, viewport):
    """
    Ensures a +2SD bound above the plot hides "+2sd" but keeps "-2sd" and "mn".

    Args:
        backend (RecordingBackend): Recording backend fixture.
        viewport (Viewport): Plot body fixture.
    """
    band = VarianceBandRenderer(StyleConfig()).render(
        backend, 8.0, 1.5, ScaleRange(0, 10), viewport
    )

    assert band.clip_top is True
    assert band.clip_bottom is False
    assert band.twosd == (0, 50)
    assert backend.texts() == ["-2sd", "mn"]


@pytest.mark.unit
def test_band_outside_view_hides_labels_and_mean_line(backend, viewport):
    """
    Ensures a band wholly above the plot draws no labels and no mean line.

    Args:
        backend (RecordingBackend): Recording backend fixture.
        viewport (Viewport): Plot body fixture.
    """
    band = VarianceBandRenderer(StyleConfig()).render(
        backend, 20.0, 1.0, ScaleRange(0, 10), viewport
    )

    assert band.mean_visible is False
    assert backend.ops("draw_line") == []
    assert backend.texts() == []


@pytest.mark.unit
def test_rescaled_band_is_canonical(backend, viewport):
    """
    Ensures a z-score scale draws the band at mean 0 and stdev 1 whatever the raw stats.

    Args:
        backend (RecordingBackend): Recording backend fixture.
        viewport (Viewport): Plot body fixture.
    """
    band = VarianceBandRenderer(StyleConfig()).render(
        backend, 100.0, 30.0, ScaleRange(-4, 4), viewport, rescaled=True
    )

    assert band.onesd == (38, 63)
    assert band.twosd == (25, 75)
    assert band.mean_row == 50


@pytest.mark.unit
@pytest.mark.parametrize("side, plus_x", [("left", -25), ("three", -25), ("right", -10), (None, -10)])
def test_label_offset_depends_on_scale_side(backend, viewport, side, plus_x):
    """
    Ensures band labels move further left when the scale sits on the left.

    Args:
        backend (RecordingBackend): Recording backend fixture.
        viewport (Viewport): Plot body fixture.
        side (str): Scale placement.
        plus_x (int): Expected x of the "+2sd" label.
    """
    VarianceBandRenderer(StyleConfig()).render(
        backend, 5.0, 1.0, ScaleRange(0, 10), viewport, side=side
    )

    plus = backend.ops("draw_text")[0]
    assert plus.args[2] == "+2sd"
    assert plus.args[0] == plus_x
    assert plus.args[1] == 26
