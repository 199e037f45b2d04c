import pytest

from skyrunner.background import STATIC_BACKGROUND, ScrollingLayer, default_layers


def test_default_layers_use_source_images():
    images = [layer.image for layer in default_layers()]
    assert images == [
        "background/background1.png",
        "background/background2.png",
        "background/platform.png",
    ]
    assert STATIC_BACKGROUND.endswith("background.jpg")


def test_default_layer_thresholds_and_positions():
    far, middle, platform = default_layers()
    assert far.threshold == pytest.approx(0.1)
    assert middle.threshold == pytest.approx(0.013)
    assert platform.threshold == pytest.approx(0.001)
    assert platform.position == (0.0, -80.0)
    assert far.position == (0.0, 0.0)


def test_no_move_at_or_below_threshold():
    layer = default_layers()[0]
    assert layer.advance(layer.threshold) is False
    assert layer.advance(0.0) is False
    assert layer.left == 0


def test_move_by_step_above_threshold():
    for layer in default_layers():
        assert layer.advance(1.0) is True
        assert layer.left == layer.step


def test_wraps_to_zero_after_reaching_limit():
    for layer in default_layers():
        while layer.left != layer.wrap_at:
            layer.advance(1.0)
            assert 0 <= layer.left <= layer.wrap_at
        layer.advance(1.0)
        assert layer.left == 0


def test_rect_tracks_left():
    layer = ScrollingLayer("custom.png", 0.5, 10, 2)
    layer.advance(1.0)
    left, top, width, height = layer.rect
    assert left == layer.left
    assert top == 0
    assert (width, height) == (1920, 1080)