"""Zoom, pan and the fit/actual-size baseline."""

import pytest

from clive.config import MAX_ZOOM, MIN_ZOOM, PAN_STEP_PX, ZOOM_STEP
from clive.state import ViewState
from clive.view_math import compute_fit_scale, pan_limit


def _view(img=(2000, 1000), screen=(1000, 800), **kwargs):
    v = ViewState(**kwargs)
    v.set_geometry(img[0], img[1], screen[0], screen[1])
    return v


def test_fit_scale_never_upscales():
    assert compute_fit_scale(100, 50, 1000, 800) == 1.0
    assert compute_fit_scale(2000, 1000, 1000, 800) == 0.5
    assert compute_fit_scale(0, 0, 1000, 800) == 1.0


def test_pan_limit_keeps_part_of_the_image_visible():
    assert pan_limit(1000, 1000, 0.1) == pytest.approx(900)
    assert pan_limit(0, 1000, 0.1) == 0.0


def test_baseline_follows_actual_size_toggle():
    v = _view()
    assert v.scale == pytest.approx(0.5)
    v.toggle_actual_size()
    assert v.scale == pytest.approx(1.0)
    v.toggle_actual_size()
    assert v.scale == pytest.approx(0.5)


def test_zoom_steps_and_bounds():
    v = _view()
    v.zoom_in()
    assert v.zoom == pytest.approx(ZOOM_STEP)
    for _ in range(200):
        v.zoom_in()
    assert v.zoom == MAX_ZOOM
    for _ in range(400):
        v.zoom_out()
    assert v.zoom == MIN_ZOOM


def test_toggle_actual_size_resets_zoom():
    v = _view()
    v.zoom_in()
    v.toggle_actual_size()
    assert v.zoom == 1.0


def test_pan_is_clamped():
    v = _view()
    v.pan(PAN_STEP_PX, 0)
    assert v.pan_x == PAN_STEP_PX
    for _ in range(100):
        v.pan(PAN_STEP_PX, PAN_STEP_PX)
    # displayed 1000x500 on 1000x800
    assert v.pan_x == pytest.approx(pan_limit(1000, 1000, 0.1))
    assert v.pan_y == pytest.approx(pan_limit(500, 800, 0.1))


def test_center_resets_pan_only():
    v = _view()
    v.zoom_in()
    v.pan(-PAN_STEP_PX, PAN_STEP_PX)
    v.center()
    assert (v.pan_x, v.pan_y) == (0.0, 0.0)
    assert v.zoom == pytest.approx(ZOOM_STEP)


def test_navigation_resets_zoom_and_pan_but_not_actual_size():
    v = _view()
    v.toggle_actual_size()
    v.zoom_in()
    v.pan(PAN_STEP_PX, 0)
    v.on_navigate()
    assert v.zoom == 1.0
    assert (v.pan_x, v.pan_y) == (0.0, 0.0)
    assert v.actual_size


def test_navigation_can_keep_the_view():
    v = _view(keep_on_navigate=True)
    v.zoom_in()
    v.pan(PAN_STEP_PX, 0)
    v.on_navigate()
    assert v.zoom == pytest.approx(ZOOM_STEP)
    assert v.pan_x == PAN_STEP_PX


def test_params_center_the_image():
    p = _view().to_params()
    assert p.scale == pytest.approx(0.5)
    assert p.offx == pytest.approx(0.0)
    assert p.offy == pytest.approx(150.0)
