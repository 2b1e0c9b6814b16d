from catch_layout import BAR_H, compute_dims, dims_for_window, fit_field


def test_fit_field_caps_size():
    assert fit_field(1920, 1080) == (600, 800)


def test_fit_field_scales_small_display():
    assert fit_field(400, 500) == (380, 400)


def test_fit_field_minimum():
    assert fit_field(10, 10) == (240, 320)


def test_compute_dims_adds_button_bar():
    d = compute_dims(600, 800)
    assert d.total_w == 600
    assert d.total_h == 800 + BAR_H
    assert d.bar_y == 800


def test_dims_for_window():
    d = dims_for_window(500, 600)
    assert (d.field_w, d.field_h) == (500, 600 - BAR_H)
    d = dims_for_window(2000, 2000)
    assert (d.field_w, d.field_h) == (600, 800)
