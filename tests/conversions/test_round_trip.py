import itertools

import numpy as np
import pytest

from chromapick.conversions import (
    rgb_to_hsv,
    rgb_to_hsl,
    hsv_to_rgb,
    hsl_to_rgb,
    hsv_to_hsl,
    hsl_to_hsv,
    np_rgb_to_hsv,
    np_rgb_to_hsl,
    np_hsv_to_rgb,
    np_hsl_to_rgb,
)

hsv_tolerance = 1e-6
hsl_tolerance = 1e-6

CHANNELS = list(range(0, 256, 17)) + [1, 127, 128, 254]
RGB_GRID = list(itertools.product(CHANNELS, repeat=3))


def test_round_trip_rgb_hsv_rgb_is_exact():
    for rgb in RGB_GRID:
        assert hsv_to_rgb(rgb_to_hsv(rgb)) == rgb


def test_round_trip_rgb_hsl_rgb_is_exact():
    for rgb in RGB_GRID:
        assert hsl_to_rgb(rgb_to_hsl(rgb)) == rgb


def test_round_trip_numpy_dense_grid():
    axis = np.arange(0, 256, 3)
    grid = np.stack(np.meshgrid(axis, axis, axis, indexing="ij"), axis=-1).reshape(-1, 3)

    assert np.array_equal(np_hsv_to_rgb(np_rgb_to_hsv(grid)), grid)
    assert np.array_equal(np_hsl_to_rgb(np_rgb_to_hsl(grid)), grid)


def test_round_trip_hsv_rgb_hsv_within_rounding():
    # Only chromatic colors: hue is undefined once saturation or value is 0
    for h in np.linspace(0, 0.95, 20):
        hsv = (float(h), 0.8, 0.9)
        h_out, s_out, v_out = rgb_to_hsv(hsv_to_rgb(hsv))
        assert abs(h_out - hsv[0]) < 1 / 255
        assert abs(s_out - hsv[1]) < 2 / 255
        assert abs(v_out - hsv[2]) < 1 / 255


def test_round_trip_hsv_hsl_hsv():
    for rgb in RGB_GRID[::7]:
        hsv = rgb_to_hsv(rgb)
        assert hsl_to_hsv(hsv_to_hsl(hsv)) == pytest.approx(hsv, abs=hsv_tolerance)


def test_round_trip_hsl_hsv_hsl():
    for rgb in RGB_GRID[::7]:
        hsl = rgb_to_hsl(rgb)
        assert hsv_to_hsl(hsl_to_hsv(hsl)) == pytest.approx(hsl, abs=hsl_tolerance)
