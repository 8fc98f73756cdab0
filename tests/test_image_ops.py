# -*- coding: utf-8 -*-
"""
Image Operation Tests - Gaussian smoothing, warping, resizing and padding.

Dependencies
------------
pytest

Author
------
regflow contributors

License
-------
MIT License
Copyright (c) 2026 regflow contributors
See LICENSE file for full text.

Created
-------
2026-10-17

Modified
--------
2026-10-17
"""

import numpy as np
import pytest
from scipy.ndimage import gaussian_filter

from regflow.exceptions import ValidationError
from regflow.image_ops import (
    pad_images,
    resize_by_ratio,
    resize_to_diag_size,
    smooth_with_gaussian,
    warp_image,
)


@pytest.fixture
def ramp():
    rows, cols = np.mgrid[0:20, 0:30]
    return (rows * 30 + cols).astype(np.float64)


# ---------------------------------------------------------------------------
# smooth_with_gaussian
# ---------------------------------------------------------------------------

class TestSmoothWithGaussian:
    """Test Gaussian smoothing of real and complex fields."""

    def test_constant_field_unchanged(self):
        field = np.full((15, 25), 2 - 3j)
        np.testing.assert_allclose(smooth_with_gaussian(field, (4, 4)), field)

    def test_complex_matches_per_channel(self, ramp):
        field = ramp + 1j * ramp[::-1]
        out = smooth_with_gaussian(field, (2, 3))
        np.testing.assert_allclose(
            out.real, gaussian_filter(ramp, (2, 3), mode='nearest'))
        np.testing.assert_allclose(
            out.imag, gaussian_filter(ramp[::-1], (2, 3), mode='nearest'))

    def test_scalar_amplitude(self, ramp):
        np.testing.assert_allclose(smooth_with_gaussian(ramp, 2),
                                   smooth_with_gaussian(ramp, (2, 2)))

    def test_real_input_stays_real(self, ramp):
        assert not np.iscomplexobj(smooth_with_gaussian(ramp, 1))

    def test_does_not_modify_input(self, ramp):
        original = ramp.copy()
        smooth_with_gaussian(ramp, 3)
        np.testing.assert_array_equal(ramp, original)

    def test_reduces_variation(self):
        noise = np.random.default_rng(0).standard_normal((40, 40))
        assert smooth_with_gaussian(noise, 3).std() < noise.std()

    def test_negative_amplitude_raises(self, ramp):
        with pytest.raises(ValidationError, match="amplitude"):
            smooth_with_gaussian(ramp, (-1, 2))

    @pytest.mark.parametrize("amplitude", [(1, 2, 3), [[1, 2], [3, 4]], ()])
    def test_bad_amplitude_length_raises(self, ramp, amplitude):
        with pytest.raises(ValidationError, match="pair"):
            smooth_with_gaussian(ramp, amplitude)

    def test_3d_raises(self):
        with pytest.raises(ValidationError, match="2D"):
            smooth_with_gaussian(np.zeros((3, 4, 5)), 1)


# ---------------------------------------------------------------------------
# warp_image
# ---------------------------------------------------------------------------

class TestWarpImage:
    """Test backward warping by dense displacement fields."""

    def test_zero_displacement_is_identity(self, ramp):
        zeros = np.zeros_like(ramp)
        np.testing.assert_allclose(warp_image(ramp, zeros, zeros), ramp)

    def test_integer_horizontal_shift(self, ramp):
        dx = np.full(ramp.shape, -2.0)
        out = warp_image(ramp, dx, np.zeros_like(ramp))
        np.testing.assert_allclose(out[:, 2:], ramp[:, :-2])
        assert np.all(out[:, :2] == 0.0)

    def test_integer_vertical_shift(self, ramp):
        dy = np.full(ramp.shape, 3.0)
        out = warp_image(ramp, np.zeros_like(ramp), dy, fill_value=-1.0)
        np.testing.assert_allclose(out[:-3], ramp[3:])
        assert np.all(out[-3:] == -1.0)

    def test_half_pixel_bilinear(self, ramp):
        dx = np.full(ramp.shape, 0.5)
        out = warp_image(ramp, dx, np.zeros_like(ramp))
        np.testing.assert_allclose(out[:, :-1], ramp[:, :-1] + 0.5)

    def test_output_dtype(self):
        img = np.ones((5, 5), dtype=np.uint8)
        zeros = np.zeros((5, 5))
        assert warp_image(img, zeros, zeros).dtype == np.float64

    def test_shape_mismatch_raises(self, ramp):
        with pytest.raises(ValidationError, match="do not match"):
            warp_image(ramp, np.zeros((2, 2)), np.zeros_like(ramp))

    def test_non_2d_raises(self):
        with pytest.raises(ValidationError, match="2D"):
            warp_image(np.zeros(5), np.zeros(5), np.zeros(5))


# ---------------------------------------------------------------------------
# Resizing
# ---------------------------------------------------------------------------

class TestResize:
    """Test ratio and diagonal resizing."""

    def test_resize_by_ratio_shape(self):
        assert resize_by_ratio(np.ones((100, 50)), 0.5).shape == (50, 25)

    def test_upscale_shape(self):
        assert resize_by_ratio(np.ones((10, 20)), 3).shape == (30, 60)

    def test_constant_preserved(self):
        out = resize_by_ratio(np.full((40, 40), 0.25), 0.5)
        np.testing.assert_allclose(out, 0.25)

    @pytest.mark.parametrize("ratio", [0, -1.0, float('nan'), "2"])
    def test_bad_ratio_raises(self, ratio):
        with pytest.raises(ValidationError, match="ratio"):
            resize_by_ratio(np.ones((10, 10)), ratio)

    def test_resize_to_diag_size(self):
        # 30x40 has a 50 pixel diagonal
        assert resize_to_diag_size(np.ones((30, 40)), 100).shape == (60, 80)
        assert resize_to_diag_size(np.ones((30, 40)), 25).shape == (15, 20)


# ---------------------------------------------------------------------------
# pad_images
# ---------------------------------------------------------------------------

class TestPadImages:
    """Test padding image pairs to a common shape."""

    def test_common_shape(self):
        a = np.ones((2, 5))
        b = np.full((4, 3), 2.0)
        pa, pb = pad_images(a, b)
        assert pa.shape == pb.shape == (4, 5)
        np.testing.assert_array_equal(pa[:2, :5], a)
        np.testing.assert_array_equal(pb[:4, :3], b)
        assert np.all(pa[2:] == 0)
        assert np.all(pb[:, 3:] == 0)

    def test_equal_shapes_unchanged(self):
        a = np.arange(6.0).reshape(2, 3)
        pa, pb = pad_images(a, a * 2)
        np.testing.assert_array_equal(pa, a)
        np.testing.assert_array_equal(pb, a * 2)

    def test_fill_value(self):
        pa, _ = pad_images(np.zeros((1, 1)), np.zeros((2, 2)), fill_value=7)
        assert pa[1, 1] == 7
