# -*- coding: utf-8 -*-
"""
Image Moment Tests - Raw, central, normalized moments and Hu invariants.

Dependencies
------------
pytest

Author
------
texel developers

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-19

Modified
--------
2026-10-19
"""

import numpy as np
import pytest

from texel import ProcessorError, ValidationError
from texel.features import (
    central_moment,
    centroid,
    covariance_xy,
    hu_moment,
    hu_moments,
    normalized_central_moment,
    raw_moment,
    variance_x,
    variance_y,
)


@pytest.fixture
def point_mass():
    """Single sample of value 2 at row 3, column 5."""
    field = np.zeros((8, 8))
    field[3, 5] = 2.0
    return field


class TestRawAndCentral:
    """Test raw and central moments."""

    def test_raw_moments(self, point_mass):
        assert raw_moment(0, 0, point_mass) == 2.0
        assert raw_moment(1, 0, point_mass) == 6.0
        assert raw_moment(0, 1, point_mass) == 10.0
        assert raw_moment(1, 1, point_mass) == 30.0

    def test_centroid(self, point_mass):
        assert centroid(point_mass) == (3.0, 5.0)

    def test_first_central_moments_vanish(self, asymmetric_shape):
        assert central_moment(1, 0, asymmetric_shape) == pytest.approx(0.0, abs=1e-8)
        assert central_moment(0, 1, asymmetric_shape) == pytest.approx(0.0, abs=1e-8)

    def test_mu00_is_mass(self, asymmetric_shape):
        assert central_moment(0, 0, asymmetric_shape) == pytest.approx(
            asymmetric_shape.sum())

    def test_normalized_mu00_is_one(self, asymmetric_shape):
        assert normalized_central_moment(0, 0, asymmetric_shape) == pytest.approx(1.0)

    def test_central_translation_invariant(self, asymmetric_shape):
        shifted = np.roll(asymmetric_shape, (4, 7), axis=(0, 1))
        for p, q in ((2, 0), (1, 1), (0, 3), (2, 1)):
            assert central_moment(p, q, shifted) == pytest.approx(
                central_moment(p, q, asymmetric_shape), rel=1e-9, abs=1e-6)

    def test_variances_of_horizontal_line(self):
        field = np.zeros((10, 10))
        field[5, :] = 1.0
        assert variance_x(field) == pytest.approx(0.0)
        assert variance_y(field) == pytest.approx(8.25)
        assert covariance_xy(field) == pytest.approx(0.0)

    def test_covariance_of_diagonal(self):
        field = np.eye(6)
        assert covariance_xy(field) == pytest.approx(variance_x(field))

    def test_accepts_integer_images(self, binary_square):
        assert raw_moment(0, 0, binary_square) == 36 * 255


class TestHuMoments:
    """Test the seven Hu invariants."""

    # Invariants unchanged by a quarter turn
    QUARTER_TURN = [0, 1, 2, 4, 5]

    @staticmethod
    def _eta(field):
        return {pq: normalized_central_moment(pq[0], pq[1], field)
                for pq in ((2, 0), (0, 2), (1, 1), (3, 0), (0, 3), (2, 1), (1, 2))}

    def test_seven_values(self, asymmetric_shape):
        hu = hu_moments(asymmetric_shape)
        assert hu.shape == (7,)
        assert np.all(np.isfinite(hu))

    def test_first_invariant_formula(self, asymmetric_shape):
        e = self._eta(asymmetric_shape)
        assert hu_moment(asymmetric_shape, 1) == pytest.approx(e[2, 0] + e[0, 2])

    def test_second_invariant_formula(self, asymmetric_shape):
        """h2 combines normalized moments only."""
        e = self._eta(asymmetric_shape)
        assert hu_moment(asymmetric_shape, 2) == pytest.approx(
            (e[2, 0] - e[0, 2]) ** 2 + 4 * e[1, 1] ** 2)

    def test_third_invariant_formula(self, asymmetric_shape):
        e = self._eta(asymmetric_shape)
        assert hu_moment(asymmetric_shape, 3) == pytest.approx(
            (e[3, 0] - 3 * e[1, 2]) ** 2 + (3 * e[2, 1] - e[0, 3]) ** 2)

    def test_fourth_invariant_formula(self, asymmetric_shape):
        """h4 pairs n12 with n03 in its second square."""
        e = self._eta(asymmetric_shape)
        expected = (e[3, 0] + e[1, 2]) ** 2 + (e[1, 2] + e[0, 3]) ** 2
        assert hu_moment(asymmetric_shape, 4) == pytest.approx(expected)
        textbook = (e[3, 0] + e[1, 2]) ** 2 + (e[2, 1] + e[0, 3]) ** 2
        assert hu_moment(asymmetric_shape, 4) != pytest.approx(textbook)

    def test_fifth_invariant_formula(self, asymmetric_shape):
        e = self._eta(asymmetric_shape)
        a = e[3, 0] + e[1, 2]
        b = e[2, 1] + e[0, 3]
        expected = ((e[3, 0] - 3 * e[1, 2]) * a * (a ** 2 - 3 * b ** 2)
                    + (3 * e[2, 1] - e[0, 3]) * b * (3 * a ** 2 - b ** 2))
        assert hu_moment(asymmetric_shape, 5) == pytest.approx(expected)

    def test_sixth_invariant_formula(self, asymmetric_shape):
        e = self._eta(asymmetric_shape)
        a = e[3, 0] + e[1, 2]
        b = e[2, 1] + e[0, 3]
        expected = ((e[2, 0] - e[0, 2]) * (a ** 2 - b ** 2)
                    + 4 * e[1, 1] * a * b)
        assert hu_moment(asymmetric_shape, 6) == pytest.approx(expected)

    def test_seventh_invariant_formula(self, asymmetric_shape):
        """h7 adds its two products."""
        e = self._eta(asymmetric_shape)
        a = e[3, 0] + e[1, 2]
        b = e[2, 1] + e[0, 3]
        first = (3 * e[2, 1] - e[0, 3]) * a * (a ** 2 - 3 * b ** 2)
        second = (e[3, 0] - 3 * e[1, 2]) * b * (3 * a ** 2 - b ** 2)
        assert hu_moment(asymmetric_shape, 7) == pytest.approx(first + second)
        assert hu_moment(asymmetric_shape, 7) != pytest.approx(first - second)

    def test_weighted_l_shape_values(self):
        """A 12x12 L shape plus a heavier point pins h4 and h7."""
        field = np.zeros((12, 12))
        field[2:10, 2:4] = 1.0
        field[8:10, 4:9] = 1.0
        field[3, 9] = 3.0
        e = self._eta(field)
        a = e[3, 0] + e[1, 2]
        b = e[2, 1] + e[0, 3]
        h4 = a ** 2 + (e[1, 2] + e[0, 3]) ** 2
        h7 = ((3 * e[2, 1] - e[0, 3]) * a * (a ** 2 - 3 * b ** 2)
              + (e[3, 0] - 3 * e[1, 2]) * b * (3 * a ** 2 - b ** 2))
        hu = hu_moments(field)
        np.testing.assert_allclose(hu[3], h4, rtol=1e-12)
        np.testing.assert_allclose(hu[6], h7, rtol=1e-12)

    @pytest.mark.parametrize("n", range(1, 8))
    def test_single_matches_all(self, asymmetric_shape, n):
        assert hu_moment(asymmetric_shape, n) == pytest.approx(
            hu_moments(asymmetric_shape)[n - 1])

    def test_square_is_isotropic(self, binary_square):
        """A square has equal axis spreads and no cross term."""
        assert hu_moment(binary_square, 2) == pytest.approx(0.0, abs=1e-15)

    def test_translation_invariance(self, asymmetric_shape):
        shifted = np.roll(asymmetric_shape, (5, 3), axis=(0, 1))
        np.testing.assert_allclose(
            hu_moments(shifted), hu_moments(asymmetric_shape),
            rtol=1e-7, atol=1e-15)

    @pytest.mark.parametrize("k", [1, 2, 3])
    def test_rotation_invariance(self, asymmetric_shape, k):
        rotated = np.rot90(asymmetric_shape, k)
        np.testing.assert_allclose(
            hu_moments(rotated)[self.QUARTER_TURN],
            hu_moments(asymmetric_shape)[self.QUARTER_TURN],
            rtol=1e-7, atol=1e-15)

    def test_half_turn_keeps_all_seven(self, asymmetric_shape):
        rotated = np.rot90(asymmetric_shape, 2)
        np.testing.assert_allclose(
            hu_moments(rotated), hu_moments(asymmetric_shape),
            rtol=1e-7, atol=1e-15)

    def test_spatial_scale_invariance(self, asymmetric_shape):
        """Block upscaling changes the leading invariants only slightly."""
        upscaled = np.kron(asymmetric_shape, np.ones((3, 3)))
        np.testing.assert_allclose(
            hu_moments(upscaled)[:2], hu_moments(asymmetric_shape)[:2],
            rtol=0.02)

    @pytest.mark.parametrize("n", [0, 8, -1])
    def test_index_out_of_range(self, asymmetric_shape, n):
        with pytest.raises(ValidationError, match="1..7"):
            hu_moment(asymmetric_shape, n)


class TestDegenerateFields:
    """Test fields without a centroid."""

    def test_zero_field_raises(self):
        field = np.zeros((5, 5))
        with pytest.raises(ProcessorError, match="m00 == 0"):
            central_moment(2, 0, field)
        with pytest.raises(ProcessorError):
            hu_moments(field)
        with pytest.raises(ProcessorError):
            variance_x(field)

    def test_raw_moment_of_zero_field(self):
        assert raw_moment(1, 1, np.zeros((3, 3))) == 0.0

    def test_non_2d_raises(self):
        with pytest.raises(ValidationError, match="2D"):
            raw_moment(0, 0, np.zeros((3, 3, 3)))
