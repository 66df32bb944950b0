# -*- coding: utf-8 -*-
"""
Co-occurrence Matrix Tests - Direction adjacency, gray-level sizing,
normalization, and Haralick descriptors.

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

from texel import PixelBuffer, ValidationError
from texel.features import (
    COOCCURRENCE_DEGREES,
    CooccurrenceMatrix,
    GrayLevelCooccurrenceMatrix,
)


def _reference_counts(gray, degree, levels):
    """Per-pixel loop over every ordered pair for *degree*."""
    rows, cols = gray.shape
    counts = np.zeros((levels, levels))
    pairs = 0
    for r in range(rows):
        for c in range(cols):
            if degree == 0 and c >= 1:
                a, b = gray[r, c - 1], gray[r, c]
            elif degree == 45 and r >= 1 and c + 1 < cols:
                a, b = gray[r, c], gray[r - 1, c + 1]
            elif degree == 90 and r >= 1:
                a, b = gray[r - 1, c], gray[r, c]
            elif degree == 135 and r >= 1 and c >= 1:
                a, b = gray[r, c], gray[r - 1, c - 1]
            else:
                continue
            counts[a, b] += 1
            pairs += 1
    return counts, pairs


class TestAccumulation:
    """Test pair accumulation along each direction."""

    def test_horizontal_scenario(self):
        """[10, 20, 10, 20] at 0 degrees with 256 levels."""
        image = np.array([[10, 20, 10, 20]], dtype=np.uint8)
        glcm = GrayLevelCooccurrenceMatrix(degree=0, auto_gray=False,
                                           normalize=False)
        result = glcm.compute(image)
        assert result.matrix.shape == (256, 256)
        assert result.num_pairs == 3
        assert result.matrix[10, 20] == 2
        assert result.matrix[20, 10] == 1
        assert result.matrix.sum() == 3

    @pytest.mark.parametrize("degree", COOCCURRENCE_DEGREES)
    def test_matches_reference(self, rng, degree):
        gray = rng.integers(0, 8, size=(9, 11), dtype=np.uint8)
        expected, pairs = _reference_counts(gray, degree, 256)
        result = GrayLevelCooccurrenceMatrix(
            degree=degree, auto_gray=False, normalize=False).compute(gray)
        np.testing.assert_array_equal(result.matrix, expected)
        assert result.num_pairs == pairs

    def test_45_degree_pair(self):
        """45 degrees pairs a pixel with its upper-right neighbor."""
        image = np.array([[0, 7],
                          [3, 0]], dtype=np.uint8)
        result = GrayLevelCooccurrenceMatrix(
            degree=45, normalize=False).compute(image)
        assert result.num_pairs == 1
        assert result.matrix[3, 7] == 1

    def test_135_degree_pair(self):
        """135 degrees pairs a pixel with its upper-left neighbor."""
        image = np.array([[5, 0],
                          [0, 2]], dtype=np.uint8)
        result = GrayLevelCooccurrenceMatrix(
            degree=135, normalize=False).compute(image)
        assert result.num_pairs == 1
        assert result.matrix[2, 5] == 1

    @pytest.mark.parametrize("degree,pairs", [(0, 32 * 23), (45, 31 * 23),
                                              (90, 31 * 24), (135, 31 * 23)])
    def test_pair_counts(self, random_image, degree, pairs):
        result = GrayLevelCooccurrenceMatrix(
            degree=degree, normalize=False).compute(random_image)
        assert result.num_pairs == pairs
        assert result.matrix.sum() == pairs

    def test_auto_gray_sizes_from_maximum(self):
        image = np.array([[0, 3], [1, 2]], dtype=np.uint8)
        result = GrayLevelCooccurrenceMatrix().compute(image)
        assert result.levels == 4

    def test_counts_reset_between_calls(self, random_image):
        glcm = GrayLevelCooccurrenceMatrix(normalize=False)
        first = glcm.compute(random_image)
        second = glcm.compute(random_image)
        assert first.num_pairs == second.num_pairs
        np.testing.assert_array_equal(first.matrix, second.matrix)

    def test_accepts_pixel_buffer(self, random_image):
        glcm = GrayLevelCooccurrenceMatrix()
        np.testing.assert_array_equal(
            glcm.compute(PixelBuffer(random_image)).matrix,
            glcm.compute(random_image).matrix,
        )

    def test_analyze_alias(self, random_image):
        glcm = GrayLevelCooccurrenceMatrix(degree=90)
        np.testing.assert_array_equal(
            glcm.analyze(random_image).matrix,
            glcm.compute(random_image).matrix,
        )

    def test_runtime_degree_override(self, random_image):
        result = GrayLevelCooccurrenceMatrix().compute(random_image, degree=90)
        assert result.degree == 90


class TestNormalization:
    """Test normalization by the pair count."""

    @pytest.mark.parametrize("degree", COOCCURRENCE_DEGREES)
    def test_normalized_sums_to_one(self, random_image, degree):
        result = GrayLevelCooccurrenceMatrix(degree=degree).compute(random_image)
        assert result.normalized
        assert result.matrix.sum() == pytest.approx(1.0)

    def test_no_pairs_divides_by_one(self, caplog):
        """A single-row image has no vertical pairs."""
        image = np.array([[1, 2, 3]], dtype=np.uint8)
        result = GrayLevelCooccurrenceMatrix(degree=90).compute(image)
        assert result.num_pairs == 0
        assert result.matrix.sum() == 0
        assert 'No pixel pairs' in caplog.text


class TestDescriptors:
    """Test Haralick descriptors on known matrices."""

    def test_constant_image(self, flat_image):
        result = GrayLevelCooccurrenceMatrix().compute(flat_image)
        assert result.contrast() == 0.0
        assert result.energy() == pytest.approx(1.0)
        assert result.homogeneity() == pytest.approx(1.0)
        assert result.entropy() == 0.0
        assert result.correlation() == 1.0

    def test_alternating_columns(self):
        image = np.tile(np.array([[0, 1]], dtype=np.uint8), (4, 4))
        result = GrayLevelCooccurrenceMatrix(degree=0).compute(image)
        assert result.contrast() == pytest.approx(1.0)
        assert result.homogeneity() == pytest.approx(0.5)
        assert result.correlation() == pytest.approx(-1.0)

    def test_descriptors_independent_of_normalization(self, random_image):
        norm = GrayLevelCooccurrenceMatrix(normalize=True).compute(random_image)
        raw = GrayLevelCooccurrenceMatrix(normalize=False).compute(random_image)
        assert norm.contrast() == pytest.approx(raw.contrast())
        assert norm.entropy() == pytest.approx(raw.entropy())

    def test_entropy_uniform_pairs(self):
        matrix = np.full((2, 2), 0.25)
        result = CooccurrenceMatrix(matrix=matrix, num_pairs=4, degree=0,
                                    normalized=True)
        assert result.entropy() == pytest.approx(2.0)
        assert result.energy() == pytest.approx(0.25)


class TestValidation:
    """Test input and parameter validation."""

    def test_unknown_degree(self):
        with pytest.raises(ValidationError, match="Unknown degree"):
            GrayLevelCooccurrenceMatrix(degree=30)

    def test_rgb_raises(self, random_rgb):
        with pytest.raises(ValidationError, match="grayscale"):
            GrayLevelCooccurrenceMatrix().compute(random_rgb)

    def test_out_of_range_raises(self):
        with pytest.raises(ValidationError, match=r"\[0, 255\]"):
            GrayLevelCooccurrenceMatrix().compute(np.array([[0, 300]]))
