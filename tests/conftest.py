# -*- coding: utf-8 -*-
"""
Shared test fixtures - Synthetic grayscale and RGB rasters.

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


@pytest.fixture
def rng():
    """Seeded random generator."""
    return np.random.default_rng(42)


@pytest.fixture
def flat_image():
    """16x16 grayscale image of constant value 100."""
    return np.full((16, 16), 100, dtype=np.uint8)


@pytest.fixture
def random_image(rng):
    """32x24 grayscale image with uniform random gray levels."""
    return rng.integers(0, 256, size=(32, 24), dtype=np.uint8)


@pytest.fixture
def random_rgb(rng):
    """20x18 RGB image with independent random channels."""
    return rng.integers(0, 256, size=(20, 18, 3), dtype=np.uint8)


@pytest.fixture
def binary_square():
    """20x20 binary image with a 6x6 foreground block at rows/cols 7..12."""
    image = np.zeros((20, 20), dtype=np.uint8)
    image[7:13, 7:13] = 255
    return image


@pytest.fixture
def binary_blobs(rng):
    """24x24 binary image of scattered foreground pixels and a block."""
    image = np.where(rng.random((24, 24)) > 0.8, 255, 0).astype(np.uint8)
    image[8:14, 10:18] = 255
    return image


@pytest.fixture
def asymmetric_shape():
    """32x32 field holding an L-shaped region with graded intensity."""
    field = np.zeros((32, 32), dtype=np.float64)
    field[6:20, 8:12] = 200.0
    field[16:20, 12:22] = 120.0
    field[7, 9] = 50.0
    return field
