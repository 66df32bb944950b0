# -*- coding: utf-8 -*-
"""
Local Binary Pattern - 8-neighbor texture code histogram.

Every interior pixel (not on the outermost row or column) receives an
8-bit code with one bit per neighbor that is strictly brighter than the
center. Bit weights run clockwise from the upper-left neighbor::

    128  64  32
      1   c  16
      2   4   8

The result is the 256-bin histogram of those codes.

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

# Standard library
from typing import Any, Union

# Third-party
import numpy as np

# texel internal
from texel.features.histogram import Histogram
from texel.image_processing._validation import validate_gray_levels
from texel.image_processing.base import ImageAnalyzer
from texel.image_processing.versioning import processor_tags, processor_version
from texel.pixel_buffer import PixelBuffer, as_array
from texel.vocabulary import ProcessorCategory

# (row offset, col offset, weight)
_NEIGHBOR_WEIGHTS = (
    (-1, -1, 128),
    (-1, 0, 64),
    (-1, 1, 32),
    (0, 1, 16),
    (1, 1, 8),
    (1, 0, 4),
    (1, -1, 2),
    (0, -1, 1),
)


def lbp_codes(gray: np.ndarray) -> np.ndarray:
    """LBP code of every interior pixel of a 2D gray image.

    Returns
    -------
    np.ndarray
        ``(rows - 2, cols - 2)`` int64 array of codes in ``[0, 255]``.
    """
    rows, cols = gray.shape
    if rows < 3 or cols < 3:
        return np.zeros((max(rows - 2, 0), max(cols - 2, 0)), dtype=np.int64)
    center = gray[1:-1, 1:-1]
    codes = np.zeros(center.shape, dtype=np.int64)
    for dr, dc, weight in _NEIGHBOR_WEIGHTS:
        neighbor = gray[1 + dr:rows - 1 + dr, 1 + dc:cols - 1 + dc]
        codes += np.where(center < neighbor, weight, 0)
    return codes


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.TEXTURE)
class LocalBinaryPattern(ImageAnalyzer):
    """Histogram of 8-neighbor local binary pattern codes.

    Examples
    --------
    >>> hist = LocalBinaryPattern().analyze(gray)
    >>> hist.total == (gray.shape[0] - 2) * (gray.shape[1] - 2)
    True
    """

    def analyze(
        self, source: Union[np.ndarray, PixelBuffer], **kwargs: Any
    ) -> Histogram:
        """Build the LBP code histogram of a grayscale image.

        Raises
        ------
        ValidationError
            If the image is not grayscale.
        """
        gray = validate_gray_levels(as_array(source), type(self).__name__)
        codes = lbp_codes(gray)
        return Histogram(np.bincount(codes.ravel(), minlength=256))
