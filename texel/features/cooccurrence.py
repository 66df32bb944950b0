# -*- coding: utf-8 -*-
"""
Gray-Level Co-occurrence Matrix - Directional intensity-pair statistics.

Counts how often gray level ``i`` is followed by gray level ``j`` at a
one-pixel offset along one of four fixed directions. With ``(row, col)``
indexing, the ordered pair ``(first, second)`` is:

- 0 degrees: ``(g[r, c - 1], g[r, c])``
- 45 degrees: ``(g[r, c], g[r - 1, c + 1])``
- 90 degrees: ``(g[r - 1, c], g[r, c])``
- 135 degrees: ``(g[r, c], g[r - 1, c - 1])``

Each valid pair is counted once per call. The matrix is
``(max_gray + 1)`` square, where ``max_gray`` is 255 or, with
``auto_gray``, the brightest sample in the image. Normalization divides
every cell by the pair count (or by 1 when there are no pairs).

Haralick-style descriptors (contrast, energy, homogeneity, entropy,
correlation) are available on the returned ``CooccurrenceMatrix``.

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
import logging
from dataclasses import dataclass
from typing import Annotated, Any, Tuple, Union

# Third-party
import numpy as np

# texel internal
from texel.exceptions import ValidationError
from texel.image_processing._validation import validate_gray_levels
from texel.image_processing.base import ImageAnalyzer
from texel.image_processing.params import Desc, Options
from texel.image_processing.versioning import processor_tags, processor_version
from texel.pixel_buffer import PixelBuffer, as_array
from texel.vocabulary import ProcessorCategory

logger = logging.getLogger(__name__)


COOCCURRENCE_DEGREES = (0, 45, 90, 135)


def _pair_views(gray: np.ndarray, degree: int) -> Tuple[np.ndarray, np.ndarray]:
    """Return aligned ``(first, second)`` sample views for *degree*."""
    if degree == 0:
        return gray[:, :-1], gray[:, 1:]
    if degree == 45:
        return gray[1:, :-1], gray[:-1, 1:]
    if degree == 90:
        return gray[:-1, :], gray[1:, :]
    return gray[1:, 1:], gray[:-1, :-1]


@dataclass(frozen=True)
class CooccurrenceMatrix:
    """Result of a co-occurrence pass.

    Attributes
    ----------
    matrix : np.ndarray
        ``(levels, levels)`` float64 matrix indexed ``[first, second]``.
    num_pairs : int
        Number of pixel pairs counted.
    degree : int
        Scan direction in degrees.
    normalized : bool
        Whether ``matrix`` was divided by the pair count.
    """

    matrix: np.ndarray
    num_pairs: int
    degree: int
    normalized: bool

    @property
    def levels(self) -> int:
        return self.matrix.shape[0]

    def probabilities(self) -> np.ndarray:
        """Joint probability table; all zeros when no pairs were counted."""
        total = self.matrix.sum()
        if total == 0:
            return np.zeros_like(self.matrix)
        return self.matrix / total

    def _index_grids(self) -> Tuple[np.ndarray, np.ndarray]:
        idx = np.arange(self.levels, dtype=np.float64)
        return np.meshgrid(idx, idx, indexing='ij')

    def contrast(self) -> float:
        """``sum((i - j)^2 * p[i, j])``."""
        i, j = self._index_grids()
        return float(np.sum((i - j) ** 2 * self.probabilities()))

    def energy(self) -> float:
        """Angular second moment, ``sum(p[i, j]^2)``."""
        return float(np.sum(self.probabilities() ** 2))

    def homogeneity(self) -> float:
        """Inverse difference moment, ``sum(p[i, j] / (1 + (i - j)^2))``."""
        i, j = self._index_grids()
        return float(np.sum(self.probabilities() / (1.0 + (i - j) ** 2)))

    def entropy(self) -> float:
        """Shannon entropy in bits of the joint distribution."""
        p = self.probabilities()
        p = p[p > 0]
        return float(-np.sum(p * np.log2(p)))

    def correlation(self) -> float:
        """Linear dependency of the paired gray levels.

        Returns 1.0 when either marginal has zero variance (e.g. a constant
        image), where the ratio is undefined.
        """
        p = self.probabilities()
        i, j = self._index_grids()
        mu_i = np.sum(i * p)
        mu_j = np.sum(j * p)
        sigma_i = np.sqrt(np.sum((i - mu_i) ** 2 * p))
        sigma_j = np.sqrt(np.sum((j - mu_j) ** 2 * p))
        if sigma_i == 0 or sigma_j == 0:
            return 1.0
        return float(np.sum((i - mu_i) * (j - mu_j) * p) / (sigma_i * sigma_j))


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.TEXTURE)
class GrayLevelCooccurrenceMatrix(ImageAnalyzer):
    """Gray-level co-occurrence matrix along one direction.

    Parameters
    ----------
    degree : int
        Scan direction: 0, 45, 90 or 135. Default 0.
    auto_gray : bool
        Size the matrix from the image maximum instead of 256 levels.
        Default True.
    normalize : bool
        Divide counts by the number of pairs. Default True.

    Examples
    --------
    >>> glcm = GrayLevelCooccurrenceMatrix(degree=90, auto_gray=False)
    >>> result = glcm.compute(gray)
    >>> result.num_pairs, result.contrast()
    """

    degree: Annotated[int, Options(*COOCCURRENCE_DEGREES), Desc('Scan direction')] = 0
    auto_gray: Annotated[bool, Desc('Size matrix from observed maximum')] = True
    normalize: Annotated[bool, Desc('Divide by pair count')] = True

    def __init__(
        self, degree: int = 0, auto_gray: bool = True, normalize: bool = True,
    ) -> None:
        if degree not in COOCCURRENCE_DEGREES:
            raise ValidationError(
                f"Unknown degree {degree!r}. Must be one of {COOCCURRENCE_DEGREES}"
            )
        self.degree = degree
        self.auto_gray = auto_gray
        self.normalize = normalize

    def compute(
        self, source: Union[np.ndarray, PixelBuffer], **kwargs: Any
    ) -> CooccurrenceMatrix:
        """Accumulate the co-occurrence matrix of a grayscale image.

        Parameters
        ----------
        source : np.ndarray or PixelBuffer
            ``(rows, cols)`` image with gray levels in ``[0, 255]``.
        **kwargs
            Runtime overrides for ``degree``, ``auto_gray``, ``normalize``.

        Returns
        -------
        CooccurrenceMatrix

        Raises
        ------
        ValidationError
            If the image is not grayscale or holds out-of-range samples.
        """
        params = self._resolve_params(kwargs)
        gray = validate_gray_levels(as_array(source), type(self).__name__)

        max_gray = 255
        if params['auto_gray'] and gray.size:
            max_gray = int(gray.max())
        levels = max_gray + 1

        first, second = _pair_views(gray, params['degree'])
        matrix = np.zeros((levels, levels), dtype=np.float64)
        np.add.at(matrix, (first.ravel(), second.ravel()), 1.0)
        num_pairs = int(first.size)

        if num_pairs == 0:
            logger.warning(
                "No pixel pairs at %d degrees in image of shape %s",
                params['degree'], gray.shape,
            )
        if params['normalize']:
            matrix /= num_pairs if num_pairs else 1

        logger.debug("GLCM %d deg: %d levels, %d pairs",
                     params['degree'], levels, num_pairs)
        return CooccurrenceMatrix(
            matrix=matrix,
            num_pairs=num_pairs,
            degree=params['degree'],
            normalized=params['normalize'],
        )

    def analyze(
        self, source: Union[np.ndarray, PixelBuffer], **kwargs: Any
    ) -> CooccurrenceMatrix:
        """Alias of ``compute`` satisfying the ``ImageAnalyzer`` interface."""
        return self.compute(source, **kwargs)
