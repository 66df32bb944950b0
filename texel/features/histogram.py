# -*- coding: utf-8 -*-
"""
Histogram - Immutable intensity histogram with summary statistics.

``Histogram`` is built once from an integer count array (normally 256 gray
level bins) and precomputes its mean, standard deviation, median, mode,
entropy and occupied range. The module-level ``histogram_*`` functions
compute the same statistics directly from a count array.

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
from typing import Optional, Sequence, Tuple, Union

# Third-party
import numpy as np

# texel internal
from texel.exceptions import ValidationError

CountsLike = Union[Sequence[int], np.ndarray]


def _as_counts(values: CountsLike) -> np.ndarray:
    counts = np.asarray(values)
    if counts.ndim != 1:
        raise ValidationError(
            f"Histogram counts must be 1D, got shape {counts.shape}"
        )
    if counts.size and not np.issubdtype(counts.dtype, np.integer):
        raise ValidationError(
            f"Histogram counts must be integers, got dtype {counts.dtype}"
        )
    if counts.size and counts.min() < 0:
        raise ValidationError("Histogram counts must be non-negative")
    return counts.astype(np.int64)


def histogram_mean(values: CountsLike) -> float:
    """Mean bin index weighted by counts; 0 for an empty histogram."""
    counts = _as_counts(values)
    total = counts.sum()
    if total == 0:
        return 0.0
    return float(np.dot(np.arange(counts.size), counts) / total)


def histogram_std_dev(values: CountsLike, mean: Optional[float] = None) -> float:
    """Population standard deviation of the bin index; 0 when empty."""
    counts = _as_counts(values)
    total = counts.sum()
    if total == 0:
        return 0.0
    if mean is None:
        mean = histogram_mean(counts)
    diff = np.arange(counts.size) - mean
    return float(np.sqrt(np.dot(diff * diff, counts) / total))


def histogram_median(values: CountsLike) -> int:
    """First bin at which the cumulative count reaches half the total."""
    counts = _as_counts(values)
    half = counts.sum() // 2
    cumulative = np.cumsum(counts)
    return int(np.searchsorted(cumulative, half, side='left'))


def histogram_mode(values: CountsLike) -> int:
    """Lowest bin holding the maximum count; 0 for an empty histogram."""
    counts = _as_counts(values)
    if counts.size == 0 or counts.max() <= 0:
        return 0
    return int(np.argmax(counts))


def histogram_entropy(values: CountsLike) -> float:
    """Shannon entropy in bits of the normalized histogram."""
    counts = _as_counts(values)
    total = counts.sum()
    if total == 0:
        return 0.0
    p = counts[counts > 0] / total
    return float(-np.sum(p * np.log2(p)))


def histogram_range(values: CountsLike, percent: float) -> Tuple[int, int]:
    """Bin range holding the central *percent* of the counts.

    Walks inwards from each end, dropping bins until the remaining count
    falls below ``total * (percent + (1 - percent) / 2)``.

    Parameters
    ----------
    values : array_like
        Histogram counts.
    percent : float
        Fraction in ``[0, 1]`` of counts the range should hold.

    Returns
    -------
    Tuple[int, int]
        ``(low, high)`` bin indices.
    """
    if not 0.0 <= percent <= 1.0:
        raise ValidationError(f"percent must be in [0, 1], got {percent}")
    counts = _as_counts(values)
    total = int(counts.sum())
    n = counts.size
    threshold = int(total * (percent + (1.0 - percent) / 2.0))

    remaining_low = total - np.cumsum(counts)
    below = np.nonzero(remaining_low < threshold)[0]
    low = int(below[0]) if below.size else n

    remaining_high = total - np.cumsum(counts[::-1])
    below = np.nonzero(remaining_high < threshold)[0]
    high = int(n - 1 - below[0]) if below.size else -1
    return low, high


class Histogram:
    """Immutable histogram of integer counts.

    Parameters
    ----------
    values : array_like
        1D non-negative integer counts, one per bin.

    Attributes
    ----------
    mean, std_dev, entropy : float
    median, mode, min, max, total : int
        ``min``/``max`` are the lowest/highest occupied bins; for an empty
        histogram ``min`` is the bin count and ``max`` is 0.

    Examples
    --------
    >>> h = Histogram(np.bincount(gray.ravel(), minlength=256))
    >>> h.mean, h.median, h.entropy
    """

    def __init__(self, values: CountsLike) -> None:
        counts = _as_counts(values).copy()
        counts.setflags(write=False)
        self._values = counts

        occupied = np.nonzero(counts)[0]
        self._min = int(occupied[0]) if occupied.size else counts.size
        self._max = int(occupied[-1]) if occupied.size else 0
        self._total = int(counts.sum())
        self._mean = histogram_mean(counts)
        self._std_dev = histogram_std_dev(counts, self._mean)
        self._median = histogram_median(counts)
        self._mode = histogram_mode(counts)
        self._entropy = histogram_entropy(counts)

    def __repr__(self) -> str:
        return (
            f"Histogram(bins={self._values.size}, total={self._total}, "
            f"mean={self._mean:.4g}, std_dev={self._std_dev:.4g})"
        )

    def __len__(self) -> int:
        return self._values.size

    @property
    def values(self) -> np.ndarray:
        """Read-only count array."""
        return self._values

    @property
    def mean(self) -> float:
        return self._mean

    @property
    def std_dev(self) -> float:
        return self._std_dev

    @property
    def median(self) -> int:
        return self._median

    @property
    def mode(self) -> int:
        return self._mode

    @property
    def entropy(self) -> float:
        return self._entropy

    @property
    def min(self) -> int:
        return self._min

    @property
    def max(self) -> int:
        return self._max

    @property
    def total(self) -> int:
        return self._total

    def get_range(self, percent: float) -> Tuple[int, int]:
        """Bin range holding the central *percent* of the counts."""
        return histogram_range(self._values, percent)
