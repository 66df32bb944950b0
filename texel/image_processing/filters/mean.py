# -*- coding: utf-8 -*-
"""
Generalized Mean Filter - Arithmetic, harmonic, contra-harmonic, geometric.

Replaces every pixel of every channel by a mean of the samples in its
``(2*radius+1)`` square window intersected with the image bounds. All
window sums are taken with ``scipy.ndimage.correlate`` over a ones kernel
and zero padding, so out-of-bounds positions contribute nothing, and the
in-bounds sample count comes from correlating a ones image the same way.

Methods
-------
- ``'arithmetic'``: ``sum(v) / n``
- ``'harmonic'``: ``n / sum(1 / v)``. A zero sample makes the reciprocal
  sum infinite and the mean 0.
- ``'contraharmonic'``: ``sum(v ** (Q + 1)) / sum(v ** Q)`` with ``Q`` the
  ``order``. ``Q = 0`` is the arithmetic mean, ``Q = -1`` the harmonic.
- ``'geometric'``: ``exp(sum(log v) / n)``, the ``n``-th root of the
  product accumulated in the log domain so large windows cannot overflow.

Results are truncated toward zero to integer gray levels.

Dependencies
------------
scipy

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
from typing import Annotated, Any

# Third-party
import numpy as np
from scipy.ndimage import correlate

# texel internal
from texel.exceptions import ValidationError
from texel.image_processing._validation import validate_radius
from texel.image_processing.base import ChannelwiseTransformMixin, ImageTransform
from texel.image_processing.params import Desc, Options, Range
from texel.image_processing.versioning import processor_tags, processor_version
from texel.vocabulary import ProcessorCategory

logger = logging.getLogger(__name__)


MEAN_METHODS = ('arithmetic', 'harmonic', 'contraharmonic', 'geometric')

# Absorbs rounding error (e.g. 9 / (9 * 0.01) == 99.99999999999999) before
# truncation so that a constant window maps to its own value.
_TRUNCATION_TOLERANCE = 1e-9


def _window_sum(values: np.ndarray, size: int) -> np.ndarray:
    weights = np.ones((size, size), dtype=np.float64)
    return correlate(values, weights, mode='constant', cval=0.0)


def _to_gray_levels(result: np.ndarray, method: str) -> np.ndarray:
    """Truncate float means to ``uint8`` gray levels.

    NaN results are written as 0 and infinities are clamped to the gray
    range; both are reported since they indicate a degenerate window.
    """
    bad = ~np.isfinite(result)
    if bad.any():
        logger.warning(
            "%s mean produced %d non-finite value(s); NaN written as 0, "
            "infinities clamped to [0, 255]",
            method, int(bad.sum()),
        )
        result = np.nan_to_num(result, nan=0.0, posinf=255.0, neginf=0.0)
    truncated = np.trunc(result + _TRUNCATION_TOLERANCE)
    return np.clip(truncated, 0, 255).astype(np.uint8)


def generalized_mean(
    channel: np.ndarray,
    radius: int,
    method: str = 'arithmetic',
    order: float = 1.0,
) -> np.ndarray:
    """Windowed generalized mean of a single channel, as floats.

    Parameters
    ----------
    channel : np.ndarray
        2D array of non-negative samples.
    radius : int
        Window half-size, >= 0.
    method : str
        One of ``MEAN_METHODS``.
    order : float
        Contra-harmonic order ``Q``. Ignored by other methods.

    Returns
    -------
    np.ndarray
        float64 array of window means. May contain non-finite values for
        degenerate windows (e.g. an all-zero contra-harmonic window).

    Raises
    ------
    ValidationError
        If ``method`` is unknown.
    """
    if method not in MEAN_METHODS:
        raise ValidationError(
            f"Unknown method '{method}'. Must be one of {MEAN_METHODS}"
        )
    size = 2 * radius + 1
    values = channel.astype(np.float64)
    counts = _window_sum(np.ones_like(values), size)

    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        if method == 'arithmetic':
            return _window_sum(values, size) / counts

        if method == 'harmonic':
            return counts / _window_sum(1.0 / values, size)

        if method == 'contraharmonic':
            numerator = _window_sum(np.power(values, order + 1.0), size)
            denominator = _window_sum(np.power(values, order), size)
            return numerator / denominator

        return np.exp(_window_sum(np.log(values), size) / counts)


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.FILTERS)
class MeanFilter(ChannelwiseTransformMixin, ImageTransform):
    """Generalized mean smoothing filter.

    Every output sample is computed from the unmodified input, so no pixel
    ever sees an already-filtered neighbor. RGB images are filtered
    channel by channel.

    Parameters
    ----------
    radius : int
        Window half-size. ``0`` is the identity window. Default 1 (3x3).
    method : str
        ``'arithmetic'`` (default), ``'harmonic'``, ``'contraharmonic'``
        or ``'geometric'``.
    order : float
        Contra-harmonic order. Default 1.0. Positive orders suppress dark
        (pepper) noise, negative orders suppress bright (salt) noise.

    Examples
    --------
    >>> from texel.image_processing.filters import MeanFilter
    >>> smoothed = MeanFilter(radius=2).apply(image)
    >>> desalted = MeanFilter(radius=1, method='contraharmonic',
    ...                       order=-1.5).apply(noisy)
    """

    radius: Annotated[int, Range(min=0), Desc('Window radius')] = 1
    method: Annotated[str, Options(*MEAN_METHODS), Desc('Averaging formula')] = 'arithmetic'
    order: Annotated[float, Desc('Contra-harmonic order')] = 1.0

    def __init__(
        self,
        radius: int = 1,
        method: str = 'arithmetic',
        order: float = 1.0,
    ) -> None:
        validate_radius(radius, minimum=0)
        method_lower = method.lower()
        if method_lower not in MEAN_METHODS:
            raise ValidationError(
                f"Unknown method '{method}'. Must be one of {MEAN_METHODS}"
            )
        self.radius = radius
        self.method = method_lower
        self.order = order

    def _apply_2d(self, source: np.ndarray, **kwargs: Any) -> np.ndarray:
        """Apply the configured mean to a single 2D channel.

        Returns
        -------
        np.ndarray
            ``uint8`` image, same shape as ``source``.
        """
        params = self._resolve_params(kwargs)
        result = generalized_mean(
            source,
            radius=params['radius'],
            method=params['method'],
            order=params['order'],
        )
        return _to_gray_levels(result, params['method'])
