# -*- coding: utf-8 -*-
"""
Morphology Filters - Structuring-element dilation/erosion and rank extrema.

Grayscale mathematical morphology on 8-bit images:

- ``Dilation``: maximum of ``window + kernel`` (grows bright regions)
- ``Erosion``: minimum of ``window - kernel`` (shrinks bright regions)
- ``Opening`` / ``Closing``: erosion then dilation, and the reverse
- ``MinimumFilter`` / ``MaximumFilter``: plain windowed min / max

``Dilation`` and ``Erosion`` add (subtract) the structuring element
weights to the windowed samples before reducing, so the default all-ones
element shifts every reduced value by one gray level. They rewrite every
pixel whose row and column are both >= 1; row 0 and column 0 keep their
input values. Window positions that fall outside the image never take part
in a reduction.

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
from typing import Annotated, Any, Optional

# Third-party
import numpy as np
from scipy.ndimage import maximum_filter, minimum_filter

# texel internal
from texel.exceptions import ValidationError
from texel.image_processing._validation import (
    validate_radius,
    validate_structuring_element,
)
from texel.image_processing.base import ChannelwiseTransformMixin, ImageTransform
from texel.image_processing.params import Desc, Range
from texel.image_processing.pipeline import Pipeline
from texel.image_processing.versioning import processor_tags, processor_version
from texel.vocabulary import ProcessorCategory


def make_structuring_element(radius: int) -> np.ndarray:
    """Build the default all-ones structuring element.

    Parameters
    ----------
    radius : int
        Half-size. The element is ``(2*radius+1) x (2*radius+1)``.

    Returns
    -------
    np.ndarray
        2D ``int64`` array of ones.

    Raises
    ------
    ValidationError
        If ``radius`` is not an integer >= 1.
    """
    validate_radius(radius)
    size = 2 * radius + 1
    return np.ones((size, size), dtype=np.int64)


def _weighted_extremum(
    image: np.ndarray, kernel: np.ndarray, dilate: bool,
) -> np.ndarray:
    """Reduce ``image +/- kernel`` over every window position.

    The image is padded with -inf (dilation) or +inf (erosion) so that
    out-of-bounds offsets never win the reduction.
    """
    rows, cols = image.shape
    side = kernel.shape[0]
    r = side // 2
    fill = -np.inf if dilate else np.inf
    reduce = np.maximum if dilate else np.minimum
    sign = 1.0 if dilate else -1.0

    padded = np.pad(image, r, mode='constant', constant_values=fill)
    out = np.full((rows, cols), fill)
    for dr in range(side):
        for dc in range(side):
            shifted = padded[dr:dr + rows, dc:dc + cols] + sign * kernel[dr, dc]
            reduce(out, shifted, out=out)
    return out


def _interior_morphology(
    source: np.ndarray, kernel: np.ndarray, dilate: bool,
) -> np.ndarray:
    image = source.astype(np.float64)
    result = image.copy()
    if image.shape[0] > 1 and image.shape[1] > 1:
        reduced = _weighted_extremum(image, kernel, dilate)
        result[1:, 1:] = reduced[1:, 1:]
    return np.clip(result, 0, 255).astype(np.uint8)


def _resolve_kernel(radius: int, kernel: Optional[np.ndarray]) -> np.ndarray:
    if kernel is not None:
        return kernel
    return make_structuring_element(radius)


def _reject_radius_override(
    kwargs: dict, kernel: Optional[np.ndarray],
) -> None:
    """A custom kernel fixes the radius; a differing override is an error."""
    if kernel is None or 'radius' not in kwargs:
        return
    if kwargs['radius'] != kernel.shape[0] // 2:
        raise ValidationError(
            f"radius override {kwargs['radius']!r} conflicts with the "
            f"{kernel.shape[0]}x{kernel.shape[1]} custom kernel"
        )


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.MORPHOLOGY)
class Dilation(ChannelwiseTransformMixin, ImageTransform):
    """Grayscale dilation with a weighted structuring element.

    Each rewritten pixel becomes ``min(255, max(window + kernel))``.
    RGB images are dilated channel by channel.

    Parameters
    ----------
    radius : int
        Half-size of the default all-ones element. Default 1 (3x3).
        Taken from ``kernel`` when one is given; a runtime ``radius``
        override that disagrees with it raises ``ValidationError``.
    kernel : array_like, optional
        Square, odd-sided integer structuring element. Its radius is
        ``side // 2``.

    Examples
    --------
    >>> from texel.image_processing.filters import Dilation
    >>> grown = Dilation(radius=2).apply(binary_mask)
    """

    radius: Annotated[int, Range(min=1), Desc('Structuring element radius')] = 1

    def __init__(
        self, radius: int = 1, kernel: Optional[np.ndarray] = None,
    ) -> None:
        validate_radius(radius)
        self.kernel = (None if kernel is None
                       else validate_structuring_element(kernel))
        self.radius = radius if self.kernel is None else self.kernel.shape[0] // 2

    def _apply_2d(self, source: np.ndarray, **kwargs: Any) -> np.ndarray:
        _reject_radius_override(kwargs, self.kernel)
        params = self._resolve_params(kwargs)
        kernel = _resolve_kernel(params['radius'], self.kernel)
        return _interior_morphology(source, kernel, dilate=True)


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.MORPHOLOGY)
class Erosion(ChannelwiseTransformMixin, ImageTransform):
    """Grayscale erosion with a weighted structuring element.

    Each rewritten pixel becomes ``max(0, min(window - kernel))``.
    RGB images are eroded channel by channel.

    Parameters
    ----------
    radius : int
        Half-size of the default all-ones element. Default 1 (3x3).
        Taken from ``kernel`` when one is given; a runtime ``radius``
        override that disagrees with it raises ``ValidationError``.
    kernel : array_like, optional
        Square, odd-sided integer structuring element.

    Examples
    --------
    >>> from texel.image_processing.filters import Erosion
    >>> shrunk = Erosion(radius=1).apply(binary_mask)
    """

    radius: Annotated[int, Range(min=1), Desc('Structuring element radius')] = 1

    def __init__(
        self, radius: int = 1, kernel: Optional[np.ndarray] = None,
    ) -> None:
        validate_radius(radius)
        self.kernel = (None if kernel is None
                       else validate_structuring_element(kernel))
        self.radius = radius if self.kernel is None else self.kernel.shape[0] // 2

    def _apply_2d(self, source: np.ndarray, **kwargs: Any) -> np.ndarray:
        _reject_radius_override(kwargs, self.kernel)
        params = self._resolve_params(kwargs)
        kernel = _resolve_kernel(params['radius'], self.kernel)
        return _interior_morphology(source, kernel, dilate=False)


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.MORPHOLOGY)
class Opening(ImageTransform):
    """Erosion followed by dilation with the same structuring element.

    Removes bright details smaller than the element.
    """

    radius: Annotated[int, Range(min=1), Desc('Structuring element radius')] = 1

    def __init__(
        self, radius: int = 1, kernel: Optional[np.ndarray] = None,
    ) -> None:
        validate_radius(radius)
        self.kernel = (None if kernel is None
                       else validate_structuring_element(kernel))
        self.radius = radius if self.kernel is None else self.kernel.shape[0] // 2

    def apply(self, source: np.ndarray, **kwargs: Any) -> np.ndarray:
        _reject_radius_override(kwargs, self.kernel)
        radius = self._resolve_params(kwargs)['radius']
        return Pipeline([
            Erosion(radius, self.kernel),
            Dilation(radius, self.kernel),
        ]).apply(source)


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.MORPHOLOGY)
class Closing(ImageTransform):
    """Dilation followed by erosion with the same structuring element.

    Fills dark details smaller than the element.
    """

    radius: Annotated[int, Range(min=1), Desc('Structuring element radius')] = 1

    def __init__(
        self, radius: int = 1, kernel: Optional[np.ndarray] = None,
    ) -> None:
        validate_radius(radius)
        self.kernel = (None if kernel is None
                       else validate_structuring_element(kernel))
        self.radius = radius if self.kernel is None else self.kernel.shape[0] // 2

    def apply(self, source: np.ndarray, **kwargs: Any) -> np.ndarray:
        _reject_radius_override(kwargs, self.kernel)
        radius = self._resolve_params(kwargs)['radius']
        return Pipeline([
            Dilation(radius, self.kernel),
            Erosion(radius, self.kernel),
        ]).apply(source)


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.FILTERS)
class MinimumFilter(ChannelwiseTransformMixin, ImageTransform):
    """Local minimum over a square window.

    Every pixel (borders included) becomes the minimum of the in-bounds
    samples of its ``(2*radius+1)`` square window. Backed by
    ``scipy.ndimage.minimum_filter``; ``'nearest'`` padding only repeats
    samples already inside the window, so it is equivalent to skipping
    out-of-bounds positions.

    Parameters
    ----------
    radius : int
        Window half-size. Default 1.

    Examples
    --------
    >>> from texel.image_processing.filters import MinimumFilter
    >>> darkened = MinimumFilter(radius=2).apply(image)
    """

    radius: Annotated[int, Range(min=1), Desc('Window radius')] = 1

    def __init__(self, radius: int = 1) -> None:
        validate_radius(radius)
        self.radius = radius

    def _apply_2d(self, source: np.ndarray, **kwargs: Any) -> np.ndarray:
        size = 2 * self._resolve_params(kwargs)['radius'] + 1
        result = minimum_filter(source.astype(np.float64), size=size,
                                mode='nearest')
        return np.clip(result, 0, 255).astype(np.uint8)


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.FILTERS)
class MaximumFilter(ChannelwiseTransformMixin, ImageTransform):
    """Local maximum over a square window, counterpart of ``MinimumFilter``.

    Parameters
    ----------
    radius : int
        Window half-size. Default 1.
    """

    radius: Annotated[int, Range(min=1), Desc('Window radius')] = 1

    def __init__(self, radius: int = 1) -> None:
        validate_radius(radius)
        self.radius = radius

    def _apply_2d(self, source: np.ndarray, **kwargs: Any) -> np.ndarray:
        size = 2 * self._resolve_params(kwargs)['radius'] + 1
        result = maximum_filter(source.astype(np.float64), size=size,
                                mode='nearest')
        return np.clip(result, 0, 255).astype(np.uint8)
