# -*- coding: utf-8 -*-
"""
Image Statistics - Per-channel 256-bin histograms of an 8-bit image.

Grayscale images produce a single gray histogram; RGB images produce one
histogram per color channel. Asking for a histogram the image does not
have raises ``ValidationError``.

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
from typing import Optional, Union

# Third-party
import numpy as np

# texel internal
from texel.exceptions import ValidationError
from texel.features.histogram import Histogram
from texel.image_processing._validation import validate_image
from texel.pixel_buffer import PixelBuffer, as_array
from texel.vocabulary import ColorMode

GRAY_LEVELS = 256


def channel_histogram(channel: np.ndarray) -> Histogram:
    """256-bin histogram of one channel with samples in ``[0, 255]``."""
    values = np.asarray(channel).astype(np.int64).ravel()
    if values.size and (values.min() < 0 or values.max() >= GRAY_LEVELS):
        raise ValidationError(
            f"Channel samples must lie in [0, 255], "
            f"got range [{values.min()}, {values.max()}]"
        )
    return Histogram(np.bincount(values, minlength=GRAY_LEVELS))


class ImageStatistics:
    """Histograms of every channel of an image.

    Parameters
    ----------
    source : np.ndarray or PixelBuffer
        ``(rows, cols)`` grayscale or ``(rows, cols, 3)`` RGB image.

    Examples
    --------
    >>> stats = ImageStatistics(rgb)
    >>> stats.red.mean, stats.pixel_count
    >>> stats.gray
    Traceback (most recent call last):
        ...
    texel.exceptions.ValidationError: Image has no gray histogram (color mode is rgb)
    """

    def __init__(self, source: Union[np.ndarray, PixelBuffer]) -> None:
        image = as_array(source)
        validate_image(image)
        self._gray: Optional[Histogram] = None
        self._red: Optional[Histogram] = None
        self._green: Optional[Histogram] = None
        self._blue: Optional[Histogram] = None
        self._pixel_count = int(image.shape[0] * image.shape[1])

        if image.ndim == 2:
            self._color_mode = ColorMode.GRAYSCALE
            self._gray = channel_histogram(image)
        else:
            self._color_mode = ColorMode.RGB
            self._red = channel_histogram(image[..., 0])
            self._green = channel_histogram(image[..., 1])
            self._blue = channel_histogram(image[..., 2])

    def __repr__(self) -> str:
        return (
            f"ImageStatistics(color_mode={self._color_mode.value}, "
            f"pixel_count={self._pixel_count})"
        )

    def _require(self, histogram: Optional[Histogram], name: str) -> Histogram:
        if histogram is None:
            raise ValidationError(
                f"Image has no {name} histogram "
                f"(color mode is {self._color_mode.value})"
            )
        return histogram

    @property
    def color_mode(self) -> ColorMode:
        return self._color_mode

    @property
    def pixel_count(self) -> int:
        return self._pixel_count

    @property
    def gray(self) -> Histogram:
        return self._require(self._gray, 'gray')

    @property
    def red(self) -> Histogram:
        return self._require(self._red, 'red')

    @property
    def green(self) -> Histogram:
        return self._require(self._green, 'green')

    @property
    def blue(self) -> Histogram:
        return self._require(self._blue, 'blue')
