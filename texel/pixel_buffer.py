# -*- coding: utf-8 -*-
"""
Pixel Buffer - Mutable 8-bit grayscale or RGB raster.

``PixelBuffer`` is the container every in-place processor writes through.
It owns a ``uint8`` numpy array of shape ``(rows, cols)`` (grayscale) or
``(rows, cols, 3)`` (RGB), exposes per-pixel accessors, and supports whole
buffer replacement. Rows index the first axis and columns the second, so
``get_gray(row, col)`` reads ``data[row, col]``.

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
from typing import Union

# Third-party
import numpy as np

# texel internal
from texel.exceptions import ValidationError
from texel.vocabulary import ColorMode


def _as_pixels(data: np.ndarray) -> np.ndarray:
    """Validate *data* and return a ``uint8`` copy of it."""
    data = np.asarray(data)
    if not (data.ndim == 2 or (data.ndim == 3 and data.shape[2] == 3)):
        raise ValidationError(
            f"Expected (rows, cols) or (rows, cols, 3) array, "
            f"got shape {data.shape}"
        )
    if data.size and (data.min() < 0 or data.max() > 255):
        raise ValidationError(
            f"Pixel values must lie in [0, 255], "
            f"got range [{data.min()}, {data.max()}]"
        )
    return data.astype(np.uint8, copy=True)


class PixelBuffer:
    """8-bit raster with a grayscale or RGB color mode.

    Parameters
    ----------
    data : np.ndarray or PixelBuffer
        Source samples. Always deep-copied.

    Raises
    ------
    ValidationError
        If the shape is neither ``(rows, cols)`` nor ``(rows, cols, 3)``
        or a value falls outside ``[0, 255]``.

    Examples
    --------
    >>> buf = PixelBuffer(np.zeros((4, 6), dtype=np.uint8))
    >>> buf.width, buf.height, buf.color_mode
    (6, 4, <ColorMode.GRAYSCALE: 'grayscale'>)
    >>> buf.set_gray(1, 2, 200)
    >>> buf.get_gray(1, 2)
    200
    """

    def __init__(self, data: Union[np.ndarray, 'PixelBuffer']) -> None:
        if isinstance(data, PixelBuffer):
            data = data.data
        self._data = _as_pixels(data)

    def __repr__(self) -> str:
        return (
            f"PixelBuffer(width={self.width}, height={self.height}, "
            f"color_mode={self.color_mode.value})"
        )

    @property
    def data(self) -> np.ndarray:
        """Underlying ``uint8`` array (not a copy)."""
        return self._data

    @property
    def width(self) -> int:
        return self._data.shape[1]

    @property
    def height(self) -> int:
        return self._data.shape[0]

    @property
    def color_mode(self) -> ColorMode:
        if self._data.ndim == 2:
            return ColorMode.GRAYSCALE
        return ColorMode.RGB

    @property
    def is_grayscale(self) -> bool:
        return self.color_mode is ColorMode.GRAYSCALE

    @property
    def is_rgb(self) -> bool:
        return self.color_mode is ColorMode.RGB

    def copy(self) -> 'PixelBuffer':
        """Return a deep copy of this buffer."""
        return PixelBuffer(self)

    def replace(self, data: np.ndarray) -> None:
        """Replace the buffer contents in place.

        The color mode may change (e.g. a grayscale buffer becoming RGB),
        but the number of rows and columns may not.

        Raises
        ------
        ValidationError
            If *data* has a different ``(rows, cols)`` extent or is not a
            valid pixel array.
        """
        pixels = _as_pixels(data)
        if pixels.shape[:2] != self._data.shape[:2]:
            raise ValidationError(
                f"Replacement extent {pixels.shape[:2]} does not match "
                f"buffer extent {self._data.shape[:2]}"
            )
        self._data = pixels

    # -- accessors --------------------------------------------------------

    def _require(self, mode: ColorMode) -> None:
        if self.color_mode is not mode:
            raise ValidationError(
                f"Operation requires a {mode.value} buffer, "
                f"buffer is {self.color_mode.value}"
            )

    def get_gray(self, row: int, col: int) -> int:
        self._require(ColorMode.GRAYSCALE)
        return int(self._data[row, col])

    def get_red(self, row: int, col: int) -> int:
        self._require(ColorMode.RGB)
        return int(self._data[row, col, 0])

    def get_green(self, row: int, col: int) -> int:
        self._require(ColorMode.RGB)
        return int(self._data[row, col, 1])

    def get_blue(self, row: int, col: int) -> int:
        self._require(ColorMode.RGB)
        return int(self._data[row, col, 2])

    def get_rgb(self, row: int, col: int) -> tuple:
        self._require(ColorMode.RGB)
        return tuple(int(v) for v in self._data[row, col])

    def set_gray(self, row: int, col: int, value: int) -> None:
        self._require(ColorMode.GRAYSCALE)
        self._data[row, col] = _clamp(value)

    def set_red(self, row: int, col: int, value: int) -> None:
        self._require(ColorMode.RGB)
        self._data[row, col, 0] = _clamp(value)

    def set_green(self, row: int, col: int, value: int) -> None:
        self._require(ColorMode.RGB)
        self._data[row, col, 1] = _clamp(value)

    def set_blue(self, row: int, col: int, value: int) -> None:
        self._require(ColorMode.RGB)
        self._data[row, col, 2] = _clamp(value)

    def set_rgb(self, row: int, col: int, red: int, green: int, blue: int) -> None:
        self._require(ColorMode.RGB)
        self._data[row, col] = (_clamp(red), _clamp(green), _clamp(blue))


def _clamp(value: int) -> int:
    return min(max(int(value), 0), 255)


def as_array(source: Union[np.ndarray, PixelBuffer]) -> np.ndarray:
    """Return the sample array behind *source* without copying."""
    if isinstance(source, PixelBuffer):
        return source.data
    return np.asarray(source)
