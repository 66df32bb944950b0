# -*- coding: utf-8 -*-
"""
Validation Helpers - Shared image, radius, and kernel checks.

Every processor calls these helpers so that shape, radius and structuring
element constraints fail the same way everywhere.

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

# Third-party
import numpy as np

# texel internal
from texel.exceptions import ValidationError


def validate_image(image: np.ndarray) -> None:
    """Validate that *image* is a grayscale or RGB raster.

    Parameters
    ----------
    image : np.ndarray
        Array of shape ``(rows, cols)`` or ``(rows, cols, 3)``.

    Raises
    ------
    ValidationError
        If the shape is anything else, or the array is not real-valued.
    """
    if not isinstance(image, np.ndarray):
        raise ValidationError(
            f"Expected numpy array, got {type(image).__name__}"
        )
    if not (image.ndim == 2 or (image.ndim == 3 and image.shape[2] == 3)):
        raise ValidationError(
            f"Expected (rows, cols) or (rows, cols, 3) image, "
            f"got shape {image.shape}"
        )
    if not (np.issubdtype(image.dtype, np.integer)
            or np.issubdtype(image.dtype, np.floating)
            or image.dtype == np.bool_):
        raise ValidationError(
            f"Expected real-valued image, got dtype {image.dtype}"
        )


def validate_grayscale(image: np.ndarray, processor: str) -> None:
    """Validate that *image* is a 2D grayscale raster.

    Parameters
    ----------
    image : np.ndarray
        Candidate image.
    processor : str
        Processor name used in the error message.

    Raises
    ------
    ValidationError
        If *image* is not a valid ``(rows, cols)`` image.
    """
    validate_image(image)
    if image.ndim != 2:
        raise ValidationError(
            f"{processor} only works with grayscale images, "
            f"got shape {image.shape}"
        )


def validate_radius(radius: int, minimum: int = 1, name: str = 'radius') -> None:
    """Validate that *radius* is an integer no smaller than *minimum*.

    Raises
    ------
    ValidationError
        If ``radius`` is not an integer or is below ``minimum``.
    """
    if isinstance(radius, bool) or not isinstance(radius, (int, np.integer)):
        raise ValidationError(
            f"{name} must be an integer, got {type(radius).__name__}"
        )
    if radius < minimum:
        raise ValidationError(
            f"{name} must be >= {minimum}, got {radius}"
        )


def validate_structuring_element(kernel: np.ndarray) -> np.ndarray:
    """Validate a caller-supplied structuring element.

    Parameters
    ----------
    kernel : array_like
        Square matrix of odd side length >= 3.

    Returns
    -------
    np.ndarray
        The kernel as a 2D ``int64`` array.

    Raises
    ------
    ValidationError
        If the kernel is not a square, odd-sided matrix of side >= 3 with
        integer-valued entries.
    """
    kernel = np.asarray(kernel)
    if kernel.ndim != 2 or kernel.shape[0] != kernel.shape[1]:
        raise ValidationError(
            f"Structuring element must be a square matrix, "
            f"got shape {kernel.shape}"
        )
    side = kernel.shape[0]
    if side < 3:
        raise ValidationError(
            f"Structuring element side must be >= 3, got {side}"
        )
    if side % 2 == 0:
        raise ValidationError(
            f"Structuring element side must be odd, got {side}"
        )
    if not np.all(np.equal(np.mod(kernel, 1), 0)):
        raise ValidationError("Structuring element entries must be integers")
    return kernel.astype(np.int64)


def validate_gray_levels(image: np.ndarray, processor: str) -> np.ndarray:
    """Validate a grayscale raster and return it as integer gray levels.

    Parameters
    ----------
    image : np.ndarray
        ``(rows, cols)`` array with samples in ``[0, 255]``. Fractional
        samples are truncated.
    processor : str
        Processor name used in the error message.

    Returns
    -------
    np.ndarray
        ``int64`` copy of *image*.

    Raises
    ------
    ValidationError
        If *image* is not grayscale or a sample lies outside ``[0, 255]``.
    """
    validate_grayscale(image, processor)
    if image.size and (image.min() < 0 or image.max() > 255):
        raise ValidationError(
            f"{processor} expects gray levels in [0, 255], "
            f"got range [{image.min()}, {image.max()}]"
        )
    return image.astype(np.int64)
