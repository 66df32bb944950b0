# -*- coding: utf-8 -*-
"""
Gabor Filter - Oriented Gabor kernel synthesis and convolution.

A 2D Gabor function is a sinusoidal carrier modulated by a rotated,
anisotropic Gaussian envelope. With rotated coordinates

    X =  x cos(theta) + y sin(theta)
    Y = -x sin(theta) + y cos(theta)

the complex response is

    exp(-(X^2 + gamma^2 Y^2) / (2 sigma^2)) * exp(i (2 pi X / lambda + phi))

where ``x`` runs along rows and ``y`` along columns. A rotated coordinate
that is exactly zero is replaced by 1 before evaluation, which keeps the
kernel center off the carrier's zero crossing.

``gabor_kernel_2d`` samples one of four variants (real part, imaginary
part, magnitude, squared magnitude) on an integer grid whose half-extents
follow the rotated projections of the envelope support, then normalizes
it to unit sum. ``GaborFilter`` convolves a grayscale image with that
kernel and rescales the signed response for display.

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
import math
from typing import Annotated, Any, Tuple, Union

# Third-party
import numpy as np
from scipy.ndimage import convolve

# texel internal
from texel.exceptions import ValidationError
from texel.image_processing._validation import validate_grayscale
from texel.image_processing.base import ImageTransform
from texel.image_processing.params import Desc, Options, Range
from texel.image_processing.versioning import processor_tags, processor_version
from texel.pixel_buffer import PixelBuffer, as_array
from texel.vocabulary import ProcessorCategory

logger = logging.getLogger(__name__)


GABOR_CONFIGS = ('real', 'imaginary', 'magnitude', 'squared_magnitude')


def gabor_function_1d(
    x: Union[float, np.ndarray],
    mean: float,
    amplitude: float,
    position: float,
    width: float,
    phase: float,
    frequency: float,
) -> Union[float, np.ndarray]:
    """1D Gabor function.

    ``(mean + amplitude * exp(-(x - position)^2 / (2 width)^2))
    * cos(2 pi frequency (x - position) + phase)``
    """
    shifted = np.asarray(x, dtype=np.float64) - position
    envelope = mean + amplitude * np.exp(-shifted ** 2 / (2.0 * width) ** 2)
    carrier = np.cos(2.0 * np.pi * frequency * shifted + phase)
    result = envelope * carrier
    return float(result) if result.ndim == 0 else result


def _rotated_coordinates(
    x: np.ndarray, y: np.ndarray, orientation: float,
) -> Tuple[np.ndarray, np.ndarray]:
    cos_t = math.cos(orientation)
    sin_t = math.sin(orientation)
    x_rot = x * cos_t + y * sin_t
    y_rot = -x * sin_t + y * cos_t
    x_rot = np.where(x_rot == 0, 1.0, x_rot)
    y_rot = np.where(y_rot == 0, 1.0, y_rot)
    return x_rot, y_rot


def gabor_function_2d(
    x: Union[int, np.ndarray],
    y: Union[int, np.ndarray],
    wavelength: float,
    orientation: float,
    phase: float,
    sigma: float,
    aspect_ratio: float,
) -> Union[complex, np.ndarray]:
    """Complex 2D Gabor function.

    Parameters
    ----------
    x, y : int or np.ndarray
        Row and column offsets from the kernel center.
    wavelength : float
        Carrier wavelength ``lambda`` in pixels.
    orientation : float
        Carrier orientation ``theta`` in radians.
    phase : float
        Phase offset ``phi`` in radians.
    sigma : float
        Gaussian envelope scale.
    aspect_ratio : float
        Spatial aspect ratio ``gamma`` of the envelope.

    Returns
    -------
    complex or np.ndarray
        Complex response, scalar for scalar inputs.
    """
    x_arr = np.asarray(x, dtype=np.float64)
    y_arr = np.asarray(y, dtype=np.float64)
    x_rot, y_rot = _rotated_coordinates(x_arr, y_arr, orientation)
    envelope = np.exp(
        -(x_rot ** 2 + aspect_ratio ** 2 * y_rot ** 2) / (2.0 * sigma ** 2)
    )
    carrier = np.exp(1j * (2.0 * np.pi * (x_rot / wavelength) + phase))
    result = envelope * carrier
    return complex(result) if result.ndim == 0 else result


def gabor_real_2d(x, y, wavelength, orientation, phase, sigma, aspect_ratio):
    """Real part (cosine carrier) of ``gabor_function_2d``."""
    return np.real(gabor_function_2d(
        x, y, wavelength, orientation, phase, sigma, aspect_ratio))


def gabor_imaginary_2d(x, y, wavelength, orientation, phase, sigma, aspect_ratio):
    """Imaginary part (sine carrier) of ``gabor_function_2d``."""
    return np.imag(gabor_function_2d(
        x, y, wavelength, orientation, phase, sigma, aspect_ratio))


def gabor_kernel_extent(
    size: int, orientation: float, sigma: float, aspect_ratio: float,
) -> Tuple[int, int]:
    """Half-extents ``(x_max, y_max)`` of a Gabor kernel.

    The envelope scale is ``sigma`` along the carrier and
    ``sigma / aspect_ratio`` across it; each half-extent is the larger of
    the two scaled projections onto that axis, at least 1.
    """
    sigma_x = sigma
    sigma_y = sigma / aspect_ratio
    cos_t = math.cos(orientation)
    sin_t = math.sin(orientation)
    x_max = math.ceil(max(1.0, abs(size * sigma_x * cos_t),
                          abs(size * sigma_y * sin_t)))
    y_max = math.ceil(max(1.0, abs(size * sigma_x * sin_t),
                          abs(size * sigma_y * cos_t)))
    return int(x_max), int(y_max)


def gabor_kernel_2d(
    size: int = 3,
    wavelength: float = 4.0,
    orientation: float = 0.6,
    phase: float = 1.0,
    sigma: float = 2.0,
    aspect_ratio: float = 0.3,
    config: str = 'imaginary',
) -> np.ndarray:
    """Synthesize a normalized 2D Gabor kernel.

    Parameters
    ----------
    size : int
        Nominal kernel size, scaling the envelope support. Default 3.
    wavelength, orientation, phase, sigma, aspect_ratio : float
        See ``gabor_function_2d``.
    config : str
        ``'real'``, ``'imaginary'`` (default), ``'magnitude'`` or
        ``'squared_magnitude'``.

    Returns
    -------
    np.ndarray
        float64 kernel of shape ``(2*x_max+1, 2*y_max+1)`` summing to 1.
        If the raw entries sum to exactly 0 the kernel is returned
        unnormalized and a warning is logged.

    Raises
    ------
    ValidationError
        If ``config`` is unknown or a scale parameter is not positive.
    """
    if config not in GABOR_CONFIGS:
        raise ValidationError(
            f"Unknown config '{config}'. Must be one of {GABOR_CONFIGS}"
        )
    if size < 1:
        raise ValidationError(f"size must be >= 1, got {size}")
    for name, value in (('wavelength', wavelength), ('sigma', sigma),
                        ('aspect_ratio', aspect_ratio)):
        if value <= 0:
            raise ValidationError(f"{name} must be > 0, got {value}")

    x_max, y_max = gabor_kernel_extent(size, orientation, sigma, aspect_ratio)
    x, y = np.meshgrid(
        np.arange(-x_max, x_max + 1),
        np.arange(-y_max, y_max + 1),
        indexing='ij',
    )
    response = gabor_function_2d(
        x, y, wavelength, orientation, phase, sigma, aspect_ratio)

    if config == 'real':
        kernel = np.real(response)
    elif config == 'imaginary':
        kernel = np.imag(response)
    elif config == 'magnitude':
        kernel = np.abs(response)
    else:
        kernel = np.abs(response) ** 2

    total = kernel.sum()
    if total == 0:
        logger.warning(
            "Gabor kernel %s sums to zero; returning it unnormalized",
            kernel.shape,
        )
        return kernel
    logger.debug("Gabor kernel %s, raw sum %.6g", kernel.shape, total)
    return kernel / total


def _round_half_up(values: np.ndarray) -> np.ndarray:
    return np.floor(values + 0.5)


def gabor_response(image: np.ndarray, kernel: np.ndarray) -> np.ndarray:
    """Convolve a grayscale image with a Gabor kernel.

    Neighbors outside the image contribute nothing. The response is
    rounded half-up to integers and left unbounded and signed.

    Returns
    -------
    np.ndarray
        int64 response, same shape as ``image``.
    """
    response = convolve(image.astype(np.float64), kernel,
                        mode='constant', cval=0.0)
    return _round_half_up(response).astype(np.int64)


def rescale_unsigned(response: np.ndarray) -> np.ndarray:
    """Linearly map ``[min, max]`` of the response to ``[0, 255]``.

    A constant response maps to 0.
    """
    low = response.min()
    high = response.max()
    if high == low:
        return np.zeros(response.shape, dtype=np.uint8)
    scaled = _round_half_up(255.0 * (response - low) / (high - low))
    return scaled.astype(np.uint8)


def rescale_signed(response: np.ndarray) -> np.ndarray:
    """Split the response into a red (positive) / blue (negative) image.

    Positive responses are scaled against the largest positive response
    into the red channel; negative responses against the most negative
    response into the blue channel.

    Returns
    -------
    np.ndarray
        ``uint8`` array of shape ``(rows, cols, 3)``.
    """
    rgb = np.zeros(response.shape + (3,), dtype=np.uint8)
    positive = response > 0
    negative = response < 0
    if positive.any():
        peak = response[positive].max()
        rgb[..., 0][positive] = _round_half_up(
            255.0 * response[positive] / peak)
    if negative.any():
        trough = response[negative].min()
        rgb[..., 2][negative] = _round_half_up(
            255.0 * response[negative] / trough)
    return rgb


@processor_version('1.0.0')
@processor_tags(category=ProcessorCategory.FREQUENCY)
class GaborFilter(ImageTransform):
    """Gabor filter for oriented texture and edge response.

    Builds a kernel with ``gabor_kernel_2d`` on every call, convolves the
    grayscale input with it, and rescales the response to 8 bits.

    Parameters
    ----------
    size : int
        Nominal kernel size. Default 3.
    wavelength : float
        Carrier wavelength ``lambda``. Default 4.0.
    orientation : float
        Orientation ``theta`` in radians. Default 0.6.
    phase : float
        Phase offset ``phi`` in radians. Default 1.0.
    sigma : float
        Gaussian envelope scale. Default 2.0.
    aspect_ratio : float
        Envelope aspect ratio ``gamma``. Default 0.3.
    config : str
        Kernel variant. Default ``'imaginary'``.
    signed : bool
        If False (default) the output is grayscale, linearly rescaled
        from the response range. If True the output is RGB, with positive
        responses in red and negative responses in blue.

    Examples
    --------
    >>> from texel.image_processing.filters import GaborFilter
    >>> edges = GaborFilter(wavelength=6.0, orientation=0.0).apply(gray)
    >>> polarity = GaborFilter(signed=True).apply(gray)
    >>> polarity.shape[-1]
    3
    """

    size: Annotated[int, Range(min=1), Desc('Nominal kernel size')] = 3
    wavelength: Annotated[float, Range(min=1e-6), Desc('Carrier wavelength')] = 4.0
    orientation: Annotated[float, Desc('Orientation in radians')] = 0.6
    phase: Annotated[float, Desc('Phase offset in radians')] = 1.0
    sigma: Annotated[float, Range(min=1e-6), Desc('Gaussian envelope scale')] = 2.0
    aspect_ratio: Annotated[float, Range(min=1e-6), Desc('Envelope aspect ratio')] = 0.3
    config: Annotated[str, Options(*GABOR_CONFIGS), Desc('Kernel variant')] = 'imaginary'
    signed: Annotated[bool, Desc('Red/blue signed visualization')] = False

    def __init__(
        self,
        size: int = 3,
        wavelength: float = 4.0,
        orientation: float = 0.6,
        phase: float = 1.0,
        sigma: float = 2.0,
        aspect_ratio: float = 0.3,
        config: str = 'imaginary',
        signed: bool = False,
    ) -> None:
        config_lower = config.lower()
        if config_lower not in GABOR_CONFIGS:
            raise ValidationError(
                f"Unknown config '{config}'. Must be one of {GABOR_CONFIGS}"
            )
        self.size = size
        self.wavelength = wavelength
        self.orientation = orientation
        self.phase = phase
        self.sigma = sigma
        self.aspect_ratio = aspect_ratio
        self.config = config_lower
        self.signed = signed
        self._resolve_params({})

    def kernel(self, **kwargs: Any) -> np.ndarray:
        """Synthesize the kernel for the current (or overridden) parameters."""
        params = self._resolve_params(kwargs)
        return gabor_kernel_2d(
            size=params['size'],
            wavelength=params['wavelength'],
            orientation=params['orientation'],
            phase=params['phase'],
            sigma=params['sigma'],
            aspect_ratio=params['aspect_ratio'],
            config=params['config'],
        )

    def apply(
        self, source: Union[np.ndarray, PixelBuffer], **kwargs: Any
    ) -> np.ndarray:
        """Filter a grayscale image.

        Parameters
        ----------
        source : np.ndarray or PixelBuffer
            ``(rows, cols)`` grayscale image.

        Returns
        -------
        np.ndarray
            ``uint8`` image: ``(rows, cols)`` when unsigned,
            ``(rows, cols, 3)`` when signed.

        Raises
        ------
        ValidationError
            If ``source`` is not grayscale.
        """
        source = as_array(source)
        validate_grayscale(source, type(self).__name__)
        params = self._resolve_params(kwargs)

        response = gabor_response(source, self.kernel(**kwargs))
        if params['signed']:
            return rescale_signed(response)
        return rescale_unsigned(response)
