# -*- coding: utf-8 -*-
"""
Neighborhood Filters - Morphology, generalized mean, and Gabor filters.

Every filter is an ``ImageTransform``: ``apply`` reads an 8-bit image and
returns a new one, ``apply_in_place`` writes the result back into a
``PixelBuffer``. Channelwise filters process RGB images one channel at a
time.

Morphology
    ``Dilation``, ``Erosion`` -- weighted structuring-element max / min
    ``Opening``, ``Closing`` -- erosion/dilation compositions
    ``MinimumFilter``, ``MaximumFilter`` -- plain windowed min / max

Smoothing
    ``MeanFilter`` -- arithmetic, harmonic, contra-harmonic, geometric

Frequency
    ``GaborFilter`` -- oriented Gabor convolution

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

from texel.image_processing.filters.morphology import (
    Closing,
    Dilation,
    Erosion,
    MaximumFilter,
    MinimumFilter,
    Opening,
    make_structuring_element,
)
from texel.image_processing.filters.mean import (
    MEAN_METHODS,
    MeanFilter,
    generalized_mean,
)
from texel.image_processing.filters.gabor import (
    GABOR_CONFIGS,
    GaborFilter,
    gabor_function_1d,
    gabor_function_2d,
    gabor_imaginary_2d,
    gabor_kernel_2d,
    gabor_kernel_extent,
    gabor_real_2d,
    gabor_response,
    rescale_signed,
    rescale_unsigned,
)

__all__ = [
    'Dilation',
    'Erosion',
    'Opening',
    'Closing',
    'MinimumFilter',
    'MaximumFilter',
    'make_structuring_element',
    'MeanFilter',
    'MEAN_METHODS',
    'generalized_mean',
    'GaborFilter',
    'GABOR_CONFIGS',
    'gabor_function_1d',
    'gabor_function_2d',
    'gabor_real_2d',
    'gabor_imaginary_2d',
    'gabor_kernel_2d',
    'gabor_kernel_extent',
    'gabor_response',
    'rescale_unsigned',
    'rescale_signed',
]
