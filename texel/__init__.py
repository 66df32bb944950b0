# -*- coding: utf-8 -*-
"""
texel - Local-neighborhood image analysis toolkit.

Sliding-window algorithms over 8-bit grayscale and RGB rasters that
produce either a transformed image (structuring-element morphology,
generalized mean smoothing, Gabor response) or a numeric descriptor
(gray-level co-occurrence, Hu moments, shape ratios, histograms).

Dependencies
------------
numpy
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

__version__ = "0.1.0"

from texel.exceptions import (
    TexelError,
    ValidationError,
    ProcessorError,
)
from texel.vocabulary import (
    ColorMode,
    ProcessorCategory,
)
from texel.pixel_buffer import PixelBuffer

__all__ = [
    'TexelError',
    'ValidationError',
    'ProcessorError',
    'ColorMode',
    'ProcessorCategory',
    'PixelBuffer',
]
