# -*- coding: utf-8 -*-
"""
Vocabulary - Canonical enums for texel.

Controlled vocabularies shared by the pixel buffer and the processor
decorators: color modes and processor categories.

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

from enum import Enum


class ColorMode(Enum):
    """Sample layout of a pixel buffer.

    ``GRAYSCALE`` buffers are ``(rows, cols)``; ``RGB`` buffers are
    ``(rows, cols, 3)`` with red, green, blue in that order.
    """

    GRAYSCALE = "grayscale"
    RGB = "rgb"


class ProcessorCategory(Enum):
    """Processing categories for processor tagging."""

    FILTERS = "filters"
    MORPHOLOGY = "morphology"
    FREQUENCY = "frequency"
    TEXTURE = "texture"
