# -*- coding: utf-8 -*-
"""
Image Processing - Processor framework and neighborhood filters.

Modules
-------
base.py
    ``ImageProcessor``, ``ImageTransform``, ``ImageAnalyzer`` and
    ``ChannelwiseTransformMixin``.
params.py
    ``Range``, ``Options``, ``Desc`` markers for tunable parameters.
versioning.py
    ``@processor_version`` and ``@processor_tags`` decorators.
pipeline.py
    Sequential composition of ``ImageTransform`` steps.
filters/
    Morphology, generalized mean, and Gabor filters.

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

from texel.image_processing.base import (
    ChannelwiseTransformMixin,
    ImageAnalyzer,
    ImageProcessor,
    ImageTransform,
)
from texel.image_processing.params import Desc, Options, ParamSpec, Range
from texel.image_processing.pipeline import Pipeline
from texel.image_processing.versioning import processor_tags, processor_version
from texel.image_processing.filters import (
    Closing,
    Dilation,
    Erosion,
    GaborFilter,
    MaximumFilter,
    MeanFilter,
    MinimumFilter,
    Opening,
)

__all__ = [
    'ImageProcessor',
    'ImageTransform',
    'ImageAnalyzer',
    'ChannelwiseTransformMixin',
    'Range',
    'Options',
    'Desc',
    'ParamSpec',
    'Pipeline',
    'processor_version',
    'processor_tags',
    'Dilation',
    'Erosion',
    'Opening',
    'Closing',
    'MinimumFilter',
    'MaximumFilter',
    'MeanFilter',
    'GaborFilter',
]
