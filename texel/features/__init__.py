# -*- coding: utf-8 -*-
"""
Features - Numeric descriptors derived from images.

Modules
-------
cooccurrence.py
    Gray-level co-occurrence matrix and Haralick descriptors.
moments.py
    Raw, central and normalized moments and the seven Hu invariants.
shape.py
    Area, contour, Feret diameter and closed-form shape ratios.
histogram.py
    Immutable ``Histogram`` and its summary statistics.
statistics.py
    Per-channel histograms of an image.
lbp.py
    Local binary pattern code histogram.

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

from texel.features.histogram import (
    Histogram,
    histogram_entropy,
    histogram_mean,
    histogram_median,
    histogram_mode,
    histogram_range,
    histogram_std_dev,
)
from texel.features.cooccurrence import (
    COOCCURRENCE_DEGREES,
    CooccurrenceMatrix,
    GrayLevelCooccurrenceMatrix,
)
from texel.features.moments import (
    central_moment,
    centroid,
    covariance_xy,
    hu_moment,
    hu_moments,
    normalized_central_moment,
    raw_moment,
    variance_x,
    variance_y,
)
from texel.features.shape import (
    area,
    area_equivalent_diameter,
    circularity,
    compactness,
    contour_points,
    feret_diameter,
    feret_points,
    irregularity,
    perimeter,
    perimeter_equivalent_diameter,
    roundness,
    shape_factor,
    thinness_ratio,
)
from texel.features.statistics import ImageStatistics, channel_histogram
from texel.features.lbp import LocalBinaryPattern, lbp_codes

__all__ = [
    'Histogram',
    'histogram_mean',
    'histogram_std_dev',
    'histogram_median',
    'histogram_mode',
    'histogram_entropy',
    'histogram_range',
    'COOCCURRENCE_DEGREES',
    'CooccurrenceMatrix',
    'GrayLevelCooccurrenceMatrix',
    'raw_moment',
    'centroid',
    'central_moment',
    'normalized_central_moment',
    'variance_x',
    'variance_y',
    'covariance_xy',
    'hu_moment',
    'hu_moments',
    'area',
    'contour_points',
    'perimeter',
    'feret_points',
    'feret_diameter',
    'area_equivalent_diameter',
    'perimeter_equivalent_diameter',
    'circularity',
    'thinness_ratio',
    'irregularity',
    'shape_factor',
    'compactness',
    'roundness',
    'ImageStatistics',
    'channel_histogram',
    'LocalBinaryPattern',
    'lbp_codes',
]
