# -*- coding: utf-8 -*-
"""
Shape Features - Closed-form descriptors of a binary foreground region.

Foreground is every pixel equal to 255. Area and contour are measured from
an image; the remaining descriptors are formulas over area, perimeter and
Feret diameter so they can also be fed values measured elsewhere.

Contour points are ``(row, col)`` pairs of foreground pixels that touch
the background, or the image edge, through a 4-connected neighbor.

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
import math
from typing import Tuple

# Third-party
import numpy as np
from scipy.ndimage import binary_erosion, generate_binary_structure
from scipy.spatial.distance import cdist

# texel internal
from texel.exceptions import ValidationError
from texel.image_processing._validation import validate_grayscale
from texel.pixel_buffer import as_array

FOREGROUND = 255


def _foreground(image: np.ndarray) -> np.ndarray:
    image = as_array(image)
    validate_grayscale(image, 'Shape features')
    return image == FOREGROUND


def _as_points(points: np.ndarray) -> np.ndarray:
    points = np.asarray(points, dtype=np.float64)
    if points.size == 0:
        return points.reshape(0, 2)
    if points.ndim != 2 or points.shape[1] != 2:
        raise ValidationError(
            f"Expected (n, 2) point array, got shape {points.shape}"
        )
    return points


def _require_positive(name: str, value: float) -> None:
    if value <= 0:
        raise ValidationError(f"{name} must be > 0, got {value}")


def area(image: np.ndarray) -> int:
    """Number of foreground (255) pixels."""
    return int(np.count_nonzero(_foreground(image)))


def contour_points(image: np.ndarray) -> np.ndarray:
    """Boundary pixels of the foreground.

    Returns
    -------
    np.ndarray
        ``(n, 2)`` int64 array of ``(row, col)`` coordinates in raster
        order.
    """
    mask = _foreground(image)
    cross = generate_binary_structure(2, 1)
    interior = binary_erosion(mask, structure=cross, border_value=0)
    return np.argwhere(mask & ~interior).astype(np.int64)


def perimeter(image: np.ndarray) -> int:
    """Number of contour pixels."""
    return int(contour_points(image).shape[0])


def feret_points(points: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """The pair of points that realizes the Feret diameter.

    Pairs are scanned in order; the first strictly larger distance wins.

    Parameters
    ----------
    points : array_like
        ``(n, 2)`` coordinates, typically from ``contour_points``.

    Returns
    -------
    Tuple[np.ndarray, np.ndarray]
        The two end points. Both equal the first point when all points
        coincide.

    Raises
    ------
    ValidationError
        If *points* is empty.
    """
    pts = _as_points(points)
    if pts.shape[0] == 0:
        raise ValidationError("Feret points require at least one point")
    distances = cdist(pts, pts)
    first, second = np.unravel_index(np.argmax(distances), distances.shape)
    return pts[first], pts[second]


def feret_diameter(points: np.ndarray) -> float:
    """Maximum pairwise Euclidean distance; 0 for fewer than two points."""
    pts = _as_points(points)
    if pts.shape[0] < 2:
        return 0.0
    return float(cdist(pts, pts).max())


def area_equivalent_diameter(area: float) -> float:
    """Diameter of the circle with the same area, ``sqrt(4 * A / pi)``."""
    if area < 0:
        raise ValidationError(f"area must be >= 0, got {area}")
    return math.sqrt(4.0 / math.pi * area)


def perimeter_equivalent_diameter(area: float) -> float:
    """``A / pi``."""
    return area / math.pi


def circularity(area: float, perimeter: float) -> float:
    """``4 * pi * A / P^2``; 1 for a perfect disk."""
    _require_positive('perimeter', perimeter)
    return 4.0 * math.pi * area / (perimeter * perimeter)


def thinness_ratio(area: float, perimeter: float) -> float:
    """``4 * pi * (A / P)``."""
    _require_positive('perimeter', perimeter)
    return 4.0 * math.pi * (area / perimeter)


def irregularity(thinness_ratio: float) -> float:
    """Reciprocal of the thinness ratio."""
    _require_positive('thinness_ratio', thinness_ratio)
    return 1.0 / thinness_ratio


def shape_factor(area: float, perimeter: float) -> float:
    """``P^2 / A``."""
    _require_positive('area', area)
    return perimeter * perimeter / area


def compactness(area: float, feret_diameter: float) -> float:
    """Area-equivalent diameter over Feret diameter."""
    _require_positive('feret_diameter', feret_diameter)
    return area_equivalent_diameter(area) / feret_diameter


def roundness(area: float, feret_diameter: float) -> float:
    """``4 * A / (pi * F^2)``."""
    _require_positive('feret_diameter', feret_diameter)
    return 4.0 * area / (math.pi * feret_diameter * feret_diameter)
