# -*- coding: utf-8 -*-
"""
Image Moments - Raw, central and normalized moments and Hu invariants.

All moments treat a 2D real-valued field ``f`` as a mass distribution over
``(i, j) = (row, col)``:

- raw: ``m_pq = sum(i^p * j^q * f[i, j])``
- central: ``mu_pq`` recentred on the centroid ``(m10 / m00, m01 / m00)``
- normalized central: ``eta_pq = mu_pq / mu00^gamma`` with
  ``gamma = (p + q) / 2 + 1``

The seven Hu invariants are polynomial combinations of the second- and
third-order ``eta_pq``. Invariants 1, 2, 3, 5 and 6 take the textbook form.
Invariants 4 and 7 use these variants:

- h4: ``(n30 + n12)^2 + (n12 + n03)^2``
- h7: ``(3 n21 - n03) a (a^2 - 3 b^2) + (n30 - 3 n12) b (3 a^2 - b^2)``
  with ``a = n30 + n12`` and ``b = n21 + n03``

All seven are unchanged by translation and by a half turn. Only the
textbook five are unchanged by quarter turns.

A field with ``m00 == 0`` has no centroid, so every central quantity raises
``ProcessorError`` for it.

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
from typing import Tuple

# Third-party
import numpy as np

# texel internal
from texel.exceptions import ProcessorError, ValidationError
from texel.pixel_buffer import as_array


def _as_field(field: np.ndarray) -> np.ndarray:
    field = as_array(field)
    if field.ndim != 2:
        raise ValidationError(
            f"Moments require a 2D field, got shape {field.shape}"
        )
    return field.astype(np.float64)


def _index_grids(shape: Tuple[int, int]) -> Tuple[np.ndarray, np.ndarray]:
    rows, cols = shape
    return np.meshgrid(np.arange(rows, dtype=np.float64),
                       np.arange(cols, dtype=np.float64),
                       indexing='ij')


def raw_moment(p: int, q: int, field: np.ndarray) -> float:
    """Raw moment ``m_pq`` of *field*.

    Parameters
    ----------
    p, q : int
        Non-negative row and column orders.
    field : np.ndarray
        2D real-valued field.

    Returns
    -------
    float
    """
    f = _as_field(field)
    i, j = _index_grids(f.shape)
    return float(np.sum(i ** p * j ** q * f))


def centroid(field: np.ndarray) -> Tuple[float, float]:
    """Intensity-weighted centroid ``(row, col)`` of *field*.

    Raises
    ------
    ProcessorError
        If the field's total mass ``m00`` is zero.
    """
    f = _as_field(field)
    m00 = f.sum()
    if m00 == 0:
        raise ProcessorError(
            "Field has zero total mass (m00 == 0); centroid is undefined"
        )
    i, j = _index_grids(f.shape)
    return float(np.sum(i * f) / m00), float(np.sum(j * f) / m00)


def central_moment(p: int, q: int, field: np.ndarray) -> float:
    """Central moment ``mu_pq`` of *field* about its centroid.

    Raises
    ------
    ProcessorError
        If ``m00 == 0``.
    """
    f = _as_field(field)
    ci, cj = centroid(f)
    i, j = _index_grids(f.shape)
    return float(np.sum((i - ci) ** p * (j - cj) ** q * f))


def normalized_central_moment(p: int, q: int, field: np.ndarray) -> float:
    """Scale-normalized central moment ``eta_pq = mu_pq / mu00^gamma``.

    Raises
    ------
    ProcessorError
        If ``m00 == 0``.
    """
    f = _as_field(field)
    gamma = (p + q) / 2.0 + 1.0
    mu00 = central_moment(0, 0, f)
    return central_moment(p, q, f) / mu00 ** gamma


def variance_x(field: np.ndarray) -> float:
    """Row-axis variance ``mu20 / mu00``."""
    f = _as_field(field)
    return central_moment(2, 0, f) / central_moment(0, 0, f)


def variance_y(field: np.ndarray) -> float:
    """Column-axis variance ``mu02 / mu00``."""
    f = _as_field(field)
    return central_moment(0, 2, f) / central_moment(0, 0, f)


def covariance_xy(field: np.ndarray) -> float:
    """Row/column covariance ``mu11 / mu00``."""
    f = _as_field(field)
    return central_moment(1, 1, f) / central_moment(0, 0, f)


def _hu_from_eta(eta: dict) -> Tuple[float, ...]:
    n20, n02, n11 = eta[2, 0], eta[0, 2], eta[1, 1]
    n30, n03, n21, n12 = eta[3, 0], eta[0, 3], eta[2, 1], eta[1, 2]

    a = n30 + n12
    b = n21 + n03

    h1 = n20 + n02
    h2 = (n20 - n02) ** 2 + 4 * n11 ** 2
    h3 = (n30 - 3 * n12) ** 2 + (3 * n21 - n03) ** 2
    h4 = a ** 2 + (n12 + n03) ** 2
    h5 = ((n30 - 3 * n12) * a * (a ** 2 - 3 * b ** 2)
          + (3 * n21 - n03) * b * (3 * a ** 2 - b ** 2))
    h6 = (n20 - n02) * (a ** 2 - b ** 2) + 4 * n11 * a * b
    h7 = ((3 * n21 - n03) * a * (a ** 2 - 3 * b ** 2)
          + (n30 - 3 * n12) * b * (3 * a ** 2 - b ** 2))
    return h1, h2, h3, h4, h5, h6, h7


def hu_moments(field: np.ndarray) -> np.ndarray:
    """All seven Hu invariants of *field*.

    Parameters
    ----------
    field : np.ndarray
        2D real-valued field with non-zero total mass.

    Returns
    -------
    np.ndarray
        ``(7,)`` float64 array ``[h1, ..., h7]``.

    Raises
    ------
    ProcessorError
        If ``m00 == 0``.
    """
    f = _as_field(field)
    orders = ((2, 0), (0, 2), (1, 1), (3, 0), (0, 3), (2, 1), (1, 2))
    eta = {pq: normalized_central_moment(pq[0], pq[1], f) for pq in orders}
    return np.array(_hu_from_eta(eta), dtype=np.float64)


def hu_moment(field: np.ndarray, n: int) -> float:
    """The ``n``-th Hu invariant, ``n`` in 1..7.

    Raises
    ------
    ValidationError
        If ``n`` is outside 1..7.
    ProcessorError
        If ``m00 == 0``.
    """
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)) or not 1 <= n <= 7:
        raise ValidationError(f"Hu invariant index must be in 1..7, got {n!r}")
    return float(hu_moments(field)[n - 1])
