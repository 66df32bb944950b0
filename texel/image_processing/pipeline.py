# -*- coding: utf-8 -*-
"""
Pipeline - Sequential composition of image transforms.

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
from typing import Any, List, Sequence

# Third-party
import numpy as np

# texel internal
from texel.image_processing.base import ImageTransform

logger = logging.getLogger(__name__)


class Pipeline(ImageTransform):
    """Sequential chain of image transforms.

    Each step receives the output of the previous one. A pipeline is itself
    an ``ImageTransform``, so it can be nested or applied in place to a
    ``PixelBuffer``.

    Parameters
    ----------
    steps : Sequence[ImageTransform]
        Ordered transforms. Must contain at least one.

    Examples
    --------
    >>> from texel.image_processing.filters import Dilation, MeanFilter
    >>> pipe = Pipeline([Dilation(radius=1), MeanFilter(radius=2)])
    >>> result = pipe.apply(image)
    """

    __processor_version__ = '1.0.0'

    def __init__(self, steps: Sequence[ImageTransform]) -> None:
        if not steps:
            raise ValueError("Pipeline requires at least one transform")
        for i, step in enumerate(steps):
            if not isinstance(step, ImageTransform):
                raise TypeError(
                    f"Step {i} is not an ImageTransform: {type(step).__name__}"
                )
        self._steps: List[ImageTransform] = list(steps)

    @property
    def steps(self) -> List[ImageTransform]:
        """Shallow copy of the step list."""
        return list(self._steps)

    def __len__(self) -> int:
        return len(self._steps)

    def __repr__(self) -> str:
        return f"Pipeline({[type(s).__name__ for s in self._steps]})"

    def apply(self, source: np.ndarray, **kwargs: Any) -> np.ndarray:
        """Apply all transforms in sequence.

        Parameters
        ----------
        source : np.ndarray
            Input image array.
        **kwargs
            Forwarded to every step's ``apply()``.

        Returns
        -------
        np.ndarray
            Output of the final step.
        """
        n = len(self._steps)
        result = source
        for i, step in enumerate(self._steps):
            logger.debug("Pipeline step %d/%d: %s", i + 1, n,
                         type(step).__qualname__)
            result = step.apply(result, **kwargs)
        return result
