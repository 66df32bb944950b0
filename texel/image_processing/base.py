# -*- coding: utf-8 -*-
"""
Image Processing Base Classes - Abstract interfaces for image processors.

Defines ``ImageProcessor``, the common base for every processor, and its
two families: ``ImageTransform`` (image in, image out) and
``ImageAnalyzer`` (image in, numeric descriptor out). ``ImageProcessor``
checks that concrete subclasses declare a version and collects
``typing.Annotated`` tunable parameters so that ``apply``/``analyze`` can
accept validated runtime overrides through ``**kwargs``.

Transforms are pure: ``apply`` never writes to its input and returns a new
array. ``apply_in_place`` is the one entry point that mutates a caller's
``PixelBuffer``, and it does so only after the result is complete.

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
import warnings
from abc import ABC, abstractmethod
from typing import Any, Dict, Tuple, Union

# Third-party
import numpy as np

# texel internal
from texel.image_processing._validation import validate_image
from texel.image_processing.params import ParamSpec, collect_param_specs
from texel.pixel_buffer import PixelBuffer, as_array

logger = logging.getLogger(__name__)


class ImageProcessor(ABC):
    """
    Common base class for all image processors.

    **Version checking**: a concrete subclass without
    ``@processor_version('x.y.z')`` triggers a ``UserWarning`` at first
    instantiation. The check runs in ``__new__`` so that class decorators
    have already been applied.

    **Tunable parameters**: subclasses declare parameters as ``Annotated``
    class-body fields carrying ``Range``/``Options``/``Desc`` markers.
    ``__init_subclass__`` collects them into ``__param_specs__``;
    ``_resolve_params(kwargs)`` merges instance values with runtime
    overrides and validates every value.
    """

    _version_warned_classes: set = set()

    __param_specs__: Tuple[ParamSpec, ...] = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls.__param_specs__ = collect_param_specs(cls)

    def __new__(cls, *args: Any, **kwargs: Any) -> 'ImageProcessor':
        if cls not in ImageProcessor._version_warned_classes:
            ImageProcessor._version_warned_classes.add(cls)
            if (
                not getattr(cls, '__processor_version__', None)
                and not getattr(cls, '__abstractmethods__', None)
            ):
                warnings.warn(
                    f"{cls.__qualname__} does not declare a processor version. "
                    f"Use @processor_version('x.y.z') to declare one.",
                    UserWarning,
                    stacklevel=2,
                )
        logger.debug("Instantiating %s", cls.__qualname__)
        return super().__new__(cls)

    def _resolve_params(self, kwargs: Dict[str, Any]) -> Dict[str, Any]:
        """Merge instance defaults with runtime *kwargs* overrides.

        Parameters
        ----------
        kwargs : Dict[str, Any]
            Runtime keyword arguments. Keys that are not declared
            parameters are ignored.

        Returns
        -------
        Dict[str, Any]
            ``{param_name: resolved_value}`` for every declared param.

        Raises
        ------
        TypeError
            If a value has the wrong type.
        ValueError
            If a value violates range or choices constraints.
        """
        resolved: Dict[str, Any] = {}
        for spec in type(self).__param_specs__:
            value = kwargs.get(spec.name, getattr(self, spec.name))
            spec.validate(value)
            resolved[spec.name] = value
        return resolved

    def __repr__(self) -> str:
        params = ', '.join(
            f"{spec.name}={getattr(self, spec.name)!r}"
            for spec in type(self).__param_specs__
        )
        return f"{type(self).__name__}({params})"


class ImageTransform(ImageProcessor):
    """
    Abstract base class for image-to-image transforms.

    Subclasses implement ``apply``, which reads a ``(rows, cols)`` or
    ``(rows, cols, 3)`` array and returns a new ``uint8`` array.
    """

    @abstractmethod
    def apply(self, source: np.ndarray, **kwargs: Any) -> np.ndarray:
        """
        Apply the transform to a source image array.

        Parameters
        ----------
        source : np.ndarray
            Input image, ``(rows, cols)`` or ``(rows, cols, 3)``.

        Returns
        -------
        np.ndarray
            Transformed image. The input is left untouched.
        """
        ...

    def apply_in_place(self, buffer: PixelBuffer, **kwargs: Any) -> None:
        """Transform *buffer* and write the result back into it.

        Parameters
        ----------
        buffer : PixelBuffer
            Caller-owned buffer. Its contents (and, for transforms that
            change the color mode, its mode) are replaced.
        **kwargs
            Runtime parameter overrides forwarded to ``apply``.
        """
        logger.debug("%s writing into %r", type(self).__qualname__, buffer)
        buffer.replace(self.apply(buffer.data, **kwargs))


class ChannelwiseTransformMixin:
    """Mixin that applies a 2D transform to each color channel.

    ``apply`` accepts ``(rows, cols)`` arrays directly and
    ``(rows, cols, 3)`` arrays by calling ``_apply_2d`` on every channel
    and stacking the results along the last axis. ``PixelBuffer`` inputs
    are unwrapped.

    Usage
    -----
    ::

        class MyFilter(ChannelwiseTransformMixin, ImageTransform):
            def _apply_2d(self, source, **kwargs):
                ...
    """

    def apply(
        self, source: Union[np.ndarray, PixelBuffer], **kwargs: Any
    ) -> np.ndarray:
        """Apply the transform to a grayscale or RGB image.

        Parameters
        ----------
        source : np.ndarray or PixelBuffer
            ``(rows, cols)`` or ``(rows, cols, 3)`` image.

        Returns
        -------
        np.ndarray
            Transformed ``uint8`` image with the same shape as the input.
        """
        source = as_array(source)
        validate_image(source)
        if source.ndim == 3:
            return np.stack(
                [self._apply_2d(source[..., c], **kwargs)
                 for c in range(source.shape[2])],
                axis=-1,
            )
        return self._apply_2d(source, **kwargs)

    @abstractmethod
    def _apply_2d(self, source: np.ndarray, **kwargs: Any) -> np.ndarray:
        """Apply the transform to a single 2D channel."""
        ...


class ImageAnalyzer(ImageProcessor):
    """
    Abstract base class for processors that derive a descriptor.

    Subclasses implement ``analyze``, which reads an image and returns a
    new numeric artifact (matrix, histogram, statistics object). Analyzers
    never modify their input.
    """

    @abstractmethod
    def analyze(
        self, source: Union[np.ndarray, PixelBuffer], **kwargs: Any
    ) -> Any:
        """
        Derive a descriptor from a source image.

        Parameters
        ----------
        source : np.ndarray or PixelBuffer
            Input image.

        Returns
        -------
        Any
            Processor-specific descriptor.
        """
        ...
