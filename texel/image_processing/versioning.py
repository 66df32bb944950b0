# -*- coding: utf-8 -*-
"""
Processor Versioning - Version and capability-tag decorators.

``@processor_version`` stamps a semantic version string on any processor
class; ``@processor_tags`` stamps its category and a short description so
that callers can discover processors by capability.

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
from typing import Optional, Type, TypeVar
import importlib.metadata

# texel internal
from texel.vocabulary import ProcessorCategory

T = TypeVar('T')


def processor_version(version: Optional[str] = None):
    """Class decorator that stamps a processor version.

    Sets ``__processor_version__`` on the class. When *version* is omitted
    the installed ``texel`` distribution version is used.

    Parameters
    ----------
    version : str, optional
        Semantic version string (e.g., ``'1.0.0'``).

    Returns
    -------
    Callable
        Class decorator.

    Examples
    --------
    >>> @processor_version('1.0.0')
    ... class Identity(ImageTransform):
    ...     def apply(self, source, **kwargs):
    ...         return source
    >>> Identity.__processor_version__
    '1.0.0'
    """
    def decorator(cls: Type[T]) -> Type[T]:
        if version:
            cls.__processor_version__ = version
        else:
            try:
                cls.__processor_version__ = importlib.metadata.version('texel')
            except importlib.metadata.PackageNotFoundError:
                cls.__processor_version__ = "unknown"
        return cls
    return decorator


def processor_tags(
    category: Optional[ProcessorCategory] = None,
    description: Optional[str] = None,
):
    """Class decorator for processor capability metadata.

    Stamps ``__processor_tags__`` with the category and description.

    Parameters
    ----------
    category : ProcessorCategory, optional
        Processing category.
    description : str, optional
        Short human-readable description.

    Raises
    ------
    TypeError
        If *category* is not a ``ProcessorCategory`` member.
    """
    if category is not None and not isinstance(category, ProcessorCategory):
        raise TypeError(
            f"category must be a ProcessorCategory member, got {category!r}"
        )

    def decorator(cls: Type[T]) -> Type[T]:
        cls.__processor_tags__ = {
            'category': category,
            'description': description,
        }
        return cls
    return decorator
