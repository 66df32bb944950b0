# -*- coding: utf-8 -*-
"""
Texel Exception Hierarchy - Domain-specific exceptions for texel operations.

Lets callers catch texel failures distinctly from Python built-in
exceptions. Every texel exception subclasses both ``TexelError`` and the
matching built-in so existing ``except ValueError`` handlers keep working.

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


class TexelError(Exception):
    """Base exception for all texel errors."""


class ValidationError(TexelError, ValueError):
    """Invalid input data, parameters, or configuration.

    Raised for shape mismatches, out-of-range parameters, unknown method
    names, color modes a processor does not support, and other
    precondition violations.
    """


class ProcessorError(TexelError, RuntimeError):
    """Numerical failure during a computation.

    Raised when the input is well formed but the requested quantity is
    undefined for it, e.g. central moments of an all-zero field.
    """
