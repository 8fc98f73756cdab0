# -*- coding: utf-8 -*-
"""
regflow Exception Hierarchy - Domain-specific exceptions for fixture generation.

Lets callers catch regflow errors distinctly from Python built-in
exceptions. Every regflow exception subclasses both ``RegflowError`` and
the closest built-in exception, so generic ``ValueError`` /
``FileNotFoundError`` handlers keep working.

Author
------
regflow contributors

License
-------
MIT License
Copyright (c) 2026 regflow contributors
See LICENSE file for full text.

Created
-------
2026-10-17

Modified
--------
2026-10-17
"""


class RegflowError(Exception):
    """Base exception for all regflow errors."""


class ValidationError(RegflowError, ValueError):
    """Invalid input data, parameters, or configuration.

    Raised for zero-length direction vectors, odd chessboard sizes,
    malformed field sizes, negative magnitudes, unknown image or flow
    kinds, and malformed location tables.
    """


class DegenerateFieldError(RegflowError, ArithmeticError):
    """A generated field cannot be rescaled to the requested magnitude.

    Raised when the peak vector length of a raw field is zero or not
    finite, before any division takes place.
    """


class AssetNotFoundError(RegflowError, FileNotFoundError):
    """An image or table file does not exist at the given path."""
