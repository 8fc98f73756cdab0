# -*- coding: utf-8 -*-
"""
Shared Validation - Input checks reused by generators and image operations.

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

# Standard library
import math
from typing import Any, Sequence, Tuple

# Third-party
import numpy as np

# regflow internal
from regflow.exceptions import ValidationError


def _is_int(value: Any) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


def validate_positive_int(value: Any, name: str) -> int:
    """Validate that *value* is an integer >= 1.

    Parameters
    ----------
    value : Any
        Value to check.
    name : str
        Parameter name for error messages.

    Returns
    -------
    int
        *value* as a plain ``int``.

    Raises
    ------
    ValidationError
        If *value* is not an integer or is less than 1.
    """
    if not _is_int(value):
        raise ValidationError(
            f"{name} must be an integer, got {type(value).__name__}"
        )
    if value < 1:
        raise ValidationError(f"{name} must be >= 1, got {value}")
    return int(value)


def validate_size(size: Sequence[int]) -> Tuple[int, int]:
    """Validate a 2-D field size ``(rows, cols)``.

    Raises
    ------
    ValidationError
        If *size* is not a pair of positive integers.
    """
    try:
        rows, cols = size
    except (TypeError, ValueError):
        raise ValidationError(
            f"size must be a (rows, cols) pair, got {size!r}"
        ) from None
    return (validate_positive_int(rows, 'size[0]'),
            validate_positive_int(cols, 'size[1]'))


def validate_magnitude(value: Any, name: str = 'max_magnitude') -> float:
    """Validate a finite, non-negative displacement magnitude.

    Raises
    ------
    ValidationError
        If *value* is not a real number, is negative, or is not finite.
    """
    if isinstance(value, bool) or not isinstance(
            value, (int, float, np.integer, np.floating)):
        raise ValidationError(
            f"{name} must be a real number, got {type(value).__name__}"
        )
    value = float(value)
    if not math.isfinite(value):
        raise ValidationError(f"{name} must be finite, got {value}")
    if value < 0.0:
        raise ValidationError(f"{name} must be >= 0, got {value}")
    return value
