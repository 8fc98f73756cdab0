# -*- coding: utf-8 -*-
"""
Random Source - Explicit random number generators for reproducible fixtures.

All stochastic operations in regflow take an ``rng`` argument instead of
reading global numpy state. ``resolve_rng`` turns the accepted forms into a
``numpy.random.Generator``.

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
from typing import Optional, Union

# Third-party
import numpy as np

# regflow internal
from regflow.exceptions import ValidationError

RandomSource = Optional[Union[int, np.random.Generator]]


def resolve_rng(rng: RandomSource = None) -> np.random.Generator:
    """Return a ``numpy.random.Generator`` for *rng*.

    Parameters
    ----------
    rng : None, int, or numpy.random.Generator
        ``None`` gives a freshly OS-seeded generator, an ``int`` is used
        as a seed, and a ``Generator`` is returned unchanged (so state
        advances across calls that share it).

    Returns
    -------
    numpy.random.Generator

    Raises
    ------
    ValidationError
        If *rng* is none of the accepted types.
    """
    if rng is None:
        return np.random.default_rng()
    if isinstance(rng, np.random.Generator):
        return rng
    if isinstance(rng, (int, np.integer)) and not isinstance(rng, bool):
        if rng < 0:
            raise ValidationError(f"seed must be non-negative, got {rng}")
        return np.random.default_rng(int(rng))
    raise ValidationError(
        f"rng must be None, an int seed, or numpy.random.Generator, "
        f"got {type(rng).__name__}"
    )
