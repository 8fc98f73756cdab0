# -*- coding: utf-8 -*-
"""
Quadratic Flow - Smooth analytic flow from a random complex polynomial.

The field is ``f(z) = a + b*z + c*z**2`` evaluated on the grid
``z = x + i*y`` with ``x`` running over ``[0, 1]`` across columns and ``y``
over ``[0, 1]`` down the rows. ``a``, ``b`` and ``c`` are standard normal
draws. Being holomorphic, the field is smooth and free of singularities
on the unit square.

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
import logging
from typing import Sequence, Tuple

# Third-party
import numpy as np

# regflow internal
from regflow.flow.base import FlowGenerator, normalize_peak_magnitude
from regflow.rng import RandomSource, resolve_rng
from regflow._validation import validate_magnitude

logger = logging.getLogger(__name__)


def complex_unit_grid(shape: Tuple[int, int]) -> np.ndarray:
    """Complex coordinates ``x + i*y`` spanning ``[0, 1]`` on both axes.

    Parameters
    ----------
    shape : Tuple[int, int]
        ``(rows, cols)``.

    Returns
    -------
    np.ndarray
        ``complex128`` array of *shape*; ``x`` varies along columns and
        ``y`` along rows.
    """
    rows, cols = shape
    x = np.linspace(0.0, 1.0, cols)
    y = np.linspace(0.0, 1.0, rows)
    return x[np.newaxis, :] + 1j * y[:, np.newaxis]


class QuadraticFlowGenerator(FlowGenerator):
    """Random quadratic polynomial flow.

    Parameters
    ----------
    max_magnitude : float
        Peak displacement in pixels. Default ``10``.

    Raises
    ------
    ValidationError
        If *max_magnitude* is negative or not finite.
    DegenerateFieldError
        From ``generate`` if all three coefficients come out zero.
    """

    def __init__(self, max_magnitude: float = 10) -> None:
        self.max_magnitude = validate_magnitude(max_magnitude)

    def __repr__(self) -> str:
        return f"QuadraticFlowGenerator(max_magnitude={self.max_magnitude!r})"

    def _generate(
        self,
        shape: Tuple[int, int],
        rng: RandomSource,
    ) -> np.ndarray:
        gen = resolve_rng(rng)
        a, b, c = gen.standard_normal(3)
        logger.debug("Quadratic coefficients a=%.4f b=%.4f c=%.4f", a, b, c)

        z = complex_unit_grid(shape)
        raw = a + b * z + c * z ** 2
        return normalize_peak_magnitude(raw, self.max_magnitude)


def generate_quadratic_flow(
    size: Sequence[int] = (200, 200),
    max_magnitude: float = 10,
    rng: RandomSource = None,
) -> np.ndarray:
    """Generate a quadratic flow. See ``QuadraticFlowGenerator``."""
    return QuadraticFlowGenerator(max_magnitude).generate(size, rng)
