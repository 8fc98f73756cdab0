# -*- coding: utf-8 -*-
"""
Uniform Flow - Constant displacement field scaled to a target magnitude.

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
import cmath
import numbers
from typing import Optional, Sequence, Tuple

# Third-party
import numpy as np

# regflow internal
from regflow.exceptions import ValidationError
from regflow.flow.base import FlowGenerator, vector_length
from regflow.rng import RandomSource
from regflow._validation import validate_magnitude


class UniformFlowGenerator(FlowGenerator):
    """Flow where every pixel is displaced by the same vector.

    Parameters
    ----------
    direction : complex
        Displacement direction, ``real`` horizontal and ``imag``
        vertical. Default ``1 + 1j``.
    max_magnitude : float, optional
        Length of every vector in the output. Defaults to
        ``vector_length(direction)``, i.e. *direction* is used unscaled.

    Raises
    ------
    ValidationError
        If *direction* is zero or not finite, or *max_magnitude* is
        negative or not finite.

    Examples
    --------
    >>> flow = UniformFlowGenerator(1 + 0j, 5).generate((4, 6))
    >>> bool(np.all(flow == 5 + 0j))
    True
    """

    def __init__(
        self,
        direction: complex = 1 + 1j,
        max_magnitude: Optional[float] = None,
    ) -> None:
        if isinstance(direction, bool) or not isinstance(
                direction, numbers.Number):
            raise ValidationError(
                f"direction must be a number, got {type(direction).__name__}"
            )
        direction = complex(direction)
        if not cmath.isfinite(direction):
            raise ValidationError(f"direction must be finite, got {direction}")
        length = vector_length(direction)
        if length == 0.0:
            raise ValidationError("direction must be a non-zero vector")
        if max_magnitude is None:
            max_magnitude = length
        self.direction = direction
        self.max_magnitude = validate_magnitude(max_magnitude)

    def __repr__(self) -> str:
        return (f"UniformFlowGenerator(direction={self.direction!r}, "
                f"max_magnitude={self.max_magnitude!r})")

    def _generate(
        self,
        shape: Tuple[int, int],
        rng: RandomSource,
    ) -> np.ndarray:
        scale = self.max_magnitude / vector_length(self.direction)
        return np.full(shape, self.direction * scale, dtype=np.complex128)


def generate_uniform_flow(
    size: Sequence[int] = (200, 200),
    direction: complex = 1 + 1j,
    max_magnitude: Optional[float] = None,
) -> np.ndarray:
    """Generate a uniform flow. See ``UniformFlowGenerator``."""
    return UniformFlowGenerator(direction, max_magnitude).generate(size)
