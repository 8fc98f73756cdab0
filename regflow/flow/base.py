# -*- coding: utf-8 -*-
"""
Flow Generator Base - Vector math and the abstract flow generator interface.

A flow is a ``complex128`` array of shape ``(rows, cols)`` whose real part
is the horizontal (column) displacement and whose imaginary part is the
vertical (row) displacement, in pixels. Every generator finishes with
peak-magnitude normalization so that ``max(vector_length(flow))`` equals
the requested ``max_magnitude``.

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
from abc import ABC, abstractmethod
from typing import Sequence, Tuple, Union

# Third-party
import numpy as np

# regflow internal
from regflow.exceptions import DegenerateFieldError
from regflow.rng import RandomSource
from regflow._validation import validate_magnitude, validate_size

logger = logging.getLogger(__name__)


def vector_length(v: Union[complex, np.ndarray]) -> Union[float, np.ndarray]:
    """Euclidean length of complex displacement vector(s).

    Parameters
    ----------
    v : complex or np.ndarray
        Scalar or array of complex displacements.

    Returns
    -------
    float or np.ndarray
        ``sqrt(real(v)**2 + imag(v)**2)``, elementwise for arrays.

    Examples
    --------
    >>> vector_length(3 + 4j)
    5.0
    """
    length = np.hypot(np.real(v), np.imag(v))
    if np.ndim(length) == 0:
        return float(length)
    return length


def normalize_peak_magnitude(
    field: np.ndarray,
    max_magnitude: float,
) -> np.ndarray:
    """Rescale *field* so its largest vector length equals *max_magnitude*.

    Parameters
    ----------
    field : np.ndarray
        Complex displacement field.
    max_magnitude : float
        Target peak vector length, ``>= 0``.

    Returns
    -------
    np.ndarray
        New ``complex128`` array.

    Raises
    ------
    ValidationError
        If *max_magnitude* is negative or not finite.
    DegenerateFieldError
        If the peak length of *field* is zero or not finite.
    """
    max_magnitude = validate_magnitude(max_magnitude)
    field = np.asarray(field, dtype=np.complex128)
    peak = float(np.max(vector_length(field)))
    if not np.isfinite(peak) or peak == 0.0:
        raise DegenerateFieldError(
            f"Cannot rescale field with peak magnitude {peak}"
        )
    return field * (max_magnitude / peak)


class FlowGenerator(ABC):
    """Abstract base for synthetic flow generators.

    Subclasses hold their parameters as attributes validated in
    ``__init__`` and implement ``_generate`` for a validated size and a
    resolved random source.
    """

    def generate(
        self,
        size: Sequence[int],
        rng: RandomSource = None,
    ) -> np.ndarray:
        """Generate a flow field of shape *size*.

        Parameters
        ----------
        size : Sequence[int]
            ``(rows, cols)`` of the field.
        rng : None, int, or numpy.random.Generator
            Random source. See ``regflow.rng.resolve_rng``.

        Returns
        -------
        np.ndarray
            ``complex128`` flow of shape ``(rows, cols)``.
        """
        shape = validate_size(size)
        logger.debug("%r generating flow of size %s", self, shape)
        return self._generate(shape, rng)

    @abstractmethod
    def _generate(
        self,
        shape: Tuple[int, int],
        rng: RandomSource,
    ) -> np.ndarray:
        """Produce the field for a validated *shape*."""
