# -*- coding: utf-8 -*-
"""
Tiled Flow - Smoothed piecewise-uniform random displacement field.

The field starts as a coarse grid of tiles, each holding one random
displacement vector with components uniform in
``[-max_magnitude, max_magnitude]``. Tiles are expanded to
``tile_size x tile_size`` pixel blocks, cropped to the requested size,
blurred with a Gaussian to remove the block edges, and finally rescaled so
the peak vector length is ``max_magnitude``.

Larger tiles give slower varying flows. With ``tile_size`` at least as
large as both field dimensions the result is a uniform shift in a random
direction.

Notes
-----
The default ``tile_size`` is ``ceil(rows / 6)``. It depends on the row
count only, so non-square fields get tiles sized from their height.

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
import math
from typing import Optional, Sequence, Tuple

# Third-party
import numpy as np

# regflow internal
from regflow.flow.base import FlowGenerator, normalize_peak_magnitude
from regflow.image_ops import smooth_with_gaussian
from regflow.rng import RandomSource, resolve_rng
from regflow._validation import validate_magnitude, validate_positive_int

logger = logging.getLogger(__name__)


def _resolve_tiling(
    shape: Tuple[int, int],
    tile_size: Optional[int],
    filter_amp: Optional[int],
) -> Tuple[int, int]:
    """Fill in default ``tile_size`` and ``filter_amp`` for *shape*.

    ``tile_size`` defaults to ``ceil(rows / 6)``. ``filter_amp`` defaults
    to ``ceil(tile_size / 2)``, bumped to the next even number when odd.
    """
    if tile_size is None:
        tile_size = math.ceil(shape[0] / 6)
    if filter_amp is None:
        filter_amp = math.ceil(tile_size / 2)
        if filter_amp % 2 == 1:
            filter_amp += 1
    return tile_size, filter_amp


class TiledFlowGenerator(FlowGenerator):
    """Random tiled flow smoothed by a Gaussian filter.

    Parameters
    ----------
    max_magnitude : float
        Peak displacement in pixels. Default ``10``.
    tile_size : int, optional
        Side length in pixels of each random uniform tile. Default
        ``ceil(rows / 6)`` of the generated field.
    filter_amp : int, optional
        Standard deviation in pixels of the smoothing Gaussian, used for
        both axes. Default ``ceil(tile_size / 2)`` rounded up to even.

    Raises
    ------
    ValidationError
        If *max_magnitude* is negative or not finite, or *tile_size* /
        *filter_amp* are given but are not positive integers.
    """

    def __init__(
        self,
        max_magnitude: float = 10,
        tile_size: Optional[int] = None,
        filter_amp: Optional[int] = None,
    ) -> None:
        self.max_magnitude = validate_magnitude(max_magnitude)
        if tile_size is not None:
            tile_size = validate_positive_int(tile_size, 'tile_size')
        if filter_amp is not None:
            filter_amp = validate_positive_int(filter_amp, 'filter_amp')
        self.tile_size = tile_size
        self.filter_amp = filter_amp

    def __repr__(self) -> str:
        return (f"TiledFlowGenerator(max_magnitude={self.max_magnitude!r}, "
                f"tile_size={self.tile_size!r}, "
                f"filter_amp={self.filter_amp!r})")

    def _generate(
        self,
        shape: Tuple[int, int],
        rng: RandomSource,
    ) -> np.ndarray:
        rows, cols = shape
        tile_size, filter_amp = _resolve_tiling(
            shape, self.tile_size, self.filter_amp)
        if self.max_magnitude == 0.0:
            return np.zeros(shape, dtype=np.complex128)

        gen = resolve_rng(rng)
        tile_count = (math.ceil(rows / tile_size), math.ceil(cols / tile_size))
        logger.debug("Tiled flow: %s tiles of %d px, filter_amp=%d",
                     tile_count, tile_size, filter_amp)

        # (2, tiles_rows, tiles_cols): horizontal plane, then vertical
        mag = self.max_magnitude
        uv_base = gen.uniform(-mag, mag, size=(2,) + tile_count)
        uv_flow = np.repeat(np.repeat(uv_base, tile_size, axis=1),
                            tile_size, axis=2)
        uv_flow = uv_flow[:, :rows, :cols]

        rand_flow = uv_flow[0] + 1j * uv_flow[1]
        rand_flow = smooth_with_gaussian(rand_flow, (filter_amp, filter_amp))
        return normalize_peak_magnitude(rand_flow, mag)


def generate_tiled_flow(
    size: Sequence[int] = (200, 200),
    max_magnitude: float = 10,
    tile_size: Optional[int] = None,
    filter_amp: Optional[int] = None,
    rng: RandomSource = None,
) -> np.ndarray:
    """Generate a tiled flow. See ``TiledFlowGenerator``."""
    generator = TiledFlowGenerator(max_magnitude, tile_size, filter_amp)
    return generator.generate(size, rng)
