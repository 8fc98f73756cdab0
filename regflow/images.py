# -*- coding: utf-8 -*-
"""
Test Images - Base images for synthetic registration scenarios.

- ``lena``: fixed 256x256 grayscale reference photograph
- ``chessboard``: binary checkerboard of configurable tile and board size

The historical "lena" test image cannot be redistributed, so ``lena``
serves the ``camera`` photograph bundled with scikit-image, reduced to
256x256. The name is kept for the ``ImageKind.LENA`` scenario kind.

Dependencies
------------
scikit-image

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

# Third-party
import numpy as np
from skimage import data
from skimage.transform import resize
from skimage.util import img_as_float64

# regflow internal
from regflow.exceptions import ValidationError
from regflow._validation import validate_positive_int

REFERENCE_SHAPE = (256, 256)


def lena() -> np.ndarray:
    """Return the 256x256 grayscale reference image.

    Returns
    -------
    np.ndarray
        ``float64`` array of shape ``(256, 256)`` with values in
        ``[0, 1]``.
    """
    photo = img_as_float64(data.camera())
    return resize(photo, REFERENCE_SHAPE, anti_aliasing=True)


def chessboard(tile_size: int = 50, board_size: int = 4) -> np.ndarray:
    """Create a chessboard image.

    The board has *board_size* tiles along each axis, each tile
    *tile_size* pixels square, alternating ``0`` and ``1`` with a ``0``
    tile in the top-left corner.

    Parameters
    ----------
    tile_size : int
        Tile side length in pixels. Default ``50``.
    board_size : int
        Tiles per side. Must be even. Default ``4``.

    Returns
    -------
    np.ndarray
        ``float64`` array of shape
        ``(tile_size * board_size, tile_size * board_size)``.

    Raises
    ------
    ValidationError
        If either argument is not a positive integer or *board_size* is
        odd.

    Examples
    --------
    >>> board = chessboard(10, 4)
    >>> board.shape
    (40, 40)
    """
    tile_size = validate_positive_int(tile_size, 'tile_size')
    board_size = validate_positive_int(board_size, 'board_size')
    if board_size % 2 != 0:
        raise ValidationError(f"board_size must be even, got {board_size}")

    dark = np.zeros((tile_size, tile_size))
    light = np.ones((tile_size, tile_size))
    mini_board = np.block([[dark, light], [light, dark]])
    reps = board_size // 2
    return np.tile(mini_board, (reps, reps))
