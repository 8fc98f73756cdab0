# -*- coding: utf-8 -*-
"""
Image Operations - Smoothing, warping, resizing and padding helpers.

Array-level building blocks used by the flow generators, the scenario
builder and the dataset loaders:

- ``smooth_with_gaussian``: Gaussian blur of real or complex fields via
  ``scipy.ndimage.gaussian_filter``
- ``warp_image``: backward warp by a dense displacement field via
  ``scipy.ndimage.map_coordinates``
- ``resize_by_ratio`` / ``resize_to_diag_size``: anti-aliased rescale via
  ``skimage.transform.rescale``
- ``pad_images``: pad two images to a common shape

Dependencies
------------
scipy
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

# Standard library
import math
from typing import Sequence, Tuple, Union

# Third-party
import numpy as np
from scipy.ndimage import gaussian_filter, map_coordinates
from skimage.transform import rescale

# regflow internal
from regflow.exceptions import ValidationError


def _validate_image(image: np.ndarray, name: str = 'image') -> np.ndarray:
    image = np.asarray(image)
    if image.ndim != 2:
        raise ValidationError(
            f"{name} must be 2D (rows, cols), got {image.ndim}D"
        )
    return image


def smooth_with_gaussian(
    field: np.ndarray,
    amplitude: Union[float, Sequence[float]],
    mode: str = 'nearest',
) -> np.ndarray:
    """Blur a 2D real or complex field with a Gaussian kernel.

    Complex input is smoothed channel by channel: the real and imaginary
    planes go through the same kernel.

    Parameters
    ----------
    field : np.ndarray
        2D array, real or complex.
    amplitude : float or Sequence[float]
        Gaussian standard deviation in pixels. A scalar applies to both
        axes; a pair is ``(rows, cols)``.
    mode : str
        Boundary handling passed to ``scipy.ndimage.gaussian_filter``.
        Default ``'nearest'`` (edge replication).

    Returns
    -------
    np.ndarray
        New smoothed array with the dtype class of *field*
        (``complex128`` or ``float64``).

    Raises
    ------
    ValidationError
        If *field* is not 2D or *amplitude* is negative.
    """
    field = _validate_image(field, 'field')
    sigma = np.atleast_1d(np.asarray(amplitude, dtype=np.float64))
    if sigma.ndim != 1 or sigma.size not in (1, 2):
        raise ValidationError(
            f"amplitude must be a scalar or a (rows, cols) pair, "
            f"got {amplitude!r}"
        )
    sigma = np.broadcast_to(sigma, (2,))
    if np.any(sigma < 0) or not np.all(np.isfinite(sigma)):
        raise ValidationError(
            f"amplitude must be finite and >= 0, got {amplitude!r}"
        )
    sigma = tuple(sigma)

    if np.iscomplexobj(field):
        real = gaussian_filter(field.real.astype(np.float64), sigma, mode=mode)
        imag = gaussian_filter(field.imag.astype(np.float64), sigma, mode=mode)
        return real + 1j * imag
    return gaussian_filter(field.astype(np.float64), sigma, mode=mode)


def warp_image(
    image: np.ndarray,
    dx: np.ndarray,
    dy: np.ndarray,
    order: int = 1,
    fill_value: float = 0.0,
) -> np.ndarray:
    """Warp an image by a dense displacement field via inverse mapping.

    Each output pixel ``(r, c)`` samples the input at
    ``(r + dy[r, c], c + dx[r, c])``. To move image content forward by a
    flow ``u + i*v``, pass ``dx = -u`` and ``dy = -v``.

    Parameters
    ----------
    image : np.ndarray
        2D input image.
    dx : np.ndarray
        Horizontal (column) sampling offsets, same shape as *image*.
    dy : np.ndarray
        Vertical (row) sampling offsets, same shape as *image*.
    order : int
        Interpolation order: 0=nearest, 1=bilinear, 3=bicubic.
    fill_value : float
        Value for samples falling outside the input image.

    Returns
    -------
    np.ndarray
        Warped ``float64`` image, same shape as *image*.

    Raises
    ------
    ValidationError
        If *image* is not 2D or the offset shapes do not match it.
    """
    image = _validate_image(image)
    dx = np.asarray(dx, dtype=np.float64)
    dy = np.asarray(dy, dtype=np.float64)
    if dx.shape != image.shape or dy.shape != image.shape:
        raise ValidationError(
            f"Displacement shapes {dx.shape}, {dy.shape} do not match "
            f"image shape {image.shape}"
        )

    row_coords, col_coords = np.mgrid[0:image.shape[0], 0:image.shape[1]]
    return map_coordinates(
        image.astype(np.float64),
        [row_coords + dy, col_coords + dx],
        order=order,
        mode='constant',
        cval=fill_value,
    )


def resize_by_ratio(image: np.ndarray, ratio: float) -> np.ndarray:
    """Resize *image* by a uniform scale factor, preserving aspect ratio.

    Raises
    ------
    ValidationError
        If *ratio* is not a positive finite number.
    """
    image = _validate_image(image)
    if not (isinstance(ratio, (int, float, np.integer, np.floating))
            and math.isfinite(ratio) and ratio > 0):
        raise ValidationError(f"ratio must be positive, got {ratio!r}")
    return rescale(
        image.astype(np.float64),
        ratio,
        anti_aliasing=ratio < 1.0,
        preserve_range=True,
    )


def resize_to_diag_size(image: np.ndarray, diag_pixels: float) -> np.ndarray:
    """Resize *image* so its diagonal spans *diag_pixels* pixels.

    The scale factor is ``diag_pixels / sqrt(rows**2 + cols**2)``.
    """
    image = _validate_image(image)
    actual_diag = math.hypot(*image.shape)
    return resize_by_ratio(image, diag_pixels / actual_diag)


def pad_images(
    first: np.ndarray,
    second: np.ndarray,
    fill_value: float = 0.0,
) -> Tuple[np.ndarray, np.ndarray]:
    """Pad two images at the bottom and right to a common shape.

    The common shape is the elementwise maximum of both shapes; pixel
    ``(0, 0)`` stays anchored in both outputs.

    Returns
    -------
    Tuple[np.ndarray, np.ndarray]
        Padded copies of *first* and *second*.
    """
    first = _validate_image(first, 'first')
    second = _validate_image(second, 'second')
    target = np.maximum(first.shape, second.shape)

    def _pad(image: np.ndarray) -> np.ndarray:
        extra = target - np.array(image.shape)
        return np.pad(
            image,
            ((0, int(extra[0])), (0, int(extra[1]))),
            mode='constant',
            constant_values=fill_value,
        )

    return _pad(first), _pad(second)
