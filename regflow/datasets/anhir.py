# -*- coding: utf-8 -*-
"""
ANHIR Image Pairs - Real target/source pairs from the ANHIR challenge data.

The ANHIR (Automatic Non-rigid Histological Image Registration) dataset
ships a ``location_table.csv`` at its root with one row per image pair.
The columns used here are ``status``, ``Target image`` and
``Source image``; image paths are relative to ``<base_path>/dataset``.

Dependencies
------------
Pillow
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
import csv
import logging
from pathlib import Path
from typing import Dict, List, Tuple, Union

# Third-party
import numpy as np
from PIL import Image

# regflow internal
from regflow.exceptions import AssetNotFoundError, ValidationError
from regflow.image_ops import pad_images, resize_to_diag_size
from regflow.rng import RandomSource, resolve_rng

logger = logging.getLogger(__name__)

LOCATION_TABLE = 'location_table.csv'
STATUS_COLUMN = 'status'
TARGET_COLUMN = 'Target image'
SOURCE_COLUMN = 'Source image'
TRAINING_STATUS = 'training'


def load_image(path: Union[str, Path]) -> np.ndarray:
    """Load an image file as grayscale ``float64`` in ``[0, 1]``.

    Color images are reduced to 8-bit luminance by Pillow before scaling.

    Raises
    ------
    AssetNotFoundError
        If *path* does not exist.
    """
    path = Path(path)
    if not path.is_file():
        raise AssetNotFoundError(f"Image not found: {path}")
    with Image.open(path) as img:
        gray = np.asarray(img.convert('L'), dtype=np.float64)
    return gray / 255.0


def load_anhir_image_pair(
    target_path: Union[str, Path],
    source_path: Union[str, Path],
    base_path: Union[str, Path],
) -> Tuple[np.ndarray, np.ndarray]:
    """Load the target and source images of one pair, in that order.

    Parameters
    ----------
    target_path, source_path : str or Path
        Image paths relative to *base_path*.
    base_path : str or Path
        The ``dataset`` directory of the ANHIR tree.
    """
    base_path = Path(base_path)
    logger.debug("Loading %s", base_path / target_path)
    target = load_image(base_path / target_path)
    source = load_image(base_path / source_path)
    return target, source


def read_location_table(base_path: Union[str, Path]) -> List[Dict[str, str]]:
    """Read ``location_table.csv`` under *base_path* into a list of rows.

    Raises
    ------
    AssetNotFoundError
        If the table does not exist.
    ValidationError
        If any of the required columns is missing.
    """
    table_path = Path(base_path) / LOCATION_TABLE
    if not table_path.is_file():
        raise AssetNotFoundError(f"Location table not found: {table_path}")

    with open(table_path, newline='') as f:
        reader = csv.DictReader(f)
        columns = reader.fieldnames or []
        missing = [c for c in (STATUS_COLUMN, TARGET_COLUMN, SOURCE_COLUMN)
                   if c not in columns]
        if missing:
            raise ValidationError(
                f"{table_path} is missing columns {missing}"
            )
        return list(reader)


def gen_anhir(
    base_path: Union[str, Path],
    mutate: bool = True,
    diag_pixels: float = 500,
    rng: RandomSource = None,
) -> Tuple[np.ndarray, np.ndarray]:
    """Pick a random training pair from the ANHIR dataset.

    Parameters
    ----------
    base_path : str or Path
        ANHIR root holding ``location_table.csv`` and ``dataset/``.
    mutate : bool
        Resize both images to *diag_pixels* on the diagonal. Default
        ``True``.
    diag_pixels : float
        Target diagonal length in pixels. Default ``500``.
    rng : None, int, or numpy.random.Generator
        Random source for the row choice.

    Returns
    -------
    Tuple[np.ndarray, np.ndarray]
        ``(target, source)``, padded to a common shape.

    Raises
    ------
    ValidationError
        If the table has no training rows.
    AssetNotFoundError
        If the table or an image file does not exist.
    """
    base_path = Path(base_path)
    rows = read_location_table(base_path)
    train_rows = [r for r in rows if r[STATUS_COLUMN] == TRAINING_STATUS]
    if not train_rows:
        raise ValidationError(
            f"No '{TRAINING_STATUS}' rows in {base_path / LOCATION_TABLE}"
        )

    row = train_rows[int(resolve_rng(rng).integers(len(train_rows)))]
    logger.info("Selected pair %s / %s", row[TARGET_COLUMN], row[SOURCE_COLUMN])
    target, source = load_anhir_image_pair(
        row[TARGET_COLUMN], row[SOURCE_COLUMN], base_path / 'dataset')

    if target.shape != source.shape:
        logger.warning("Pair sizes differ: %s, %s", target.shape, source.shape)
    target, source = pad_images(target, source)

    if mutate:
        target = resize_to_diag_size(target, diag_pixels)
        source = resize_to_diag_size(source, diag_pixels)
    return target, source
