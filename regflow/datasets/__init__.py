# -*- coding: utf-8 -*-
"""
Datasets Module - Real image pairs as an alternative scenario source.

Key Functions
-------------
- gen_anhir: Random padded (and optionally resized) ANHIR training pair
- load_anhir_image_pair: Load one target/source pair
- read_location_table: Parse the ANHIR ``location_table.csv``
- load_image: Decode an image file to grayscale ``float64``

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

from regflow.datasets.anhir import (
    gen_anhir,
    load_anhir_image_pair,
    load_image,
    read_location_table,
)

__all__ = [
    'gen_anhir',
    'load_anhir_image_pair',
    'load_image',
    'read_location_table',
]
