# -*- coding: utf-8 -*-
"""
Flow Generation Module - Synthetic displacement fields for registration tests.

Flows are ``complex128`` arrays: the real part is horizontal displacement
and the imaginary part vertical displacement, in pixels. Each generator is
available as a class holding its parameters and as a one-shot function.

Key Classes
-----------
- FlowGenerator: ABC with size validation and the ``generate`` entry point
- UniformFlowGenerator: Constant vector scaled to a target magnitude
- QuadraticFlowGenerator: Random quadratic polynomial over the complex plane
- TiledFlowGenerator: Gaussian-smoothed random tiles

Usage
-----
    >>> from regflow.flow import generate_tiled_flow, vector_length
    >>> flow = generate_tiled_flow((128, 128), max_magnitude=8, rng=0)
    >>> round(float(vector_length(flow).max()), 9)
    8.0

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

from regflow.flow.base import (
    FlowGenerator,
    normalize_peak_magnitude,
    vector_length,
)
from regflow.flow.uniform import UniformFlowGenerator, generate_uniform_flow
from regflow.flow.quadratic import (
    QuadraticFlowGenerator,
    complex_unit_grid,
    generate_quadratic_flow,
)
from regflow.flow.tiled import TiledFlowGenerator, generate_tiled_flow

__all__ = [
    'FlowGenerator',
    'normalize_peak_magnitude',
    'vector_length',
    'UniformFlowGenerator',
    'generate_uniform_flow',
    'QuadraticFlowGenerator',
    'complex_unit_grid',
    'generate_quadratic_flow',
    'TiledFlowGenerator',
    'generate_tiled_flow',
]
