# -*- coding: utf-8 -*-
"""
regflow - Synthetic fixtures for optical-flow image registration.

Generates base images, synthetic displacement fields ("flows") and warped
image pairs for exercising and benchmarking registration algorithms.

Dependencies
------------
numpy
scipy
scikit-image
Pillow
PyYAML

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

__version__ = "0.1.0"

from regflow.exceptions import (
    RegflowError,
    ValidationError,
    DegenerateFieldError,
    AssetNotFoundError,
)
from regflow.vocabulary import ImageKind, FlowKind
from regflow.flow import (
    FlowGenerator,
    UniformFlowGenerator,
    QuadraticFlowGenerator,
    TiledFlowGenerator,
    generate_uniform_flow,
    generate_quadratic_flow,
    generate_tiled_flow,
    normalize_peak_magnitude,
    vector_length,
)
from regflow.images import chessboard, lena
from regflow.scenario import Scenario, gen_init, generate_scenario
from regflow.config import ScenarioConfig, load_config

__all__ = [
    'RegflowError',
    'ValidationError',
    'DegenerateFieldError',
    'AssetNotFoundError',
    'ImageKind',
    'FlowKind',
    'FlowGenerator',
    'UniformFlowGenerator',
    'QuadraticFlowGenerator',
    'TiledFlowGenerator',
    'generate_uniform_flow',
    'generate_quadratic_flow',
    'generate_tiled_flow',
    'normalize_peak_magnitude',
    'vector_length',
    'chessboard',
    'lena',
    'Scenario',
    'gen_init',
    'generate_scenario',
    'ScenarioConfig',
    'load_config',
]
