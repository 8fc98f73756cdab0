# -*- coding: utf-8 -*-
"""
Scenario Builder - Base image, synthetic flow and warped image in one call.

``generate_scenario`` picks a base image generator and a flow generator by
kind, sizes the flow from the image, and warps the image forward by the
flow. The result is the usual registration test triple
``(image, warped, flow)``.

Usage
-----
    >>> from regflow.scenario import generate_scenario
    >>> image, warped, flow = generate_scenario(
    ...     'chess', 'quad', flow_args=[20], rng=42)

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
from typing import Any, Callable, Dict, NamedTuple, Sequence, Type, Union

# Third-party
import numpy as np

# regflow internal
from regflow.exceptions import ValidationError
from regflow.flow import (
    FlowGenerator,
    QuadraticFlowGenerator,
    TiledFlowGenerator,
    UniformFlowGenerator,
)
from regflow.image_ops import warp_image
from regflow.images import chessboard, lena
from regflow.rng import RandomSource, resolve_rng
from regflow.vocabulary import FlowKind, ImageKind, coerce_kind

logger = logging.getLogger(__name__)


class Scenario(NamedTuple):
    """A synthetic registration case.

    Attributes
    ----------
    image : np.ndarray
        Base image, ``(rows, cols)``.
    warped : np.ndarray
        *image* moved forward by *flow*.
    flow : np.ndarray
        ``complex128`` displacement field, same shape as *image*.
    """

    image: np.ndarray
    warped: np.ndarray
    flow: np.ndarray


def _as_int(value: Any) -> Any:
    # Configuration files and CLIs hand over 50.0 or '50' for 50.
    if isinstance(value, (float, np.floating)) and float(value).is_integer():
        return int(value)
    if isinstance(value, str) and value.strip().lstrip('-').isdigit():
        return int(value)
    return value


def _build_lena(chess_args: Sequence[Any]) -> np.ndarray:
    return lena()


def _build_chessboard(chess_args: Sequence[Any]) -> np.ndarray:
    if not chess_args:
        return chessboard(50, 4)
    if len(chess_args) > 2:
        raise ValidationError(
            f"chess_args takes at most 2 values, got {len(chess_args)}"
        )
    return chessboard(*[_as_int(a) for a in chess_args])


IMAGE_BUILDERS: Dict[ImageKind, Callable[[Sequence[Any]], np.ndarray]] = {
    ImageKind.LENA: _build_lena,
    ImageKind.CHESS: _build_chessboard,
}

FLOW_GENERATORS: Dict[FlowKind, Type[FlowGenerator]] = {
    FlowKind.QUAD: QuadraticFlowGenerator,
    FlowKind.TILED: TiledFlowGenerator,
    FlowKind.UNIFORM: UniformFlowGenerator,
}


def generate_scenario(
    image_kind: Union[ImageKind, str] = ImageKind.LENA,
    flow_kind: Union[FlowKind, str] = FlowKind.QUAD,
    flow_args: Sequence[Any] = (),
    chess_args: Sequence[Any] = (),
    rng: RandomSource = None,
) -> Scenario:
    """Create the usual testing data: image, warped image, flow.

    Parameters
    ----------
    image_kind : ImageKind or str
        Base image: ``'lena'`` or ``'chess'``. Default ``'lena'``.
    flow_kind : FlowKind or str
        Flow generator: ``'quad'``, ``'tiled'`` or ``'uniform'``. Default
        ``'quad'``.
    flow_args : Sequence
        Positional arguments for the flow generator after the size, e.g.
        ``[max_magnitude, tile_size, filter_amp]`` for ``'tiled'`` or
        ``[direction, max_magnitude]`` for ``'uniform'``.
    chess_args : Sequence
        ``[tile_size, board_size]`` for ``'chess'``; ignored otherwise.
        Empty means a 4x4 board of 50 px tiles.
    rng : None, int, or numpy.random.Generator
        Random source for the flow.

    Returns
    -------
    Scenario
        ``(image, warped, flow)``.

    Raises
    ------
    ValidationError
        On unknown kinds or arguments the generators reject.
    DegenerateFieldError
        If the flow cannot be normalized.
    """
    image_kind = coerce_kind(image_kind, ImageKind)
    flow_kind = coerce_kind(flow_kind, FlowKind)
    flow_args = tuple(flow_args)
    gen = resolve_rng(rng)

    image = IMAGE_BUILDERS[image_kind](tuple(chess_args))

    generator_cls = FLOW_GENERATORS[flow_kind]
    try:
        generator = generator_cls(*flow_args)
    except TypeError as exc:
        raise ValidationError(
            f"Invalid flow_args {flow_args!r} for {flow_kind.value!r}: {exc}"
        ) from exc
    flow = generator.generate(image.shape, gen)
    logger.info("Generated %s scenario on %s image of shape %s",
                flow_kind.value, image_kind.value, image.shape)

    warped = warp_image(image, -flow.real, -flow.imag)
    return Scenario(image, warped, flow)


gen_init = generate_scenario
