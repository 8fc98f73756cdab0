# -*- coding: utf-8 -*-
"""
Scenario Configuration - YAML-backed parameters for ``generate_scenario``.

A configuration file is a YAML mapping with any of the keys
``image_kind``, ``flow_kind``, ``flow_args``, ``chess_args`` and ``seed``:

.. code-block:: yaml

    image_kind: chess
    flow_kind: uniform
    flow_args: [[1, 0], 5]   # direction 1+0j, max_magnitude 5
    chess_args: [25, 8]
    seed: 7

YAML has no complex literal, so complex values may be written as
``[re, im]`` pairs or as strings such as ``"1+0j"``.

Dependencies
------------
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

# Standard library
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence, Tuple, Union

# Third-party
import yaml

# regflow internal
from regflow.exceptions import AssetNotFoundError, ValidationError
from regflow.scenario import Scenario, generate_scenario
from regflow.vocabulary import FlowKind, ImageKind, coerce_kind


def _parse_arg(value: Any) -> Any:
    """Turn YAML-friendly spellings into numbers.

    ``[re, im]`` pairs become ``complex``. Strings are tried as ``int``,
    then ``float``, then ``complex``, as on the command line.
    """
    if isinstance(value, (list, tuple)) and len(value) == 2 and all(
            isinstance(v, (int, float)) and not isinstance(v, bool)
            for v in value):
        return complex(value[0], value[1])
    if isinstance(value, str):
        text = value.replace(' ', '')
        for cast in (int, float, complex):
            try:
                return cast(text)
            except ValueError:
                continue
    return value


def _as_args(value: Any, name: str) -> Tuple[Any, ...]:
    """Return *value* as a tuple of positional arguments."""
    if value is None:
        return ()
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise ValidationError(
            f"{name} must be a list, got {type(value).__name__} {value!r}"
        )
    return tuple(value)


@dataclass
class ScenarioConfig:
    """Parameters of one ``generate_scenario`` call.

    Parameters
    ----------
    image_kind : ImageKind or str
        Base image kind. Default ``ImageKind.LENA``.
    flow_kind : FlowKind or str
        Flow generator kind. Default ``FlowKind.QUAD``.
    flow_args : tuple
        Positional flow generator arguments after the size.
    chess_args : tuple
        Chessboard ``(tile_size, board_size)``.
    seed : int, optional
        Random seed. ``None`` draws fresh OS entropy.
    """

    image_kind: ImageKind = ImageKind.LENA
    flow_kind: FlowKind = FlowKind.QUAD
    flow_args: Tuple[Any, ...] = ()
    chess_args: Tuple[Any, ...] = ()
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        self.image_kind = coerce_kind(self.image_kind, ImageKind)
        self.flow_kind = coerce_kind(self.flow_kind, FlowKind)
        self.flow_args = tuple(
            _parse_arg(a) for a in _as_args(self.flow_args, 'flow_args'))
        self.chess_args = _as_args(self.chess_args, 'chess_args')
        if self.seed is not None and (
                isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise ValidationError(
                f"seed must be an integer, got {type(self.seed).__name__}"
            )

    @classmethod
    def from_dict(cls, mapping: Mapping[str, Any]) -> 'ScenarioConfig':
        """Build a configuration from a plain mapping.

        Raises
        ------
        ValidationError
            If *mapping* has keys that are not configuration fields.
        """
        known = {f.name for f in fields(cls)}
        unknown = set(mapping) - known
        if unknown:
            raise ValidationError(
                f"Unknown configuration keys: {', '.join(sorted(unknown))}"
            )
        return cls(**dict(mapping))

    def build(self) -> Scenario:
        """Run ``generate_scenario`` with this configuration."""
        return generate_scenario(
            self.image_kind,
            self.flow_kind,
            flow_args=self.flow_args,
            chess_args=self.chess_args,
            rng=self.seed,
        )


def load_config(path: Union[str, Path]) -> ScenarioConfig:
    """Load a ``ScenarioConfig`` from a YAML file.

    Raises
    ------
    AssetNotFoundError
        If *path* does not exist.
    ValidationError
        If the file does not hold a mapping or has unknown keys.
    """
    path = Path(path)
    if not path.is_file():
        raise AssetNotFoundError(f"Configuration file not found: {path}")
    with open(path) as f:
        cfg = yaml.safe_load(f)
    if cfg is None:
        cfg = {}
    if not isinstance(cfg, dict):
        raise ValidationError(
            f"{path} must contain a mapping, got {type(cfg).__name__}"
        )
    return ScenarioConfig.from_dict(cfg)
