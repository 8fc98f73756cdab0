# -*- coding: utf-8 -*-
"""
Vocabulary - Canonical enums for scenario construction.

Single source of truth for the base image kinds and flow generator kinds
accepted by ``regflow.scenario`` and ``regflow.config``. Plain strings are
coerced through ``coerce_kind`` so that configuration files and the
example CLI can use the lowercase names.

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
from enum import Enum
from typing import Type, TypeVar, Union

# regflow internal
from regflow.exceptions import ValidationError


class ImageKind(Enum):
    """Base images a scenario can be built on."""

    LENA = "lena"
    CHESS = "chess"


class FlowKind(Enum):
    """Synthetic flow generators a scenario can use.

    ``QUAD`` is a random quadratic polynomial over the complex plane,
    ``TILED`` is smoothed piecewise-uniform noise and ``UNIFORM`` is a
    constant displacement.
    """

    QUAD = "quad"
    TILED = "tiled"
    UNIFORM = "uniform"


_E = TypeVar('_E', ImageKind, FlowKind)


def coerce_kind(value: Union[str, Enum], enum_cls: Type[_E]) -> _E:
    """Convert *value* to a member of *enum_cls*.

    Parameters
    ----------
    value : str or Enum
        Enum member, or its value / name (case-insensitive).
    enum_cls : type
        ``ImageKind`` or ``FlowKind``.

    Returns
    -------
    Enum
        Matching member of *enum_cls*.

    Raises
    ------
    ValidationError
        If *value* does not name a member of *enum_cls*.
    """
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        key = value.strip().lower()
        for member in enum_cls:
            if key in (member.value, member.name.lower()):
                return member
    choices = [m.value for m in enum_cls]
    raise ValidationError(
        f"Unsupported {enum_cls.__name__} {value!r}, expected one of {choices}"
    )
