# -*- coding: utf-8 -*-
"""
Tincture: Exact colorimetry between sRGB, CIEXYZ, CIELAB and CIELCh
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: base.py — Base class for color values.

Every color type is a frozen, slotted dataclass deriving from
:class:`ColorSpace`.  The shared API:

  - Checked path: the class constructor and ``try_from_array`` validate the
    components and raise :class:`OutOfSpecification`.
  - Unchecked path: ``from_array`` (and every conversion result) stores the
    components as given.  Validity is the caller's responsibility.
  - ``to_array`` / ``to_tuple`` for lossless export.
  - ``from_color`` dispatches to the ``from_<space>`` converter of the
    target type.
"""

from __future__ import annotations

from dataclasses import fields
from typing import Any, Type, TypeVar

import numpy as np

from .engine import Triple
from .errors import OutOfSpecification

C = TypeVar("C", bound="ColorSpace")


def as_triple(array: Any) -> Triple:
    """
    Coerce *array* to three float64 components.

    Raises:
        ValueError: If *array* does not hold exactly three values.
    """
    arr = np.asarray(array, dtype=np.float64)
    if arr.shape != (3,):
        raise ValueError(f"Expected an array of shape (3,), got {arr.shape}")
    return float(arr[0]), float(arr[1]), float(arr[2])


class ColorSpace:
    """
    Base class for immutable color values.

    Subclasses set ``space`` (human readable name), ``key`` (suffix of the
    ``from_<key>`` converters) and implement :meth:`is_valid`.
    """

    __slots__ = ()

    space = ""
    key = ""

    def __post_init__(self) -> None:
        for f in fields(self):
            object.__setattr__(self, f.name, float(getattr(self, f.name)))
        values = self.to_tuple()
        if not self.is_valid(*values):
            raise OutOfSpecification(self.space, values)

    # --------------------------------------------------------------------------
    # Validation
    # --------------------------------------------------------------------------
    @classmethod
    def is_valid(cls, c0: float, c1: float, c2: float) -> bool:
        """Validity predicate for the three components of this space."""
        raise NotImplementedError

    # --------------------------------------------------------------------------
    # Construction
    # --------------------------------------------------------------------------
    @classmethod
    def _unchecked(cls: Type[C], c0: float, c1: float, c2: float) -> C:
        """Build an instance without running validation."""
        obj = object.__new__(cls)
        for f, value in zip(fields(cls), (c0, c1, c2)):
            object.__setattr__(obj, f.name, float(value))
        return obj

    @classmethod
    def from_array(cls: Type[C], array: Any) -> C:
        """
        Unchecked construction from three components.

        Out-of-range components are stored as given; conversions on such a
        value are computed but carry no guarantee.
        """
        return cls._unchecked(*as_triple(array))

    @classmethod
    def try_from_array(cls: Type[C], array: Any) -> C:
        """
        Checked construction from three components.

        Raises:
            OutOfSpecification: If the components are outside the valid range.
        """
        return cls(*as_triple(array))

    @classmethod
    def from_color(cls: Type[C], color: "ColorSpace", **kwargs: Any) -> C:
        """
        Convert any supported color value into this space.

        Keyword arguments are forwarded to the matching ``from_<space>``
        converter (e.g. ``clip`` for conversions into sRGB).

        Raises:
            TypeError: If *color* is not a supported color value.
        """
        if type(color) is cls:
            return color
        converter = getattr(cls, f"from_{getattr(color, 'key', '')}", None)
        if not isinstance(color, ColorSpace) or converter is None:
            raise TypeError(
                f"Cannot convert {type(color).__name__} to {cls.__name__}"
            )
        return converter(color, **kwargs)

    # --------------------------------------------------------------------------
    # Export
    # --------------------------------------------------------------------------
    def to_tuple(self) -> Triple:
        """Components as a plain tuple."""
        return tuple(getattr(self, f.name) for f in fields(self))  # type: ignore[return-value]

    def to_array(self) -> np.ndarray:
        """Components as a float64 array of shape (3,)."""
        return np.array(self.to_tuple(), dtype=np.float64)
