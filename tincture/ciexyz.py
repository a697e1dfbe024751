# -*- coding: utf-8 -*-
"""
Tincture: Exact colorimetry between sRGB, CIEXYZ, CIELAB and CIELCh
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: ciexyz.py — CIEXYZ tristimulus colors and the D65 white point.

CIEXYZ is the hub of the conversion graph: sRGB reaches the perceptual
spaces only through it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from .base import ColorSpace
from .engine import lab_to_xyz, linear_rgb_to_xyz

if TYPE_CHECKING:
    from .cielab import Cielab
    from .cielch import Cielch
    from .srgb import Srgb

__all__ = ["Ciexyz", "D65"]


@dataclass(frozen=True, slots=True)
class Ciexyz(ColorSpace):
    """
    A color in the CIEXYZ color space.

    Valid colors have ``x >= 0``, ``z >= 0`` and ``0 <= y <= 1``; Y is the
    luminance, normalized so that the reference white has Y = 1.  The same
    closed range applies to the constructor and to ``try_from_array``.
    """

    x: float
    y: float
    z: float

    space = "CIEXYZ"
    key = "ciexyz"

    @classmethod
    def is_valid(cls, x: float, y: float, z: float) -> bool:
        return x >= 0.0 and 0.0 <= y <= 1.0 and z >= 0.0

    @classmethod
    def from_srgb(cls, srgb: "Srgb") -> "Ciexyz":
        """Linearize the sRGB channels and apply the sRGB -> XYZ matrix."""
        return cls._unchecked(
            *linear_rgb_to_xyz(srgb.linear_red, srgb.linear_green, srgb.linear_blue)
        )

    @classmethod
    def from_cielab(cls, cielab: "Cielab") -> "Ciexyz":
        """Inverse CIE 1976 transform relative to D65."""
        return cls._unchecked(
            *lab_to_xyz(cielab.lightness, cielab.a, cielab.b, D65.x, D65.y, D65.z)
        )

    @classmethod
    def from_cielch(cls, cielch: "Cielch") -> "Ciexyz":
        """Convert a CIELCh color to CIEXYZ (via CIELAB)."""
        from .cielab import Cielab
        return cls.from_cielab(Cielab.from_cielch(cielch))


# D65 reference white: the row sums of the sRGB -> XYZ matrix, evaluated by
# the same kernel as every sRGB conversion so that
# Ciexyz.from_srgb(Srgb.new(255, 255, 255)) == D65 holds exactly.
D65: Final[Ciexyz] = Ciexyz._unchecked(*linear_rgb_to_xyz(1.0, 1.0, 1.0))
