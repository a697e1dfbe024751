# -*- coding: utf-8 -*-
"""
Tincture: Exact colorimetry between sRGB, CIEXYZ, CIELAB and CIELCh
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: cielab.py — CIE 1976 L*a*b* colors relative to D65.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .base import ColorSpace
from .ciexyz import D65, Ciexyz
from .engine import lch_to_lab, xyz_to_lab

if TYPE_CHECKING:
    from .cielch import Cielch
    from .srgb import Srgb

__all__ = ["Cielab"]


@dataclass(frozen=True, slots=True)
class Cielab(ColorSpace):
    """
    A color in the CIELAB color space.

    Attributes:
        lightness: L*, valid in [0, 100].
        a: Green-red opponent axis, unconstrained.
        b: Blue-yellow opponent axis, unconstrained.
    """

    lightness: float
    a: float
    b: float

    space = "CIELAB"
    key = "cielab"

    @classmethod
    def is_valid(cls, lightness: float, a: float, b: float) -> bool:
        return 0.0 <= lightness <= 100.0

    @classmethod
    def from_ciexyz(cls, ciexyz: Ciexyz) -> "Cielab":
        """Forward CIE 1976 transform relative to D65."""
        return cls._unchecked(
            *xyz_to_lab(ciexyz.x, ciexyz.y, ciexyz.z, D65.x, D65.y, D65.z)
        )

    @classmethod
    def from_srgb(cls, srgb: "Srgb") -> "Cielab":
        """Convert an sRGB color to CIELAB (via CIEXYZ)."""
        return cls.from_ciexyz(Ciexyz.from_srgb(srgb))

    @classmethod
    def from_cielch(cls, cielch: "Cielch") -> "Cielab":
        """Cartesian reconstruction: a = C cos h, b = C sin h."""
        return cls._unchecked(*lch_to_lab(cielch.lightness, cielch.chroma, cielch.hue))
