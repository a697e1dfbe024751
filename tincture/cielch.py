# -*- coding: utf-8 -*-
"""
Tincture: Exact colorimetry between sRGB, CIEXYZ, CIELAB and CIELCh
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: cielch.py — Cylindrical CIELCh colors.

Equality note:
    On the neutral axis (chroma == 0) hue is undefined.  Two colors whose
    chromas are both exactly zero compare equal when their lightness
    matches, whatever hue they store.  Otherwise all three components must
    match exactly.  Hashing follows the same rule.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .base import ColorSpace
from .cielab import Cielab
from .engine import lab_to_lch

if TYPE_CHECKING:
    from .ciexyz import Ciexyz
    from .srgb import Srgb

__all__ = ["Cielch"]


@dataclass(frozen=True, slots=True, eq=False)
class Cielch(ColorSpace):
    """
    A color in the CIELCh color space.

    Attributes:
        lightness: L*, valid in [0, 100].
        chroma: Radial distance from the neutral axis, valid when >= 0.
        hue: Angle in radians, unconstrained.
    """

    lightness: float
    chroma: float
    hue: float

    space = "CIELCh"
    key = "cielch"

    @classmethod
    def is_valid(cls, lightness: float, chroma: float, hue: float) -> bool:
        return 0.0 <= lightness <= 100.0 and chroma >= 0.0

    @property
    def hue_degrees(self) -> float:
        return math.degrees(self.hue)

    @classmethod
    def from_cielab(cls, cielab: Cielab) -> "Cielch":
        """Polar form of the (a, b) plane; hue in (-pi, pi]."""
        return cls._unchecked(*lab_to_lch(cielab.lightness, cielab.a, cielab.b))

    @classmethod
    def from_ciexyz(cls, ciexyz: "Ciexyz") -> "Cielch":
        """Convert a CIEXYZ color to CIELCh (via CIELAB)."""
        return cls.from_cielab(Cielab.from_ciexyz(ciexyz))

    @classmethod
    def from_srgb(cls, srgb: "Srgb") -> "Cielch":
        """Convert an sRGB color to CIELCh (via CIELAB)."""
        return cls.from_cielab(Cielab.from_srgb(srgb))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cielch):
            return NotImplemented
        if self.chroma == 0.0 and other.chroma == 0.0:
            return self.lightness == other.lightness
        return (
            self.lightness == other.lightness
            and self.chroma == other.chroma
            and self.hue == other.hue
        )

    def __hash__(self) -> int:
        if self.chroma == 0.0:
            return hash((self.lightness, 0.0))
        return hash((self.lightness, self.chroma, self.hue))
