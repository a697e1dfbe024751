# -*- coding: utf-8 -*-
"""
Tincture: Exact colorimetry between sRGB, CIEXYZ, CIELAB and CIELCh
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: srgb.py — Gamma-compressed, device-referred sRGB colors.

Channels are stored as normalized floats.  The canonical representation of
sRGB is 8-bit, so equality and hashing are defined on the quantized byte
triple: two colors that round to the same bytes are the same color.

Byte quantization rounds half away from zero and saturates to [0, 255]
(NaN maps to 0).  ``Srgb(127.5 / 255, 0, 0).red_u8 == 128``.
"""

from __future__ import annotations

import math
import numbers
import warnings
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Sequence, Tuple

from .base import ColorSpace, as_triple
from .engine import gamma_compress, gamma_expand, xyz_to_linear_rgb
from .errors import OutOfSpecification
from .gamut import fit_to_gamut

if TYPE_CHECKING:
    from .cielab import Cielab
    from .cielch import Cielch
    from .ciexyz import Ciexyz

__all__ = ["Srgb", "gamma_expand", "gamma_compress", "to_byte"]


def to_byte(v: float) -> int:
    """Quantize a normalized channel to 0..255 (half away from zero, saturating)."""
    if math.isnan(v):
        return 0
    scaled = v * 255.0
    if scaled <= 0.0:
        return 0
    if scaled >= 255.0:
        return 255
    return int(math.floor(scaled + 0.5))


def _is_byte(v: Any) -> bool:
    return (
        isinstance(v, numbers.Integral)
        and not isinstance(v, bool)
        and 0 <= v <= 255
    )


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class Srgb(ColorSpace):
    """
    A color in the sRGB color space.

    The constructor takes normalized channels and validates them against
    [0, 1].  Use :meth:`new` for the 8-bit form and :meth:`from_array` for
    the unchecked path.

    Attributes:
        red, green, blue: Gamma-compressed channels in [0, 1].
    """

    red: float
    green: float
    blue: float

    space = "sRGB"
    key = "srgb"

    @classmethod
    def is_valid(cls, red: float, green: float, blue: float) -> bool:
        return all(0.0 <= c <= 1.0 for c in (red, green, blue))

    # --------------------------------------------------------------------------
    # Construction
    # --------------------------------------------------------------------------
    @classmethod
    def new(cls, red: int, green: int, blue: int) -> "Srgb":
        """
        Create a color from 8-bit channels.

        Every byte triple is a valid sRGB color.

        Raises:
            OutOfSpecification: If a channel is not an integer in 0..255.
        """
        if not all(_is_byte(c) for c in (red, green, blue)):
            raise OutOfSpecification(cls.space, (red, green, blue))
        return cls._unchecked(red / 255.0, green / 255.0, blue / 255.0)

    @classmethod
    def from_bytes(cls, array: Sequence[int]) -> "Srgb":
        """Create a color from a sequence of three 8-bit channels."""
        if len(array) != 3:
            raise ValueError(f"Expected 3 channels, got {len(array)}")
        red, green, blue = array
        return cls.new(red, green, blue)

    @classmethod
    def from_array(cls, array: Any) -> "Srgb":
        """
        Unchecked construction from three normalized channels.

        Channels outside [0, 1] are kept but trigger a warning, since their
        byte view saturates and downstream conversions are unspecified.
        """
        red, green, blue = as_triple(array)
        if not cls.is_valid(red, green, blue):
            warnings.warn(
                f"Srgb.from_array: channels ({red}, {green}, {blue}) are "
                "outside [0, 1]; byte values will saturate.",
                stacklevel=2,
            )
        return cls._unchecked(red, green, blue)

    # --------------------------------------------------------------------------
    # Accessors
    # --------------------------------------------------------------------------
    @property
    def red_u8(self) -> int:
        return to_byte(self.red)

    @property
    def green_u8(self) -> int:
        return to_byte(self.green)

    @property
    def blue_u8(self) -> int:
        return to_byte(self.blue)

    def to_bytes(self) -> Tuple[int, int, int]:
        """Channels as an (r, g, b) tuple of 8-bit integers."""
        return (self.red_u8, self.green_u8, self.blue_u8)

    @property
    def linear_red(self) -> float:
        """Gamma-expanded red channel."""
        return gamma_expand(self.red)

    @property
    def linear_green(self) -> float:
        """Gamma-expanded green channel."""
        return gamma_expand(self.green)

    @property
    def linear_blue(self) -> float:
        """Gamma-expanded blue channel."""
        return gamma_expand(self.blue)

    # --------------------------------------------------------------------------
    # Conversions into sRGB
    # --------------------------------------------------------------------------
    @classmethod
    def from_ciexyz(cls, ciexyz: "Ciexyz", clip: bool = False) -> "Srgb":
        """
        Convert a CIEXYZ color to sRGB.

        Args:
            ciexyz: Source color (D65 relative).
            clip: If True, clamp out-of-gamut channels to [0, 1] instead of
                  raising.

        Raises:
            OutOfGamut: If any gamma-compressed channel falls outside [0, 1].
        """
        linear = xyz_to_linear_rgb(ciexyz.x, ciexyz.y, ciexyz.z)
        compressed = [gamma_compress(v) for v in linear]
        return cls._unchecked(*fit_to_gamut(compressed, clip=clip))

    @classmethod
    def from_cielab(cls, cielab: "Cielab", clip: bool = False) -> "Srgb":
        """Convert a CIELAB color to sRGB (via CIEXYZ)."""
        from .ciexyz import Ciexyz
        return cls.from_ciexyz(Ciexyz.from_cielab(cielab), clip=clip)

    @classmethod
    def from_cielch(cls, cielch: "Cielch", clip: bool = False) -> "Srgb":
        """Convert a CIELCh color to sRGB (via CIEXYZ)."""
        from .ciexyz import Ciexyz
        return cls.from_ciexyz(Ciexyz.from_cielch(cielch), clip=clip)

    # --------------------------------------------------------------------------
    # Dunder
    # --------------------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Srgb):
            return NotImplemented
        return self.to_bytes() == other.to_bytes()

    def __hash__(self) -> int:
        return hash(self.to_bytes())

    def __repr__(self) -> str:
        r, g, b = self.to_bytes()
        return f"Srgb({r}, {g}, {b})"
