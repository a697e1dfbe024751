# -*- coding: utf-8 -*-
"""
Tincture: Exact colorimetry between sRGB, CIEXYZ, CIELAB and CIELCh
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: errors.py — Exception hierarchy.

Both failures are terminal for the value in question and recoverable by
the caller.  They derive from ``ValueError`` so that code written against
plain numeric validation keeps working.
"""

from __future__ import annotations

from typing import Tuple


class ColorError(ValueError):
    """Base class for all color conversion and validation errors."""


class OutOfSpecification(ColorError):
    """
    Components lie outside the valid domain of their color space.

    Raised by checked construction only (class constructors,
    ``Srgb.new`` and ``try_from_array``).  Values are never clamped.

    Attributes:
        space: Name of the color space that rejected the values.
        values: The rejected components, as given.
    """

    def __init__(self, space: str, values: Tuple[object, ...]) -> None:
        self.space = space
        self.values = tuple(values)
        super().__init__(
            f"{space} components {self.values} are out of specification"
        )


class OutOfGamut(ColorError):
    """
    A device-independent color has no representation in sRGB.

    Attributes:
        channels: Gamma-compressed (r, g, b) as computed, before rejection.
    """

    def __init__(self, channels: Tuple[float, float, float]) -> None:
        self.channels = tuple(float(c) for c in channels)
        r, g, b = self.channels
        super().__init__(
            f"color is out of gamut: sRGB channels ({r:.6g}, {g:.6g}, {b:.6g}) "
            "are not all within [0, 1]"
        )
