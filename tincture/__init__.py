# -*- coding: utf-8 -*-
"""
Tincture: Exact colorimetry between sRGB, CIEXYZ, CIELAB and CIELCh
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Public entrypoint.  Re-exports the color value types, the D65 white point,
the conversion matrices, the sRGB transfer functions, the error types and
the gamut configuration.

    >>> from tincture import Srgb, Cielab
    >>> lab = Cielab.from_srgb(Srgb.new(10, 20, 30))
    >>> Srgb.from_cielab(lab)
    Srgb(10, 20, 30)
"""

from .__about__ import __version__
from .base import ColorSpace
from .cielab import Cielab
from .cielch import Cielch
from .ciexyz import D65, Ciexyz
from .engine import M_SRGB_TO_XYZ, M_XYZ_TO_SRGB, gamma_compress, gamma_expand
from .errors import ColorError, OutOfGamut, OutOfSpecification
from .gamut import get_gamut_tolerance, in_gamut, set_gamut_tolerance
from .srgb import Srgb

__all__ = [
    "__version__",

    # --- Color values ---
    "ColorSpace",
    "Srgb",
    "Ciexyz",
    "Cielab",
    "Cielch",

    # --- Constants ---
    "D65",
    "M_SRGB_TO_XYZ",
    "M_XYZ_TO_SRGB",

    # --- Transfer functions ---
    "gamma_expand",
    "gamma_compress",

    # --- Errors ---
    "ColorError",
    "OutOfSpecification",
    "OutOfGamut",

    # --- Gamut configuration ---
    "in_gamut",
    "set_gamut_tolerance",
    "get_gamut_tolerance",
]
