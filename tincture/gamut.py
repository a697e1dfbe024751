# -*- coding: utf-8 -*-
"""
Tincture: Exact colorimetry between sRGB, CIEXYZ, CIELAB and CIELCh
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Module: gamut.py — sRGB gamut check and its runtime configuration.
"""

from __future__ import annotations

import math
from typing import Optional, Sequence

import numpy as np

from .engine import Triple
from .errors import OutOfGamut

__all__ = [
    "DEFAULT_GAMUT_TOLERANCE",
    "set_gamut_tolerance",
    "get_gamut_tolerance",
    "in_gamut",
    "fit_to_gamut",
]


# --- Runtime Configuration ---
# Compressed channels that miss [0, 1] by at most this much are treated as
# in gamut and snapped onto the boundary.  Exact boundary colors (black,
# white, primaries) pick up a few ulps through the XYZ matrices; without a
# tolerance they would fail their own round trip.
#
# Toggle at runtime via:
#     import tincture
#     tincture.set_gamut_tolerance(0.0)   # strict [0, 1]
#     tincture.set_gamut_tolerance(1e-9)  # back to default
DEFAULT_GAMUT_TOLERANCE: float = 1e-9
_GAMUT_TOLERANCE: float = DEFAULT_GAMUT_TOLERANCE


def set_gamut_tolerance(value: float = DEFAULT_GAMUT_TOLERANCE) -> None:
    """
    Set the tolerance used when checking sRGB channels against [0, 1].

    Args:
        value: Non-negative, finite slack in compressed channel units.

    Raises:
        ValueError: If *value* is negative or not finite.
    """
    global _GAMUT_TOLERANCE
    value = float(value)
    if not math.isfinite(value) or value < 0.0:
        raise ValueError(f"Gamut tolerance must be finite and >= 0, got {value}")
    _GAMUT_TOLERANCE = value


def get_gamut_tolerance() -> float:
    """Return the active gamut tolerance."""
    return _GAMUT_TOLERANCE


def in_gamut(r: float, g: float, b: float,
             tolerance: Optional[float] = None) -> bool:
    """True if every compressed channel lies in [0, 1] (within tolerance)."""
    tol = _GAMUT_TOLERANCE if tolerance is None else tolerance
    return all(-tol <= c <= 1.0 + tol for c in (r, g, b))


def fit_to_gamut(channels: Sequence[float], clip: bool = False) -> Triple:
    """
    Validate compressed sRGB channels as a whole.

    The check is atomic: a single offending channel rejects the color.

    Args:
        channels: Gamma-compressed (r, g, b).
        clip: If True, clamp out-of-gamut channels to [0, 1] instead of
              raising.  Non-finite channels are rejected either way.

    Returns:
        (r, g, b) within [0, 1].

    Raises:
        OutOfGamut: If any channel is outside [0, 1] and *clip* is False,
            or if any channel is NaN or infinite.
    """
    arr = np.asarray(channels, dtype=np.float64)
    if not np.all(np.isfinite(arr)):
        raise OutOfGamut(tuple(arr))
    if not clip and not in_gamut(*arr):
        raise OutOfGamut(tuple(arr))
    r, g, b = np.clip(arr, 0.0, 1.0)
    return float(r), float(g), float(b)
