# -*- coding: utf-8 -*-
"""
Tincture: Exact colorimetry between sRGB, CIEXYZ, CIELAB and CIELCh
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Scalar Color Engine
===================
Closed-form transforms shared by the color value types.

All kernels operate on one color at a time and are compiled with Numba in
strict IEEE 754 mode (``fastmath=False``).  Strict mode is mandatory here:
the D65 white point is derived by pushing linear white through the same
matrix kernel that converts every other color, and the white / black
invariants only hold bit for bit when no floating-point reassociation
takes place.

Matrices are built from exact rational definitions so that sRGB -> XYZ ->
sRGB round trips stay at machine precision.

References:
    - CIE 15:2004 "Colorimetry"
    - IEC 61966-2-1:1999 (sRGB Standard)
"""

from typing import Final, Tuple, TypeAlias

import numpy as np
from numba import njit

__all__ = [
    # --- Type Aliases ---
    "Triple",

    # --- Constants ---
    "LAB_DELTA",
    "LAB_EPSILON",
    "LAB_SLOPE",
    "LAB_OFFSET",

    # --- Matrices ---
    "M_SRGB_TO_XYZ",
    "M_XYZ_TO_SRGB",

    # --- Transfer functions ---
    "gamma_expand",
    "gamma_compress",
    "lab_f",
    "lab_f_inv",

    # --- Kernels ---
    "linear_rgb_to_xyz",
    "xyz_to_linear_rgb",
    "xyz_to_lab",
    "lab_to_xyz",
    "lab_to_lch",
    "lch_to_lab",
]

# --- Type Aliases ---
Triple: TypeAlias = Tuple[float, float, float]


# =============================================================================
# 1. CONSTANTS & MATRICES
# =============================================================================

# sRGB <-> XYZ matrices as exact quotients (row-major, column vectors).
# Both are stored read-only and passed to the matrix kernel as arguments.
_M_SRGB_TO_XYZ_BASE = np.array([
    [506752.0 / 1228815.0,  87881.0 / 245763.0,   12673.0 / 70218.0],
    [87098.0 / 409605.0,    175762.0 / 245763.0,  12673.0 / 175545.0],
    [7918.0 / 409605.0,     87881.0 / 737289.0,   1001167.0 / 1053270.0],
], dtype=np.float64)
_M_SRGB_TO_XYZ_BASE.setflags(write=False)
M_SRGB_TO_XYZ: Final[np.ndarray] = _M_SRGB_TO_XYZ_BASE

_M_XYZ_TO_SRGB_BASE = np.array([
    [12831.0 / 3959.0,      -329.0 / 214.0,       -1974.0 / 3959.0],
    [-851781.0 / 878810.0,  1648619.0 / 878810.0, 36519.0 / 878810.0],
    [705.0 / 12673.0,       -2585.0 / 12673.0,    705.0 / 667.0],
], dtype=np.float64)
_M_XYZ_TO_SRGB_BASE.setflags(write=False)
M_XYZ_TO_SRGB: Final[np.ndarray] = _M_XYZ_TO_SRGB_BASE

# --- Exact Rational Math Constants ---
# Defined by CIE 1976 for the Lab transformation.
# delta = 6/29 is the threshold where the function switches from cubic to linear.
LAB_DELTA: Final[float] = 6.0 / 29.0
LAB_EPSILON: Final[float] = LAB_DELTA * LAB_DELTA * LAB_DELTA  # ~0.008856
LAB_SLOPE: Final[float] = 3.0 * LAB_DELTA * LAB_DELTA          # ~0.128419
LAB_OFFSET: Final[float] = 4.0 / 29.0

# IEC 61966-2-1 transfer function constants.
_SRGB_GAMMA: Final[float] = 2.4
_SRGB_EXPAND_THRESHOLD: Final[float] = 0.04045
_SRGB_COMPRESS_THRESHOLD: Final[float] = 0.0031308
_SRGB_LINEAR_SLOPE: Final[float] = 12.92


# =============================================================================
# 2. TRANSFER FUNCTIONS
# =============================================================================

@njit(cache=True, fastmath=False)
def gamma_expand(v: float) -> float:
    """
    Applies the sRGB EOTF (gamma expansion, compressed -> linear).

    Standard: IEC 61966-2-1

    Total over the reals: values outside [0, 1] are expanded as well and
    simply land outside the linear unit range.
    """
    if v > _SRGB_EXPAND_THRESHOLD:
        return ((v + 0.055) / 1.055) ** _SRGB_GAMMA
    return v / _SRGB_LINEAR_SLOPE


@njit(cache=True, fastmath=False)
def gamma_compress(v: float) -> float:
    """
    Applies the sRGB OETF (gamma compression, linear -> compressed).

    Standard: IEC 61966-2-1

    Negative inputs always take the linear segment, so the power branch
    never sees a negative base.
    """
    if v > _SRGB_COMPRESS_THRESHOLD:
        return 1.055 * v ** (1.0 / _SRGB_GAMMA) - 0.055
    return v * _SRGB_LINEAR_SLOPE


@njit(cache=True, fastmath=False)
def lab_f(t: float) -> float:
    """
    Non-linear transfer function f(t) for CIELAB.

    This is the "cube root" part of the Lab transform, with a linear slope
    near zero to prevent infinite slope.
    """
    if t > LAB_EPSILON:
        return t ** (1.0 / 3.0)
    return t / LAB_SLOPE + LAB_OFFSET


@njit(cache=True, fastmath=False)
def lab_f_inv(t: float) -> float:
    """Inverse of :func:`lab_f`."""
    if t > LAB_DELTA:
        return t * t * t
    return LAB_SLOPE * (t - LAB_OFFSET)


# =============================================================================
# 3. KERNELS
# =============================================================================

@njit(cache=True, fastmath=False)
def _apply_matrix(m: np.ndarray, c0: float, c1: float, c2: float) -> Triple:
    """Row-major 3x3 matrix times a column vector, summed left to right."""
    return (
        c0 * m[0, 0] + c1 * m[0, 1] + c2 * m[0, 2],
        c0 * m[1, 0] + c1 * m[1, 1] + c2 * m[1, 2],
        c0 * m[2, 0] + c1 * m[2, 1] + c2 * m[2, 2],
    )


def linear_rgb_to_xyz(lr: float, lg: float, lb: float) -> Triple:
    """Linear sRGB -> XYZ (D65 relative)."""
    return _apply_matrix(M_SRGB_TO_XYZ, lr, lg, lb)


def xyz_to_linear_rgb(x: float, y: float, z: float) -> Triple:
    """XYZ (D65 relative) -> linear sRGB, unclipped."""
    return _apply_matrix(M_XYZ_TO_SRGB, x, y, z)


@njit(cache=True, fastmath=False)
def xyz_to_lab(x: float, y: float, z: float,
               xn: float, yn: float, zn: float) -> Triple:
    """
    CIE 1976 forward transform XYZ -> L*a*b*.

    Args:
        x, y, z: Tristimulus values.
        xn, yn, zn: Reference white.

    Returns:
        (L, a, b)
    """
    fx = lab_f(x / xn)
    fy = lab_f(y / yn)
    fz = lab_f(z / zn)
    return (116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz))


@njit(cache=True, fastmath=False)
def lab_to_xyz(lightness: float, a: float, b: float,
               xn: float, yn: float, zn: float) -> Triple:
    """
    CIE 1976 inverse transform L*a*b* -> XYZ.

    Args:
        lightness, a, b: Lab coordinates.
        xn, yn, zn: Reference white.

    Returns:
        (X, Y, Z)
    """
    p = (lightness + 16.0) / 116.0
    return (
        xn * lab_f_inv(p + a / 500.0),
        yn * lab_f_inv(p),
        zn * lab_f_inv(p - b / 200.0),
    )


@njit(cache=True, fastmath=False)
def lab_to_lch(lightness: float, a: float, b: float) -> Triple:
    """Lab -> LCh, hue in radians within (-pi, pi]."""
    return (lightness, np.sqrt(a * a + b * b), np.arctan2(b, a))


@njit(cache=True, fastmath=False)
def lch_to_lab(lightness: float, chroma: float, hue: float) -> Triple:
    """LCh (hue in radians) -> Lab."""
    return (lightness, chroma * np.cos(hue), chroma * np.sin(hue))
