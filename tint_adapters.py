# -*- coding: utf-8 -*-
"""
Tint: Routing colour through the spaces between
Copyright (c) 2026 opticsWolf

SPDX-License-Identifier: LGPL-3.0-or-later

Adapters: one graph edge per kernel
===================================
Each function in this module implements exactly one edge of the conversion
graph with the signature ``adapter(inp, out) -> None`` on (3,) float32 arrays.

Kernel contract:
1. Alias safety: ``inp`` and ``out`` may be the same array. Every kernel reads
   all three channels into locals before writing any output slot.
2. Totality: no kernel raises. Degenerate inputs (zero chroma, negative linear
   light, achromatic HSL/HWB corners) are handled by explicit branches.
3. No clamping: values outside a space's nominal range pass through
   untouched. Gamut enforcement is a separate, explicit operation.

All kernels are compiled with Numba (``fastmath=True``). Arithmetic happens in
float64 and is rounded to float32 only when stored.

References:
    - IEC 61966-2-1:1999 (sRGB Standard)
    - CIE 15:2004 "Colorimetry"
    - Ottosson, B. (2020). "A perceptual color space for image processing".
    - Lam, K. M. (1985). Bradford chromatic adaptation transform.
"""

import math

import numpy as np
from numba import njit
from typing import Final

from tint_pool import ColorBuffer

__all__ = [
    # --- Constants ---
    "REF_WHITE_D65",
    "REF_WHITE_D50",
    "LAB_EPSILON",
    "LAB_KAPPA",
    # --- Matrices ---
    "M_SRGB_TO_XYZ",
    "M_XYZ_TO_SRGB",
    "M1_XYZ_TO_LMS_OKLAB",
    "M1_LMS_TO_XYZ_OKLAB",
    "M2_LMS_TO_LAB_OKLAB",
    "M2_LAB_TO_LMS_OKLAB",
    "M_BRADFORD",
    "M_BRADFORD_INV",
    "GAIN_D65_TO_D50",
    "GAIN_D50_TO_D65",
    # --- Kernels ---
    "mat_vec",
    "rgb_to_lrgb",
    "lrgb_to_rgb",
    "lrgb_to_xyz65",
    "xyz65_to_lrgb",
    "rgb_to_hsv",
    "hsv_to_rgb",
    "hsv_to_hsl",
    "hsl_to_hsv",
    "hsv_to_hwb",
    "hwb_to_hsv",
    "lab_to_lch",
    "lch_to_lab",
    "oklab_to_oklch",
    "oklch_to_oklab",
    "xyz50_to_lab",
    "lab_to_xyz50",
    "xyz65_to_oklab",
    "oklab_to_xyz65",
    "xyz65_to_xyz50",
    "xyz50_to_xyz65",
]

# --- Constants & Matrices ---

# Standard Illuminants (Y=1.0)
REF_WHITE_D65: Final[np.ndarray] = np.array([0.95047, 1.00000, 1.08883], dtype=np.float64)
REF_WHITE_D50: Final[np.ndarray] = np.array([0.96422, 1.00000, 0.82521], dtype=np.float64)

_WHITE_D50_X: Final[float] = 0.96422
_WHITE_D50_Z: Final[float] = 0.82521

# Exact rational CIE 1976 constants.
LAB_EPSILON: Final[float] = 216.0 / 24389.0  # 0.008856451679035631
LAB_KAPPA: Final[float] = 24389.0 / 27.0     # 903.2962962962963

_DEG2RAD: Final[float] = math.pi / 180.0
_RAD2DEG: Final[float] = 180.0 / math.pi

# sRGB primaries, IEC 61966-2-1. The inverse is derived rather than tabulated
# so that rgb -> xyz65 -> rgb closes to float64 precision.
M_SRGB_TO_XYZ: Final[np.ndarray] = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
], dtype=np.float64)
M_XYZ_TO_SRGB: Final[np.ndarray] = np.linalg.inv(M_SRGB_TO_XYZ)

# Oklab, XYZ oriented.
# M1: XYZ (D65) to cone response (LMS)
M1_XYZ_TO_LMS_OKLAB: Final[np.ndarray] = np.array([
    [0.8189330101, 0.3618667424, -0.1288597137],
    [0.0329845436, 0.9293118715, 0.0361456387],
    [0.0482003018, 0.2643662691, 0.6338517070],
], dtype=np.float64)
M1_LMS_TO_XYZ_OKLAB: Final[np.ndarray] = np.linalg.inv(M1_XYZ_TO_LMS_OKLAB)

# M2: LMS (cube-rooted) to Oklab
M2_LMS_TO_LAB_OKLAB: Final[np.ndarray] = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
], dtype=np.float64)
M2_LAB_TO_LMS_OKLAB: Final[np.ndarray] = np.linalg.inv(M2_LMS_TO_LAB_OKLAB)

# Bradford cone-response matrix.
M_BRADFORD: Final[np.ndarray] = np.array([
    [ 0.8951000,  0.2664000, -0.1614000],
    [-0.7502000,  1.7135000,  0.0367000],
    [ 0.0389000, -0.0685000,  1.0296000],
], dtype=np.float64)
M_BRADFORD_INV: Final[np.ndarray] = np.linalg.inv(M_BRADFORD)

# Von Kries gains between the two adapted whites, computed once at import.
_LMS_D65 = M_BRADFORD @ REF_WHITE_D65
_LMS_D50 = M_BRADFORD @ REF_WHITE_D50
GAIN_D65_TO_D50: Final[np.ndarray] = _LMS_D50 / _LMS_D65
GAIN_D50_TO_D65: Final[np.ndarray] = _LMS_D65 / _LMS_D50


# =============================================================================
# 1. SHARED HELPERS
# =============================================================================

@njit(cache=True, inline='always')
def mat_vec(m, v, out) -> None:
    """
    3x3 matrix times column vector, ``out = m @ v``.

    ``v`` and ``out`` may alias; the input is staged through locals.
    """
    v0 = v[0]
    v1 = v[1]
    v2 = v[2]
    out[0] = m[0, 0] * v0 + m[0, 1] * v1 + m[0, 2] * v2
    out[1] = m[1, 0] * v0 + m[1, 1] * v1 + m[1, 2] * v2
    out[2] = m[2, 0] * v0 + m[2, 1] * v1 + m[2, 2] * v2


@njit(cache=True, inline='always')
def _signed_cbrt(x: float) -> float:
    # LMS can go negative for out-of-gamut input
    return math.copysign(abs(x) ** (1.0 / 3.0), x)


# =============================================================================
# 2. GAMMA (rgb <-> lrgb)
# =============================================================================

@njit(cache=True, fastmath=True)
def rgb_to_lrgb(inp: ColorBuffer, out: ColorBuffer) -> None:
    """sRGB EOTF (decode). Standard: IEC 61966-2-1"""
    for i in range(3):
        v = inp[i]
        if v <= 0.04045:
            out[i] = v / 12.92
        else:
            out[i] = ((v + 0.055) / 1.055) ** 2.4


@njit(cache=True, fastmath=True)
def lrgb_to_rgb(inp: ColorBuffer, out: ColorBuffer) -> None:
    """
    sRGB OETF (encode).

    Negative linear light is clamped to 0 before exponentiation; a fractional
    power of a negative number is NaN.
    """
    for i in range(3):
        v = inp[i]
        if v < 0.0:
            v = 0.0
        if v <= 0.0031308:
            out[i] = 12.92 * v
        else:
            out[i] = 1.055 * (v ** (1.0 / 2.4)) - 0.055


# =============================================================================
# 3. LINEAR RGB <-> XYZ D65
# =============================================================================

@njit(cache=True, fastmath=True)
def lrgb_to_xyz65(inp: ColorBuffer, out: ColorBuffer) -> None:
    mat_vec(M_SRGB_TO_XYZ, inp, out)


@njit(cache=True, fastmath=True)
def xyz65_to_lrgb(inp: ColorBuffer, out: ColorBuffer) -> None:
    mat_vec(M_XYZ_TO_SRGB, inp, out)


# =============================================================================
# 4. sRGB CYLINDRICAL FAMILY (rgb <-> hsv <-> hsl | hwb)
# =============================================================================

@njit(cache=True, fastmath=True)
def rgb_to_hsv(inp: ColorBuffer, out: ColorBuffer) -> None:
    """
    rgb -> hsv with H in degrees [0, 360), S and V in 0..1.

    Zero chroma yields H=0; zero value yields S=0.
    """
    r = inp[0]
    g = inp[1]
    b = inp[2]
    v = max(r, g, b)
    c = v - min(r, g, b)

    h = 0.0
    s = 0.0
    if v != 0.0:
        s = c / v

    if c != 0.0:
        if v == r:
            h = (g - b) / c
        elif v == g:
            h = (b - r) / c + 2.0
        else:
            h = (r - g) / c + 4.0
        h *= 60.0
        if h < 0.0:
            h += 360.0

    out[0] = h
    out[1] = s
    out[2] = v


@njit(cache=True, fastmath=True)
def hsv_to_rgb(inp: ColorBuffer, out: ColorBuffer) -> None:
    h = inp[0] % 360.0
    s = inp[1]
    v = inp[2]

    if s == 0.0:
        out[0] = v
        out[1] = v
        out[2] = v
        return

    h60 = h / 60.0
    c = v * s
    x = c * (1.0 - abs((h60 % 2.0) - 1.0))
    m = v - c
    sector = int(math.floor(h60))
    if sector > 5:
        sector = 5

    r = 0.0
    g = 0.0
    b = 0.0
    if sector == 0:
        r = c
        g = x
    elif sector == 1:
        r = x
        g = c
    elif sector == 2:
        g = c
        b = x
    elif sector == 3:
        g = x
        b = c
    elif sector == 4:
        r = x
        b = c
    else:
        r = c
        b = x

    out[0] = r + m
    out[1] = g + m
    out[2] = b + m


@njit(cache=True, fastmath=True)
def hsv_to_hsl(inp: ColorBuffer, out: ColorBuffer) -> None:
    h = inp[0]
    s = inp[1]
    v = inp[2]
    lightness = v * (1.0 - s * 0.5)
    s_l = 0.0
    # l in {0, 1} is black or white, saturation undefined
    if 0.0 < lightness < 1.0:
        s_l = (v - lightness) / min(lightness, 1.0 - lightness)
    out[0] = h
    out[1] = s_l
    out[2] = lightness


@njit(cache=True, fastmath=True)
def hsl_to_hsv(inp: ColorBuffer, out: ColorBuffer) -> None:
    h = inp[0]
    s = inp[1]
    lightness = inp[2]
    v = lightness + s * min(lightness, 1.0 - lightness)
    s_v = 0.0
    if v != 0.0:
        s_v = 2.0 * (1.0 - lightness / v)
    out[0] = h
    out[1] = s_v
    out[2] = v


@njit(cache=True, fastmath=True)
def hsv_to_hwb(inp: ColorBuffer, out: ColorBuffer) -> None:
    h = inp[0]
    s = inp[1]
    v = inp[2]
    out[0] = h
    out[1] = v * (1.0 - s)
    out[2] = 1.0 - v


@njit(cache=True, fastmath=True)
def hwb_to_hsv(inp: ColorBuffer, out: ColorBuffer) -> None:
    """
    hwb -> hsv.

    When whiteness + blackness >= 1 the colour is a grey; both are scaled
    down proportionally so that they sum to exactly 1.
    """
    h = inp[0]
    w = inp[1]
    bk = inp[2]
    total = w + bk
    if total >= 1.0:
        w = w / total
        bk = bk / total
    v = 1.0 - bk
    s = 0.0
    if v != 0.0:
        s = (v - w) / v
    if s < 0.0:
        s = 0.0
    out[0] = h
    out[1] = s
    out[2] = v


# =============================================================================
# 5. POLAR FACES (lab <-> lch, oklab <-> oklch)
# =============================================================================

@njit(cache=True, fastmath=True)
def _to_polar(inp: ColorBuffer, out: ColorBuffer) -> None:
    lightness = inp[0]
    a = inp[1]
    b = inp[2]
    chroma = math.hypot(a, b)
    hue = math.atan2(b, a) * _RAD2DEG
    if hue < 0.0:
        hue += 360.0
    out[0] = lightness
    out[1] = chroma
    out[2] = hue


@njit(cache=True, fastmath=True)
def _to_cartesian(inp: ColorBuffer, out: ColorBuffer) -> None:
    lightness = inp[0]
    chroma = inp[1]
    h_rad = inp[2] * _DEG2RAD
    out[0] = lightness
    out[1] = chroma * math.cos(h_rad)
    out[2] = chroma * math.sin(h_rad)


@njit(cache=True, fastmath=True)
def lab_to_lch(inp: ColorBuffer, out: ColorBuffer) -> None:
    _to_polar(inp, out)


@njit(cache=True, fastmath=True)
def lch_to_lab(inp: ColorBuffer, out: ColorBuffer) -> None:
    _to_cartesian(inp, out)


@njit(cache=True, fastmath=True)
def oklab_to_oklch(inp: ColorBuffer, out: ColorBuffer) -> None:
    _to_polar(inp, out)


@njit(cache=True, fastmath=True)
def oklch_to_oklab(inp: ColorBuffer, out: ColorBuffer) -> None:
    _to_cartesian(inp, out)


# =============================================================================
# 6. CIELAB (xyz50 <-> lab)
# =============================================================================

@njit(cache=True, inline='always')
def _lab_f(t: float) -> float:
    if t > LAB_EPSILON:
        return t ** (1.0 / 3.0)
    return (LAB_KAPPA * t + 16.0) / 116.0


@njit(cache=True, inline='always')
def _lab_f_inv(t: float) -> float:
    # Multiplication form keeps the threshold region well conditioned
    t3 = t * t * t
    if t3 > LAB_EPSILON:
        return t3
    return (116.0 * t - 16.0) / LAB_KAPPA


@njit(cache=True, fastmath=True)
def xyz50_to_lab(inp: ColorBuffer, out: ColorBuffer) -> None:
    """XYZ (D50) -> CIELAB, L on the 0..100 scale."""
    fx = _lab_f(inp[0] / _WHITE_D50_X)
    fy = _lab_f(inp[1])
    fz = _lab_f(inp[2] / _WHITE_D50_Z)
    out[0] = 116.0 * fy - 16.0
    out[1] = 500.0 * (fx - fy)
    out[2] = 200.0 * (fy - fz)


@njit(cache=True, fastmath=True)
def lab_to_xyz50(inp: ColorBuffer, out: ColorBuffer) -> None:
    lightness = inp[0]
    fy = (lightness + 16.0) / 116.0
    fx = inp[1] / 500.0 + fy
    fz = fy - inp[2] / 200.0

    if lightness > LAB_KAPPA * LAB_EPSILON:
        y = fy * fy * fy
    else:
        y = lightness / LAB_KAPPA

    out[0] = _lab_f_inv(fx) * _WHITE_D50_X
    out[1] = y
    out[2] = _lab_f_inv(fz) * _WHITE_D50_Z


# =============================================================================
# 7. OKLAB (xyz65 <-> oklab)
# =============================================================================

@njit(cache=True, fastmath=True)
def xyz65_to_oklab(inp: ColorBuffer, out: ColorBuffer) -> None:
    x = inp[0]
    y = inp[1]
    z = inp[2]
    m1 = M1_XYZ_TO_LMS_OKLAB
    m2 = M2_LMS_TO_LAB_OKLAB

    lc = _signed_cbrt(m1[0, 0] * x + m1[0, 1] * y + m1[0, 2] * z)
    mc = _signed_cbrt(m1[1, 0] * x + m1[1, 1] * y + m1[1, 2] * z)
    sc = _signed_cbrt(m1[2, 0] * x + m1[2, 1] * y + m1[2, 2] * z)

    out[0] = m2[0, 0] * lc + m2[0, 1] * mc + m2[0, 2] * sc
    out[1] = m2[1, 0] * lc + m2[1, 1] * mc + m2[1, 2] * sc
    out[2] = m2[2, 0] * lc + m2[2, 1] * mc + m2[2, 2] * sc


@njit(cache=True, fastmath=True)
def oklab_to_xyz65(inp: ColorBuffer, out: ColorBuffer) -> None:
    lightness = inp[0]
    a = inp[1]
    b = inp[2]
    m2i = M2_LAB_TO_LMS_OKLAB
    m1i = M1_LMS_TO_XYZ_OKLAB

    lc = m2i[0, 0] * lightness + m2i[0, 1] * a + m2i[0, 2] * b
    mc = m2i[1, 0] * lightness + m2i[1, 1] * a + m2i[1, 2] * b
    sc = m2i[2, 0] * lightness + m2i[2, 1] * a + m2i[2, 2] * b

    l3 = lc * lc * lc
    m3 = mc * mc * mc
    s3 = sc * sc * sc

    out[0] = m1i[0, 0] * l3 + m1i[0, 1] * m3 + m1i[0, 2] * s3
    out[1] = m1i[1, 0] * l3 + m1i[1, 1] * m3 + m1i[1, 2] * s3
    out[2] = m1i[2, 0] * l3 + m1i[2, 1] * m3 + m1i[2, 2] * s3


# =============================================================================
# 8. BRADFORD CAT (xyz65 <-> xyz50)
# =============================================================================

@njit(cache=True, inline='always')
def _bradford(inp, out, gain) -> None:
    mb = M_BRADFORD
    mbi = M_BRADFORD_INV
    x = inp[0]
    y = inp[1]
    z = inp[2]

    lc = (mb[0, 0] * x + mb[0, 1] * y + mb[0, 2] * z) * gain[0]
    mc = (mb[1, 0] * x + mb[1, 1] * y + mb[1, 2] * z) * gain[1]
    sc = (mb[2, 0] * x + mb[2, 1] * y + mb[2, 2] * z) * gain[2]

    out[0] = mbi[0, 0] * lc + mbi[0, 1] * mc + mbi[0, 2] * sc
    out[1] = mbi[1, 0] * lc + mbi[1, 1] * mc + mbi[1, 2] * sc
    out[2] = mbi[2, 0] * lc + mbi[2, 1] * mc + mbi[2, 2] * sc


@njit(cache=True, fastmath=True)
def xyz65_to_xyz50(inp: ColorBuffer, out: ColorBuffer) -> None:
    _bradford(inp, out, GAIN_D65_TO_D50)


@njit(cache=True, fastmath=True)
def xyz50_to_xyz65(inp: ColorBuffer, out: ColorBuffer) -> None:
    _bradford(inp, out, GAIN_D50_TO_D65)
