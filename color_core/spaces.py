"""
Numeric conversions between 8-bit sRGB, HSL and OKLCH.
RGB is the hub: every other space is reached through it.
OKLCH goes through linear RGB -> LMS -> OKLab on the way.
"""

import math
import sys
from typing import Tuple

RGBTriple = Tuple[int, int, int]
FloatTriple = Tuple[float, float, float]

EPSILON = sys.float_info.epsilon

# OKLCH chroma below this has no meaningful hue
ACHROMATIC_CHROMA = 1e-8


def clamp(v: float, lo: float, hi: float) -> float:
    """Clamp value between lo and hi."""
    return max(lo, min(hi, v))


def round_half_up(x: float) -> int:
    """Round to nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(x) + 0.5), x))


def to_byte(v: float) -> int:
    """Scale a [0,1] channel to a byte: round, then clamp."""
    return int(clamp(round_half_up(v * 255), 0, 255))


def normalize_hue(h: float) -> float:
    """Normalize hue to [0, 360) range."""
    h = h % 360
    return 0.0 if h >= 360 else h


# HSL -------------------------------------------------------------

def hue_to_rgb(p: float, q: float, t: float) -> float:
    """Evaluate one HSL channel at hue position t (in turns)."""
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h: float, s: float, l: float) -> RGBTriple:
    """Convert HSL to RGB. h in deg, s,l in [0,1]."""
    if s == 0:
        v = to_byte(l)
        return v, v, v

    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q
    h = h / 360

    return (
        to_byte(hue_to_rgb(p, q, h + 1 / 3)),
        to_byte(hue_to_rgb(p, q, h)),
        to_byte(hue_to_rgb(p, q, h - 1 / 3)),
    )


def rgb_to_hsl(r: int, g: int, b: int) -> FloatTriple:
    """Convert RGB bytes to HSL: hue in [0,360), s and l in [0,1]."""
    R, G, B = r / 255, g / 255, b / 255
    max_val = max(R, G, B)
    min_val = min(R, G, B)
    l = (max_val + min_val) / 2

    if abs(max_val - min_val) < EPSILON:
        return 0.0, 0.0, l

    d = max_val - min_val
    s = d / (2 - max_val - min_val) if l > 0.5 else d / (max_val + min_val)

    if max_val == R:
        h = (G - B) / d + (6 if G < B else 0)
    elif max_val == G:
        h = (B - R) / d + 2
    else:
        h = (R - G) / d + 4

    return normalize_hue(h * 60), clamp(s, 0, 1), clamp(l, 0, 1)


# OKLab / OKLCH ---------------------------------------------------

def s_to_lin(c: float) -> float:
    """sRGB companding: encoded [0,1] -> linear [0,1]."""
    return c / 12.92 if c <= 0.04045 else ((c + 0.055) / 1.055) ** 2.4


def lin_to_s(c: float) -> float:
    """Linear [0,1] -> sRGB encoded [0,1]."""
    return 12.92 * c if c <= 0.0031308 else 1.055 * (c ** (1 / 2.4)) - 0.055


def rgb_to_oklab(r: int, g: int, b: int) -> FloatTriple:
    """Convert RGB bytes to OKLab."""
    # sRGB -> linear
    R, G, B = s_to_lin(r / 255), s_to_lin(g / 255), s_to_lin(b / 255)

    l = (0.4122214708 * R + 0.5363325363 * G + 0.0514459929 * B) ** (1 / 3)
    m = (0.2119034982 * R + 0.6806995451 * G + 0.1073969566 * B) ** (1 / 3)
    s = (0.0883024619 * R + 0.2817188376 * G + 0.6299787005 * B) ** (1 / 3)

    L = 0.2104542553 * l + 0.7936177850 * m - 0.0040720468 * s
    a = 1.9779984951 * l - 2.4285922050 * m + 0.4505937099 * s
    b_ = 0.0259040371 * l + 0.7827717662 * m - 0.8086757660 * s

    return L, a, b_


def oklab_to_rgb(L: float, a: float, b: float) -> RGBTriple:
    """Convert OKLab to RGB bytes, clamping out-of-gamut light."""
    # OKLab -> OKLMS -> linear sRGB -> compand
    l_ = L + 0.3963377774 * a + 0.2158037573 * b
    m_ = L - 0.1055613458 * a - 0.0638541728 * b
    s_ = L - 0.0894841775 * a - 1.2914855480 * b

    l = l_ * l_ * l_
    m = m_ * m_ * m_
    s = s_ * s_ * s_

    R = +4.0767416621 * l - 3.3077115913 * m + 0.2309699292 * s
    G = -1.2684380046 * l + 2.6097574011 * m - 0.3413193965 * s
    B = -0.0041960863 * l - 0.7034186147 * m + 1.7076147010 * s

    return (
        to_byte(lin_to_s(clamp(R, 0, 1))),
        to_byte(lin_to_s(clamp(G, 0, 1))),
        to_byte(lin_to_s(clamp(B, 0, 1))),
    )


def rgb_to_oklch(r: int, g: int, b: int) -> FloatTriple:
    """Convert RGB bytes to OKLCH: L in [0,1], C >= 0, H in [0,360)."""
    L, a, b_ = rgb_to_oklab(r, g, b)
    C = math.sqrt(a * a + b_ * b_)
    if C < ACHROMATIC_CHROMA:
        h = 0.0
    else:
        h = math.degrees(math.atan2(b_, a))
        if h < 0:
            h += 360
    return clamp(L, 0, 1), C, normalize_hue(h)


def oklch_to_rgb(L: float, C: float, H: float) -> RGBTriple:
    """Convert OKLCH to RGB bytes. C is not upper-bounded."""
    hr = math.radians(H)
    return oklab_to_rgb(L, C * math.cos(hr), C * math.sin(hr))
