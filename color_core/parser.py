"""
Parsing of color notations into a Color.
Supported: hex 3/4/6/8 (leading # optional), rgb/rgba (legacy comma syntax),
hsl/hsla (legacy comma syntax), oklch (space syntax, optional / alpha).

Each notation has its own ``parse_*`` function returning ``Optional[Color]``.
``parse`` tries them in a fixed order and the first hit wins. Out-of-range
components make a single attempt return None, so the chain moves on and the
caller only ever sees ColorParseError.
"""

import logging
import re
from typing import Callable, List, Optional

from .errors import ColorParseError
from .model import Color
from .spaces import hsl_to_rgb, oklch_to_rgb

logger = logging.getLogger(__name__)

# Regular expression patterns
ws = r"\s*"
dec = r"\d{1,3}(?:\.\d+)?"
loose = r"[\d.]+"

HEX_RE = re.compile(r"#?([0-9a-f]{3}|[0-9a-f]{4}|[0-9a-f]{6}|[0-9a-f]{8})", re.IGNORECASE)

RGB_RE = re.compile(
    f"rgba?{ws}\\({ws}(\\d{{1,3}}){ws},{ws}(\\d{{1,3}}){ws},{ws}(\\d{{1,3}}){ws}(?:,{ws}({loose}))?{ws}\\)",
    re.IGNORECASE | re.ASCII,
)

HSL_RE = re.compile(
    f"hsla?{ws}\\({ws}({dec}){ws},{ws}({dec})%?{ws},{ws}({dec})%?{ws}(?:,{ws}({loose}))?{ws}\\)",
    re.IGNORECASE | re.ASCII,
)

OKLCH_RE = re.compile(
    f"oklch{ws}\\({ws}({loose})%?\\s+({loose})\\s+({loose}){ws}(?:/{ws}({loose}))?{ws}\\)",
    re.IGNORECASE | re.ASCII,
)


def parse_float(s: str) -> Optional[float]:
    try:
        return float(s)
    except ValueError:
        return None


def parse_alpha(s: Optional[str]) -> float:
    """Alpha is lenient: absent or malformed means opaque."""
    if s is None:
        return 1.0
    a = parse_float(s)
    return 1.0 if a is None else a


def parse_byte(s: str) -> Optional[int]:
    v = int(s)
    return v if v <= 255 else None


# HEX -------------------------------------------------------------

def parse_hex(s: str) -> Optional[Color]:
    """Parse hex color string to Color."""
    m = HEX_RE.fullmatch(s)
    if not m:
        return None
    h = m.group(1)
    if len(h) in (3, 4):
        h = "".join(c + c for c in h)
    r = int(h[0:2], 16)
    g = int(h[2:4], 16)
    b = int(h[4:6], 16)
    a = int(h[6:8], 16) / 255 if len(h) == 8 else 1.0
    return Color(r=r, g=g, b=b, a=a)


# RGB -------------------------------------------------------------

def parse_rgb(s: str) -> Optional[Color]:
    """Parse rgb()/rgba() color string to Color."""
    m = RGB_RE.fullmatch(s)
    if not m:
        return None
    r_val, g_val, b_val, a_val = m.groups()
    r, g, b = parse_byte(r_val), parse_byte(g_val), parse_byte(b_val)
    if r is None or g is None or b is None:
        return None
    return Color(r=r, g=g, b=b, a=parse_alpha(a_val))


# HSL -------------------------------------------------------------

def parse_hsl(s: str) -> Optional[Color]:
    """Parse hsl()/hsla() color string to Color."""
    m = HSL_RE.fullmatch(s)
    if not m:
        return None
    h_val, s_val, l_val, a_val = m.groups()
    h = float(h_val)
    sv = float(s_val) / 100
    lv = float(l_val) / 100
    if h > 360 or sv > 1 or lv > 1:
        return None
    r, g, b = hsl_to_rgb(h, sv, lv)
    return Color(r=r, g=g, b=b, a=parse_alpha(a_val))


# OKLCH -----------------------------------------------------------

def parse_oklch(s: str) -> Optional[Color]:
    """Parse oklch() color string to Color."""
    m = OKLCH_RE.fullmatch(s)
    if not m:
        return None
    L_val, C_val, h_val, a_val = m.groups()
    L, C, h = parse_float(L_val), parse_float(C_val), parse_float(h_val)
    if L is None or C is None or h is None:
        return None
    L = L / 100
    if L > 1 or h > 360:
        return None
    r, g, b = oklch_to_rgb(L, C, h)
    return Color(r=r, g=g, b=b, a=parse_alpha(a_val))


# Top-level parse -------------------------------------------------

PARSERS: List[Callable[[str], Optional[Color]]] = [
    parse_hex,
    parse_rgb,
    parse_hsl,
    parse_oklch,
]


def try_parse(input_str: str) -> Optional[Color]:
    """Parse any supported color string, or None."""
    s = input_str.strip()
    for parser in PARSERS:
        color = parser(s)
        if color is not None:
            return color
    return None


def parse(input_str: str) -> Color:
    """Parse any supported color string; raise ColorParseError if nothing matches."""
    color = try_parse(input_str)
    if color is None:
        s = input_str.strip()
        logger.debug("No color notation matched %r", s)
        raise ColorParseError(s)
    return color
