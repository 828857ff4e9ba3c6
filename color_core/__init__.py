"""
Color value type and conversions between hex, rgb(), hsl() and oklch() notations.
"""

from .errors import ColorParseError
from .model import Color
from .parser import parse, try_parse
from .scanner import extract_colors_from_text
from .serializer import TargetFormat, serialize, to_hex, to_hsl, to_oklch, to_rgb
from .spaces import hsl_to_rgb, oklch_to_rgb, rgb_to_hsl, rgb_to_oklch

__all__ = [
    "Color",
    "ColorParseError",
    "TargetFormat",
    "parse",
    "try_parse",
    "extract_colors_from_text",
    "serialize",
    "to_hex",
    "to_rgb",
    "to_hsl",
    "to_oklch",
    "hsl_to_rgb",
    "rgb_to_hsl",
    "oklch_to_rgb",
    "rgb_to_oklch",
]
