"""
Find color literals embedded in free-form text.

Each notation gets its own pass, so results are grouped by notation
(hex, then rgb, then hsl, then oklch) rather than by position. Every hit is
re-parsed with the regular parser; hits that do not parse are dropped.
"""

import re
from typing import List, Tuple

from .model import Color
from .parser import try_parse

FINDERS: Tuple[re.Pattern, ...] = (
    re.compile(r"#[0-9a-f]{3,8}\b", re.IGNORECASE | re.ASCII),
    re.compile(r"rgba?\s*\([^)]+\)", re.IGNORECASE | re.ASCII),
    re.compile(r"hsla?\s*\([^)]+\)", re.IGNORECASE | re.ASCII),
    re.compile(r"oklch\s*\([^)]+\)", re.IGNORECASE | re.ASCII),
)


def extract_colors_from_text(text: str) -> List[Color]:
    """Extract all color values from a text string."""
    colors: List[Color] = []
    for finder in FINDERS:
        for m in finder.finditer(text):
            color = try_parse(m.group(0))
            if color is not None:
                colors.append(color)
    return colors
