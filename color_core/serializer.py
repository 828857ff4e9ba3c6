"""
Canonical string forms of a Color.
Opaque colors use the short notation (#RRGGBB, rgb(), hsl(), oklch() without alpha);
anything else carries its alpha.
"""

from typing import TYPE_CHECKING, Callable, Dict, Literal

from .spaces import EPSILON, rgb_to_hsl, rgb_to_oklch, round_half_up

if TYPE_CHECKING:
    from .model import Color

TargetFormat = Literal["hex", "rgb", "hsl", "oklch"]


def is_opaque(color: "Color") -> bool:
    return abs(color.a - 1.0) < EPSILON


def to_hex(color: "Color") -> str:
    """Convert to #RRGGBB, or #RRGGBBAA when translucent."""
    base = f"#{color.r:02X}{color.g:02X}{color.b:02X}"
    if is_opaque(color):
        return base
    return base + f"{round_half_up(color.a * 255):02X}"


def to_rgb(color: "Color") -> str:
    """Convert to rgb(r, g, b) or rgba(r, g, b, a)."""
    if is_opaque(color):
        return f"rgb({color.r}, {color.g}, {color.b})"
    return f"rgba({color.r}, {color.g}, {color.b}, {color.a:.2f})"


def to_hsl(color: "Color") -> str:
    """Convert to hsl(h, s%, l%) or hsla(h, s%, l%, a)."""
    h, s, l = rgb_to_hsl(color.r, color.g, color.b)
    body = f"{round_half_up(h)}, {round_half_up(s * 100)}%, {round_half_up(l * 100)}%"
    if is_opaque(color):
        return f"hsl({body})"
    return f"hsla({body}, {color.a:.2f})"


def to_oklch(color: "Color") -> str:
    """Convert to oklch(L% C H), with a trailing / A when translucent."""
    L, C, H = rgb_to_oklch(color.r, color.g, color.b)
    body = f"{L * 100:.1f}% {C:.3f} {H:.0f}"
    if is_opaque(color):
        return f"oklch({body})"
    return f"oklch({body} / {color.a:.2f})"


SERIALIZERS: Dict[str, Callable[["Color"], str]] = {
    "hex": to_hex,
    "rgb": to_rgb,
    "hsl": to_hsl,
    "oklch": to_oklch,
}


def serialize(color: "Color", target: TargetFormat) -> str:
    """Render a color in the requested notation."""
    try:
        fn = SERIALIZERS[target]
    except KeyError:
        raise ValueError(f"Unknown color format: {target!r}") from None
    return fn(color)
