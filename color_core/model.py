"""
The Color value type.

A Color is an immutable 8-bit RGB triple plus a unit alpha. Callers may attach
an opaque ``label`` and ``id``; nothing in this package interprets them.

>>> c = Color.new(255, 87, 51)
>>> c.to_hex()
'#FF5733'
>>> c.with_alpha(0.5).to_rgb()
'rgba(255, 87, 51, 0.50)'
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from . import serializer
from .spaces import FloatTriple, clamp, hsl_to_rgb, normalize_hue, oklch_to_rgb, rgb_to_hsl, rgb_to_oklch


class Color(BaseModel):
    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255)
    g: int = Field(ge=0, le=255)
    b: int = Field(ge=0, le=255)
    a: float = 1.0
    label: str = ""
    id: Optional[int] = None

    @field_validator("a")
    @classmethod
    def _clamp_alpha(cls, v: float) -> float:
        return clamp(v, 0.0, 1.0)

    # Constructors ----------------------------------------------------

    @classmethod
    def new(cls, r: int, g: int, b: int, a: float = 1.0, label: str = "") -> "Color":
        return cls(r=r, g=g, b=b, a=a, label=label)

    @classmethod
    def from_hsl(cls, h: float, s: float, l: float, a: float = 1.0, label: str = "") -> "Color":
        """Build from HSL slider coordinates (h deg, s/l in [0,1])."""
        r, g, b = hsl_to_rgb(normalize_hue(h), s, l)
        return cls(r=r, g=g, b=b, a=a, label=label)

    @classmethod
    def from_oklch(cls, L: float, C: float, H: float, a: float = 1.0, label: str = "") -> "Color":
        """Build from OKLCH slider coordinates (L in [0,1], C >= 0, H deg)."""
        r, g, b = oklch_to_rgb(L, C, H)
        return cls(r=r, g=g, b=b, a=a, label=label)

    # Derived coordinates ---------------------------------------------

    @property
    def hsl(self) -> FloatTriple:
        return rgb_to_hsl(self.r, self.g, self.b)

    @property
    def oklch(self) -> FloatTriple:
        return rgb_to_oklch(self.r, self.g, self.b)

    # Replacement values ----------------------------------------------

    def with_alpha(self, a: float) -> "Color":
        return self.model_copy(update={"a": clamp(float(a), 0.0, 1.0)})

    def with_label(self, label: str) -> "Color":
        return self.model_copy(update={"label": label})

    def default_label(self) -> str:
        """Generate a default label from the hex value."""
        return self.to_hex()

    def with_default_label(self) -> "Color":
        """Return a copy labelled with its hex value if it has no label."""
        if self.label:
            return self
        return self.with_label(self.default_label())

    def matches_filter(self, text: str) -> bool:
        """Case-insensitive match against label, hex and rgb forms."""
        if not text:
            return True
        needle = text.lower()
        return (
            needle in self.label.lower()
            or needle in self.to_hex().lower()
            or needle in self.to_rgb().lower()
        )

    # Serialization ---------------------------------------------------

    def to_hex(self) -> str:
        return serializer.to_hex(self)

    def to_rgb(self) -> str:
        return serializer.to_rgb(self)

    def to_hsl(self) -> str:
        return serializer.to_hsl(self)

    def to_oklch(self) -> str:
        return serializer.to_oklch(self)

    def to_copyable_string(self) -> str:
        return self.to_hex()

    def __str__(self) -> str:
        return self.to_hex()
