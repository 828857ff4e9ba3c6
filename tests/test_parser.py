import pytest

from color_core import ColorParseError, parse, try_parse
from color_core.parser import parse_hex, parse_hsl, parse_oklch, parse_rgb


def channels(c):
    return c.r, c.g, c.b

# HEX -------------------------------------------------------------

def test_parse_hex():
    c = parse("#FF5733")
    assert channels(c) == (255, 87, 51)
    assert c.a == 1.0

def test_parse_hex_short():
    c = parse("#F53")
    assert channels(c) == (255, 85, 51)
    assert c.a == 1.0

def test_parse_hex_short_with_alpha():
    c = parse("#F538")
    assert channels(c) == (255, 85, 51)
    assert abs(c.a - 0x88 / 255) < 1e-9

def test_parse_hex_with_alpha():
    c = parse("#FF573380")
    assert channels(c) == (255, 87, 51)
    assert abs(c.a - 128 / 255) < 0.01

def test_parse_hex_without_hash_and_lowercase():
    assert channels(parse("ff5733")) == (255, 87, 51)
    assert channels(parse("#abc")) == (0xAA, 0xBB, 0xCC)

def test_parse_hex_rejects_bad_lengths():
    for s in ("#12", "#12345", "#1234567", "#123456789", "#GGGGGG"):
        assert parse_hex(s) is None

# RGB -------------------------------------------------------------

def test_parse_rgb():
    c = parse("rgb(255, 87, 51)")
    assert channels(c) == (255, 87, 51)
    assert c.a == 1.0

def test_parse_rgba():
    c = parse("rgba(255, 87, 51, 0.5)")
    assert c.r == 255
    assert c.a == 0.5

def test_parse_rgb_is_case_insensitive_and_spacing_tolerant():
    assert channels(parse("RGB( 1 ,2,  3 )")) == (1, 2, 3)

def test_parse_rgb_channel_overflow_falls_through():
    assert parse_rgb("rgb(256, 0, 0)") is None
    with pytest.raises(ColorParseError):
        parse("rgb(999, 0, 0)")

def test_parse_rgb_malformed_alpha_is_opaque():
    c = parse("rgba(255, 0, 0, 1.2.3)")
    assert channels(c) == (255, 0, 0)
    assert c.a == 1.0

def test_parse_rgb_alpha_is_clamped():
    assert parse("rgba(0, 0, 0, 7)").a == 1.0

# HSL -------------------------------------------------------------

def test_parse_hsl():
    c = parse("hsl(11, 100%, 60%)")
    # Should be approximately #FF5733
    assert c.r > 250
    assert channels(c) == (255, 88, 51)

def test_parse_hsla():
    c = parse("hsla(0, 100%, 50%, 0.25)")
    assert channels(c) == (255, 0, 0)
    assert c.a == 0.25

def test_parse_hsl_without_percent_signs():
    assert channels(parse("hsl(0, 100, 50)")) == (255, 0, 0)

def test_parse_hsl_out_of_range_falls_through():
    assert parse_hsl("hsl(361, 50%, 50%)") is None
    assert parse_hsl("hsl(120, 101%, 50%)") is None
    assert parse_hsl("hsl(120, 50%, 100.5%)") is None
    with pytest.raises(ColorParseError):
        parse("hsl(400, 50%, 50%)")

def test_parse_hsl_malformed_alpha_is_opaque():
    assert parse("hsla(0, 100%, 50%, ..)").a == 1.0

# OKLCH -----------------------------------------------------------

def test_parse_oklch():
    c = parse("oklch(70% 0.15 30)")
    assert c.a == 1.0
    out = c.to_oklch()
    assert out.startswith("oklch(")
    assert "/" not in out

def test_parse_oklch_with_alpha():
    assert parse("oklch(70% 0.15 30 / 0.5)").a == 0.5

def test_parse_oklch_lightness_without_percent_is_still_percent():
    assert channels(parse("oklch(100 0 0)")) == (255, 255, 255)

def test_parse_oklch_chroma_is_unbounded():
    c = parse_oklch("oklch(60% 2.5 120)")
    assert c is not None

def test_parse_oklch_out_of_range_falls_through():
    assert parse_oklch("oklch(101% 0.1 30)") is None
    assert parse_oklch("oklch(50% 0.1 361)") is None
    assert parse_oklch("oklch(50% 0.1 3..0)") is None

def test_parse_oklch_malformed_alpha_is_opaque():
    assert parse("OKLCH(50% 0.1 30 / 0.5.5)").a == 1.0

# Chain -----------------------------------------------------------

def test_parse_trims_whitespace():
    assert channels(parse("  \n#FF5733\t ")) == (255, 87, 51)

def test_parse_invalid():
    with pytest.raises(ColorParseError) as exc_info:
        parse("  not a color ")
    assert exc_info.value.input == "not a color"
    assert str(exc_info.value) == "Invalid color format: 'not a color'"

def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse("")

def test_try_parse():
    assert try_parse("nope") is None
    assert try_parse("#000").r == 0

def test_parse_leaves_label_empty():
    c = parse("#FF5733")
    assert c.label == ""
    assert c.id is None

def test_parse_rejects_non_ascii_digits():
    assert try_parse("rgb(２５５, 0, 0)") is None
    assert try_parse("hsl(١٢٠, 50%, 50%)") is None
    assert try_parse("oklch(７０% 0.15 30)") is None
