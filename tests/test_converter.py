"""Unit tests for XYZ hub color conversion."""

import itertools

import pytest

from pipeline.converter import (
    convert_to_all_formats,
    rgb_to_cmyk,
    rgb_to_hsl,
    rgb_to_xyz,
    xyz_to_oklch,
    xyz_to_rgb,
)
from pipeline.errors import UnsupportedColorTypeError
from pipeline.parser import parse_token
from schemas.colors import COLOR_TYPES, ParsedColor, RGBColor, XYZColor


def convert(make_token, token_type, raw):
    return convert_to_all_formats(parse_token(make_token(token_type, raw)))


def rgb_tuple(color):
    return (color.r, color.g, color.b)


class TestRgbXyz:
    """Tests for the sRGB <-> XYZ legs."""

    def test_white(self):
        """Test white maps to the D65 white point."""
        xyz = rgb_to_xyz(RGBColor(r=255, g=255, b=255))
        assert xyz.x == pytest.approx(95.047, abs=1e-3)
        assert xyz.y == pytest.approx(100.0, abs=1e-3)
        assert xyz.z == pytest.approx(108.883, abs=1e-3)

    def test_three_decimals(self):
        """Test XYZ components are rounded to 3 decimals."""
        xyz = rgb_to_xyz(RGBColor(r=12, g=200, b=77))
        for v in (xyz.x, xyz.y, xyz.z):
            assert round(v, 3) == v

    def test_round_trip_within_one(self):
        """Test rgb -> xyz -> rgb stays within 1 per channel."""
        steps = range(0, 256, 15)
        for r, g, b in itertools.product(steps, steps, steps):
            back = xyz_to_rgb(rgb_to_xyz(RGBColor(r=r, g=g, b=b)))
            assert abs(back.r - r) <= 1
            assert abs(back.g - g) <= 1
            assert abs(back.b - b) <= 1

    def test_out_of_gamut_clamped(self):
        """Test XYZ outside sRGB clamps into 0-255."""
        rgb = xyz_to_rgb(XYZColor(x=150, y=-10, z=200))
        for v in rgb_tuple(rgb):
            assert 0 <= v <= 255


class TestRgbTargets:
    """Tests for rgb -> hsl/cmyk."""

    def test_hsl(self):
        """Test whole-number HSL."""
        hsl = rgb_to_hsl(RGBColor(r=255, g=107, b=107))
        assert (hsl.h, hsl.s, hsl.l) == (0, 100, 71)

    def test_hsl_hue_stays_below_360(self):
        """Test a hue rounding up to 360 wraps to 0."""
        assert rgb_to_hsl(RGBColor(r=255, g=0, b=1)).h == 0

    def test_cmyk_black(self):
        """Test pure black avoids dividing by zero."""
        cmyk = rgb_to_cmyk(RGBColor(r=0, g=0, b=0))
        assert (cmyk.c, cmyk.m, cmyk.y, cmyk.k) == (0, 0, 0, 100)

    def test_cmyk(self):
        """Test whole-percent CMYK."""
        cmyk = rgb_to_cmyk(RGBColor(r=255, g=128, b=0))
        assert (cmyk.c, cmyk.m, cmyk.y, cmyk.k) == (0, 50, 100, 0)


class TestConvertToAllFormats:
    """Tests for convert_to_all_formats()."""

    def test_rgb_to_hex(self, make_token):
        """Test rgb(255, 107, 107) becomes #ff6b6b."""
        colors = convert(make_token, "rgb", "rgb(255, 107, 107)")
        assert colors["hex"].value == "#ff6b6b"
        assert rgb_tuple(colors["rgb"]) == (255, 107, 107)

    def test_pure_red_from_hsl(self, make_token):
        """Test hsl(0, 100%, 50%) converts to exact red."""
        colors = convert(make_token, "hsl", "hsl(0, 100%, 50%)")
        assert rgb_tuple(colors["rgb"]) == (255, 0, 0)
        assert colors["hex"].value == "#ff0000"
        assert (colors["hsl"].h, colors["hsl"].s, colors["hsl"].l) == (0, 100, 50)
        cmyk = colors["cmyk"]
        assert (cmyk.c, cmyk.m, cmyk.y, cmyk.k) == (0, 100, 100, 0)

    def test_red_oklch(self, make_token):
        """Test red lands on its known OKLCH coordinates."""
        oklch = convert(make_token, "hex", "#ff0000")["oklch"]
        assert oklch.l == pytest.approx(0.628, abs=5e-3)
        assert oklch.c == pytest.approx(0.258, abs=5e-3)
        assert oklch.h == pytest.approx(29.2, abs=1.0)

    def test_oklch_input(self, make_token):
        """Test OKLCH input round-trips through XYZ."""
        assert rgb_tuple(convert(make_token, "oklch", "oklch(1 0 0)")["rgb"]) == (255, 255, 255)
        assert rgb_tuple(convert(make_token, "oklch", "oklch(0 0 0)")["rgb"]) == (0, 0, 0)
        red = convert(make_token, "oklch", "oklch(62.8% 0.2577 29.23deg)")["rgb"]
        assert red.r >= 253 and red.g <= 2 and red.b <= 2

    def test_cmyk_input(self, make_token):
        """Test CMYK input."""
        colors = convert(make_token, "cmyk", "cmyk(0%, 100%, 100%, 0%)")
        assert colors["hex"].value == "#ff0000"

    def test_white_oklch(self, make_token):
        """Test white has full lightness and no chroma."""
        oklch = convert(make_token, "hex", "#fff")["oklch"]
        assert oklch.l == pytest.approx(1.0, abs=1e-3)
        assert oklch.c == pytest.approx(0.0, abs=1e-3)

    def test_oklch_hue_in_range(self):
        """Test hues are normalized into [0, 360)."""
        blue = xyz_to_oklch(rgb_to_xyz(RGBColor(r=0, g=0, b=255)))
        assert 0 <= blue.h < 360
        assert blue.h == pytest.approx(264.05, abs=1.0)

    @pytest.mark.parametrize("token_type, raw", [
        ("hex", "#123456"),
        ("rgb", "rgb(0 0 0)"),
        ("hsl", "hsl(200 50% 50%)"),
        ("cmyk", "cmyk(0.1, 0.2, 0.3, 0.4)"),
        ("oklch", "oklch(0.7 0.15 140)"),
        ("css-variable", "--x: 20 14.3% 4.1%"),
    ])
    def test_exactly_five_formats(self, make_token, token_type, raw):
        """Test every input produces all five color types."""
        colors = convert(make_token, token_type, raw)
        assert set(colors) == set(COLOR_TYPES)
        for color_type, color in colors.items():
            assert color.kind == color_type

    def test_alpha_on_rgb_and_hsl_only(self, make_token):
        """Test alpha below 1 is carried on rgb and hsl only."""
        colors = convert(make_token, "rgb", "rgba(255, 0, 0, 0.5)")
        assert colors["rgb"].a == 0.5
        assert colors["hsl"].a == 0.5
        assert not hasattr(colors["hex"], "a")
        assert not hasattr(colors["cmyk"], "a")
        assert not hasattr(colors["oklch"], "a")

    def test_opaque_has_no_alpha(self, make_token):
        """Test fully opaque colors carry no alpha."""
        colors = convert(make_token, "hex", "#ff0000")
        assert colors["rgb"].a is None
        assert colors["hsl"].a is None

    def test_unsupported_color_type(self):
        """Test an unknown color type raises."""
        parsed = ParsedColor.model_construct(
            css_variable=None, color_type="lab", color=RGBColor(r=0, g=0, b=0), alpha=1.0
        )
        with pytest.raises(UnsupportedColorTypeError):
            convert_to_all_formats(parsed)

    def test_unsupported_is_value_error(self):
        """Test the error can be caught as ValueError."""
        assert issubclass(UnsupportedColorTypeError, ValueError)
